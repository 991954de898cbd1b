"""Broker directory and category router composition."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from selferase_api.catalog import BrokerDirectoryPort, catalog_serialize_broker_profile


def api_create_brokers_router(directory: BrokerDirectoryPort) -> APIRouter:
    """Create router exposing public broker directory reads.

    Args:
        directory: Catalog-backed broker directory.

    Returns:
        APIRouter: Router exposing `/api/brokers`, `/api/brokers/{broker_id}` and `/api/categories`.

    Raises:
        ValueError: Raised when directory is invalid.
    """

    if directory is None:
        raise ValueError("directory must not be None")

    router = APIRouter(prefix="/api", tags=["brokers"])

    @router.get("/brokers")
    def api_broker_list() -> JSONResponse:
        """List all broker profiles in catalog order.

        Returns:
            JSONResponse: JSON array of broker profiles.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = [catalog_serialize_broker_profile(profile) for profile in directory.directory_list_brokers()]
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/brokers/{broker_id}")
    def api_broker_detail(broker_id: str) -> JSONResponse:
        """Return one broker profile.

        Args:
            broker_id: Broker identifier path segment.

        Returns:
            JSONResponse: Broker profile, or HTTP 404 error payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        profile = directory.directory_get_broker(broker_id)
        if profile is None:
            return JSONResponse(content={"error": "Broker not found"}, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=catalog_serialize_broker_profile(profile), status_code=status.HTTP_200_OK)

    @router.get("/categories")
    def api_category_list() -> JSONResponse:
        return JSONResponse(content=list(directory.directory_list_categories()), status_code=status.HTTP_200_OK)

    return router


__all__ = ["api_create_brokers_router"]
