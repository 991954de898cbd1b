"""Root metadata router describing the public API surface."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from selferase_api import __version__
from selferase_api.config import AppSettings


def api_create_metadata_router(settings: AppSettings) -> APIRouter:
    """Create router exposing service metadata at `/` and `/api`.

    Args:
        settings: Validated application settings used for runtime metadata.

    Returns:
        APIRouter: Router exposing root metadata endpoints.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["foundation"])

    @router.get("/")
    @router.get("/api")
    def api_root_metadata() -> JSONResponse:
        """Return service metadata and endpoint map.

        Returns:
            JSONResponse: Static metadata payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = {
            "name": "SelfErase Broker API",
            "version": __version__,
            "description": "Stateless API for public broker data",
            "privacy": "NO USER PII IS PROCESSED OR STORED",
            "environment": settings.environment_name,
            "documentation": "https://github.com/OWASP-BLT/SelfErase",
            "endpoints": {
                "brokers": "/api/brokers",
                "broker_detail": "/api/brokers/:id",
                "health_check": "/health-check/:id",
                "template": "/api/templates/:id",
                "categories": "/api/categories",
            },
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


__all__ = ["api_create_metadata_router"]
