"""Opt-out template router composition."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from selferase_api.catalog import BrokerDirectoryPort


def api_create_templates_router(directory: BrokerDirectoryPort) -> APIRouter:
    """Create router serving opt-out template text.

    Args:
        directory: Catalog-backed broker directory.

    Returns:
        APIRouter: Router exposing `/api/templates/{template_id}`.

    Raises:
        ValueError: Raised when directory is invalid.
    """

    if directory is None:
        raise ValueError("directory must not be None")

    router = APIRouter(prefix="/api/templates", tags=["templates"])

    @router.get("/")
    def api_template_missing_id() -> JSONResponse:
        return JSONResponse(content={"error": "Template ID required"}, status_code=status.HTTP_400_BAD_REQUEST)

    @router.get("/{template_id}")
    def api_template_detail(template_id: str) -> Response:
        """Return one template as plain text.

        Args:
            template_id: Template identifier path segment.

        Returns:
            Response: `text/plain` template body, or HTTP 404 error payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        template_text = directory.directory_get_template(template_id)
        if template_text is None:
            return JSONResponse(content={"error": "Template not found"}, status_code=status.HTTP_404_NOT_FOUND)
        return PlainTextResponse(content=template_text, status_code=status.HTTP_200_OK)

    return router


__all__ = ["api_create_templates_router"]
