"""Response header middleware applying CORS and security headers to every response."""

from __future__ import annotations

import logging

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "no-referrer",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Answer CORS preflight requests and stamp headers on every response.

    Unhandled route faults are logged and converted to a JSON 500 response so
    that error responses carry the same headers as successful ones.
    """

    def __init__(self, app: ASGIApp, cors_allow_origin: str = "*", cors_max_age_seconds: int = 86400):
        super().__init__(app)
        self._headers = {
            "Access-Control-Allow-Origin": cors_allow_origin,
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Max-Age": str(cors_max_age_seconds),
            **SECURITY_HEADERS,
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return self._apply_headers(Response(status_code=status.HTTP_200_OK))

        try:
            response = await call_next(request)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("unhandled request failure method=%s path=%s", request.method, request.url.path)
            response = JSONResponse(
                content={"error": "Internal server error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return self._apply_headers(response)

    def _apply_headers(self, response: Response) -> Response:
        for header_name, header_value in self._headers.items():
            response.headers[header_name] = header_value
        return response
