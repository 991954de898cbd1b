"""Broker health-check router composition."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from selferase_api.domain import domain_health_record_to_payload
from selferase_api.health import BrokerHealthService


def api_create_health_router(health_service: BrokerHealthService) -> APIRouter:
    """Create router exposing per-broker health checks.

    Unknown brokers are answered with HTTP 200 and an `unknown` record;
    only a missing identifier is rejected with HTTP 400.

    Args:
        health_service: Broker health pipeline.

    Returns:
        APIRouter: Router exposing `/health-check/{broker_id}` and `/api/health/{broker_id}`.

    Raises:
        ValueError: Raised when health_service is invalid.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health-check")
    @router.get("/health-check/")
    @router.get("/api/health/")
    def api_health_check_missing_broker() -> JSONResponse:
        """Reject health checks without a broker identifier.

        Returns:
            JSONResponse: HTTP 400 error payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return api_broker_id_required_response()

    @router.get("/health-check/{broker_id}")
    @router.get("/api/health/{broker_id}")
    async def api_health_check_broker(broker_id: str) -> JSONResponse:
        """Probe one broker endpoint and return its health record.

        Args:
            broker_id: Broker identifier path segment.

        Returns:
            JSONResponse: Serialized health record, or HTTP 400 for a blank identifier.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        normalized_broker_id = broker_id.strip()
        if not normalized_broker_id:
            return api_broker_id_required_response()

        record = await health_service.health_check_broker(normalized_broker_id)
        return JSONResponse(content=domain_health_record_to_payload(record), status_code=status.HTTP_200_OK)

    return router


def api_broker_id_required_response() -> JSONResponse:
    return JSONResponse(content={"error": "Broker ID required"}, status_code=status.HTTP_400_BAD_REQUEST)


__all__ = ["api_create_health_router"]
