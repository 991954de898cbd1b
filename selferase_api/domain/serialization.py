"""JSON payload mapping for health records."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from .models import HealthRecord


def domain_health_record_to_payload(record: HealthRecord) -> dict[str, object]:
    """Serialize one health record to its JSON payload.

    Optional fields are omitted when absent, never emitted as null.

    Args:
        record: Health record to serialize.

    Returns:
        dict[str, object]: JSON-serializable payload with camelCase keys.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    payload: dict[str, object] = {
        "brokerId": record.broker_id,
        "status": record.status,
    }
    if record.http_status is not None:
        payload["httpStatus"] = record.http_status
    payload["message"] = record.message
    if record.error_detail is not None:
        payload["errorDetail"] = record.error_detail
    payload["checkedAt"] = record.checked_at_utc.isoformat()
    if record.url is not None:
        payload["url"] = record.url
    return payload


def domain_health_record_from_payload(payload: Mapping[str, Any]) -> HealthRecord:
    """Deserialize one health record from its JSON payload.

    Args:
        payload: Mapping produced by `domain_health_record_to_payload`.

    Returns:
        HealthRecord: Reconstructed health record.

    Raises:
        ValueError: Raised when required keys are missing or checkedAt is not ISO-8601.
    """

    missing_keys = [key for key in ("brokerId", "status", "message", "checkedAt") if key not in payload]
    if missing_keys:
        raise ValueError(f"health record payload missing keys: {', '.join(missing_keys)}")

    http_status = payload.get("httpStatus")
    return HealthRecord(
        broker_id=str(payload["brokerId"]),
        status=str(payload["status"]),
        message=str(payload["message"]),
        checked_at_utc=datetime.fromisoformat(str(payload["checkedAt"])),
        http_status=None if http_status is None else int(http_status),
        url=payload.get("url"),
        error_detail=payload.get("errorDetail"),
    )
