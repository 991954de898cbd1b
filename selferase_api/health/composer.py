"""Health record assembly from classifier output."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from selferase_api.domain import HealthClassification, HealthRecord


def health_utc_now() -> datetime:
    return datetime.now(timezone.utc)


def health_compose_record(
    broker_id: str,
    classification: HealthClassification,
    url: str | None = None,
    now_provider: Callable[[], datetime] = health_utc_now,
) -> HealthRecord:
    """Stamp and assemble one health record.

    Args:
        broker_id: Requested broker identifier.
        classification: Classifier output to merge.
        url: Probed URL, omitted for unknown brokers.
        now_provider: Clock returning the completion instant.

    Returns:
        HealthRecord: Fresh immutable health record.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return HealthRecord(
        broker_id=broker_id,
        status=classification.status,
        message=classification.message,
        checked_at_utc=now_provider(),
        http_status=classification.http_status,
        url=url,
        error_detail=classification.error_detail,
    )
