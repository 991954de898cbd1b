"""Pure mapping from probe outcomes to health classifications."""

from __future__ import annotations

from typing import Final

from selferase_api.domain import (
    HEALTH_STATUS_DEGRADED,
    HEALTH_STATUS_ERROR,
    HEALTH_STATUS_HEALTHY,
    HEALTH_STATUS_UNKNOWN,
    PROBE_KIND_RESPONDED,
    PROBE_KIND_TIMED_OUT,
    PROBE_KIND_TRANSPORT_ERROR,
    HealthClassification,
    ProbeOutcome,
)

MESSAGE_ACCESSIBLE: Final[str] = "Broker site is accessible"
MESSAGE_DEGRADED: Final[str] = "Broker site may be experiencing issues"
MESSAGE_CHECK_FAILED: Final[str] = "Failed to check broker health"
MESSAGE_NOT_FOUND: Final[str] = "Broker not found"
ERROR_DETAIL_TIMED_OUT: Final[str] = "timed out"


def health_classify_outcome(outcome: ProbeOutcome) -> HealthClassification:
    """Classify one probe outcome into a health status tuple.

    Status codes in [200, 400) are healthy, every other received code is
    degraded, and both timeout and transport failure are errors.

    Args:
        outcome: Probe outcome.

    Returns:
        HealthClassification: Exactly one classification per outcome.

    Raises:
        ValueError: Raised when outcome kind is not recognized.
    """

    if outcome.kind == PROBE_KIND_RESPONDED:
        status_code = int(outcome.status_code if outcome.status_code is not None else 0)
        if 200 <= status_code < 400:
            return HealthClassification(
                status=HEALTH_STATUS_HEALTHY,
                message=MESSAGE_ACCESSIBLE,
                http_status=status_code,
            )
        return HealthClassification(
            status=HEALTH_STATUS_DEGRADED,
            message=MESSAGE_DEGRADED,
            http_status=status_code,
        )

    if outcome.kind == PROBE_KIND_TIMED_OUT:
        return HealthClassification(
            status=HEALTH_STATUS_ERROR,
            message=MESSAGE_CHECK_FAILED,
            error_detail=ERROR_DETAIL_TIMED_OUT,
        )

    if outcome.kind == PROBE_KIND_TRANSPORT_ERROR:
        return HealthClassification(
            status=HEALTH_STATUS_ERROR,
            message=MESSAGE_CHECK_FAILED,
            error_detail=outcome.detail or "Unknown error",
        )

    raise ValueError(f"unsupported probe outcome kind={outcome.kind}")


def health_classify_unknown_broker() -> HealthClassification:
    """Return the classification used when the registry has no endpoint.

    Returns:
        HealthClassification: `unknown` classification with no probe fields.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return HealthClassification(status=HEALTH_STATUS_UNKNOWN, message=MESSAGE_NOT_FOUND)
