"""Typed domain models shared across runtime layers.

This module provides immutable data contracts for the broker health pipeline:
registry endpoints, probe outcomes, classifier results and the health record
returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

HEALTH_STATUS_HEALTHY: Final[str] = "healthy"
HEALTH_STATUS_DEGRADED: Final[str] = "degraded"
HEALTH_STATUS_ERROR: Final[str] = "error"
HEALTH_STATUS_UNKNOWN: Final[str] = "unknown"

PROBE_KIND_RESPONDED: Final[str] = "responded"
PROBE_KIND_TIMED_OUT: Final[str] = "timed_out"
PROBE_KIND_TRANSPORT_ERROR: Final[str] = "transport_error"


@dataclass(frozen=True)
class BrokerEndpoint:
    """Canonical probe target for one broker.

    Attributes:
        broker_id: Opaque broker identifier key.
        url: Absolute HTTPS URL of the broker opt-out endpoint.
    """

    broker_id: str
    url: str


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one reachability probe attempt.

    Exactly one of the three kinds is carried. `status_code` is set only for
    `responded`, `detail` only for `transport_error`.

    Attributes:
        kind: Outcome kind (`responded`, `timed_out`, `transport_error`).
        status_code: HTTP status code received before the deadline.
        detail: Opaque transport failure description.
    """

    kind: str
    status_code: int | None = None
    detail: str | None = None

    @classmethod
    def responded(cls, status_code: int) -> ProbeOutcome:
        """Build outcome for a response received before the deadline.

        Args:
            status_code: HTTP status code of the response.

        Returns:
            ProbeOutcome: Responded outcome.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return cls(kind=PROBE_KIND_RESPONDED, status_code=int(status_code))

    @classmethod
    def timed_out(cls) -> ProbeOutcome:
        """Build outcome for a probe abandoned at its deadline.

        Returns:
            ProbeOutcome: Timed-out outcome.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return cls(kind=PROBE_KIND_TIMED_OUT)

    @classmethod
    def transport_error(cls, detail: str) -> ProbeOutcome:
        """Build outcome for a probe that failed before any response.

        Args:
            detail: Transport failure description.

        Returns:
            ProbeOutcome: Transport-error outcome with non-empty detail.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        normalized_detail = (detail or "").strip() or "Unknown error"
        return cls(kind=PROBE_KIND_TRANSPORT_ERROR, detail=normalized_detail)


@dataclass(frozen=True)
class HealthClassification:
    """Classifier output merged into a health record.

    Attributes:
        status: Health status value.
        message: Human-readable summary.
        http_status: Response status code when a response was received.
        error_detail: Failure detail when status is `error`.
    """

    status: str
    message: str
    http_status: int | None = None
    error_detail: str | None = None


@dataclass(frozen=True)
class HealthRecord:
    """Externally visible health-check result for one broker.

    Attributes:
        broker_id: Requested broker identifier.
        status: One of `healthy`, `degraded`, `error`, `unknown`.
        message: Human-readable summary.
        checked_at_utc: Instant the check completed.
        http_status: Response status code for `healthy` and `degraded`.
        url: Probed URL, absent only for `unknown`.
        error_detail: Failure detail for `error`.
    """

    broker_id: str
    status: str
    message: str
    checked_at_utc: datetime
    http_status: int | None = None
    url: str | None = None
    error_detail: str | None = None
