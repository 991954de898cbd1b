"""Health-probing pipeline: classification, record composition and orchestration."""

from .classifier import (
    ERROR_DETAIL_TIMED_OUT,
    MESSAGE_ACCESSIBLE,
    MESSAGE_CHECK_FAILED,
    MESSAGE_DEGRADED,
    MESSAGE_NOT_FOUND,
    health_classify_outcome,
    health_classify_unknown_broker,
)
from .composer import health_compose_record, health_utc_now
from .service import BrokerHealthService

__all__ = [
    "BrokerHealthService",
    "ERROR_DETAIL_TIMED_OUT",
    "MESSAGE_ACCESSIBLE",
    "MESSAGE_CHECK_FAILED",
    "MESSAGE_DEGRADED",
    "MESSAGE_NOT_FOUND",
    "health_classify_outcome",
    "health_classify_unknown_broker",
    "health_compose_record",
    "health_utc_now",
]
