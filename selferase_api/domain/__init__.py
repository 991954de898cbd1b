"""Domain models used across application layer boundaries."""

from .models import (
    HEALTH_STATUS_DEGRADED,
    HEALTH_STATUS_ERROR,
    HEALTH_STATUS_HEALTHY,
    HEALTH_STATUS_UNKNOWN,
    PROBE_KIND_RESPONDED,
    PROBE_KIND_TIMED_OUT,
    PROBE_KIND_TRANSPORT_ERROR,
    BrokerEndpoint,
    HealthClassification,
    HealthRecord,
    ProbeOutcome,
)
from .serialization import domain_health_record_from_payload, domain_health_record_to_payload

__all__ = [
    "HEALTH_STATUS_DEGRADED",
    "HEALTH_STATUS_ERROR",
    "HEALTH_STATUS_HEALTHY",
    "HEALTH_STATUS_UNKNOWN",
    "PROBE_KIND_RESPONDED",
    "PROBE_KIND_TIMED_OUT",
    "PROBE_KIND_TRANSPORT_ERROR",
    "BrokerEndpoint",
    "HealthClassification",
    "HealthRecord",
    "ProbeOutcome",
    "domain_health_record_from_payload",
    "domain_health_record_to_payload",
]
