"""Regression tests for probe outcome classification."""

from __future__ import annotations

from selferase_api.domain import ProbeOutcome
from selferase_api.health import (
    ERROR_DETAIL_TIMED_OUT,
    MESSAGE_ACCESSIBLE,
    MESSAGE_CHECK_FAILED,
    MESSAGE_DEGRADED,
    MESSAGE_NOT_FOUND,
    health_classify_outcome,
    health_classify_unknown_broker,
)


def test_health_classify_success_and_redirect_codes_are_healthy() -> None:
    """Classify 2xx and 3xx responses as healthy with the received status code.

    Returns:
        None: Assertions validate healthy classification.

    Raises:
        AssertionError: Raised when a success-range code is not healthy.
    """

    for status_code in (200, 204, 301, 302, 399):
        classification = health_classify_outcome(ProbeOutcome.responded(status_code))

        assert classification.status == "healthy"
        assert classification.http_status == status_code
        assert classification.message == MESSAGE_ACCESSIBLE
        assert classification.error_detail is None


def test_health_classify_client_and_server_error_codes_are_degraded() -> None:
    """Classify every received code outside [200, 400) as degraded.

    Returns:
        None: Assertions validate degraded classification.

    Raises:
        AssertionError: Raised when an out-of-range code is not degraded.
    """

    for status_code in (100, 199, 400, 403, 404, 429, 500, 503):
        classification = health_classify_outcome(ProbeOutcome.responded(status_code))

        assert classification.status == "degraded"
        assert classification.http_status == status_code
        assert classification.message == MESSAGE_DEGRADED
        assert classification.error_detail is None


def test_health_classify_timeout_is_error_with_timeout_detail() -> None:
    """Classify an elapsed deadline as error without an HTTP status.

    Returns:
        None: Assertions validate timeout classification.

    Raises:
        AssertionError: Raised when timeout classification is incorrect.
    """

    classification = health_classify_outcome(ProbeOutcome.timed_out())

    assert classification.status == "error"
    assert classification.http_status is None
    assert classification.error_detail == ERROR_DETAIL_TIMED_OUT
    assert classification.message == MESSAGE_CHECK_FAILED


def test_health_classify_transport_error_keeps_detail_verbatim() -> None:
    """Carry the transport failure detail into the classification unchanged.

    Returns:
        None: Assertions validate transport-error classification.

    Raises:
        AssertionError: Raised when detail is altered or status is wrong.
    """

    classification = health_classify_outcome(ProbeOutcome.transport_error("[Errno 111] Connection refused"))

    assert classification.status == "error"
    assert classification.http_status is None
    assert classification.error_detail == "[Errno 111] Connection refused"
    assert classification.message == MESSAGE_CHECK_FAILED


def test_health_classify_blank_transport_detail_falls_back_to_non_empty_text() -> None:
    classification = health_classify_outcome(ProbeOutcome.transport_error("   "))

    assert classification.error_detail == "Unknown error"


def test_health_classify_unknown_broker_has_no_probe_fields() -> None:
    """Return the unknown classification without status code or detail.

    Returns:
        None: Assertions validate unknown classification.

    Raises:
        AssertionError: Raised when unknown classification carries probe fields.
    """

    classification = health_classify_unknown_broker()

    assert classification.status == "unknown"
    assert classification.message == MESSAGE_NOT_FOUND
    assert classification.http_status is None
    assert classification.error_detail is None
