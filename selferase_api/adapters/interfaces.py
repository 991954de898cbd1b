"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from selferase_api.domain import ProbeOutcome


class ReachabilityProbePort(Protocol):
    """Port definition for one bounded-time reachability check."""

    async def probe_check(self, url: str, timeout_seconds: float | None = None) -> ProbeOutcome:
        """Perform exactly one header-only request against the URL.

        Args:
            url: Absolute target URL.
            timeout_seconds: Optional deadline override in seconds.

        Returns:
            ProbeOutcome: Responded, timed-out or transport-error outcome.

        Raises:
            RuntimeError: Implementations must resolve every failure to an outcome.
        """
