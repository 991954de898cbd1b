"""httpx-backed reachability probe for broker opt-out endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from selferase_api.domain import ProbeOutcome

from .interfaces import ReachabilityProbePort

logger = logging.getLogger(__name__)


class HttpxReachabilityProbe(ReachabilityProbePort):
    """Probe issuing one `HEAD` request per check under a hard deadline."""

    _DEFAULT_USER_AGENT: Final[str] = "SelfErase-HealthCheck/1.0"

    def __init__(
        self,
        default_timeout_seconds: float = 5.0,
        user_agent: str = _DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize reachability probe.

        Args:
            default_timeout_seconds: Deadline applied when callers pass no timeout.
            user_agent: User-Agent header sent with every probe.
            transport: Optional httpx transport override, used by tests.

        Raises:
            ValueError: Raised when timeout or user agent values are invalid.
        """

        normalized_user_agent = user_agent.strip()
        if default_timeout_seconds <= 0:
            raise ValueError("default_timeout_seconds must be > 0")
        if not normalized_user_agent:
            raise ValueError("user_agent must not be blank")
        if not normalized_user_agent.isascii():
            raise ValueError("user_agent must be ASCII")

        self._default_timeout_seconds = float(default_timeout_seconds)
        self._user_agent = normalized_user_agent
        self._transport = transport

    async def probe_check(self, url: str, timeout_seconds: float | None = None) -> ProbeOutcome:
        """Perform one `HEAD` request and map every result to an outcome.

        The request coroutine runs under `asyncio.wait_for`; at the deadline it
        is cancelled together with its client, so a late response never
        reaches the caller.

        Args:
            url: Absolute target URL.
            timeout_seconds: Optional deadline override in seconds.

        Returns:
            ProbeOutcome: Responded, timed-out or transport-error outcome.

        Raises:
            ValueError: Raised when timeout override is not positive.
        """

        deadline_seconds = self._default_timeout_seconds if timeout_seconds is None else float(timeout_seconds)
        if deadline_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        try:
            status_code = await asyncio.wait_for(
                self._probe_head_status(url=url, deadline_seconds=deadline_seconds),
                timeout=deadline_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.debug("probe deadline elapsed url=%s deadline_seconds=%s", url, deadline_seconds)
            return ProbeOutcome.timed_out()
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as error:
            logger.debug("probe transport failure url=%s error=%s", url, error.__class__.__name__)
            return ProbeOutcome.transport_error(str(error).strip() or error.__class__.__name__)

        return ProbeOutcome.responded(status_code)

    async def _probe_head_status(self, url: str, deadline_seconds: float) -> int:
        """Open a dedicated client, send one `HEAD` request and return its status.

        Args:
            url: Absolute target URL.
            deadline_seconds: Transport-level timeout, matching the outer deadline.

        Returns:
            int: HTTP status code.

        Raises:
            httpx.HTTPError: Raised for transport failures.
            httpx.InvalidURL: Raised when the URL cannot be parsed.
        """

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(deadline_seconds),
            follow_redirects=False,
            headers={"User-Agent": self._user_agent},
            transport=self._transport,
        ) as client:
            response = await client.head(url)
        return response.status_code
