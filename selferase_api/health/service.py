"""Broker health service composing registry, probe, classifier and composer."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, Iterable

from selferase_api.adapters import ReachabilityProbePort
from selferase_api.catalog import BrokerRegistryPort
from selferase_api.domain import HealthRecord

from .classifier import health_classify_outcome, health_classify_unknown_broker
from .composer import health_compose_record, health_utc_now

logger = logging.getLogger(__name__)


class BrokerHealthService:
    """Stateless health-check pipeline for broker opt-out endpoints.

    Each call resolves the broker, probes its endpoint once, classifies the
    outcome and returns a freshly composed record. No state is shared between
    calls, so concurrent checks never interact.
    """

    def __init__(
        self,
        registry: BrokerRegistryPort,
        probe: ReachabilityProbePort,
        now_provider: Callable[[], datetime] = health_utc_now,
    ):
        """Initialize broker health service.

        Args:
            registry: Broker identifier to endpoint registry.
            probe: Reachability probe implementation.
            now_provider: Clock used to stamp records.

        Raises:
            ValueError: Raised when dependencies are None.
        """

        if registry is None:
            raise ValueError("registry must not be None")
        if probe is None:
            raise ValueError("probe must not be None")
        self._registry = registry
        self._probe = probe
        self._now_provider = now_provider

    async def health_check_broker(self, broker_id: str, timeout_seconds: float | None = None) -> HealthRecord:
        """Run one health check for a broker identifier.

        Unknown identifiers short-circuit to an `unknown` record without any
        network call.

        Args:
            broker_id: Opaque broker identifier.
            timeout_seconds: Optional probe deadline override in seconds.

        Returns:
            HealthRecord: Timestamped health record.

        Raises:
            ValueError: Raised when timeout override is not positive.
        """

        endpoint = self._registry.registry_resolve(broker_id)
        if endpoint is None:
            logger.info("broker health check broker_id=%r status=unknown", broker_id)
            return health_compose_record(
                broker_id=broker_id,
                classification=health_classify_unknown_broker(),
                now_provider=self._now_provider,
            )

        outcome = await self._probe.probe_check(url=endpoint.url, timeout_seconds=timeout_seconds)
        classification = health_classify_outcome(outcome)
        record = health_compose_record(
            broker_id=broker_id,
            classification=classification,
            url=endpoint.url,
            now_provider=self._now_provider,
        )

        if record.error_detail is not None:
            logger.warning(
                "broker health check broker_id=%r status=%s error=%s",
                broker_id,
                record.status,
                record.error_detail,
            )
        else:
            logger.info(
                "broker health check broker_id=%r status=%s http_status=%s",
                broker_id,
                record.status,
                record.http_status,
            )
        return record

    async def health_check_brokers(
        self,
        broker_ids: Iterable[str],
        timeout_seconds: float | None = None,
    ) -> list[HealthRecord]:
        """Run independent health checks concurrently.

        Args:
            broker_ids: Broker identifiers to check.
            timeout_seconds: Optional probe deadline override in seconds.

        Returns:
            list[HealthRecord]: Records in input order.

        Raises:
            ValueError: Raised when timeout override is not positive.
        """

        return list(
            await asyncio.gather(
                *(self.health_check_broker(broker_id, timeout_seconds=timeout_seconds) for broker_id in broker_ids)
            )
        )
