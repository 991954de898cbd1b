"""Static broker registry resolving identifiers to probe endpoints."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlsplit

from selferase_api.domain import BrokerEndpoint

from .interfaces import BrokerRegistryPort
from .models import BrokerCatalog


class StaticBrokerRegistry(BrokerRegistryPort):
    """Immutable in-memory registry over a preloaded identifier to URL mapping."""

    def __init__(self, endpoint_urls: Mapping[str, str]):
        """Initialize registry from an identifier to URL mapping.

        Args:
            endpoint_urls: Broker identifier to canonical HTTPS URL mapping.

        Raises:
            ValueError: Raised when an identifier is blank or a URL is not absolute HTTPS.
        """

        if endpoint_urls is None:
            raise ValueError("endpoint_urls must not be None")

        endpoints: dict[str, BrokerEndpoint] = {}
        for broker_id, url in endpoint_urls.items():
            normalized_broker_id = str(broker_id).strip()
            normalized_url = str(url).strip()
            if not normalized_broker_id:
                raise ValueError("broker_id must not be blank")
            if normalized_broker_id in endpoints:
                raise ValueError(f"duplicate broker_id={normalized_broker_id}")
            parsed_url = urlsplit(normalized_url)
            if parsed_url.scheme != "https" or not parsed_url.netloc:
                raise ValueError(f"endpoint url for broker_id={normalized_broker_id} must be absolute https")
            endpoints[normalized_broker_id] = BrokerEndpoint(broker_id=normalized_broker_id, url=normalized_url)

        self._endpoints = endpoints

    @classmethod
    def from_catalog(cls, catalog: BrokerCatalog) -> StaticBrokerRegistry:
        """Build registry from the active brokers of a catalog.

        Args:
            catalog: Broker catalog.

        Returns:
            StaticBrokerRegistry: Registry keyed by broker id with opt-out URLs as targets.

        Raises:
            ValueError: Raised when catalog entries violate registry constraints.
        """

        endpoint_urls: dict[str, str] = {}
        for profile in catalog.brokers:
            if not profile.is_active:
                continue
            if profile.broker_id in endpoint_urls:
                raise ValueError(f"duplicate broker_id={profile.broker_id}")
            endpoint_urls[profile.broker_id] = profile.opt_out_url
        return cls(endpoint_urls=endpoint_urls)

    def registry_resolve(self, broker_id: str) -> BrokerEndpoint | None:
        """Resolve one broker identifier with a constant-time lookup.

        Args:
            broker_id: Opaque broker identifier.

        Returns:
            BrokerEndpoint | None: Endpoint when known, otherwise None.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return self._endpoints.get(broker_id)

    def registry_known_ids(self) -> tuple[str, ...]:
        return tuple(self._endpoints)
