"""Read-only broker directory over an immutable catalog."""

from __future__ import annotations

from .interfaces import BrokerDirectoryPort
from .models import BrokerCatalog, BrokerProfile


class StaticBrokerDirectory(BrokerDirectoryPort):
    """Directory lookups backed by one in-memory catalog."""

    def __init__(self, catalog: BrokerCatalog):
        if catalog is None:
            raise ValueError("catalog must not be None")
        self._catalog = catalog
        self._profiles_by_id = {profile.broker_id: profile for profile in catalog.brokers}

    def directory_list_brokers(self) -> tuple[BrokerProfile, ...]:
        return self._catalog.brokers

    def directory_get_broker(self, broker_id: str) -> BrokerProfile | None:
        return self._profiles_by_id.get(broker_id)

    def directory_list_categories(self) -> tuple[str, ...]:
        return self._catalog.categories

    def directory_get_template(self, template_id: str) -> str | None:
        return self._catalog.templates.get(template_id)
