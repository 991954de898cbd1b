"""Typed interfaces for catalog-backed lookups."""

from typing import Protocol

from selferase_api.domain import BrokerEndpoint

from .models import BrokerProfile


class BrokerRegistryPort(Protocol):
    """Port definition for resolving broker identifiers to probe endpoints."""

    def registry_resolve(self, broker_id: str) -> BrokerEndpoint | None:
        """Resolve one broker identifier to its canonical endpoint.

        Args:
            broker_id: Opaque broker identifier.

        Returns:
            BrokerEndpoint | None: Endpoint when known, otherwise None.

        Raises:
            RuntimeError: Implementations do not raise for unknown identifiers.
        """

    def registry_known_ids(self) -> tuple[str, ...]:
        """Return all resolvable broker identifiers in configuration order.

        Returns:
            tuple[str, ...]: Known broker identifiers.

        Raises:
            RuntimeError: Implementations do not raise runtime errors.
        """


class BrokerDirectoryPort(Protocol):
    """Port definition for public broker directory reads."""

    def directory_list_brokers(self) -> tuple[BrokerProfile, ...]:
        """Return all broker profiles in listing order."""

    def directory_get_broker(self, broker_id: str) -> BrokerProfile | None:
        """Return one broker profile, or None when unknown."""

    def directory_list_categories(self) -> tuple[str, ...]:
        """Return category labels in listing order."""

    def directory_get_template(self, template_id: str) -> str | None:
        """Return template text, or None when unknown."""
