"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from selferase_api.adapters import HttpxReachabilityProbe
from selferase_api.api import create_api_application
from selferase_api.catalog import (
    BrokerCatalog,
    StaticBrokerDirectory,
    StaticBrokerRegistry,
    catalog_build_default,
    catalog_load_file,
)
from selferase_api.config import AppSettings, config_load_settings
from selferase_api.health import BrokerHealthService


def bootstrap_load_catalog(settings: AppSettings) -> BrokerCatalog:
    """Return the configured catalog, or the built-in one when no file is set.

    Args:
        settings: Validated runtime settings.

    Returns:
        BrokerCatalog: Catalog backing registry and directory.

    Raises:
        CatalogLoadError: Raised when the configured catalog file is invalid.
    """

    if settings.broker_catalog_file is None:
        return catalog_build_default()
    return catalog_load_file(settings.broker_catalog_file)


def bootstrap_create_health_service(settings: AppSettings, catalog: BrokerCatalog) -> BrokerHealthService:
    """Build health service from settings and catalog.

    Args:
        settings: Validated runtime settings.
        catalog: Catalog backing the registry.

    Returns:
        BrokerHealthService: Fully wired health service.

    Raises:
        ValueError: Raised when catalog endpoints or probe settings are invalid.
    """

    probe = HttpxReachabilityProbe(
        default_timeout_seconds=settings.probe_timeout_seconds,
        user_agent=settings.probe_user_agent,
    )
    return BrokerHealthService(registry=StaticBrokerRegistry.from_catalog(catalog), probe=probe)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        CatalogLoadError: Raised when the configured catalog file is invalid.
    """

    resolved_settings = settings or config_load_settings()
    catalog = bootstrap_load_catalog(resolved_settings)
    return create_api_application(
        settings=resolved_settings,
        health_service=bootstrap_create_health_service(settings=resolved_settings, catalog=catalog),
        directory=StaticBrokerDirectory(catalog=catalog),
    )
