"""FastAPI application factory for the public broker API."""

from fastapi import FastAPI

from selferase_api import __version__
from selferase_api.catalog import BrokerDirectoryPort
from selferase_api.config import AppSettings
from selferase_api.health import BrokerHealthService

from .middleware import ResponseHeadersMiddleware
from .routers import (
    api_create_brokers_router,
    api_create_health_router,
    api_create_metadata_router,
    api_create_templates_router,
)


def create_api_application(
    settings: AppSettings,
    health_service: BrokerHealthService,
    directory: BrokerDirectoryPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for metadata and headers.
        health_service: Broker health pipeline used by health-check endpoints.
        directory: Catalog-backed directory used by broker and template endpoints.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    application = FastAPI(title="SelfErase Broker API", version=__version__)
    application.add_middleware(
        ResponseHeadersMiddleware,
        cors_allow_origin=settings.cors_allow_origin,
        cors_max_age_seconds=settings.cors_max_age_seconds,
    )

    application.include_router(api_create_metadata_router(settings=settings))
    application.include_router(api_create_health_router(health_service=health_service))
    application.include_router(api_create_brokers_router(directory=directory))
    application.include_router(api_create_templates_router(directory=directory))

    return application
