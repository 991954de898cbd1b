"""API router package for endpoint composition."""

from .brokers import api_create_brokers_router
from .health import api_create_health_router
from .metadata import api_create_metadata_router
from .templates import api_create_templates_router

__all__ = [
    "api_create_brokers_router",
    "api_create_health_router",
    "api_create_metadata_router",
    "api_create_templates_router",
]
