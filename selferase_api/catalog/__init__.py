"""Catalog package for static broker data, registry and directory lookups."""

from .defaults import catalog_build_default
from .directory import StaticBrokerDirectory
from .interfaces import BrokerDirectoryPort, BrokerRegistryPort
from .loader import CatalogLoadError, catalog_load_file, catalog_parse_document
from .models import BrokerCatalog, BrokerProfile, OptOutMethod, catalog_serialize_broker_profile
from .registry import StaticBrokerRegistry

__all__ = [
    "BrokerCatalog",
    "BrokerDirectoryPort",
    "BrokerProfile",
    "BrokerRegistryPort",
    "CatalogLoadError",
    "OptOutMethod",
    "StaticBrokerDirectory",
    "StaticBrokerRegistry",
    "catalog_build_default",
    "catalog_load_file",
    "catalog_parse_document",
    "catalog_serialize_broker_profile",
]
