"""Catalog file loading for deployments that replace the built-in broker data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import BrokerCatalog, BrokerProfile, OptOutMethod
from .registry import StaticBrokerRegistry


class CatalogLoadError(RuntimeError):
    """Raised when a catalog file cannot be read or does not match the catalog contract."""


def catalog_load_file(path: str | Path) -> BrokerCatalog:
    """Load a broker catalog from a JSON file.

    The file mirrors the directory API shape: a `brokers` array of camelCase
    broker objects, plus optional `categories` array and `templates` object.

    Args:
        path: Filesystem path of the JSON catalog.

    Returns:
        BrokerCatalog: Parsed immutable catalog.

    Raises:
        CatalogLoadError: Raised when the file is unreadable or malformed.
    """

    catalog_path = Path(path)
    try:
        raw_document = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise CatalogLoadError(f"catalog file could not be read: {catalog_path}") from error
    except json.JSONDecodeError as error:
        raise CatalogLoadError(f"catalog file is not valid JSON: {catalog_path}") from error

    return catalog_parse_document(raw_document)


def catalog_parse_document(raw_document: Any) -> BrokerCatalog:
    """Build a broker catalog from a decoded JSON document.

    Args:
        raw_document: Decoded JSON value.

    Returns:
        BrokerCatalog: Parsed immutable catalog.

    Raises:
        CatalogLoadError: Raised when the document does not match the catalog contract
            or an active broker has a blank, duplicate or non-HTTPS endpoint.
    """

    if not isinstance(raw_document, dict):
        raise CatalogLoadError("catalog document must be a JSON object")

    raw_brokers = raw_document.get("brokers")
    if not isinstance(raw_brokers, list):
        raise CatalogLoadError("catalog document must contain a `brokers` array")

    raw_categories = raw_document.get("categories", [])
    if not isinstance(raw_categories, list) or not all(isinstance(value, str) for value in raw_categories):
        raise CatalogLoadError("catalog `categories` must be an array of strings")

    raw_templates = raw_document.get("templates", {})
    if not isinstance(raw_templates, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in raw_templates.items()
    ):
        raise CatalogLoadError("catalog `templates` must map template ids to strings")

    brokers = tuple(
        _catalog_parse_broker(raw_broker, position) for position, raw_broker in enumerate(raw_brokers)
    )
    catalog = BrokerCatalog(brokers=brokers, categories=tuple(raw_categories), templates=dict(raw_templates))
    try:
        StaticBrokerRegistry.from_catalog(catalog)
    except ValueError as error:
        raise CatalogLoadError(f"catalog broker endpoints are invalid: {error}") from error
    return catalog


def _catalog_parse_broker(raw_broker: Any, position: int) -> BrokerProfile:
    if not isinstance(raw_broker, dict):
        raise CatalogLoadError(f"catalog broker at index {position} must be an object")

    raw_method = raw_broker.get("optOutMethod") or {}
    if not isinstance(raw_method, dict):
        raise CatalogLoadError(f"catalog broker at index {position} has invalid `optOutMethod`")

    is_active = raw_broker.get("isActive", True)
    if not isinstance(is_active, bool):
        raise CatalogLoadError(f"catalog broker at index {position} has non-boolean `isActive`")
    estimated_response_days = raw_broker.get("estimatedResponseDays", 0)
    if isinstance(estimated_response_days, bool) or not isinstance(estimated_response_days, int):
        raise CatalogLoadError(f"catalog broker at index {position} has non-integer `estimatedResponseDays`")

    try:
        return BrokerProfile(
            broker_id=str(raw_broker["id"]).strip(),
            name=str(raw_broker["name"]),
            description=str(raw_broker.get("description", "")),
            website=str(raw_broker.get("website", "")),
            opt_out_url=str(raw_broker["optOutUrl"]).strip(),
            category=str(raw_broker.get("category", "")),
            data_types=_catalog_parse_string_list(raw_broker.get("dataTypes", []), "dataTypes", position),
            opt_out_method=OptOutMethod(
                method_type=str(raw_method.get("type", "online_form")),
                instructions=str(raw_method.get("instructions", "")),
                steps=_catalog_parse_string_list(raw_method.get("steps", []), "optOutMethod.steps", position),
                template_id=raw_method.get("templateId"),
            ),
            required_fields=_catalog_parse_string_list(
                raw_broker.get("requiredFields", []), "requiredFields", position
            ),
            estimated_response_days=estimated_response_days,
            is_active=is_active,
            contact_email=raw_broker.get("contactEmail"),
        )
    except KeyError as error:
        raise CatalogLoadError(f"catalog broker at index {position} is missing key {error}") from error


def _catalog_parse_string_list(raw_value: Any, field_name: str, position: int) -> tuple[str, ...]:
    if not isinstance(raw_value, list) or not all(isinstance(value, str) for value in raw_value):
        raise CatalogLoadError(f"catalog broker at index {position} `{field_name}` must be an array of strings")
    return tuple(raw_value)
