"""Tests for catalog loading, registry resolution and directory lookups."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import pytest

from selferase_api.catalog import (
    BrokerCatalog,
    CatalogLoadError,
    StaticBrokerDirectory,
    StaticBrokerRegistry,
    catalog_build_default,
    catalog_load_file,
    catalog_parse_document,
    catalog_serialize_broker_profile,
)


def test_catalog_registry_resolves_default_brokers_to_opt_out_urls() -> None:
    """Resolve every built-in broker id to its HTTPS opt-out URL.

    Returns:
        None: Assertions validate registry contents.

    Raises:
        AssertionError: Raised when registry mapping is incorrect.
    """

    registry = StaticBrokerRegistry.from_catalog(catalog_build_default())

    assert registry.registry_known_ids() == ("whitepages", "spokeo", "beenverified", "truthfinder", "intelius")
    endpoint = registry.registry_resolve("whitepages")
    assert endpoint is not None
    assert endpoint.broker_id == "whitepages"
    assert endpoint.url == "https://www.whitepages.com/suppression-requests"
    assert registry.registry_resolve("not-a-broker") is None


def test_catalog_registry_skips_inactive_brokers() -> None:
    default_catalog = catalog_build_default()
    first_broker, *other_brokers = default_catalog.brokers
    catalog = BrokerCatalog(
        brokers=(replace(first_broker, is_active=False), *other_brokers),
        categories=default_catalog.categories,
    )

    registry = StaticBrokerRegistry.from_catalog(catalog)

    assert registry.registry_resolve(first_broker.broker_id) is None
    assert len(registry.registry_known_ids()) == len(other_brokers)


def test_catalog_registry_rejects_non_https_and_blank_entries() -> None:
    """Reject endpoints that are not absolute HTTPS and blank identifiers.

    Returns:
        None: Assertions validate registry construction guards.

    Raises:
        AssertionError: Raised when invalid entries are accepted.
    """

    with pytest.raises(ValueError, match="absolute https"):
        StaticBrokerRegistry({"acme": "http://acme.example/opt-out"})
    with pytest.raises(ValueError, match="absolute https"):
        StaticBrokerRegistry({"acme": "/opt-out"})
    with pytest.raises(ValueError, match="blank"):
        StaticBrokerRegistry({"  ": "https://acme.example/opt-out"})


def test_catalog_directory_lookups_follow_catalog_order() -> None:
    """Serve brokers, categories and templates from the injected catalog.

    Returns:
        None: Assertions validate directory lookups.

    Raises:
        AssertionError: Raised when lookups diverge from catalog data.
    """

    directory = StaticBrokerDirectory(catalog=catalog_build_default())

    assert [profile.broker_id for profile in directory.directory_list_brokers()][0] == "whitepages"
    assert directory.directory_list_categories()[0] == "People Search"
    assert len(directory.directory_list_categories()) == 6
    assert directory.directory_get_broker("missing") is None
    assert directory.directory_get_template("missing") is None
    template_text = directory.directory_get_template("truthfinder-optout")
    assert template_text is not None
    assert template_text.startswith("Subject: Opt-Out Request")


def test_catalog_serialized_profile_includes_optional_fields_only_when_set() -> None:
    directory = StaticBrokerDirectory(catalog=catalog_build_default())

    truthfinder_payload = catalog_serialize_broker_profile(directory.directory_get_broker("truthfinder"))
    spokeo_payload = catalog_serialize_broker_profile(directory.directory_get_broker("spokeo"))

    assert truthfinder_payload["contactEmail"] == "optout@truthfinder.com"
    assert truthfinder_payload["optOutMethod"]["templateId"] == "truthfinder-optout"
    assert "contactEmail" not in spokeo_payload
    assert "templateId" not in spokeo_payload["optOutMethod"]


def test_catalog_parse_document_accepts_serialized_profiles() -> None:
    """Parse a document built from serialized profiles back into the same catalog.

    Returns:
        None: Assertions validate catalog document parsing.

    Raises:
        AssertionError: Raised when parsed catalog differs.
    """

    default_catalog = catalog_build_default()
    document = {
        "brokers": [catalog_serialize_broker_profile(profile) for profile in default_catalog.brokers],
        "categories": list(default_catalog.categories),
        "templates": dict(default_catalog.templates),
    }

    parsed_catalog = catalog_parse_document(json.loads(json.dumps(document)))

    assert parsed_catalog == default_catalog


def test_catalog_load_file_reads_json_and_reports_invalid_documents(tmp_path: Path) -> None:
    """Load a catalog file and raise CatalogLoadError for malformed inputs.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate file loading behavior.

    Raises:
        AssertionError: Raised when loading behavior is incorrect.
    """

    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_text(
        json.dumps({"brokers": [{"id": "acme", "name": "Acme", "optOutUrl": "https://acme.example/opt-out"}]}),
        encoding="utf-8",
    )

    loaded_catalog = catalog_load_file(catalog_file)

    assert loaded_catalog.brokers[0].broker_id == "acme"
    assert loaded_catalog.categories == ()
    assert loaded_catalog.templates == {}

    broken_file = tmp_path / "broken.json"
    broken_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="not valid JSON"):
        catalog_load_file(broken_file)
    with pytest.raises(CatalogLoadError, match="could not be read"):
        catalog_load_file(tmp_path / "missing.json")
    with pytest.raises(CatalogLoadError, match="brokers"):
        catalog_parse_document({"categories": []})
    with pytest.raises(CatalogLoadError, match="missing key"):
        catalog_parse_document({"brokers": [{"id": "acme"}]})

    acme_entry = {"id": "acme", "name": "Acme", "optOutUrl": "https://acme.example/opt-out"}
    with pytest.raises(CatalogLoadError, match="non-boolean"):
        catalog_parse_document({"brokers": [{**acme_entry, "isActive": "false"}]})
    with pytest.raises(CatalogLoadError, match="non-integer"):
        catalog_parse_document({"brokers": [{**acme_entry, "estimatedResponseDays": "7"}]})
    with pytest.raises(CatalogLoadError, match="array of strings"):
        catalog_parse_document({"brokers": [{**acme_entry, "dataTypes": "name"}]})
    with pytest.raises(CatalogLoadError, match="array of strings"):
        catalog_parse_document({"brokers": [{**acme_entry, "optOutMethod": {"steps": [1, 2]}}]})

    inactive_catalog = catalog_parse_document({"brokers": [{**acme_entry, "isActive": False}]})
    assert inactive_catalog.brokers[0].is_active is False
