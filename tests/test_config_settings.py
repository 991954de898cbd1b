"""Tests for runtime settings defaults and startup validation."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from selferase_api.config import AppSettings, SettingsLoadError, config_configure_logging, config_load_settings


def test_config_defaults_match_probe_contract() -> None:
    """Use a five-second probe deadline and permissive CORS origin by default.

    Returns:
        None: Assertions validate default settings.

    Raises:
        AssertionError: Raised when defaults drift.
    """

    settings = AppSettings()

    assert settings.probe_timeout_seconds == 5.0
    assert settings.probe_user_agent == "SelfErase-HealthCheck/1.0"
    assert settings.cors_allow_origin == "*"
    assert settings.cors_max_age_seconds == 86400
    assert settings.broker_catalog_file is None


def test_config_rejects_non_positive_probe_timeout() -> None:
    with pytest.raises(ValidationError):
        AppSettings(probe_timeout_seconds=0)


def test_config_rejects_non_ascii_header_values() -> None:
    with pytest.raises(ValidationError, match="ASCII"):
        AppSettings(probe_user_agent="SelfErase-Prüfung/1.0")
    with pytest.raises(ValidationError, match="ASCII"):
        AppSettings(cors_allow_origin="https://bücher.example")


def test_config_normalizes_log_level_and_blank_catalog_path() -> None:
    settings = AppSettings(log_level=" debug ", broker_catalog_file="   ")

    assert settings.log_level == "DEBUG"
    assert settings.broker_catalog_file is None


def test_config_load_settings_wraps_validation_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError when environment values are invalid.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate startup error wrapping.

    Raises:
        AssertionError: Raised when validation errors are not wrapped.
    """

    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROBE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CORS_ALLOW_ORIGIN", "https://selferase.example")

    settings = config_load_settings()

    assert settings.probe_timeout_seconds == 2.5
    assert settings.cors_allow_origin == "https://selferase.example"


def test_config_configure_logging_quiets_http_client_logger() -> None:
    config_configure_logging("DEBUG")

    assert logging.getLogger("httpx").level == logging.WARNING
