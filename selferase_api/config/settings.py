"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and health probing.

    Environment variable names map directly to field names in uppercase.
    Example: `probe_timeout_seconds` reads from `PROBE_TIMEOUT_SECONDS`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        probe_timeout_seconds: Hard deadline for one broker reachability probe.
        probe_user_agent: User-Agent header sent by the probe.
        cors_allow_origin: Value for `Access-Control-Allow-Origin`.
        cors_max_age_seconds: Value for `Access-Control-Max-Age`.
        broker_catalog_file: Optional JSON catalog replacing the built-in broker data.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    probe_timeout_seconds: float = Field(default=5.0, gt=0)
    probe_user_agent: str = Field(default="SelfErase-HealthCheck/1.0", min_length=1)
    cors_allow_origin: str = Field(default="*", min_length=1)
    cors_max_age_seconds: int = Field(default=86400, ge=0)
    broker_catalog_file: str | None = Field(default=None)

    @field_validator("probe_user_agent", "cors_allow_origin")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        if not stripped_value.isascii():
            raise ValueError("value must be ASCII")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized_value

    @field_validator("broker_catalog_file")
    @classmethod
    def _validate_optional_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
