"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs one-shot broker health checks from the command line.
"""

import argparse
import asyncio
import json

import uvicorn

from selferase_api.bootstrap import (
    bootstrap_create_application,
    bootstrap_create_health_service,
    bootstrap_load_catalog,
)
from selferase_api.config import AppSettings, config_configure_logging, config_load_settings
from selferase_api.domain import domain_health_record_to_payload


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        CatalogLoadError: Raised when the configured catalog file is invalid.
    """

    argument_parser = argparse.ArgumentParser(description="SelfErase broker API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "check"),
        help="Runtime command: `api` starts server, `check` runs one-shot broker health checks",
        type=str,
    )
    argument_parser.add_argument(
        "broker_ids",
        nargs="*",
        help="Broker ids for `check`; all known brokers when omitted",
    )
    argument_parser.add_argument(
        "--timeout-seconds",
        dest="timeout_seconds",
        type=main_positive_float,
        help="Optional probe deadline override for `check`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "check":
        payloads = asyncio.run(
            main_run_health_checks(
                settings=settings,
                broker_ids=parsed_arguments.broker_ids,
                timeout_seconds=parsed_arguments.timeout_seconds,
            )
        )
        print(json.dumps(payloads, indent=2))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


async def main_run_health_checks(
    settings: AppSettings,
    broker_ids: list[str],
    timeout_seconds: float | None = None,
) -> list[dict[str, object]]:
    """Run concurrent health checks and return serialized records.

    Args:
        settings: Validated runtime settings.
        broker_ids: Broker identifiers; every registered broker when empty.
        timeout_seconds: Optional probe deadline override.

    Returns:
        list[dict[str, object]]: Serialized health records in request order.

    Raises:
        CatalogLoadError: Raised when the configured catalog file is invalid.
    """

    catalog = bootstrap_load_catalog(settings)
    health_service = bootstrap_create_health_service(settings=settings, catalog=catalog)
    requested_ids = broker_ids or [profile.broker_id for profile in catalog.brokers if profile.is_active]
    records = await health_service.health_check_brokers(requested_ids, timeout_seconds=timeout_seconds)
    return [domain_health_record_to_payload(record) for record in records]


def main_positive_float(value: str) -> float:
    """Parse a command-line deadline that must be a positive number.

    Args:
        value: Raw argument text.

    Returns:
        float: Parsed deadline in seconds.

    Raises:
        argparse.ArgumentTypeError: Raised when the value is not a positive number.
    """

    try:
        parsed_value = float(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from error
    if not parsed_value > 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be greater than 0")
    return parsed_value


if __name__ == "__main__":
    main()
