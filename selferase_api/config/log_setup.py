"""Process-wide logging configuration."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Configure root logging once at process startup.

    Args:
        log_level: Validated logging level name.

    Returns:
        None: Configures the root logger as side effect.

    Raises:
        ValueError: Raised when log level name is unknown to `logging`.
    """

    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
