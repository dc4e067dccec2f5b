"""Bridge between the `logLevel` setting and stdlib logging."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "importjs_core"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_log_level(name: Any) -> int:
    """Map a `logLevel` value to a logging level; unknown names mean INFO."""
    level = LOG_LEVELS.get(str(name).lower()) if name is not None else None
    if level is None:
        logger.warning("Unknown logLevel %r; falling back to 'info'", name)
        return logging.INFO
    return level


def configure_logging(configuration: Any) -> int:
    """Apply the configuration's `logLevel` to the package logger."""
    level = resolve_log_level(configuration.get("logLevel"))
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level
