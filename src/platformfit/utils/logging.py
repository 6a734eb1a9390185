from __future__ import annotations

import logging

from platformfit.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "platformfit"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(name: str) -> int:
    level = name.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level '{name}'. Use one of: {', '.join(LOG_LEVELS)}.")
    return getattr(logging, level)


def configure_logging(level: str = "INFO") -> None:
    """
    Install the console handler and apply `level` to the package loggers.

    basicConfig does nothing once the root logger has handlers (an embedding
    app, pytest), so the level is also set on the package logger directly.
    """
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
