"""Logging setup for applications embedding the ray tracing core.

Library modules only create module-level loggers; handlers are attached here,
on request, by the application.
"""

from __future__ import annotations

import logging

from src.coal.core.config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER_NAME = "src.coal"


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once replaces the level but does not stack
    handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to COAL_LOG_LEVEL.
        fmt: Format string. Defaults to COAL_LOG_FORMAT.

    Returns:
        The configured package logger.
    """
    level_value = getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level_value)

    if not any(getattr(h, "_coal_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler._coal_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    for handler in logger.handlers:
        if getattr(handler, "_coal_handler", False):
            handler.setLevel(level_value)
            handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))

    return logger
