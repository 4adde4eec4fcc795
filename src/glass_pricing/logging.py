"""Logging utilities for the pricing engine.

This module provides standardized logging functionality for pricing operations.
Records are emitted on the ``glass_pricing`` logger hierarchy with the event
type and structured data attached through ``extra``.
"""

import logging
from enum import Enum
from typing import Any, Optional

LOGGER_NAME = "glass_pricing"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_cli_handler: Optional[logging.Handler] = None


class LogLevel(int, Enum):
    """Log levels for the pricing engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for pricing logging."""

    PRICING = "pricing"
    SHIPPING = "shipping"
    QUOTE = "quote"
    CONFIG = "config"
    MIRROR = "mirror"


def get_logger(name: str = "") -> logging.Logger:
    """Get a logger under the package namespace.

    Args:
        name: Child logger name, e.g. ``"pricing"``

    Returns:
        Logger instance
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


_logger = get_logger()


def _log(level: LogLevel, event: LogEvent, message: str, **data: Any) -> None:
    _logger.log(level, message, extra={"event": event.value, "data": data})


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    """Log a debug message for an event."""
    _log(LogLevel.DEBUG, event, message, **data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    """Log an info message for an event."""
    _log(LogLevel.INFO, event, message, **data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    """Log a warning message for an event."""
    _log(LogLevel.WARNING, event, message, **data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    """Log an error message for an event."""
    _log(LogLevel.ERROR, event, message, **data)


def configure_logging(level: str = "WARNING") -> None:
    """Attach a stream handler to the package logger at the given level.

    Used by the CLI; library users configure logging themselves.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``
    """
    global _cli_handler

    logger = get_logger()
    logger.setLevel(level)
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)
    _cli_handler = logging.StreamHandler()
    _cli_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_cli_handler)
