#!/usr/bin/env python3
"""Centralized logging utilities with consistent formatting."""

import logging
import sys
from typing import Any

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(
    name: str,
    level: int | None = None,
    format_string: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Set up a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured logger instance

    Example:
        >>> from phrasebind.core.logging_utils import setup_logger
        >>> logger = setup_logger(__name__)
        >>> logger.info("Store created")
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if name in _CONFIGURED_LOGGERS:
        return logger

    if level is None:
        level = _DEFAULT_LEVEL
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        formatter = logging.Formatter(
            format_string or _LOG_FORMAT,
            datefmt=_LOG_DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)

    return logger


def set_global_log_level(level: int | str):
    """Set log level for all configured loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG or "DEBUG")

    Example:
        >>> set_global_log_level("DEBUG")
    """
    global _DEFAULT_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def log_event(
    logger: logging.Logger,
    event_name: str,
    data: dict[str, Any] | None = None,
    level: int = logging.INFO,
):
    """Log a structured event.

    Args:
        logger: Logger instance
        event_name: Event name (e.g., 'language_changed', 'translator_rebuilt')
        data: Optional event data
        level: Logging level for the record

    Example:
        >>> log_event(logger, "language_changed", {"from": "en", "to": "fr"})
    """
    data_str = ""
    if data:
        data_str = " " + " ".join(f"{k}={v}" for k, v in data.items())
    logger.log(level, f"[EVENT] {event_name}{data_str}")


def get_logger_stats() -> dict[str, Any]:
    """Get statistics about configured loggers.

    Returns:
        Dictionary with logger statistics

    Example:
        >>> stats = get_logger_stats()
        >>> print(f"Configured loggers: {stats['count']}")
    """
    return {
        "count": len(_CONFIGURED_LOGGERS),
        "loggers": sorted(_CONFIGURED_LOGGERS),
        "default_level": logging.getLevelName(_DEFAULT_LEVEL),
    }
