"""
Logger module for taskmaster

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from taskmaster.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Application started", port=8010)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging
import os

from .base import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger


def level_from_env(default: str = "INFO") -> int:
    """Resolve TASKMASTER_LOG_LEVEL to a ``logging`` level (falls back to INFO)."""
    name = os.environ.get("TASKMASTER_LOG_LEVEL", default).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=level_from_env())

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "level_from_env",
    "session_logger",
]
