"""Console logger writing one line per event to stderr."""

import logging
from typing import Any, Optional, TextIO

from taskmaster.logger.base import Logger

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_context(kwargs: dict) -> str:
    if not kwargs:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in kwargs.items())


class ConsoleLogger(Logger):
    """Logger that emits ``timestamp LEVEL [name] message key=value ...``.

    Each instance owns a ``logging.Logger`` with its own stream handler, so it
    neither depends on nor alters the root logging configuration. Output goes
    to stderr by default so it never interferes with a stdio MCP transport.
    """

    def __init__(
        self,
        name: str = "taskmaster",
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self._logger = logging.Logger(name, level)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
        self._logger.addHandler(handler)
        self._logger.propagate = False

    @property
    def level(self) -> int:
        return self._logger.level

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, f"{message}{_format_context(kwargs)}", extra={"context": kwargs})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
