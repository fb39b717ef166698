"""Logger backed by the standard ``logging`` module."""

import logging
from typing import Any, Optional

from taskmaster.logger.base import Logger


class DefaultLogger(Logger):
    """Forwards events to ``logging.getLogger(name)``.

    Keyword context is attached through ``extra={"context": {...}}`` and also
    appended to the message so plain formatters still show it.
    """

    def __init__(self, name: str = "taskmaster", level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if kwargs:
            context = " ".join(f"{key}={value}" for key, value in kwargs.items())
            message = f"{message} {context}"
        self._logger.log(level, message, extra={"context": kwargs})

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
