"""Abstract logger interface.

Every component takes a ``Logger`` so callers can drop in their own
implementation. Messages are short event descriptions; context travels as
keyword arguments rather than being formatted into the message.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger interface used throughout taskmaster."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
