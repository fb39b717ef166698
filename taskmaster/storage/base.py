"""Base key-value store interface

Defines the minimal interface the OAuth exchange relies on. Values are opaque
strings; each entry may carry a time-to-live after which it reads as absent.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract base class for key-value store implementations

    Every operation is atomic for a single key.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value stored under ``key``

        Args:
            key: Entry key

        Returns:
            Stored value, or None if the key is absent or expired
        """
        pass

    @abstractmethod
    def put(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value

        Args:
            key: Entry key
            value: Opaque string value
            ttl_seconds: Lifetime in seconds; None keeps the entry until deleted

        Raises:
            RuntimeError: If the value cannot be persisted
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete the entry stored under ``key``

        Deleting an absent key is not an error.

        Args:
            key: Entry key

        Returns:
            True if a live entry was deleted, False if none existed
        """
        pass

    @abstractmethod
    def purge_expired(self) -> int:
        """
        Remove all expired entries

        Returns:
            Number of entries removed
        """
        pass
