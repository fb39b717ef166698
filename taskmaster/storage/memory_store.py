"""In-process key-value store with TTL support."""

import threading
import time
from typing import Callable, Dict, Optional, Tuple

from taskmaster.storage.base import KeyValueStore

Clock = Callable[[], float]


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and single-process deployments."""

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or time.time
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}
        self._lock = threading.Lock()

    def _expired(self, expires_at: Optional[float]) -> bool:
        return expires_at is not None and expires_at <= self._clock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._expired(expires_at):
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        expires_at = self._clock() + ttl_seconds if ttl_seconds is not None else None
        with self._lock:
            for stale in [k for k, (_, exp) in self._entries.items() if self._expired(exp)]:
                del self._entries[stale]
            self._entries[key] = (value, expires_at)

    def delete(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.pop(key, None)
            return entry is not None and not self._expired(entry[1])

    def purge_expired(self) -> int:
        with self._lock:
            expired = [key for key, (_, exp) in self._entries.items() if self._expired(exp)]
            for key in expired:
                del self._entries[key]
            return len(expired)
