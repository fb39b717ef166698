"""File-based key-value store

Keeps all entries in one JSON file so the MCP server and the OAuth web server
(separate processes) see the same tokens. Writes go to a temporary file that
replaces the original, so readers never observe a partial file.
"""

import json
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from taskmaster.logger import Logger, session_logger
from taskmaster.storage.base import KeyValueStore

Clock = Callable[[], float]


class FileKeyValueStore(KeyValueStore):
    """JSON-file key-value store with per-entry expiry"""

    def __init__(
        self,
        path: str | Path,
        clock: Optional[Clock] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize file store

        Args:
            path: JSON file holding the entries (parent directories are created)
            clock: Time source returning epoch seconds (tests inject a fake clock)
            logger: Logger for store events
        """
        self.path = Path(path)
        self._clock: Clock = clock or time.time
        self._lock = threading.Lock()
        self.logger: Logger = logger or session_logger

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error("Failed to create store directory", error=str(e))
            raise RuntimeError(f"Failed to create store directory: {str(e)}") from e
        self.logger.info("File key-value store initialized", path=str(self.path))

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error("Failed to load store, treating as empty", error=str(e))
            return {}
        if not isinstance(data, dict):
            self.logger.warning(
                "Store has unexpected structure, resetting to empty dict",
                type=type(data).__name__,
            )
            return {}
        return data

    def _save(self, entries: Dict[str, Dict[str, Any]]) -> None:
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".kv-", suffix=".json")
            with os.fdopen(fd, "w") as f:
                json.dump(entries, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            self.logger.error("Failed to save store", error=str(e))
            raise RuntimeError(f"Failed to save key-value store: {str(e)}") from e

    def _live(self, entry: Dict[str, Any]) -> bool:
        expires_at = entry.get("expires_at")
        return expires_at is None or expires_at > self._clock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._load().get(key)
            if entry is None or not self._live(entry):
                return None
            return entry.get("value")

    def put(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        with self._lock:
            # Expired entries are dropped on every write
            entries = {k: entry for k, entry in self._load().items() if self._live(entry)}
            entries[key] = {
                "value": value,
                "expires_at": self._clock() + ttl_seconds if ttl_seconds is not None else None,
            }
            self._save(entries)
        self.logger.debug("Store entry written", key=key.split(":", 1)[0], ttl_seconds=ttl_seconds)

    def delete(self, key: str) -> bool:
        with self._lock:
            entries = self._load()
            entry = entries.pop(key, None)
            if entry is None:
                return False
            self._save(entries)
            return self._live(entry)

    def purge_expired(self) -> int:
        with self._lock:
            entries = self._load()
            live = {key: entry for key, entry in entries.items() if self._live(entry)}
            removed = len(entries) - len(live)
            if removed:
                self._save(live)
        if removed:
            self.logger.info("Expired store entries purged", count=removed)
        return removed
