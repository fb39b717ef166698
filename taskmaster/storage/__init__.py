"""Key-value storage module

Provides the abstract store interface used by the OAuth exchange and its
in-memory and file-backed implementations.
"""

from pathlib import Path
from typing import Optional

from taskmaster.storage.base import KeyValueStore
from taskmaster.storage.file_store import FileKeyValueStore
from taskmaster.storage.memory_store import MemoryKeyValueStore
from taskmaster.config import Settings
from taskmaster.logger import Logger


def create_store(settings: Settings, logger: Optional[Logger] = None) -> KeyValueStore:
    """Create the file-backed store shared by the MCP and web servers."""
    return FileKeyValueStore(Path(settings.kv_store_path), logger=logger)


__all__ = [
    "KeyValueStore",
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "create_store",
]
