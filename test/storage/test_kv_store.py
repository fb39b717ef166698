#!/usr/bin/env python3
"""Test key-value store backends"""

import json
import sys
import threading
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from taskmaster.config import Settings
from taskmaster.storage import FileKeyValueStore, MemoryKeyValueStore, create_store


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(params=["memory", "file"])
def kv(request, clock, tmp_path):
    """Each test runs against both backends"""
    if request.param == "memory":
        return MemoryKeyValueStore(clock=clock)
    return FileKeyValueStore(tmp_path / "oauth" / "kv.json", clock=clock)


class TestKeyValueContract:
    def test_put_then_get(self, kv):
        kv.put("a", "1")
        assert kv.get("a") == "1"

    def test_missing_key(self, kv):
        assert kv.get("missing") is None

    def test_put_overwrites(self, kv):
        kv.put("a", "1")
        kv.put("a", "2")
        assert kv.get("a") == "2"

    def test_delete_reports_presence(self, kv):
        kv.put("a", "1")
        assert kv.delete("a") is True
        assert kv.delete("a") is False
        assert kv.get("a") is None

    def test_entry_expires(self, kv, clock):
        kv.put("a", "1", ttl_seconds=60)
        clock.now += 59
        assert kv.get("a") == "1"
        clock.now += 1
        assert kv.get("a") is None

    def test_deleting_expired_entry_returns_false(self, kv, clock):
        kv.put("a", "1", ttl_seconds=10)
        clock.now += 11
        assert kv.delete("a") is False

    def test_entry_without_ttl_never_expires(self, kv, clock):
        kv.put("a", "1")
        clock.now += 10 * 365 * 24 * 3600
        assert kv.get("a") == "1"

    def test_purge_expired(self, kv, clock):
        kv.put("short", "1", ttl_seconds=5)
        kv.put("long", "2", ttl_seconds=500)
        kv.put("forever", "3")
        clock.now += 10
        assert kv.purge_expired() == 1
        assert kv.get("long") == "2"
        assert kv.get("forever") == "3"

    def test_write_drops_expired_entries(self, kv, clock):
        for i in range(50):
            kv.put(f"state:{i}", "x", ttl_seconds=600)
        clock.now += 3600
        kv.put("state:new", "y", ttl_seconds=600)
        assert kv.purge_expired() == 0
        assert kv.get("state:new") == "y"

    def test_only_one_concurrent_delete_wins(self, kv):
        kv.put("state", "x")
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(kv.delete("state"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1


class TestFileKeyValueStore:
    def test_entries_shared_between_instances(self, tmp_path, clock):
        path = tmp_path / "kv.json"
        FileKeyValueStore(path, clock=clock).put("token", "abc", ttl_seconds=100)
        assert FileKeyValueStore(path, clock=clock).get("token") == "abc"

    def test_file_format(self, tmp_path, clock):
        path = tmp_path / "kv.json"
        FileKeyValueStore(path, clock=clock).put("token", "abc", ttl_seconds=100)
        data = json.loads(path.read_text())
        assert data == {"token": {"value": "abc", "expires_at": 1100.0}}

    def test_no_temporary_files_left_behind(self, tmp_path, clock):
        store = FileKeyValueStore(tmp_path / "kv.json", clock=clock)
        for i in range(5):
            store.put(f"k{i}", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]

    def test_corrupt_file_reads_as_empty(self, tmp_path, clock):
        path = tmp_path / "kv.json"
        path.write_text("{not json")
        store = FileKeyValueStore(path, clock=clock)
        assert store.get("a") is None
        store.put("a", "1")
        assert store.get("a") == "1"

    def test_stale_entries_removed_from_file(self, tmp_path, clock):
        path = tmp_path / "kv.json"
        store = FileKeyValueStore(path, clock=clock)
        for i in range(50):
            store.put(f"oauth_state:{i}", "{}", ttl_seconds=600)
        clock.now += 3600
        store.put("oauth_state:fresh", "{}", ttl_seconds=600)
        assert list(json.loads(path.read_text())) == ["oauth_state:fresh"]

    def test_create_store_uses_data_dir(self, tmp_path):
        store = create_store(Settings(data_dir=tmp_path))
        assert isinstance(store, FileKeyValueStore)
        assert store.path == tmp_path / "oauth" / "kv.json"
        assert store.path.parent.is_dir()
