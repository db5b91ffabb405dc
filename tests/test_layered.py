"""
Tests for the Layered Store

These tests verify the cache-over-files store:
- Read-through: misses fall through to the file store and populate the cache
- Write-through: set and delete reach both tiers, cache first
- Eviction: evicted keys are still readable from disk
- Error propagation from the file store

Run with: python -m pytest tests/test_layered.py -v
"""

from pathlib import Path

import pytest

from layerkv.cache.eviction import LRUCache
from layerkv.errors import ConfigurationError, InvalidKeyError, NotFoundError, StorageIOError
from layerkv.storage import DEFAULT_CAPACITY, FileStore, LayeredStore


def _fail(*args, **kwargs):
    raise AssertionError("file store must not be touched")


class TestLayeredInit:
    """Test construction."""

    def test_owns_both_tiers(self, tmp_path: Path):
        """Test that the store builds its own cache and file store."""
        store = LayeredStore(tmp_path, capacity=3)
        assert isinstance(store.cache, LRUCache)
        assert isinstance(store.backend, FileStore)
        assert store.cache.capacity == 3
        assert store.backend.root == tmp_path

    def test_default_capacity(self, tmp_path: Path):
        """Test the default cache size."""
        assert LayeredStore(tmp_path).cache.capacity == DEFAULT_CAPACITY == 1024

    def test_invalid_capacity(self, tmp_path: Path):
        """Test that a non-positive capacity is rejected."""
        with pytest.raises(ConfigurationError):
            LayeredStore(tmp_path, capacity=0)


class TestLayeredGet:
    """Test the read path."""

    def test_set_then_get(self, layered_store: LayeredStore):
        """Test that get returns exactly what was set."""
        layered_store.set("key", b"value")
        assert layered_store.get("key") == b"value"

    def test_hit_skips_file_store(self, layered_store: LayeredStore, monkeypatch):
        """Test that a cached key is answered without reading the disk."""
        layered_store.set("key", b"value")
        monkeypatch.setattr(layered_store.backend, "get", _fail)

        assert layered_store.get("key") == b"value"

    def test_miss_reads_through(self, layered_store: LayeredStore):
        """Test that a value written by another process is found and cached."""
        (layered_store.backend.root / "external").write_bytes(b"from disk")

        assert layered_store.get("external") == b"from disk"
        assert layered_store.cache.peek("external") == (b"from disk", True)

    def test_miss_not_found(self, layered_store: LayeredStore):
        """Test that a key in neither tier raises and is not cached."""
        with pytest.raises(NotFoundError):
            layered_store.get("missing")
        assert layered_store.cache.contains("missing") is False

    def test_population_failure_still_returns(self, layered_store: LayeredStore, monkeypatch):
        """Test that a failing cache insert does not fail the read."""
        (layered_store.backend.root / "key").write_bytes(b"value")

        def broken_put(key, value):
            raise ConfigurationError("broken cache")

        monkeypatch.setattr(layered_store.cache, "put", broken_put)

        assert layered_store.get("key") == b"value"

    def test_stats(self, layered_store: LayeredStore):
        """Test hit and miss counters."""
        layered_store.set("key", b"value")
        layered_store.get("key")
        layered_store.cache.clear()
        layered_store.get("key")

        stats = layered_store.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_ratio"] == 0.5
        assert stats["cache"]["size"] == 1


class TestLayeredSet:
    """Test the write path."""

    def test_writes_both_tiers(self, layered_store: LayeredStore):
        """Test that set reaches the cache and the disk."""
        layered_store.set("key", b"value")

        assert layered_store.cache.peek("key") == (b"value", True)
        assert layered_store.backend.get("key") == b"value"

    def test_empty_value(self, layered_store: LayeredStore):
        """Test that an empty value round-trips through both tiers."""
        layered_store.set("empty", b"")
        assert layered_store.get("empty") == b""
        layered_store.cache.clear()
        assert layered_store.get("empty") == b""

    def test_overwrite(self, layered_store: LayeredStore):
        """Test that a second set replaces the value in both tiers."""
        layered_store.set("key", b"one")
        layered_store.set("key", b"two")

        assert layered_store.get("key") == b"two"
        assert layered_store.backend.get("key") == b"two"

    def test_cache_failure_skips_file_store(self, layered_store: LayeredStore, monkeypatch):
        """Test that a cache error aborts the write before the disk is touched."""
        def broken_put(key, value):
            raise ConfigurationError("broken cache")

        monkeypatch.setattr(layered_store.cache, "put", broken_put)
        monkeypatch.setattr(layered_store.backend, "set", _fail)

        with pytest.raises(ConfigurationError):
            layered_store.set("key", b"value")

    def test_file_failure_leaves_cache_ahead(self, layered_store: LayeredStore):
        """Test the documented divergence when the disk write fails."""
        layered_store.set("dir/child", b"child")

        with pytest.raises(StorageIOError):
            layered_store.set("dir", b"value")

        # The cache already took the value; the disk never did
        assert layered_store.get("dir") == b"value"
        layered_store.cache.clear()
        with pytest.raises(StorageIOError):
            layered_store.get("dir")


class TestLayeredDelete:
    """Test the delete path."""

    def test_delete_then_get(self, layered_store: LayeredStore):
        """Test that a deleted key is gone from both tiers."""
        layered_store.set("key", b"value")
        layered_store.delete("key")

        assert layered_store.cache.contains("key") is False
        with pytest.raises(NotFoundError):
            layered_store.get("key")

    def test_delete_missing_key(self, layered_store: LayeredStore):
        """Test that deleting an absent key raises and leaves the cache alone."""
        layered_store.set("other", b"value")
        before = layered_store.cache.get_all_keys()

        with pytest.raises(NotFoundError):
            layered_store.delete("missing-key")

        assert layered_store.cache.get_all_keys() == before
        assert layered_store.cache.contains("missing-key") is False

    def test_delete_missing_on_empty_store(self, layered_store: LayeredStore):
        """Test delete on an empty store."""
        with pytest.raises(NotFoundError):
            layered_store.delete("missing-key")
        assert layered_store.cache.size() == 0

    def test_delete_cached_but_not_persisted(self, layered_store: LayeredStore):
        """Test that a key only in the cache is removed there and still reported missing."""
        layered_store.cache.put("ghost", b"value")

        with pytest.raises(NotFoundError):
            layered_store.delete("ghost")
        assert layered_store.cache.contains("ghost") is False


class TestLayeredEviction:
    """Test interaction of eviction with the file store (capacity 2)."""

    def test_evicted_key_reads_through(self, layered_store: LayeredStore):
        """Test that an evicted key is still served and re-cached."""
        layered_store.set("a", b"A")
        layered_store.set("b", b"B")
        layered_store.set("c", b"C")

        assert layered_store.cache.contains("a") is False
        assert layered_store.get("a") == b"A"
        assert layered_store.cache.contains("a") is True

    def test_capacity_two_scenario(self, layered_store: LayeredStore):
        """Test the canonical set a, b, c then get a sequence."""
        layered_store.set("a", b"A")
        layered_store.set("b", b"B")
        layered_store.set("c", b"C")
        assert layered_store.cache.get_all_keys() == ["b", "c"]

        assert layered_store.get("a") == b"A"

        assert layered_store.cache.get_all_keys() == ["c", "a"]
        assert layered_store.get_stats()["misses"] == 1

    def test_cache_never_exceeds_capacity(self, layered_store: LayeredStore):
        """Test the resident count over many keys."""
        for i in range(20):
            layered_store.set(f"key{i}", str(i).encode())
            assert layered_store.cache.size() <= 2

        for i in range(20):
            assert layered_store.get(f"key{i}") == str(i).encode()


class TestLayeredKeys:
    """Test that key spellings and bad input never split or poison the tiers."""

    def test_aliased_set_replaces_cached_value(self, layered_store: LayeredStore):
        """Test that writing through one spelling updates reads through another."""
        layered_store.set("a/b", b"OLD")
        layered_store.set("a/./b", b"NEW")

        assert layered_store.get("a/b") == b"NEW"
        assert layered_store.backend.get("a/b") == b"NEW"
        assert layered_store.cache.get_all_keys() == ["a/b"]

    def test_aliased_delete_drops_cached_value(self, layered_store: LayeredStore):
        """Test that deleting through one spelling removes every spelling."""
        layered_store.set("a/b", b"value")
        layered_store.get("/a/b")

        layered_store.delete("a//b/")

        assert layered_store.cache.size() == 0
        for key in ("a/b", "/a/b", "a/./b"):
            with pytest.raises(NotFoundError):
                layered_store.get(key)

    def test_nul_key_touches_neither_tier(self, layered_store: LayeredStore):
        """Test that an unstorable key is refused before the cache takes it."""
        with pytest.raises(InvalidKeyError):
            layered_store.set("a\x00b", b"value")

        assert layered_store.cache.size() == 0
        assert list(layered_store.backend.root.iterdir()) == []

        with pytest.raises(InvalidKeyError):
            layered_store.get("zz\x00")
        with pytest.raises(InvalidKeyError):
            layered_store.delete("zz\x00")

    def test_root_key_refused(self, layered_store: LayeredStore):
        """Test that a key naming the root directory is refused."""
        with pytest.raises(InvalidKeyError):
            layered_store.set("/", b"value")
        assert layered_store.cache.size() == 0

    def test_rejects_non_bytes(self, layered_store: LayeredStore):
        """Test that an int value fails before either tier is written."""
        with pytest.raises(TypeError):
            layered_store.set("key", 5)

        assert layered_store.cache.contains("key") is False
        with pytest.raises(NotFoundError):
            layered_store.backend.get("key")

    def test_stats_come_from_cache(self, layered_store: LayeredStore):
        """Test that hit and miss counts match the cache's own counters."""
        layered_store.set("key", b"value")
        layered_store.get("key")
        layered_store.get("key")
        with pytest.raises(NotFoundError):
            layered_store.get("missing")

        stats = layered_store.get_stats()
        assert stats["hits"] == stats["cache"]["hits"] == 2
        assert stats["misses"] == stats["cache"]["misses"] == 1
