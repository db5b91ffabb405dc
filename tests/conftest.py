"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from layerkv.api import create_app
from layerkv.cache.eviction import LRUCache
from layerkv.client import open_layered, open_memory
from layerkv.storage import (
    CacheStore,
    FileStore,
    GuardedStore,
    LayeredStore,
    MemoryStore,
)


# ============================================================================
# LRU Cache Fixtures
# ============================================================================

@pytest.fixture
def lru_cache() -> LRUCache:
    """Create an LRU cache for testing (5 items max)."""
    return LRUCache(capacity=5)


# ============================================================================
# Backend Fixtures
# ============================================================================

@pytest.fixture
def memory_store() -> MemoryStore:
    """Create a fresh in-memory store."""
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path: Path) -> FileStore:
    """Create a file store rooted in a temporary directory."""
    return FileStore(tmp_path / "data")


@pytest.fixture
def cache_store() -> CacheStore:
    """Create a cache-only store (5 items max)."""
    return CacheStore(capacity=5)


@pytest.fixture
def layered_store(tmp_path: Path) -> LayeredStore:
    """Create a layered store with a small cache for eviction testing (2 items)."""
    return LayeredStore(tmp_path / "data", capacity=2)


@pytest.fixture
def guarded_store(tmp_path: Path) -> GuardedStore:
    """Create a thread-safe layered store (default capacity)."""
    return open_layered(tmp_path / "data")


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def client(guarded_store: GuardedStore) -> TestClient:
    """HTTP client for an app serving a layered store."""
    return TestClient(create_app(guarded_store))


@pytest.fixture
def memory_client() -> TestClient:
    """HTTP client for an app serving an in-memory store."""
    return TestClient(create_app(open_memory()))
