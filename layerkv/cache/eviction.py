"""
LRU Eviction Cache Module

Fixed-capacity mapping from key to value that evicts the least recently
used entry when a new key would push it over capacity.

Layout:
- A dict maps each key to its list node
- Nodes form a circular doubly-linked list around a sentinel
- sentinel.next is the least recently used entry, sentinel.prev the most
- On access (get/put), unlink the node and relink it before the sentinel
- On eviction, unlink sentinel.next
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Optional[str] = None, value: Any = None):
        self.key = key
        self.value = value
        self.prev: "_Node" = self
        self.next: "_Node" = self


def validate_capacity(capacity: Any) -> int:
    """
    Check that capacity is a positive integer.

    Raises:
        ConfigurationError: If capacity is not an int or is not positive
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConfigurationError(f"capacity must be an integer, got {capacity!r}")
    if capacity <= 0:
        raise ConfigurationError(f"capacity must be positive, got {capacity}")
    return capacity


class LRUCache:
    """
    Least Recently Used (LRU) cache with O(1) get, put and delete.

    Usage:
        cache = LRUCache(capacity=100)
        cache.put("key1", b"value1")
        value, found = cache.get("key1")  # (b"value1", True), marks as recently used

    When a new key is inserted into a full cache, the least recently used
    entry is evicted. Updating an existing key never evicts.

    This class is not thread-safe; wrap it (or the store holding it) in a
    GuardedStore for concurrent use.

    Attributes:
        capacity: Maximum number of resident entries
    """

    def __init__(self, capacity: int):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries (must be a positive int)

        Raises:
            ConfigurationError: If capacity is invalid
        """
        self.capacity = validate_capacity(capacity)
        self._map: Dict[str, _Node] = {}
        self._sentinel = _Node()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    # -- linked list helpers --------------------------------------------------

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node

    def _append(self, node: _Node) -> None:
        # Insert just before the sentinel, i.e. at the MRU end
        last = self._sentinel.prev
        last.next = node
        node.prev = last
        node.next = self._sentinel
        self._sentinel.prev = node

    def _touch(self, node: _Node) -> None:
        self._unlink(node)
        self._append(node)

    # -- public API -------------------------------------------------------------

    def get(self, key: str) -> Tuple[Any, bool]:
        """
        Get an item and mark it as recently used.

        Args:
            key: The key to retrieve

        Returns:
            (value, True) if found, (None, False) otherwise

        Time Complexity: O(1)
        """
        node = self._map.get(key)
        if node is None:
            self._misses += 1
            return None, False

        self._hits += 1
        self._touch(node)
        return node.value, True

    def put(self, key: str, value: Any) -> Optional[str]:
        """
        Insert or update an item, evicting the LRU entry if necessary.

        Args:
            key: The key to store
            value: The value to store

        Returns:
            The evicted key if eviction occurred, None otherwise

        Time Complexity: O(1)
        """
        node = self._map.get(key)
        if node is not None:
            node.value = value
            self._touch(node)
            return None

        node = _Node(key, value)
        self._map[key] = node
        self._append(node)

        if len(self._map) > self.capacity:
            evicted_key, _ = self.evict_lru()
            logger.debug(f"Evicted {evicted_key!r} to admit {key!r}")
            return evicted_key
        return None

    def delete(self, key: str) -> bool:
        """
        Delete an item. Deleting an absent key is a no-op.

        Returns:
            True if deleted, False if not found

        Time Complexity: O(1)
        """
        node = self._map.pop(key, None)
        if node is None:
            return False
        self._unlink(node)
        return True

    def contains(self, key: str) -> bool:
        """Check if key is resident (without updating LRU order)."""
        return key in self._map

    def peek(self, key: str) -> Tuple[Any, bool]:
        """
        Get value without updating LRU order or hit/miss counters.

        Returns:
            (value, True) if found, (None, False) otherwise
        """
        node = self._map.get(key)
        if node is None:
            return None, False
        return node.value, True

    def evict_lru(self) -> Optional[Tuple[str, Any]]:
        """
        Evict the least recently used item.

        Returns:
            Tuple of (key, value) that was evicted, or None if cache is empty
        """
        node = self._sentinel.next
        if node is self._sentinel:
            return None
        self._unlink(node)
        del self._map[node.key]
        self._evictions += 1
        return node.key, node.value

    def get_lru_key(self) -> Optional[str]:
        """Get the key of the least recently used item without evicting."""
        node = self._sentinel.next
        return None if node is self._sentinel else node.key

    def get_mru_key(self) -> Optional[str]:
        """Get the key of the most recently used item."""
        node = self._sentinel.prev
        return None if node is self._sentinel else node.key

    def get_all_keys(self) -> List[str]:
        """
        Get all keys in LRU order.

        Returns:
            List of keys from LRU (oldest) to MRU (newest)
        """
        keys = []
        node = self._sentinel.next
        while node is not self._sentinel:
            keys.append(node.key)
            node = node.next
        return keys

    def size(self) -> int:
        """Get current number of items in cache."""
        return len(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def is_full(self) -> bool:
        """Check if cache is at capacity."""
        return len(self._map) >= self.capacity

    def clear(self) -> None:
        """Remove all items from cache."""
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            node.prev = node.next = node
            node = following
        self._sentinel.prev = self._sentinel.next = self._sentinel
        self._map.clear()

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "size": len(self._map),
            "capacity": self.capacity,
            "utilization": len(self._map) / self.capacity,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "lru_key": self.get_lru_key(),
            "mru_key": self.get_mru_key(),
        }
