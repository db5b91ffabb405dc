"""Cache module for layerkv."""

from .eviction import LRUCache, validate_capacity

__all__ = ["LRUCache", "validate_capacity"]
