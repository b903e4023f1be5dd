"""
Bounded LRU cache keyed by exact text.

Used by embedders to memoize vectors. Entries are evicted least recently
used first once ``capacity`` is reached; a capacity of 0 means unbounded.

Example:
    >>> cache = LRUCache(capacity=2)
    >>> cache.set("a", [1.0])
    >>> cache.get("a")
    [1.0]
"""

import threading
from collections import OrderedDict
from typing import Any

from loguru import logger

from .base import BaseCache


class LRUCache(BaseCache):
    """
    Thread-safe least-recently-used cache.

    Attributes:
        capacity: Maximum number of entries (0 = unlimited)
    """

    def __init__(self, capacity: int = 10000):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")

        self.capacity = capacity

        # OrderedDict for LRU eviction
        self._cache: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.RLock()

        # Stats
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._cache:
                self._misses += 1
                return None

            # Move to end for LRU
            self._cache.move_to_end(key)
            self._hits += 1
            return self._cache[key]

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._cache[key] = value
                return

            self._evict_if_needed()
            self._cache[key] = value

    def _evict_if_needed(self) -> None:
        """Evict oldest entries until there is room for one more."""
        if self.capacity <= 0:
            return

        while len(self._cache) >= self.capacity:
            evicted_key, _ = self._cache.popitem(last=False)
            self._evictions += 1
            logger.debug(f"Evicted cache entry: '{evicted_key[:50]}'")

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with hits, misses, hit_rate, evictions, size, capacity
        """
        with self._lock:
            total = self._hits + self._misses
            return {
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total > 0 else 0.0,
                "evictions": self._evictions,
                "size": len(self._cache),
                "capacity": self.capacity,
            }
