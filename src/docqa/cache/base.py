"""Base cache interface for DocQA."""

from abc import ABC, abstractmethod
from typing import Any


class BaseCache(ABC):
    """
    Abstract base class for caching implementations.

    Caches map an exact string key to a stored value. Lookups never
    compute anything; callers fill the cache on a miss.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Get a value by exact key match.

        Args:
            key: The cache key

        Returns:
            The stored value, or None on a miss
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Store a value.

        Args:
            key: The cache key
            value: The value to store
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cache entries."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Return the number of entries in the cache."""
        pass
