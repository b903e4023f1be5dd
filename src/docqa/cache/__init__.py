"""
DocQA Cache Module.

Exact-key caches used to memoize pipeline work.
"""

from docqa.cache.base import BaseCache
from docqa.cache.lru import LRUCache

__all__ = ["BaseCache", "LRUCache"]
