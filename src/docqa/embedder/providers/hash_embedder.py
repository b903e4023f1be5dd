"""Deterministic hashed bag-of-words embedder (no external model)."""

import numpy as np
from loguru import logger

from ...cache.lru import LRUCache
from ...utils.similarity import normalize
from ..base import BaseEmbedder

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def rolling_hash(word: str) -> int:
    """32-bit polynomial rolling hash (``h = h * 31 + code``), signed.

    Examples:
        >>> rolling_hash("")
        0
        >>> rolling_hash("a")
        97
        >>> rolling_hash("ab")
        3105
    """
    h = 0
    for char in word:
        h = (h * 31 + ord(char)) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


class HashEmbedder(BaseEmbedder):
    """Maps text to a unit vector by hashing its words into buckets.

    Each whitespace-separated, lower-cased word adds ``1 / (word_count + 1)``
    to bucket ``abs(rolling_hash(word)) % dimension``; the result is then
    normalized. Identical text always yields an identical vector. Text with
    no words yields the zero vector.

    Vectors are memoized per exact input string in a bounded LRU cache.

    Attributes:
        dimension: Embedding vector dimension
        cache: LRU cache of computed vectors
    """

    def __init__(self, dimension: int = 384, cache_size: int = 10000):
        """Initialize the hash embedder.

        Args:
            dimension: Size of embedding vectors
            cache_size: Maximum number of memoized texts (0 = unbounded)

        Raises:
            ValueError: If dimension is not positive
        """
        if dimension <= 0:
            raise ValueError("dimension must be positive")

        self._dimension = dimension
        self.cache = LRUCache(capacity=cache_size)
        logger.debug(f"Initialized HashEmbedder (dimension={dimension}, cache_size={cache_size})")

    def embed_text(self, text: str) -> list[float]:
        cached = self.cache.get(text)
        if cached is not None:
            return cached

        vector = self._compute(text)
        self.cache.set(text, vector)
        return vector

    def _compute(self, text: str) -> list[float]:
        words = text.lower().split()
        vector = np.zeros(self._dimension, dtype=np.float64)
        if not words:
            return vector.tolist()

        weight = 1.0 / (len(words) + 1)
        for word in words:
            vector[abs(rolling_hash(word)) % self._dimension] += weight

        return normalize(vector).tolist()

    @property
    def dimension(self) -> int:
        """Return the embedding dimension."""
        return self._dimension
