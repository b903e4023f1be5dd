"""Embedder wrapper that never raises."""

import numpy as np
from loguru import logger

from ...errors import wrap_exception
from ...utils.similarity import normalize
from ..base import BaseEmbedder


class FallbackEmbedder(BaseEmbedder):
    """Wraps a fallible embedder and substitutes a random unit vector on error.

    Ranking keeps working when the wrapped backend fails, at the cost of the
    affected text ranking arbitrarily.

    Attributes:
        inner: The wrapped embedder
        fallback_count: Number of failures absorbed so far
    """

    def __init__(self, inner: BaseEmbedder, seed: int | None = None):
        self.inner = inner
        self.fallback_count = 0
        self._rng = np.random.default_rng(seed)

    def embed_text(self, text: str) -> list[float]:
        try:
            return self.inner.embed_text(text)
        except Exception as e:
            self.fallback_count += 1
            error = wrap_exception(e, context="embedding")
            logger.error(f"Embedding failed, using random vector: {error}")
            return self._random_unit_vector()

    def _random_unit_vector(self) -> list[float]:
        vector = normalize(self._rng.standard_normal(self.dimension))
        return vector.tolist()

    @property
    def dimension(self) -> int:
        return self.inner.dimension
