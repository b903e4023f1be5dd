"""Top-K ranking of indexed chunks by cosine similarity."""

from collections.abc import Sequence

from loguru import logger

from ..core.chunk import Chunk
from ..core.search_result import SearchResult
from ..utils.similarity import cosine_similarity

DEFAULT_TOP_K = 5


class CosineRanker:
    """Ranks chunks against a query vector.

    Chunks without an embedding are skipped. Equal scores keep the order in
    which chunks were supplied (Python's sort is stable), so ties resolve to
    insertion order when called with the index contents.
    """

    def rank(
        self,
        query_vector: list[float],
        chunks: Sequence[Chunk],
        top_k: int = DEFAULT_TOP_K
    ) -> list[SearchResult]:
        """Return at most ``top_k`` results, highest similarity first.

        Raises:
            ValueError: If top_k is smaller than 1
        """
        if top_k < 1:
            raise ValueError(f"top_k must be a positive integer, got {top_k}")

        scored = [
            SearchResult(
                chunk=chunk,
                score=cosine_similarity(query_vector, chunk.embedding),
                position=position,
            )
            for position, chunk in enumerate(chunks)
            if chunk.has_embedding
        ]

        skipped = len(chunks) - len(scored)
        if skipped:
            logger.debug(f"Skipped {skipped} chunks without embeddings")

        scored.sort(key=lambda result: result.score, reverse=True)
        return scored[:top_k]
