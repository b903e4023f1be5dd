"""In-memory vector store implementation."""

from loguru import logger

from ...core.chunk import Chunk
from ...core.search_result import SearchResult
from ...errors import VectorStoreError
from ...retrieval.ranker import DEFAULT_TOP_K, CosineRanker
from ..base import BaseVectorStore


class InMemoryVectorStore(BaseVectorStore):
    """Append-only in-memory vector store using cosine similarity.

    Attributes:
        _chunks: Chunks in insertion order
        ranker: Ranks stored chunks against a query vector
    """

    def __init__(self, ranker: CosineRanker | None = None):
        """Initialize an empty vector store."""
        self._chunks: list[Chunk] = []
        self.ranker = ranker or CosineRanker()
        logger.debug("Initialized InMemoryVectorStore")

    def add(self, chunks: list[Chunk]) -> None:
        """Add chunks to the store.

        The batch is validated before anything is appended, so a rejected
        batch leaves the store unchanged.
        """
        for chunk in chunks:
            if not chunk.has_embedding:
                raise VectorStoreError(
                    f"Chunk {chunk.id} missing embedding",
                    details={"source_file": chunk.source_file},
                )

        self._chunks.extend(chunks)
        logger.info(f"Added {len(chunks)} chunks to store (total: {len(self._chunks)})")

    def search(
        self,
        query_vector: list[float],
        top_k: int = DEFAULT_TOP_K
    ) -> list[SearchResult]:
        if top_k < 1:
            raise ValueError(f"top_k must be a positive integer, got {top_k}")
        if not self._chunks:
            logger.warning("Store is empty, returning no results")
            return []

        results = self.ranker.rank(query_vector, self._chunks, top_k)
        logger.debug(f"Returning {len(results)} of {len(self._chunks)} chunks")
        return results

    def clear(self) -> None:
        self._chunks = []
        logger.info("Cleared vector store")

    def count(self) -> int:
        return len(self._chunks)

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """Read-only view of stored chunks in insertion order."""
        return tuple(self._chunks)
