"""Base vector store interface."""

from abc import ABC, abstractmethod

from ..core.chunk import Chunk
from ..core.search_result import SearchResult


class BaseVectorStore(ABC):
    """Abstract base class for vector storage and similarity search.

    Stores are append-only: chunks are added in batches and can only be
    removed all at once with ``clear``.
    """

    @abstractmethod
    def add(self, chunks: list[Chunk]) -> None:
        """Add chunks to the store.

        Args:
            chunks: Chunks with embeddings to store

        Raises:
            VectorStoreError: If any chunk lacks an embedding
        """
        pass

    @abstractmethod
    def search(
        self,
        query_vector: list[float],
        top_k: int = 5
    ) -> list[SearchResult]:
        """Search for similar chunks using vector similarity.

        Args:
            query_vector: Query embedding vector
            top_k: Number of results to return

        Returns:
            List of search results, sorted by score descending
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every chunk."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Get the total number of chunks in this store."""
        pass
