"""Base embedder interface."""

from abc import ABC, abstractmethod


class BaseEmbedder(ABC):
    """Abstract base class for embedding generation.

    Embedders convert text strings into fixed-length vector representations.
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate the embedding of a single text.

        Args:
            text: Text to embed; may be empty

        Returns:
            Vector of length ``dimension``
        """
        pass

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for a list of texts.

        Args:
            texts: List of text strings to embed

        Returns:
            List of embedding vectors (same order as input)

        Raises:
            ValueError: If texts is empty
        """
        if not texts:
            raise ValueError("texts cannot be empty")
        return [self.embed_text(text) for text in texts]

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Return the embedding dimension.

        Returns:
            Size of embedding vectors produced by this embedder
        """
        pass
