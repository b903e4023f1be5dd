"""Base synthesizer interface."""

from abc import ABC, abstractmethod

from ..core.chunk import Chunk


class BaseSynthesizer(ABC):
    """Abstract base class for answer synthesis.

    Synthesizers turn ranked chunks into an answer string and a
    confidence score in [0, 1]. They never raise on degenerate input.
    """

    @abstractmethod
    def synthesize(self, query: str, ranked_chunks: list[Chunk]) -> tuple[str, float]:
        """Compose an answer.

        Args:
            query: The user's question
            ranked_chunks: Retrieved chunks, most relevant first

        Returns:
            Tuple of (answer, confidence)
        """
        pass
