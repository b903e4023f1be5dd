"""Base chunker interface."""

from abc import ABC, abstractmethod

from ..core.chunk import Chunk

NO_READABLE_TEXT_MARKER = "No readable text could be extracted"
NO_READABLE_TEXT_MESSAGE = (
    f"{NO_READABLE_TEXT_MARKER} from this document. Please ensure the document "
    "is clear and try uploading it as a high-quality image."
)
NO_READABLE_TEXT_CONFIDENCE = 0.1


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split extracted text into smaller pieces suitable
    for embedding and retrieval. Every call returns at least one chunk.
    """

    @abstractmethod
    def chunk(
        self,
        text: str,
        source_file: str,
        confidence: float | None = None
    ) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Plain text produced by an extraction collaborator
            source_file: Name of the originating document
            confidence: Optional extraction confidence copied onto each chunk

        Returns:
            Non-empty list of chunks
        """
        pass
