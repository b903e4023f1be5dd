"""Sentence-window chunker implementation."""

import re

from loguru import logger

from ...core.chunk import Chunk, ChunkType
from ..base import (
    NO_READABLE_TEXT_CONFIDENCE,
    NO_READABLE_TEXT_MESSAGE,
    BaseChunker,
)

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


class SentenceWindowChunker(BaseChunker):
    """Chunks text into overlapping windows of sentences.

    Windows of ``window_size`` sentences start every ``stride`` sentences, so
    with the defaults (3, 2) neighbouring windows share one sentence. Text
    without usable sentences falls back to windows of ``line_window`` lines,
    and as a last resort to a single truncated chunk.

    Attributes:
        window_size: Sentences per chunk
        stride: Sentences between the starts of consecutive chunks
        min_text_length: Texts shorter than this yield the placeholder chunk
        min_sentence_length: Trimmed fragments shorter than this are dropped
        line_window: Lines per chunk in the line-based fallback
        fallback_max_chars: Length of the last-resort chunk before "..."
    """

    def __init__(
        self,
        window_size: int = 3,
        stride: int = 2,
        min_text_length: int = 10,
        min_sentence_length: int = 10,
        line_window: int = 3,
        fallback_max_chars: int = 500,
    ):
        """Initialize the chunker.

        Raises:
            ValueError: If a size is not positive or stride exceeds window_size
        """
        if window_size <= 0:
            raise ValueError("window_size must be positive")
        if stride <= 0 or stride > window_size:
            raise ValueError("stride must be in [1, window_size]")
        if line_window <= 0:
            raise ValueError("line_window must be positive")
        if fallback_max_chars <= 0:
            raise ValueError("fallback_max_chars must be positive")

        self.window_size = window_size
        self.stride = stride
        self.min_text_length = min_text_length
        self.min_sentence_length = min_sentence_length
        self.line_window = line_window
        self.fallback_max_chars = fallback_max_chars

    def chunk(
        self,
        text: str,
        source_file: str,
        confidence: float | None = None
    ) -> list[Chunk]:
        if not text or len(text) < self.min_text_length:
            logger.warning(f"No readable text in '{source_file}', emitting placeholder chunk")
            return [
                Chunk(
                    content=NO_READABLE_TEXT_MESSAGE,
                    type=ChunkType.TEXT,
                    source_file=source_file,
                    confidence=NO_READABLE_TEXT_CONFIDENCE,
                )
            ]

        sentences = self._split_sentences(text)
        if sentences:
            pieces = self._sentence_windows(sentences)
        else:
            logger.debug(f"No sentences found in '{source_file}', grouping by lines")
            pieces = self._line_windows(text)

        if not pieces:
            truncated = text[: self.fallback_max_chars]
            if len(text) > self.fallback_max_chars:
                truncated += "..."
            pieces = [truncated]

        chunks = [
            Chunk(
                content=piece,
                type=ChunkType.TEXT,
                source_file=source_file,
                confidence=confidence,
            )
            for piece in pieces
        ]
        for index, chunk in enumerate(chunks):
            chunk.metadata["chunk_index"] = index

        logger.debug(f"Split '{source_file}' into {len(chunks)} chunks")
        return chunks

    def _split_sentences(self, text: str) -> list[str]:
        fragments = (fragment.strip() for fragment in SENTENCE_BOUNDARY.split(text))
        return [f for f in fragments if len(f) >= self.min_sentence_length]

    def _sentence_windows(self, sentences: list[str]) -> list[str]:
        windows = []
        for start in range(0, len(sentences), self.stride):
            joined = ". ".join(sentences[start:start + self.window_size]).strip()
            if joined:
                windows.append(joined + ".")
        return windows

    def _line_windows(self, text: str) -> list[str]:
        lines = text.split("\n")
        windows = []
        for start in range(0, len(lines), self.line_window):
            joined = "\n".join(lines[start:start + self.line_window]).strip()
            if joined:
                windows.append(joined)
        return windows
