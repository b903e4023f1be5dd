"""Template synthesizer: stitches the best passages into an answer."""

import re

from loguru import logger

from ...chunker.base import NO_READABLE_TEXT_MARKER
from ...core.chunk import Chunk
from ..base import BaseSynthesizer

NO_RELEVANT_INFORMATION_MESSAGE = (
    "I couldn't find relevant information in the uploaded documents to answer "
    "your question. Please try rephrasing your query or upload more relevant documents."
)

UNREADABLE_DOCUMENTS_MESSAGE = (
    "I was unable to extract readable text from the uploaded documents. Please try:\n\n"
    "• Uploading the document as a high-quality image (JPG/PNG)\n"
    "• Ensuring the document is clear and not corrupted\n"
    "• Using a different file format if possible\n\n"
    "The system works best with clear, high-resolution documents."
)

ANSWER_PREAMBLE = "Based on the uploaded documents:\n\n"
LIMITED_CONTENT_NOTE = (
    "\n\n*Note: Limited content was extracted. For better results, "
    "try uploading clearer documents or images.*"
)

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^\w\s.,!?;:()\-]", re.ASCII)
_ALPHA = re.compile(r"[a-zA-Z]")


def clean_content(content: str) -> str:
    """Collapse whitespace and drop characters outside a small punctuation set."""
    collapsed = _WHITESPACE.sub(" ", content)
    return _DISALLOWED.sub("", collapsed).strip()


def calculate_confidence(chunks: list[Chunk], default_confidence: float = 0.8) -> float:
    """Mean extraction confidence of ``chunks``, clamped to [0, 1].

    Chunks with no recorded confidence count as ``default_confidence``.
    An empty list scores 0.
    """
    if not chunks:
        return 0.0

    total = sum(
        default_confidence if chunk.confidence is None else chunk.confidence
        for chunk in chunks
    )
    return max(0.0, min(total / len(chunks), 1.0))


class TemplateSynthesizer(BaseSynthesizer):
    """Builds a fixed-format answer from the most relevant readable chunks.

    The top readable chunk is quoted with its source file, up to
    ``max_additional`` further chunks are listed as short previews, and a
    footer reports how many sections were used.

    Attributes:
        min_meaningful_length: Chunks this short or shorter are not quoted
        max_additional: Number of preview bullets after the main quote
        preview_chars: Preview length before truncation with "..."
        default_confidence: Confidence assumed for chunks without one
    """

    def __init__(
        self,
        min_meaningful_length: int = 20,
        max_additional: int = 2,
        preview_chars: int = 100,
        default_confidence: float = 0.8,
    ):
        if not 0.0 <= default_confidence <= 1.0:
            raise ValueError("default_confidence must be between 0.0 and 1.0")

        self.min_meaningful_length = min_meaningful_length
        self.max_additional = max_additional
        self.preview_chars = preview_chars
        self.default_confidence = default_confidence

    def synthesize(self, query: str, ranked_chunks: list[Chunk]) -> tuple[str, float]:
        if not ranked_chunks:
            return NO_RELEVANT_INFORMATION_MESSAGE, 0.0

        confidence = calculate_confidence(ranked_chunks, self.default_confidence)

        meaningful = [chunk for chunk in ranked_chunks if self.is_meaningful(chunk)]
        if not meaningful:
            logger.warning(f"No readable chunks among {len(ranked_chunks)} retrieved")
            return UNREADABLE_DOCUMENTS_MESSAGE, confidence

        return self._compose(meaningful), confidence

    def is_meaningful(self, chunk: Chunk) -> bool:
        content = chunk.content
        return (
            len(content) > self.min_meaningful_length
            and _ALPHA.search(content) is not None
            and NO_READABLE_TEXT_MARKER not in content
        )

    def _compose(self, meaningful: list[Chunk]) -> str:
        top = meaningful[0]
        answer = ANSWER_PREAMBLE
        answer += f'From {top.source_file}:\n"{clean_content(top.content)}"\n\n'

        additional = meaningful[1:1 + self.max_additional]
        if additional:
            answer += "Additional relevant information:\n"
            for chunk in additional:
                answer += f"• {self._preview(clean_content(chunk.content))}\n"

        answer += f"\n*Retrieved from {len(meaningful)} relevant document section(s)*"

        if len(meaningful) < 2:
            answer += LIMITED_CONTENT_NOTE

        return answer

    def _preview(self, content: str) -> str:
        if len(content) > self.preview_chars:
            return content[: self.preview_chars] + "..."
        return content
