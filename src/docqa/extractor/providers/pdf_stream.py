"""Best-effort text recovery from a raw PDF byte stream.

This is not a PDF parser. It decodes the bytes, strips the most common PDF
syntax and keeps only sentence-like runs of readable words. Compressed or
scanned PDFs come out garbled and are reported as an extraction failure.
"""

import re

from loguru import logger

from ...errors import ExtractionError
from ..base import BaseExtractor, ExtractionResult

_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F-\x9F]")
_PDF_NAME = re.compile(r"/[A-Za-z]+\s+")
_OBJ_HEADER = re.compile(r"\d+\s+\d+\s+obj")
_STREAM_BODY = re.compile(r"stream[\s\S]*?endstream")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_ALPHA = re.compile(r"[a-zA-Z]")
_SPECIAL_CHAR = re.compile(r"[^a-zA-Z0-9\s.,!?;:()\-]")
_READABLE_WORD = re.compile(r"[a-zA-Z]+")


def clean_pdf_text(text: str) -> str:
    """Strip PDF syntax and keep sentences of at least three readable words."""
    text = _CONTROL_CHARS.sub(" ", text)
    text = _PDF_NAME.sub(" ", text)
    text = _OBJ_HEADER.sub(" ", text)
    text = text.replace("endobj", " ")
    text = _STREAM_BODY.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()

    sentences = []
    for sentence in _SENTENCE_BOUNDARY.split(text):
        cleaned = sentence.strip()
        if len(cleaned) > 10 and _ALPHA.search(cleaned) and len(cleaned.split(" ")) > 2:
            sentences.append(cleaned)

    return ". ".join(sentences).strip()


def is_text_garbled(text: str, max_special_ratio: float = 0.3, min_readable_ratio: float = 0.3) -> bool:
    """Heuristic check for extraction output that is mostly noise."""
    if not text or len(text) < 10:
        return True

    special_ratio = len(_SPECIAL_CHAR.findall(text)) / len(text)

    words = _WHITESPACE.split(text)
    readable = [w for w in words if len(w) > 2 and _READABLE_WORD.fullmatch(w)]
    readable_ratio = len(readable) / len(words)

    return special_ratio > max_special_ratio or readable_ratio < min_readable_ratio


class PdfStreamExtractor(BaseExtractor):
    """Recovers readable sentences from uncompressed PDF content."""

    def _extract(self, payload: bytes | str, media_type: str) -> ExtractionResult:
        raw = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes) else payload
        text = clean_pdf_text(raw)

        if is_text_garbled(text):
            raise ExtractionError(
                "PDF text stream is unreadable",
                details={"bytes": len(payload), "recovered_chars": len(text)},
            )

        logger.debug(f"Recovered {len(text)} characters from PDF stream")
        return ExtractionResult(text=text)
