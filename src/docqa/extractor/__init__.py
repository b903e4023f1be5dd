"""Extraction collaborators: raw payload to plain text plus confidence."""

from .base import (
    EXTRACTION_FAILED_CONFIDENCE,
    EXTRACTION_FAILED_TEXT,
    BaseExtractor,
    ExtractionResult,
)
from .factory import ExtractorFactory
from .providers import (
    PdfStreamExtractor,
    PlainTextExtractor,
    UnsupportedMediaExtractor,
    clean_pdf_text,
    is_text_garbled,
)
from .tables import detect_tables

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorFactory",
    "PlainTextExtractor",
    "PdfStreamExtractor",
    "UnsupportedMediaExtractor",
    "clean_pdf_text",
    "is_text_garbled",
    "detect_tables",
    "EXTRACTION_FAILED_TEXT",
    "EXTRACTION_FAILED_CONFIDENCE",
]
