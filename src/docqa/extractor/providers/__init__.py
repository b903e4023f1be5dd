"""Provider implementations for extractors."""

from .pdf_stream import PdfStreamExtractor, clean_pdf_text, is_text_garbled
from .plain_text import PlainTextExtractor
from .unsupported import UnsupportedMediaExtractor

__all__ = [
    "PlainTextExtractor",
    "PdfStreamExtractor",
    "UnsupportedMediaExtractor",
    "clean_pdf_text",
    "is_text_garbled",
]
