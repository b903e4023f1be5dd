"""Extractor for media types nothing else handles."""

from ...errors import ExtractionError
from ..base import BaseExtractor, ExtractionResult


class UnsupportedMediaExtractor(BaseExtractor):
    """Always degrades to the extraction-failed placeholder."""

    def _extract(self, payload: bytes | str, media_type: str) -> ExtractionResult:
        raise ExtractionError(f"No extractor for media type '{media_type}'")
