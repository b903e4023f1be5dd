"""Plain text extractor."""

from loguru import logger

from ..base import BaseExtractor, ExtractionResult


class PlainTextExtractor(BaseExtractor):
    """Decodes text payloads as-is.

    Attributes:
        encoding: Character encoding used for byte payloads
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _extract(self, payload: bytes | str, media_type: str) -> ExtractionResult:
        if isinstance(payload, bytes):
            text = payload.decode(self.encoding, errors="ignore")
        else:
            text = payload

        logger.debug(f"Extracted {len(text)} characters of {media_type}")
        return ExtractionResult(text=text)
