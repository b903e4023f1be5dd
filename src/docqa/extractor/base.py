"""Base extractor interface.

Extractors stand in for the OCR / text-extraction collaborator. They turn a
raw payload into best-effort plain text and an optional confidence. They
never raise: any failure becomes a placeholder text with low confidence.
"""

from abc import ABC, abstractmethod

from loguru import logger
from pydantic import BaseModel, Field

from ..errors import wrap_exception

EXTRACTION_FAILED_TEXT = (
    "Document uploaded successfully, but text extraction encountered issues. "
    "Please try uploading the document as an image (JPG/PNG) for better OCR results."
)
EXTRACTION_FAILED_CONFIDENCE = 0.1


class ExtractionResult(BaseModel):
    """Output of an extractor.

    Attributes:
        text: Cleaned plain text (may be empty)
        confidence: Extraction confidence in [0, 1], None when not measured
    """

    text: str = ""
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)

    model_config = {
        "frozen": True,
    }


class BaseExtractor(ABC):
    """Abstract base class for text extraction."""

    def extract(self, payload: bytes | str, media_type: str) -> ExtractionResult:
        """Extract text from a payload.

        Args:
            payload: Raw document bytes, or already-decoded text
            media_type: Declared media type label, e.g. "application/pdf"

        Returns:
            The extraction result; a degraded placeholder on failure
        """
        try:
            return self._extract(payload, media_type)
        except Exception as e:
            error = wrap_exception(e, context="extraction")
            logger.warning(f"{type(self).__name__} failed for {media_type}: {error}")
            return ExtractionResult(
                text=EXTRACTION_FAILED_TEXT,
                confidence=EXTRACTION_FAILED_CONFIDENCE,
            )

    @abstractmethod
    def _extract(self, payload: bytes | str, media_type: str) -> ExtractionResult:
        """Do the extraction; may raise."""
        pass
