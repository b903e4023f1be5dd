"""Extractor factory: picks an extractor for a media type."""

from loguru import logger

from .base import BaseExtractor
from .providers.pdf_stream import PdfStreamExtractor
from .providers.plain_text import PlainTextExtractor
from .providers.unsupported import UnsupportedMediaExtractor


class ExtractorFactory:
    """Registry of extractor classes keyed by media type.

    Exact media types are matched first, then ``<major>/*`` wildcards.
    Anything else gets an ``UnsupportedMediaExtractor``.
    """

    _registry: dict[str, type[BaseExtractor]] = {
        "text/*": PlainTextExtractor,
        "application/pdf": PdfStreamExtractor,
    }

    @classmethod
    def for_media_type(cls, media_type: str) -> BaseExtractor:
        media_type = media_type.lower().split(";")[0].strip()
        major = media_type.split("/")[0]

        extractor_class = cls._registry.get(media_type) or cls._registry.get(f"{major}/*")
        if extractor_class is None:
            logger.warning(f"No extractor registered for '{media_type}'")
            extractor_class = UnsupportedMediaExtractor

        return extractor_class()

    @classmethod
    def register(cls, media_type: str, extractor_class: type[BaseExtractor]):
        """Register an extractor for a media type or ``<major>/*`` pattern.

        Raises:
            TypeError: If extractor_class is not a subclass of BaseExtractor
        """
        if not issubclass(extractor_class, BaseExtractor):
            raise TypeError(
                f"{extractor_class.__name__} must be a subclass of BaseExtractor"
            )

        cls._registry[media_type.lower()] = extractor_class
        logger.info(f"Registered extractor for '{media_type}': {extractor_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry.keys())
