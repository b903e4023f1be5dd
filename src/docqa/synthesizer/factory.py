"""Synthesizer factory for creating synthesizer instances."""

from typing import Any
from loguru import logger

from ..errors import ConfigurationError
from .base import BaseSynthesizer
from .providers.template import TemplateSynthesizer


class SynthesizerFactory:
    """Factory for creating synthesizer instances based on type."""

    _registry: dict[str, type[BaseSynthesizer]] = {
        "template": TemplateSynthesizer,
    }

    @classmethod
    def create(cls, synthesizer_type: str, **params: Any) -> BaseSynthesizer:
        """Create a synthesizer instance by type.

        Raises:
            ConfigurationError: If synthesizer type is not registered
        """
        if synthesizer_type not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown synthesizer type: '{synthesizer_type}'. "
                f"Available types: {available}"
            )

        synthesizer_class = cls._registry[synthesizer_type]
        logger.debug(f"Creating {synthesizer_class.__name__} with params: {params}")

        return synthesizer_class(**params)

    @classmethod
    def register(cls, synthesizer_type: str, synthesizer_class: type[BaseSynthesizer]):
        """Register a new synthesizer type.

        Raises:
            TypeError: If synthesizer_class is not a subclass of BaseSynthesizer
        """
        if not issubclass(synthesizer_class, BaseSynthesizer):
            raise TypeError(
                f"{synthesizer_class.__name__} must be a subclass of BaseSynthesizer"
            )

        cls._registry[synthesizer_type] = synthesizer_class
        logger.info(f"Registered synthesizer type '{synthesizer_type}': {synthesizer_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry.keys())
