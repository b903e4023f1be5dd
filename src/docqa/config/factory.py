"""Component factory for dynamic loading using type-based configuration."""

from loguru import logger

from ..chunker import BaseChunker, ChunkerFactory
from ..embedder import BaseEmbedder, EmbedderFactory
from ..errors import ConfigurationError
from ..synthesizer import BaseSynthesizer, SynthesizerFactory
from .models import ComponentConfig, EmbedderConfig


class ComponentFactory:
    """Unified factory for creating all component types.

    This factory delegates to specialized factories based on component type.
    Invalid parameters surface as ConfigurationError.
    """

    @staticmethod
    def create_chunker(config: ComponentConfig) -> BaseChunker:
        """Create a chunker from configuration."""
        logger.info(f"Creating chunker: {config.type}")
        try:
            return ChunkerFactory.create(config.type, **config.params)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid chunker params for '{config.type}'", original_error=e) from e

    @staticmethod
    def create_embedder(config: EmbedderConfig) -> BaseEmbedder:
        """Create an embedder from configuration."""
        logger.info(f"Creating embedder: {config.type}")
        try:
            return EmbedderFactory.create(
                config.type, fallback_on_error=config.fallback_on_error, **config.params
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid embedder params for '{config.type}'", original_error=e) from e

    @staticmethod
    def create_synthesizer(config: ComponentConfig) -> BaseSynthesizer:
        """Create a synthesizer from configuration."""
        logger.info(f"Creating synthesizer: {config.type}")
        try:
            return SynthesizerFactory.create(config.type, **config.params)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid synthesizer params for '{config.type}'", original_error=e) from e
