"""Embedder factory for creating embedder instances."""

from typing import Any
from loguru import logger

from ..errors import ConfigurationError
from .base import BaseEmbedder
from .providers.fallback import FallbackEmbedder
from .providers.hash_embedder import HashEmbedder


class EmbedderFactory:
    """Factory for creating embedder instances based on type.

    This factory maintains a registry of available embedder types
    and creates instances based on string identifiers.
    """

    _registry: dict[str, type[BaseEmbedder]] = {
        "hash": HashEmbedder,
    }

    @classmethod
    def create(
        cls,
        embedder_type: str,
        fallback_on_error: bool = False,
        **params: Any
    ) -> BaseEmbedder:
        """Create an embedder instance by type.

        Args:
            embedder_type: Type identifier (e.g., "hash")
            fallback_on_error: Wrap the embedder in a FallbackEmbedder
            **params: Initialization parameters for the embedder

        Returns:
            Embedder instance

        Raises:
            ConfigurationError: If embedder type is not registered
        """
        if embedder_type not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown embedder type: '{embedder_type}'. "
                f"Available types: {available}"
            )

        embedder_class = cls._registry[embedder_type]
        logger.debug(f"Creating {embedder_class.__name__} with params: {params}")

        embedder = embedder_class(**params)
        if fallback_on_error:
            return FallbackEmbedder(embedder)
        return embedder

    @classmethod
    def register(cls, embedder_type: str, embedder_class: type[BaseEmbedder]):
        """Register a new embedder type.

        Raises:
            TypeError: If embedder_class is not a subclass of BaseEmbedder
        """
        if not issubclass(embedder_class, BaseEmbedder):
            raise TypeError(
                f"{embedder_class.__name__} must be a subclass of BaseEmbedder"
            )

        cls._registry[embedder_type] = embedder_class
        logger.info(f"Registered embedder type '{embedder_type}': {embedder_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry.keys())
