"""Configuration system for DocQA."""

from .factory import ComponentFactory
from .models import ComponentConfig, DocQAConfig, EmbedderConfig, RetrievalConfig
from .settings import Settings, load_settings, settings

__all__ = [
    "ComponentConfig",
    "EmbedderConfig",
    "RetrievalConfig",
    "DocQAConfig",
    "ComponentFactory",
    "Settings",
    "load_settings",
    "settings",
]
