"""Provider implementations for synthesizers."""

from .template import TemplateSynthesizer, calculate_confidence, clean_content

__all__ = ["TemplateSynthesizer", "calculate_confidence", "clean_content"]
