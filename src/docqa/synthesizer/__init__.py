"""Synthesizer module: turns ranked chunks into an answer and a confidence."""

from .base import BaseSynthesizer
from .factory import SynthesizerFactory
from .providers.template import (
    NO_RELEVANT_INFORMATION_MESSAGE,
    UNREADABLE_DOCUMENTS_MESSAGE,
    TemplateSynthesizer,
    calculate_confidence,
    clean_content,
)

__all__ = [
    "BaseSynthesizer",
    "TemplateSynthesizer",
    "SynthesizerFactory",
    "calculate_confidence",
    "clean_content",
    "NO_RELEVANT_INFORMATION_MESSAGE",
    "UNREADABLE_DOCUMENTS_MESSAGE",
]
