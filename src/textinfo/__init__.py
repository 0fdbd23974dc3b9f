"""
TextInfo - Retrieve information about, and do analysis on, text.

Rule-based sentence segmentation, n-grams, word and syllable counts and
Flesch readability scores. Language detection and syllable counting are
pluggable providers that the host may inject.
"""

from .text import TextInfo, Sentence
from .core.errors import (
    TextInfoError,
    InvalidArgument,
    CapabilityUnavailable,
    LanguageUndetermined,
    ConfigLoadError,
)

__version__ = "0.1.0"

__all__ = [
    "TextInfo",
    "Sentence",
    "TextInfoError",
    "InvalidArgument",
    "CapabilityUnavailable",
    "LanguageUndetermined",
    "ConfigLoadError",
]
