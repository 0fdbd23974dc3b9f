"""
TextInfo Providers Package

Language detection and syllable counting capabilities. All providers
follow the dependency injection pattern and can be replaced by the host.
"""

from .language import LangdetectDetector, normalize_language
from .syllables import (
    EnglishSyllableCounter,
    NorwegianSyllableCounter,
    SyllableRegistry,
    create_default_registry,
)

__all__ = [
    'LangdetectDetector',
    'normalize_language',
    'EnglishSyllableCounter',
    'NorwegianSyllableCounter',
    'SyllableRegistry',
    'create_default_registry',
]
