"""Exceptions raised by TextInfo operations."""

from typing import Optional


class TextInfoError(Exception):
    """Base class for all TextInfo errors."""
    pass


class InvalidArgument(TextInfoError, ValueError):
    """Exception raised when an operation receives an unusable argument."""
    pass


class CapabilityUnavailable(TextInfoError):
    """Exception raised when no syllable counter exists for a language."""

    def __init__(self, language: Optional[str], message: Optional[str] = None):
        self.language = language
        super().__init__(message or f"No syllable counter available for language: {language!r}")


class LanguageUndetermined(TextInfoError):
    """Exception raised when the language of a text cannot be identified."""
    pass


class ConfigLoadError(TextInfoError):
    """Exception raised when configuration loading or validation fails."""
    pass
