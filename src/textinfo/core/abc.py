"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, Optional, Any


class LanguageDetector(Protocol):
    """Host-injected language identification. Implement with langdetect, fastText, CLD, etc."""

    def detect(self, text: str, tld: Optional[str] = None) -> Optional[str]:
        """
        Identify the language of a text.

        Args:
            text: Raw text to identify
            tld: Optional top level domain hint (e.g. "no", "uk")

        Returns:
            Optional[str]: Language code, or None if the language cannot be determined
        """
        ...


class SyllableCounter(Protocol):
    """Syllable counting for a single language."""

    def count(self, word: str) -> int:
        """
        Count the syllables of a single word.

        Args:
            word: NFD-normalized word

        Returns:
            int: Number of syllables (at least 1 for non-empty words)
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...
