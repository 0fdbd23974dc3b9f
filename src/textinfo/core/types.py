"""Result structures for TextInfo analysis."""

from dataclasses import dataclass, field
from typing import Optional, Dict


@dataclass
class TextStats:
    """Snapshot of every metric computed for a text."""
    text_hash: str                   # Stable short digest of the raw text
    language: Optional[str]          # None if undetermined
    sentence_count: int
    word_count: int
    syllable_count: int
    avg_sentence_length: Optional[float]
    avg_word_length: Optional[float]
    fres: Optional[float]            # Flesch reading ease
    fkrgl: Optional[float]           # Flesch-Kincaid grade level
    sentence_lengths: Dict[str, float] = field(default_factory=dict)  # mean/min/max/std

    @property
    def is_scored(self) -> bool:
        """Whether readability scores could be computed."""
        return self.fres is not None and self.fkrgl is not None
