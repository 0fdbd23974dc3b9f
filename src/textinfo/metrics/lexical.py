"""Word, length and syllable counters."""

import unicodedata
from typing import Dict, Optional, Sequence

import numpy as np

from ..core.abc import SyllableCounter


def average_length(items: Sequence[str]) -> Optional[float]:
    """Mean character length of the items, or None for an empty sequence."""
    if not items:
        return None
    return sum(len(item) for item in items) / len(items)


def length_summary(items: Sequence[str]) -> Dict[str, float]:
    """Mean/min/max/std of item lengths; empty dict for an empty sequence."""
    if not items:
        return {}
    lengths = np.array([len(item) for item in items], dtype=float)
    return {
        "mean": float(lengths.mean()),
        "min": float(lengths.min()),
        "max": float(lengths.max()),
        "std": float(lengths.std()),
    }


def count_syllables(words: Sequence[str], counter: SyllableCounter) -> int:
    """Total syllables of the words, each NFD-normalized before counting."""
    return sum(counter.count(unicodedata.normalize("NFD", word)) for word in words)
