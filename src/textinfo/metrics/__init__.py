"""Metrics computed over segmented text."""

from .ngrams import ngrams, ngrams_per_group
from .readability import fres, fkrgl
from .lexical import average_length, length_summary, count_syllables

__all__ = [
    'ngrams',
    'ngrams_per_group',
    'fres',
    'fkrgl',
    'average_length',
    'length_summary',
    'count_syllables',
]
