"""Flesch readability formulas."""

from typing import Optional


def _ratios(word_count: int, sentence_count: int, syllable_count: int):
    return word_count / sentence_count, syllable_count / word_count


def fres(word_count: int, sentence_count: int, syllable_count: int) -> Optional[float]:
    """
    Flesch reading ease score, rounded to 2 decimals.

    Returns None when there are no sentences or no words.
    """
    if sentence_count <= 0 or word_count <= 0:
        return None
    words_per_sentence, syllables_per_word = _ratios(word_count, sentence_count, syllable_count)
    score = 206.835 - ((words_per_sentence * 1.015) + (syllables_per_word * 84.6))
    return round(score, 2)


def fkrgl(word_count: int, sentence_count: int, syllable_count: int) -> Optional[float]:
    """
    Flesch-Kincaid reading grade level, rounded to 2 decimals.

    Returns None when there are no sentences or no words.
    """
    if sentence_count <= 0 or word_count <= 0:
        return None
    words_per_sentence, syllables_per_word = _ratios(word_count, sentence_count, syllable_count)
    score = ((words_per_sentence * 0.39) + (syllables_per_word * 11.8)) - 15.59
    return round(score, 2)
