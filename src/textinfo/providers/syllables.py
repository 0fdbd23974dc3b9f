"""Built-in syllable counters and the language -> counter capability table."""

import re
import unicodedata
from typing import Dict, Optional

from ..core.abc import SyllableCounter
from ..core.errors import CapabilityUnavailable


class EnglishSyllableCounter:
    """
    Heuristic English syllable counter.

    Counts vowel groups, then corrects for letter patterns that are known
    to split or merge syllables (e.g. "-ia" in "industrial" adds one,
    "-ion" in "nation" removes one).
    """

    # Patterns that make the vowel-group count one too high
    SUBTRACT = [re.compile(p) for p in (
        'cial',
        'tia',
        'cius',
        'cious',
        'giu',      # belgium
        'ion',
        'iou',
        'sia$',
        '.ely$',    # absolutely, but not "ely"
        '[^td]ed$', # accused is 2, executed is 4
    )]

    # Patterns that make the vowel-group count one too low
    ADD = [re.compile(p) for p in (
        'ia',
        'riet',
        'dien',
        'iu',
        'io',
        'ii',
        'microor',
        '[aeiouym]bl$',     # -Vble, -mble
        '[aeiou]{3}',       # agreeable
        '^mc',
        'ism$',
        r'([^aeiouy])\1l$', # middle, twiddle, battle
        '[^l]lien',         # alien, salient
        '^coa[dglx].',
        '[^gq]ua[^auieo]',
        'dnt$',             # couldn't
    )]

    _VOWEL_GROUPS = re.compile(r'[aeiouy]+')

    def count(self, word: str) -> int:
        word = word.lower()
        if word == 'w':
            return 2
        if len(word) == 1:
            return 1

        word = word.replace("'", "")
        if word.endswith('e'):
            word = word[:-1]

        syllables = 0
        syllables -= sum(1 for p in self.SUBTRACT if p.search(word))
        syllables += sum(1 for p in self.ADD if p.search(word))
        if len(word) == 1:  # "be", "we"
            syllables += 1
        syllables += len(self._VOWEL_GROUPS.findall(word))

        # No vowels at all: "the" without its e, "crwth", digits
        return syllables if syllables > 0 else 1


class NorwegianSyllableCounter:
    """Norwegian syllable counter: one syllable per vowel group."""

    _VOWEL_GROUPS = re.compile(r'[aeiouyæøå]+')

    def count(self, word: str) -> int:
        # Recompose so that "å" is a single vowel after NFD
        word = unicodedata.normalize('NFC', word.lower())
        return max(1, len(self._VOWEL_GROUPS.findall(word)))


class SyllableRegistry:
    """Capability table mapping language codes to syllable counters."""

    def __init__(self, counters: Optional[Dict[str, SyllableCounter]] = None):
        """
        Initialize registry.

        Args:
            counters: Counters by language code; defaults to the built-in English and Norwegian ones
        """
        if counters is None:
            counters = {'en': EnglishSyllableCounter(), 'no': NorwegianSyllableCounter()}
        self._counters: Dict[str, SyllableCounter] = dict(counters)

    def register(self, language: str, counter: SyllableCounter) -> None:
        """Add or replace the counter for a language."""
        self._counters[language] = counter

    def supports(self, language: Optional[str]) -> bool:
        return language in self._counters

    def get(self, language: Optional[str]) -> SyllableCounter:
        """
        Look up the counter for a language.

        Raises:
            CapabilityUnavailable: If no counter is registered for the language
        """
        try:
            return self._counters[language]
        except KeyError:
            raise CapabilityUnavailable(language) from None

    @property
    def languages(self):
        return sorted(self._counters)


def create_default_registry() -> SyllableRegistry:
    """Create a registry with the built-in counters."""
    return SyllableRegistry()
