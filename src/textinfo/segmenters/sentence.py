"""Rule-based sentence boundary disambiguation."""

from typing import List, Optional

import regex

from ..config.schema import SegmentationRules
from ..core.abc import Logger
from ..core.util import squish
from .rules import MARKER, Rule, exception_rules, marking_rule

_LEADING_DASHES_RE = regex.compile(r"^-+\s*")


class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.

    Marks every terminator run as a candidate boundary, removes the markers
    that a fixed sequence of exception rules identifies as false positives
    (abbreviations, clock times, dates, domain names, initials), then splits
    on the markers that remain.
    """

    def __init__(self, rules: Optional[SegmentationRules] = None, logger: Optional[Logger] = None):
        """
        Initialize segmenter.

        Args:
            rules: Segmentation vocabulary (titles, months, time prefix, terminators)
            logger: Optional structured logger
        """
        self.rules = rules or SegmentationRules()
        self.log = logger
        self.marker = marking_rule(self.rules)
        self.exceptions: List[Rule] = exception_rules(self.rules)
        self._trailing = regex.compile(rf"[{regex.escape(self.rules.terminators)}\s]+\Z")

    def mark(self, text: str) -> str:
        """Return text with markers left only at true sentence boundaries."""
        marked = self.marker.apply(text)
        for rule in self.exceptions:
            marked = rule.apply(marked)
        return marked

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.

        Trailing terminators are removed, whitespace is squished and leading
        dialogue dashes are dropped. Never fails: text without terminators
        yields a single sentence, empty text yields no sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Non-empty sentences in source order
        """
        result = []
        for span in self.mark(text).split(MARKER):
            sentence = self._trailing.sub("", span)
            sentence = squish(sentence)
            sentence = _LEADING_DASHES_RE.sub("", sentence)
            if sentence:
                result.append(sentence)

        if self.log:
            self.log.info("sentences_segmented", sentence_count=len(result), text_length=len(text))

        return result
