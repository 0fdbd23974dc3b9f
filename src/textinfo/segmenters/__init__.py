"""Sentence boundary disambiguation."""

from .sentence import SentenceSegmenter
from .rules import MARKER, Rule, exception_rules

__all__ = ['SentenceSegmenter', 'MARKER', 'Rule', 'exception_rules']
