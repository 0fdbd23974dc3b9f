"""Ordered rewrite rules that remove false sentence-boundary markers."""

from dataclasses import dataclass
from typing import List, Optional

import regex

from ..config.schema import SegmentationRules

MARKER = "</marker/>"

_M = regex.escape(MARKER)


@dataclass(frozen=True)
class Rule:
    """A single substitution applied to the marked-up text."""
    name: str
    pattern: "regex.Pattern"
    replacement: str
    rationale: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str, rationale: str) -> Rule:
    return Rule(name, regex.compile(pattern, regex.DOTALL), replacement, rationale)


def terminator_class(rules: SegmentationRules) -> str:
    """Character class matching any configured sentence terminator."""
    return "[" + regex.escape(rules.terminators) + "]"


def marking_rule(rules: SegmentationRules) -> Rule:
    """Tag every run of terminators (plus trailing whitespace) as a candidate boundary."""
    return _rule(
        "mark",
        rf"({terminator_class(rules)}+\s*)",
        rf"\g<1>{MARKER}",
        "every terminator run is a boundary until an exception says otherwise",
    )


def exception_rules(rules: Optional[SegmentationRules] = None) -> List[Rule]:
    """
    Build the exception passes in the order they must be applied.

    Later passes assume earlier ones have already collapsed their patterns,
    so the returned order is significant.

    Args:
        rules: Segmentation vocabulary; defaults reproduce the built-in rule set

    Returns:
        List[Rule]: Rules to apply left to right after marking
    """
    rules = rules or SegmentationRules()
    table: List[Rule] = []

    # Titles: "Dr. Smith"
    for title in rules.titles:
        table.append(_rule(
            f"title:{title}",
            rf"({regex.escape(title)}\.\s+){_M}",
            r"\g<1>",
            "period belongs to an honorific",
        ))

    # "U.N.", "U.S.A."
    table.append(_rule(
        "capital_abbreviation",
        rf"(\p{{Uppercase}}\.){_M}",
        r"\g<1>",
        "single capital letter followed by a period is an abbreviation",
    ))

    # Clock times: "kl. 12.30", "kl. 12.30.15", "5 p.m."
    prefix = regex.escape(rules.time_prefix)
    table.extend([
        _rule(
            "time:prefix_three_part",
            rf"({prefix}\.\s+){_M}(\d+.)(\d+.){_M}(\d+)",
            r"\g<1>\g<2>\g<3>\g<4>",
            "three-part clock time after the time prefix",
        ),
        _rule(
            "time:prefix_two_part",
            rf"({prefix}\.\s+){_M}(\d+.){_M}(\d+)",
            r"\g<1>\g<2>\g<3>",
            "two-part clock time after the time prefix",
        ),
        _rule(
            "time:digits",
            rf"(\d+.){_M}(\d+)",
            r"\g<1>\g<2>",
            "punctuation between digit groups",
        ),
        _rule(
            "time:digits_three_part",
            rf"(\d+.){_M}(\d+.){_M}(\d+)",
            r"\g<1>\g<2>\g<3>",
            "three digit groups separated by punctuation",
        ),
        _rule(
            "time:dotted_meridiem",
            rf"(\d+\s+[ap]\.){_M}(m\.\s*){_M}",
            r"\g<1>\g<2>",
            "'a.m.' and 'p.m.' after a number",
        ),
        _rule(
            "time:meridiem",
            rf"(\d+\s+[ap]m\.\s+){_M}",
            r"\g<1>",
            "'am.' and 'pm.' after a number",
        ),
    ])

    # Dates: "Nov. 29"
    for month in rules.months:
        table.append(_rule(
            f"month:{month}",
            rf"({regex.escape(month)}\.\s+){_M}(\d+)",
            r"\g<1>\g<2>",
            "month abbreviation followed by a day",
        ))

    table.append(_rule(
        "lowercase_continuation",
        rf"{_M}\s*(\p{{Lowercase}})",
        r"\g<1>",
        "a sentence does not start lowercase, e.g. 'cnn.com'",
    ))

    table.append(_rule(
        "middle_initial",
        rf"(\s+\p{{Uppercase}}\.\s+){_M}",
        r"\g<1>",
        "middle initial inside a name, e.g. 'Magne T. Øierud'",
    ))

    return table
