"""Pydantic schemas for analyzer configuration and text options."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

DEFAULT_TITLES = ["Prof", "Ph", "Dr", "Mr", "Mrs", "Ms", "Hr", "St"]
DEFAULT_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                  "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class SegmentationRules(BaseModel):
    """Tokens the sentence segmenter treats as non-terminal."""
    model_config = ConfigDict(extra="forbid")

    terminators: str = Field(default=".?!:;",
                             description="Characters that may end a sentence")
    titles: List[str] = Field(default_factory=lambda: list(DEFAULT_TITLES),
                              description="Honorifics followed by a period, e.g. 'Dr.'")
    months: List[str] = Field(default_factory=lambda: list(DEFAULT_MONTHS),
                              description="Month abbreviations followed by a day number")
    time_prefix: str = Field(default="kl",
                             description="Token introducing a clock time, e.g. 'kl. 12.30'")


class LanguageCfg(BaseModel):
    """Language resolution settings."""
    model_config = ConfigDict(extra="forbid")

    aliases: Dict[str, str] = Field(default_factory=lambda: {"nb": "no", "nn": "no"},
                                    description="Dialect codes mapped to a canonical code")
    tld_languages: Dict[str, str] = Field(
        default_factory=lambda: {
            "no": "no", "se": "sv", "dk": "da", "fi": "fi", "de": "de", "at": "de",
            "fr": "fr", "es": "es", "it": "it", "nl": "nl", "pt": "pt", "br": "pt",
            "uk": "en", "us": "en", "au": "en", "ca": "en", "ie": "en", "nz": "en",
        },
        description="Top level domain hint mapped to the language it favours")
    default_language: Optional[str] = Field(default=None,
                                            description="Used when detection cannot decide")


class NGramCfg(BaseModel):
    """N-gram defaults."""
    model_config = ConfigDict(extra="forbid")

    default_size: int = Field(default=2, ge=1, description="Window size used by ngrams()")


class AnalyzerConfig(BaseModel):
    """Complete configuration for TextInfo analysis."""
    model_config = ConfigDict(extra="forbid")

    version: int = Field(default=1, description="Config schema version")
    segmentation: SegmentationRules = Field(default_factory=SegmentationRules)
    languages: LanguageCfg = Field(default_factory=LanguageCfg)
    ngrams: NGramCfg = Field(default_factory=NGramCfg)

    def validate_rules(self) -> List[str]:
        """Validate segmentation rules and return any issues."""
        issues = []
        rules = self.segmentation

        if not rules.terminators:
            issues.append("No sentence terminators configured")
        duplicates = set([c for c in rules.terminators if rules.terminators.count(c) > 1])
        if duplicates:
            issues.append(f"Duplicate terminators: {sorted(duplicates)}")
        if any(c.isspace() or c.isalnum() for c in rules.terminators):
            issues.append("Terminators must be punctuation characters")

        for name, tokens in (("titles", rules.titles), ("months", rules.months)):
            empty = [t for t in tokens if not t.strip()]
            if empty:
                issues.append(f"Empty entries in {name}")
            duplicates = set([t for t in tokens if tokens.count(t) > 1])
            if duplicates:
                issues.append(f"Duplicate {name}: {sorted(duplicates)}")

        if not rules.time_prefix.strip():
            issues.append("time_prefix must not be empty")

        return issues


class TextOptions(BaseModel):
    """Structured construction options for a TextInfo."""
    model_config = ConfigDict(extra="forbid")

    text: str = ""
    tld: Optional[str] = None
    language: Optional[str] = None
