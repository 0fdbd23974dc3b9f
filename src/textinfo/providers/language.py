"""
Language detection provider backed by langdetect.

Follows the dependency injection pattern: any object with a matching
`detect(text, tld)` method can replace it.
"""

from functools import lru_cache
from typing import Dict, Optional

from langdetect.detector_factory import DetectorFactory, PROFILES_DIRECTORY
from langdetect.lang_detect_exception import LangDetectException

from ..config.schema import LanguageCfg
from ..core.abc import Logger

# Weight of the language favoured by the TLD hint, relative to 1.0 for every other language
TLD_PRIOR_BOOST = 5.0


@lru_cache(maxsize=1)
def _shared_factory(seed: int) -> DetectorFactory:
    """Load language profiles once per process."""
    factory = DetectorFactory()
    factory.load_profile(PROFILES_DIRECTORY)
    factory.set_seed(seed)
    return factory


def normalize_language(code: Optional[str], aliases: Dict[str, str]) -> Optional[str]:
    """Map dialect codes (e.g. 'nb', 'nn') onto their canonical code."""
    if code is None:
        return None
    code = code.strip().lower()
    if not code:
        return None
    return aliases.get(code, code)


class LangdetectDetector:
    """Deterministic langdetect wrapper honouring a TLD hint."""

    def __init__(self, config: Optional[LanguageCfg] = None, seed: int = 0,
                 logger: Optional[Logger] = None):
        """
        Initialize detector.

        Args:
            config: Language settings (aliases, TLD table)
            seed: Random seed for langdetect, fixed so results are reproducible
            logger: Optional structured logger
        """
        self.config = config or LanguageCfg()
        self.seed = seed
        self.log = logger

    def _prior_map(self, tld: Optional[str], known) -> Optional[Dict[str, float]]:
        if not tld:
            return None
        favoured = self.config.tld_languages.get(tld.strip().lstrip('.').lower())
        if favoured is None or favoured not in known:
            return None
        return {lang: (TLD_PRIOR_BOOST if lang == favoured else 1.0) for lang in known}

    def detect(self, text: str, tld: Optional[str] = None) -> Optional[str]:
        """
        Identify the language of a text.

        Returns:
            Optional[str]: Canonical language code, or None if undetermined
        """
        factory = _shared_factory(self.seed)
        detector = factory.create()

        prior = self._prior_map(tld, factory.get_lang_list())
        if prior:
            detector.set_prior_map(prior)

        try:
            detector.append(text)
            language = detector.detect()
        except LangDetectException as e:
            if self.log:
                self.log.warn("language_detection_failed", error=str(e), text_length=len(text))
            return None

        if language == 'unknown':
            return None
        return normalize_language(language, self.config.aliases)
