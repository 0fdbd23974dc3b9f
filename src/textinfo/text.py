"""TextInfo facade: lazily derived statistics for a block of text."""

from functools import cached_property
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from .config.schema import AnalyzerConfig, TextOptions
from .core.abc import LanguageDetector, Logger
from .core.errors import CapabilityUnavailable, InvalidArgument, LanguageUndetermined
from .core.types import TextStats
from .core.util import hash_text, text_to_words
from .metrics import lexical, readability
from .metrics.ngrams import ngrams, ngrams_per_group
from .providers.language import LangdetectDetector, normalize_language
from .providers.syllables import SyllableRegistry, create_default_registry
from .segmenters.sentence import SentenceSegmenter


class _TextBase:
    """Word-level metrics shared by whole texts and single sentences."""

    def __init__(self, text: str = "", tld: Optional[str] = None, language: Optional[str] = None, *,
                 config: Optional[AnalyzerConfig] = None,
                 detector: Optional[LanguageDetector] = None,
                 syllables: Optional[SyllableRegistry] = None,
                 logger: Optional[Logger] = None):
        self.config = config or AnalyzerConfig()
        self.text = text if text is not None else ""
        self.tld = tld
        self.log = logger
        self.detector = detector or LangdetectDetector(self.config.languages, logger=logger)
        self.syllables = syllables or create_default_registry()

        self._explicit_language = normalize_language(language, self.config.languages.aliases)
        self._language_resolved = self._explicit_language is not None
        self._language = self._explicit_language

    def _collaborators(self) -> dict:
        return dict(config=self.config, detector=self.detector,
                    syllables=self.syllables, logger=self.log)

    @property
    def language(self) -> str:
        """
        Language code of the text; explicit if given, otherwise detected once.

        Raises:
            LanguageUndetermined: If detection fails and no default language is configured
        """
        if not self._language_resolved:
            detected = self.detector.detect(self.text, self.tld)
            detected = normalize_language(detected, self.config.languages.aliases)
            if detected is None:
                detected = self.config.languages.default_language
                if self.log:
                    self.log.warn("language_undetermined", tld=self.tld,
                                  fallback=detected, text_length=len(self.text))
            elif self.log:
                self.log.info("language_detected", language=detected, tld=self.tld)
            self._language = detected
            self._language_resolved = True

        if self._language is None:
            raise LanguageUndetermined(
                f"Cannot determine the language of the text (tld={self.tld!r})")
        return self._language

    @cached_property
    def words(self) -> List[str]:
        return text_to_words(self.text)

    @cached_property
    def word_count(self) -> int:
        return len(self.words)

    @cached_property
    def avg_word_length(self) -> Optional[float]:
        """Mean word length in characters, None if there are no words."""
        return lexical.average_length(self.words)

    @cached_property
    def syllable_count(self) -> int:
        """
        Number of syllables, counted with the counter for the text's language.

        Raises:
            LanguageUndetermined: If the language is needed but cannot be detected
            CapabilityUnavailable: If no syllable counter exists for the language
        """
        if not self.words:
            return 0
        language = self.language
        if not self.syllables.supports(language):
            if self.log:
                self.log.error("syllable_capability_missing", language=language,
                               available=self.syllables.languages)
            raise CapabilityUnavailable(language)
        return lexical.count_syllables(self.words, self.syllables.get(language))

    def _default_ngram_size(self, size: Optional[int]) -> int:
        return self.config.ngrams.default_size if size is None else size

    @cached_property
    def unigrams(self) -> List[str]:
        return self.ngrams(1)

    @cached_property
    def bigrams(self) -> List[str]:
        return self.ngrams(2)

    @cached_property
    def trigrams(self) -> List[str]:
        return self.ngrams(3)

    @cached_property
    def quadgrams(self) -> List[str]:
        return self.ngrams(4)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        preview = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        return f"{type(self).__name__}({preview!r})"


class Sentence(_TextBase):
    """A single punctuation-stripped sentence of a TextInfo."""

    def ngrams(self, size: Optional[int] = None) -> List[str]:
        """
        N-grams of this sentence's words.

        Raises:
            InvalidArgument: If size is not a positive integer
        """
        return ngrams(self.words, self._default_ngram_size(size))


class TextInfo(_TextBase):
    """
    Retrieve information about, and do analysis on, text.

    Every metric is computed on first access and cached for the lifetime of
    the instance. The text's language is either given explicitly or detected
    at most once, using `tld` as a hint.

        text = TextInfo("Dette er en norsk tekst.", tld="no")
        text = TextInfo("Some English text.", language="en")
        text.sentence_count, text.fres, text.bigrams
    """

    @classmethod
    def from_options(cls, options: Union[Mapping[str, Any], TextOptions], **kwargs) -> "TextInfo":
        """
        Build a TextInfo from a structured option set (`text`, `tld`, `language`).

        Raises:
            InvalidArgument: If the options contain unknown keys or wrong types
        """
        if not isinstance(options, TextOptions):
            try:
                options = TextOptions.model_validate(dict(options))
            except ValidationError as e:
                raise InvalidArgument(f"Invalid text options: {e}") from e
        return cls(options.text, tld=options.tld, language=options.language, **kwargs)

    @cached_property
    def segmenter(self) -> SentenceSegmenter:
        return SentenceSegmenter(self.config.segmentation, logger=self.log)

    @cached_property
    def sentences(self) -> List[Sentence]:
        """Sentences with their terminating punctuation removed."""
        return [
            Sentence(sentence, tld=self.tld, language=self._explicit_language,
                     **self._collaborators())
            for sentence in self.segmenter.segment(self.text)
        ]

    @cached_property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @cached_property
    def avg_sentence_length(self) -> Optional[float]:
        """Mean sentence length in characters, None if there are no sentences."""
        return lexical.average_length([s.text for s in self.sentences])

    def ngrams(self, size: Optional[int] = None) -> List[str]:
        """
        N-grams built sentence by sentence, so none spans a sentence boundary.

        Raises:
            InvalidArgument: If size is not a positive integer
        """
        return ngrams_per_group((s.words for s in self.sentences), self._default_ngram_size(size))

    def _scorable(self) -> bool:
        return self.text != "" and self.sentence_count > 0 and self.word_count > 0

    @cached_property
    def fres(self) -> Optional[float]:
        """Flesch reading ease score, None if it cannot be computed."""
        if not self._scorable():
            return None
        return readability.fres(self.word_count, self.sentence_count, self.syllable_count)

    @cached_property
    def fkrgl(self) -> Optional[float]:
        """Flesch-Kincaid reading grade level, None if it cannot be computed."""
        if not self._scorable():
            return None
        return readability.fkrgl(self.word_count, self.sentence_count, self.syllable_count)

    def summary(self) -> TextStats:
        """
        Collect all metrics into a TextStats.

        Raises:
            CapabilityUnavailable: If syllables cannot be counted for the text's language
            LanguageUndetermined: If the language is needed but cannot be detected
        """
        try:
            language = self.language if self.text.strip() else None
        except LanguageUndetermined:
            language = None

        return TextStats(
            text_hash=hash_text(self.text),
            language=language,
            sentence_count=self.sentence_count,
            word_count=self.word_count,
            syllable_count=self.syllable_count,
            avg_sentence_length=self.avg_sentence_length,
            avg_word_length=self.avg_word_length,
            fres=self.fres,
            fkrgl=self.fkrgl,
            sentence_lengths=lexical.length_summary([s.text for s in self.sentences]),
        )
