"""Test the TextInfo facade."""

import pytest

from textinfo import CapabilityUnavailable, InvalidArgument, LanguageUndetermined, Sentence, TextInfo
from textinfo.config.loader import load_config_from_string
from textinfo.core.types import TextStats
from textinfo.providers.syllables import SyllableRegistry


class TestConstruction:
    """Test the ways a TextInfo can be built."""

    def test_positional_text(self, fake_detector):
        text = TextInfo("Hello there.", detector=fake_detector)
        assert text.text == "Hello there."
        assert text.tld is None
        assert str(text) == "Hello there."
        assert len(text) == 12

    def test_default_is_empty(self, fake_detector):
        assert TextInfo(detector=fake_detector).text == ""

    def test_from_options(self, fake_detector):
        text = TextInfo.from_options({"text": "Dette er en tekst.", "tld": "no"},
                                     detector=fake_detector)
        assert text.text == "Dette er en tekst."
        assert text.tld == "no"

    def test_from_options_rejects_unknown_keys(self):
        with pytest.raises(InvalidArgument, match="Invalid text options"):
            TextInfo.from_options({"text": "Hi.", "locale": "en"})


class TestSentences:
    """Test sentence-level results."""

    def test_abbreviation_scenario(self, fake_detector):
        text = TextInfo("Dr. Smith left. He returned.", detector=fake_detector)

        assert [s.text for s in text.sentences] == ["Dr. Smith left", "He returned"]
        assert text.sentence_count == 2
        assert all(isinstance(s, Sentence) for s in text.sentences)

    def test_domain_scenario(self, fake_detector):
        text = TextInfo("Visit cnn.com today. It has news.", detector=fake_detector)

        assert text.sentence_count == 2
        assert text.sentences[0].text.endswith("cnn.com today")

    def test_sentences_inherit_context(self, fake_detector):
        text = TextInfo("Hei. Hallo.", tld="no", language="nb", detector=fake_detector)

        for sentence in text.sentences:
            assert sentence.tld == "no"
            assert sentence.language == "no"
            assert sentence.config is text.config
        assert fake_detector.calls == []

    def test_sentences_cached(self, fake_detector):
        text = TextInfo("One. Two.", detector=fake_detector)
        assert text.sentences is text.sentences

    def test_avg_sentence_length(self, fake_detector):
        text = TextInfo("Ab cd. Efghij.", detector=fake_detector)
        assert text.avg_sentence_length == pytest.approx((5 + 6) / 2)

    def test_sentence_word_metrics(self, fake_detector):
        sentence = TextInfo("The cat sat down.", detector=fake_detector).sentences[0]

        assert sentence.words == ["The", "cat", "sat", "down"]
        assert sentence.word_count == 4
        assert sentence.bigrams == ["The cat", "cat sat", "sat down"]
        assert sentence.ngrams() == sentence.bigrams
        assert sentence.syllable_count == 4


class TestWordsAndNGrams:
    """Test word and n-gram metrics of whole texts."""

    def test_words(self, fake_detector):
        text = TextInfo("The cat sat. A dog ran!", detector=fake_detector)

        assert text.words == ["The", "cat", "sat", "A", "dog", "ran"]
        assert text.word_count == 6
        assert text.avg_word_length == pytest.approx(16 / 6)

    def test_ngrams_do_not_cross_sentences(self, fake_detector):
        text = TextInfo("The cat sat. A dog ran!", detector=fake_detector)

        assert text.bigrams == ["The cat", "cat sat", "A dog", "dog ran"]
        assert "sat A" not in text.bigrams
        assert text.trigrams == ["The cat sat", "A dog ran"]
        assert text.quadgrams == []
        assert text.unigrams == text.words

    def test_default_ngram_size_from_config(self, fake_detector):
        config = load_config_from_string("ngrams:\n  default_size: 3\n")
        text = TextInfo("The cat sat down.", config=config, detector=fake_detector)

        assert text.ngrams() == ["The cat sat", "cat sat down"]
        assert text.bigrams == ["The cat", "cat sat", "sat down"]

    def test_invalid_ngram_size(self, fake_detector):
        text = TextInfo("The cat sat.", detector=fake_detector)
        with pytest.raises(InvalidArgument):
            text.ngrams(0)
        with pytest.raises(InvalidArgument):
            text.sentences[0].ngrams(-2)


class TestReadability:
    """Test readability scores."""

    def test_reference_fres(self, agnew_text):
        text = TextInfo(agnew_text, language="en")

        assert text.sentence_count == 1
        assert text.word_count == 22
        assert text.syllable_count == 39
        assert text.fres == pytest.approx(34.53)
        assert text.fkrgl == pytest.approx(13.91)

    def test_empty_text(self, fake_detector):
        text = TextInfo("", detector=fake_detector)

        assert text.sentence_count == 0
        assert text.word_count == 0
        assert text.syllable_count == 0
        assert text.fres is None
        assert text.fkrgl is None
        assert text.avg_sentence_length is None
        assert text.avg_word_length is None
        assert fake_detector.calls == []

    def test_no_words(self, fake_detector):
        text = TextInfo("... !!", detector=fake_detector)

        assert text.fres is None
        assert text.fkrgl is None

    def test_missing_syllable_counter(self, test_logger):
        text = TextInfo("Das ist ein Satz.", language="de", logger=test_logger)

        with pytest.raises(CapabilityUnavailable) as exc_info:
            text.fres
        assert exc_info.value.language == "de"
        assert "syllable_capability_missing" in test_logger.names()


    def test_injected_syllable_counter(self, fake_detector):
        class OneSyllable:
            def count(self, word):
                return 1

        registry = SyllableRegistry({"de": OneSyllable()})
        text = TextInfo("Das ist ein Satz.", language="de", syllables=registry,
                        detector=fake_detector)

        assert text.syllable_count == 4
        assert text.fres == pytest.approx(206.835 - 4 * 1.015 - 84.6, abs=0.01)
        with pytest.raises(CapabilityUnavailable):
            TextInfo("Hello there.", language="en", syllables=registry).syllable_count


class TestLanguage:
    """Test language resolution."""

    def test_explicit_language_skips_detection(self, fake_detector):
        text = TextInfo("Some text.", language="EN", detector=fake_detector)

        assert text.language == "en"
        assert fake_detector.calls == []

    def test_dialect_normalized(self, fake_detector, make_detector):
        assert TextInfo("Tekst.", language="nn", detector=fake_detector).language == "no"
        assert TextInfo("Tekst.", detector=make_detector("nb")).language == "no"

    def test_detection_runs_once(self, fake_detector, test_logger):
        text = TextInfo("Some text here.", tld="uk", detector=fake_detector, logger=test_logger)

        assert text.language == "en"
        assert text.language == "en"
        text.syllable_count
        text.fres

        assert fake_detector.calls == [("Some text here.", "uk")]
        assert test_logger.names().count("language_detected") == 1

    def test_undetermined_language(self, failing_detector, test_logger):
        text = TextInfo("Some text here.", detector=failing_detector, logger=test_logger)

        with pytest.raises(LanguageUndetermined):
            text.language
        with pytest.raises(LanguageUndetermined):
            text.syllable_count

        assert len(failing_detector.calls) == 1
        assert "language_undetermined" in test_logger.names()

    def test_default_language_fallback(self, failing_detector, sample_config):
        text = TextInfo("Some text here.", config=sample_config, detector=failing_detector)
        assert text.language == "en"


class TestSummary:
    """Test the TextStats snapshot."""

    def test_summary(self, agnew_text):
        stats = TextInfo(agnew_text + " It was a surprise.", language="en").summary()

        assert isinstance(stats, TextStats)
        assert stats.language == "en"
        assert stats.sentence_count == 2
        assert stats.word_count == 26
        assert stats.is_scored
        assert set(stats.sentence_lengths) == {"mean", "min", "max", "std"}
        assert stats.sentence_lengths["min"] == len("It was a surprise")
        assert len(stats.text_hash) == 16

    def test_summary_of_empty_text(self, fake_detector):
        stats = TextInfo("", detector=fake_detector).summary()

        assert stats.language is None
        assert stats.sentence_count == 0
        assert stats.fres is None
        assert not stats.is_scored
        assert stats.sentence_lengths == {}
