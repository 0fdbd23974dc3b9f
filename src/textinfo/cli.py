"""Command-line interface for TextInfo analysis."""

import argparse
import sys
from pathlib import Path

from textinfo.config.loader import load_config
from textinfo.config.schema import AnalyzerConfig
from textinfo.core.errors import ConfigLoadError, TextInfoError
from textinfo.core.util import safe_json
from textinfo.text import TextInfo


def _fmt(value, digits: int = 2) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, float):
        return f"{value:.{digits}f}"
    return str(value)


def _read_text(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _build_text(args) -> TextInfo:
    config = load_config(args.config) if args.config else AnalyzerConfig()
    return TextInfo(_read_text(args), tld=args.tld, language=args.language, config=config)


def analyze_command(args):
    """Print sentence, word, syllable and readability statistics."""
    try:
        text = _build_text(args)
        stats = text.summary()

        if args.json:
            print(safe_json(stats))
            return 0

        print("📊 Text statistics")
        print(f"   Language: {stats.language or 'undetermined'}")
        print(f"   Sentences: {stats.sentence_count}")
        print(f"   Words: {stats.word_count}")
        print(f"   Syllables: {stats.syllable_count}")
        print(f"   Avg sentence length: {_fmt(stats.avg_sentence_length)}")
        print(f"   Avg word length: {_fmt(stats.avg_word_length)}")
        print(f"   FRES: {_fmt(stats.fres)}")
        print(f"   FKRGL: {_fmt(stats.fkrgl)}")

        if args.verbose and stats.sentence_lengths:
            summary = ", ".join(f"{k}={v:.1f}" for k, v in stats.sentence_lengths.items())
            print(f"   Sentence lengths: {summary}")

        return 0

    except (TextInfoError, OSError) as e:
        print(f"❌ Analysis failed: {e}")
        return 1


def sentences_command(args):
    """Print one sentence per line."""
    try:
        text = _build_text(args)
        for sentence in text.sentences:
            print(sentence.text)
        return 0
    except (TextInfoError, OSError) as e:
        print(f"❌ Error: {e}")
        return 1


def ngrams_command(args):
    """Print the text's n-grams, one per line."""
    try:
        text = _build_text(args)
        for ngram in text.ngrams(args.size):
            print(ngram)
        return 0
    except (TextInfoError, OSError) as e:
        print(f"❌ Error: {e}")
        return 1


def validate_config_command(args):
    """Validate a TextInfo configuration file."""
    config_path = Path(args.config_file)
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return 1

    try:
        print(f"Validating config: {config_path}")
        config = load_config(config_path)
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1

    rules = config.segmentation
    print("✅ Config validation successful!")
    print(f"   Version: {config.version}")
    print(f"   Terminators: {rules.terminators}")
    print(f"   Titles: {len(rules.titles)}, Months: {len(rules.months)}, Time prefix: {rules.time_prefix}")
    print(f"   Default n-gram size: {config.ngrams.default_size}")
    print(f"   Default language: {config.languages.default_language or 'none'}")
    return 0


def info_command(args):
    """Display TextInfo version and system information."""
    print("TextInfo CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("textinfo")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    from textinfo.providers.syllables import create_default_registry
    registry = create_default_registry()
    print(f"Syllable counters: {', '.join(registry.languages)}")
    if args.language:
        status = "available" if registry.supports(args.language) else "not available"
        print(f"Syllable counter for {args.language!r}: {status}")

    return 0


def _add_text_arguments(parser):
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to analyze (default: read from --file or stdin)"
    )
    parser.add_argument(
        "-f", "--file",
        help="Read the text from a UTF-8 file"
    )
    parser.add_argument(
        "-l", "--language",
        help="Language code, skips language detection"
    )
    parser.add_argument(
        "--tld",
        help="Top level domain hint for language detection"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a YAML configuration file"
    )


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textinfo",
        description="Sentence, n-gram and readability statistics for text"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print text statistics and readability scores"
    )
    _add_text_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print statistics as JSON"
    )
    analyze_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Include the sentence length distribution"
    )

    sentences_parser = subparsers.add_parser(
        "sentences",
        help="Print the text's sentences, one per line"
    )
    _add_text_arguments(sentences_parser)

    ngrams_parser = subparsers.add_parser(
        "ngrams",
        help="Print the text's n-grams, one per line"
    )
    _add_text_arguments(ngrams_parser)
    ngrams_parser.add_argument(
        "-n", "--size",
        type=int,
        default=None,
        help="N-gram size (default: from config, normally 2)"
    )

    validate_parser = subparsers.add_parser(
        "validate-config",
        help="Validate a TextInfo configuration file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the configuration YAML file"
    )

    info_parser = subparsers.add_parser(
        "info",
        help="Display version and system information"
    )
    info_parser.add_argument(
        "-l", "--language",
        help="Check whether syllables can be counted for this language"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "analyze":
        return analyze_command(args)
    elif args.command == "sentences":
        return sentences_command(args)
    elif args.command == "ngrams":
        return ngrams_command(args)
    elif args.command == "validate-config":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
