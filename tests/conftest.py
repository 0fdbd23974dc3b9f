"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from textinfo.config.loader import load_config_from_string


class FakeDetector:
    """Language detector returning a fixed answer and recording its calls."""

    def __init__(self, language="en"):
        self.language = language
        self.calls = []

    def detect(self, text, tld=None):
        self.calls.append((text, tld))
        return self.language


@pytest.fixture
def fake_detector():
    """Provide a detector that always answers English."""
    return FakeDetector("en")


@pytest.fixture
def failing_detector():
    """Provide a detector that can never determine the language."""
    return FakeDetector(None)


@pytest.fixture
def sample_config_yaml():
    """Provide a sample configuration YAML for testing."""
    return """
version: 1
segmentation:
  terminators: ".?!:;"
  titles: [Prof, Dr, Mr, Mrs, Gen]
  time_prefix: kl
languages:
  default_language: en
ngrams:
  default_size: 3
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded configuration object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary configuration file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def names(self):
        return [msg for _, msg, _ in self.messages]

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def agnew_text():
    """Single-sentence English reference text with known readability scores."""
    return ("Rudolph Agnew, 55 years old and former chairman of Consolidated Gold Fields PLC, "
            "was named a director of this British industrial conglomerate.")


@pytest.fixture
def make_detector():
    """Provide a factory for detectors with a chosen answer."""
    return FakeDetector
