"""Small text utilities shared by the segmenter and the metrics."""

import hashlib
import json
from typing import Any, List

import regex

_WHITESPACE_RE = regex.compile(r"\s+")
_WORD_RE = regex.compile(r"\w+")


def squish(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def text_to_words(text: str) -> List[str]:
    """Split text into words, i.e. maximal runs of word characters, in order."""
    return _WORD_RE.findall(text)


def hash_text(text: str) -> str:
    """Create a stable hash of text content."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]


def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy types and dataclasses."""
    def serialize_item(item):
        if hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"
