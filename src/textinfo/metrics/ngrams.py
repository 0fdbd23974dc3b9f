"""N-gram generation over word sequences."""

from typing import Iterable, List, Sequence

from ..core.errors import InvalidArgument


def _check_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgument(f"N-gram size must be an integer, got {type(size).__name__}")
    if size <= 0:
        raise InvalidArgument(f"N-gram size must be positive, got {size}")
    return size


def ngrams(words: Sequence[str], size: int = 2) -> List[str]:
    """
    Every window of `size` consecutive words, joined by a single space.

    Windows running past the end of the sequence are not emitted, so a
    sequence shorter than `size` yields no n-grams.

    Raises:
        InvalidArgument: If size is not a positive integer
    """
    size = _check_size(size)
    return [" ".join(words[i:i + size]) for i in range(len(words) - size + 1)]


def ngrams_per_group(groups: Iterable[Sequence[str]], size: int = 2) -> List[str]:
    """N-grams of each word group, concatenated; no window spans two groups."""
    size = _check_size(size)
    result: List[str] = []
    for words in groups:
        result.extend(ngrams(words, size))
    return result
