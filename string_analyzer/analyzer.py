import re
from hashlib import sha256
from typing import Dict

from string_analyzer.schemas import StringProperties

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def is_palindrome(value: str) -> bool:
    """Case-insensitive palindrome check over ASCII letters and digits only.

    Everything else (spaces, punctuation, non-ASCII) is ignored, so an input
    with nothing left after stripping counts as a palindrome.
    """
    cleaned = _NON_ALNUM.sub("", value.lower())
    return cleaned == cleaned[::-1]


def count_words(value: str) -> int:
    return len(value.split())


def character_frequency(value: str) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for c in value:
        freq[c] = freq.get(c, 0) + 1
    return freq


def analyze(value: str) -> StringProperties:
    """Compute the full property set for a raw string value."""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=sha256(value.encode("utf-8", "surrogatepass")).hexdigest(),
        character_frequency_map=character_frequency(value),
    )
