"""Map a handful of literal English phrasings onto structured filters.

There is no grammar here: every rule is an independent regex tried against
the lower-cased query, and every rule that matches writes its key. Rules are
applied in list order, so when two rules set the same key the later one wins
(e.g. "3 words" overrides "single word", "first vowel" overrides an explicit
letter).
"""
import re
from typing import Any, Callable, Dict, List, Tuple

from string_analyzer.schemas import FilterCriteria

Effect = Callable[[re.Match], Dict[str, Any]]

_RULES: List[Tuple[re.Pattern, Effect]] = [
    (re.compile(r"single word"), lambda m: {"word_count": 1}),
    (re.compile(r"(\d+)\s+words?"), lambda m: {"word_count": int(m.group(1))}),
    (re.compile(r"palindrom"), lambda m: {"is_palindrome": True}),
    # "longer than N" / "shorter than N" are strict bounds
    (re.compile(r"longer than (\d+)"), lambda m: {"min_length": int(m.group(1)) + 1}),
    (re.compile(r"shorter than (\d+)"), lambda m: {"max_length": int(m.group(1)) - 1}),
    (
        re.compile(r"contain(?:ing|s)?\s+(?:the\s+)?(?:letter\s+)?([a-z])"),
        lambda m: {"contains_character": m.group(1)},
    ),
    # Literal reading: the first vowel of the alphabet
    (re.compile(r"first vowel"), lambda m: {"contains_character": "a"}),
]


def interpret_nl_query(query: str) -> FilterCriteria:
    """Interpret a natural language filter query into structured criteria.

    Returns empty criteria when no rule matches; deciding whether that is an
    error is left to the caller.
    """
    if not isinstance(query, str):
        raise TypeError("query must be a string")

    q = query.lower()
    filters: Dict[str, Any] = {}
    for pattern, effect in _RULES:
        m = pattern.search(q)
        if m:
            filters.update(effect(m))

    return FilterCriteria(**filters)
