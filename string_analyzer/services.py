import logging
import re
from typing import Any, Dict, Optional

from string_analyzer.errors import InvalidTypeError, ValidationError
from string_analyzer.filters import apply_filters
from string_analyzer.nlp import interpret_nl_query
from string_analyzer.schemas import FilterCriteria, StringRecord
from string_analyzer.store import StringStore

logger = logging.getLogger("string_analyzer.services")


def create_string(value: Any, store: StringStore) -> StringRecord:
    """Validate a submitted value, analyze it and store the result."""
    if value is None:
        raise ValidationError('Missing "value" field')
    if not isinstance(value, str):
        raise InvalidTypeError('Invalid data type for "value" (must be string)')
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates survive JSON decoding but cannot be sent back out
        raise ValidationError('Invalid "value" (must be valid Unicode text)')
    return store.insert(value)


def get_string_by_value(string_value: str, store: StringStore) -> StringRecord:
    """Lookup by the exact raw string value."""
    return store.get(string_value)


def delete_string_by_value(string_value: str, store: StringStore) -> None:
    """Delete by the exact raw string value."""
    store.delete(string_value)


def _parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValidationError(f"Invalid value for {name} parameter (must be 'true' or 'false')")


def _parse_non_negative_int(name: str, raw: str) -> int:
    if not re.fullmatch(r"-?\d+", raw, re.ASCII):
        raise ValidationError(f"Invalid value for {name} parameter (must be an integer)")
    n = int(raw)
    if n < 0:
        raise ValidationError(f"{name} must be non-negative")
    return n


def validate_query_filters(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> FilterCriteria:
    """Turn raw query-string values into typed filter criteria."""
    filters: Dict[str, Any] = {}

    if is_palindrome is not None:
        filters["is_palindrome"] = _parse_bool("is_palindrome", is_palindrome)

    if min_length is not None:
        filters["min_length"] = _parse_non_negative_int("min_length", min_length)

    if max_length is not None:
        filters["max_length"] = _parse_non_negative_int("max_length", max_length)

    if word_count is not None:
        filters["word_count"] = _parse_non_negative_int("word_count", word_count)

    if contains_character is not None:
        if len(contains_character) != 1:
            raise ValidationError("contains_character must be a single character")
        filters["contains_character"] = contains_character

    return FilterCriteria(**filters)


def get_all_strings_with_filters(store: StringStore, criteria: FilterCriteria) -> Dict[str, Any]:
    records = apply_filters(criteria, store.all())
    return {
        "data": records,
        "count": len(records),
        "filters_applied": criteria.as_dict(),
    }


def get_strings_by_natural_language(store: StringStore, query: Optional[str]) -> Dict[str, Any]:
    if not query:
        raise ValidationError("Missing query parameter")

    criteria = interpret_nl_query(query)
    if criteria.is_empty():
        logger.info("No filters recognised in natural language query %r", query)
        raise ValidationError("Unable to parse natural language query")

    records = apply_filters(criteria, store.all())
    return {
        "data": records,
        "count": len(records),
        "interpreted_query": {
            "original": query,
            "parsed_filters": criteria.as_dict(),
        },
    }
