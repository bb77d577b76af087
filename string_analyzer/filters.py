from typing import Iterable, List

from string_analyzer.schemas import FilterCriteria, StringRecord


def matches(record: StringRecord, criteria: FilterCriteria) -> bool:
    props = record.properties

    if criteria.is_palindrome is not None and props.is_palindrome != criteria.is_palindrome:
        return False

    if criteria.min_length is not None and props.length < criteria.min_length:
        return False

    if criteria.max_length is not None and props.length > criteria.max_length:
        return False

    if criteria.word_count is not None and props.word_count != criteria.word_count:
        return False

    # Case-sensitive, checked against the raw value
    if criteria.contains_character is not None and criteria.contains_character not in record.value:
        return False

    return True


def apply_filters(criteria: FilterCriteria, records: Iterable[StringRecord]) -> List[StringRecord]:
    """Keep the records that satisfy every criterion present, in input order."""
    return [r for r in records if matches(r, criteria)]
