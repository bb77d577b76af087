import pytest

from string_analyzer.nlp import interpret_nl_query


def test_single_word_palindromic():
    parsed = interpret_nl_query("all single word palindromic strings").as_dict()
    assert parsed == {"word_count": 1, "is_palindrome": True}


def test_strings_longer_than_10():
    # longer than 10 => min_length = 11
    assert interpret_nl_query("strings longer than 10 characters").as_dict() == {"min_length": 11}


def test_strings_shorter_than_5():
    assert interpret_nl_query("strings shorter than 5 characters").as_dict() == {"max_length": 4}


def test_no_match_is_empty():
    criteria = interpret_nl_query("xyz")
    assert criteria.is_empty()
    assert criteria.as_dict() == {}


def test_contains_letter_z():
    assert interpret_nl_query("strings containing the letter z").contains_character == "z"


@pytest.mark.parametrize(
    "query",
    ["strings that contain q", "strings that contains the q", "strings containing letter q", "Strings Containing The Letter Q"],
)
def test_contains_variants(query):
    assert interpret_nl_query(query).contains_character == "q"


def test_contain_the_first_vowel():
    # first vowel is read literally as 'a' and overrides the letter captured before it
    assert interpret_nl_query("strings that contain the first vowel").contains_character == "a"


def test_numeric_word_count_overrides_single_word():
    assert interpret_nl_query("single word strings with 3 words").word_count == 3


@pytest.mark.parametrize("query,expected", [("1 word strings", 1), ("strings with 2 words", 2), ("exactly 12 words", 12)])
def test_numeric_word_count(query, expected):
    assert interpret_nl_query(query).word_count == expected


@pytest.mark.parametrize("query", ["palindrome", "PALINDROMIC strings", "show me palindromes"])
def test_palindrome_substring(query):
    assert interpret_nl_query(query).as_dict() == {"is_palindrome": True}


def test_rules_combine():
    parsed = interpret_nl_query("palindromic strings longer than 2 and shorter than 9 containing the letter r").as_dict()
    assert parsed == {"is_palindrome": True, "min_length": 3, "max_length": 8, "contains_character": "r"}


def test_non_string_query_rejected():
    with pytest.raises(TypeError):
        interpret_nl_query(None)  # type: ignore[arg-type]
