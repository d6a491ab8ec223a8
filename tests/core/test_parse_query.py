"""Query parsing tests: missing, malformed, out-of-range, and accepted queries.

Tests cover:
    - Leading integer prefix is parsed, trailing text ignored
    - Only queries with no leading digits are malformed
"""

import pytest

from roman_api.core.errors import (
    InvalidNumberFormatError, MissingQueryError, NumberOutOfRangeError,
)
from roman_api.core.parse_query import parse_query


@pytest.mark.parametrize("query", [None, ""])
def test_missing_query(query):
    with pytest.raises(MissingQueryError, match="Missing query parameter"):
        parse_query(query)


@pytest.mark.parametrize("query", [
    "abc", "  ", "--1", "+", ".5", "e3", "x12", "٤٢",
])
def test_malformed_query(query):
    with pytest.raises(InvalidNumberFormatError, match="Invalid number format"):
        parse_query(query)


@pytest.mark.parametrize("query", ["0", "-5", "4000", "5000", "0x10", "-1.5"])
def test_out_of_range_query(query):
    with pytest.raises(NumberOutOfRangeError, match="between 1 and 3999"):
        parse_query(query)


def test_huge_digit_string_is_out_of_range():
    with pytest.raises(NumberOutOfRangeError):
        parse_query("9" * 10_000)


@pytest.mark.parametrize("query,expected", [
    ("1", 1), ("42", 42), ("3999", 3999), (" 42 ", 42), ("+7", 7), ("007", 7),
])
def test_accepted_query(query, expected):
    assert parse_query(query) == expected


@pytest.mark.parametrize("query,expected", [
    ("12abc", 12), ("4.5", 4), ("1e3", 1), ("4_2", 4), ("  9 lives", 9),
    ("3999.99", 3999),
])
def test_leading_integer_prefix_is_parsed(query, expected):
    assert parse_query(query) == expected
