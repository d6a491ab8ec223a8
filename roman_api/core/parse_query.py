"""Query Parsing: raw `query` string to a validated integer or a typed client error.

Invariants:
    - Missing/empty query -> MissingQueryError
    - The leading integer prefix is parsed ("12abc" -> 12, "4.5" -> 4, "1e3" -> 1)
    - No leading digits after optional whitespace and sign -> InvalidNumberFormatError
    - Parsed value outside [1, 3999] -> NumberOutOfRangeError
    - Checks run in exactly that order
"""

import re

from roman_api.core.errors import (
    InvalidNumberFormatError, MissingQueryError, NumberOutOfRangeError,
)
from roman_api.core.roman_converter import MAX_VALUE, MIN_VALUE

_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_query(query: str | None) -> int:
    """Parse and range-check the conversion query. Pure, no IO."""
    if not query:
        raise MissingQueryError()

    match = _INTEGER_PREFIX.match(query.lstrip())
    if not match:
        raise InvalidNumberFormatError(query)

    try:
        value = int(match.group())
    except ValueError:
        # digit string longer than sys.get_int_max_str_digits()
        raise NumberOutOfRangeError(match.group(), MIN_VALUE, MAX_VALUE) from None
    if value < MIN_VALUE or value > MAX_VALUE:
        raise NumberOutOfRangeError(value, MIN_VALUE, MAX_VALUE)
    return value
