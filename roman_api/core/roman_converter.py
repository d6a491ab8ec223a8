"""Roman Numeral Converter: greedy decomposition over a fixed mapping table.

Invariants:
    - ROMAN_MAPPINGS is strictly descending and includes all subtractive pairs
    - Range is checked BEFORE integer-ness: 4000.5 reports the range error
    - is_valid_roman_number never raises, for any input
    - bool is not a number here (True is not 1); Decimal is
    - NaN (float or Decimal) is the integer error, never compared

Design Decisions:
    - Tuple of pairs over dict: iteration order is the algorithm
    - Whole floats (3.0) are accepted and converted as ints
"""

import math
from decimal import Decimal
from numbers import Real

from roman_api.core.errors import NotAnIntegerError, NumberOutOfRangeError

MIN_VALUE = 1
MAX_VALUE = 3999

ROMAN_MAPPINGS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def _is_number(value) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _is_nan(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def _is_whole(value) -> bool:
    """True if value has no fractional part. NaN and infinities are not whole."""
    try:
        return value == math.floor(value)
    except (ValueError, OverflowError):
        return False


def convert_to_roman(value) -> str:
    """Convert an integer in [1, 3999] to its Roman numeral.

    Raises:
        NumberOutOfRangeError: value < 1 or value > 3999 (checked first).
        NotAnIntegerError: value is not a whole number.
    """
    if not _is_number(value) or _is_nan(value):
        raise NotAnIntegerError(value)
    if value < MIN_VALUE or value > MAX_VALUE:
        raise NumberOutOfRangeError(value, MIN_VALUE, MAX_VALUE)
    if not _is_whole(value):
        raise NotAnIntegerError(value)

    parts = []
    remaining = int(value)
    for amount, symbol in ROMAN_MAPPINGS:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount
    return "".join(parts)


def is_valid_roman_number(value) -> bool:
    """True iff value is a whole number between 1 and 3999 inclusive."""
    if not _is_number(value) or _is_nan(value):
        return False
    return _is_whole(value) and MIN_VALUE <= value <= MAX_VALUE
