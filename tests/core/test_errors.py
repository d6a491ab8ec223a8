"""Error hierarchy tests: codes, statuses, categories."""

from roman_api.core.errors import (
    ConversionFailedError, ErrorCategory, InvalidNumberFormatError,
    MissingQueryError, NotAnIntegerError, NumberOutOfRangeError, RomanApiError,
)


def test_client_errors_are_400_validation():
    for exc in (
        MissingQueryError(),
        InvalidNumberFormatError("abc"),
        NumberOutOfRangeError(0, 1, 3999),
        NotAnIntegerError(1.5),
    ):
        assert isinstance(exc, RomanApiError)
        assert exc.http_status == 400
        assert exc.is_client_error
        assert exc.category == ErrorCategory.VALIDATION


def test_conversion_failed_is_internal_500():
    exc = ConversionFailedError(42, "boom")
    assert exc.http_status == 500
    assert not exc.is_client_error
    assert exc.category == ErrorCategory.INTERNAL
    assert exc.code == "CONVERSION_FAILED"
    assert "42" in exc.message


def test_range_message_names_bounds():
    assert NumberOutOfRangeError(5000, 1, 3999).message == (
        "Number must be between 1 and 3999"
    )
