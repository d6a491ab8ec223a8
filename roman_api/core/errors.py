"""Error Hierarchy: typed, categorized exceptions for every conversion failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors map to 400; internal failures map to 500
    - Range and integer errors also subclass ValueError / TypeError respectively
    - Messages are safe to show to clients for 4xx; 5xx messages are never returned

Design Decisions:
    - Single hierarchy with RomanApiError base: one FastAPI handler catches all
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class RomanApiError(Exception):
    """Base exception for all Roman numeral API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingQueryError(RomanApiError):
    """Request lacks the required query parameter."""
    def __init__(self):
        super().__init__(
            "Missing query parameter", "MISSING_QUERY",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )


class InvalidNumberFormatError(RomanApiError):
    """Query parameter present but not parseable as an integer."""
    def __init__(self, raw: str):
        super().__init__(
            "Invalid number format", "INVALID_NUMBER_FORMAT",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.raw = raw


class NumberOutOfRangeError(RomanApiError, ValueError):
    """Number falls outside the representable range."""
    def __init__(self, value, minimum: int, maximum: int):
        super().__init__(
            f"Number must be between {minimum} and {maximum}",
            "NUMBER_OUT_OF_RANGE",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.value = value


class NotAnIntegerError(RomanApiError, TypeError):
    """Number is not a whole number."""
    def __init__(self, value):
        super().__init__(
            "Number must be an integer", "NOT_AN_INTEGER",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.value = value


# ─── Internal Errors (500-level) ────────────────────────────────

class ConversionFailedError(RomanApiError):
    """Converter rejected a value the API layer had already validated."""
    def __init__(self, value: int, reason: str):
        super().__init__(
            f"Conversion of {value} failed: {reason}", "CONVERSION_FAILED",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
        self.value = value
