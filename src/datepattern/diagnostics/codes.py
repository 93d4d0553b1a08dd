"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Phase in which a diagnostic was produced.

    Inherits from ``StrEnum`` so log aggregation receives plain strings
    (``"compile"``, ``"match"``) rather than the ``"ErrorCategory.X"`` repr.

    Categories:
        COMPILE: The format pattern could not be tokenized
        MATCH: The candidate value does not conform to the compiled pattern
    """

    COMPILE = "compile"
    MATCH = "match"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern compile errors
        2000-2999: Value mismatch errors
    """

    # Pattern compile errors (1000-1999)
    PATTERN_UNTERMINATED_QUOTE = 1001
    PATTERN_TOO_LONG = 1002
    PATTERN_INVALID_TYPE = 1003

    # Value mismatch errors (2000-2999)
    VALUE_INVALID_NUMBER = 2001
    VALUE_OUT_OF_RANGE = 2002
    VALUE_UNMATCHED_ALTERNATIVE = 2003
    VALUE_TEXT_MISMATCH = 2004
    VALUE_TRAILING_DATA = 2005
    VALUE_TOO_LONG = 2006
    VALUE_INVALID_TYPE = 2007

    @property
    def category(self) -> ErrorCategory:
        """Phase this code belongs to, derived from its numeric range."""
        if self.value < 2000:
            return ErrorCategory.COMPILE
        return ErrorCategory.MATCH


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic inside the pattern or the value.

    Patterns and values are single-line in practice, so only character
    offsets are tracked.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and the calling rule engine.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern (compile errors) or value (mismatches)
        hint: Suggestion for fixing the error
        token: Description of the pattern token that failed (mismatches only)
        expected: What the recognizer would have accepted
        received: The text actually found at the failure point
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    token: str | None = None
    expected: str | None = None
    received: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[VALUE_OUT_OF_RANGE]: Invalid week in year 57
              --> offset 0..2
              = token: week in year
              = expected: 1..56
              = received: 57

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
