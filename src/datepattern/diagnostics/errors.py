"""datepattern exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
They are normally returned inside results rather than raised; see
ValidationOutcome.raise_for_error() for the raising path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from datepattern.syntax.tokens import PatternToken

__all__ = [
    "DatePatternError",
    "PatternCompileError",
    "ValueMismatchError",
]


class DatePatternError(Exception):
    """Base exception for all datepattern errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize DatePatternError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class PatternCompileError(DatePatternError):
    """Format pattern could not be fully tokenized.

    The primary cause is a quoted literal that is never closed.

    Attributes:
        pattern: The pattern that failed to compile
        position: Character offset in the pattern where compilation stopped
    """

    def __init__(self, diagnostic: Diagnostic, *, pattern: str, position: int) -> None:
        super().__init__(diagnostic)
        self.pattern = pattern
        self.position = position


class ValueMismatchError(DatePatternError):
    """Candidate value does not conform to the compiled pattern.

    Attributes:
        value: The full candidate value
        token: The pattern token whose recognizer failed, or None when
            the failure is not attributable to one token (trailing data,
            oversized or non-string input)
        remaining: Unconsumed suffix of the value at the point of failure

    Example:
        >>> outcome = validate_datetime("57", "ww")
        >>> outcome.error.token
        WeekInYear()
        >>> outcome.error.remaining
        '57'
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        value: str,
        token: PatternToken | None,
        remaining: str,
    ) -> None:
        super().__init__(diagnostic)
        self.value = value
        self.token = token
        self.remaining = remaining
