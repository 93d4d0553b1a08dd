"""Value validation against compiled patterns.

- validate() matches a value against already-compiled tokens
- validate_datetime() compiles the pattern and validates in one call
- Both return ValidationOutcome and NEVER raise for bad input
- ValidationOutcome.raise_for_error() is the opt-in raising path

Matching walks the tokens in order, each consuming a prefix of what is left
of the value. The first token that cannot match ends the call; there is no
search for an alternative alignment. After the last token the value must be
fully consumed.

Thread-safe. Python 3.13+.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from datepattern.constants import MAX_VALUE_LENGTH
from datepattern.diagnostics import (
    DatePatternError,
    Diagnostic,
    ErrorCategory,
    ErrorTemplate,
    PatternCompileError,
    ValueMismatchError,
)
from datepattern.matching.recognizers import recognize
from datepattern.syntax.compiler import compile_pattern
from datepattern.syntax.cursor import Cursor
from datepattern.syntax.tokens import PatternToken

__all__ = [
    "ValidationOutcome",
    "matches_datetime",
    "validate",
    "validate_datetime",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of validating one value.

    Immutable and comparable: identical inputs always produce equal
    outcomes.

    Attributes:
        value: The candidate value
        diagnostic: Why matching failed, or None on success
        token: Token whose recognizer failed; None on success, for compile
            failures, and for failures not tied to a token (trailing data)
        remaining: Unconsumed suffix at the point of failure ("" on success)
        pattern: Source pattern when known (validate_datetime), else None

    Example:
        >>> outcome = validate_datetime("2001-13-01", "yyyy-MM-dd")
        >>> outcome.is_valid
        False
        >>> outcome.token
        Month()
        >>> outcome.remaining
        '13-01'
        >>> outcome.reason
        'Invalid month 13'
    """

    value: str
    diagnostic: Diagnostic | None = None
    token: PatternToken | None = None
    remaining: str = ""
    pattern: str | None = None

    @property
    def is_valid(self) -> bool:
        """True when every token matched and nothing was left over."""
        return self.diagnostic is None

    @property
    def reason(self) -> str:
        """Human-readable failure reason ("" on success)."""
        return self.diagnostic.message if self.diagnostic is not None else ""

    @property
    def error(self) -> DatePatternError | None:
        """Failure as an exception object, or None on success.

        A new exception instance is built on each access.
        """
        diagnostic = self.diagnostic
        if diagnostic is None:
            return None
        if diagnostic.code.category is ErrorCategory.COMPILE:
            position = diagnostic.span.start if diagnostic.span is not None else 0
            return PatternCompileError(
                diagnostic, pattern=self.pattern or "", position=position
            )
        return ValueMismatchError(
            diagnostic, value=self.value, token=self.token, remaining=self.remaining
        )

    def raise_for_error(self) -> None:
        """Raise the failure, if any.

        Raises:
            PatternCompileError: If the pattern could not be compiled
            ValueMismatchError: If the value does not match the pattern
        """
        error = self.error
        if error is not None:
            raise error


def _mismatch(
    value: str,
    diagnostic: Diagnostic,
    *,
    token: PatternToken | None = None,
    remaining: str = "",
    pattern: str | None = None,
) -> ValidationOutcome:
    logger.debug(
        "Value %r rejected at token %r: %s", value, token, diagnostic.message
    )
    return ValidationOutcome(
        value=value,
        diagnostic=diagnostic,
        token=token,
        remaining=remaining,
        pattern=pattern,
    )


def _validate(
    value: str, tokens: Sequence[PatternToken], pattern: str | None
) -> ValidationOutcome:
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.value_invalid_type(  # type: ignore[unreachable]
            type(value).__name__
        )
        return _mismatch(str(value), diagnostic, remaining=str(value), pattern=pattern)

    if len(value) > MAX_VALUE_LENGTH:
        diagnostic = ErrorTemplate.value_too_long(len(value), MAX_VALUE_LENGTH)
        return _mismatch(value, diagnostic, remaining=value, pattern=pattern)

    cursor = Cursor(value, 0)
    for token in tokens:
        result = recognize(token, cursor)
        if isinstance(result, Diagnostic):
            return _mismatch(
                value, result, token=token, remaining=cursor.rest, pattern=pattern
            )
        cursor = result.cursor

    if not cursor.is_eof:
        diagnostic = ErrorTemplate.trailing_data(cursor.rest, cursor.pos)
        return _mismatch(value, diagnostic, remaining=cursor.rest, pattern=pattern)

    return ValidationOutcome(value=value, pattern=pattern)


def validate(value: str, tokens: Sequence[PatternToken]) -> ValidationOutcome:
    """Validate value against compiled pattern tokens.

    Args:
        value: Candidate text (e.g., "2001-01-02")
        tokens: Tokens from compile_pattern()

    Returns:
        ValidationOutcome; is_valid is True only when every token matched
        in order and the value was fully consumed.

    Examples:
        >>> tokens, _ = compile_pattern("dd")
        >>> validate("31", tokens).is_valid
        True
        >>> validate("32", tokens).reason
        'Invalid day in month 32'
        >>> validate("", ()).is_valid
        True
    """
    return _validate(value, tokens, None)


def validate_datetime(value: str, format: str) -> ValidationOutcome:  # noqa: A002
    """Compile format and validate value against it.

    Compile failures are reported through the outcome, with remaining set
    to the whole value since nothing was consumed.

    Args:
        value: Candidate text (e.g., "Wed, Jul 4, '01")
        format: Format pattern (e.g., "EEE, MMM d, ''yy")

    Returns:
        ValidationOutcome

    Examples:
        >>> validate_datetime("2001-01-02", "yyyy-MM-dd").is_valid
        True
        >>> validate_datetime("57", "ww").reason
        'Invalid week in year 57'
        >>> validate_datetime("x", "'x").diagnostic.code.name
        'PATTERN_UNTERMINATED_QUOTE'
    """
    tokens, errors = compile_pattern(format)
    if tokens is None:
        text = value if isinstance(value, str) else str(value)
        return _mismatch(
            text, errors[0].diagnostic, remaining=text, pattern=errors[0].pattern
        )
    return _validate(value, tokens, format)


def matches_datetime(value: str, format: str) -> bool:  # noqa: A002
    """Return True if value conforms to format.

    Convenience for callers that only need the verdict.

    Example:
        >>> matches_datetime("2001-W27-3", "YYYY-'W'ww-u")
        True
    """
    return validate_datetime(value, format).is_valid
