"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Longest slice of the unconsumed value quoted back in a message.
_PREVIEW_LENGTH: int = 20


def _preview(text: str) -> str:
    """Truncate text for inclusion in a one-line message."""
    if len(text) > _PREVIEW_LENGTH:
        return text[:_PREVIEW_LENGTH] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # PATTERN COMPILE ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unterminated_quote(pattern: str, position: int) -> Diagnostic:
        """Quoted literal opened but never closed.

        Args:
            pattern: The pattern being compiled
            position: Offset of the opening apostrophe

        Returns:
            Diagnostic for PATTERN_UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quoted literal at position {position} in pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            span=SourceSpan(start=position, end=len(pattern)),
            hint="Close the literal with ' or write '' for a single apostrophe",
            received=_preview(pattern[position:]),
        )

    @staticmethod
    def pattern_too_long(length: int, limit: int) -> Diagnostic:
        """Pattern exceeds the input limit.

        Args:
            length: Actual pattern length
            limit: Configured maximum

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = f"Pattern length {length} exceeds maximum of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
            hint="Date/time patterns are short; check that the right field was passed",
        )

    @staticmethod
    def pattern_invalid_type(type_name: str) -> Diagnostic:
        """Pattern is not a string.

        Args:
            type_name: Name of the type actually received

        Returns:
            Diagnostic for PATTERN_INVALID_TYPE
        """
        msg = f"Expected pattern string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_TYPE,
            message=msg,
            expected="str",
            received=type_name,
        )

    # =========================================================================
    # VALUE MISMATCH ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def invalid_number(label: str, remaining: str, position: int) -> Diagnostic:
        """No digits where a numeric field was expected.

        Args:
            label: Description of the field (e.g., "day in month")
            remaining: Unconsumed value at the failure point
            position: Offset of the failure in the value

        Returns:
            Diagnostic for VALUE_INVALID_NUMBER
        """
        msg = f"Expected digits for {label}, found '{_preview(remaining)}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_INVALID_NUMBER,
            message=msg,
            span=SourceSpan(start=position, end=position),
            token=label,
            expected="digits",
            received=_preview(remaining),
        )

    @staticmethod
    def number_out_of_range(
        label: str,
        number: int,
        lower: int,
        upper: int,
        span: SourceSpan,
    ) -> Diagnostic:
        """Numeric field parsed but falls outside its closed interval.

        Args:
            label: Description of the field (e.g., "week in year")
            number: The parsed value
            lower: Inclusive lower bound
            upper: Inclusive upper bound
            span: Location of the digits in the value

        Returns:
            Diagnostic for VALUE_OUT_OF_RANGE
        """
        msg = f"Invalid {label} {number}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_OUT_OF_RANGE,
            message=msg,
            span=span,
            hint=f"A {label} must be between {lower} and {upper}",
            token=label,
            expected=f"{lower}..{upper}",
            received=str(number),
        )

    @staticmethod
    def unmatched_alternative(
        label: str,
        expected: str,
        remaining: str,
        position: int,
    ) -> Diagnostic:
        """None of an enumerated field's alternatives matched.

        Args:
            label: Description of the field (e.g., "era")
            expected: Summary of what would have been accepted
            remaining: Unconsumed value at the failure point
            position: Offset of the failure in the value

        Returns:
            Diagnostic for VALUE_UNMATCHED_ALTERNATIVE
        """
        msg = f"Expected {label} ({expected}), found '{_preview(remaining)}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_UNMATCHED_ALTERNATIVE,
            message=msg,
            span=SourceSpan(start=position, end=position),
            token=label,
            expected=expected,
            received=_preview(remaining),
        )

    @staticmethod
    def text_mismatch(literal: str, remaining: str, position: int) -> Diagnostic:
        """Literal pattern text not found verbatim.

        Args:
            literal: The literal the pattern requires
            remaining: Unconsumed value at the failure point
            position: Offset of the failure in the value

        Returns:
            Diagnostic for VALUE_TEXT_MISMATCH
        """
        found = _preview(remaining[: len(literal)])
        msg = f"Expected literal '{literal}', found '{found}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TEXT_MISMATCH,
            message=msg,
            span=SourceSpan(start=position, end=position + len(found)),
            hint="Literal text is matched case-sensitively",
            token="text",
            expected=literal,
            received=found,
        )

    @staticmethod
    def trailing_data(remaining: str, position: int) -> Diagnostic:
        """Characters left over after every token matched.

        Args:
            remaining: The unconsumed suffix
            position: Offset where the suffix starts

        Returns:
            Diagnostic for VALUE_TRAILING_DATA
        """
        msg = f"Remaining data after applying pattern '{_preview(remaining)}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TRAILING_DATA,
            message=msg,
            span=SourceSpan(start=position, end=position + len(remaining)),
            hint="The value must be fully consumed by the pattern",
            received=_preview(remaining),
        )

    @staticmethod
    def value_too_long(length: int, limit: int) -> Diagnostic:
        """Value exceeds the input limit.

        Args:
            length: Actual value length
            limit: Configured maximum

        Returns:
            Diagnostic for VALUE_TOO_LONG
        """
        msg = f"Value length {length} exceeds maximum of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TOO_LONG,
            message=msg,
        )

    @staticmethod
    def value_invalid_type(type_name: str) -> Diagnostic:
        """Value is not a string.

        Args:
            type_name: Name of the type actually received

        Returns:
            Diagnostic for VALUE_INVALID_TYPE
        """
        msg = f"Expected value string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_INVALID_TYPE,
            message=msg,
            expected="str",
            received=type_name,
        )
