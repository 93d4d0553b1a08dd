"""Tests for diagnostic codes, templates, exceptions and formatting."""

from __future__ import annotations

import json

import pytest

from datepattern.diagnostics import (
    DatePatternError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    OutputFormat,
    PatternCompileError,
    SourceSpan,
    ValueMismatchError,
)
from datepattern.syntax.tokens import Month

# ============================================================================
# CODES AND SPANS
# ============================================================================


class TestDiagnosticCode:
    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize("code", list(DiagnosticCode))
    def test_category_from_range(self, code: DiagnosticCode) -> None:
        is_pattern = code.name.startswith("PATTERN_")
        expected = ErrorCategory.COMPILE if is_pattern else ErrorCategory.MATCH
        assert code.category is expected

    def test_category_is_plain_string(self) -> None:
        assert str(ErrorCategory.MATCH) == "match"


class TestSourceSpan:
    def test_valid(self) -> None:
        span = SourceSpan(start=2, end=4)
        assert (span.start, span.end) == (2, 4)

    def test_empty_span_allowed(self) -> None:
        assert SourceSpan(start=3, end=3).end == 3

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(start=-1, end=0)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match="must be >= start"):
            SourceSpan(start=5, end=4)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Templates produce the documented messages and metadata."""

    def test_unterminated_quote(self) -> None:
        diagnostic = ErrorTemplate.unterminated_quote("yyyy 'at", 5)

        assert diagnostic.code is DiagnosticCode.PATTERN_UNTERMINATED_QUOTE
        assert diagnostic.message == (
            "Unterminated quoted literal at position 5 in pattern 'yyyy 'at'"
        )
        assert diagnostic.span == SourceSpan(start=5, end=8)
        assert diagnostic.received == "'at"

    def test_pattern_too_long(self) -> None:
        diagnostic = ErrorTemplate.pattern_too_long(5000, 4096)

        assert diagnostic.message == "Pattern length 5000 exceeds maximum of 4096 characters"

    def test_out_of_range(self) -> None:
        diagnostic = ErrorTemplate.number_out_of_range(
            "week in year", 57, 1, 56, SourceSpan(start=0, end=2)
        )

        assert diagnostic.message == "Invalid week in year 57"
        assert diagnostic.expected == "1..56"
        assert diagnostic.received == "57"
        assert diagnostic.hint == "A week in year must be between 1 and 56"

    def test_long_remaining_is_truncated(self) -> None:
        diagnostic = ErrorTemplate.trailing_data("x" * 50, 0)

        assert diagnostic.received == "x" * 20 + "..."
        assert diagnostic.span == SourceSpan(start=0, end=50)

    def test_text_mismatch_quotes_same_length(self) -> None:
        diagnostic = ErrorTemplate.text_mismatch("T", "t12:00", 10)

        assert diagnostic.message == "Expected literal 'T', found 't'"
        assert diagnostic.span == SourceSpan(start=10, end=11)

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.value_invalid_type("int")
        assert str(diagnostic) == "Expected value string, got int"


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(PatternCompileError, DatePatternError)
        assert issubclass(ValueMismatchError, DatePatternError)

    def test_compile_error_attributes(self) -> None:
        diagnostic = ErrorTemplate.unterminated_quote("'x", 0)
        error = PatternCompileError(diagnostic, pattern="'x", position=0)

        assert str(error) == diagnostic.message
        assert error.diagnostic is diagnostic
        assert error.pattern == "'x"

    def test_mismatch_error_attributes(self) -> None:
        diagnostic = ErrorTemplate.number_out_of_range(
            "month", 13, 1, 12, SourceSpan(start=5, end=7)
        )
        error = ValueMismatchError(diagnostic, value="2001-13", token=Month(), remaining="13")

        assert error.token == Month()
        assert error.remaining == "13"
        with pytest.raises(DatePatternError, match="Invalid month 13"):
            raise error


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output formats and escaping."""

    diagnostic = ErrorTemplate.number_out_of_range(
        "day in month", 32, 1, 31, SourceSpan(start=0, end=2)
    )

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(self.diagnostic)

        assert output.splitlines() == [
            "error[VALUE_OUT_OF_RANGE]: Invalid day in month 32",
            "  --> offset 0..2",
            "  = token: day in month",
            "  = expected: 1..31",
            "  = received: 32",
            "  = help: A day in month must be between 1 and 31",
        ]

    def test_format_error_delegates(self) -> None:
        assert self.diagnostic.format_error() == DiagnosticFormatter().format(self.diagnostic)

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self.diagnostic) == "VALUE_OUT_OF_RANGE: Invalid day in month 32"

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self.diagnostic))

        assert data["code"] == "VALUE_OUT_OF_RANGE"
        assert data["code_value"] == 2002
        assert data["category"] == "match"
        assert (data["start"], data["end"]) == (0, 2)
        assert data["expected"] == "1..31"

    def test_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(self.diagnostic)
        assert output.startswith("\033[1;31merror\033[0m[")

    def test_control_characters_escaped(self) -> None:
        """A hostile value cannot inject new lines into the output."""
        diagnostic = ErrorTemplate.trailing_data("\nerror[FAKE]: x\x1b", 4)
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)

        assert "\n" not in output
        assert "\\n" in output
        assert "\\x1b" in output

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.VALUE_TOO_LONG, message="m" * 30)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "VALUE_TOO_LONG: " + "m" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        other = ErrorTemplate.value_too_long(70000, 65536)

        assert formatter.format_all([self.diagnostic, other]).split("\n\n") == [
            "VALUE_OUT_OF_RANGE: Invalid day in month 32",
            "VALUE_TOO_LONG: Value length 70000 exceeds maximum of 65536 characters",
        ]
