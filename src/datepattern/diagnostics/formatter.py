"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


# Values quoted in messages come from untrusted response bodies.
_CONTROL_ESCAPES: dict[int, str] = {
    code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)
} | {ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"}


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable
    output. Control characters in messages are always escaped so that a
    hostile value cannot forge log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate long text fields
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum text length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.trailing_data("xyz", 4)
        >>> print(formatter.format(diagnostic))
        error[VALUE_TRAILING_DATA]: Remaining data after applying pattern 'xyz'
          --> offset 4..7
          = received: xyz
          = help: The value must be fully consumed by the pattern

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        VALUE_TRAILING_DATA: Remaining data after applying pattern 'xyz'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[VALUE_OUT_OF_RANGE]: Invalid day in month 32
              --> offset 0..2
              = token: day in month
              = expected: 1..31
              = received: 32
              = help: A day in month must be between 1 and 31
        """
        label = "error"
        if self.color:
            label = f"\033[1;31m{label}\033[0m"  # Bold red

        message = self._clean(diagnostic.message)
        parts = [f"{label}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> offset {diagnostic.span.start}..{diagnostic.span.end}")

        if diagnostic.token:
            parts.append(f"  = token: {diagnostic.token}")

        if diagnostic.expected:
            parts.append(f"  = expected: {self._clean(diagnostic.expected)}")

        if diagnostic.received:
            parts.append(f"  = received: {self._clean(diagnostic.received)}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            VALUE_TRAILING_DATA: Remaining data after applying pattern 'xyz'
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "VALUE_TEXT_MISMATCH", "code_value": 2004, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.token:
            data["token"] = diagnostic.token

        if diagnostic.expected:
            data["expected"] = self._maybe_sanitize(diagnostic.expected)

        if diagnostic.received:
            data["received"] = self._maybe_sanitize(diagnostic.received)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        # json.dumps escapes control characters itself
        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Sanitize if enabled, then escape control characters."""
        return self._maybe_sanitize(text).translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
