"""Immutable cursor infrastructure for type-safe scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Used both to walk the format pattern and to consume the candidate value.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The unconsumed suffix is always available as `rest`

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from collections.abc import Container
from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("2001-01", 0)
        >>> cursor.current
        '2'
        >>> cursor.advance(4).rest
        '-01'
        >>> cursor.current  # Original unchanged (immutability)
        '2'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Unconsumed suffix of the source."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Immutability prevents infinite loops: forgetting to reassign the
        cursor leaves it unchanged, so `while not cursor.is_eof` exits
        instead of spinning.
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.

        Example:
            >>> Cursor("hello", 0).slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def skip_run(self, chars: Container[str], limit: int | None = None) -> "Cursor":
        """Advance past consecutive characters drawn from chars.

        Args:
            chars: Characters that may be consumed
            limit: Maximum number of characters to consume (None = unbounded)

        Returns:
            New cursor past the run (unchanged if the run is empty)

        Example:
            >>> Cursor("2024x", 0).skip_run("0123456789").pos
            4
            >>> Cursor("2024x", 0).skip_run("0123456789", limit=2).pos
            2
        """
        end = len(self.source) if limit is None else min(self.pos + limit, len(self.source))
        pos = self.pos
        while pos < end and self.source[pos] in chars:
            pos += 1
        return Cursor(self.source, pos)

    def skip_until(self, stop: Container[str]) -> "Cursor":
        """Advance up to (not past) the first character in stop.

        Example:
            >>> Cursor("ab'cd", 0).skip_until("'").pos
            2
        """
        pos = self.pos
        while pos < len(self.source) and self.source[pos] not in stop:
            pos += 1
        return Cursor(self.source, pos)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing the recognized value and new cursor position.

    Type Parameters:
        T: The type of the recognized value

    Pattern:
        Every scanner has signature:
            def scan_foo(cursor: Cursor) -> ParseResult[Foo] | None

    Example:
        >>> result = ParseResult("2001", Cursor("2001-01", 4))
        >>> result.value
        '2001'
        >>> result.cursor.rest
        '-01'
    """

    value: T
    cursor: Cursor
