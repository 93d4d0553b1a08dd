"""Format pattern compiler.

Turns a date/time format pattern such as "EEE, MMM d, ''yy" into a tuple
of PatternToken values.

- compile_pattern() returns tuple[tuple[PatternToken, ...] | None, tuple[PatternCompileError, ...]]
- Never raises for bad patterns; errors are returned in the tuple
- Compiled patterns are cached per pattern string

Pattern Grammar:
    Letter  | Token             | Letter | Token
    --------|-------------------|--------|------------------
    G       | Era               | a      | AmPmMarker
    y, Y    | Year              | H      | HourInDay
    M, L    | Month             | k      | HourInDayFromOne
    w       | WeekInYear        | K      | HourInAmPm
    W       | WeekInMonth       | h      | HourInAmPmFromOne
    D       | DayInYear         | m      | Minute
    d       | DayInMonth        | s      | Second
    F       | DayOfWeekInMonth  | S      | Millisecond
    E       | DayName           |        |
    u       | DayOfWeek         |        |

    A run of letters from one row compiles to ONE token; the run length is
    discarded. Mixed runs within a row ("YYyy", "MLM") are one run.

Quote Escaping:
    - Single quotes delimit literal text: 'at' -> Text("at")
    - Two consecutive single quotes '' produce a literal single quote,
      both inside and outside a quoted section
    - Example: "hh 'o''clock'" -> [HourInAmPmFromOne(), Text(" "), Text("o'clock")]

Every other character, including z, Z and X, is literal text.

Thread-safe. Python 3.13+.
"""

import logging
from collections.abc import Callable
from functools import lru_cache

from datepattern.constants import MAX_PATTERN_LENGTH, PATTERN_CACHE_SIZE, QUOTE, RESERVED_LETTERS
from datepattern.diagnostics import ErrorTemplate, PatternCompileError
from datepattern.syntax.cursor import Cursor, ParseResult
from datepattern.syntax.tokens import FIELD_TOKEN_TYPES, FieldToken, PatternToken, Text

__all__ = ["compile_pattern"]

logger = logging.getLogger(__name__)

# Lookahead character -> field token type. Reserved letters are disjoint
# across token types, so at most one entry can apply at any position.
_FIELD_DISPATCH: dict[str, type[FieldToken]] = {
    letter: token_type for token_type in FIELD_TOKEN_TYPES for letter in token_type.letters
}

# Characters that end an unquoted literal run.
_LITERAL_STOP: frozenset[str] = RESERVED_LETTERS | {QUOTE}

_DOUBLED_QUOTE: str = QUOTE * 2

type _Scanner = Callable[[Cursor], ParseResult[PatternToken] | None]


def _scan_field(cursor: Cursor) -> ParseResult[PatternToken] | None:
    """Consume a maximal run of one field's letters."""
    token_type = _FIELD_DISPATCH.get(cursor.current)
    if token_type is None:
        return None
    # Width is dropped here: the token is built without the run length.
    end = cursor.skip_run(token_type.letters)
    return ParseResult(token_type(), end)


def _scan_quoted_text(cursor: Cursor) -> ParseResult[PatternToken] | None:
    """Consume a quoted literal: ' segment+ '.

    Each segment is either '' (one apostrophe) or a run of non-apostrophes.
    Returns None when there is no segment or no closing quote, leaving the
    position for the bare '' scanner or the unterminated-quote error.
    """
    if cursor.current != QUOTE:
        return None

    c = cursor.advance()
    segments: list[str] = []
    while not c.is_eof:
        if c.current == QUOTE:
            if c.peek(1) == QUOTE:
                segments.append(QUOTE)
                c = c.advance(2)
                continue
            if not segments:
                return None
            return ParseResult(Text("".join(segments)), c.advance())
        run_end = c.skip_until(QUOTE)
        segments.append(c.slice_to(run_end.pos))
        c = run_end
    return None


def _scan_doubled_quote(cursor: Cursor) -> ParseResult[PatternToken] | None:
    """Consume '' outside a quoted section as a single apostrophe."""
    if cursor.slice_ahead(2) != _DOUBLED_QUOTE:
        return None
    return ParseResult(Text(QUOTE), cursor.advance(2))


def _scan_literal_text(cursor: Cursor) -> ParseResult[PatternToken] | None:
    """Consume a maximal run of non-reserved, non-apostrophe characters."""
    end = cursor.skip_until(_LITERAL_STOP)
    if end.pos == cursor.pos:
        return None
    return ParseResult(Text(cursor.slice_to(end.pos)), end)


# Fixed priority. The literal-text fallback must stay last: it is the only
# scanner whose character class is defined by exclusion.
_SCANNERS: tuple[_Scanner, ...] = (
    _scan_field,
    _scan_quoted_text,
    _scan_doubled_quote,
    _scan_literal_text,
)


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile(
    pattern: str,
) -> tuple[tuple[PatternToken, ...] | None, tuple[PatternCompileError, ...]]:
    """Tokenize pattern.

    Results are cached per pattern string, errors included, so repeated
    calls return the same objects and compare equal.

    Returns:
        (tokens, ()) on success, or (None, (error,)) when a position cannot
        be consumed by any scanner.
    """
    tokens: list[PatternToken] = []
    cursor = Cursor(pattern, 0)

    while not cursor.is_eof:
        for scanner in _SCANNERS:
            result = scanner(cursor)
            if result is not None:
                tokens.append(result.value)
                cursor = result.cursor
                break
        else:
            # Only an apostrophe can defeat every scanner.
            logger.debug("Unterminated quote at %d in pattern %r", cursor.pos, pattern)
            diagnostic = ErrorTemplate.unterminated_quote(pattern, cursor.pos)
            error = PatternCompileError(diagnostic, pattern=pattern, position=cursor.pos)
            return (None, (error,))

    logger.debug("Compiled pattern %r into %d tokens", pattern, len(tokens))
    return (tuple(tokens), ())


def compile_pattern(
    pattern: str,
) -> tuple[tuple[PatternToken, ...] | None, tuple[PatternCompileError, ...]]:
    """Compile a date/time format pattern into pattern tokens.

    Args:
        pattern: Format pattern (e.g., "yyyy-MM-dd", "EEE, MMM d, ''yy")

    Returns:
        Tuple of (tokens, errors):
        - tokens: Compiled tokens, or None if compilation failed
        - errors: Tuple of PatternCompileError (empty tuple on success)

    Examples:
        >>> tokens, errors = compile_pattern("yyyy-MM-dd")
        >>> tokens
        (Year(), Text(literal='-'), Month(), Text(literal='-'), DayInMonth())
        >>> errors
        ()

        >>> tokens, errors = compile_pattern("'dd-''MM''-yyyy'")
        >>> tokens
        (Text(literal="dd-'MM'-yyyy"),)

        >>> tokens, errors = compile_pattern("yyyy 'at")
        >>> tokens is None
        True
        >>> errors[0].position
        5

    Thread Safety:
        Thread-safe. No global mutable state beyond the lru_cache.
    """
    # Type check: pattern must be string (runtime defense for untyped callers)
    if not isinstance(pattern, str):
        diagnostic = ErrorTemplate.pattern_invalid_type(  # type: ignore[unreachable]
            type(pattern).__name__
        )
        return (None, (PatternCompileError(diagnostic, pattern=str(pattern), position=0),))

    if len(pattern) > MAX_PATTERN_LENGTH:
        diagnostic = ErrorTemplate.pattern_too_long(len(pattern), MAX_PATTERN_LENGTH)
        return (None, (PatternCompileError(diagnostic, pattern=pattern, position=0),))

    return _compile(pattern)
