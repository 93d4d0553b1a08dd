"""Per-token value recognizers.

Each recognizer looks at the head of the unconsumed value, consumes as few
characters as its rule requires, and returns either ParseResult (matched
text + advanced cursor) or a Diagnostic explaining the rejection. No
recognizer retries or backtracks.

Numeric Policy:
    Take the maximal ASCII digit run up to the field width, parse it as an
    unsigned integer, reject if it falls outside the closed interval.
    An empty run is a parse failure. Fields without bounds are never
    converted to int, so arbitrarily long years stay cheap.

    Token            | Width | Bounds
    -----------------|-------|--------
    Year             | any   | none
    Month (numeric)  | 2     | 1..12
    WeekInYear       | 2     | 1..56
    WeekInMonth      | 2     | 1..5
    DayInYear        | 2     | 1..356
    DayInMonth       | 2     | 1..31
    DayOfWeekInMonth | any   | none
    DayOfWeek        | 1     | 1..7
    HourInDay        | 2     | 0..23
    HourInDayFromOne | 2     | 1..24
    HourInAmPm       | 2     | 0..11
    HourInAmPmFromOne| 2     | 1..12
    Minute           | 2     | 0..59
    Second           | 2     | 0..59
    Millisecond      | 3     | 0..999

Python 3.13+.
"""

from dataclasses import dataclass
from typing import assert_never

from datepattern.constants import ASCII_DIGITS
from datepattern.diagnostics import Diagnostic, ErrorTemplate, SourceSpan
from datepattern.matching.names import (
    NameTable,
    am_pm_markers,
    day_names,
    era_names,
    month_names,
)
from datepattern.syntax.cursor import Cursor, ParseResult
from datepattern.syntax.tokens import (
    AmPmMarker,
    DayInMonth,
    DayInYear,
    DayName,
    DayOfWeek,
    DayOfWeekInMonth,
    Era,
    HourInAmPm,
    HourInAmPmFromOne,
    HourInDay,
    HourInDayFromOne,
    Millisecond,
    Minute,
    Month,
    PatternToken,
    Second,
    Text,
    WeekInMonth,
    WeekInYear,
    Year,
)

__all__ = [
    "NumericField",
    "Recognition",
    "recognize",
    "recognize_month",
    "recognize_name",
    "recognize_number",
    "recognize_text",
]

type Recognition = ParseResult[str] | Diagnostic


@dataclass(frozen=True, slots=True)
class NumericField:
    """Digit-run rule for one numeric token kind.

    Attributes:
        label: Field description used in diagnostics
        width: Maximum digits consumed (None = unbounded)
        bounds: Inclusive (lower, upper), or None for no range check
    """

    label: str
    width: int | None
    bounds: tuple[int, int] | None = None


_YEAR = NumericField(Year.label, width=None)
_MONTH = NumericField(Month.label, width=2, bounds=(1, 12))
_WEEK_IN_YEAR = NumericField(WeekInYear.label, width=2, bounds=(1, 56))
_WEEK_IN_MONTH = NumericField(WeekInMonth.label, width=2, bounds=(1, 5))
# Upper bound is 356, not 366.
_DAY_IN_YEAR = NumericField(DayInYear.label, width=2, bounds=(1, 356))
_DAY_IN_MONTH = NumericField(DayInMonth.label, width=2, bounds=(1, 31))
# Unranged, unlike DayOfWeek.
_DAY_OF_WEEK_IN_MONTH = NumericField(DayOfWeekInMonth.label, width=None)
_DAY_OF_WEEK = NumericField(DayOfWeek.label, width=1, bounds=(1, 7))
_HOUR_IN_DAY = NumericField(HourInDay.label, width=2, bounds=(0, 23))
_HOUR_IN_DAY_FROM_ONE = NumericField(HourInDayFromOne.label, width=2, bounds=(1, 24))
_HOUR_IN_AM_PM = NumericField(HourInAmPm.label, width=2, bounds=(0, 11))
_HOUR_IN_AM_PM_FROM_ONE = NumericField(HourInAmPmFromOne.label, width=2, bounds=(1, 12))
_MINUTE = NumericField(Minute.label, width=2, bounds=(0, 59))
_SECOND = NumericField(Second.label, width=2, bounds=(0, 59))
_MILLISECOND = NumericField(Millisecond.label, width=3, bounds=(0, 999))


def recognize_number(cursor: Cursor, field: NumericField) -> Recognition:
    """Consume a digit run and check it against the field's bounds.

    Example:
        >>> recognize_number(Cursor("100", 0), _MONTH).cursor.rest  # takes "10"
        '0'
    """
    end = cursor.skip_run(ASCII_DIGITS, limit=field.width)
    digits = cursor.slice_to(end.pos)
    if not digits:
        return ErrorTemplate.invalid_number(field.label, cursor.rest, cursor.pos)

    if field.bounds is not None:
        lower, upper = field.bounds
        number = int(digits)
        if not lower <= number <= upper:
            span = SourceSpan(start=cursor.pos, end=end.pos)
            return ErrorTemplate.number_out_of_range(field.label, number, lower, upper, span)

    return ParseResult(digits, end)


def recognize_name(cursor: Cursor, label: str, table: NameTable) -> Recognition:
    """Consume the longest name from table that prefixes the value."""
    matched = _match_name(cursor, table)
    if matched is None:
        return ErrorTemplate.unmatched_alternative(
            label, table.description, cursor.rest, cursor.pos
        )
    return matched


def recognize_month(cursor: Cursor) -> Recognition:
    """Month name, else a numeric month.

    With no name and no digits at all the failure is reported as an
    unmatched alternative; digits that parse but fall outside 1..12 are
    reported as out of range.
    """
    table = month_names()
    matched = _match_name(cursor, table)
    if matched is not None:
        return matched

    result = recognize_number(cursor, _MONTH)
    if isinstance(result, Diagnostic) and cursor.peek() not in ASCII_DIGITS:
        return ErrorTemplate.unmatched_alternative(
            Month.label, table.description, cursor.rest, cursor.pos
        )
    return result


def recognize_text(cursor: Cursor, literal: str) -> Recognition:
    """Exact, case-sensitive match of literal."""
    if not cursor.source.startswith(literal, cursor.pos):
        return ErrorTemplate.text_mismatch(literal, cursor.rest, cursor.pos)
    return ParseResult(literal, cursor.advance(len(literal)))


def _match_name(cursor: Cursor, table: NameTable) -> ParseResult[str] | None:
    """Longest-first name match without copying the whole suffix."""
    longest = len(table.names[0]) if table.names else 0
    matched = table.longest_match(cursor.slice_ahead(longest))
    if matched is None:
        return None
    return ParseResult(matched, cursor.advance(len(matched)))


def recognize(token: PatternToken, cursor: Cursor) -> Recognition:
    """Apply token's recognizer at cursor.

    The match is exhaustive over PatternToken; a new token kind without a
    recognizer here fails type checking at assert_never().
    """
    match token:
        case Era():
            return recognize_name(cursor, Era.label, era_names())
        case Year():
            return recognize_number(cursor, _YEAR)
        case Month():
            return recognize_month(cursor)
        case WeekInYear():
            return recognize_number(cursor, _WEEK_IN_YEAR)
        case WeekInMonth():
            return recognize_number(cursor, _WEEK_IN_MONTH)
        case DayInYear():
            return recognize_number(cursor, _DAY_IN_YEAR)
        case DayInMonth():
            return recognize_number(cursor, _DAY_IN_MONTH)
        case DayOfWeekInMonth():
            return recognize_number(cursor, _DAY_OF_WEEK_IN_MONTH)
        case DayName():
            return recognize_name(cursor, DayName.label, day_names())
        case DayOfWeek():
            return recognize_number(cursor, _DAY_OF_WEEK)
        case AmPmMarker():
            return recognize_name(cursor, AmPmMarker.label, am_pm_markers())
        case HourInDay():
            return recognize_number(cursor, _HOUR_IN_DAY)
        case HourInDayFromOne():
            return recognize_number(cursor, _HOUR_IN_DAY_FROM_ONE)
        case HourInAmPm():
            return recognize_number(cursor, _HOUR_IN_AM_PM)
        case HourInAmPmFromOne():
            return recognize_number(cursor, _HOUR_IN_AM_PM_FROM_ONE)
        case Minute():
            return recognize_number(cursor, _MINUTE)
        case Second():
            return recognize_number(cursor, _SECOND)
        case Millisecond():
            return recognize_number(cursor, _MILLISECOND)
        case Text(literal=literal):
            return recognize_text(cursor, literal)
        case unreachable:
            assert_never(unreachable)
