"""Pattern syntax: tokens, cursor and the pattern compiler.

Leaf layer. Nothing here knows how values are matched.

Python 3.13+.
"""

from .compiler import compile_pattern
from .cursor import Cursor, ParseResult
from .tokens import (
    FIELD_TOKEN_TYPES,
    AmPmMarker,
    DayInMonth,
    DayInYear,
    DayName,
    DayOfWeek,
    DayOfWeekInMonth,
    Era,
    FieldToken,
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
    is_field_token,
)

__all__ = [
    "FIELD_TOKEN_TYPES",
    "AmPmMarker",
    "Cursor",
    "DayInMonth",
    "DayInYear",
    "DayName",
    "DayOfWeek",
    "DayOfWeekInMonth",
    "Era",
    "FieldToken",
    "HourInAmPm",
    "HourInAmPmFromOne",
    "HourInDay",
    "HourInDayFromOne",
    "Millisecond",
    "Minute",
    "Month",
    "ParseResult",
    "PatternToken",
    "Second",
    "Text",
    "WeekInMonth",
    "WeekInYear",
    "Year",
    "compile_pattern",
    "is_field_token",
]
