"""Pattern token definitions.

A compiled pattern is a tuple of these tokens. Field tokens carry no
payload: the number of repeated letters that produced them is discarded at
compile time, so "y" and "yyyy" compile to the same Year() token and match
the same values. Do not add a width field here; matching must depend on
the token kind alone.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Date fields
    "Era",
    "Year",
    "Month",
    "WeekInYear",
    "WeekInMonth",
    "DayInYear",
    "DayInMonth",
    "DayOfWeekInMonth",
    "DayName",
    "DayOfWeek",
    # Time-of-day fields
    "AmPmMarker",
    "HourInDay",
    "HourInDayFromOne",
    "HourInAmPm",
    "HourInAmPmFromOne",
    "Minute",
    "Second",
    "Millisecond",
    # Literal
    "Text",
    # Type aliases and registries
    "FieldToken",
    "PatternToken",
    "FIELD_TOKEN_TYPES",
    "is_field_token",
]


# ============================================================================
# DATE FIELDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Era:
    """Era designator (G): AD or BC."""

    letters: ClassVar[str] = "G"
    label: ClassVar[str] = "era"


@dataclass(frozen=True, slots=True)
class Year:
    """Year (y, Y): one or more digits, any value."""

    letters: ClassVar[str] = "yY"
    label: ClassVar[str] = "year"


@dataclass(frozen=True, slots=True)
class Month:
    """Month in year (M, L): English name or 1-12."""

    letters: ClassVar[str] = "ML"
    label: ClassVar[str] = "month"


@dataclass(frozen=True, slots=True)
class WeekInYear:
    """Week in year (w)."""

    letters: ClassVar[str] = "w"
    label: ClassVar[str] = "week in year"


@dataclass(frozen=True, slots=True)
class WeekInMonth:
    """Week in month (W)."""

    letters: ClassVar[str] = "W"
    label: ClassVar[str] = "week in month"


@dataclass(frozen=True, slots=True)
class DayInYear:
    """Day in year (D)."""

    letters: ClassVar[str] = "D"
    label: ClassVar[str] = "day in year"


@dataclass(frozen=True, slots=True)
class DayInMonth:
    """Day in month (d)."""

    letters: ClassVar[str] = "d"
    label: ClassVar[str] = "day in month"


@dataclass(frozen=True, slots=True)
class DayOfWeekInMonth:
    """Day of week in month (F). Digits only, no range check."""

    letters: ClassVar[str] = "F"
    label: ClassVar[str] = "day of week in month"


@dataclass(frozen=True, slots=True)
class DayName:
    """Day name in week (E): English weekday name."""

    letters: ClassVar[str] = "E"
    label: ClassVar[str] = "day name"


@dataclass(frozen=True, slots=True)
class DayOfWeek:
    """Day number of week (u): single digit 1-7."""

    letters: ClassVar[str] = "u"
    label: ClassVar[str] = "day of week"


# ============================================================================
# TIME-OF-DAY FIELDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class AmPmMarker:
    """Am/pm marker (a)."""

    letters: ClassVar[str] = "a"
    label: ClassVar[str] = "am/pm marker"


@dataclass(frozen=True, slots=True)
class HourInDay:
    """Hour in day, 0-23 (H)."""

    letters: ClassVar[str] = "H"
    label: ClassVar[str] = "hour in day"


@dataclass(frozen=True, slots=True)
class HourInDayFromOne:
    """Hour in day, 1-24 (k)."""

    letters: ClassVar[str] = "k"
    label: ClassVar[str] = "hour in day (1-24)"


@dataclass(frozen=True, slots=True)
class HourInAmPm:
    """Hour in am/pm, 0-11 (K)."""

    letters: ClassVar[str] = "K"
    label: ClassVar[str] = "hour in am/pm"


@dataclass(frozen=True, slots=True)
class HourInAmPmFromOne:
    """Hour in am/pm, 1-12 (h)."""

    letters: ClassVar[str] = "h"
    label: ClassVar[str] = "hour in am/pm (1-12)"


@dataclass(frozen=True, slots=True)
class Minute:
    """Minute in hour (m)."""

    letters: ClassVar[str] = "m"
    label: ClassVar[str] = "minute"


@dataclass(frozen=True, slots=True)
class Second:
    """Second in minute (s)."""

    letters: ClassVar[str] = "s"
    label: ClassVar[str] = "second"


@dataclass(frozen=True, slots=True)
class Millisecond:
    """Millisecond (S)."""

    letters: ClassVar[str] = "S"
    label: ClassVar[str] = "millisecond"


# ============================================================================
# LITERAL
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text matched verbatim and case-sensitively.

    Produced by unquoted runs of non-reserved characters, by quoted
    literals ('at'), and by a doubled apostrophe ('').

    Attributes:
        literal: The characters to match
    """

    literal: str

    label: ClassVar[str] = "text"


# ============================================================================
# TYPE ALIASES
# ============================================================================

type FieldToken = (
    Era
    | Year
    | Month
    | WeekInYear
    | WeekInMonth
    | DayInYear
    | DayInMonth
    | DayOfWeekInMonth
    | DayName
    | DayOfWeek
    | AmPmMarker
    | HourInDay
    | HourInDayFromOne
    | HourInAmPm
    | HourInAmPmFromOne
    | Minute
    | Second
    | Millisecond
)

type PatternToken = FieldToken | Text

# Order matches the compiler's recognizer priority.
FIELD_TOKEN_TYPES: tuple[type[FieldToken], ...] = (
    Era,
    Year,
    Month,
    WeekInYear,
    WeekInMonth,
    DayInYear,
    DayInMonth,
    DayOfWeekInMonth,
    DayName,
    DayOfWeek,
    AmPmMarker,
    HourInDay,
    HourInDayFromOne,
    HourInAmPm,
    HourInAmPmFromOne,
    Minute,
    Second,
    Millisecond,
)


def is_field_token(token: PatternToken) -> TypeIs[FieldToken]:
    """Return True for every token kind except Text."""
    return not isinstance(token, Text)
