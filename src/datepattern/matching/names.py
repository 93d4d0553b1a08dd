"""Enumerated field names backed by Babel CLDR data.

Era, month, weekday and AM/PM names come from the CLDR data of a single
fixed locale (NAMES_LOCALE, English). Names from other locales are not
recognized.

Abbreviations are literal prefixes of full names ("jan" / "january"), so
every table is ordered longest-first. A first-match scan over that order
never cuts a full name short and leaves its tail unconsumed.

Thread-safe. Tables are built once and cached.

Python 3.13+. Uses Babel CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from babel import Locale

from datepattern.constants import NAMES_LOCALE

__all__ = [
    "NameTable",
    "am_pm_markers",
    "day_names",
    "era_names",
    "month_names",
]

logger = logging.getLogger(__name__)

# CLDR month keys are 1-12; weekday keys are 0 (Monday) to 6 (Sunday).
_MONTH_KEYS: range = range(1, 13)
_DAY_KEYS: range = range(7)


@dataclass(frozen=True, slots=True)
class NameTable:
    """Ordered, case-insensitive set of literal alternatives.

    Attributes:
        names: Lowercased names, longest first
        description: Summary of the alternatives for diagnostics
    """

    names: tuple[str, ...]
    description: str

    def longest_match(self, text: str) -> str | None:
        """Return the longest name that prefixes text, as spelled in text.

        Comparison is case-insensitive. The returned string is the slice of
        text that matched, so its length is the number of characters to
        consume.

        Example:
            >>> month_names().longest_match("January 1")
            'January'
            >>> month_names().longest_match("Jan 1")
            'Jan'
            >>> month_names().longest_match("Movember") is None
            True
        """
        for name in self.names:
            candidate = text[: len(name)]
            if candidate.lower() == name:
                return candidate
        return None


def _longest_first(names: Iterable[str]) -> tuple[str, ...]:
    """Lowercase, deduplicate and order names by descending length.

    Deduplication matters for names whose abbreviation equals the full
    form ("May"). The sort is stable, so equal-length names keep CLDR order.
    """
    unique = dict.fromkeys(name.lower() for name in names)
    return tuple(sorted(unique, key=len, reverse=True))


@lru_cache(maxsize=1)
def _names_locale() -> Locale:
    """Parse NAMES_LOCALE once."""
    logger.debug("Loading CLDR name data for locale %s", NAMES_LOCALE)
    return Locale.parse(NAMES_LOCALE)


@lru_cache(maxsize=1)
def era_names() -> NameTable:
    """Abbreviated era designators (AD, BC)."""
    eras = _names_locale().eras["abbreviated"]
    names = [eras[1], eras[0]]
    return NameTable(
        names=_longest_first(names),
        description=" or ".join(names),
    )


@lru_cache(maxsize=1)
def month_names() -> NameTable:
    """Full and abbreviated month names (January, Jan, ...)."""
    months = _names_locale().months["format"]
    wide = [months["wide"][key] for key in _MONTH_KEYS]
    abbreviated = [months["abbreviated"][key] for key in _MONTH_KEYS]
    return NameTable(
        names=_longest_first([*wide, *abbreviated]),
        description=f"{wide[0]}..{wide[-1]}, {abbreviated[0]}..{abbreviated[-1]} or 1..12",
    )


@lru_cache(maxsize=1)
def day_names() -> NameTable:
    """Full and abbreviated weekday names (Monday, Mon, ...)."""
    days = _names_locale().days["format"]
    wide = [days["wide"][key] for key in _DAY_KEYS]
    abbreviated = [days["abbreviated"][key] for key in _DAY_KEYS]
    return NameTable(
        names=_longest_first([*wide, *abbreviated]),
        description=f"{wide[0]}..{wide[-1]} or {abbreviated[0]}..{abbreviated[-1]}",
    )


@lru_cache(maxsize=1)
def am_pm_markers() -> NameTable:
    """Abbreviated day-period markers (AM, PM)."""
    periods = _names_locale().day_periods["format"]["abbreviated"]
    names = [periods["am"], periods["pm"]]
    return NameTable(
        names=_longest_first(names),
        description=" or ".join(names),
    )
