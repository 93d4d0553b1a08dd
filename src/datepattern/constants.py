"""Shared constants for datepattern.

Single source of truth for input limits, cache sizes and the reserved
pattern letters. Placing constants here avoids circular imports between
the syntax and matching packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_PATTERN_LENGTH",
    "MAX_VALUE_LENGTH",
    # Cache limits
    "PATTERN_CACHE_SIZE",
    # Name data
    "NAMES_LOCALE",
    # Pattern grammar
    "QUOTE",
    "RESERVED_LETTERS",
    "ASCII_DIGITS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================
#
# Both phases run in time linear in their input, but the matching engine that
# calls us forwards arbitrary response bodies. Anything longer than these
# limits is rejected with a diagnostic before any work is done.

# Maximum pattern length in characters.
MAX_PATTERN_LENGTH: int = 4_096

# Maximum candidate value length in characters.
MAX_VALUE_LENGTH: int = 65_536

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled patterns cached per pattern string. Schemas reuse a handful of
# format strings, so a small bound keeps memory flat.
PATTERN_CACHE_SIZE: int = 256

# ============================================================================
# NAME DATA
# ============================================================================

# Locale whose CLDR data supplies era, month, weekday and AM/PM names.
# Fixed: names from other locales are not recognized.
NAMES_LOCALE: str = "en"

# ============================================================================
# PATTERN GRAMMAR
# ============================================================================

QUOTE: str = "'"

# Letters that start a field token. Every other character (apostrophe
# excepted) is literal text. z, Z and X are deliberately absent.
RESERVED_LETTERS: frozenset[str] = frozenset("GyYMLwWDdFEuaHkKhmsS")

# ASCII digits only. str.isdigit() accepts superscripts and other Unicode
# digits that are not numerals in a date value.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
