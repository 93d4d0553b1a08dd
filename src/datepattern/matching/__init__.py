"""Value matching: per-token recognizers and the validator.

Public API:
    validate - Match a value against compiled tokens
    validate_datetime - Compile a pattern and match a value against it
    matches_datetime - Boolean shortcut for validate_datetime
    ValidationOutcome - Immutable result carrying the failure diagnostic

Python 3.13+. Uses Babel CLDR data for English names.
"""

from .names import NameTable, am_pm_markers, day_names, era_names, month_names
from .recognizers import recognize
from .validator import ValidationOutcome, matches_datetime, validate, validate_datetime

__all__ = [
    "NameTable",
    "ValidationOutcome",
    "am_pm_markers",
    "day_names",
    "era_names",
    "matches_datetime",
    "month_names",
    "recognize",
    "validate",
    "validate_datetime",
]
