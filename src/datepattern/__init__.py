"""datepattern - Date/time format pattern compiler and value validator.

Compiles a format pattern in the reserved-letter mini-language ("yyyy-MM-dd",
"EEE, MMM d, ''yy") into typed tokens, then decides whether a text value has
that shape. No date object is ever constructed.

Public API:
    validate_datetime - Compile a pattern and validate a value in one call
    matches_datetime - Boolean shortcut for validate_datetime
    compile_pattern - Pattern string to token tuple
    validate - Validate a value against compiled tokens
    ValidationOutcome - Result type carrying the failure diagnostic

Exceptions:
    DatePatternError - Base exception class
    PatternCompileError - Pattern could not be tokenized
    ValueMismatchError - Value does not conform to the pattern

Submodules:
    datepattern.syntax - Token types, cursor and pattern compiler
    datepattern.matching - Recognizers, English name tables and validator
    datepattern.diagnostics - Diagnostic codes, templates and formatter
"""

from .diagnostics import DatePatternError, PatternCompileError, ValueMismatchError
from .matching import ValidationOutcome, matches_datetime, validate, validate_datetime
from .syntax import compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datepattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DatePatternError",
    "PatternCompileError",
    "ValidationOutcome",
    "ValueMismatchError",
    "__version__",
    "compile_pattern",
    "matches_datetime",
    "validate",
    "validate_datetime",
]
