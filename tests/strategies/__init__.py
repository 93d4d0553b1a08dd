"""Hypothesis strategies for datepattern property-based testing.

- patterns: pattern fragments, quoted literals and matching (pattern, value) pairs

Usage:
    from tests.strategies import matching_pairs, quoted_literals

Event-Emitting Strategies (HypoFuzz-Optimized):
    field_runs, quoted_literals, matching_pairs
"""

from .patterns import (
    FIELD_ROWS,
    FIELD_VALUES,
    RESERVED,
    field_runs,
    literal_text,
    matching_pairs,
    quoted_literals,
    separators,
)

__all__ = [
    "FIELD_ROWS",
    "FIELD_VALUES",
    "RESERVED",
    "field_runs",
    "literal_text",
    "matching_pairs",
    "quoted_literals",
    "separators",
]
