"""Hypothesis strategies for format patterns and matching values.

Provides strategies for generating pattern fragments, quoted literals, and
(pattern, value) pairs that are known to match.

Usage:
    from hypothesis import given
    from tests.strategies.patterns import matching_pairs

    @given(pair=matching_pairs())
    def test_generated_pairs_match(pair):
        pattern, value = pair
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# PATTERN ALPHABET
# ============================================================================

RESERVED = "GyYMLwWDdFEuaHkKhmsS"

# Letters of each field row. A run mixing letters of one row is one token.
FIELD_ROWS: tuple[str, ...] = (
    "G", "yY", "ML", "w", "W", "D", "d", "F", "E", "u",
    "a", "H", "k", "K", "h", "m", "s", "S",
)

# Literal characters that are neither reserved nor digits nor letters, so a
# separator can never be absorbed by an adjacent field.
_SEPARATOR_CHARS = " -/,.:;_@"

literal_text: SearchStrategy[str] = st.text(
    alphabet=st.characters(
        blacklist_characters=RESERVED + "'",
        blacklist_categories=("Cs",),
    ),
    min_size=1,
    max_size=20,
)

separators: SearchStrategy[str] = st.text(alphabet=_SEPARATOR_CHARS, min_size=1, max_size=3)


@composite
def field_runs(draw: st.DrawFn) -> str:
    """Generate a run of 1-5 letters drawn from one field row."""
    row = draw(st.sampled_from(FIELD_ROWS))
    length = draw(st.integers(min_value=1, max_value=5))
    run = "".join(draw(st.sampled_from(row)) for _ in range(length))
    event(f"field_row={row}")
    return run


@composite
def quoted_literals(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (quoted pattern fragment, literal it denotes).

    The literal may contain apostrophes and reserved letters; both are
    protected by the quoting.
    """
    literal = draw(
        st.text(
            alphabet=st.characters(blacklist_categories=("Cs",)),
            min_size=1,
            max_size=20,
        )
    )
    if "'" in literal:
        event("quoted_literal=contains_apostrophe")
    return ("'" + literal.replace("'", "''") + "'", literal)


# ============================================================================
# FIELD VALUES
# ============================================================================

_MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
]
_DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _case_variants(names: list[str]) -> SearchStrategy[str]:
    """Full name or 3-letter abbreviation, in original, lower or upper case."""
    spelled = st.sampled_from(names).flatmap(lambda name: st.sampled_from([name, name[:3]]))
    return spelled.flatmap(lambda name: st.sampled_from([name, name.lower(), name.upper()]))


def _number(lower: int, upper: int, width: int) -> SearchStrategy[str]:
    """Integer in [lower, upper], optionally zero-padded to width."""
    return st.tuples(st.integers(min_value=lower, max_value=upper), st.booleans()).map(
        lambda t: f"{t[0]:0{width}d}" if t[1] else str(t[0])
    )


FIELD_VALUES: dict[str, SearchStrategy[str]] = {
    "G": st.sampled_from(["AD", "ad", "BC", "bc", "Ad", "bC"]),
    "yY": st.from_regex(r"[0-9]{1,6}", fullmatch=True),
    "ML": st.one_of(_case_variants(_MONTH_NAMES), _number(1, 12, 2)),
    "w": _number(1, 56, 2),
    "W": _number(1, 5, 2),
    "D": _number(1, 99, 2),
    "d": _number(1, 31, 2),
    "F": st.from_regex(r"[0-9]{1,4}", fullmatch=True),
    "E": _case_variants(_DAY_NAMES),
    "u": _number(1, 7, 1),
    "a": st.sampled_from(["AM", "PM", "am", "pm"]),
    "H": _number(0, 23, 2),
    "k": _number(1, 24, 2),
    "K": _number(0, 11, 2),
    "h": _number(1, 12, 2),
    "m": _number(0, 59, 2),
    "s": _number(0, 59, 2),
    "S": _number(0, 999, 3),
}


@composite
def matching_pairs(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (pattern, value) where value is known to match pattern.

    Fields are always separated by a literal of separator characters, quoted
    or not, so digit runs and names cannot bleed into neighbours.
    """
    count = draw(st.integers(min_value=1, max_value=6))
    pattern_parts: list[str] = []
    value_parts: list[str] = []
    for index in range(count):
        if index:
            separator = draw(separators)
            quoted = draw(st.booleans())
            pattern_parts.append(f"'{separator}'" if quoted else separator)
            value_parts.append(separator)
        row = draw(st.sampled_from(FIELD_ROWS))
        length = draw(st.integers(min_value=1, max_value=4))
        pattern_parts.append("".join(draw(st.sampled_from(row)) for _ in range(length)))
        value_parts.append(draw(FIELD_VALUES[row]))
    event(f"field_count={count}")
    return ("".join(pattern_parts), "".join(value_parts))
