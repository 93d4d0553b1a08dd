#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: validator - Pattern compiler and value validator
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Pattern Validator Fuzzer (Atheris).

Targets compile_pattern(), validate() and validate_datetime(). Checks the
never-raise contract, outcome determinism, consistency between the one-call
and two-call paths, and that trailing junk is always rejected.

Metrics:
- Pattern coverage (arbitrary, structured, quoted, trailing)
- Verdict distribution and diagnostic code counts
- Real memory usage (RSS via psutil)
"""

from __future__ import annotations

import argparse
import atexit
import gc
import json
import logging
import pathlib
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

_missing = [
    name
    for name, mod in (("psutil", _psutil_mod), ("atheris", _atheris_mod))
    if mod is None
]
if _missing:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependencies for fuzzing:", file=sys.stderr)
    for _dep in _missing:
        print(f"  - {_dep}", file=sys.stderr)
    print("", file=sys.stderr)
    print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402
import psutil  # noqa: E402

# --- Global State ---

GC_INTERVAL = 256


@dataclass
class ValidatorFuzzState:
    """Observability state for one fuzzing session."""

    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"
    checkpoint_interval: int = 500
    initial_memory_mb: float = 0.0
    peak_memory_mb: float = 0.0
    pattern_coverage: Counter[str] = field(default_factory=Counter)
    verdicts: Counter[str] = field(default_factory=Counter)
    diagnostic_codes: Counter[str] = field(default_factory=Counter)
    total_time_ms: float = 0.0


_state = ValidatorFuzzState()


class ValidatorFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# --- Reporting ---

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "validator"
_REPORT_FILENAME = "fuzz_validator_report.json"


def _build_stats_dict() -> dict[str, Any]:
    """Build the JSON-serializable stats dictionary."""
    iterations = max(_state.iterations, 1)
    return {
        "status": _state.status,
        "iterations": _state.iterations,
        "findings": _state.findings,
        "mean_ms": round(_state.total_time_ms / iterations, 4),
        "initial_memory_mb": round(_state.initial_memory_mb, 2),
        "peak_memory_mb": round(_state.peak_memory_mb, 2),
        "pattern_coverage": dict(_state.pattern_coverage),
        "verdicts": dict(_state.verdicts),
        "diagnostic_codes": dict(_state.diagnostic_codes),
    }


def _write_report(marker: str) -> None:
    report = json.dumps(_build_stats_dict(), sort_keys=True)
    print(f"\n[{marker}-BEGIN]{report}[{marker}-END]", file=sys.stderr, flush=True)
    try:
        _REPORT_DIR.mkdir(parents=True, exist_ok=True)
        (_REPORT_DIR / _REPORT_FILENAME).write_text(report, encoding="utf-8")
    except OSError:
        pass


def _emit_report() -> None:
    """Emit final report (crash-proof)."""
    _state.status = "complete"
    _write_report("SUMMARY-JSON")


atexit.register(_emit_report)

# Suppress logging and instrument imports
logging.getLogger("datepattern").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["datepattern"]):
    from datepattern import compile_pattern, validate, validate_datetime


# --- Input Generators ---

_FIELD_LETTERS = "GyYMLwWDdFEuaHkKhmsS"
_VALUE_PIECES = (
    "2001", "01", "12", "31", "57", "0", "AD", "bc", "Jan", "January", "Tue",
    "Tuesday", "PM", "am", "-", ":", " ", "'", "T", "Z", ",",
)


def _gen_structured_pattern(fdp: atheris.FuzzedDataProvider) -> str:
    """Pattern built from field runs, separators and quoted text."""
    parts: list[str] = []
    for _ in range(fdp.ConsumeIntInRange(1, 8)):
        match fdp.ConsumeIntInRange(0, 3):
            case 0 | 1:
                letter = _FIELD_LETTERS[fdp.ConsumeIntInRange(0, len(_FIELD_LETTERS) - 1)]
                parts.append(letter * fdp.ConsumeIntInRange(1, 4))
            case 2:
                parts.append(fdp.PickValueInList(["-", "/", ":", " ", ", ", "''"]))
            case _:
                text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 6))
                parts.append("'" + text.replace("'", "''") + "'")
    return "".join(parts)


def _gen_value(fdp: atheris.FuzzedDataProvider) -> str:
    """Value assembled from date-like pieces or raw unicode."""
    if fdp.ConsumeBool():
        return fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 40))
    count = fdp.ConsumeIntInRange(0, 10)
    return "".join(fdp.PickValueInList(list(_VALUE_PIECES)) for _ in range(count))


# --- Invariants ---


def _check(value: str, pattern: str) -> None:
    """Run both entry points and compare."""
    outcome = validate_datetime(value, pattern)
    again = validate_datetime(value, pattern)
    if outcome != again:
        msg = f"Non-deterministic outcome for {value!r} / {pattern!r}"
        raise ValidatorFuzzError(msg)

    if outcome.is_valid is not (outcome.diagnostic is None):
        msg = f"is_valid disagrees with diagnostic for {value!r} / {pattern!r}"
        raise ValidatorFuzzError(msg)

    tokens, errors = compile_pattern(pattern)
    if tokens is None:
        if not errors or outcome.is_valid:
            msg = f"Compile failure not surfaced for {pattern!r}"
            raise ValidatorFuzzError(msg)
    elif validate(value, tokens).is_valid is not outcome.is_valid:
        msg = f"validate() and validate_datetime() disagree on {value!r} / {pattern!r}"
        raise ValidatorFuzzError(msg)

    _state.verdicts["valid" if outcome.is_valid else "invalid"] += 1
    if outcome.diagnostic is not None:
        _state.diagnostic_codes[outcome.diagnostic.code.name] += 1

    if outcome.is_valid:
        # No recognizer consumes past its own text, so NUL is left over.
        junk = validate_datetime(value + "\x00", pattern)
        if junk.is_valid:
            msg = f"Trailing NUL accepted for {value!r} / {pattern!r}"
            raise ValidatorFuzzError(msg)


# --- Patterns ---


def _pattern_arbitrary(fdp: atheris.FuzzedDataProvider) -> None:
    pattern = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 30))
    _check(_gen_value(fdp), pattern)


def _pattern_structured(fdp: atheris.FuzzedDataProvider) -> None:
    _check(_gen_value(fdp), _gen_structured_pattern(fdp))


def _pattern_quoted(fdp: atheris.FuzzedDataProvider) -> None:
    text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(1, 20))
    pattern = "'" + text.replace("'", "''") + "'"
    outcome = validate_datetime(text, pattern)
    if not outcome.is_valid:
        msg = f"Quoted literal {pattern!r} rejected its own text: {outcome.reason}"
        raise ValidatorFuzzError(msg)


_PATTERN_DISPATCH: dict[str, Any] = {
    "arbitrary": _pattern_arbitrary,
    "structured": _pattern_structured,
    "quoted": _pattern_quoted,
}
_PATTERN_NAMES = tuple(_PATTERN_DISPATCH)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: fuzz pattern compilation and value validation."""
    if _state.iterations == 0:
        _state.initial_memory_mb = psutil.Process().memory_info().rss / (1024 * 1024)

    _state.iterations += 1
    _state.status = "running"

    if _state.iterations % _state.checkpoint_interval == 0:
        _write_report("CHECKPOINT-JSON")

    start_time = time.perf_counter()
    fdp = atheris.FuzzedDataProvider(data)

    pattern = _PATTERN_NAMES[_state.iterations % len(_PATTERN_NAMES)]
    _state.pattern_coverage[pattern] += 1

    try:
        _PATTERN_DISPATCH[pattern](fdp)
    except ValidatorFuzzError:
        _state.findings += 1
        raise
    finally:
        _state.total_time_ms += (time.perf_counter() - start_time) * 1000

        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()

        if _state.iterations % 100 == 0:
            rss = psutil.Process().memory_info().rss / (1024 * 1024)
            _state.peak_memory_mb = max(_state.peak_memory_mb, rss)


def main() -> None:
    """Run the validator fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Pattern validator fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval", type=int, default=500,
        help="Emit report every N iterations (default: 500)",
    )

    args, remaining = parser.parse_known_args()
    _state.checkpoint_interval = args.checkpoint_interval

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=4096")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("Pattern Validator Fuzzer (Atheris)")
    print("Target: compile_pattern, validate, validate_datetime")
    print("=" * 80)

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
