"""Fuzz testing infrastructure for datepattern.

This package contains:
- shadow_validator: Regex reference implementation for differential testing
- test_validator_oracle: Verdict comparison against the shadow validator

Python 3.13+.
"""
