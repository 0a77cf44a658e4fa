"""Hypothesis strategies for cldrnumbers property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- locales: Known and unknown locale identifiers, number system selectors
- formats: FormatSet values with arbitrary populated styles

Usage:
    from tests.strategies import known_locales, format_sets
    from tests.strategies.locales import unknown_locales, selectors

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - known_locales_any_format, unknown_locales, format_sets
"""

from .formats import compact_sequences, format_sets, pattern_strings, plural_pattern_maps
from .locales import (
    known_locales,
    known_locales_any_format,
    roles,
    selectors,
    system_names,
    unknown_locales,
)

__all__ = [
    "compact_sequences",
    "format_sets",
    "known_locales",
    "known_locales_any_format",
    "pattern_strings",
    "plural_pattern_maps",
    "roles",
    "selectors",
    "system_names",
    "unknown_locales",
]
