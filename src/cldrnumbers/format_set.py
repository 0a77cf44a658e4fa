"""Immutable number format records.

A FormatSet holds every CLDR number pattern of one (locale, number system)
pair. Single-pattern styles are plain strings; compact styles are
threshold-ordered sequences of plural-keyed patterns.

All types are frozen and compare and hash by value. Plural maps are read-only
views, so a FormatSet handed to any number of readers cannot change.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrnumbers.constants import (
    CURRENCY_SPACING_CURRENCY_MATCH,
    CURRENCY_SPACING_INSERT_BETWEEN,
    CURRENCY_SPACING_SURROUNDING_MATCH,
    FORMAT_STYLES,
)
from cldrnumbers.enums import FormatStyle

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "PluralPatternMap",
    "CompactPatterns",
    "PatternValue",
    # Data classes
    "CompactPattern",
    "SpacingRule",
    "CurrencySpacing",
    "FormatSet",
    # Constructors
    "compact_patterns",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type PluralPatternMap = Mapping[str, str]
"""Plural category ('one', 'few', 'other', ...) -> pattern string."""

type CompactPatterns = tuple[CompactPattern, ...]
"""Compact entries ordered by strictly increasing threshold."""

type PatternValue = str | CompactPatterns
"""Single pattern for plain styles, compact sequence for short styles."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CompactPattern:
    """Patterns used from one magnitude threshold upward.

    Attributes:
        threshold: Decimal power as a string ("1000", "10000", ...).
        patterns: Read-only plural category -> pattern mapping. Always
            contains "other"; consumers fall back to it for categories
            that are missing.
    """

    threshold: str
    patterns: PluralPatternMap

    def __post_init__(self) -> None:
        # Detach from the caller's dict so later mutation cannot leak in.
        object.__setattr__(self, "patterns", MappingProxyType(dict(self.patterns)))

    def __hash__(self) -> int:
        # MappingProxyType is unhashable; hash its items instead.
        return hash((self.threshold, frozenset(self.patterns.items())))

    @property
    def magnitude(self) -> int:
        """Threshold as an integer."""
        return int(self.threshold)


@dataclass(frozen=True, slots=True)
class SpacingRule:
    """One side of CLDR currency spacing.

    Attributes:
        currency_match: UnicodeSet the currency symbol edge must match.
        surrounding_match: UnicodeSet the adjacent number character must match.
        insert_between: Text inserted when both match.
    """

    currency_match: str = CURRENCY_SPACING_CURRENCY_MATCH
    surrounding_match: str = CURRENCY_SPACING_SURROUNDING_MATCH
    insert_between: str = CURRENCY_SPACING_INSERT_BETWEEN


@dataclass(frozen=True, slots=True)
class CurrencySpacing:
    """Spacing applied between a currency symbol and the number."""

    before_currency: SpacingRule = field(default_factory=SpacingRule)
    after_currency: SpacingRule = field(default_factory=SpacingRule)


@dataclass(frozen=True, slots=True)
class FormatSet:
    """All number patterns of one locale and number system.

    Field names match FormatStyle values. Unpopulated styles are None.
    currency_spacing is metadata, not a style.

    Example:
        >>> fs, _ = formats_for("en")
        >>> fs.standard
        '#,##0.###'
        >>> fs.currency_short[0].patterns["other"]
        '¤0K'
    """

    standard: str | None = None
    currency: str | None = None
    accounting: str | None = None
    scientific: str | None = None
    percent: str | None = None
    decimal_long: CompactPatterns | None = None
    decimal_short: CompactPatterns | None = None
    currency_short: CompactPatterns | None = None
    currency_long: str | None = None
    currency_spacing: CurrencySpacing | None = None

    def pattern_for(self, style: FormatStyle) -> PatternValue | None:
        """Pattern value for a style, None when the locale lacks it."""
        value: PatternValue | None = getattr(self, FormatStyle(style).value)
        return value

    def populated(self) -> Mapping[FormatStyle, PatternValue]:
        """Read-only view of the populated styles only."""
        return MappingProxyType({
            style: value
            for style in FORMAT_STYLES
            if (value := self.pattern_for(style)) is not None
        })

    def iter_patterns(self) -> Iterable[tuple[FormatStyle, str]]:
        """Yield every (style, pattern string), flattening compact styles."""
        for style, value in self.populated().items():
            if isinstance(value, str):
                yield style, value
            else:
                for entry in value:
                    for pattern in entry.patterns.values():
                        yield style, pattern


def compact_patterns(
    by_category: Mapping[str, Mapping[str, str]],
) -> CompactPatterns:
    """Reshape category-keyed compact data into threshold order.

    Args:
        by_category: plural category -> threshold -> pattern, the shape CLDR
            and Babel store compact formats in.

    Returns:
        CompactPattern entries sorted by numeric threshold. Thresholds with
        no "other" pattern are omitted.

    Example:
        >>> compact_patterns({"one": {"1000": "0K"}, "other": {"1000": "0K"}})
        (CompactPattern(threshold='1000', patterns=mappingproxy({...})),)
    """
    thresholds = by_category.get("other", {})
    entries: list[CompactPattern] = []
    for threshold in sorted(thresholds, key=int):
        patterns = {
            category: by_threshold[threshold]
            for category, by_threshold in by_category.items()
            if threshold in by_threshold
        }
        entries.append(CompactPattern(threshold=threshold, patterns=patterns))
    return tuple(entries)
