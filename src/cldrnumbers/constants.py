"""Shared constants for cldrnumbers.

Centralizes the fixed style taxonomy, CLDR defaults that Babel does not
ship, and the default locale universe. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Style taxonomy: Compact styles and curated exceptions
- CLDR defaults: Currency spacing, minimum grouping digits
- Locale universe: Locales built into the table by default

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from cldrnumbers.enums import FormatStyle

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Style taxonomy
    "FORMAT_STYLES",
    "COMPACT_STYLE_CANDIDATES",
    "NOT_REALLY_SHORT_STYLES",
    "SHORT_FORMAT_STYLES",
    # CLDR defaults
    "CURRENCY_SPACING_CURRENCY_MATCH",
    "CURRENCY_SPACING_SURROUNDING_MATCH",
    "CURRENCY_SPACING_INSERT_BETWEEN",
    "DEFAULT_MINIMUM_GROUPING_DIGITS",
    "MINIMUM_GROUPING_DIGITS",
    "CURRENCY_LONG_PLURAL_CATEGORY",
    # Locale universe
    "DEFAULT_KNOWN_LOCALES",
    "LOCALE_SEPARATOR",
    "ROOT_LOCALE",
]

# ============================================================================
# STYLE TAXONOMY
# ============================================================================

# Every style a FormatSet can carry, in CLDR declaration order.
FORMAT_STYLES: tuple[FormatStyle, ...] = tuple(FormatStyle)

# Styles whose names mark them as compact forms.
COMPACT_STYLE_CANDIDATES: frozenset[FormatStyle] = frozenset({
    FormatStyle.DECIMAL_LONG,
    FormatStyle.DECIMAL_SHORT,
    FormatStyle.CURRENCY_SHORT,
    FormatStyle.CURRENCY_LONG,
})

# currency_long is a currency-name template ("{0} {1}"): always a single
# pattern string, never a magnitude-keyed sequence. Hand-maintained; do not
# derive from the data shape.
NOT_REALLY_SHORT_STYLES: frozenset[FormatStyle] = frozenset({FormatStyle.CURRENCY_LONG})

SHORT_FORMAT_STYLES: frozenset[FormatStyle] = COMPACT_STYLE_CANDIDATES - NOT_REALLY_SHORT_STYLES

# ============================================================================
# CLDR DEFAULTS
# ============================================================================
#
# Babel's compiled locale data omits currencySpacing and
# minimumGroupingDigits. The values below are CLDR's root values; the
# grouping table lists the locales that override root.
#
# Reference: https://www.unicode.org/reports/tr35/tr35-numbers.html

# UnicodeSet expressions from root <currencySpacing>, identical for
# beforeCurrency and afterCurrency.
CURRENCY_SPACING_CURRENCY_MATCH: str = "[[:^S:]&[:^Z:]]"
CURRENCY_SPACING_SURROUNDING_MATCH: str = "[[:digit:]]"
CURRENCY_SPACING_INSERT_BETWEEN: str = "\u00a0"

DEFAULT_MINIMUM_GROUPING_DIGITS: int = 1

# Locales whose CLDR minimumGroupingDigits differs from root.
# Children inherit from the nearest listed CLDR parent (pt_AO -> pt_PT).
MINIMUM_GROUPING_DIGITS: MappingProxyType[str, int] = MappingProxyType({
    "es": 2,
    "pl": 2,
    "pt_PT": 2,
})

# Plural category whose currency-unit pattern becomes currency_long.
CURRENCY_LONG_PLURAL_CATEGORY: str = "other"

# ============================================================================
# LOCALE UNIVERSE
# ============================================================================

# Built when no configuration is supplied. Covers Latin, Hebrew, Arabic,
# Thai, Devanagari, Bengali, Persian and CJK number systems.
DEFAULT_KNOWN_LOCALES: tuple[str, ...] = (
    "en",
    "en_US",
    "en_GB",
    "en_IN",
    "de",
    "fr",
    "es",
    "es_MX",
    "it",
    "pt",
    "pt_PT",
    "pl",
    "ru",
    "lv",
    "he",
    "ar",
    "ar_EG",
    "fa",
    "hi",
    "mr",
    "bn",
    "th",
    "ja",
    "zh",
    "zh_Hant",
)

# POSIX separator used for normalized identifiers.
LOCALE_SEPARATOR: str = "_"

# Inheritance root of the CLDR tree; not a user-facing locale.
ROOT_LOCALE: str = "root"
