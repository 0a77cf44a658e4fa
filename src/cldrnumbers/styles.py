"""Format style classification.

Derives, from a FormatSet, which styles are available, which are compact
("short") styles and which are single-pattern decimal styles. The
taxonomy is fixed set algebra over FormatStyle:

    short   = available & SHORT_FORMAT_STYLES
    decimal = available - short - {currency_long}

currency_long is carved out of the compact styles by the curated
NOT_REALLY_SHORT_STYLES constant rather than by inspecting pattern shapes.

The locale-level functions resolve the FormatSet first; a lookup error is
returned unchanged and no partial classification is produced.

Python 3.13+.
"""

from __future__ import annotations

from cldrnumbers.constants import NOT_REALLY_SHORT_STYLES, SHORT_FORMAT_STYLES
from cldrnumbers.core.result import LookupResult, success, unwrap
from cldrnumbers.enums import FormatStyle, NumberSystemRole
from cldrnumbers.format_set import FormatSet
from cldrnumbers.resolver import formats_for
from cldrnumbers.systems import NumberSystemSelector
from cldrnumbers.table import FormatTable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # FormatSet classification
    "available_styles",
    "short_styles",
    "decimal_styles",
    # Locale-level classification
    "format_styles_for",
    "format_styles_for_or_raise",
    "short_format_styles_for",
    "short_format_styles_for_or_raise",
    "decimal_format_styles_for",
    "decimal_format_styles_for_or_raise",
]


# ============================================================================
# FORMATSET CLASSIFICATION
# ============================================================================


def available_styles(format_set: FormatSet) -> frozenset[FormatStyle]:
    """Styles populated in a FormatSet; currency spacing is not a style."""
    return frozenset(format_set.populated())


def short_styles(format_set: FormatSet) -> frozenset[FormatStyle]:
    """Compact styles populated in a FormatSet."""
    return available_styles(format_set) & SHORT_FORMAT_STYLES


def decimal_styles(format_set: FormatSet) -> frozenset[FormatStyle]:
    """Single-pattern styles handled by a decimal formatter."""
    return available_styles(format_set) - short_styles(format_set) - NOT_REALLY_SHORT_STYLES


# ============================================================================
# LOCALE-LEVEL CLASSIFICATION
# ============================================================================


def format_styles_for(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> LookupResult[frozenset[FormatStyle]]:
    """Return the format styles available for a locale.

    Format styles standardise access to a format defined for a common use.

    Example:
        >>> styles, _ = format_styles_for("en")
        >>> sorted(styles)
        ['accounting', 'currency', 'currency_long', 'currency_short',
         'decimal_long', 'decimal_short', 'percent', 'scientific', 'standard']
    """
    format_set, errors = formats_for(locale_code, selector, table=table)
    if format_set is None:
        return (None, errors)
    return success(available_styles(format_set))


def format_styles_for_or_raise(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> frozenset[FormatStyle]:
    """Available format styles, raising the lookup error."""
    return unwrap(format_styles_for(locale_code, selector, table=table))


def short_format_styles_for(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> LookupResult[frozenset[FormatStyle]]:
    """Return the short (compact) format styles available for a locale.

    Example:
        >>> short_format_styles_for("he")
        (frozenset({'currency_short', 'decimal_long', 'decimal_short'}), ())
    """
    format_set, errors = formats_for(locale_code, selector, table=table)
    if format_set is None:
        return (None, errors)
    return success(short_styles(format_set))


def short_format_styles_for_or_raise(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> frozenset[FormatStyle]:
    """Short format styles, raising the lookup error."""
    return unwrap(short_format_styles_for(locale_code, selector, table=table))


def decimal_format_styles_for(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> LookupResult[frozenset[FormatStyle]]:
    """Return the decimal format styles for a locale.

    Example:
        >>> styles, _ = decimal_format_styles_for("en")
        >>> sorted(styles)
        ['accounting', 'currency', 'percent', 'scientific', 'standard']
    """
    format_set, errors = formats_for(locale_code, selector, table=table)
    if format_set is None:
        return (None, errors)
    return success(decimal_styles(format_set))


def decimal_format_styles_for_or_raise(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> frozenset[FormatStyle]:
    """Decimal format styles, raising the lookup error."""
    return unwrap(decimal_format_styles_for(locale_code, selector, table=table))
