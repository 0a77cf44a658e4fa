"""Catalog of the decimal pattern strings known to the format table.

Pattern formatters that compile patterns ahead of time use these lists to
know every pattern a lookup can return. currency_long is left out: it is
a currency-name template ("{0} {1}"), not a decimal pattern.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from cldrnumbers.core.result import LookupResult, success, unwrap
from cldrnumbers.enums import FormatStyle
from cldrnumbers.format_set import FormatSet
from cldrnumbers.table import FormatTable, get_format_table

__all__ = [
    "decimal_format_list",
    "decimal_format_list_for",
    "decimal_format_list_for_or_raise",
]


def _decimal_patterns(format_sets: Iterable[FormatSet]) -> set[str]:
    return {
        pattern
        for format_set in format_sets
        for style, pattern in format_set.iter_patterns()
        if style is not FormatStyle.CURRENCY_LONG
    }


def decimal_format_list_for(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> LookupResult[tuple[str, ...]]:
    """Return the sorted decimal patterns of a locale across its number systems.

    Example:
        >>> patterns, _ = decimal_format_list_for("en")
        >>> "#,##0.###" in patterns and "¤0K" in patterns
        True
    """
    if table is None:
        table = get_format_table()
    systems, errors = table.formats_by_system(locale_code)
    if systems is None:
        return (None, errors)
    return success(tuple(sorted(_decimal_patterns(systems.values()))))


def decimal_format_list_for_or_raise(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> tuple[str, ...]:
    """Decimal patterns of a locale, raising UnknownLocaleError."""
    return unwrap(decimal_format_list_for(locale_code, table=table))


def decimal_format_list(*, table: FormatTable | None = None) -> tuple[str, ...]:
    """Return every decimal pattern of every known locale, sorted.

    Includes FormatTableConfig.extra_formats, so patterns a formatter wants
    to precompile are listed even when no locale uses them.
    """
    if table is None:
        table = get_format_table()
    patterns: set[str] = set(table.config.extra_formats)
    for locale in table.locales:
        systems, _ = table.formats_by_system(locale)
        if systems is not None:
            patterns |= _decimal_patterns(systems.values())
    return tuple(sorted(patterns))
