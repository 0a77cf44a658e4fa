"""Format resolution: locale + number system selector -> FormatSet.

- formats_for() returns tuple[FormatSet | None, tuple[NumberFormatsError, ...]]
- Lookup errors (unknown locale, unknown number system) returned in tuple
- FormatTableIntegrityError raised if the table lacks a record it declared
- *_or_raise() variants raise the returned error instead

Every function is a pure read of the format table: identical arguments
give equal results, and no state is touched.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cldrnumbers.core.result import LookupResult, success, unwrap
from cldrnumbers.diagnostics import ErrorTemplate, FormatTableIntegrityError
from cldrnumbers.enums import NumberSystemRole
from cldrnumbers.format_set import FormatSet
from cldrnumbers.systems import NumberSystemSelector, resolve_system_name
from cldrnumbers.table import FormatTable, get_format_table

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "formats_for",
    "formats_for_or_raise",
    "all_formats_for",
    "all_formats_for_or_raise",
    "minimum_grouping_digits_for",
    "minimum_grouping_digits_for_or_raise",
]

logger = logging.getLogger(__name__)


def formats_for(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> LookupResult[FormatSet]:
    """Return the predefined formats for a locale and number system.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        selector: Either a NumberSystemRole, interpreted through the
            locale's declared roles (usually DEFAULT or NATIVE), or a
            system name such as "latn" used directly
        table: Format table to read (default: process-wide table)

    Returns:
        Tuple of (result, errors):
        - result: FormatSet, or None if the lookup failed
        - errors: Tuple holding the UnknownLocaleError or
          UnknownNumberSystemError (empty tuple on success)

    Raises:
        FormatTableIntegrityError: If the selector resolved to a system the
            table holds no record for

    Examples:
        >>> fs, errors = formats_for("en")
        >>> fs.standard, fs.percent, fs.scientific
        ('#,##0.###', '#,##0%', '#E0')
        >>> errors
        ()

        >>> fs, errors = formats_for("th", "thai")
        >>> fs.standard
        '#,##0.###'

        >>> fs, errors = formats_for("xx")
        >>> fs is None, type(errors[0]).__name__
        (True, 'UnknownLocaleError')
    """
    if table is None:
        table = get_format_table()

    locale, errors = table.validate_locale(locale_code)
    if locale is None:
        return (None, errors)

    system_name, errors = resolve_system_name(locale, selector, table=table)
    if system_name is None:
        return (None, errors)

    format_set = table.format_set(locale, system_name)
    if format_set is None:
        diagnostic = ErrorTemplate.format_table_incomplete(locale, system_name)
        logger.error("%s", diagnostic.message)
        raise FormatTableIntegrityError(diagnostic)
    return success(format_set)


def formats_for_or_raise(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> FormatSet:
    """Return the formats for a locale and number system or raise.

    For call sites that have already validated their input.

    Raises:
        UnknownLocaleError: If the locale is not known
        UnknownNumberSystemError: If the selector is not declared for the locale
    """
    return unwrap(formats_for(locale_code, selector, table=table))


def all_formats_for(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> LookupResult[Mapping[str, FormatSet]]:
    """Every number system's FormatSet for a locale.

    Examples:
        >>> systems, _ = all_formats_for("th")
        >>> sorted(systems)
        ['latn', 'thai']
    """
    if table is None:
        table = get_format_table()
    return table.formats_by_system(locale_code)


def all_formats_for_or_raise(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> Mapping[str, FormatSet]:
    """Every number system's FormatSet for a locale, raising UnknownLocaleError."""
    return unwrap(all_formats_for(locale_code, table=table))


def minimum_grouping_digits_for(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> LookupResult[int]:
    """Return the minimum grouping digits for a locale.

    Grouping separators are only used when the integer part has at least
    this many digits more than the primary group size.

    Examples:
        >>> minimum_grouping_digits_for("en")
        (1, ())
        >>> minimum_grouping_digits_for("es")
        (2, ())
    """
    if table is None:
        table = get_format_table()
    return table.grouping_digits(locale_code)


def minimum_grouping_digits_for_or_raise(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> int:
    """Return the minimum grouping digits for a locale or raise.

    Raises:
        UnknownLocaleError: If the locale is not known
    """
    return unwrap(minimum_grouping_digits_for(locale_code, table=table))
