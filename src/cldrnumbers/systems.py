"""Number system resolution and enumeration.

A selector is either a NumberSystemRole, resolved through the locale's
role -> system mapping, or any other string, taken as an explicit system
name. Both must be declared by the locale.

- resolve_system_name() returns tuple[str | None, tuple[NumberFormatsError, ...]]
- system_roles() / system_names() enumerate what a locale declares
- *_or_raise() variants raise the error instead of returning it

Python 3.13+.
"""

from __future__ import annotations

import logging

from cldrnumbers.core.result import LookupResult, failure, success, unwrap
from cldrnumbers.diagnostics import ErrorTemplate, UnknownNumberSystemError
from cldrnumbers.enums import NumberSystemRole
from cldrnumbers.table import FormatTable, get_format_table

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type alias
    "NumberSystemSelector",
    # Resolution
    "resolve_system_name",
    "resolve_system_name_or_raise",
    # Enumeration
    "system_roles",
    "system_roles_or_raise",
    "system_names",
    "system_names_or_raise",
]

logger = logging.getLogger(__name__)

type NumberSystemSelector = NumberSystemRole | str
"""Role (NumberSystemRole member) or explicit system name ('latn', 'thai')."""


def _unknown_system(locale: str, selector: NumberSystemSelector) -> UnknownNumberSystemError:
    logger.debug("Number system %r not declared for %s", selector, locale)
    return UnknownNumberSystemError(
        ErrorTemplate.unknown_number_system(locale, str(selector)),
        locale_code=locale,
        selector=str(selector),
    )


def resolve_system_name(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> LookupResult[str]:
    """Resolve a selector to the concrete number system name for a locale.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        selector: NumberSystemRole for a role lookup, or a system name
        table: Format table to read (default: process-wide table)

    Returns:
        Tuple of (system name, errors):
        - UnknownLocaleError if the locale is not known
        - UnknownNumberSystemError if the role or name is not declared

    Examples:
        >>> resolve_system_name("th", NumberSystemRole.NATIVE)
        ('thai', ())
        >>> resolve_system_name("th", "latn")
        ('latn', ())
        >>> name, errors = resolve_system_name("en", NumberSystemRole.FINANCE)
        >>> type(errors[0]).__name__
        'UnknownNumberSystemError'
    """
    if table is None:
        table = get_format_table()

    locale, errors = table.validate_locale(locale_code)
    if locale is None:
        return (None, errors)

    if isinstance(selector, NumberSystemRole):
        roles, _ = table.roles(locale)
        assert roles is not None
        name = roles.get(selector)
        if name is None:
            return failure(_unknown_system(locale, selector))
        return success(name)

    if isinstance(selector, str) and table.format_set(locale, selector) is not None:
        return success(selector)
    return failure(_unknown_system(locale, selector))


def resolve_system_name_or_raise(
    locale_code: str,
    selector: NumberSystemSelector = NumberSystemRole.DEFAULT,
    *,
    table: FormatTable | None = None,
) -> str:
    """Resolve a selector or raise UnknownLocaleError / UnknownNumberSystemError."""
    return unwrap(resolve_system_name(locale_code, selector, table=table))


def system_roles(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> LookupResult[frozenset[NumberSystemRole]]:
    """Number system roles a locale declares.

    Typically ``default`` and ``native``; some locales add ``traditional``
    or ``finance``.

    Examples:
        >>> roles, _ = system_roles("th")
        >>> sorted(roles)
        [<NumberSystemRole.DEFAULT: 'default'>, <NumberSystemRole.NATIVE: 'native'>]
    """
    if table is None:
        table = get_format_table()
    roles, errors = table.roles(locale_code)
    if roles is None:
        return (None, errors)
    return success(frozenset(roles))


def system_roles_or_raise(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> frozenset[NumberSystemRole]:
    """Number system roles of a locale, raising UnknownLocaleError."""
    return unwrap(system_roles(locale_code, table=table))


def system_names(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> LookupResult[frozenset[str]]:
    """Concrete number system names usable as selectors for a locale.

    Examples:
        >>> system_names("th")
        (frozenset({'latn', 'thai'}), ())
        >>> system_names("pl")
        (frozenset({'latn'}), ())
    """
    if table is None:
        table = get_format_table()
    systems, errors = table.formats_by_system(locale_code)
    if systems is None:
        return (None, errors)
    return success(frozenset(systems))


def system_names_or_raise(
    locale_code: str,
    *,
    table: FormatTable | None = None,
) -> frozenset[str]:
    """Number system names of a locale, raising UnknownLocaleError."""
    return unwrap(system_names(locale_code, table=table))
