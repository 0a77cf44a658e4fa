"""Number data loading infrastructure for the format table.

Provides the protocol for number data loaders, a Babel-backed
implementation, and the raw per-locale record a loader produces.

Components:
    NumberDataLoader - Protocol for loading one locale's number data
    BabelNumberDataLoader - CLDR data from Babel's compiled locale files
    LocaleNumberData - Immutable raw definition for one locale

Loaders are only consulted while a FormatTable is being built; nothing
here runs at lookup time.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from babel import UnknownLocaleError as BabelUnknownLocaleError

from cldrnumbers.constants import (
    CURRENCY_LONG_PLURAL_CATEGORY,
    DEFAULT_MINIMUM_GROUPING_DIGITS,
    MINIMUM_GROUPING_DIGITS,
)
from cldrnumbers.diagnostics import ErrorTemplate, FormatTableIntegrityError
from cldrnumbers.enums import NumberSystemRole
from cldrnumbers.format_set import CompactPatterns, CurrencySpacing, FormatSet, compact_patterns
from cldrnumbers.locale_utils import get_babel_locale, locale_lineage

if TYPE_CHECKING:
    from babel import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "NumberDataLoader",
    # Concrete loader
    "BabelNumberDataLoader",
    # Load result type
    "LocaleNumberData",
]

logger = logging.getLogger(__name__)

_ROLE_VALUES = frozenset(role.value for role in NumberSystemRole)


@dataclass(frozen=True, slots=True)
class LocaleNumberData:
    """Raw number definitions for one locale, as supplied by a loader.

    Attributes:
        locale_code: Normalized locale identifier
        roles: Number system role -> system name declared by the locale
        formats: System name -> FormatSet
        minimum_grouping_digits: Minimum digits before grouping applies
    """

    locale_code: str
    roles: Mapping[NumberSystemRole, str]
    formats: Mapping[str, FormatSet]
    minimum_grouping_digits: int = DEFAULT_MINIMUM_GROUPING_DIGITS

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))
        object.__setattr__(self, "formats", MappingProxyType(dict(self.formats)))

    @property
    def system_names(self) -> frozenset[str]:
        """Names of the number systems the locale declares."""
        return frozenset(self.roles.values())


class NumberDataLoader(Protocol):
    """Protocol for loading raw number data for one locale.

    This is a Protocol (structural typing) rather than ABC so that tests
    and alternative data sources can supply plain classes.

    Example:
        >>> class StaticLoader:
        ...     def load(self, locale_code: str) -> LocaleNumberData:
        ...         return LocaleNumberData(
        ...             locale_code,
        ...             roles={NumberSystemRole.DEFAULT: "latn"},
        ...             formats={"latn": FormatSet(standard="#,##0.###")},
        ...         )
        ...
        >>> table = FormatTable.build(FormatTableConfig(("en",)), StaticLoader())
    """

    def load(self, locale_code: str) -> LocaleNumberData:
        """Load number data for a normalized locale identifier.

        Raises:
            FormatTableIntegrityError: If no data exists for the locale
        """
        ...  # pylint: disable=unnecessary-ellipsis


@dataclass(frozen=True, slots=True)
class BabelNumberDataLoader:
    """Number data loader reading Babel's compiled CLDR data.

    Babel compiles only the latn pattern set of each locale. That one set
    is recorded under every number system the locale declares, so the
    record for a non-latn system holds latn patterns: formats_for("ar")
    returns them under the name arab. Currency spacing and minimum
    grouping digits are not part of Babel's data and come from CLDR root
    values and the configured grouping table, walked up the CLDR parent
    chain (pt_AO inherits from pt_PT).

    Attributes:
        minimum_grouping_digits: Locale -> minimum grouping digits overrides

    Example:
        >>> data = BabelNumberDataLoader().load("th")
        >>> data.roles[NumberSystemRole.NATIVE]
        'thai'
        >>> sorted(data.system_names)
        ['latn', 'thai']
    """

    minimum_grouping_digits: Mapping[str, int] = field(
        default_factory=lambda: MINIMUM_GROUPING_DIGITS
    )

    def load(self, locale_code: str) -> LocaleNumberData:
        """Load number data for a locale from Babel.

        Args:
            locale_code: Normalized locale identifier

        Returns:
            LocaleNumberData with one FormatSet per declared number system

        Raises:
            FormatTableIntegrityError: If Babel has no data for the locale
        """
        try:
            locale = get_babel_locale(locale_code)
        except (BabelUnknownLocaleError, ValueError) as e:
            diagnostic = ErrorTemplate.locale_data_unavailable(locale_code, str(e))
            raise FormatTableIntegrityError(diagnostic) from e

        roles = self._roles(locale)
        format_set = self._format_set(locale)
        digits = self._grouping_digits(locale_code)

        logger.debug(
            "Loaded number data for %s: systems=%s, grouping=%d",
            locale_code,
            sorted(set(roles.values())),
            digits,
        )
        return LocaleNumberData(
            locale_code=locale_code,
            roles=roles,
            formats=dict.fromkeys(roles.values(), format_set),
            minimum_grouping_digits=digits,
        )

    def _roles(self, locale: Locale) -> dict[NumberSystemRole, str]:
        roles: dict[NumberSystemRole, str] = {}
        for role, name in locale.other_numbering_systems.items():
            if role in _ROLE_VALUES:
                roles[NumberSystemRole(role)] = name
            else:
                logger.debug("Ignoring unrecognized number system role %r for %s", role, locale)
        roles[NumberSystemRole.DEFAULT] = locale.default_numbering_system
        return roles

    def _format_set(self, locale: Locale) -> FormatSet:
        currency_formats = locale.currency_formats
        # Babel exposes currency unit patterns only through Locale._data.
        unit_patterns = locale._data.get("currency_unit_patterns") or {}  # noqa: SLF001
        return FormatSet(
            standard=_pattern(locale.decimal_formats, None),
            currency=_pattern(currency_formats, "standard"),
            accounting=_pattern(currency_formats, "accounting"),
            scientific=_pattern(locale.scientific_formats, None),
            percent=_pattern(locale.percent_formats, None),
            decimal_long=_compact(locale, locale.compact_decimal_formats, "long"),
            decimal_short=_compact(locale, locale.compact_decimal_formats, "short"),
            currency_short=_compact(locale, locale.compact_currency_formats, "short"),
            currency_long=unit_patterns.get(CURRENCY_LONG_PLURAL_CATEGORY),
            currency_spacing=CurrencySpacing(),
        )

    def _grouping_digits(self, locale_code: str) -> int:
        for candidate in locale_lineage(locale_code):
            if candidate in self.minimum_grouping_digits:
                return self.minimum_grouping_digits[candidate]
        return DEFAULT_MINIMUM_GROUPING_DIGITS


def _pattern(formats: Mapping[Any, Any], key: str | None) -> str | None:
    """Pattern string of a Babel NumberPattern entry, None when absent."""
    number_pattern = formats.get(key)
    if number_pattern is None:
        return None
    return str(number_pattern.pattern)


def _compact(locale: Locale, formats: Mapping[str, Any], length: str) -> CompactPatterns | None:
    """Compact patterns of one length ("short"/"long"), None when absent."""
    by_category = formats.get(length)
    if not by_category:
        return None

    raw = {
        str(category): {
            str(threshold): str(number_pattern.pattern)
            for threshold, number_pattern in by_threshold.items()
        }
        for category, by_threshold in by_category.items()
    }
    entries = compact_patterns(raw)

    kept = {entry.threshold for entry in entries}
    dropped = {t for by_threshold in raw.values() for t in by_threshold} - kept
    if dropped:
        logger.debug(
            "Dropped %s compact thresholds without 'other' pattern for %s: %s",
            length,
            locale,
            sorted(dropped, key=int),
        )
    return entries or None
