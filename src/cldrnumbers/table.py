"""Format table: every locale's number formats, built once.

The locale universe is closed and known before the first lookup, so the
table is compiled at initialization into plain two-level read-only maps
(locale -> number system -> FormatSet). Every read afterwards is a dict
lookup over immutable data.

Architecture:
    - FormatTable.build(): single pass over the configured locales, calling
      the data loader once per locale and validating what it returns
    - initialize() / get_format_table(): process-wide table published under
      a one-time lock; readers never observe a partially built table
    - Reads return ``(result, errors)``; an unknown locale is an error value

Thread Safety:
    Building takes a lock. Reads take none: the published table is a frozen
    dataclass over MappingProxyType views that are never written again.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cldrnumbers.config import FormatTableConfig
from cldrnumbers.core.result import LookupResult, success
from cldrnumbers.diagnostics import ErrorTemplate, FormatTableIntegrityError
from cldrnumbers.enums import NumberSystemRole
from cldrnumbers.format_set import FormatSet
from cldrnumbers.loading import BabelNumberDataLoader, LocaleNumberData, NumberDataLoader
from cldrnumbers.registry import LocaleRegistry

__all__ = [
    "FormatTable",
    "get_format_table",
    "initialize",
    "reset_format_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatTable:
    """Immutable per-locale number format data.

    Use FormatTable.build() to construct instances; it validates the loaded
    data. Direct construction bypasses validation.

    Attributes:
        config: Configuration the table was built from
        registry: Closed locale universe of the table

    Example:
        >>> table = FormatTable.build(FormatTableConfig(known_locales=("en", "th")))
        >>> systems, errors = table.formats_by_system("th")
        >>> sorted(systems)
        ['latn', 'thai']
        >>> table.grouping_digits("en")
        (1, ())
    """

    config: FormatTableConfig
    registry: LocaleRegistry
    _formats: Mapping[str, Mapping[str, FormatSet]]
    _roles: Mapping[str, Mapping[NumberSystemRole, str]]
    _grouping: Mapping[str, int]

    @classmethod
    def build(
        cls,
        config: FormatTableConfig | None = None,
        loader: NumberDataLoader | None = None,
    ) -> FormatTable:
        """Load, validate and freeze number data for every configured locale.

        Args:
            config: Locale universe and CLDR overrides (default: FormatTableConfig())
            loader: Data source (default: BabelNumberDataLoader for the config)

        Returns:
            Fully populated FormatTable

        Raises:
            FormatTableIntegrityError: If the loader cannot supply a locale or
                returns data violating a table invariant
        """
        if config is None:
            config = FormatTableConfig()
        if loader is None:
            loader = BabelNumberDataLoader(config.minimum_grouping_digits)

        formats: dict[str, Mapping[str, FormatSet]] = {}
        roles: dict[str, Mapping[NumberSystemRole, str]] = {}
        grouping: dict[str, int] = {}

        for locale_code in config.known_locales:
            try:
                data = loader.load(locale_code)
                _check_locale_data(locale_code, data)
            except FormatTableIntegrityError as e:
                logger.error("Failed to load number data for %s: %s", locale_code, e)
                raise
            formats[locale_code] = MappingProxyType(dict(data.formats))
            roles[locale_code] = MappingProxyType(dict(data.roles))
            grouping[locale_code] = data.minimum_grouping_digits

        table = cls(
            config=config,
            registry=LocaleRegistry.from_config(config),
            _formats=MappingProxyType(formats),
            _roles=MappingProxyType(roles),
            _grouping=MappingProxyType(grouping),
        )
        logger.info(
            "Built format table: %d locales, %d number systems",
            len(formats),
            sum(len(systems) for systems in formats.values()),
        )
        return table

    @property
    def locales(self) -> frozenset[str]:
        """Normalized identifiers of every locale in the table."""
        return self.registry.locales

    def validate_locale(self, locale_code: object) -> LookupResult[str]:
        """Validate a locale against the table's registry."""
        return self.registry.validate(locale_code)

    def formats_by_system(self, locale_code: object) -> LookupResult[Mapping[str, FormatSet]]:
        """Every number system's FormatSet for a locale.

        Returns:
            Tuple of (system name -> FormatSet, errors)
        """
        locale, errors = self.validate_locale(locale_code)
        if locale is None:
            return (None, errors)
        return success(self._formats[locale])

    def roles(self, locale_code: object) -> LookupResult[Mapping[NumberSystemRole, str]]:
        """Role -> system name mapping declared by a locale."""
        locale, errors = self.validate_locale(locale_code)
        if locale is None:
            return (None, errors)
        return success(self._roles[locale])

    def grouping_digits(self, locale_code: object) -> LookupResult[int]:
        """Minimum grouping digits of a locale."""
        locale, errors = self.validate_locale(locale_code)
        if locale is None:
            return (None, errors)
        return success(self._grouping[locale])

    def format_set(self, locale: str, system_name: str) -> FormatSet | None:
        """FormatSet for an already validated locale, None if undeclared."""
        return self._formats[locale].get(system_name)


def _check_locale_data(locale_code: str, data: LocaleNumberData) -> None:
    """Validate loader output against the table invariants.

    Raises:
        FormatTableIntegrityError: On the first violated invariant
    """

    def invalid(system_name: str, reason: str) -> FormatTableIntegrityError:
        return FormatTableIntegrityError(
            ErrorTemplate.format_data_invalid(locale_code, system_name, reason)
        )

    if NumberSystemRole.DEFAULT not in data.roles:
        raise invalid("", "no default number system declared")
    for role, system_name in data.roles.items():
        if system_name not in data.formats:
            raise FormatTableIntegrityError(
                ErrorTemplate.format_table_incomplete(locale_code, system_name)
            )
        logger.debug("%s: role %s -> %s", locale_code, role, system_name)
    if data.minimum_grouping_digits < 0:
        raise invalid("", "minimum grouping digits must be non-negative")

    for system_name, format_set in data.formats.items():
        populated = format_set.populated()
        if not populated:
            raise invalid(system_name, "no populated format style")
        for style, value in populated.items():
            if isinstance(value, str):
                continue
            magnitudes = [entry.magnitude for entry in value]
            if any(a >= b for a, b in zip(magnitudes, magnitudes[1:], strict=False)):
                raise invalid(system_name, f"{style} thresholds are not strictly increasing")
            if any("other" not in entry.patterns for entry in value):
                raise invalid(system_name, f"{style} has a threshold without 'other' pattern")


# ============================================================================
# PROCESS-WIDE TABLE
# ============================================================================

_table: FormatTable | None = None
_table_loader: NumberDataLoader | None = None
_table_lock = threading.Lock()


def initialize(
    config: FormatTableConfig | None = None,
    loader: NumberDataLoader | None = None,
) -> FormatTable:
    """Build the process-wide format table, once.

    Call at startup to fix the locale universe before serving lookups.
    Later calls return the existing table. They may omit config and loader,
    or repeat the first call's values; a loader counts as repeated only
    when it is the same object.

    Args:
        config: Configuration for the first build (default: FormatTableConfig())
        loader: Data source for the first build (default: Babel)

    Returns:
        The process-wide FormatTable

    Raises:
        RuntimeError: If the table already exists with a different
            configuration or loader
        FormatTableIntegrityError: If building fails
    """
    global _table, _table_loader  # noqa: PLW0603  # pylint: disable=global-statement
    with _table_lock:
        if _table is not None:
            if config is not None and config != _table.config:
                msg = "Format table already initialized with a different configuration"
                raise RuntimeError(msg)
            if loader is not None and loader is not _table_loader:
                msg = "Format table already initialized with a different loader"
                raise RuntimeError(msg)
            return _table
        _table = FormatTable.build(config, loader)
        _table_loader = loader
        return _table


def get_format_table() -> FormatTable:
    """Return the process-wide table, building the default one on first use."""
    table = _table
    if table is None:
        return initialize()
    return table


def reset_format_table() -> None:
    """Discard the process-wide table so the next access rebuilds it.

    Intended for tests; production code initializes exactly once.
    """
    global _table, _table_loader  # noqa: PLW0603  # pylint: disable=global-statement
    with _table_lock:
        _table = None
        _table_loader = None
