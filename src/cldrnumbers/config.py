"""Configuration for the format table.

Provides a single frozen dataclass that fixes the locale universe and the
CLDR values Babel does not ship, before any lookup is served.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrnumbers.constants import (
    DEFAULT_KNOWN_LOCALES,
    MINIMUM_GROUPING_DIGITS,
    ROOT_LOCALE,
)
from cldrnumbers.locale_utils import normalize_locale

__all__ = ["FormatTableConfig"]


@dataclass(frozen=True, slots=True)
class FormatTableConfig:
    """Immutable configuration for building a FormatTable.

    All fields have sensible defaults; ``FormatTableConfig()`` builds the
    table for DEFAULT_KNOWN_LOCALES. Locale identifiers are normalized to
    POSIX form and de-duplicated at construction.

    Attributes:
        known_locales: Closed locale universe. Every lookup for a locale
            outside it fails with UnknownLocaleError.
        minimum_grouping_digits: Per-locale minimum grouping digits. Locales
            not listed inherit from their nearest listed parent, then fall
            back to CLDR root (1).
        extra_formats: Additional pattern strings reported by
            decimal_format_list(), for formatters that precompile patterns.

    Example:
        >>> config = FormatTableConfig(known_locales=("en", "th"))
        >>> config.known_locales
        ('en', 'th')

    Example - every locale Babel ships:
        >>> config = FormatTableConfig.all_locales()
        >>> "fr_CA" in config.known_locales
        True
    """

    known_locales: tuple[str, ...] = DEFAULT_KNOWN_LOCALES
    minimum_grouping_digits: Mapping[str, int] = field(
        default_factory=lambda: MINIMUM_GROUPING_DIGITS
    )
    extra_formats: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize identifiers and validate values at construction time.

        Raises:
            ValueError: If known_locales is empty or contains an empty
                identifier, or a grouping digit count is negative.
        """
        if isinstance(self.known_locales, str):
            msg = "known_locales must be a sequence of locale identifiers, not a string"
            raise ValueError(msg)
        if not self.known_locales:
            msg = "known_locales must not be empty"
            raise ValueError(msg)
        if any(not code for code in self.known_locales):
            msg = "known_locales must not contain empty identifiers"
            raise ValueError(msg)

        normalized = tuple(dict.fromkeys(normalize_locale(code) for code in self.known_locales))
        object.__setattr__(self, "known_locales", normalized)

        grouping = {
            normalize_locale(code): digits
            for code, digits in self.minimum_grouping_digits.items()
        }
        for code, digits in grouping.items():
            if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
                msg = f"minimum_grouping_digits[{code!r}] must be a non-negative int"
                raise ValueError(msg)
        object.__setattr__(self, "minimum_grouping_digits", MappingProxyType(grouping))

        object.__setattr__(self, "extra_formats", tuple(self.extra_formats))

    @classmethod
    def all_locales(cls, **overrides: object) -> FormatTableConfig:
        """Configuration covering every locale Babel ships data for.

        Building it loads every CLDR locale once; expect a slower startup.

        Args:
            **overrides: Other FormatTableConfig fields.

        Returns:
            Configuration whose known_locales is Babel's full locale list.
        """
        from cldrnumbers.registry import available_locale_identifiers  # noqa: PLC0415

        locales = tuple(
            code for code in available_locale_identifiers() if code != ROOT_LOCALE
        )
        return cls(known_locales=locales, **overrides)  # type: ignore[arg-type]
