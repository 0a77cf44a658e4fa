"""Closed locale registry.

The registry is the locale universe the format table is built for. It is
fixed at initialization; validating a locale is a set membership test.

Python 3.13+. Uses Babel for the list of locales with CLDR data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cldrnumbers.core.result import LookupResult, failure, success
from cldrnumbers.diagnostics import ErrorTemplate, UnknownLocaleError
from cldrnumbers.locale_utils import normalize_locale

if TYPE_CHECKING:
    from cldrnumbers.config import FormatTableConfig

__all__ = [
    "LocaleRegistry",
    "available_locale_identifiers",
    "unknown_locale",
]

logger = logging.getLogger(__name__)


def available_locale_identifiers() -> tuple[str, ...]:
    """Every locale identifier Babel ships CLDR data for, sorted."""
    from babel import localedata  # noqa: PLC0415

    return tuple(sorted(localedata.locale_identifiers()))


def unknown_locale(locale_code: object) -> UnknownLocaleError:
    """Build the error reported for a locale outside the registry."""
    code = locale_code if isinstance(locale_code, str) else repr(locale_code)
    return UnknownLocaleError(ErrorTemplate.unknown_locale(code), locale_code=code)


@dataclass(frozen=True, slots=True)
class LocaleRegistry:
    """Immutable set of supported locale identifiers.

    Identifiers are stored in normalized POSIX form; validation accepts
    either BCP-47 or POSIX input.

    Attributes:
        locales: Normalized locale identifiers

    Example:
        >>> registry = LocaleRegistry(frozenset({"en", "en_US"}))
        >>> registry.validate("en-US")
        ('en_US', ())
        >>> value, errors = registry.validate("xx")
        >>> errors[0].diagnostic.code
        <DiagnosticCode.LOCALE_UNKNOWN: 1001>
    """

    locales: frozenset[str]

    @classmethod
    def from_config(cls, config: FormatTableConfig) -> LocaleRegistry:
        """Registry for the configured locale universe."""
        return cls(frozenset(config.known_locales))

    def is_known(self, locale_code: object) -> bool:
        """Check if a locale is part of the registry."""
        if not isinstance(locale_code, str) or not locale_code:
            return False
        return normalize_locale(locale_code) in self.locales

    def validate(self, locale_code: object) -> LookupResult[str]:
        """Validate a locale and return its normalized identifier.

        Args:
            locale_code: Caller-supplied locale identifier

        Returns:
            Tuple of (normalized identifier, errors); errors holds an
            UnknownLocaleError when the locale is not in the registry.
        """
        if isinstance(locale_code, str) and locale_code:
            normalized = normalize_locale(locale_code)
            if normalized in self.locales:
                return success(normalized)
        logger.debug("Rejected unknown locale: %r", locale_code)
        return failure(unknown_locale(locale_code))

    def __contains__(self, locale_code: object) -> bool:
        return self.is_known(locale_code)

    def __len__(self) -> int:
        return len(self.locales)
