"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent table keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from cldrnumbers.constants import LOCALE_SEPARATOR, ROOT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_lineage",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for table keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", LOCALE_SEPARATOR)


def locale_lineage(locale_code: str) -> tuple[str, ...]:
    """List a locale and its CLDR parents, most specific first.

    Each step takes the explicit CLDR parent when one exists (pt_AO has
    pt_PT, es_MX has es_419) and otherwise drops the trailing subtag. The
    root locale is never included.

    Args:
        locale_code: Locale identifier in either format

    Returns:
        Tuple of identifiers ending with a bare language

    Example:
        >>> locale_lineage("pt-AO")
        ('pt_AO', 'pt_PT', 'pt')
        >>> locale_lineage("zh-Hant-TW")
        ('zh_Hant_TW', 'zh_Hant', 'zh')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    parents = get_global("parent_exceptions")
    lineage: list[str] = []
    current = normalize_locale(locale_code)
    while current and current != ROOT_LOCALE and current not in lineage:
        lineage.append(current)
        current = parents.get(current) or current.rpartition(LOCALE_SEPARATOR)[0]
    return tuple(lineage)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
