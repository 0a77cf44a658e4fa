"""cldrnumbers - CLDR number format lookup and style classification.

Resolves, for a locale and a number system selector, the complete set of
CLDR number patterns (standard, currency, accounting, percent, scientific
and compact forms), and classifies which styles are available, which are
compact and which are plain decimal patterns. Data comes from Babel and is
compiled once into an immutable table; every lookup afterwards is a pure,
thread-safe read.

Public API:
    formats_for - FormatSet for a locale and number system selector
    all_formats_for - FormatSet of every number system of a locale
    minimum_grouping_digits_for - Minimum grouping digits of a locale
    format_styles_for / short_format_styles_for / decimal_format_styles_for
    system_roles / system_names - Number systems a locale declares
    decimal_format_list / decimal_format_list_for - Known pattern strings
    initialize - Fix the locale universe and build the table at startup

Every lookup returns ``(result, errors)``; its ``*_or_raise`` twin raises
the error instead.

Exceptions:
    NumberFormatsError - Base exception class
    UnknownLocaleError - Locale outside the configured universe
    UnknownNumberSystemError - Selector not declared for the locale
    FormatTableIntegrityError - Loaded data is incomplete or malformed

Submodules:
    cldrnumbers.format_set - FormatSet, CompactPattern, CurrencySpacing
    cldrnumbers.table - FormatTable and the process-wide table
    cldrnumbers.loading - Data loader protocol and Babel implementation
    cldrnumbers.diagnostics - Error types, codes and formatting
"""

from .catalog import decimal_format_list, decimal_format_list_for, decimal_format_list_for_or_raise
from .config import FormatTableConfig
from .core.result import LookupResult, unwrap
from .diagnostics import (
    FormatTableIntegrityError,
    NumberFormatsError,
    UnknownLocaleError,
    UnknownNumberSystemError,
)
from .enums import FormatStyle, NumberSystemRole
from .format_set import CompactPattern, CurrencySpacing, FormatSet, SpacingRule
from .loading import BabelNumberDataLoader, LocaleNumberData, NumberDataLoader
from .registry import LocaleRegistry
from .resolver import (
    all_formats_for,
    all_formats_for_or_raise,
    formats_for,
    formats_for_or_raise,
    minimum_grouping_digits_for,
    minimum_grouping_digits_for_or_raise,
)
from .styles import (
    available_styles,
    decimal_format_styles_for,
    decimal_format_styles_for_or_raise,
    decimal_styles,
    format_styles_for,
    format_styles_for_or_raise,
    short_format_styles_for,
    short_format_styles_for_or_raise,
    short_styles,
)
from .systems import (
    NumberSystemSelector,
    resolve_system_name,
    resolve_system_name_or_raise,
    system_names,
    system_names_or_raise,
    system_roles,
    system_roles_or_raise,
)
from .table import FormatTable, get_format_table, initialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402, I001
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("cldrnumbers")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelNumberDataLoader",
    "CompactPattern",
    "CurrencySpacing",
    "FormatSet",
    "FormatStyle",
    "FormatTable",
    "FormatTableConfig",
    "FormatTableIntegrityError",
    "LocaleNumberData",
    "LocaleRegistry",
    "LookupResult",
    "NumberDataLoader",
    "NumberFormatsError",
    "NumberSystemRole",
    "NumberSystemSelector",
    "SpacingRule",
    "UnknownLocaleError",
    "UnknownNumberSystemError",
    "__version__",
    "all_formats_for",
    "all_formats_for_or_raise",
    "available_styles",
    "decimal_format_list",
    "decimal_format_list_for",
    "decimal_format_list_for_or_raise",
    "decimal_format_styles_for",
    "decimal_format_styles_for_or_raise",
    "decimal_styles",
    "format_styles_for",
    "format_styles_for_or_raise",
    "formats_for",
    "formats_for_or_raise",
    "get_format_table",
    "initialize",
    "minimum_grouping_digits_for",
    "minimum_grouping_digits_for_or_raise",
    "resolve_system_name",
    "resolve_system_name_or_raise",
    "short_format_styles_for",
    "short_format_styles_for_or_raise",
    "short_styles",
    "system_names",
    "system_names_or_raise",
    "system_roles",
    "system_roles_or_raise",
    "unwrap",
]
