"""Enumerations for cldrnumbers type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the CLDR
identifiers they name.

Python 3.13+.
"""

from enum import StrEnum


class FormatStyle(StrEnum):
    """Number format style defined by CLDR.

    StrEnum provides automatic string conversion: str(FormatStyle.PERCENT) == "percent"
    """

    STANDARD = "standard"
    """Plain decimal pattern: #,##0.###"""

    CURRENCY = "currency"
    """Currency pattern: ¤#,##0.00"""

    ACCOUNTING = "accounting"
    """Accounting pattern, negatives in parentheses: ¤#,##0.00;(¤#,##0.00)"""

    SCIENTIFIC = "scientific"
    """Scientific pattern: #E0"""

    PERCENT = "percent"
    """Percent pattern: #,##0%"""

    DECIMAL_LONG = "decimal_long"
    """Compact long decimal: 0 thousand"""

    DECIMAL_SHORT = "decimal_short"
    """Compact short decimal: 0K"""

    CURRENCY_SHORT = "currency_short"
    """Compact short currency: ¤0K"""

    CURRENCY_LONG = "currency_long"
    """Currency name template: {0} {1}"""


class NumberSystemRole(StrEnum):
    """Role a number system plays in a locale.

    CLDR declares a default system for every locale and optionally
    native, traditional and finance systems.
    """

    DEFAULT = "default"
    NATIVE = "native"
    TRADITIONAL = "traditional"
    FINANCE = "finance"


__all__ = [
    "FormatStyle",
    "NumberSystemRole",
]
