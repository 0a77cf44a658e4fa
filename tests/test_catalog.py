"""Tests for the decimal pattern catalog.

Python 3.13+.
"""

import pytest

from cldrnumbers import (
    FormatTable,
    FormatTableConfig,
    UnknownLocaleError,
    decimal_format_list,
    decimal_format_list_for,
    decimal_format_list_for_or_raise,
)
from tests.helpers.loaders import StaticLoader, synthetic_locale


class TestDecimalFormatListFor:
    """Test decimal_format_list_for()."""

    def test_english(self, table: FormatTable) -> None:
        """Plain and compact patterns are listed."""
        patterns = decimal_format_list_for_or_raise("en", table=table)
        assert "#,##0.###" in patterns
        assert "¤0K" in patterns
        assert "0 thousand" in patterns

    def test_sorted_unique(self, table: FormatTable) -> None:
        """Patterns sorted without duplicates."""
        patterns = decimal_format_list_for_or_raise("en", table=table)
        assert list(patterns) == sorted(set(patterns))

    def test_currency_long_excluded(self, table: FormatTable) -> None:
        """The currency-name template is not a decimal pattern."""
        assert "{0} {1}" not in decimal_format_list_for_or_raise("en", table=table)

    def test_synthetic(self, synthetic_table: FormatTable) -> None:
        """Exact list for in-memory data."""
        assert decimal_format_list_for("aa", table=synthetic_table) == (
            ("#,##0%", "#,##0.###", "00K", "0K", "¤#,##0.00"),
            (),
        )

    def test_unknown_locale(self, table: FormatTable) -> None:
        """Unknown locale reported, or raised by the raising variant."""
        value, errors = decimal_format_list_for("xx", table=table)
        assert value is None
        assert isinstance(errors[0], UnknownLocaleError)
        with pytest.raises(UnknownLocaleError):
            decimal_format_list_for_or_raise("xx", table=table)


class TestDecimalFormatList:
    """Test decimal_format_list()."""

    def test_union_of_locales(self, table: FormatTable) -> None:
        """Every locale's patterns are included."""
        everything = set(decimal_format_list(table=table))
        for locale in ("en", "en_IN", "fr", "th"):
            assert set(decimal_format_list_for_or_raise(locale, table=table)) <= everything

    def test_extra_formats(self) -> None:
        """Configured extra formats are listed even if no locale uses them."""
        config = FormatTableConfig(known_locales=("aa",), extra_formats=("0.00",))
        table = FormatTable.build(config, StaticLoader({"aa": synthetic_locale("aa")}))
        assert "0.00" in decimal_format_list(table=table)
        assert "0.00" not in decimal_format_list_for_or_raise("aa", table=table)
