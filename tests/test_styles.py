"""Tests for format style classification.

Python 3.13+.
"""

import pytest
from hypothesis import event, given

from cldrnumbers import (
    FormatSet,
    FormatStyle,
    FormatTable,
    NumberSystemRole,
    UnknownLocaleError,
    UnknownNumberSystemError,
    available_styles,
    decimal_format_styles_for,
    decimal_format_styles_for_or_raise,
    decimal_styles,
    format_styles_for,
    format_styles_for_or_raise,
    formats_for,
    short_format_styles_for,
    short_format_styles_for_or_raise,
    short_styles,
)
from cldrnumbers.constants import (
    COMPACT_STYLE_CANDIDATES,
    NOT_REALLY_SHORT_STYLES,
    SHORT_FORMAT_STYLES,
)
from tests.helpers.loaders import SYNTHETIC_FORMATS
from tests.strategies.formats import format_sets
from tests.strategies.locales import known_locales, selectors

PLAIN_STYLES = frozenset({
    FormatStyle.STANDARD,
    FormatStyle.CURRENCY,
    FormatStyle.ACCOUNTING,
    FormatStyle.SCIENTIFIC,
    FormatStyle.PERCENT,
})


class TestStyleConstants:
    """Test the fixed style taxonomy."""

    def test_short_styles(self) -> None:
        """Short styles are the compact candidates minus currency_long."""
        assert SHORT_FORMAT_STYLES == frozenset({
            FormatStyle.DECIMAL_LONG,
            FormatStyle.DECIMAL_SHORT,
            FormatStyle.CURRENCY_SHORT,
        })

    def test_currency_long_carved_out(self) -> None:
        """currency_long is a compact candidate but not a short style."""
        assert FormatStyle.CURRENCY_LONG in COMPACT_STYLE_CANDIDATES
        assert FormatStyle.CURRENCY_LONG not in SHORT_FORMAT_STYLES
        assert NOT_REALLY_SHORT_STYLES == frozenset({FormatStyle.CURRENCY_LONG})


class TestFormatSetClassification:
    """Test available_styles(), short_styles() and decimal_styles()."""

    def test_synthetic(self) -> None:
        """Classification of a partially populated FormatSet."""
        assert available_styles(SYNTHETIC_FORMATS) == frozenset({
            FormatStyle.STANDARD,
            FormatStyle.CURRENCY,
            FormatStyle.PERCENT,
            FormatStyle.DECIMAL_SHORT,
            FormatStyle.CURRENCY_LONG,
        })
        assert short_styles(SYNTHETIC_FORMATS) == frozenset({FormatStyle.DECIMAL_SHORT})
        assert decimal_styles(SYNTHETIC_FORMATS) == frozenset({
            FormatStyle.STANDARD,
            FormatStyle.CURRENCY,
            FormatStyle.PERCENT,
        })

    def test_empty(self) -> None:
        """Nothing populated, nothing classified."""
        empty = FormatSet()
        assert available_styles(empty) == frozenset()
        assert short_styles(empty) == frozenset()
        assert decimal_styles(empty) == frozenset()

    def test_currency_long_only(self) -> None:
        """currency_long is available but neither short nor decimal."""
        fs = FormatSet(currency_long="{0} {1}")
        assert available_styles(fs) == frozenset({FormatStyle.CURRENCY_LONG})
        assert short_styles(fs) == frozenset()
        assert decimal_styles(fs) == frozenset()

    @given(fs=format_sets())
    def test_partition(self, fs: FormatSet) -> None:
        """short and decimal are disjoint and, with currency_long, cover available."""
        available = available_styles(fs)
        short = short_styles(fs)
        decimal = decimal_styles(fs)
        event(f"short={len(short)}")
        assert short.isdisjoint(decimal)
        assert short | decimal | (available & NOT_REALLY_SHORT_STYLES) == available
        assert short <= SHORT_FORMAT_STYLES
        assert decimal <= PLAIN_STYLES


class TestLocaleClassification:
    """Test the locale-level classification functions against CLDR data."""

    def test_english_all_styles(self, table: FormatTable) -> None:
        """English defines all nine styles."""
        assert format_styles_for("en", table=table) == (frozenset(FormatStyle), ())

    def test_hebrew_short(self, table: FormatTable) -> None:
        """Hebrew has all three compact styles."""
        assert short_format_styles_for("he", table=table) == (
            frozenset({
                FormatStyle.CURRENCY_SHORT,
                FormatStyle.DECIMAL_LONG,
                FormatStyle.DECIMAL_SHORT,
            }),
            (),
        )

    def test_english_decimal(self, table: FormatTable) -> None:
        """English decimal styles are the five single-pattern styles."""
        assert decimal_format_styles_for_or_raise("en", table=table) == PLAIN_STYLES

    def test_native_system(self, table: FormatTable) -> None:
        """Selectors are honoured."""
        styles = format_styles_for_or_raise("th", NumberSystemRole.NATIVE, table=table)
        assert FormatStyle.STANDARD in styles

    @given(locale=known_locales)
    def test_partition_every_locale(self, table: FormatTable, locale: str) -> None:
        """Taxonomy holds for every configured locale."""
        available = format_styles_for_or_raise(locale, table=table)
        short = short_format_styles_for_or_raise(locale, table=table)
        decimal = decimal_format_styles_for_or_raise(locale, table=table)
        assert short.isdisjoint(decimal)
        assert short | decimal | (available & NOT_REALLY_SHORT_STYLES) == available

    @pytest.mark.parametrize(
        "classify",
        [format_styles_for, short_format_styles_for, decimal_format_styles_for],
    )
    def test_unknown_locale_passthrough(self, table: FormatTable, classify: object) -> None:
        """Every classifier returns the resolver's error unchanged."""
        _, expected = formats_for("xx", table=table)
        value, errors = classify("xx", table=table)  # type: ignore[operator]
        assert value is None
        assert errors == expected
        assert isinstance(errors[0], UnknownLocaleError)

    @given(locale=known_locales, selector=selectors)
    def test_identical_errors(
        self, table: FormatTable, locale: str, selector: NumberSystemRole | str
    ) -> None:
        """The three classifiers fail together, with equal errors."""
        results = [
            classify(locale, selector, table=table)
            for classify in (format_styles_for, short_format_styles_for, decimal_format_styles_for)
        ]
        failed = [value is None for value, _ in results]
        event(f"failed={failed[0]}")
        assert len(set(failed)) == 1
        if failed[0]:
            assert results[0][1] == results[1][1] == results[2][1]
            assert isinstance(results[0][1][0], UnknownNumberSystemError)

    def test_or_raise_unknown(self, table: FormatTable) -> None:
        """Raising variants raise the lookup error."""
        with pytest.raises(UnknownLocaleError):
            format_styles_for_or_raise("xx", table=table)
        with pytest.raises(UnknownLocaleError):
            short_format_styles_for_or_raise("xx", table=table)
        with pytest.raises(UnknownNumberSystemError):
            decimal_format_styles_for_or_raise("en", "thai", table=table)
