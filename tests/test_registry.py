"""Tests for the closed locale registry.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import given

from cldrnumbers import FormatTableConfig, LocaleRegistry, UnknownLocaleError
from cldrnumbers.diagnostics import DiagnosticCode, ErrorCategory
from cldrnumbers.registry import available_locale_identifiers, unknown_locale
from tests.strategies.locales import known_locales_any_format, unknown_locales

REGISTRY = LocaleRegistry.from_config(FormatTableConfig())


class TestLocaleRegistryValidate:
    """Test LocaleRegistry.validate()."""

    def test_known_posix(self) -> None:
        """POSIX identifier returned unchanged."""
        assert REGISTRY.validate("en_US") == ("en_US", ())

    def test_known_bcp47(self) -> None:
        """BCP-47 identifier returned normalized."""
        assert REGISTRY.validate("zh-Hant") == ("zh_Hant", ())

    def test_unknown(self) -> None:
        """Unknown locale returns an UnknownLocaleError value."""
        value, errors = REGISTRY.validate("xx")
        assert value is None
        assert len(errors) == 1
        assert isinstance(errors[0], UnknownLocaleError)
        assert errors[0].locale_code == "xx"

    def test_unknown_diagnostic(self) -> None:
        """Unknown locale error carries an input-category diagnostic."""
        _, errors = REGISTRY.validate("xx")
        diagnostic = errors[0].diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.LOCALE_UNKNOWN
        assert errors[0].category is ErrorCategory.INPUT
        assert str(errors[0]) == "The locale 'xx' is not known"

    def test_babel_locale_outside_universe(self) -> None:
        """A locale Babel has data for is still unknown if not configured."""
        _, errors = REGISTRY.validate("fr_CA")
        assert isinstance(errors[0], UnknownLocaleError)

    @pytest.mark.parametrize("value", [None, 42, b"en", ["en"]])
    def test_non_string(self, value: object) -> None:
        """Non-string input is an unknown locale, not a TypeError."""
        result, errors = REGISTRY.validate(value)
        assert result is None
        assert errors[0].locale_code == repr(value)  # type: ignore[attr-defined]

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected locales logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="cldrnumbers.registry"):
            REGISTRY.validate("xx")
        assert "Rejected unknown locale: 'xx'" in caplog.text

    @given(locale=known_locales_any_format())
    def test_every_known_locale_validates(self, locale: str) -> None:
        """Every configured locale validates in either spelling."""
        value, errors = REGISTRY.validate(locale)
        assert errors == ()
        assert value == locale.replace("-", "_")

    @given(locale=unknown_locales())
    def test_unknown_locales_rejected(self, locale: str) -> None:
        """Anything outside the universe is rejected with one error."""
        value, errors = REGISTRY.validate(locale)
        assert value is None
        assert len(errors) == 1
        assert isinstance(errors[0], UnknownLocaleError)


class TestLocaleRegistryMembership:
    """Test is_known(), __contains__ and __len__."""

    def test_contains(self) -> None:
        """Membership accepts either spelling."""
        assert "en-GB" in REGISTRY
        assert "en_GB" in REGISTRY
        assert "xx" not in REGISTRY

    def test_is_known_rejects_non_strings(self) -> None:
        """Non-strings and empty strings are never known."""
        assert not REGISTRY.is_known(None)
        assert not REGISTRY.is_known("")

    def test_len(self) -> None:
        """Length is the number of configured locales."""
        assert len(REGISTRY) == len(FormatTableConfig().known_locales)


class TestHelpers:
    """Test module-level helpers."""

    def test_available_locale_identifiers_sorted(self) -> None:
        """Babel's locale list returned sorted."""
        identifiers = available_locale_identifiers()
        assert list(identifiers) == sorted(identifiers)
        assert "en" in identifiers

    def test_unknown_locale_equal_for_equal_input(self) -> None:
        """The same input always builds an equal error."""
        assert unknown_locale("xx") == unknown_locale("xx")
        assert unknown_locale("xx") != unknown_locale("yy")
