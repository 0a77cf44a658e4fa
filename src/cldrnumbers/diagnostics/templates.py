"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and guarantees that the same failure always
    produces an equal Diagnostic, whichever query detected it.
    """

    _CLDR_NUMBERS_DOCS = "https://www.unicode.org/reports/tr35/tr35-numbers.html"
    _LOCALE_DOCS = "https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code"

    @staticmethod
    def unknown_locale(locale_code: str) -> Diagnostic:
        """Locale is not part of the configured locale universe.

        Args:
            locale_code: The locale identifier as supplied by the caller

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"The locale {locale_code!r} is not known"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Add the locale to FormatTableConfig.known_locales",
            help_url=ErrorTemplate._LOCALE_DOCS,
            locale_code=locale_code,
        )

    @staticmethod
    def unknown_number_system(locale_code: str, selector: str) -> Diagnostic:
        """Number system role or name is not declared for a locale.

        Args:
            locale_code: Normalized locale identifier
            selector: Role or system name that failed to resolve

        Returns:
            Diagnostic for NUMBER_SYSTEM_UNKNOWN
        """
        msg = f"The number system {selector!r} is unknown for the locale {locale_code!r}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_SYSTEM_UNKNOWN,
            message=msg,
            hint="Use system_roles() or system_names() to list what the locale declares",
            help_url=f"{ErrorTemplate._CLDR_NUMBERS_DOCS}#Numbering_Systems",
            locale_code=locale_code,
            selector=selector,
        )

    @staticmethod
    def format_table_incomplete(locale_code: str, system_name: str) -> Diagnostic:
        """Resolved number system has no entry in the format table.

        Args:
            locale_code: Normalized locale identifier
            system_name: System name the selector resolved to

        Returns:
            Diagnostic for FORMAT_TABLE_INCOMPLETE
        """
        msg = (
            f"No formats recorded for number system {system_name!r} "
            f"of locale {locale_code!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMAT_TABLE_INCOMPLETE,
            message=msg,
            hint="The data loader declared a system it did not supply formats for",
            locale_code=locale_code,
            selector=system_name,
        )

    @staticmethod
    def format_data_invalid(locale_code: str, system_name: str, reason: str) -> Diagnostic:
        """Loaded format data violates a table invariant.

        Args:
            locale_code: Normalized locale identifier
            system_name: Number system the data belongs to
            reason: Which invariant failed

        Returns:
            Diagnostic for FORMAT_DATA_INVALID
        """
        msg = f"Invalid format data for {locale_code!r}/{system_name!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_DATA_INVALID,
            message=msg,
            help_url=f"{ErrorTemplate._CLDR_NUMBERS_DOCS}#Compact_Number_Formats",
            locale_code=locale_code,
            selector=system_name,
        )

    @staticmethod
    def locale_data_unavailable(locale_code: str, reason: str) -> Diagnostic:
        """Data loader could not supply data for a configured locale.

        Args:
            locale_code: Normalized locale identifier
            reason: Underlying loader error text

        Returns:
            Diagnostic for LOCALE_DATA_UNAVAILABLE
        """
        msg = f"No CLDR number data available for locale {locale_code!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNAVAILABLE,
            message=msg,
            hint="Remove the locale from FormatTableConfig.known_locales",
            help_url=ErrorTemplate._LOCALE_DOCS,
            locale_code=locale_code,
        )
