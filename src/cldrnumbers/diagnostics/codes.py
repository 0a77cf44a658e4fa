"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for lookup errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"input"``, ``"integrity"``) rather than the
    ``"ErrorCategory.X"`` repr that a plain ``Enum`` would produce.

    Categories:
        INPUT: Caller-supplied locale or selector is not known
        INTEGRITY: Format table is missing data it promised to hold
    """

    INPUT = "input"
    INTEGRITY = "integrity"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (unknown locale, unknown number system)
        2000-2999: Integrity errors (incomplete or malformed format data)
    """

    # Input errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    NUMBER_SYSTEM_UNKNOWN = 1002

    # Integrity errors (2000-2999)
    FORMAT_TABLE_INCOMPLETE = 2001
    FORMAT_DATA_INVALID = 2002
    LOCALE_DATA_UNAVAILABLE = 2003

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.INPUT
        return ErrorCategory.INTEGRITY


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Two diagnostics built for the
    same cause compare equal, which lets callers check that different
    queries report the identical error.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_code: Locale the lookup was made for
        selector: Number system selector the lookup was made with
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    locale_code: str | None = None
    selector: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_UNKNOWN]: The locale 'xx' is not known
              = locale: xx
              = help: Add the locale to FormatTableConfig.known_locales
              = note: see https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
