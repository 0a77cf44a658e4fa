"""Exception hierarchy with structured diagnostics.

Lookup failures caused by caller input are returned as values inside
``(result, errors)`` tuples; the same objects are raised by the
``*_or_raise`` entry points. Integrity failures are always raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "FormatTableIntegrityError",
    "NumberFormatsError",
    "UnknownLocaleError",
    "UnknownNumberSystemError",
]


class NumberFormatsError(Exception):
    """Base exception for all cldrnumbers errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumberFormatsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Error category from the diagnostic code, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberFormatsError) or type(self) is not type(other):
            return NotImplemented
        return self.args == other.args and self.diagnostic == other.diagnostic

    def __hash__(self) -> int:
        return hash((type(self), self.args, self.diagnostic))


class UnknownLocaleError(NumberFormatsError, LookupError):
    """Locale is not part of the closed locale universe.

    Attributes:
        locale_code: The locale identifier as supplied by the caller
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class UnknownNumberSystemError(NumberFormatsError, LookupError):
    """Number system role or name is not declared for the locale.

    Attributes:
        locale_code: Normalized locale identifier
        selector: Role or system name that failed to resolve
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        selector: str = "",
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.selector = selector


class FormatTableIntegrityError(NumberFormatsError, RuntimeError):
    """Format table data is incomplete or malformed.

    Never caused by caller input: it signals a defect in the data supplied
    at initialization, so it is raised, never returned.
    """
