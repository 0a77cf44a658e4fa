"""Diagnostic system for number format lookups.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FormatTableIntegrityError,
    NumberFormatsError,
    UnknownLocaleError,
    UnknownNumberSystemError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatTableIntegrityError",
    "NumberFormatsError",
    "OutputFormat",
    "UnknownLocaleError",
    "UnknownNumberSystemError",
]
