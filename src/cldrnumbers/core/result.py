"""Result convention shared by every lookup.

Checked lookups return ``(result, errors)``:
- success: ``(value, ())``
- failure: ``(None, (error,))``

The raising entry points (``*_or_raise``) are thin wrappers that pass the
checked result through :func:`unwrap`, so both conventions always agree on
which error a bad input produces.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from cldrnumbers.diagnostics import NumberFormatsError

__all__ = [
    "LookupResult",
    "failure",
    "success",
    "unwrap",
]

type LookupResult[T] = tuple[T | None, tuple[NumberFormatsError, ...]]
"""Checked lookup outcome: value or errors, never both."""


def success[T](value: T) -> LookupResult[T]:
    """Wrap a value as a successful lookup."""
    return (value, ())


def failure[T](error: NumberFormatsError) -> LookupResult[T]:
    """Wrap an error as a failed lookup."""
    return (None, (error,))


def unwrap[T](result: LookupResult[T]) -> T:
    """Return the value of a lookup or raise its first error.

    Args:
        result: Outcome of a checked lookup

    Returns:
        The looked-up value

    Raises:
        NumberFormatsError: The error carried by a failed lookup, with its
            original message and diagnostic

    Example:
        >>> unwrap(formats_for("en"))
        FormatSet(standard='#,##0.###', ...)
    """
    value, errors = result
    if errors:
        raise errors[0]
    # A successful lookup never carries None.
    assert value is not None
    return value
