"""Core utilities shared across the lookup layers.

Exports:
    LookupResult: ``(result, errors)`` type alias returned by checked lookups
    success / failure: Constructors for LookupResult values
    unwrap: Converts a failed LookupResult into a raised error

Python 3.13+.
"""

from .result import LookupResult, failure, success, unwrap

__all__ = ["LookupResult", "failure", "success", "unwrap"]
