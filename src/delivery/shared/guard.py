"""Preconditions for arguments a caller must never omit.

A missing identifier or target is a bug in the caller, not a domain conflict,
so it aborts with ``IncorrectUsageError`` instead of returning a ``Result``.
"""

from protean.exceptions import IncorrectUsageError


def require(value, name: str):
    if value is None:
        raise IncorrectUsageError(f"{name} is required")
    return value
