"""Exception types raised by fuzzbunny.

A query that does not match a candidate is not an error: the matching
functions return ``None`` for it. Exceptions are reserved for malformed
calls (``ValidationError``) and for broken match-range bookkeeping
(``RangeInvariantError``), which can only come from a bug in the kernel.
"""


class FuzzbunnyError(Exception):
    """Base class for all fuzzbunny errors."""


class ValidationError(FuzzbunnyError, ValueError):
    """Raised when an argument has an invalid value."""


class InvalidTypeError(ValidationError, TypeError):
    """Raised when an argument has the wrong type."""


class RangeInvariantError(FuzzbunnyError, AssertionError):
    """Raised when match ranges are empty, unordered, overlapping or out of bounds."""


__all__ = ["FuzzbunnyError", "ValidationError", "InvalidTypeError", "RangeInvariantError"]
