"""Internal utilities for fuzzbunny."""

from typing import Any, Optional

from fuzzbunny.errors import InvalidTypeError, ValidationError


def ensure_str(value: Any, name: str) -> str:
    """Return ``value`` if it is a string, raise InvalidTypeError otherwise.

    Example:
        >>> ensure_str("abc", "query")
        'abc'
    """
    if not isinstance(value, str):
        raise InvalidTypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def normalize_query(query: Optional[str]) -> str:
    """Trim surrounding whitespace and lowercase a raw user query.

    ``None`` is treated as the empty query.

    Example:
        >>> normalize_query("  dEf ")
        'def'
    """
    if query is None:
        return ""
    return fold_case(ensure_str(query, "query").strip())


def fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, preserving its length.

    Characters whose lowercase form spans several code points (such as
    ``"İ"``) are kept unchanged so that offsets into the folded string are
    valid offsets into the original.
    """
    if text.isascii():
        return text.lower()
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def validate_limit(limit: Optional[int]) -> Optional[int]:
    """Check an optional result limit."""
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidTypeError(f"limit must be int or None, got {type(limit).__name__}")
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    return limit


__all__ = ["ensure_str", "normalize_query", "fold_case", "validate_limit"]
