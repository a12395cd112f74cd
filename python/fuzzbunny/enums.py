"""Enums for fuzzbunny API."""

from enum import Enum


class MatchKind(str, Enum):
    """Which path of the match kernel produced a score.

    Example:
        >>> from fuzzbunny import score_one, MatchKind
        >>> score_one("FuzzBunny", None, "fb").kind
        <MatchKind.FUZZY: 'fuzzy'>
    """

    EMPTY = "empty"
    """Empty query: matches every non-empty candidate with score 0"""

    SUBSTRING = "substring"
    """Case-insensitive literal substring match (the only path for quoted queries)"""

    FUZZY = "fuzzy"
    """Word-prefix alignment over the candidate's boundary index"""


__all__ = ["MatchKind"]
