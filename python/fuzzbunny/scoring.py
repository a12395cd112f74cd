"""Match ranges and the scoring function.

Scores reward contiguous matches super-linearly (``[abc]`` ranks above
``[ab]ott [c]hemicals``) and matches anchored at the start of the string or
at the start of a word.
"""

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from fuzzbunny.enums import MatchKind
from fuzzbunny.errors import RangeInvariantError

SCORE_CONTIGUOUS = 300
SCORE_START_STR = 1000
SCORE_PREFIX = 200


@dataclass(frozen=True)
class MatchRange:
    """A contiguous matched span ``[start, start + length)`` of a candidate."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def merge(self, other: "MatchRange") -> "MatchRange":
        """Concatenate ``other``, which must start exactly where this range ends."""
        if other.start != self.end:
            raise RangeInvariantError(
                f"cannot merge {other!r} into {self!r}: ranges are not adjacent"
            )
        return MatchRange(self.start, self.length + other.length)

    def score(self, is_prefix: bool) -> int:
        """Score this range.

        Args:
            is_prefix: Whether the range starts a word. Ranges from fuzzy
                alignment always do; substring matches do when the preceding
                character is not alphanumeric.

        Returns:
            ``SCORE_CONTIGUOUS * length**2`` plus a positional bonus:
            ``SCORE_START_STR`` at offset 0, otherwise ``SCORE_PREFIX - start``
            for word prefixes (never below zero).
        """
        score = SCORE_CONTIGUOUS * self.length * self.length

        if self.start == 0:
            score += SCORE_START_STR
        elif is_prefix:
            # closer to the start ranks higher; no bonus past SCORE_PREFIX
            score += max(SCORE_PREFIX - self.start, 0)

        return score


@dataclass(frozen=True)
class ScoredMatch:
    """Score and matched ranges of one candidate for one query."""

    score: int
    ranges: Tuple[MatchRange, ...] = field(default_factory=tuple)
    kind: MatchKind = MatchKind.SUBSTRING


def total_score(ranges: Sequence[MatchRange]) -> int:
    """Sum the scores of fuzzy-aligned ranges, each scored as a word prefix."""
    return sum(rng.score(True) for rng in ranges)


def check_ranges(ranges: Sequence[MatchRange], text_length: int) -> None:
    """Verify ranges are non-empty, in bounds, ordered and non-adjacent.

    Raises:
        RangeInvariantError: If any range violates the invariants.
    """
    previous_end = -1
    for rng in ranges:
        if rng.length <= 0:
            raise RangeInvariantError(f"empty match range {rng!r}")
        if rng.start < 0 or rng.end > text_length:
            raise RangeInvariantError(
                f"match range {rng!r} is outside a string of length {text_length}"
            )
        if rng.start <= previous_end:
            raise RangeInvariantError(
                f"match range {rng!r} overlaps or touches the previous range"
            )
        previous_end = rng.end


__all__ = [
    "SCORE_CONTIGUOUS",
    "SCORE_START_STR",
    "SCORE_PREFIX",
    "MatchRange",
    "ScoredMatch",
    "total_score",
    "check_ranges",
]
