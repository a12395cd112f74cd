"""Turn match ranges into displayable highlight segments."""

from typing import List, Sequence

from fuzzbunny.scoring import MatchRange, check_ranges

Highlights = List[str]
"""Alternating unmatched / matched substrings covering a whole candidate.

Every odd-indexed entry is a matched segment. ``"usam"`` against
``"the united states of america"`` gives::

    ["the ", "u", "nited ", "s", "tates of ", "am", "erica"]
"""


def extract_highlights(text: str, ranges: Sequence[MatchRange]) -> Highlights:
    """Split ``text`` into alternating unmatched / matched segments.

    The first entry is the unmatched prefix (``""`` when the first range
    starts at offset 0). A trailing unmatched entry is present only when
    text remains after the last range. Joining the result gives back
    ``text``; segments are owned copies of the candidate's slices.

    Args:
        text: The candidate string the ranges refer to.
        ranges: Ordered, non-overlapping, non-adjacent match ranges.

    Returns:
        The highlight segments.

    Raises:
        RangeInvariantError: If the ranges are malformed for ``text``.

    Example:
        >>> extract_highlights("my example", [MatchRange(3, 2)])
        ['my ', 'ex', 'ample']
    """
    check_ranges(ranges, len(text))

    last_index = 0
    highlights: Highlights = []
    for rng in ranges:
        highlights.append(text[last_index:rng.start])
        highlights.append(text[rng.start:rng.end])
        last_index = rng.end

    if last_index < len(text):
        highlights.append(text[last_index:])

    return highlights


__all__ = ["Highlights", "extract_highlights"]
