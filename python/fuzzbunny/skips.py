"""Boundary (skip) index computation.

A boundary marks the offset where a new matchable unit starts inside a
candidate string: the first character of a word, an uppercase character
following a non-uppercase one (camelCase / PascalCase humps), or any ASCII
punctuation character. The length of the string is appended as a final
sentinel, so ``boundaries[i]:boundaries[i + 1]`` always delimits one unit.

Example:
    >>> compute_boundaries("fuzzBunny.ts")
    (0, 4, 9, 10, 12)
"""

import string
from typing import Iterable, List, NamedTuple, Optional, Tuple

from fuzzbunny._utils import ensure_str

ASCII_PUNCTUATION = frozenset(string.punctuation)

Boundaries = Tuple[int, ...]


class Candidate(NamedTuple):
    """A string to search, optionally carrying its precomputed boundaries.

    Boundaries are stored as a tuple so a prepared candidate can be shared
    between threads and reused across queries as long as ``text`` does not
    change.
    """

    text: str
    boundaries: Optional[Boundaries] = None


def compute_boundaries(text: str) -> Boundaries:
    """Compute the boundary index of ``text`` in a single pass.

    Args:
        text: The candidate string.

    Returns:
        Strictly increasing offsets ending with ``len(text)``.

    Example:
        >>> compute_boundaries("the united states")
        (0, 4, 11, 17)
    """
    ensure_str(text, "text")
    boundaries: List[int] = []
    was_alnum = False
    was_upper = False

    for offset, char in enumerate(text):
        is_alnum = char.isalnum()
        is_upper = char.isupper()

        if (
            (is_alnum and not was_alnum)
            or (is_upper and not was_upper)
            or char in ASCII_PUNCTUATION
        ):
            boundaries.append(offset)

        was_alnum = is_alnum
        was_upper = is_upper

    boundaries.append(len(text))
    return tuple(boundaries)


def prepare_candidate(text: str) -> Candidate:
    """Wrap a string as a Candidate with its boundaries computed."""
    return Candidate(text, compute_boundaries(text))


def prepare_candidates(items: Iterable[str]) -> List[Candidate]:
    """Convert plain strings into Candidates with precomputed boundaries.

    Use this when the same collection is filtered repeatedly, e.g. on every
    keystroke of a typeahead. Wrap items as ``Candidate(text)`` instead to
    skip the precomputation.

    Example:
        >>> prepare_candidates(["FuzzBunny"])
        [Candidate(text='FuzzBunny', boundaries=(0, 4, 9))]
    """
    return [prepare_candidate(item) for item in items]


__all__ = [
    "ASCII_PUNCTUATION",
    "Boundaries",
    "Candidate",
    "compute_boundaries",
    "prepare_candidate",
    "prepare_candidates",
]
