"""The per-candidate match kernel.

Matching a query against one candidate goes through two phases:

1. A case-insensitive literal substring search. Quoted queries (``"la``
   or ``"la"``) and single characters stop here.
2. A fuzzy word-prefix alignment: starting at every unit whose first
   character equals the query's first character, query characters are
   consumed unit by unit against unit prefixes. ``"usam"`` matches
   ``"[u]nited [s]tates of [am]erica"``. Spaces on either side are
   transparent and a unit is never re-scanned from another offset.

Every function here is pure, so candidates can be evaluated in any order
and on any thread.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from fuzzbunny._utils import ensure_str, fold_case, normalize_query
from fuzzbunny.enums import MatchKind
from fuzzbunny.errors import ValidationError
from fuzzbunny.highlights import Highlights, extract_highlights
from fuzzbunny.scoring import MatchRange, ScoredMatch, total_score
from fuzzbunny.skips import Boundaries, compute_boundaries

QUOTE = '"'


@dataclass(frozen=True)
class FilterResult:
    """A matched candidate with its score and highlight segments.

    Attributes:
        text: The candidate string.
        score: Match score, higher is better. 0 for the empty query.
        highlights: Alternating unmatched / matched segments of ``text``.
        id: Position of the candidate in the input sequence, when known.
    """

    text: str
    score: int
    highlights: Highlights = field(default_factory=list)
    id: Optional[int] = None

    @property
    def matched(self) -> List[str]:
        """Only the matched segments."""
        return self.highlights[1::2]


def unquote(query: str) -> Tuple[str, bool]:
    """Strip the quotes of a quoted query.

    The leading quote marks the query as quoted; the trailing one is
    optional so a user typing ``"las ve`` gets literal matching before
    closing the quote.

    Returns:
        The query body and whether it was quoted.

    Example:
        >>> unquote('"las vegas"')
        ('las vegas', True)
        >>> unquote('"las ve')
        ('las ve', True)
    """
    if not query.startswith(QUOTE):
        return query, False
    end = len(query) - 1 if len(query) > 1 and query.endswith(QUOTE) else len(query)
    return query[1:end], True


def prefix_align(
    skip_idx: int,
    query: str,
    folded_text: str,
    boundaries: Sequence[int],
) -> Optional[List[MatchRange]]:
    """Align ``query`` against unit prefixes, starting at unit ``skip_idx``.

    'usam' aligns with 'the [u]nited [s]tates of [am]erica' from unit 1.
    Units that contribute nothing are passed over; a unit that matches
    partially ends at its first mismatch.

    Args:
        skip_idx: Index into ``boundaries`` of the first unit to try.
        query: Lowercased query.
        folded_text: Lowercased candidate (same length as the original).
        boundaries: Boundary index of the candidate, ending with its length.

    Returns:
        The merged match ranges when the whole query is consumed, else None.
    """
    ranges: List[MatchRange] = []
    query_len = len(query)
    q = 0

    for i in range(skip_idx, len(boundaries) - 1):
        start = boundaries[i]
        end = boundaries[i + 1]
        t = start
        match_start = match_end = -1

        while t < end and q < query_len:
            t_char = folded_text[t]
            q_char = query[q]

            if t_char == q_char:
                if match_start < 0:
                    match_start = t
                t += 1
                q += 1
                match_end = t
                continue

            # spaces shouldn't break matching
            if t_char == " ":
                t += 1
                continue
            if q_char == " ":
                q += 1
                continue

            break

        # skipped spaces inside the match belong to the range, trailing ones don't
        if match_start >= 0:
            this_range = MatchRange(match_start, match_end - match_start)
            if ranges and ranges[-1].end == match_start:
                ranges[-1] = ranges[-1].merge(this_range)
            else:
                ranges.append(this_range)

        if q == query_len:
            return ranges

    return None


def _fits(boundaries: Boundaries, text_length: int) -> bool:
    """Whether ``boundaries`` is strictly increasing from 0 up to ``text_length``."""
    if not boundaries or boundaries[0] < 0 or boundaries[-1] != text_length:
        return False
    return all(a < b for a, b in zip(boundaries, boundaries[1:]))


def score_one(
    text: str,
    boundaries: Optional[Boundaries],
    query: str,
) -> Optional[ScoredMatch]:
    """Score one candidate against a normalised query.

    This is the low-level entry point: it does not trim the query and does
    not build highlights, so callers that rank many candidates can defer
    :func:`~fuzzbunny.highlights.extract_highlights` to the results they
    actually display. Use :func:`~fuzzbunny._utils.normalize_query` to
    prepare raw user input.

    Args:
        text: The candidate string.
        boundaries: Precomputed boundaries of ``text``, or None to compute
            them on demand.
        query: The query, already trimmed. It is lowercased here.

    Returns:
        A ScoredMatch, or None when the query does not match.

    Raises:
        ValidationError: If ``boundaries`` is not a strictly increasing
            sequence of offsets into ``text`` ending at ``len(text)``.

    Example:
        >>> score_one("abcdefg", None, "abc").score
        3700
    """
    ensure_str(text, "text")
    query = fold_case(ensure_str(query, "query"))

    if not text:
        return None

    # the empty query matches everything with the lowest score
    if not query:
        return ScoredMatch(0, (), MatchKind.EMPTY)

    search, is_quoted = unquote(query)
    if not search:
        return ScoredMatch(0, (), MatchKind.EMPTY)

    folded_text = fold_case(text)
    match_idx = folded_text.find(search)

    if match_idx >= 0:
        match_range = MatchRange(match_idx, len(search))
        is_word_prefix = match_idx > 0 and not text[match_idx - 1].isalnum()
        return ScoredMatch(
            match_range.score(is_word_prefix), (match_range,), MatchKind.SUBSTRING
        )

    # a single character that is not a substring won't fuzzy match either,
    # and quoted queries ask for substring matching only
    if len(search) == 1 or is_quoted:
        return None

    if boundaries is None:
        boundaries = compute_boundaries(text)
    elif not _fits(boundaries, len(text)):
        raise ValidationError(
            f"boundaries do not belong to a string of length {len(text)}"
        )

    first_char = search[0]
    for skip_idx in range(len(boundaries) - 1):
        if folded_text[boundaries[skip_idx]] == first_char:
            ranges = prefix_align(skip_idx, search, folded_text, boundaries)
            if ranges is not None:
                return ScoredMatch(total_score(ranges), tuple(ranges), MatchKind.FUZZY)

    return None


def match_one(text: str, query: Optional[str] = None) -> Optional[FilterResult]:
    """Fuzzy match a single string and build its highlights.

    The query is trimmed and lowercased first; None means the empty query.

    Returns:
        A FilterResult, or None when the query does not match.

    Example:
        >>> match_one("FuzzBunny", "fb").highlights
        ['', 'F', 'uzz', 'B', 'unny']
        >>> match_one("abcdefg", "x") is None
        True
    """
    search = normalize_query(query)
    scored = score_one(text, None, search)
    if scored is None:
        return None
    return FilterResult(
        text=text,
        score=scored.score,
        highlights=extract_highlights(text, scored.ranges),
    )


__all__ = [
    "FilterResult",
    "unquote",
    "prefix_align",
    "score_one",
    "match_one",
]
