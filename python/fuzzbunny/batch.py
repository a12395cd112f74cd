"""Bulk filtering and ranking.

This module applies the match kernel to a whole collection of candidates,
drops the ones that do not match and sorts the rest. Each candidate is
evaluated independently; large collections are split into chunks that run
on a fixed-size thread pool, and the only merge point is the final sort.

Example usage:
    >>> import fuzzbunny.batch as batch

    >>> candidates = batch.prepare_candidates(["apple", "application", "banana"])
    >>> results = batch.filter_and_rank(candidates, "app")
    >>> [r.highlights for r in results]
    [['', 'app', 'le'], ['', 'app', 'lication']]

    >>> [m.text for m in batch.best_matches(["Nathan", "Angela", "Arthur"], "a", limit=2)]
    ['Angela', 'Arthur']
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Sequence, TypeVar, Union

from fuzzbunny._utils import normalize_query, validate_limit
from fuzzbunny.config import get_settings
from fuzzbunny.errors import InvalidTypeError, ValidationError
from fuzzbunny.highlights import extract_highlights
from fuzzbunny.logging import get_logger
from fuzzbunny.matching import FilterResult, score_one, unquote
from fuzzbunny.scoring import ScoredMatch
from fuzzbunny.skips import Candidate, prepare_candidates

CandidateLike = Union[Candidate, str]

T = TypeVar("T")

__all__ = [
    "CandidateLike",
    "as_candidate",
    "filter_and_rank",
    "best_matches",
    "score_all",
    "prepare_candidates",
]


def as_candidate(item: CandidateLike) -> Candidate:
    """Accept a Candidate, a ``(text, boundaries)`` pair or a bare string."""
    if isinstance(item, str):
        return Candidate(item)
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str):
        text, boundaries = item
        return Candidate(text, tuple(boundaries) if boundaries is not None else None)
    raise InvalidTypeError(
        f"candidate must be str or Candidate, got {type(item).__name__}"
    )


def _resolve_workers(max_workers: int | None) -> int:
    if max_workers is None:
        return get_settings().max_workers
    if isinstance(max_workers, bool) or not isinstance(max_workers, int):
        raise InvalidTypeError(
            f"max_workers must be int or None, got {type(max_workers).__name__}"
        )
    if max_workers < 1:
        raise ValidationError(f"max_workers must be a positive int, got {max_workers!r}")
    return max_workers


def _map_chunks(
    func: Callable[[int, Sequence[Candidate]], list[T]],
    items: Sequence[Candidate],
    max_workers: int,
) -> tuple[list[T], bool]:
    """Run ``func(offset, chunk)`` over chunks of ``items`` and concatenate.

    Chunks go to a thread pool only when there are enough items to make it
    worthwhile. Output order follows input order either way.
    """
    settings = get_settings()
    if max_workers == 1 or len(items) < settings.parallel_threshold:
        return func(0, items), False

    size = settings.chunk_size
    offsets = range(0, len(items), size)
    chunks = [items[offset:offset + size] for offset in offsets]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        parts = executor.map(func, offsets, chunks)
        results = [value for part in parts for value in part]
    return results, True


def filter_and_rank(
    candidates: Iterable[CandidateLike],
    query: str | None,
    *,
    limit: int | None = None,
    max_workers: int | None = None,
) -> list[FilterResult]:
    """Fuzzy match every candidate and return the matches, best first.

    Non-matching candidates are dropped. Results are ordered by score
    descending; exact score ties are ordered by text, ascending by code
    point, so the output never depends on input order. When the query is
    empty (after trimming and unquoting) every non-empty candidate is
    returned with score 0 in its original order.

    Args:
        candidates: Strings or Candidates (see
            :func:`~fuzzbunny.skips.prepare_candidates` to cache boundaries).
        query: Raw user query. It is trimmed and lowercased.
        limit: Maximum number of results to return (None for all).
        max_workers: Thread pool size; defaults to ``Settings.max_workers``.

    Returns:
        FilterResult objects with highlights. ``id`` is the candidate's
        position in ``candidates``.

    Example:
        >>> [r.text for r in filter_and_rank(["Angela Petrelli", "Arthur Petrelli"], "petrelli")]
        ['Angela Petrelli', 'Arthur Petrelli']
    """
    search = normalize_query(query)
    limit = validate_limit(limit)
    workers = _resolve_workers(max_workers)
    items = [as_candidate(item) for item in candidates]

    def evaluate(offset: int, chunk: Sequence[Candidate]) -> list[FilterResult]:
        matches = []
        for position, (text, boundaries) in enumerate(chunk, start=offset):
            scored = score_one(text, boundaries, search)
            if scored is None:
                continue
            matches.append(
                FilterResult(
                    text=text,
                    score=scored.score,
                    highlights=extract_highlights(text, scored.ranges),
                    id=position,
                )
            )
        return matches

    started = time.perf_counter()
    results, pooled = _map_chunks(evaluate, items, workers)

    if unquote(search)[0]:
        results.sort(key=lambda result: (-result.score, result.text))

    if limit is not None:
        results = results[:limit]

    get_logger(__name__).debug(
        "filter_and_rank",
        candidates=len(items),
        matches=len(results),
        pooled=pooled,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
    )
    return results


def best_matches(
    strings: Iterable[CandidateLike],
    query: str | None,
    limit: int = 5,
) -> list[FilterResult]:
    """Return the top ``limit`` matches for a query.

    Example:
        >>> [m.text for m in best_matches(["apple", "apply", "banana"], "ap", limit=2)]
        ['apple', 'apply']
    """
    return filter_and_rank(strings, query, limit=limit)


def score_all(
    candidates: Iterable[CandidateLike],
    query: str | None,
    *,
    max_workers: int | None = None,
) -> list[ScoredMatch | None]:
    """Score every candidate without filtering, sorting or highlighting.

    Returns:
        One ScoredMatch (or None for a non-match) per candidate, in input
        order.
    """
    search = normalize_query(query)
    workers = _resolve_workers(max_workers)
    items = [as_candidate(item) for item in candidates]

    def evaluate(offset: int, chunk: Sequence[Candidate]) -> list[ScoredMatch | None]:
        return [score_one(text, boundaries, search) for text, boundaries in chunk]

    scores, _ = _map_chunks(evaluate, items, workers)
    return scores
