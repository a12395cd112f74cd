"""Polars expression namespace for fuzzy filtering.

This module registers a `.fuzzbunny` namespace on Polars expressions,
enabling fuzzy matching directly in Polars expression contexts. Values are
matched one by one with map_elements; the query is normalised once.

Warning:
    For large columns searched repeatedly, build a
    :class:`~fuzzbunny.FuzzyIndex` instead so boundaries are cached.

Example:
    >>> import polars as pl
    >>> import fuzzbunny  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["FuzzBunny", "fuzzy", "bunny"]})
    >>> df.with_columns(
    ...     score=pl.col("name").fuzzbunny.score("fb")
    ... ).filter(pl.col("score").is_not_null()).sort("score", descending=True)
"""

from typing import Optional

import polars as pl

from fuzzbunny._utils import normalize_query
from fuzzbunny.highlights import extract_highlights
from fuzzbunny.matching import score_one


@pl.api.register_expr_namespace("fuzzbunny")
class FuzzbunnyExprNamespace:
    """
    Fuzzy filtering namespace for Polars expressions.

    Access via `.fuzzbunny` on any string expression. Null values stay null.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def score(self, query: Optional[str]) -> pl.Expr:
        """
        Score each value against a query.

        Returns:
            Int64 expression, null where the value does not match

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzbunny.score("fb"))
        """
        search = normalize_query(query)

        def _score(value: str) -> Optional[int]:
            scored = score_one(str(value), None, search)
            return scored.score if scored is not None else None

        return self._expr.map_elements(_score, return_dtype=pl.Int64)

    def is_match(self, query: Optional[str]) -> pl.Expr:
        """
        Check whether each value matches a query.

        Returns:
            Boolean expression (null values are False)

        Example:
            >>> df.filter(pl.col("name").fuzzbunny.is_match("fb"))
        """
        search = normalize_query(query)
        return self._expr.map_elements(
            lambda value: score_one(str(value), None, search) is not None,
            return_dtype=pl.Boolean,
        ).fill_null(False)

    def highlights(self, query: Optional[str]) -> pl.Expr:
        """
        Highlight segments of each value for a query.

        Returns:
            List[Utf8] expression of alternating unmatched / matched
            segments, null where the value does not match
        """
        search = normalize_query(query)

        def _highlights(value: str) -> Optional[list]:
            text = str(value)
            scored = score_one(text, None, search)
            if scored is None:
                return None
            return extract_highlights(text, scored.ranges)

        return self._expr.map_elements(_highlights, return_dtype=pl.List(pl.Utf8))


__all__ = ["FuzzbunnyExprNamespace"]
