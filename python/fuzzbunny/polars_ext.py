"""High-level Polars DataFrame operations for fuzzbunny.

This module applies fuzzy filtering to Polars Series and DataFrames, for
when the collection being searched already lives in a DataFrame (a column
of product names, file paths, people...).

Functions in This Module
------------------------
- ``filter_series()``: Filter and rank a Series, with highlights
- ``filter_dataframe()``: Keep the rows whose column matches, best first
- ``match_series()``: Score every query of a Series against every target

Example Usage
-------------
>>> import polars as pl
>>> import fuzzbunny as fb
>>>
>>> df = pl.DataFrame({
...     "name": ["Hiro Nakamura", "Matt Parkman", "Micah Sanders"],
...     "power": ["Space-time manipulation", "Telepathy", "Technopathy"],
... })
>>> fb.filter_dataframe(df, "power", "te")
>>>
>>> # Or use the expression namespace directly
>>> df.with_columns(score=pl.col("name").fuzzbunny.score("hn"))

See Also
--------
- ``fuzzbunny.expr``: Polars expression namespace for column operations
- ``fuzzbunny.FuzzyIndex``: Reusable index with cached boundaries
"""

from typing import Optional

import polars as pl

from fuzzbunny.batch import filter_and_rank
from fuzzbunny.errors import ValidationError

_RESULT_SCHEMA = {
    "idx": pl.Int64,
    "text": pl.Utf8,
    "score": pl.Int64,
    "highlights": pl.List(pl.Utf8),
}


def _as_strings(series: "pl.Series") -> list:
    return [str(x) if x is not None else "" for x in series.to_list()]


def filter_series(
    series: "pl.Series",
    query: Optional[str],
    limit: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Filter and rank the values of a Series against a query.

    Null values never match.

    Args:
        series: Series of candidate strings
        query: Raw query string
        limit: Maximum number of rows to return

    Returns:
        DataFrame with columns: idx, text, score, highlights, best match first

    Example:
        >>> filter_series(pl.Series(["FuzzBunny", "fuzzy", "bunny"]), "fb")
    """
    results = filter_and_rank(_as_strings(series), query, limit=limit)
    return pl.DataFrame(
        {
            "idx": [r.id for r in results],
            "text": [r.text for r in results],
            "score": [r.score for r in results],
            "highlights": [r.highlights for r in results],
        },
        schema=_RESULT_SCHEMA,
    )


def filter_dataframe(
    df: "pl.DataFrame",
    column: str,
    query: Optional[str],
    limit: Optional[int] = None,
    score_column: str = "_score",
) -> "pl.DataFrame":
    """
    Keep the rows of ``df`` whose ``column`` matches the query, best first.

    Args:
        df: Polars DataFrame
        column: Name of the string column to search
        query: Raw query string
        limit: Maximum number of rows to return
        score_column: Name of the score column added to the output

    Returns:
        The matching rows in rank order, with a score column appended

    Raises:
        ValidationError: If ``column`` is missing or ``score_column``
            already exists
    """
    if column not in df.columns:
        raise ValidationError(f"Column '{column}' not found in DataFrame")
    if score_column in df.columns:
        raise ValidationError(f"Column '{score_column}' already exists in DataFrame")

    results = filter_and_rank(_as_strings(df[column]), query, limit=limit)
    rows = pl.Series("idx", [r.id for r in results], dtype=pl.UInt32)
    return df.select(pl.all().gather(rows)).with_columns(
        pl.Series(score_column, [r.score for r in results], dtype=pl.Int64)
    )


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, every matching target is listed in rank order.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to search

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["fb", "wuz"])
        >>> targets = pl.Series(["FuzzBunny", "fuzzy wuzzy", "cherry"])
        >>> result = match_series(queries, targets)
    """
    targets = _as_strings(target_series)

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        for match in filter_and_rank(targets, str(query)):
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": str(query),
                    "target_idx": match.id,
                    "target": match.text,
                    "score": match.score,
                }
            )

    schema = {
        "query_idx": pl.Int64,
        "query": pl.Utf8,
        "target_idx": pl.Int64,
        "target": pl.Utf8,
        "score": pl.Int64,
    }
    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema)


__all__ = ["filter_series", "filter_dataframe", "match_series"]
