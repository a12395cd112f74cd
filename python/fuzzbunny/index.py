"""FuzzyIndex for repeated fuzzy filtering of the same collection.

This module provides a high-level interface for building a reusable
collection of prepared candidates from Polars Series or Python lists.
Boundary indices are computed once when items are added and reused for
every search, which is what a typeahead needs when it refilters the same
list on each keystroke.

Warning:
    Adding items is NOT thread-safe. Searching from several threads is
    fine once the index is no longer being modified.
"""

import pickle
from pathlib import Path
from typing import Iterable, List, Optional, Union

import polars as pl

from fuzzbunny._utils import ensure_str
from fuzzbunny.batch import filter_and_rank
from fuzzbunny.matching import FilterResult
from fuzzbunny.skips import Candidate, prepare_candidate


class FuzzyIndex:
    """
    A reusable collection of candidates with cached boundary indices.

    The index can be persisted to disk and reloaded for later use.

    Warning:
        This class is NOT thread-safe while items are being added. Create
        separate instances per thread if each thread builds its own index.

    Example:
        >>> import polars as pl
        >>> from fuzzbunny import FuzzyIndex
        >>>
        >>> # Build index from a Series
        >>> names = pl.Series(["Angela Petrelli", "Hiro Nakamura", "Matt Parkman"])
        >>> index = FuzzyIndex.from_series(names)
        >>>
        >>> # Search with highlights
        >>> [r.highlights for r in index.search("hn")]
        [['', 'H', 'iro ', 'N', 'akamura']]
        >>>
        >>> # Save for later reuse
        >>> index.save("names_index.pkl")
        >>> index = FuzzyIndex.load("names_index.pkl")
    """

    def __init__(self, items: Optional[Iterable[str]] = None):
        """
        Create a FuzzyIndex from a list of strings.

        Args:
            items: Strings to index. Boundaries are computed immediately.
        """
        self._candidates: List[Candidate] = []
        if items is not None:
            self.add_all(items)

    def add(self, item: str) -> None:
        """Add one string to the index."""
        self._candidates.append(prepare_candidate(ensure_str(item, "item")))

    def add_all(self, items: Iterable[str]) -> None:
        """Add several strings to the index."""
        for item in items:
            self.add(item)

    @classmethod
    def from_series(cls, series: "pl.Series") -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a Polars Series.

        Null values are indexed as empty strings, which never match.

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", "Google"])
            >>> index = FuzzyIndex.from_series(names)
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items)

    @classmethod
    def from_dataframe(cls, df: "pl.DataFrame", column: str) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a DataFrame column.

        Args:
            df: Polars DataFrame
            column: Column name to index

        Returns:
            FuzzyIndex instance
        """
        return cls.from_series(df[column])

    def search(
        self,
        query: Optional[str],
        limit: Optional[int] = None,
    ) -> List[FilterResult]:
        """
        Filter and rank the indexed items against a query.

        Args:
            query: Raw query string (trimmed and lowercased here)
            limit: Maximum number of results to return

        Returns:
            FilterResult objects, best first. ``id`` is the position of the
            match in the index.
        """
        return filter_and_rank(self._candidates, query, limit=limit)

    def search_series(
        self,
        queries: "pl.Series",
        limit: Optional[int] = 1,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched string from the index
            - match_idx: Index of the match in the index
            - score: Match score

        Example:
            >>> index = FuzzyIndex(["FuzzBunny", "fuzzy wuzzy"])
            >>> index.search_series(pl.Series(["fb", "wuz"]))
        """
        rows = []

        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for match in self.search(str(query), limit=limit):
                row = {
                    "query_idx": query_idx,
                    "match": match.text,
                    "match_idx": match.id,
                    "score": match.score,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        columns = ["query_idx", "query", "match", "match_idx", "score"]
        if not include_query:
            columns.remove("query")

        if not rows:
            schema = {
                "query_idx": pl.Int64,
                "query": pl.Utf8,
                "match": pl.Utf8,
                "match_idx": pl.Int64,
                "score": pl.Int64,
            }
            return pl.DataFrame(schema={name: schema[name] for name in columns})

        return pl.DataFrame(rows).select(columns)

    def batch_search(
        self,
        queries: List[str],
        limit: Optional[int] = None,
    ) -> List[List[FilterResult]]:
        """
        Search for multiple queries, returning results for each.

        Returns:
            List of lists, where each inner list contains FilterResult
            objects for the corresponding query
        """
        return [self.search(q, limit=limit) for q in queries]

    def get_items(self) -> List[str]:
        """Return the list of indexed items."""
        return [candidate.text for candidate in self._candidates]

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._candidates)

    def save(self, path: Union[str, Path]) -> None:
        """
        Save the index to a file.

        Only the items are stored; boundaries are recomputed on load.

        Example:
            >>> index.save("my_index.pkl")
        """
        data = {"items": self.get_items()}
        with open(path, "wb") as f:
            pickle.dump(data, f)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "FuzzyIndex":
        """
        Load an index from a file.

        Example:
            >>> index = FuzzyIndex.load("my_index.pkl")
        """
        with open(path, "rb") as f:
            data = pickle.load(f)

        return cls(data["items"])

    def __repr__(self) -> str:
        return f"FuzzyIndex(size={len(self._candidates)})"
