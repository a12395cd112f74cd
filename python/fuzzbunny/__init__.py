"""
fuzzbunny - Fuzzy filtering and ranking for typeahead search

Scores a list of candidate strings against what a user has typed so far,
keeps the ones that match, ranks them and reports which parts of each
candidate matched so a UI can highlight them.

Example usage:
    >>> import fuzzbunny as fb

    # Match a single string
    >>> fb.match_one("FuzzBunny", "fb").highlights
    ['', 'F', 'uzz', 'B', 'unny']

    # Filter and rank a collection (returns FilterResult objects)
    >>> candidates = fb.prepare_candidates(["apple", "application", "banana"])
    >>> [(r.text, r.score) for r in fb.filter_and_rank(candidates, "app")]
    [('apple', 3700), ('application', 3700)]

    # Quoted queries only match literal substrings
    >>> fb.match_one("Los Angeles", '"LA') is None
    True
"""

from importlib.metadata import version as _get_version

# Register the .fuzzbunny expression namespace
import fuzzbunny.expr  # noqa: F401
from fuzzbunny import batch
from fuzzbunny._utils import normalize_query
from fuzzbunny.batch import best_matches, filter_and_rank, score_all
from fuzzbunny.config import Settings, get_settings
from fuzzbunny.enums import MatchKind
from fuzzbunny.errors import (
    FuzzbunnyError,
    InvalidTypeError,
    RangeInvariantError,
    ValidationError,
)
from fuzzbunny.highlights import Highlights, extract_highlights
from fuzzbunny.index import FuzzyIndex
from fuzzbunny.logging import configure_logging
from fuzzbunny.matching import FilterResult, match_one, prefix_align, score_one
from fuzzbunny.polars_ext import filter_dataframe, filter_series, match_series
from fuzzbunny.scoring import (
    SCORE_CONTIGUOUS,
    SCORE_PREFIX,
    SCORE_START_STR,
    MatchRange,
    ScoredMatch,
)
from fuzzbunny.skips import Candidate, compute_boundaries, prepare_candidates

__version__ = _get_version("fuzzbunny")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzbunnyError",
    "ValidationError",
    "InvalidTypeError",
    "RangeInvariantError",
    # Result types
    "Candidate",
    "MatchRange",
    "ScoredMatch",
    "FilterResult",
    "Highlights",
    # Enums
    "MatchKind",
    # Scoring constants
    "SCORE_CONTIGUOUS",
    "SCORE_START_STR",
    "SCORE_PREFIX",
    # Kernel
    "compute_boundaries",
    "prepare_candidates",
    "prefix_align",
    "score_one",
    "extract_highlights",
    "match_one",
    "normalize_query",
    # Bulk filtering
    "filter_and_rank",
    "best_matches",
    "score_all",
    "batch",
    # Index
    "FuzzyIndex",
    # Polars integration
    "filter_series",
    "filter_dataframe",
    "match_series",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
]
