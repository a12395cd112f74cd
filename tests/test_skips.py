"""Tests for boundary index computation."""

import pytest

import fuzzbunny as fb
from fuzzbunny.skips import Candidate, compute_boundaries, prepare_candidate


class TestComputeBoundaries:
    """Word, case and punctuation boundaries."""

    def test_empty_string_has_only_sentinel(self):
        """The empty string has just the sentinel."""
        assert compute_boundaries("") == (0,)

    def test_single_word(self):
        """One word is one unit."""
        assert compute_boundaries("abc") == (0, 3)

    def test_words(self):
        """Each word after a space starts a unit."""
        assert compute_boundaries("the united states") == (0, 4, 11, 17)

    def test_leading_spaces(self):
        """Leading spaces do not start a unit."""
        assert compute_boundaries("  hi") == (2, 4)

    def test_pascal_case(self):
        """An uppercase letter after a lowercase one starts a unit."""
        assert compute_boundaries("FuzzBunny") == (0, 4, 9)

    def test_camel_case_with_punctuation(self):
        """Case shifts and punctuation both split units."""
        assert compute_boundaries("fuzzBunny.ts") == (0, 4, 9, 10, 12)

    def test_consecutive_capitals_form_one_unit(self):
        """A run of capitals stays in one unit."""
        assert compute_boundaries("HTTPServer") == (0, 10)

    def test_every_punctuation_character_is_a_boundary(self):
        """Each ASCII punctuation character is its own unit."""
        assert compute_boundaries("a-b") == (0, 1, 2, 3)
        assert compute_boundaries("foo_bar") == (0, 3, 4, 7)
        assert compute_boundaries("a--b") == (0, 1, 2, 3, 4)

    def test_digits_are_alphanumeric(self):
        """Digits start words like letters do."""
        assert compute_boundaries("route 66") == (0, 6, 8)

    def test_unicode_offsets_are_character_offsets(self):
        """Offsets count characters, not bytes."""
        assert compute_boundaries("café Über") == (0, 5, 9)
        assert compute_boundaries("日本語") == (0, 3)

    def test_symbols_are_not_boundaries(self):
        """Non-ASCII symbols are not boundaries themselves."""
        # the emoji is neither alphanumeric nor ASCII punctuation
        assert compute_boundaries("a😀b") == (0, 2, 3)

    def test_sentinel_is_length(self):
        """The last boundary is the string length."""
        text = "Gabriel Gray / Sylar, Power mimicry"
        boundaries = compute_boundaries(text)
        assert boundaries[-1] == len(text)
        assert list(boundaries) == sorted(set(boundaries))

    def test_rejects_non_string(self):
        """Non-string text raises InvalidTypeError."""
        with pytest.raises(fb.InvalidTypeError, match="text must be str, got int"):
            compute_boundaries(42)


class TestPrepareCandidates:
    """Batch precomputation of boundaries."""

    def test_prepare_candidates(self):
        """prepare_candidates attaches boundaries to each string."""
        assert fb.prepare_candidates(["FuzzBunny", "abc"]) == [
            Candidate("FuzzBunny", (0, 4, 9)),
            Candidate("abc", (0, 3)),
        ]

    def test_prepare_accepts_any_iterable(self):
        """Generators are accepted."""
        candidates = fb.prepare_candidates(s for s in ["a b"])
        assert candidates == [Candidate("a b", (0, 2, 3))]

    def test_boundaries_are_immutable(self):
        """Prepared boundaries are tuples."""
        candidate = prepare_candidate("FuzzBunny")
        assert isinstance(candidate.boundaries, tuple)

    def test_unprepared_candidate(self):
        """A bare Candidate has no boundaries."""
        candidate = Candidate("FuzzBunny")
        assert candidate.boundaries is None
