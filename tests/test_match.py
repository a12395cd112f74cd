"""Tests for the single-candidate match kernel.

Covers the substring fast path, the fuzzy word-prefix fallback, quoted
queries and the empty query, through both match_one() and score_one().
"""

import pytest

import fuzzbunny as fb
from fuzzbunny import MatchKind, MatchRange, match_one, score_one
from fuzzbunny.matching import prefix_align, unquote


def check_highlights(target, search, expected):
    result = match_one(target, search)
    assert result is not None, f"{search!r} should match {target!r}"
    assert result.highlights == expected


class TestSubstringMatch:
    """Case-insensitive literal substring matching."""

    def test_matches_string_start(self):
        """A match at offset 0 starts with an empty unmatched segment."""
        check_highlights("abcdefg", "abc", ["", "abc", "defg"])

    def test_matches_string_middle(self):
        """Matches inside the string split it into three or two segments."""
        check_highlights("abcdefg", "def", ["abc", "def", "g"])
        check_highlights("abcdefg", "efg", ["abcd", "efg"])

    def test_matches_none(self):
        """Absent substrings with no fuzzy alignment return None."""
        assert match_one("abcdefg", "zx") is None

    def test_case_insensitive(self):
        """Highlights keep the candidate's own casing."""
        check_highlights("abcdefg", "dEf", ["abc", "def", "g"])
        check_highlights("abCDEfg", "dEF", ["abC", "DEf", "g"])

    def test_ignores_surrounding_whitespace(self):
        """Leading and trailing query whitespace is trimmed."""
        check_highlights("abcdefg", "   def", ["abc", "def", "g"])
        check_highlights("abcdefg", "abc   ", ["", "abc", "defg"])
        check_highlights("abcdefg", "  abc ", ["", "abc", "defg"])
        assert match_one("abcdefg", "   def") == match_one("abcdefg", "def")

    def test_substring_with_space(self):
        """Inner query spaces are literal for the substring search."""
        check_highlights("This is a test", "this is", ["", "This is", " a test"])
        assert match_one("This should not match", "this is") is None

    def test_contiguous(self):
        """A substring spanning words is one range."""
        check_highlights("abcd efg", "bcd efg", ["a", "bcd efg"])

    def test_single_character(self):
        """Single characters match only as substrings."""
        check_highlights("FuzzBunny", "b", ["Fuzz", "B", "unny"])
        assert match_one("abcdefg", "x") is None
        assert match_one("abcdefg", "z") is None

    def test_unicode_case_folding(self):
        """Non-ASCII letters fold case too."""
        check_highlights("ÜBER straße", "über", ["", "ÜBER", " straße"])

    def test_score_at_start(self):
        """Start bonus plus squared length."""
        assert match_one("abcdefg", "abc").score == 3700

    def test_score_inside_word_has_no_prefix_bonus(self):
        """Mid-word matches get only the length score."""
        assert match_one("abcdefg", "def").score == 2700

    def test_score_at_word_start(self):
        """Word-start matches get the decaying prefix bonus."""
        # "Te" at offset 14, preceded by a space
        assert match_one("Matt Parkman, Telepathy", "te").score == 1200 + 186


class TestFuzzyMatch:
    """Word-prefix alignment fallback."""

    def test_prefix_filter(self):
        """Query characters align with successive word starts."""
        check_highlights("ab cdefg", "ac", ["", "a", "b ", "c", "defg"])

    def test_camel_title_initials(self):
        """Case shifts split camelCase and PascalCase words."""
        check_highlights("FuzzBunny", "fb", ["", "F", "uzz", "B", "unny"])
        check_highlights("fuzzBunny.ts", "fb", ["", "f", "uzz", "B", "unny.ts"])
        check_highlights(
            "fuzzBunnyIsAwesome", "bia", ["fuzz", "B", "unny", "I", "s", "A", "wesome"]
        )

    def test_initials_of_words(self):
        """Alignment can start at a later word."""
        check_highlights(
            "the united states of america",
            "usam",
            ["the ", "u", "nited ", "s", "tates of ", "am", "erica"],
        )

    def test_punctuation_units(self):
        """Each punctuation character starts its own unit."""
        check_highlights('abc "def"', 'a"def"', ["", "a", "bc ", '"def"'])

    def test_separated_fails(self):
        """Query characters with no unit to land on fail the match."""
        assert match_one("abcdefg", "abc xxx") is None

    def test_quote_at_end_is_not_a_quoted_query(self):
        """Only a leading quote makes a query quoted."""
        assert match_one("Las Vegas", 'la"') is None

    def test_multibyte_characters(self):
        """Accented characters never break unit offsets."""
        check_highlights("Crème Brûlée", "cb", ["", "C", "rème ", "B", "rûlée"])

    def test_unquoted_query_falls_back_to_fuzzy(self):
        """Without a quote, a missing substring may still align."""
        check_highlights("Los Angeles", "LA", ["", "L", "os ", "A", "ngeles"])

    def test_fuzzy_score_sums_prefix_scored_ranges(self):
        """Every fuzzy range is scored in prefix context."""
        assert match_one("FuzzBunny", "fb").score == (300 + 1000) + (300 + 196)

    def test_contiguous_ranks_above_split(self):
        """One long range outscores the same characters split up."""
        whole = match_one("abc", "abc")
        split = match_one("abott chemicals", "abc")
        assert split.highlights == ["", "ab", "ott ", "c", "hemicals"]
        assert whole.score > split.score

    def test_skipped_space_inside_a_unit_is_covered(self):
        """A range that resumes after a skipped space ends on the matched character."""
        # no boundary at "€", so "ab €" is one unit walked past its space
        scored = score_one("ab €x", None, "ab€x")
        assert scored.ranges == (MatchRange(0, 5),)
        check_highlights("ab €x", "ab€x", ["", "ab €x"])

    def test_skipped_space_range_stops_before_mismatch(self):
        """Characters after the last match in a unit stay unmatched."""
        scored = score_one("ab €€x", None, "ab€x")
        assert scored.ranges == (MatchRange(0, 4), MatchRange(5, 1))
        check_highlights("ab €€x", "ab€x", ["", "ab €", "€", "x"])


class TestQuotedQueries:
    """A leading double quote requests literal substring matching only."""

    def test_quoted_substring(self):
        """Quoted queries match literal substrings."""
        check_highlights("a b c abC def", "abc d", ["a b c ", "abC d", "ef"])
        check_highlights("Las Vegas", '"la', ["", "La", "s Vegas"])

    def test_closing_quote_is_optional(self):
        """An unterminated quote behaves like a closed one."""
        check_highlights("Las Vegas", '"las v"', ["", "Las V", "egas"])
        check_highlights("Las Vegas", '"las v', ["", "Las V", "egas"])

    def test_quoted_disables_fuzzy(self):
        """Quoted queries never fall back to word-prefix alignment."""
        assert match_one("a bc def", '"abc d"') is None
        assert match_one("Los Angeles", '"LA') is None

    def test_bare_quote_is_an_empty_query(self):
        """A quote with nothing inside matches like the empty query."""
        result = match_one("Las Vegas", '"')
        assert result.score == 0
        assert result.highlights == ["Las Vegas"]
        assert match_one("Las Vegas", '""').highlights == ["Las Vegas"]

    def test_unquote(self):
        """unquote strips the leading quote and an optional trailing one."""
        assert unquote('"las vegas"') == ("las vegas", True)
        assert unquote('"las ve') == ("las ve", True)
        assert unquote("las") == ("las", False)
        assert unquote('"') == ("", True)


class TestEmptyInputs:
    def test_empty_query_matches_everything(self):
        """The empty query matches with score 0 and no ranges."""
        result = match_one("abcdefg", "")
        assert result.score == 0
        assert result.highlights == ["abcdefg"]

    def test_missing_query(self):
        """An omitted or None query is the empty query."""
        assert match_one("abcdefg", None).highlights == ["abcdefg"]
        assert match_one("abcdefg").highlights == ["abcdefg"]

    def test_whitespace_query(self):
        """A whitespace-only query trims to the empty query."""
        assert match_one("abcdefg", "   ").highlights == ["abcdefg"]

    def test_empty_candidate_never_matches(self):
        """Empty candidates never match, not even the empty query."""
        assert match_one("", "") is None
        assert match_one("", "a") is None


class TestScoreOne:
    """The low-level kernel entry point."""

    def test_kinds(self):
        """Each kernel path reports its MatchKind."""
        assert score_one("abcdefg", None, "").kind is MatchKind.EMPTY
        assert score_one("abcdefg", None, "cd").kind is MatchKind.SUBSTRING
        assert score_one("FuzzBunny", None, "fb").kind is MatchKind.FUZZY

    def test_ranges(self):
        """Fuzzy matches expose one range per matched unit prefix."""
        scored = score_one("FuzzBunny", None, "fb")
        assert scored.ranges == (MatchRange(0, 1), MatchRange(4, 1))
        assert score_one("abcdefg", None, "").ranges == ()

    def test_precomputed_boundaries_give_same_result(self):
        """Cached boundaries change nothing about the result."""
        text = "fuzzBunnyIsAwesome"
        boundaries = fb.compute_boundaries(text)
        assert score_one(text, boundaries, "bia") == score_one(text, None, "bia")

    def test_query_is_lowercased(self):
        """score_one folds the query case itself."""
        assert score_one("FuzzBunny", None, "FB") == score_one("FuzzBunny", None, "fb")

    def test_query_is_not_trimmed(self):
        """score_one leaves surrounding whitespace to normalize_query."""
        # no unit starts with a space, so an untrimmed query cannot align
        assert score_one("abcdefg", None, " def") is None

    def test_foreign_boundaries_are_rejected(self):
        """Boundaries computed for another string raise ValidationError."""
        with pytest.raises(fb.ValidationError):
            score_one("FuzzBunny", (0, 3), "fb")

    @pytest.mark.parametrize(
        "boundaries",
        [(), (5, 3), (-1, 3), (0, 2, 2, 3), (0, 2, 1, 3)],
        ids=["empty", "past-end", "negative", "repeated", "decreasing"],
    )
    def test_malformed_boundaries_are_rejected(self, boundaries):
        """Out-of-range or non-increasing boundaries raise ValidationError."""
        with pytest.raises(fb.ValidationError, match="boundaries"):
            score_one("abc", boundaries, "xy")

    def test_rejects_non_string(self):
        """Non-string text or query raise InvalidTypeError."""
        with pytest.raises(fb.InvalidTypeError, match="query must be str"):
            score_one("abc", None, 1)
        with pytest.raises(fb.InvalidTypeError, match="text must be str"):
            score_one(None, None, "a")

    def test_type_errors_are_type_errors(self):
        """Wrong argument types can be caught as TypeError."""
        with pytest.raises(TypeError):
            score_one("abc", None, 1)


class TestPrefixAlign:
    """Direct tests of the alignment walk."""

    TEXT = "the united states of america"
    BOUNDARIES = (0, 4, 11, 18, 21, 28)

    def test_boundaries_fixture(self):
        """The boundary tuple used below is what compute_boundaries builds."""
        assert fb.compute_boundaries(self.TEXT) == self.BOUNDARIES

    def test_align_from_matching_unit(self):
        """Starting on the unit of the first query character."""
        ranges = prefix_align(1, "usam", self.TEXT, self.BOUNDARIES)
        assert ranges == [MatchRange(4, 1), MatchRange(11, 1), MatchRange(21, 2)]

    def test_units_without_a_match_are_passed_over(self):
        """A unit matching nothing does not stop the walk."""
        ranges = prefix_align(0, "usam", self.TEXT, self.BOUNDARIES)
        assert ranges == [MatchRange(4, 1), MatchRange(11, 1), MatchRange(21, 2)]

    def test_no_match(self):
        """Running out of units before the query ends returns None."""
        assert prefix_align(1, "usx", self.TEXT, self.BOUNDARIES) is None

    def test_adjacent_units_are_merged(self):
        """Ranges that touch are merged into one."""
        text = 'abc "def"'
        ranges = prefix_align(0, 'a"def"', text, fb.compute_boundaries(text))
        assert ranges == [MatchRange(0, 1), MatchRange(4, 5)]

    def test_spaces_in_target_and_query_are_transparent(self):
        """Spaces on either side are skipped; trailing ones stay outside ranges."""
        text = "ab cd"
        boundaries = fb.compute_boundaries(text)
        assert prefix_align(0, "ab cd", text, boundaries) == [MatchRange(0, 5)]
        assert prefix_align(0, "abcd", text, boundaries) == [
            MatchRange(0, 2),
            MatchRange(3, 2),
        ]

    def test_range_ends_at_last_matched_character(self):
        """A space skipped mid-unit lies inside the range that follows it."""
        text = "ab €x"
        boundaries = fb.compute_boundaries(text)
        assert boundaries == (0, 4, 5)
        assert prefix_align(0, "ab€x", text, boundaries) == [MatchRange(0, 5)]

    def test_no_backtracking_within_unit(self):
        """A unit is never re-scanned from a later offset."""
        # "bb" mismatches at the second character of "bab" and never retries
        text = "bab"
        assert prefix_align(0, "bb", text, fb.compute_boundaries(text)) is None
