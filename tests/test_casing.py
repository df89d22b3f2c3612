"""Tests for casing transfer and live digraph substitution."""

import pytest

from scribe_runes import (
    CasingPattern,
    DigraphMatch,
    apply_casing,
    detect_casing,
    find_digraph_match,
    old_english_substitutions,
    substitute_trailing_digraph,
)
from scribe_runes._substitute import OLD_ENGLISH_SUBSTITUTIONS


# =============================================================================
# apply_casing / detect_casing
# =============================================================================


class TestApplyCasing:
    def test_lowercase_input(self):
        assert apply_casing("test", "example") == "example"

    def test_initial_capital(self):
        assert apply_casing("Test", "example") == "Example"

    def test_single_capital(self):
        assert apply_casing("T", "example") == "Example"

    def test_all_uppercase(self):
        assert apply_casing("TEST", "example") == "EXAMPLE"

    def test_empty_input(self):
        assert apply_casing("", "example") == "example"

    def test_empty_replacement(self):
        assert apply_casing("Test", "") == ""

    def test_mixed_case_counts_as_initial(self):
        assert apply_casing("McDonald", "example") == "Example"

    def test_remainder_unchanged(self):
        assert apply_casing("Th", "þorn") == "Þorn"
        assert apply_casing("Th", "þORN") == "ÞORN"

    def test_non_latin_replacement(self):
        assert apply_casing("TH", "þ") == "Þ"
        assert apply_casing("AE", "æ") == "Æ"


class TestDetectCasing:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("", CasingPattern.ALL_LOWER),
            ("word", CasingPattern.ALL_LOWER),
            ("wORD", CasingPattern.ALL_LOWER),
            ("Word", CasingPattern.INITIAL_CAPITAL),
            ("W", CasingPattern.INITIAL_CAPITAL),
            ("WORD", CasingPattern.ALL_UPPER),
            ("ÞÆT", CasingPattern.ALL_UPPER),
        ],
    )
    def test_patterns(self, token, expected):
        assert detect_casing(token) is expected


# =============================================================================
# find_digraph_match
# =============================================================================


class TestFindDigraphMatch:
    substitutions = {"th": "þ", "dh": "ð", "ae": "æ", "AA": "Æ"}

    def test_exact_match(self):
        result = find_digraph_match("th", self.substitutions)
        assert result == DigraphMatch(match="th", digraph="th", replacement="þ")

    def test_case_insensitive(self):
        result = find_digraph_match("TH", self.substitutions)
        assert result.match == "TH"
        assert result.digraph == "th"
        assert result.replacement == "Þ"

    def test_initial_capital(self):
        assert find_digraph_match("Th", self.substitutions).replacement == "Þ"

    def test_end_of_longer_text(self):
        result = find_digraph_match("hello th", self.substitutions)
        assert result.match == "th"

    def test_only_trailing_text(self):
        assert find_digraph_match("the", self.substitutions) is None

    def test_no_match(self):
        assert find_digraph_match("xyz", self.substitutions) is None

    def test_longest_first(self):
        result = find_digraph_match("aa", {"a": "α", "aa": "ā"})
        assert result.digraph == "aa"

    def test_text_shorter_than_keys(self):
        assert find_digraph_match("h", self.substitutions) is None

    def test_empty_inputs(self):
        assert find_digraph_match("", self.substitutions) is None
        assert find_digraph_match("th", {}) is None


# =============================================================================
# substitute_trailing_digraph / Old English table
# =============================================================================


class TestSubstituteTrailingDigraph:
    def test_replaces_suffix(self):
        assert substitute_trailing_digraph("hwæt is th", OLD_ENGLISH_SUBSTITUTIONS) == "hwæt is þ"

    def test_keeps_casing(self):
        assert substitute_trailing_digraph("Th", OLD_ENGLISH_SUBSTITUTIONS) == "Þ"
        assert substitute_trailing_digraph("AE", OLD_ENGLISH_SUBSTITUTIONS) == "Æ"

    def test_no_match_unchanged(self):
        assert substitute_trailing_digraph("cyning", OLD_ENGLISH_SUBSTITUTIONS) == "cyning"

    def test_at_command_line_untouched(self):
        assert substitute_trailing_digraph("@futhorc th", OLD_ENGLISH_SUBSTITUTIONS) == "@futhorc th"

    def test_only_current_line_checked(self):
        text = "@futhorc word\nth"
        assert substitute_trailing_digraph(text, OLD_ENGLISH_SUBSTITUTIONS) == "@futhorc word\nþ"
        text = "plain\n@elder th"
        assert substitute_trailing_digraph(text, OLD_ENGLISH_SUBSTITUTIONS) == text


class TestOldEnglishSubstitutions:
    def test_default_table(self):
        subs = old_english_substitutions()
        assert subs == {"th": "þ", "dh": "ð", "ae": "æ"}

    def test_wynn(self):
        subs = old_english_substitutions(enable_wynn=True)
        assert subs["w"] == "ƿ"
        assert subs["W"] == "Ƿ"
        assert substitute_trailing_digraph("W", subs) == "Ƿ"
        assert substitute_trailing_digraph("sƿa w", subs) == "sƿa ƿ"

    def test_returns_copy(self):
        old_english_substitutions(enable_wynn=True)
        assert "w" not in OLD_ENGLISH_SUBSTITUTIONS
