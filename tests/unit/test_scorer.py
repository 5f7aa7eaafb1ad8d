"""
Unit tests for positional accuracy scoring.
"""

import pytest
from tilawa.core.scorer import score, score_text
from tilawa.data import DEFAULT_VERSES


class TestScore:
    """Test score function."""

    def test_identical_text_is_100(self, basmala):
        """A transcript equal to the expected text scores 100."""
        assert score(basmala, basmala) == 100

    @pytest.mark.parametrize("expected,actual", [
        ("", "بسم الله"),
        ("بسم الله", ""),
        (None, "بسم الله"),
        ("بسم الله", None),
        ("", ""),
    ])
    def test_empty_input_is_zero(self, expected, actual):
        """Either side empty or missing scores 0."""
        assert score(expected, actual) == 0

    def test_whitespace_only_expected_is_zero(self):
        """Expected text with no characters left after stripping scores 0."""
        assert score("   \t\n", "بسم") == 0

    def test_whitespace_is_ignored(self):
        """Word boundaries do not count: only the character stream is compared."""
        assert score("ب س م", "بسم") == 100
        assert score("بسم الله", "بسمالله") == 100

    def test_partial_match(self):
        """Two of three positions match."""
        assert score("بسم", "بسك") == 67

    def test_missing_end(self):
        """A truncated transcript loses the missing positions."""
        assert score("abcd", "ab") == 50

    def test_excess_characters_are_ignored(self):
        """Characters beyond the expected length never change the score."""
        expected = "بسم الله"
        assert score(expected, expected + " الرحمن") == score(expected, expected) == 100
        assert score("abcd", "abxdzzzz") == score("abcd", "abxd") == 75

    def test_not_symmetric(self):
        """The denominator is the expected length only."""
        assert score("ab", "abcd") == 100
        assert score("abcd", "ab") == 50

    def test_leading_insertion_cascades(self):
        """One extra leading character shifts every comparison after it."""
        assert score("بسم", "ابسم") == 0
        assert score("abcd", "xabcd") == 0

    @pytest.mark.parametrize("actual,expected_score", [
        ("axxxxxxx", 13),  # 12.5 rounds up
        ("abcdexxx", 63),  # 62.5 rounds up
        ("abcxxxxx", 38),  # 37.5 rounds up
    ])
    def test_halves_round_up(self, actual, expected_score):
        """Half percentages round up, not to even."""
        assert score("abcdefgh", actual) == expected_score

    def test_score_always_in_range(self, sample_ayahs):
        """Scores stay within [0, 100] for any pairing."""
        for a in sample_ayahs:
            for b in sample_ayahs:
                assert 0 <= score(a.text, b.text) <= 100


class TestScoreText:
    """Test score_text function."""

    def test_bundles_inputs(self, basmala):
        """The result carries both texts and the accuracy."""
        scored = score_text(basmala, "بسم الله")
        assert scored.expected == basmala
        assert scored.actual == "بسم الله"
        assert scored.accuracy_percent == score(basmala, "بسم الله")

    def test_none_becomes_empty(self):
        """Missing texts are stored as empty strings."""
        scored = score_text(None, None)
        assert scored.expected == ""
        assert scored.actual == ""
        assert scored.accuracy_percent == 0

    def test_similarity_reported_separately(self):
        """A shifted transcript keeps a high Indel similarity but scores 0."""
        scored = score_text("بسم", "ابسم")
        assert scored.accuracy_percent == 0
        assert scored.similarity > 0.8

    def test_vowelled_reference_against_plain_transcript(self):
        """Diacritics count for accuracy but not for the loose similarity."""
        scored = score_text(DEFAULT_VERSES["1:1"], "بسم الله الرحمن الرحيم")
        assert scored.accuracy_percent < 80
        assert scored.similarity == 1.0
