"""Tests for word-set similarity and change significance."""

import pytest


class TestStringSimilarity:
    """Test string_similarity."""

    def test_identical_strings_score_one(self):
        """A non-empty string is fully similar to itself."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("Led a team", "Led a team") == 1.0

    def test_both_empty_score_one(self):
        """Two empty strings are identical by convention."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("", "") == 1.0
        assert string_similarity(None, None) == 1.0

    def test_one_empty_scores_zero(self):
        """A single empty side shares nothing with the other."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("", "Python") == 0.0
        assert string_similarity("Python", None) == 0.0

    def test_whitespace_only_counts_as_empty(self):
        """Whitespace-only strings have no words."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("   ", "\t\n") == 1.0
        assert string_similarity("   ", "Python") == 0.0

    def test_whitespace_against_empty_scores_zero(self):
        """Emptiness is judged on the raw strings before splitting."""
        from resume_diff.diffing.similarity import (
            is_significant_change,
            string_similarity,
        )

        assert string_similarity("   ", "") == 0.0
        assert string_similarity(None, "  ") == 0.0
        assert is_significant_change("   ", "") is True

    def test_disjoint_vocabulary_scores_zero(self):
        """Strings with no shared words score zero."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("Wrote unit tests", "Added CI pipeline") == 0.0

    def test_is_case_insensitive(self):
        """Comparison lowercases both sides."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("Python Developer", "python DEVELOPER") == 1.0

    def test_duplicate_words_collapse(self):
        """Jaccard is computed over sets, not multisets."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("go go go", "go") == 1.0

    def test_partial_overlap_is_jaccard(self):
        """Score is intersection over union of the word sets."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("a b", "b c") == pytest.approx(1 / 3)
        assert string_similarity(
            "Led a team of 5 engineers",
            "Led a team of 5 engineers building the platform",
        ) == pytest.approx(6 / 9)

    def test_punctuation_is_part_of_the_word(self):
        """No punctuation stripping is applied."""
        from resume_diff.diffing.similarity import string_similarity

        assert string_similarity("python,", "python") == 0.0


class TestIsSignificantChange:
    """Test is_significant_change."""

    def test_default_threshold(self):
        """The default threshold is 0.8."""
        from resume_diff.diffing.similarity import SIGNIFICANCE_THRESHOLD

        assert SIGNIFICANCE_THRESHOLD == 0.8

    def test_boundary_is_significant(self):
        """Similarity exactly at the threshold counts as significant."""
        from resume_diff.diffing.similarity import is_significant_change

        # 4 shared words out of 5
        assert is_significant_change("a b c d e", "a b c d") is True

    def test_above_threshold_is_cosmetic(self):
        """Similarity above the threshold is not significant."""
        from resume_diff.diffing.similarity import is_significant_change

        # 5 shared words out of 6
        assert is_significant_change("a b c d e f", "a b c d e") is False

    def test_identical_is_not_significant(self):
        """Unchanged text is never significant."""
        from resume_diff.diffing.similarity import is_significant_change

        assert is_significant_change("Owned billing", "Owned billing") is False
        assert is_significant_change("", "") is False

    def test_empty_to_text_is_significant(self):
        """Adding text where there was none is significant."""
        from resume_diff.diffing.similarity import is_significant_change

        assert is_significant_change("", "New summary") is True

    def test_threshold_override(self):
        """Callers can loosen or tighten the threshold."""
        from resume_diff.diffing.similarity import is_significant_change

        # similarity 5/6
        assert is_significant_change("a b c d e f", "a b c d e", threshold=0.9) is True
        # similarity 4/5
        assert is_significant_change("a b c d e", "a b c d", threshold=0.5) is False
