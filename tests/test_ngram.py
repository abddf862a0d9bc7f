"""Tests for trigram-overlap similarity."""

import pytest

import aliasmatch as am


class TestTrigramSimilarity:
    def test_identical(self):
        assert am.trigram_similarity("abc", "abc") == 1.0
        assert am.trigram_similarity("Le Freak", "Le Freak") == 1.0

    def test_one_shared_trigram(self):
        # {abc, bcd} vs {abc, bce}
        assert am.trigram_similarity("abcd", "abce") == pytest.approx(1 / 3)

    def test_repeated_trigrams_match_once(self):
        # "aaaa" has two "aaa" windows, "aaa" has one
        assert am.trigram_similarity("aaaa", "aaa") == 0.5
        assert am.trigram_similarity("aaa", "aaaa") == 0.5

    def test_no_shared_trigram(self):
        assert am.trigram_similarity("abcdef", "ghijkl") == 0.0

    def test_short_strings(self):
        assert am.trigram_similarity("ab", "ab") == 1.0
        assert am.trigram_similarity("", "") == 1.0
        assert am.trigram_similarity("ab", "cd") == 0.0
        assert am.trigram_similarity("ab", "abc") == 0.0
        assert am.trigram_similarity("", "abc") == 0.0

    def test_order_of_trigrams_ignored(self):
        # Shared windows count regardless of position
        assert am.trigram_similarity("xyz abc", "abc xyz") == pytest.approx(2 / 8)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
