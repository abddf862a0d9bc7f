"""Tests for batch processing functions.

This module tests list_similarity, pairwise and similarity_matrix.
"""

import pytest

import aliasmatch as am


class TestListSimilarity:
    """Tests for best-alias list similarity."""

    def test_best_pair_wins(self):
        score = am.list_similarity(["Paul McCartney", "Wings"], ["Wings"], "string-compare")
        assert score == 1.0

    def test_partial_alias(self):
        score = am.list_similarity(["Heize (헤이즈)"], ["Heize"], "lcs-coverage")
        assert score == pytest.approx(5 / 11)

    def test_empty_lists(self):
        assert am.list_similarity([], ["x"], "string-compare") == 0.0
        assert am.list_similarity(["x"], [], "string-compare") == 0.0
        assert am.list_similarity([], [], "string-compare") == 0.0

    def test_every_pair_scored(self):
        seen = []

        def record(a, b):
            seen.append((a, b))
            return 0.25

        assert am.list_similarity(["a", "b"], ["c", "d", "e"], record) == 0.25
        assert len(seen) == 6

    def test_anomalies_never_surface(self):
        compare = am.wrap_case_insensitive(lambda a, b: 0.5)
        assert am.list_similarity(["X"], ["x"], compare) == 0.0
        assert am.list_similarity(["X", "y"], ["x", "y"], compare) == 0.5

    def test_accepts_metric_enum(self):
        assert am.list_similarity(["Tarja"], ["Tarja"], am.Metric.JARO_WINKLER) == 1.0


class TestPairwise:
    def test_aligned_scores(self):
        scores = am.pairwise(["Corail (Remixed)", "Episode 1"], ["Corail", "Episode 1"], "string-compare")
        assert scores == [0.0, 1.0]

    def test_default_metric(self):
        [score] = am.pairwise(["Back and Forth"], ["Back & Forth"])
        assert score == pytest.approx(11 / 15)

    def test_length_mismatch(self):
        with pytest.raises(am.ValidationError, match="same length"):
            am.pairwise(["a", "b"], ["a"])

    def test_empty(self):
        assert am.pairwise([], []) == []


class TestSimilarityMatrix:
    def test_shape(self):
        matrix = am.similarity_matrix(["Mekons", "Varg"], ["The Mekons", "Varg (SE)", "Keiko"])
        assert len(matrix) == 2
        assert all(len(row) == 3 for row in matrix)

    def test_values(self):
        matrix = am.similarity_matrix(["Tarja", "Keiko"], ["Keiko", "Tarja"], "string-compare")
        assert matrix == [[0.0, 1.0], [1.0, 0.0]]

    def test_unknown_metric(self):
        with pytest.raises(am.UnknownMetricError):
            am.similarity_matrix(["a"], ["b"], "soundex")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
