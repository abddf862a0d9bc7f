"""Tests for the comparer registry and the case-insensitive wrapper."""

import pytest

import aliasmatch as am
from aliasmatch import DEFAULT_REGISTRY, ComparerRegistry, Metric
from aliasmatch._utils import normalize_metric


class TestDefaultRegistry:
    """Tests for the built-in registry."""

    def test_names_in_order(self):
        assert list(DEFAULT_REGISTRY) == [
            "string-compare",
            "levenshtein-similarity",
            "jaro-winkler",
            "lcs-coverage",
            "trigram-overlap",
        ]
        assert len(DEFAULT_REGISTRY) == 5

    def test_lookup_by_enum(self):
        assert DEFAULT_REGISTRY[Metric.LCS_COVERAGE] is am.lcs_coverage_similarity
        assert DEFAULT_REGISTRY[Metric.JARO_WINKLER] is am.jaro_winkler_similarity

    def test_legacy_names(self):
        assert DEFAULT_REGISTRY["levenshein"] is am.levenshtein_similarity
        assert DEFAULT_REGISTRY["lcs"] is am.lcs_coverage_similarity
        assert DEFAULT_REGISTRY["common trigrams"] is am.trigram_similarity
        assert DEFAULT_REGISTRY["string compare"] is am.string_compare

    def test_loose_formatting(self):
        assert DEFAULT_REGISTRY["LCS_COVERAGE"] is am.lcs_coverage_similarity
        assert DEFAULT_REGISTRY["  Jaro Winkler "] is am.jaro_winkler_similarity

    def test_unknown_name(self):
        with pytest.raises(am.UnknownMetricError, match="Unknown metric"):
            DEFAULT_REGISTRY["soundex"]
        # Usable both as a lookup failure and as a bad argument
        with pytest.raises(KeyError):
            DEFAULT_REGISTRY["soundex"]
        with pytest.raises(ValueError):
            DEFAULT_REGISTRY["soundex"]

    def test_contains_and_get(self):
        assert "lcs" in DEFAULT_REGISTRY
        assert Metric.TRIGRAM in DEFAULT_REGISTRY
        assert "soundex" not in DEFAULT_REGISTRY
        assert DEFAULT_REGISTRY.get("soundex") is None

    def test_non_string_key(self):
        with pytest.raises(TypeError, match="must be str or Metric"):
            DEFAULT_REGISTRY[3]

    def test_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_REGISTRY["mine"] = am.string_compare

    def test_repr(self):
        assert "lcs-coverage" in repr(DEFAULT_REGISTRY)

    def test_similarity_lookup(self):
        assert am.similarity("trigram") is am.trigram_similarity
        assert am.similarity("trigram-overlap")("ab", "ab") == 1.0


class TestSubset:
    """Tests for ComparerRegistry.subset."""

    def test_order_follows_request(self):
        sub = DEFAULT_REGISTRY.subset(["lcs", "string compare"])
        assert list(sub) == ["lcs-coverage", "string-compare"]
        assert sub["lcs-coverage"] is am.lcs_coverage_similarity

    def test_missing_from_subset(self):
        sub = DEFAULT_REGISTRY.subset(["lcs"])
        with pytest.raises(am.UnknownMetricError, match="not in this registry"):
            sub["jaro-winkler"]
        assert "jaro-winkler" not in sub

    def test_unknown_name(self):
        with pytest.raises(am.UnknownMetricError):
            DEFAULT_REGISTRY.subset(["lcs", "soundex"])

    def test_custom_registry(self):
        registry = ComparerRegistry({"string-compare": lambda a, b: 0.5})
        assert registry["string compare"]("x", "y") == 0.5
        with pytest.raises(am.UnknownMetricError):
            ComparerRegistry({"mine": lambda a, b: 0.5})


class TestCaseInsensitiveWrapper:
    """Tests for wrap_case_insensitive."""

    def test_folds_case(self):
        compare = am.wrap_case_insensitive(am.string_compare)
        assert compare("ABC", "abc") == 1.0
        assert compare("ABC", "abd") == 0.0

    def test_passes_score_through(self):
        compare = am.wrap_case_insensitive(am.levenshtein_similarity)
        assert compare("ABC", "abd") == pytest.approx(1 - 2 / 6)

    def test_anomaly_when_equal_strings_score_low(self):
        compare = am.wrap_case_insensitive(lambda a, b: 0.5)
        assert compare("X", "x") == am.ANOMALY_SCORE == -1.0
        # Different strings keep the raw score
        assert compare("X", "y") == 0.5

    def test_inner_sees_lowercased_input(self):
        seen = []

        def record(a, b):
            seen.append((a, b))
            return 0.0

        am.wrap_case_insensitive(record)("Heize", "HEIZE (헤이즈)")
        assert seen == [("heize", "heize (헤이즈)")]

    def test_preserves_name(self):
        compare = am.wrap_case_insensitive(am.lcs_coverage_similarity)
        assert compare.__name__ == "lcs_coverage_similarity"

    def test_folded_registry(self):
        folded = DEFAULT_REGISTRY.case_insensitive()
        assert list(folded) == list(DEFAULT_REGISTRY)
        for name, compare in folded.items():
            assert compare("MARR", "marr") == 1.0, name
        # The original registry is unchanged
        assert DEFAULT_REGISTRY["string-compare"]("ABC", "abc") == 0.0


class TestNormalizeMetric:
    def test_canonical(self):
        assert normalize_metric("jaro-winkler") == "jaro-winkler"
        assert normalize_metric(Metric.LEVENSHTEIN) == "levenshtein-similarity"

    def test_legacy(self):
        assert normalize_metric("Common Trigrams") == "trigram-overlap"
        assert normalize_metric("levenshein") == "levenshtein-similarity"

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            normalize_metric(None)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
