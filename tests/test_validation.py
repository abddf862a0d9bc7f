"""Tests for the exception hierarchy and parameter validation."""

import pytest

import aliasmatch as am


class TestExceptionHierarchy:
    def test_validation_error(self):
        assert issubclass(am.ValidationError, am.AliasMatchError)
        assert issubclass(am.ValidationError, ValueError)

    def test_unknown_metric_error(self):
        assert issubclass(am.UnknownMetricError, am.AliasMatchError)
        assert issubclass(am.UnknownMetricError, KeyError)
        assert issubclass(am.UnknownMetricError, ValueError)

    def test_unknown_metric_message_is_not_quoted(self):
        # KeyError would normally repr its argument
        err = am.UnknownMetricError("Unknown metric: 'x'")
        assert str(err) == "Unknown metric: 'x'"

    def test_catch_all(self):
        with pytest.raises(am.AliasMatchError):
            am.similarity("soundex")
        with pytest.raises(am.AliasMatchError):
            am.cover_length("abc", "abc", min_length=0)


class TestMetricEnum:
    def test_values_are_registry_keys(self):
        assert [m.value for m in am.Metric] == [
            "string-compare",
            "levenshtein-similarity",
            "jaro-winkler",
            "trigram-overlap",
            "lcs-coverage",
        ]
        for metric in am.Metric:
            assert metric in am.DEFAULT_REGISTRY

    def test_str_comparison(self):
        assert am.Metric.LCS_COVERAGE == "lcs-coverage"


class TestPublicApi:
    def test_version(self):
        assert isinstance(am.__version__, str)

    def test_all_exports_exist(self):
        for name in am.__all__:
            assert hasattr(am, name), name


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
