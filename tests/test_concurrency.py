"""
Concurrency tests for aliasmatch.

Tests cover:
- Thread safety documentation verification
- Comparers called from many threads agree with sequential results
- Separate SubstringCover instances per thread
"""

import concurrent.futures

import pytest

import aliasmatch as am
from aliasmatch.fixtures import ALIAS_PAIRS, TITLE_PAIRS


class TestThreadSafetyDocumentation:
    """Verify thread safety warnings are documented."""

    def test_substring_cover_docstring_warning(self):
        docstring = am.SubstringCover.__doc__ or ""
        assert "thread" in docstring.lower(), "Missing thread-safety warning in SubstringCover docstring"


class TestParallelComparers:
    """Comparers are pure functions and can be shared across threads."""

    @pytest.mark.parametrize("name", list(am.DEFAULT_REGISTRY))
    def test_titles_match_sequential(self, name):
        compare = am.DEFAULT_REGISTRY.case_insensitive()[name]
        expected = [compare(a, b) for a, b in TITLE_PAIRS]

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            actual = list(executor.map(lambda pair: compare(*pair), TITLE_PAIRS))

        assert actual == expected

    def test_alias_lists_match_sequential(self):
        compare = am.wrap_case_insensitive(am.lcs_coverage_similarity)
        expected = [am.list_similarity(a, b, compare) for a, b in ALIAS_PAIRS]

        def worker(pair):
            return am.list_similarity(pair[0], pair[1], compare)

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            actual = list(executor.map(worker, ALIAS_PAIRS))

        assert actual == expected


class TestSeparateEnginesPerThread:
    def test_substring_cover_separate_instances(self):
        def worker(pair):
            a, b = pair
            return [tuple(m) for m in am.SubstringCover(a, b).matches()]

        pairs = TITLE_PAIRS[:20]
        expected = [worker(pair) for pair in pairs]

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(worker, pair) for pair in pairs]
            actual = [f.result() for f in futures]

        assert actual == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
