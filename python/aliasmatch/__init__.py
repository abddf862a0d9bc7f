"""
aliasmatch - similarity metrics for deduplicating metadata records

Scores how similar two free-text strings, or two small lists of alias
strings, are. Built for catalogue titles and artist names that differ by
punctuation, word order, transliteration or partial rewording.

The distinctive metric is ``lcs-coverage``: the share of both strings covered
by a greedy sequence of disjoint longest common substrings.

Example usage:
    >>> import aliasmatch as am

    # Disjoint common-substring coverage
    >>> am.cover_length("xxxyyy", "yyyxxx")
    6

    # Named comparers
    >>> lcs = am.similarity("lcs-coverage")
    >>> lcs("Live At Carnegie Hall 1977", "Live At Carnegie Hall")
    0.8076923076923077

    # Case-insensitive comparers flag metrics that disagree with equality
    >>> am.wrap_case_insensitive(am.string_compare)("ABC", "abc")
    1.0

    # Best match between two alias lists
    >>> am.list_similarity(["Paul McCartney", "Wings"], ["Paul McCartney & Wings"], lcs)
    0.6363636363636364
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from aliasmatch._core import (
    MIN_SUBSTRING_LENGTH,
    AliasMatchError,
    CommonSubstring,
    SubstringCover,
    UnknownMetricError,
    ValidationError,
    cover_length,
    jaro_winkler_similarity,
    lcs_coverage_similarity,
    levenshtein_similarity,
    string_compare,
    trigram_similarity,
)
from aliasmatch.batch import list_similarity, pairwise, similarity_matrix
from aliasmatch.enums import Metric
from aliasmatch.polars_api import (
    batch_list_similarity,
    batch_similarity,
    find_similar_pairs,
)
from aliasmatch.registry import (
    ANOMALY_SCORE,
    DEFAULT_REGISTRY,
    Comparer,
    ComparerRegistry,
    similarity,
    wrap_case_insensitive,
)

try:
    __version__ = _get_version("aliasmatch")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "AliasMatchError",
    "ValidationError",
    "UnknownMetricError",
    # Enums
    "Metric",
    # Substring coverage engine
    "MIN_SUBSTRING_LENGTH",
    "CommonSubstring",
    "SubstringCover",
    "cover_length",
    # Raw metrics
    "string_compare",
    "levenshtein_similarity",
    "jaro_winkler_similarity",
    "trigram_similarity",
    "lcs_coverage_similarity",
    # Registry
    "ANOMALY_SCORE",
    "Comparer",
    "ComparerRegistry",
    "DEFAULT_REGISTRY",
    "similarity",
    "wrap_case_insensitive",
    # Batch processing
    "list_similarity",
    "pairwise",
    "similarity_matrix",
    # Polars Integration
    "batch_similarity",
    "batch_list_similarity",
    "find_similar_pairs",
]
