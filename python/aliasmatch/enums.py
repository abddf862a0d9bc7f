"""Enums for aliasmatch API."""

from enum import Enum


class Metric(str, Enum):
    """Names of the pairwise comparers in the registry.

    String values are the registry keys, so either form can be used for
    lookups.

    Example:
        >>> from aliasmatch import Metric, similarity
        >>> similarity(Metric.LCS_COVERAGE)("Back and Forth", "Back & Forth")
        0.7333333333333333
    """

    STRING_COMPARE = "string-compare"
    """Exact equality: 1.0 or 0.0"""

    LEVENSHTEIN = "levenshtein-similarity"
    """Weighted edit distance normalised by combined length"""

    JARO_WINKLER = "jaro-winkler"
    """Jaro similarity with a prefix bonus, good for short names"""

    TRIGRAM = "trigram-overlap"
    """Overlap of 3-character windows"""

    LCS_COVERAGE = "lcs-coverage"
    """Coverage by disjoint longest common substrings"""


__all__ = ["Metric"]
