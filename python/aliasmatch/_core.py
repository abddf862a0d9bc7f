"""Core similarity algorithms for aliasmatch.

This module holds the repeated longest-common-substring coverage engine and
the raw pairwise metrics built on top of it (or delegated to rapidfuzz).

All functions compare strings as sequences of Unicode code points and are
pure: they share no state between calls, so they are safe to call from
multiple threads on different inputs.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from rapidfuzz.distance import Jaro, Levenshtein

MIN_SUBSTRING_LENGTH = 3
"""Shortest common substring counted towards coverage."""

JARO_WINKLER_BOOST_THRESHOLD = 0.7
JARO_WINKLER_PREFIX_SIZE = 4
JARO_WINKLER_PREFIX_WEIGHT = 0.1

# (insertion, deletion, substitution)
_LEVENSHTEIN_WEIGHTS = (1, 1, 2)


class AliasMatchError(Exception):
    """Base class for all aliasmatch errors."""


class ValidationError(AliasMatchError, ValueError):
    """Raised when a parameter is outside its accepted range."""


class UnknownMetricError(AliasMatchError, KeyError, ValueError):
    """Raised when a metric name is not in the registry."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class CommonSubstring(NamedTuple):
    """One extracted match, with offsets into the original strings."""

    length: int
    a_start: int
    b_start: int


class SubstringCover:
    """Greedy extraction of disjoint longest common substrings.

    The engine keeps a dynamic-programming table of common-suffix lengths for
    the characters of ``a`` and ``b`` that are still live. ``length``,
    ``a_index`` and ``b_index`` describe the current longest match (indexes are
    exclusive ends into the live table). Each call to :meth:`advance` removes
    that match from both strings and updates the table in place instead of
    rebuilding it, so the total work over all extractions stays bounded by the
    size of the initial table.

    Ties between equal-length matches go to the first one in row-major order
    (lowest row of ``a``, then lowest column of ``b``).

    Warning:
        An instance is mutated by :meth:`advance` and is meant to be owned by
        a single computation. It is NOT thread-safe.

    Example:
        >>> cover = SubstringCover("xxxyyy", "yyyxxx")
        >>> [m.length for m in cover.matches()]
        [3, 3]
    """

    def __init__(self, a: str, b: str):
        self.lengths: list[list[int]] = []
        self.a_map = list(range(len(a)))
        self.b_map = list(range(len(b)))
        self.length = 0
        self.a_index = 0
        self.b_index = 0

        prev: list[int] | None = None
        for i, ch in enumerate(a):
            row = [0] * len(b)
            for j, other in enumerate(b):
                if ch != other:
                    continue
                if prev is None or j == 0:
                    row[j] = 1
                else:
                    row[j] = prev[j - 1] + 1
                if row[j] > self.length:
                    self.length = row[j]
                    self.a_index = i + 1
                    self.b_index = j + 1
            self.lengths.append(row)
            prev = row

    @property
    def current(self) -> CommonSubstring | None:
        """The match :meth:`advance` would consume next, or None when exhausted."""
        if self.length == 0:
            return None
        return CommonSubstring(
            length=self.length,
            a_start=self.a_map[self.a_index - self.length],
            b_start=self.b_map[self.b_index - self.length],
        )

    def advance(self) -> None:
        """Consume the current match and find the next longest one."""
        length = self.length
        if length == 0:
            return
        a_end, b_end = self.a_index, self.b_index

        # Original offsets just past the consumed match.
        a_resume = self.a_map[a_end - 1] + 1
        b_resume = self.b_map[b_end - 1] + 1

        del self.lengths[a_end - length : a_end]
        del self.a_map[a_end - length : a_end]
        del self.b_map[b_end - length : b_end]

        best = 0
        best_i = best_j = 0
        b_map = self.b_map
        for i, row in enumerate(self.lengths):
            del row[b_end - length : b_end]
            a_pos = self.a_map[i]
            for j, value in enumerate(row):
                # Chains may not bridge the hole left by the consumed match.
                if a_pos >= a_resume and a_pos - value < a_resume:
                    value = a_pos - a_resume + 1
                b_pos = b_map[j]
                if b_pos >= b_resume and b_pos - value < b_resume:
                    value = b_pos - b_resume + 1
                row[j] = value
                if value > best:
                    best = value
                    best_i = i + 1
                    best_j = j + 1

        self.length = best
        self.a_index = best_i
        self.b_index = best_j

    def matches(self, min_length: int = MIN_SUBSTRING_LENGTH) -> Iterator[CommonSubstring]:
        """Yield disjoint matches, longest first, until one is shorter than min_length."""
        _check_min_length(min_length)
        while self.length >= min_length:
            match = self.current
            self.advance()
            yield match


def _check_min_length(min_length: int) -> None:
    if min_length < 1:
        raise ValidationError(f"min_length must be >= 1, got {min_length}")


def cover_length(a: str, b: str, min_length: int = MIN_SUBSTRING_LENGTH) -> int:
    """Total length of ``a`` covered by disjoint common substrings of ``b``.

    Substrings are extracted greedily, longest first, and never overlap in
    either string. Only substrings of at least ``min_length`` characters
    count. Strings shorter than ``min_length`` skip the table entirely and
    score ``len(a)`` if equal, else 0.

    Args:
        a: First string.
        b: Second string.
        min_length: Shortest substring counted (default 3).

    Returns:
        An integer between 0 and ``min(len(a), len(b))``.

    Raises:
        ValidationError: If ``min_length`` is less than 1.

    Example:
        >>> cover_length("abcabc", "abc")
        3
        >>> cover_length("xxxyyy", "yyyxxx")
        6
    """
    _check_min_length(min_length)
    if len(a) < min_length or len(b) < min_length:
        return len(a) if a == b else 0
    return sum(match.length for match in SubstringCover(a, b).matches(min_length))


def string_compare(a: str, b: str) -> float:
    """1.0 if the strings are identical, else 0.0."""
    return 1.0 if a == b else 0.0


def levenshtein_similarity(a: str, b: str) -> float:
    """Edit-distance similarity normalised by the combined length.

    Insertions and deletions cost 1 and substitutions cost 2, so the distance
    never exceeds ``len(a) + len(b)`` and the score stays in [0, 1]. Two empty
    strings score 1.0.
    """
    total = len(a) + len(b)
    if total == 0:
        return 1.0
    distance = Levenshtein.distance(a, b, weights=_LEVENSHTEIN_WEIGHTS)
    return 1.0 - distance / total


def jaro_winkler_similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity.

    The Winkler prefix bonus is applied only when the Jaro score reaches
    0.7, and counts at most 4 leading characters.
    """
    if a == b:
        return 1.0
    jaro = Jaro.similarity(a, b)
    if jaro < JARO_WINKLER_BOOST_THRESHOLD:
        return jaro
    prefix = 0
    for ch, other in zip(a[:JARO_WINKLER_PREFIX_SIZE], b[:JARO_WINKLER_PREFIX_SIZE]):
        if ch != other:
            break
        prefix += 1
    return jaro + JARO_WINKLER_PREFIX_WEIGHT * prefix * (1.0 - jaro)


def trigram_similarity(a: str, b: str) -> float:
    """Overlap of the overlapping 3-character windows of both strings.

    Each trigram of ``a`` can be matched at most once. The score is
    ``matched / (trigrams(a) + trigrams(b) - matched)``; strings shorter than
    three characters score 1.0 if equal, else 0.0.
    """
    if len(a) < 3 or len(b) < 3:
        return 1.0 if a == b else 0.0
    available: dict[str, int] = {}
    for i in range(3, len(a) + 1):
        gram = a[i - 3 : i]
        available[gram] = available.get(gram, 0) + 1
    matched = 0
    for i in range(3, len(b) + 1):
        gram = b[i - 3 : i]
        if available.get(gram, 0) > 0:
            matched += 1
            available[gram] -= 1
    # Never zero: the denominator is at least max(len(a), len(b)) - 2.
    return matched / (len(a) - 2 + len(b) - 2 - matched)


def lcs_coverage_similarity(a: str, b: str) -> float:
    """Disjoint common-substring coverage as a Jaccard-style ratio.

    ``cover / (len(a) + len(b) - cover)`` where ``cover`` is
    :func:`cover_length`. Two empty strings score 1.0.
    """
    cover = cover_length(a, b)
    denominator = len(a) + len(b) - cover
    if denominator == 0:
        return 1.0
    return cover / denominator


__all__ = [
    "MIN_SUBSTRING_LENGTH",
    "AliasMatchError",
    "ValidationError",
    "UnknownMetricError",
    "CommonSubstring",
    "SubstringCover",
    "cover_length",
    "string_compare",
    "levenshtein_similarity",
    "jaro_winkler_similarity",
    "trigram_similarity",
    "lcs_coverage_similarity",
]
