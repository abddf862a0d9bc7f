"""Batch operations API for aliasmatch.

This module lifts pairwise comparers to lists of strings: best match between
two alias lists, aligned pairwise scores, and full similarity matrices.

Every function accepts either a comparer callable or a metric name, which is
looked up in the default (case-sensitive) registry.

Example usage:
    >>> import aliasmatch.batch as batch

    # Best score between two alias lists for the same artist
    >>> batch.list_similarity(["Heize (헤이즈)"], ["Heize"], "lcs-coverage")
    0.45454545454545453

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["Corail (Remixed)", "Episode 1"], ["Corail", "Episode 2"], "string-compare")
    [0.0, 0.0]

    # Full similarity matrix
    >>> matrix = batch.similarity_matrix(["Tarja"], ["Tarja", "Tarja Turunen"], "jaro-winkler")
    >>> # matrix[0] = similarities of "Tarja" with each choice
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Union

from aliasmatch._core import ValidationError
from aliasmatch.registry import Comparer, resolve_comparer

if TYPE_CHECKING:
    from aliasmatch.enums import Metric

__all__ = [
    "list_similarity",
    "pairwise",
    "similarity_matrix",
]


def list_similarity(
    as_list: Sequence[str],
    bs_list: Sequence[str],
    comparer: Union[Comparer, str, Metric],
) -> float:
    """Best score between any alias of one entity and any alias of another.

    Scores every pair in the Cartesian product of the two lists and returns
    the maximum. The search starts from 0.0, so:

    - if either list is empty there is no pair to score and the result is
      0.0. This is the starting value for "best match so far", not a claim
      that the entities are dissimilar.
    - negative anomaly scores from case-insensitive comparers never surface
      here; the result is always in [0, 1].

    Which pair produced the maximum is not reported.

    Args:
        as_list: Aliases of the first entity.
        bs_list: Aliases of the second entity.
        comparer: Comparer callable or metric name.

    Returns:
        Highest pairwise score, or 0.0 if either list is empty.

    Example:
        >>> list_similarity([], ["x"], "string-compare")
        0.0
        >>> list_similarity(["Paul McCartney", "Wings"], ["Wings"], "string-compare")
        1.0
    """
    compare = resolve_comparer(comparer)
    best = 0.0
    for a in as_list:
        for b in bs_list:
            score = compare(a, b)
            if score > best:
                best = score
    return best


def pairwise(
    left: Sequence[str],
    right: Sequence[str],
    comparer: Union[Comparer, str, Metric] = "lcs-coverage",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        comparer: Comparer callable or metric name (default "lcs-coverage").

    Returns:
        List of scores, one for each pair ``(left[i], right[i])``.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    compare = resolve_comparer(comparer)
    return [compare(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    comparer: Union[Comparer, str, Metric] = "lcs-coverage",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where ``result[i][j]`` is the score of ``queries[i]`` against
        ``choices[j]``.

    Example:
        >>> matrix = similarity_matrix(["Mekons", "Varg"], ["The Mekons", "Varg (SE)", "Keiko"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    compare = resolve_comparer(comparer)
    return [[compare(query, choice) for choice in choices] for query in queries]
