"""Polars batch API for scoring metadata records.

This module applies aliasmatch comparers to Polars Series and DataFrames,
for deduplicating tables of titles or artist alias lists.

Functions in This Module
------------------------
- ``batch_similarity()``: Score two aligned string Series row by row
- ``batch_list_similarity()``: Score two aligned ``List[str]`` Series of aliases
- ``find_similar_pairs()``: Find all similar pairs of rows in one column

All functions default to the case-insensitive ``lcs-coverage`` metric. With
``case_insensitive=True`` a score of -1.0 flags a metric that disagreed with
trivial equality; ``find_similar_pairs`` never reports such pairs.

Example Usage
-------------
>>> import polars as pl
>>> import aliasmatch as am
>>>
>>> df = pl.DataFrame({
...     "ours": ["Back and Forth", "Corail (Remixed)"],
...     "theirs": ["Back & Forth", "Corail"],
... })
>>> df = df.with_columns(score=am.batch_similarity(df["ours"], df["theirs"]))
>>>
>>> artists = pl.DataFrame({
...     "ours": [["Paul McCartney", "Wings"]],
...     "theirs": [["Paul McCartney & Wings"]],
... })
>>> artists = artists.with_columns(
...     score=am.batch_list_similarity(artists["ours"], artists["theirs"])
... )
"""

from __future__ import annotations

import logging
from typing import Union

import polars as pl

from aliasmatch._core import ValidationError
from aliasmatch.batch import list_similarity
from aliasmatch.enums import Metric
from aliasmatch.registry import DEFAULT_REGISTRY, Comparer, wrap_case_insensitive

logger = logging.getLogger(__name__)


def _comparer(metric: Union[str, Metric], case_insensitive: bool) -> Comparer:
    compare = DEFAULT_REGISTRY[metric]
    if case_insensitive:
        compare = wrap_case_insensitive(compare)
    return compare


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "lcs-coverage",
    case_insensitive: bool = True,
) -> "pl.Series":
    """
    Compute similarity between two aligned string Series.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        metric: Metric name or Metric enum
        case_insensitive: Lowercase both sides before scoring (default True)

    Returns:
        Float64 Series named "similarity"; null where either input is null

    Raises:
        ValidationError: If the Series have different lengths

    Example:
        >>> df = pl.DataFrame({"a": ["Mekons", "Varg"], "b": ["The Mekons", "Varg (SE)"]})
        >>> df = df.with_columns(score=am.batch_similarity(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    compare = _comparer(metric, case_insensitive)

    scores = []
    for a, b in zip(left.to_list(), right.to_list()):
        if a is None or b is None:
            scores.append(None)
        else:
            scores.append(compare(str(a), str(b)))

    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_list_similarity(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "lcs-coverage",
    case_insensitive: bool = True,
) -> "pl.Series":
    """
    Compute best-alias similarity between two aligned ``List[str]`` Series.

    Each row is scored with :func:`~aliasmatch.batch.list_similarity`. Null
    lists, like empty lists, score 0.0; null entries inside a list are
    skipped.

    Args:
        left: Series of alias lists
        right: Series of alias lists (must be same length as left)
        metric: Metric name or Metric enum
        case_insensitive: Lowercase both sides before scoring (default True)

    Returns:
        Float64 Series named "similarity"

    Raises:
        ValidationError: If the Series have different lengths
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    compare = _comparer(metric, case_insensitive)

    scores = []
    for as_list, bs_list in zip(left.to_list(), right.to_list()):
        as_clean = [str(a) for a in as_list or [] if a is not None]
        bs_clean = [str(b) for b in bs_list or [] if b is not None]
        scores.append(list_similarity(as_clean, bs_clean, compare))

    return pl.Series("similarity", scores, dtype=pl.Float64)


def find_similar_pairs(
    df: "pl.DataFrame",
    column: str,
    metric: Union[str, Metric] = "lcs-coverage",
    min_similarity: float = 0.8,
    case_insensitive: bool = True,
) -> "pl.DataFrame":
    """
    Find all pairs of similar rows in one string column.

    Compares every pair of rows once (O(N²) comparisons), so it is meant for
    the small tables typical of per-release metadata cleanup.

    Args:
        df: DataFrame to search for similar pairs
        column: String column to compare
        metric: Metric name or Metric enum
        min_similarity: Minimum score for a pair to be reported (0.0 to 1.0)
        case_insensitive: Lowercase both sides before scoring (default True)

    Returns:
        DataFrame with columns:
        - idx_a: Row index of the first row
        - idx_b: Row index of the second row (idx_a < idx_b)
        - score: Similarity score
        - <column>_a, <column>_b: The compared values

    Raises:
        ValidationError: If min_similarity is outside [0, 1]

    Example:
        >>> titles = pl.DataFrame({"title": ["Episode 1", "Episode 2", "Le Freak"]})
        >>> pairs = am.find_similar_pairs(titles, "title", min_similarity=0.5)
    """
    if not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be in [0, 1], got {min_similarity}")

    compare = _comparer(metric, case_insensitive)
    values = df[column].to_list()

    results = []
    for i in range(len(values)):
        if values[i] is None:
            continue
        for j in range(i + 1, len(values)):
            if values[j] is None:
                continue
            a, b = str(values[i]), str(values[j])
            score = compare(a, b)
            if score >= min_similarity:
                results.append(
                    {
                        "idx_a": i,
                        "idx_b": j,
                        "score": score,
                        f"{column}_a": a,
                        f"{column}_b": b,
                    }
                )

    logger.debug("find_similar_pairs(%s): %d pairs >= %s", column, len(results), min_similarity)

    schema = {
        "idx_a": pl.Int64,
        "idx_b": pl.Int64,
        "score": pl.Float64,
        f"{column}_a": pl.Utf8,
        f"{column}_b": pl.Utf8,
    }
    return pl.DataFrame(results, schema=schema)


__all__ = [
    "batch_similarity",
    "batch_list_similarity",
    "find_similar_pairs",
]
