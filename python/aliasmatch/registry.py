"""Named pairwise comparers and the case-insensitive wrapper.

A comparer is any callable ``(a: str, b: str) -> float`` returning a score
nominally in [0, 1], 1.0 meaning identical under that metric.

Example:
    >>> from aliasmatch.registry import DEFAULT_REGISTRY, wrap_case_insensitive
    >>> lcs = DEFAULT_REGISTRY["lcs-coverage"]
    >>> wrap_case_insensitive(lcs)("MARR", "marr")
    1.0
    >>> folded = DEFAULT_REGISTRY.case_insensitive()
    >>> folded["string compare"]("ABC", "abc")
    1.0
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator, Mapping
from typing import Callable, Union

from aliasmatch._core import (
    UnknownMetricError,
    jaro_winkler_similarity,
    lcs_coverage_similarity,
    levenshtein_similarity,
    string_compare,
    trigram_similarity,
)
from aliasmatch._utils import normalize_metric
from aliasmatch.enums import Metric

logger = logging.getLogger(__name__)

Comparer = Callable[[str, str], float]

ANOMALY_SCORE = -1.0
"""Returned by case-insensitive comparers that score equal strings below 1.0."""


def wrap_case_insensitive(comparer: Comparer) -> Comparer:
    """Make a comparer case-insensitive.

    Both inputs are lowercased before the inner comparer runs. If the
    lowercased strings are identical but the inner comparer still scores them
    below 1.0, the wrapper returns :data:`ANOMALY_SCORE` (-1.0) instead of the
    raw score. Callers must treat any negative score as an anomaly marker,
    never as a similarity.

    Args:
        comparer: Pairwise scoring function.

    Returns:
        A new comparer with the same ``__name__`` as the inner one.
    """

    @functools.wraps(comparer)
    def case_insensitive(a: str, b: str) -> float:
        a = a.lower()
        b = b.lower()
        score = comparer(a, b)
        if score < 1.0 and a == b:
            return ANOMALY_SCORE
        return score

    return case_insensitive


class ComparerRegistry(Mapping):
    """Immutable mapping from metric name to comparer.

    Keys are canonical metric names (see :class:`~aliasmatch.enums.Metric`),
    iterated in construction order. Lookups also accept Metric members and
    legacy or loosely formatted names, which are normalised first.

    Args:
        comparers: Mapping of metric name (or Metric) to comparer.

    Raises:
        UnknownMetricError: On lookup or construction with an unknown name.
        TypeError: If a key is neither a string nor a Metric.
    """

    def __init__(self, comparers: Mapping[Union[str, Metric], Comparer]):
        self._comparers: dict[str, Comparer] = {}
        for name, comparer in comparers.items():
            self._comparers[normalize_metric(name)] = comparer
        logger.debug("Built comparer registry: %s", ", ".join(self._comparers))

    def __getitem__(self, name: Union[str, Metric]) -> Comparer:
        key = normalize_metric(name)
        try:
            return self._comparers[key]
        except KeyError:
            raise UnknownMetricError(
                f"Metric '{key}' is not in this registry. Available: {list(self._comparers)}"
            ) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._comparers)

    def __len__(self) -> int:
        return len(self._comparers)

    def __repr__(self) -> str:
        return f"ComparerRegistry({list(self._comparers)!r})"

    def case_insensitive(self) -> ComparerRegistry:
        """Return a new registry with every comparer case-insensitive."""
        return ComparerRegistry(
            {name: wrap_case_insensitive(comparer) for name, comparer in self._comparers.items()}
        )

    def subset(self, names: list[Union[str, Metric]]) -> ComparerRegistry:
        """Return a registry restricted to ``names``, in the given order."""
        return ComparerRegistry({normalize_metric(name): self[name] for name in names})


DEFAULT_REGISTRY = ComparerRegistry(
    {
        Metric.STRING_COMPARE: string_compare,
        Metric.LEVENSHTEIN: levenshtein_similarity,
        Metric.JARO_WINKLER: jaro_winkler_similarity,
        Metric.LCS_COVERAGE: lcs_coverage_similarity,
        Metric.TRIGRAM: trigram_similarity,
    }
)


def similarity(name: Union[str, Metric]) -> Comparer:
    """Look up a raw (case-sensitive) comparer by name.

    Example:
        >>> similarity("trigram-overlap")("ab", "ab")
        1.0
    """
    return DEFAULT_REGISTRY[name]


def resolve_comparer(comparer: Union[Comparer, str, Metric]) -> Comparer:
    """Accept either a comparer or a metric name and return a comparer."""
    if isinstance(comparer, (str, Metric)):
        return similarity(comparer)
    return comparer


__all__ = [
    "ANOMALY_SCORE",
    "Comparer",
    "ComparerRegistry",
    "DEFAULT_REGISTRY",
    "resolve_comparer",
    "similarity",
    "wrap_case_insensitive",
]
