"""Internal utilities for aliasmatch."""

from typing import Union

from aliasmatch._core import UnknownMetricError
from aliasmatch.enums import Metric

# Names used by earlier releases of the benchmark script
LEGACY_ALIASES = {
    "string-compare": Metric.STRING_COMPARE.value,
    "levenshein": Metric.LEVENSHTEIN.value,
    "levenshtein": Metric.LEVENSHTEIN.value,
    "lcs": Metric.LCS_COVERAGE.value,
    "common-trigrams": Metric.TRIGRAM.value,
    "trigram": Metric.TRIGRAM.value,
}

VALID_METRICS = frozenset(m.value for m in Metric)


def normalize_metric(metric: Union[str, Metric]) -> str:
    """Convert a Metric enum or a metric name to its canonical registry key.

    Names are matched case-insensitively, and ``_`` or spaces are treated
    like ``-``.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        Canonical metric name, e.g. ``"lcs-coverage"``.

    Raises:
        UnknownMetricError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric(Metric.JARO_WINKLER)
        'jaro-winkler'
        >>> normalize_metric("Common Trigrams")
        'trigram-overlap'
    """
    if isinstance(metric, Metric):
        return metric.value

    if isinstance(metric, str):
        key = "-".join(metric.strip().lower().replace("_", " ").replace("-", " ").split())
        if key in VALID_METRICS:
            return key
        if key in LEGACY_ALIASES:
            return LEGACY_ALIASES[key]
        raise UnknownMetricError(
            f"Unknown metric: '{metric}'. Valid options: {sorted(VALID_METRICS)}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


__all__ = ["normalize_metric", "VALID_METRICS", "LEGACY_ALIASES"]
