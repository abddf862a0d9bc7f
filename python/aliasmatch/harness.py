"""Benchmark harness comparing comparers over the fixture corpus.

Every comparer in a registry scores every fixture: title pairs directly,
alias-list pairs through :func:`~aliasmatch.batch.list_similarity`. Since all
fixtures are pairs that should match, a higher aggregate score is better. The
harness reports, per metric, the root-mean-square score, the wall time spent
and how many anomaly sentinels it produced, then lists every fixture where
another metric beat the best one.

Example:
    >>> from aliasmatch.harness import format_report, run_benchmark
    >>> report = run_benchmark()
    >>> for line in format_report(report):
    ...     print(line)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

import polars as pl

from aliasmatch.batch import list_similarity
from aliasmatch.fixtures import ALIAS_PAIRS, TITLE_PAIRS
from aliasmatch.registry import DEFAULT_REGISTRY, ComparerRegistry

logger = logging.getLogger(__name__)

_TITLES = 0
_ALIASES = 1

_SCORE_SCHEMA = {
    "metric": pl.Utf8,
    "metric_rank": pl.Int64,
    "section": pl.Int64,
    "fixture": pl.Int64,
    "a": pl.Utf8,
    "b": pl.Utf8,
    "score": pl.Float64,
}


@dataclass
class MetricResult:
    """Aggregate result for one metric."""

    name: str
    score: float
    elapsed_seconds: float
    anomalies: int


@dataclass
class Outlier:
    """A fixture where a metric outscored the best metric."""

    metric: str
    a: str
    b: str
    score: float
    best_metric: str
    best_score: float


@dataclass
class BenchmarkReport:
    """Full benchmark output.

    ``results`` is ordered by score, best first. ``scores`` holds one row per
    (metric, fixture) with columns metric, metric_rank, section, fixture, a,
    b and score.
    """

    results: list[MetricResult]
    outliers: list[Outlier]
    scores: pl.DataFrame

    @property
    def best(self) -> Optional[MetricResult]:
        return self.results[0] if self.results else None


def format_time(seconds: float) -> str:
    """Format time with appropriate units."""
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.1f}us"
    elif seconds < 1:
        return f"{seconds * 1_000:.2f}ms"
    else:
        return f"{seconds:.3f}s"


def run_benchmark(
    registry: Optional[ComparerRegistry] = None,
    title_pairs: Sequence[tuple[str, str]] = TITLE_PAIRS,
    alias_pairs: Sequence[tuple[Sequence[str], Sequence[str]]] = ALIAS_PAIRS,
) -> BenchmarkReport:
    """Score every fixture with every comparer in ``registry``.

    Args:
        registry: Comparers to evaluate. Defaults to the case-insensitive
            version of the default registry.
        title_pairs: ``(a, b)`` string fixtures.
        alias_pairs: ``(aliases_a, aliases_b)`` list fixtures.

    Returns:
        BenchmarkReport with per-metric results and outliers. The aggregate
        score is ``sqrt(sum(score**2) / fixture_count)``. Anomaly sentinels
        (-1.0) are counted separately and square to 1.0 like a perfect score.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY.case_insensitive()

    rows = []
    elapsed: dict[str, float] = {}
    for rank, (name, compare) in enumerate(registry.items()):
        start = time.perf_counter()
        for index, (a, b) in enumerate(title_pairs):
            rows.append((name, rank, _TITLES, index, a, b, compare(a, b)))
        for index, (as_list, bs_list) in enumerate(alias_pairs):
            score = list_similarity(as_list, bs_list, compare)
            rows.append((name, rank, _ALIASES, index, ",".join(as_list), ",".join(bs_list), score))
        elapsed[name] = time.perf_counter() - start
        logger.debug(
            "%s scored %d fixtures in %s",
            name,
            len(title_pairs) + len(alias_pairs),
            format_time(elapsed[name]),
        )

    scores = pl.DataFrame(rows, schema=_SCORE_SCHEMA, orient="row")

    summary = (
        scores.group_by("metric", maintain_order=True)
        .agg(
            (pl.col("score") ** 2).mean().sqrt().fill_null(0.0).alias("rms"),
            (pl.col("score") < 0).sum().alias("anomalies"),
        )
    )
    aggregates = {row["metric"]: row for row in summary.iter_rows(named=True)}
    results = []
    for name in registry:
        row = aggregates.get(name, {"rms": 0.0, "anomalies": 0})
        results.append(
            MetricResult(
                name=name,
                score=row["rms"],
                elapsed_seconds=elapsed[name],
                anomalies=row["anomalies"],
            )
        )
    # Stable sort keeps registry order among equal scores.
    results.sort(key=lambda r: r.score, reverse=True)

    outliers = _find_outliers(scores, results[0]) if results else []
    for outlier in outliers:
        logger.debug(
            "outlier: %s beats %s on (%s, %s)", outlier.metric, outlier.best_metric, outlier.a, outlier.b
        )

    return BenchmarkReport(results=results, outliers=outliers, scores=scores)


def _find_outliers(scores: pl.DataFrame, best: MetricResult) -> list[Outlier]:
    best_scores = scores.filter(pl.col("metric") == best.name).select(
        "section", "fixture", pl.col("score").alias("best_score")
    )
    beaten = (
        scores.filter(pl.col("metric") != best.name)
        .join(best_scores, on=["section", "fixture"])
        .filter(pl.col("score") > pl.col("best_score"))
        .sort("section", "fixture", "metric_rank")
    )
    return [
        Outlier(
            metric=row["metric"],
            a=row["a"],
            b=row["b"],
            score=row["score"],
            best_metric=best.name,
            best_score=row["best_score"],
        )
        for row in beaten.iter_rows(named=True)
    ]


def format_report(report: BenchmarkReport) -> Iterator[str]:
    """Yield the report lines: per-metric scores, then outliers.

    Lines look like::

        0.812 lcs-coverage took 41.20ms
        jaro-winkler(Episode 1,Episode 2) > lcs-coverage, 0.978 > 0.800
    """
    for result in report.results:
        yield f"{result.score:5.3f} {result.name} took {format_time(result.elapsed_seconds)}"
    for o in report.outliers:
        yield f"{o.metric}({o.a},{o.b}) > {o.best_metric}, {o.score:5.3f} > {o.best_score:5.3f}"


__all__ = [
    "BenchmarkReport",
    "MetricResult",
    "Outlier",
    "format_report",
    "format_time",
    "run_benchmark",
]
