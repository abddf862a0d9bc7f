"""Command-line entry point: ``python -m aliasmatch``.

Runs the benchmark harness over the embedded fixture corpus and prints the
per-metric scores followed by every fixture where another metric beat the
best one.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from aliasmatch._core import UnknownMetricError
from aliasmatch.harness import format_report, run_benchmark
from aliasmatch.registry import DEFAULT_REGISTRY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aliasmatch-bench",
        description="Compare string similarity metrics on hand-labelled metadata duplicates.",
    )
    parser.add_argument(
        "--metric",
        action="append",
        dest="metrics",
        metavar="NAME",
        help=f"metric to evaluate (repeatable; default: all of {', '.join(DEFAULT_REGISTRY)})",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="compare strings as-is instead of lowercasing both sides",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = DEFAULT_REGISTRY
    if args.metrics:
        try:
            registry = registry.subset(args.metrics)
        except UnknownMetricError as exc:
            parser.error(str(exc))
    if not args.case_sensitive:
        registry = registry.case_insensitive()

    for line in format_report(run_benchmark(registry)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
