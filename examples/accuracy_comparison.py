#!/usr/bin/env python3
"""
Accuracy Comparison: aliasmatch vs Jellyfish

Compares the Jaro-Winkler and Levenshtein metrics of aliasmatch with
jellyfish to document where the results agree and where aliasmatch
deliberately differs (weighted substitutions, boost threshold).

REQUIRES benchmark dependencies:
    pip install aliasmatch[benchmarks]
"""

import sys
from typing import Callable

import aliasmatch as am


def check_dependencies():
    """Verify all benchmark dependencies are installed."""
    try:
        import jellyfish  # noqa: F401
    except ImportError:
        print("ERROR: Missing benchmark dependency: jellyfish")
        print()
        print("Install with:")
        print("    pip install aliasmatch[benchmarks]")
        sys.exit(1)


check_dependencies()

# Import benchmark dependencies (guaranteed available after check)
import jellyfish

# =============================================================================
# Test Data
# =============================================================================

TEST_PAIRS = [
    # Classic examples
    ("MARTHA", "MARHTA"),
    ("DWAYNE", "DUANE"),
    ("DIXON", "DICKSONX"),
    ("kitten", "sitting"),
    # Catalogue metadata
    ("Tarja", "Tarja Turunen"),
    ("Mekons", "The Mekons"),
    ("Back and Forth", "Back & Forth"),
    ("Episode 1", "Episode 2"),
    # Identical strings
    ("Varg", "Varg"),
    # Single characters
    ("a", "b"),
    ("a", "ab"),
]


def values_match(a: float, b: float, tolerance: float = 0.0001) -> bool:
    return abs(a - b) < tolerance


def compare_algorithm(
    name: str,
    ours: Callable[[str, str], float],
    reference: Callable[[str, str], float],
) -> dict:
    """Print a comparison table and return pass/fail counts."""
    results = {"name": name, "passed": 0, "failed": 0, "deviations": []}

    print(f"\n{'=' * 70}")
    print(name)
    print("=" * 70)
    header = " | ".join(f"{c:^15}" for c in ["Inputs", "aliasmatch", "Jellyfish", "Match"])
    print(header)
    print("-" * len(header))

    for a, b in TEST_PAIRS:
        display_input = f"{a[:8]}../{b[:8]}.." if len(a) > 8 or len(b) > 8 else f"{a}/{b}"
        ours_result = ours(a, b)
        ref_result = reference(a, b)
        match = values_match(ours_result, ref_result)
        if match:
            results["passed"] += 1
        else:
            results["failed"] += 1
            results["deviations"].append((a, b, ours_result, ref_result))
        print(
            f"{display_input:^15} | {ours_result:^15.6f} | {ref_result:^15.6f} | "
            f"{'OK' if match else 'DIFF':^15}"
        )

    return results


def jellyfish_levenshtein_similarity(a: str, b: str) -> float:
    """Unweighted jellyfish distance normalised by the longer string."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - jellyfish.levenshtein_distance(a, b) / longest


def main() -> int:
    all_results = [
        compare_algorithm(
            "Jaro-Winkler Similarity",
            am.jaro_winkler_similarity,
            jellyfish.jaro_winkler_similarity,
        ),
        # Expected to differ: aliasmatch charges 2 per substitution and
        # normalises by the combined length.
        compare_algorithm(
            "Levenshtein Similarity",
            am.levenshtein_similarity,
            jellyfish_levenshtein_similarity,
        ),
    ]

    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    total_failed = 0
    for r in all_results:
        status = "PASS" if r["failed"] == 0 else "DIFF"
        print(f"  {r['name']:40} {r['passed']:3}/{r['passed'] + r['failed']:3} {status}")
        total_failed += r["failed"]
        for a, b, ours_result, ref_result in r["deviations"][:3]:
            print(f"      - '{a}'/'{b}': AM={ours_result:.6f} JF={ref_result:.6f}")

    if total_failed > 0:
        print(f"\n  {total_failed} differences found - see details above")
    else:
        print("\n  All results match!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
