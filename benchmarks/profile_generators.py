"""Profile per-result cost of the lazy generators against itertools.

Measures wall-clock time and peak memory for a full pass over each
generator across a grid of domain sizes, alongside the matching
``itertools`` function as a baseline.  The lazy generators should hold
memory flat as the result count grows.

Usage::

    python benchmarks/profile_generators.py          # full grid
    python benchmarks/profile_generators.py --quick  # reduced grid

Outputs:
    benchmarks/results/generator_profile.csv
"""

from __future__ import annotations

import argparse
import itertools
import platform
import sys
import time
import tracemalloc
from collections.abc import Callable, Iterable
from pathlib import Path

import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from combinatorial import (  # noqa: E402
    combinations_of_size,
    combinations_with_replacement_of_size,
    permutations_full,
    set_invariant_checks,
)

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

N_VALUES_FULL = [6, 8, 9, 10]
N_VALUES_QUICK = [6, 8]

REPEATS = 3

RESULTS_DIR = Path(__file__).resolve().parent / "results"

# name -> (ours, baseline); both take (n) and return an iterable
CASES: dict[str, tuple[Callable[[int], Iterable], Callable[[int], Iterable]]] = {
    "permutations": (
        lambda n: permutations_full(range(n)),
        lambda n: itertools.permutations(range(n)),
    ),
    "combinations_half": (
        lambda n: combinations_of_size(range(2 * n), n),
        lambda n: itertools.combinations(range(2 * n), n),
    ),
    "with_replacement_half": (
        lambda n: combinations_with_replacement_of_size(range(n + 4), n),
        lambda n: itertools.combinations_with_replacement(range(n + 4), n),
    ),
}


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


def _drain(factory: Callable[[int], Iterable], n: int) -> tuple[float, int, int]:
    """Exhaust one generator; return (seconds, results, peak bytes)."""
    tracemalloc.start()
    t0 = time.perf_counter()
    count = 0
    for _ in factory(n):
        count += 1
    elapsed = time.perf_counter() - t0
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, count, peak


def run(n_values: list[int], checks: str) -> pd.DataFrame:
    set_invariant_checks(checks)
    rows = []
    for name, (ours, baseline) in CASES.items():
        for n in n_values:
            for impl, factory in (("combinatorial", ours), ("itertools", baseline)):
                timings = []
                for _ in range(REPEATS):
                    elapsed, count, peak = _drain(factory, n)
                    timings.append(elapsed)
                best = min(timings)
                rows.append(
                    {
                        "case": name,
                        "n": n,
                        "impl": impl,
                        "checks": checks,
                        "results": count,
                        "seconds": best,
                        "us_per_result": 1e6 * best / max(count, 1),
                        "peak_kib": peak / 1024,
                    }
                )
                print(
                    f"{name:<24} n={n:<3} {impl:<14} "
                    f"{count:>9} results  {best:8.3f}s  {peak / 1024:8.1f} KiB"
                )
    return pd.DataFrame(rows)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--quick", action="store_true", help="reduced grid")
    parser.add_argument(
        "--checks",
        choices=["on", "off"],
        default="off",
        help="invariant-check mode for the permutation engine",
    )
    args = parser.parse_args()

    print(f"Python {platform.python_version()} on {platform.machine()}")
    df = run(N_VALUES_QUICK if args.quick else N_VALUES_FULL, args.checks)

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    out = RESULTS_DIR / "generator_profile.csv"
    df.to_csv(out, index=False)
    print(f"\nWrote {out}")

    summary = df.pivot_table(
        index=["case", "n"], columns="impl", values="us_per_result"
    )
    print("\nMicroseconds per result:")
    print(summary.round(3).to_string())


if __name__ == "__main__":
    main()
