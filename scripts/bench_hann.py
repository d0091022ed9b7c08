#!/usr/bin/env python3
"""
Throughput benchmark for hannwin.

Times the public accessors at a fixed window length, plus the uncached
generator for comparison.

Usage:
    python scripts/bench_hann.py [--length 4096] [--iterations 1000] [--repeats 5]
"""
from __future__ import annotations

import argparse
import statistics
import sys
import time
from pathlib import Path
from typing import Callable

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hannwin.api import get_hann_window, get_hann_window_sum_squares  # noqa: E402
from hannwin.dsp.windowing import calculate_hann_window  # noqa: E402


def time_calls(fn: Callable[[], object], *, iterations: int, repeats: int) -> dict:
    """
    Time `iterations` calls of `fn`, `repeats` times over.

    Returns per-call timings in microseconds: mean, median, best.
    """
    if iterations <= 0 or repeats <= 0:
        raise ValueError("iterations and repeats must be positive.")
    per_call_us: list[float] = []
    for _ in range(repeats):
        start = time.perf_counter()
        for _ in range(iterations):
            fn()
        elapsed = time.perf_counter() - start
        per_call_us.append(elapsed * 1e6 / iterations)
    return {
        "mean_us": statistics.mean(per_call_us),
        "median_us": statistics.median(per_call_us),
        "best_us": min(per_call_us),
    }


def run_benchmarks(length: int, *, iterations: int, repeats: int) -> dict[str, dict]:
    """Run every benchmark at the given window length."""
    w = get_hann_window(length)
    # Warm both caches so first-access population is not timed.
    get_hann_window_sum_squares(w)

    return {
        "get_hann_window": time_calls(
            lambda: get_hann_window(length),
            iterations=iterations, repeats=repeats
        ),
        "calculate_hann_window": time_calls(
            lambda: calculate_hann_window(length),
            iterations=iterations, repeats=repeats
        ),
        "get_hann_window_sum_squares": time_calls(
            lambda: get_hann_window_sum_squares(w),
            iterations=iterations, repeats=repeats
        ),
    }


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Benchmark hannwin window generation"
    )
    parser.add_argument(
        "--length",
        type=int,
        default=4096,
        help="Window length (default: 4096)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Calls per timing run (default: 1000)",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=5,
        help="Timing runs per benchmark (default: 5)",
    )

    args = parser.parse_args()

    try:
        results = run_benchmarks(
            args.length, iterations=args.iterations, repeats=args.repeats
        )
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    print("=" * 60)
    print(f"hannwin benchmark (length={args.length})")
    print("=" * 60)
    for name, r in results.items():
        print(
            f"{name:<30} mean={r['mean_us']:9.2f}us "
            f"median={r['median_us']:9.2f}us best={r['best_us']:9.2f}us"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
