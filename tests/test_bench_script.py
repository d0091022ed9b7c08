from __future__ import annotations

import pytest

from tests.conftest import load_script

bench = load_script("bench_hann")


def test_time_calls_reports_per_call_stats():
    calls = []
    stats = bench.time_calls(lambda: calls.append(1), iterations=3, repeats=2)
    assert len(calls) == 6
    assert set(stats) == {"mean_us", "median_us", "best_us"}
    assert stats["best_us"] <= stats["median_us"]


def test_time_calls_rejects_non_positive_counts():
    with pytest.raises(ValueError):
        bench.time_calls(lambda: None, iterations=0, repeats=1)


def test_run_benchmarks_covers_public_accessors():
    results = bench.run_benchmarks(256, iterations=2, repeats=1)
    assert set(results) == {
        "get_hann_window",
        "calculate_hann_window",
        "get_hann_window_sum_squares",
    }


def test_run_benchmarks_rejects_invalid_length():
    with pytest.raises(ValueError):
        bench.run_benchmarks(1, iterations=1, repeats=1)
