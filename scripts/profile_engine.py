#!/usr/bin/env python3
"""Engine throughput profiler.

Usage:
    python scripts/profile_engine.py --batches 200 --seed 5489
    python scripts/profile_engine.py --batches 200 --cprofile engine.prof

Reports:
    - Per-operation timing statistics (mean, p50, p95, max per batch)
    - Throughput (values/sec) per operation
    - Twist count over the whole run
    - Optional: cProfile dump
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from mt64.core.enums import Distribution
from mt64.systems.mersenne import MersenneTwister64

_PARAMS: dict[Distribution, dict] = {
    Distribution.RAW: {},
    Distribution.UNIFORM: {},
    Distribution.RANDINT: {"bound": 1_000_003},
    Distribution.RANDFLOAT: {"bound": 8.0},
    Distribution.RANDDOUBLE: {"bound": 8.0},
    Distribution.RANDRANGE: {"low": -500, "high": 500},
}


def _run(engine: MersenneTwister64, batches: int, batch_size: int) -> dict[Distribution, list[float]]:
    """Time ``batches`` batches of every distribution, interleaved."""
    timings: dict[Distribution, list[float]] = {d: [] for d in _PARAMS}
    for _ in range(batches):
        for dist, params in _PARAMS.items():
            t0 = time.perf_counter()
            engine.draw(dist, batch_size, **params)
            timings[dist].append(time.perf_counter() - t0)
    return timings


def _percentile(data: list[float], p: float) -> float:
    """Simple percentile calculation."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    k = (len(sorted_data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(sorted_data):
        return sorted_data[f]
    return sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f])


def _print_report(timings: dict[Distribution, list[float]], batch_size: int, engine: MersenneTwister64,
                  wall_time: float) -> None:
    print("\n" + "=" * 70)
    print("  MT19937-64 ENGINE PERFORMANCE REPORT")
    print("=" * 70)

    total_values = sum(len(t) for t in timings.values()) * batch_size
    print(f"\n  Values drawn:      {total_values}")
    print(f"  Wall clock time:   {wall_time:.3f}s")
    print(f"  Twists:            {engine.twist_count}")

    print(f"\n  {'Operation':<12} {'Mean (ms)':>10} {'P50 (ms)':>10} {'P95 (ms)':>10} {'Max (ms)':>10} {'values/s':>12}")
    print(f"  {'-' * 12} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 12}")
    for dist, times in timings.items():
        mean = statistics.mean(times)
        rate = batch_size / mean if mean > 0 else 0.0
        print(
            f"  {dist.name.lower():<12} {mean * 1000:>10.3f} {_percentile(times, 50) * 1000:>10.3f} "
            f"{_percentile(times, 95) * 1000:>10.3f} {max(times) * 1000:>10.3f} {rate:>12,.0f}"
        )

    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the MT19937-64 engine")
    parser.add_argument("--batches", type=int, default=100, help="Batches per operation")
    parser.add_argument("--batch-size", type=int, default=1000, help="Values per batch")
    parser.add_argument("--seed", type=int, default=5489, help="Engine seed")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    engine = MersenneTwister64(args.seed)
    print(f"Profiling: {args.batches} batches x {args.batch_size} values per operation, seed={args.seed}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    timings = _run(engine, args.batches, args.batch_size)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(timings, args.batch_size, engine, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 15 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(15)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
