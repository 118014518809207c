#!/usr/bin/env python3
"""Benchmark the five line spectrum pipeline.

Times five_line_spectrum() (list in, presentation record out) and the
vectorized fiveline() indicator on synthetic daily closes. The first
(warmup) run includes numba compilation and is not timed.
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import Callable, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_fiveline as ta


def make_close(rows: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2000-01-03", periods=rows, freq="B")
    close = 100 + rng.standard_normal(rows).cumsum() + rng.normal(0, 0.2, rows)
    return pd.Series(close, index=idx, name="close")


def time_runs(fn: Callable[[], object], warmup: int, runs: int) -> List[float]:
    for _ in range(max(warmup, 0)):
        fn()
    times = []
    for _ in range(max(runs, 1)):
        start = perf_counter()
        fn()
        times.append(perf_counter() - start)
    return times


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=10_000)
    ap.add_argument("--length", type=int, default=ta.DEFAULT_LENGTH)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--warmup", type=int, default=1, help="warmup runs (not timed)")
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    args = ap.parse_args()

    close = make_close(args.rows, args.seed)
    timestamps = close.index.asi8 // 1_000_000_000
    samples = list(zip(timestamps.tolist(), close.tolist()))

    pipeline = time_runs(lambda: ta.five_line_spectrum(samples, length=args.length), args.warmup, args.runs)
    vectorized = time_runs(lambda: ta.fiveline(close, length=args.length), args.warmup, args.runs)

    print(f"[i] rows: {args.rows}")
    print(f"[i] length: {args.length}")
    print(f"[i] runs: {args.runs} (warmup: {args.warmup})")
    for label, times in (("five_line_spectrum", pipeline), ("fiveline", vectorized)):
        avg = sum(times) / len(times)
        print(f"[i] {label} avg seconds: {avg:.4f}")
        if args.rows > 0:
            print(f"[i] {label} seconds per 100k rows: {avg / args.rows * 100_000:.3f}")


if __name__ == "__main__":
    main()
