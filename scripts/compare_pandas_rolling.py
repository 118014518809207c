#!/usr/bin/env python3
"""Compare fiveline() against pandas rolling mean / std(ddof=0).

Builds a synthetic close series (optionally with missing bars), computes
the five bands with the numba kernels and with pandas
``rolling(length).mean()`` / ``rolling(length).std(ddof=0)``, and reports
NaN counts and absolute / relative differences per column.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_fiveline as ta


def make_close(rows: int, seed: int, missing: float) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2018-01-01", periods=rows, freq="B")
    close = 100 + rng.standard_normal(rows).cumsum() + rng.normal(0, 0.2, rows)
    if missing > 0:
        close[rng.random(rows) < missing] = np.nan
    return pd.Series(close, index=idx, name="close")


def pandas_reference(close: pd.Series, length: int) -> pd.DataFrame:
    # min_periods=length keeps any window with a missing bar undefined
    roll = close.rolling(length, min_periods=length)
    mean = roll.mean()
    std = roll.std(ddof=0)
    return pd.DataFrame(
        {
            f"FLS{ta.maps.BAND_CODES[name]}_{length}": mean + k * std
            for name, k in ta.BANDS.items()
        },
        index=close.index,
    )


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2500)
    ap.add_argument("--length", type=int, default=ta.DEFAULT_LENGTH)
    ap.add_argument("--missing", type=float, default=0.0, help="fraction of bars to blank out")
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--eps", type=float, default=1e-12)
    ap.add_argument("--tol", type=float, default=1e-8, help="max_abs above this fails")
    args = ap.parse_args()

    if args.length >= args.rows:
        raise SystemExit("[X] --length must be < --rows")

    close = make_close(args.rows, args.seed, args.missing)
    ref = pandas_reference(close, args.length)
    test = ta.fiveline(close, length=args.length)
    if test is None:
        raise SystemExit("[X] fiveline() returned None")

    summary = compare_frames(ref, test, args.eps)

    print("[i] rows:", args.rows)
    print("[i] length:", args.length)
    print("[i] missing bars:", int(close.isna().sum()))
    print(summary)

    nan_mismatch = (ref.isna() != test.isna()).to_numpy().sum()
    worst = summary["max_abs"].max()
    if nan_mismatch or (pd.notna(worst) and worst > args.tol):
        raise SystemExit(f"[X] mismatch: nan pattern {nan_mismatch}, max_abs {worst}")
    print("[i] OK")


if __name__ == "__main__":
    main()
