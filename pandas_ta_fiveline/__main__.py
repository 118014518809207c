#!/usr/bin/env python3
"""Five line spectrum from a saved Yahoo chart response.

    python -m pandas_ta_fiveline chart.json --length 480
    curl ... | python -m pandas_ta_fiveline - --echarts --symbol 2330

Writes the presentation record (or an ECharts option) as JSON to stdout.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from pandas_ta_fiveline.chart import chart_option
from pandas_ta_fiveline.core import five_line_spectrum
from pandas_ta_fiveline.maps import DEFAULT_LENGTH
from pandas_ta_fiveline.sources import parse_chart
from pandas_ta_fiveline.spectrum import FiveLineError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pandas_ta_fiveline", description=__doc__.splitlines()[0])
    ap.add_argument("path", help="chart JSON file, '-' for stdin")
    ap.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="rolling window in bars")
    ap.add_argument("--tz", type=str, default=None, help="timezone for dates (default UTC)")
    ap.add_argument("--echarts", action="store_true", help="emit an ECharts option instead of the record")
    ap.add_argument("--symbol", type=str, default="", help="chart title symbol (with --echarts)")
    ap.add_argument("--indent", type=int, default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        if args.path == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.path, "r", encoding="utf-8") as fh:
                payload = json.load(fh)
    except (OSError, ValueError) as e:
        raise SystemExit(f"[X] cannot read {args.path}: {e}")

    try:
        record = five_line_spectrum(parse_chart(payload), length=args.length, tz=args.tz)
    except FiveLineError as e:
        raise SystemExit(f"[X] {e}")

    out = chart_option(args.symbol, record) if args.echarts else record.to_dict()
    json.dump(out, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
