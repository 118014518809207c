# -*- coding: utf-8 -*-
"""Yahoo Finance v8 chart payload helpers.

Only the request parameters and the response layout are handled here;
fetching is left to the caller.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pandas import DateOffset, Timestamp

from .maps import TWSE_PREFIXES
from .spectrum import FiveLineError, LengthMismatch, Sample

CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"

# Extra history so the first requested year already has a full 480 bar window.
WARMUP_YEARS = 2


class NoPriceData(FiveLineError):
    """The chart payload carries no closing prices."""


def market_symbol(code: str) -> str:
    """Taiwan stock code -> Yahoo symbol (``2330`` -> ``2330.TW``)."""
    code = (code or "").strip()
    if not code:
        raise ValueError("stock code is empty")
    suffix = ".TW" if code.startswith(TWSE_PREFIXES) else ".TWO"
    return code + suffix


def chart_period(years: int, now: Optional[Timestamp] = None) -> Tuple[int, int]:
    """(period1, period2) epoch seconds covering *years* plus the warmup."""
    if now is None:
        now = Timestamp.now(tz="UTC")
    start = now - DateOffset(years=int(years) + WARMUP_YEARS)
    return int(start.timestamp()), int(now.timestamp())


def chart_url(symbol: str, period1: int, period2: int, interval: str = "1d") -> str:
    return (
        CHART_URL.format(symbol=symbol)
        + f"?period1={period1}&period2={period2}&interval={interval}"
    )


def parse_chart(payload: Dict[str, Any]) -> List[Sample]:
    """Extract ``(timestamp, close)`` samples from a chart response.

    Missing closes come through as None.  Raises NoPriceData when the
    response has no result, no close list or a null timestamp.
    """
    if not isinstance(payload, dict):
        raise NoPriceData("chart response is not a JSON object")
    results = (payload.get("chart") or {}).get("result") or []
    if not results:
        raise NoPriceData("chart response has no result")

    result = results[0]
    try:
        closes = result["indicators"]["quote"][0]["close"]
    except (KeyError, IndexError, TypeError):
        closes = None
    if not closes:
        raise NoPriceData("chart response has no closing prices")

    timestamps = result.get("timestamp") or []
    if len(timestamps) != len(closes):
        raise LengthMismatch("close", len(timestamps), len(closes))

    if any(ts is None for ts in timestamps):
        raise NoPriceData("chart response has a null timestamp")

    return [
        Sample(int(ts), None if c is None else float(c))
        for ts, c in zip(timestamps, closes)
    ]
