import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def ramp():
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def random_close():
    rng = np.random.default_rng(7)
    idx = pd.date_range("2020-01-01", periods=300, freq="B")
    close = 100 + rng.standard_normal(300).cumsum() + rng.normal(0, 0.2, 300)
    return pd.Series(close, index=idx, name="close")


@pytest.fixture
def daily_samples():
    # 2024-01-01 00:00 UTC, one bar per day
    start = 1704067200
    closes = [10.0, 11.0, None, 12.5, 13.0, 12.0, 14.0, 15.5]
    return [(start + i * 86400, c) for i, c in enumerate(closes)]


@pytest.fixture
def chart_payload(daily_samples):
    return {
        "chart": {
            "result": [
                {
                    "meta": {"symbol": "2330.TW"},
                    "timestamp": [ts for ts, _ in daily_samples],
                    "indicators": {"quote": [{"close": [c for _, c in daily_samples]}]},
                }
            ],
            "error": None,
        }
    }
