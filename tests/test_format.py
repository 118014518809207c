import json
import math

import numpy as np
import pytest

from pandas_ta_fiveline.spectrum import (
    LengthMismatch,
    PresentationRecord,
    format_presentation,
)

DATES = ["2024-01-01", "2024-01-02", "2024-01-03"]


def _record(**overrides):
    seqs = {
        "dates": DATES,
        "close": [1.0, 2.0, 3.0],
        "trend": [None, 1.5, 2.5],
        "optimistic": [None, 2.5, 3.5],
        "resistance": [None, 2.0, 3.0],
        "support": [None, 1.0, 2.0],
        "pessimistic": [None, 0.5, 1.5],
    }
    seqs.update(overrides)
    return format_presentation(**seqs)


def test_two_decimal_strings():
    record = _record(close=[1.0, 2.346, 1234.5])
    assert record.close == ("1.00", "2.35", "1234.50")
    assert record.trend == (None, "1.50", "2.50")


def test_rounding_follows_binary_value():
    # 2.675 is stored as 2.67499999...
    assert _record(close=[2.675, 0.125, 1.005]).close == ("2.67", "0.12", "1.00")


def test_zero_is_not_absent():
    record = _record(close=[0.0, 0.0, 0.0], pessimistic=[None, 0.0, -0.004])
    assert record.close == ("0.00", "0.00", "0.00")
    assert record.pessimistic == (None, "0.00", "-0.00")


def test_absent_markers():
    record = _record(close=[None, float("nan"), 3.0])
    assert record.close == (None, None, "3.00")
    assert "0.00" not in record.trend


def test_dates_pass_through():
    dates = ["c", "a", "b"]
    assert _record(dates=dates).dates == ("c", "a", "b")


def test_all_sequences_share_length():
    record = _record()
    assert len(record) == 3
    for name in ("dates", "close", "trend", "optimistic", "resistance", "support", "pessimistic"):
        assert len(getattr(record, name)) == 3


def test_empty_record():
    record = format_presentation([], [], [], [], [], [], [])
    assert len(record) == 0
    assert record.to_dict()["close"] == []


@pytest.mark.parametrize("field", ["close", "trend", "optimistic", "resistance", "support", "pessimistic"])
def test_length_mismatch(field):
    with pytest.raises(LengthMismatch, match=field):
        _record(**{field: [1.0, 2.0]})


def test_record_is_immutable():
    record = _record()
    with pytest.raises(AttributeError):
        record.close = ()


def test_to_dict_is_json_ready():
    data = _record().to_dict()
    assert list(data) == ["dates", "close", "trend", "optimistic", "resistance", "support", "pessimistic"]
    assert json.loads(json.dumps(data)) == data
    assert data["trend"] == [None, "1.50", "2.50"]


def test_to_frame():
    df = _record().to_frame()
    assert list(df.index) == DATES
    assert df.index.name == "date"
    assert list(df.columns) == ["close", "trend", "optimistic", "resistance", "support", "pessimistic"]
    assert math.isnan(df["trend"].iloc[0])
    assert df["optimistic"].iloc[2] == 3.5


def test_is_presentation_record():
    assert isinstance(_record(), PresentationRecord)


def test_numpy_nan_is_absent():
    record = _record(
        close=[np.float32("nan"), np.float64("nan"), np.float32(3.0)],
        trend=[None, np.float32("nan"), np.float32(2.5)],
    )
    assert record.close == (None, None, "3.00")
    assert record.trend == (None, None, "2.50")
