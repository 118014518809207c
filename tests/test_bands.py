import numpy as np
import pytest

from pandas_ta_fiveline.spectrum import (
    LengthMismatch,
    compose_bands,
    rolling_mean,
    rolling_stdev,
)

BAND_NAMES = ["optimistic", "resistance", "trend", "support", "pessimistic"]


def test_band_names_in_order():
    assert list(compose_bands([], [])) == BAND_NAMES


def test_ramp_bands(ramp):
    bands = compose_bands(rolling_mean(ramp, 3), rolling_stdev(ramp, 3))
    assert bands["trend"] == [None, None, 2.0, 3.0, 4.0]
    assert bands["resistance"][4] == pytest.approx(4.8165, abs=1e-4)
    assert bands["optimistic"][4] == pytest.approx(5.6330, abs=1e-4)
    assert bands["support"][4] == pytest.approx(3.1835, abs=1e-4)
    assert bands["pessimistic"][4] == pytest.approx(2.3670, abs=1e-4)


def test_multipliers():
    bands = compose_bands([10.0], [1.5])
    assert bands == {
        "optimistic": [13.0],
        "resistance": [11.5],
        "trend": [10.0],
        "support": [8.5],
        "pessimistic": [7.0],
    }


def test_absent_in_either_input_blanks_all_bands():
    bands = compose_bands([None, 5.0, 5.0, float("nan")], [1.0, None, 1.0, 1.0])
    for name in BAND_NAMES:
        assert bands[name][0] is None
        assert bands[name][1] is None
        assert bands[name][2] is not None
        assert bands[name][3] is None


def test_zero_stdev_collapses_bands(ramp):
    bands = compose_bands(rolling_mean(ramp, 1), rolling_stdev(ramp, 1))
    for name in BAND_NAMES:
        assert bands[name] == ramp


def test_zero_mean_is_present():
    bands = compose_bands([0.0], [0.0])
    assert bands["trend"] == [0.0]
    assert bands["optimistic"] == [0.0]


def test_ordering(random_close):
    values = random_close.tolist()
    bands = compose_bands(rolling_mean(values, 40), rolling_stdev(values, 40))
    for i in range(39, len(values)):
        assert (
            bands["pessimistic"][i]
            < bands["support"][i]
            < bands["trend"][i]
            < bands["resistance"][i]
            < bands["optimistic"][i]
        )


def test_length_mismatch():
    with pytest.raises(LengthMismatch) as exc:
        compose_bands([1.0, 2.0], [0.5])
    assert exc.value.name == "stdev"
    assert exc.value.expected == 2
    assert exc.value.actual == 1


def test_inputs_not_mutated():
    mean, stdev = [1.0, None], [0.5, 0.5]
    compose_bands(mean, stdev)
    assert mean == [1.0, None]
    assert stdev == [0.5, 0.5]


def test_numpy_nan_blanks_all_bands():
    bands = compose_bands(
        [np.float32(1.0), np.float32("nan"), np.float64(2.0)],
        [np.float32("nan"), np.float32(0.5), np.float64(0.5)],
    )
    for name in BAND_NAMES:
        assert bands[name][0] is None
        assert bands[name][1] is None
    assert bands["trend"][2] == 2.0
    assert bands["optimistic"][2] == 3.0
