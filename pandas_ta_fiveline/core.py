# -*- coding: utf-8 -*-
from typing import Iterable, List, Optional, Sequence, Tuple

from numpy import float64, isnan, nan, where
from pandas import DataFrame, Series, to_datetime

from pandas_ta_fiveline.maps import BAND_CODES, BANDS, DEFAULT_LENGTH
from pandas_ta_fiveline.spectrum import (
    PresentationRecord,
    Sample,
    compose_bands,
    format_presentation,
    nb_rolling_mean,
    nb_rolling_stdev,
    rolling_mean,
    rolling_stdev,
)
from pandas_ta_fiveline.spectrum._base import _check_length
from pandas_ta_fiveline.utils import v_offset, v_series


def format_dates(timestamps: Sequence[int], tz: str = None) -> List[str]:
    """Epoch seconds to ``YYYY-MM-DD`` strings, UTC unless *tz* is given."""
    if len(timestamps) == 0:
        return []
    dt = to_datetime(list(timestamps), unit="s", utc=True)
    if tz is not None:
        dt = dt.tz_convert(tz)
    return list(dt.strftime("%Y-%m-%d"))


def five_line_spectrum(
    samples: Iterable[Tuple[int, Optional[float]]],
    length: int = None, tz: str = None,
) -> PresentationRecord:
    """Five Line Spectrum record

    Runs the whole pipeline over one symbol's ``(timestamp, close)``
    samples: rolling mean and population standard deviation over
    ``length`` bars, the five bands, and the two-decimal presentation
    record keyed by calendar date.

    Parameters:
        samples (iterable): ```(timestamp, close)``` pairs in chronological
            order. ```close``` may be ```None``` or ```NaN```.
        length (int): Window length. Default: ```480```
        tz (str): Timezone used to render dates. Default: ```UTC```

    Returns:
        (PresentationRecord): 7 aligned sequences

    Raises:
        InvalidWindow: ```length``` is not a positive integer.
    """
    length = DEFAULT_LENGTH if length is None else _check_length(length)
    samples = [Sample(*s) for s in samples]

    close = [s.close for s in samples]
    mean = rolling_mean(close, length)
    stdev = rolling_stdev(close, length)
    bands = compose_bands(mean, stdev)

    return format_presentation(
        format_dates([s.timestamp for s in samples], tz),
        close,
        bands["trend"],
        bands["optimistic"],
        bands["resistance"],
        bands["support"],
        bands["pessimistic"],
    )


def fiveline(
    close: Series, length: int = None, offset: int = None, **kwargs
) -> Optional[DataFrame]:
    """Five Line Spectrum (FLS)

    A symmetric envelope around a long simple moving average. The bands
    sit at zero, one and two population standard deviations of the same
    window on either side of the trend line. With the default two year
    window of daily bars it frames where price trades relative to its own
    long term distribution.

    Calculation:
        Default Inputs:
            length=480
        SMA = Simple Moving Average
        STDEV = Population Standard Deviation (ddof=0)

        TREND = SMA(close, length)
        RESISTANCE = TREND + STDEV(close, length)
        OPTIMISTIC = TREND + 2 * STDEV(close, length)
        SUPPORT = TREND - STDEV(close, length)
        PESSIMISTIC = TREND - 2 * STDEV(close, length)

    Parameters:
        close (Series): ```close``` Series
        length (int): Window length. Default: ```480```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): 5 columns, or ```None``` when ```close``` is not a
        numeric Series of at least ```length``` rows.

    Note: Missing Values
        A bar is undefined when any close inside its window is missing.
        Missing closes are never skipped or averaged around.
    """
    # Validate
    length = DEFAULT_LENGTH if length is None else _check_length(length)
    close = v_series(close, length)
    offset = v_offset(offset)

    if close is None:
        return None

    # Calculation
    np_close = close.to_numpy(dtype=float64)
    present = ~isnan(np_close)
    np_close = where(present, np_close, 0.0)

    mean, defined = nb_rolling_mean(np_close, present, length)
    stdev, _ = nb_rolling_stdev(np_close, present, length)
    mean[~defined] = nan
    stdev[~defined] = nan

    # Name and Category
    _props = f"_{length}"
    data = {}
    for name, k in BANDS.items():
        band = mean + k * stdev if k else mean
        data[f"FLS{BAND_CODES[name]}{_props}"] = Series(band, index=close.index)

    df = DataFrame(data, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    df.name = f"FLS{_props}"
    df.category = "volatility"

    return df
