# -*- coding: utf-8 -*-
"""pandas-ta fiveline – rolling statistics.

rolling_mean(x, L)[i]  = mean(x[i-L+1 .. i])
rolling_stdev(x, L)[i] = sqrt( sum((x[j] - m)^2) / L ),  m = mean of that window

Both are defined only when i >= L-1 and every sample of the window is
present.  Absent samples are never skipped or averaged around.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import warnings

from numba import njit
from numpy import bool_, ndarray, sqrt, zeros

from ._base import _as_arrays, _check_length, _to_optional


# Marks every index whose trailing window of *length* samples is complete.
@njit(cache=True)
def nb_window_defined(present, length):
    n = present.size
    defined = zeros(n, dtype=bool_)
    missing = 0

    for i in range(n):
        if not present[i]:
            missing += 1
        if i >= length and not present[i - length]:
            missing -= 1
        if i >= length - 1 and missing == 0:
            defined[i] = True

    return defined


@njit(cache=True)
def nb_rolling_mean(values, present, length):
    n = values.size
    result = zeros(n)
    defined = nb_window_defined(present, length)

    for i in range(n):
        if not defined[i]:
            continue
        total = 0.0
        for j in range(i - length + 1, i + 1):
            total += values[j]
        result[i] = total / length

    return result, defined


# Population (ddof=0) standard deviation; the window mean is recomputed here.
@njit(cache=True)
def nb_rolling_stdev(values, present, length):
    n = values.size
    result = zeros(n)
    defined = nb_window_defined(present, length)

    for i in range(n):
        if not defined[i]:
            continue
        total = 0.0
        for j in range(i - length + 1, i + 1):
            total += values[j]
        mean = total / length

        sq_dev = 0.0
        for j in range(i - length + 1, i + 1):
            sq_dev += (values[j] - mean) ** 2
        result[i] = sqrt(sq_dev / length)

    return result, defined


def _prepare(series: Sequence[Optional[float]], length: int) -> Tuple[ndarray, ndarray, int]:
    length = _check_length(length)
    values, present = _as_arrays(series)
    if 0 < values.size < length:
        warnings.warn(
            f"window length {length} exceeds the {values.size} available samples; "
            "every output entry will be absent.",
            UserWarning,
            stacklevel=3,
        )
    return values, present, length


def rolling_mean(series: Sequence[Optional[float]], length: int) -> List[Optional[float]]:
    """Trailing arithmetic mean over *length* samples.

    Returns a new list of len(series); entries without a complete window
    are None.  Raises InvalidWindow when *length* is not a positive int.
    """
    values, present, length = _prepare(series, length)
    result, defined = nb_rolling_mean(values, present, length)
    return _to_optional(result, defined)


def rolling_stdev(series: Sequence[Optional[float]], length: int) -> List[Optional[float]]:
    """Trailing population standard deviation over *length* samples.

    Same windowing and absence rules as ``rolling_mean``; the two are
    independent and neither needs the other's output.
    """
    values, present, length = _prepare(series, length)
    result, defined = nb_rolling_stdev(values, present, length)
    return _to_optional(result, defined)
