# -*- coding: utf-8 -*-
"""pandas-ta fiveline – shared base: sample type, errors, helpers.

The rolling engine (``_rolling``), the band composer (``_bands``) and the
presentation formatter (``_format``) all import from here.
"""
from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence, Tuple

import math

import numpy as np


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FiveLineError(ValueError):
    """Base class of every error raised by the five-line pipeline."""


class InvalidWindow(FiveLineError):
    """Rolling window length is not a positive integer."""

    def __init__(self, length: Any) -> None:
        super().__init__(f"window length must be a positive integer, got {length!r}")
        self.length = length


class LengthMismatch(FiveLineError):
    """Two parallel sequences differ in length."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(f"'{name}' has {actual} entries, expected {expected}")
        self.name = name
        self.expected = expected
        self.actual = actual


# ---------------------------------------------------------------------------
# Sample
# ---------------------------------------------------------------------------

class Sample(NamedTuple):
    """One input point: epoch seconds and the closing price (None = absent)."""
    timestamp: int
    close: Optional[float]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_nan(x: Any) -> bool:
    """True when *x* is None or a NaN of any float type (numpy included)."""
    return x is None or (isinstance(x, (float, np.floating)) and math.isnan(x))


def _check_length(length: Any) -> int:
    """Return *length* when it is a positive int, else raise InvalidWindow."""
    if isinstance(length, (bool, np.bool_)) or not isinstance(length, (int, np.integer)):
        raise InvalidWindow(length)
    if length <= 0:
        raise InvalidWindow(length)
    return int(length)


def _check_same_length(expected: int, **named: Sequence[Any]) -> None:
    """Raise LengthMismatch on the first sequence whose length != *expected*."""
    for name, seq in named.items():
        if len(seq) != expected:
            raise LengthMismatch(name, expected, len(seq))


def _as_arrays(series: Sequence[Optional[float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split *series* into (float64 values, bool presence mask).

    Absent entries (None / NaN) get value 0.0 and ``present == False``;
    kernels must consult the mask, never the value, to decide presence.
    """
    n = len(series)
    values = np.zeros(n, dtype=np.float64)
    present = np.zeros(n, dtype=np.bool_)
    for i, x in enumerate(series):
        if _is_nan(x):
            continue
        values[i] = float(x)
        present[i] = not math.isnan(values[i])
    return values, present


def _to_optional(values: np.ndarray, defined: np.ndarray) -> list:
    """Inverse of ``_as_arrays``: undefined slots become None."""
    return [float(v) if ok else None for v, ok in zip(values.tolist(), defined.tolist())]
