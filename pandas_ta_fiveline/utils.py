# -*- coding: utf-8 -*-
"""Argument validators shared by the indicator functions."""
from __future__ import annotations

from typing import Any, Optional

from pandas import Series, api

__all__ = [
    "v_offset",
    "v_series",
]


def v_offset(x: Any) -> int:
    """Post shift; anything that is not an int means no shift."""
    return int(x) if isinstance(x, int) and not isinstance(x, bool) else 0


def v_series(x: Any, length: int = 0) -> Optional[Series]:
    """Numeric Series with at least *length* rows, else None."""
    if not isinstance(x, Series):
        return None
    if not api.types.is_numeric_dtype(x):
        try:
            x = x.astype("float64")
        except (TypeError, ValueError):
            return None
    if x.size < length:
        return None
    return x
