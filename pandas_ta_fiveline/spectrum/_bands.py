# -*- coding: utf-8 -*-
"""pandas-ta fiveline – band composition.

optimistic  = mean + 2 * stdev
resistance  = mean + 1 * stdev
trend       = mean
support     = mean - 1 * stdev
pessimistic = mean - 2 * stdev
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..maps import BANDS
from ._base import _check_same_length, _is_nan


def compose_bands(
    mean: Sequence[Optional[float]],
    stdev: Sequence[Optional[float]],
) -> Dict[str, List[Optional[float]]]:
    """Derive the five bands from aligned rolling mean / stdev sequences.

    An index where either input is absent is absent in every band.
    Raises LengthMismatch when the inputs differ in length.
    """
    _check_same_length(len(mean), stdev=stdev)

    bands: Dict[str, List[Optional[float]]] = {name: [] for name in BANDS}
    for m, s in zip(mean, stdev):
        if _is_nan(m) or _is_nan(s):
            for name in BANDS:
                bands[name].append(None)
            continue
        m, s = float(m), float(s)
        for name, k in BANDS.items():
            bands[name].append(m + k * s if k else m)
    return bands
