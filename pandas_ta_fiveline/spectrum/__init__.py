# -*- coding: utf-8 -*-
"""pandas-ta fiveline.spectrum – rolling statistics and band composition.

raw series -> rolling_mean / rolling_stdev -> compose_bands
           -> format_presentation -> PresentationRecord
"""
from __future__ import annotations

from ._base import (
    Sample,
    FiveLineError,
    InvalidWindow,
    LengthMismatch,
)
from ._rolling import (
    nb_window_defined,
    nb_rolling_mean,
    nb_rolling_stdev,
    rolling_mean,
    rolling_stdev,
)
from ._bands import compose_bands
from ._format import PresentationRecord, format_presentation

__all__ = [
    # base
    "Sample",
    "FiveLineError",
    "InvalidWindow",
    "LengthMismatch",
    # rolling
    "nb_window_defined",
    "nb_rolling_mean",
    "nb_rolling_stdev",
    "rolling_mean",
    "rolling_stdev",
    # bands
    "compose_bands",
    "PresentationRecord",
    "format_presentation",
]
