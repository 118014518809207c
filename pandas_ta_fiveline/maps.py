# -*- coding: utf-8 -*-
"""Package-wide constants for the five-line spectrum."""
from __future__ import annotations

from typing import Dict, Tuple

# Two trading years of daily bars.
DEFAULT_LENGTH = 480

# Decimal places of the presentation record.
PRECISION = 2

# band name -> standard deviation multiplier, top to bottom
BANDS: Dict[str, int] = {
    "optimistic": 2,
    "resistance": 1,
    "trend": 0,
    "support": -1,
    "pessimistic": -2,
}

# Column suffix letter used by fiveline()
BAND_CODES: Dict[str, str] = {
    "optimistic": "o",
    "resistance": "r",
    "trend": "t",
    "support": "s",
    "pessimistic": "p",
}

# Order of the sequences in a PresentationRecord
RECORD_FIELDS: Tuple[str, ...] = (
    "dates", "close", "trend", "optimistic", "resistance", "support", "pessimistic",
)

# Legend labels of the charted lines
LABELS: Dict[str, str] = {
    "close": "Close",
    "trend": "Trend",
    "optimistic": "Optimistic",
    "resistance": "Resistance",
    "support": "Support",
    "pessimistic": "Pessimistic",
}

# Taiwan listed (TWSE) codes start with one of these; the rest trade OTC (TPEx)
TWSE_PREFIXES: Tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "8")

