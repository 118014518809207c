# -*- coding: utf-8 -*-
"""pandas-ta fiveline – presentation record.

Seven index-aligned sequences ready for a categorical chart axis.  Numbers
are fixed two-decimal strings; absent entries stay None.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..maps import PRECISION, RECORD_FIELDS
from ._base import _check_same_length, _is_nan


def _fmt(x: Any, precision: int = PRECISION) -> Optional[str]:
    """Fixed-precision string, or None for an absent value (0.0 is present)."""
    if _is_nan(x):
        return None
    return f"{float(x):.{precision}f}"


@dataclass(frozen=True)
class PresentationRecord:
    """Immutable output of the five-line pipeline."""
    dates:       Tuple[Any, ...]
    close:       Tuple[Optional[str], ...]
    trend:       Tuple[Optional[str], ...]
    optimistic:  Tuple[Optional[str], ...]
    resistance:  Tuple[Optional[str], ...]
    support:     Tuple[Optional[str], ...]
    pessimistic: Tuple[Optional[str], ...]

    def __len__(self) -> int:
        return len(self.dates)

    def to_dict(self) -> Dict[str, List[Any]]:
        """Plain lists keyed by field name; json.dumps ready."""
        return {k: list(v) for k, v in asdict(self).items()}

    def to_frame(self) -> pd.DataFrame:
        """Numeric DataFrame indexed by date, NaN where absent."""
        data = {
            name: pd.to_numeric(pd.Series(getattr(self, name), dtype=object), errors="coerce")
            for name in RECORD_FIELDS[1:]
        }
        df = pd.DataFrame(data)
        df.index = pd.Index(self.dates, name="date")
        return df


def format_presentation(
    dates: Sequence[Any],
    close: Sequence[Optional[float]],
    trend: Sequence[Optional[float]],
    optimistic: Sequence[Optional[float]],
    resistance: Sequence[Optional[float]],
    support: Sequence[Optional[float]],
    pessimistic: Sequence[Optional[float]],
) -> PresentationRecord:
    """Package the source dates / closes and the five bands into a record.

    Raises LengthMismatch unless every sequence has len(dates) entries.
    """
    _check_same_length(
        len(dates),
        close=close, trend=trend, optimistic=optimistic,
        resistance=resistance, support=support, pessimistic=pessimistic,
    )
    return PresentationRecord(
        dates=tuple(dates),
        close=tuple(_fmt(x) for x in close),
        trend=tuple(_fmt(x) for x in trend),
        optimistic=tuple(_fmt(x) for x in optimistic),
        resistance=tuple(_fmt(x) for x in resistance),
        support=tuple(_fmt(x) for x in support),
        pessimistic=tuple(_fmt(x) for x in pessimistic),
    )
