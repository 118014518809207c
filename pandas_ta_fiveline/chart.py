# -*- coding: utf-8 -*-
"""ECharts option for a PresentationRecord.

The returned dict is JSON serialisable and can be passed straight to
``chart.setOption`` on the browser side.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .maps import LABELS
from .spectrum import PresentationRecord

# series key -> line style, drawn in this order
LINE_STYLES: Dict[str, Dict[str, Any]] = {
    "close":       {"color": "#333", "width": 2},
    "optimistic":  {"color": "#ff4d4f", "opacity": 0.8},
    "resistance":  {"color": "#ffa940", "opacity": 0.8, "type": "dashed"},
    "trend":       {"color": "#1890ff", "width": 2},
    "support":     {"color": "#73d13d", "opacity": 0.8, "type": "dashed"},
    "pessimistic": {"color": "#36c360", "opacity": 0.8},
}

LEGEND_ORDER = ("close", "trend", "optimistic", "resistance", "support", "pessimistic")


def chart_series(record: PresentationRecord) -> List[Dict[str, Any]]:
    return [
        {
            "name": LABELS[key],
            "type": "line",
            "data": list(getattr(record, key)),
            "showSymbol": False,
            "lineStyle": dict(style),
        }
        for key, style in LINE_STYLES.items()
    ]


def chart_option(symbol: str, record: PresentationRecord) -> Dict[str, Any]:
    """Line chart of the close and the five bands on a shared date axis."""
    return {
        "title": {"text": f"{symbol} Five Line Spectrum"},
        "tooltip": {"trigger": "axis", "axisPointer": {"type": "cross"}},
        "legend": {"data": [LABELS[key] for key in LEGEND_ORDER]},
        "grid": {"left": "3%", "right": "4%", "bottom": "10%", "containLabel": True},
        "xAxis": {"type": "category", "boundaryGap": False, "data": list(record.dates)},
        "yAxis": {"type": "value", "scale": True, "axisLabel": {"formatter": "{value}"}},
        "dataZoom": [{"type": "inside", "start": 0, "end": 100}, {"start": 0, "end": 100}],
        "series": chart_series(record),
    }
