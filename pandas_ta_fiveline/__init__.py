# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pandas_ta_fiveline")
except PackageNotFoundError:
    version = "0.0.0"

from pandas_ta_fiveline.maps import BANDS, DEFAULT_LENGTH, LABELS, PRECISION
from pandas_ta_fiveline.spectrum import *
from pandas_ta_fiveline.spectrum import __all__ as spectrum_all

# Pipeline and the pandas-ta style indicator
from pandas_ta_fiveline.core import fiveline, five_line_spectrum, format_dates

# Collaborator helpers: chart payloads in, chart options out
from pandas_ta_fiveline.sources import NoPriceData, chart_period, chart_url, market_symbol, parse_chart
from pandas_ta_fiveline.chart import chart_option, chart_series

__all__ = [
    "BANDS",
    "DEFAULT_LENGTH",
    "LABELS",
    "PRECISION",
    "version",
    "fiveline",
    "five_line_spectrum",
    "format_dates",
    "NoPriceData",
    "chart_period",
    "chart_url",
    "market_symbol",
    "parse_chart",
    "chart_option",
    "chart_series",
]

__all__ += spectrum_all
