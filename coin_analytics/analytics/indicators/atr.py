"""
ATR (Average True Range) Indicator

Needs OHLC input. True range:
- tr[0] = high[0] - low[0]
- tr[i] = max(high[i] - low[i], |high[i] - close[i-1]|, |low[i] - close[i-1]|)
ATR = SMA(tr, period), default period 14.
"""
from typing import List, Optional
from decimal import Decimal
from ..types import PriceSeries
from .sma import calculate_sma


def calculate_true_range(series: PriceSeries) -> List[Optional[Decimal]]:
    """True range per row; all None when the series carries no highs/lows."""
    if not series.has_ohlc:
        return [None] * len(series)

    highs, lows, closes = series.highs, series.lows, series.closes
    true_ranges: List[Optional[Decimal]] = []
    for i in range(len(closes)):
        if i == 0:
            true_ranges.append(highs[i] - lows[i])
        else:
            true_ranges.append(max(
                highs[i] - lows[i],
                abs(highs[i] - closes[i - 1]),
                abs(lows[i] - closes[i - 1]),
            ))
    return true_ranges


def calculate_atr(series: PriceSeries, period: int = 14) -> List[Optional[Decimal]]:
    """
    Calculate Average True Range.

    Returns:
        List aligned with the series; None before the lookback and
        everywhere when the series has no OHLC data.
    """
    true_ranges = calculate_true_range(series)
    if not series.has_ohlc:
        return true_ranges
    return calculate_sma(true_ranges, period)
