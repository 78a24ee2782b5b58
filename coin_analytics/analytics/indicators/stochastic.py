"""
Stochastic Oscillator

Needs OHLC input.
- %K[i] = (close[i] - lowestLow) / (highestHigh - lowestLow) * 100 over the
  last k_period rows; 50 when the window is flat
- %D = SMA(d_period) over the compacted defined %K values, scattered back
"""
from typing import Dict, List, Optional
from decimal import Decimal
from ..types import PriceSeries
from .sma import calculate_sma


def calculate_stochastic(
    series: PriceSeries,
    k_period: int = 14,
    d_period: int = 3
) -> Dict[str, List[Optional[Decimal]]]:
    """
    Calculate the Stochastic Oscillator.

    Returns:
        Dictionary with k and d, aligned with the series. All None when the
        series carries no highs/lows.
    """
    n = len(series)
    k_values: List[Optional[Decimal]] = [None] * n
    d_values: List[Optional[Decimal]] = [None] * n

    if not series.has_ohlc or k_period <= 0:
        return {"k": k_values, "d": d_values}

    highs, lows, closes = series.highs, series.lows, series.closes
    for i in range(k_period - 1, n):
        highest = max(highs[i - k_period + 1:i + 1])
        lowest = min(lows[i - k_period + 1:i + 1])
        if highest == lowest:
            k_values[i] = Decimal(50)
        else:
            k_values[i] = (closes[i] - lowest) / (highest - lowest) * Decimal(100)

    defined_indices = [i for i, v in enumerate(k_values) if v is not None]
    compact_d = calculate_sma([k_values[i] for i in defined_indices], d_period)
    for compact_idx, original_idx in enumerate(defined_indices):
        d_values[original_idx] = compact_d[compact_idx]

    return {"k": k_values, "d": d_values}
