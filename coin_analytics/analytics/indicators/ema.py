"""
EMA (Exponential Moving Average) Indicator

Formula:
- k = 2 / (period + 1)
- Seed: ema[period-1] = simple mean of the first `period` closes
- ema[i] = close[i] * k + ema[i-1] * (1 - k)

The SMA seed is part of the definition: a closed-form EMA without it
produces different early values.
"""
from typing import List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes


def calculate_ema(
    data: Union[PriceSeries, List[Decimal]],
    period: int
) -> List[Optional[Decimal]]:
    """
    Calculate Exponential Moving Average (EMA).

    Args:
        data: PriceSeries or list of closing prices (Decimal)
        period: EMA period (e.g., 12, 26)

    Returns:
        List of EMA values aligned with input length.
        First (period-1) values are None; all None if insufficient data.
    """
    closes = as_closes(data)
    ema_values: List[Optional[Decimal]] = [None] * len(closes)

    if period <= 0 or len(closes) < period:
        return ema_values

    k = Decimal(2) / Decimal(period + 1)

    # Seed with SMA of first period values
    ema_values[period - 1] = sum(closes[:period]) / Decimal(period)

    for i in range(period, len(closes)):
        ema_values[i] = closes[i] * k + ema_values[i - 1] * (Decimal(1) - k)

    return ema_values
