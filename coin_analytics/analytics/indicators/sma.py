"""
SMA (Simple Moving Average) Indicator

Formula:
- sma[i] = mean(close[i-period+1..i]) for i >= period-1
- undefined (None) before that
"""
from typing import List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes


def calculate_sma(
    data: Union[PriceSeries, List[Decimal]],
    period: int
) -> List[Optional[Decimal]]:
    """
    Calculate Simple Moving Average (SMA).

    Args:
        data: PriceSeries or list of closing prices (Decimal)
        period: SMA period (e.g., 20, 50)

    Returns:
        List aligned with input length; first (period-1) entries are None.
    """
    closes = as_closes(data)

    if period <= 0:
        return [None] * len(closes)

    sma_values: List[Optional[Decimal]] = [None] * len(closes)
    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1:i + 1]
        sma_values[i] = sum(window) / Decimal(period)

    return sma_values
