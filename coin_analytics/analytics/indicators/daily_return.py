"""
Daily Return % Indicator

dailyReturn[i] = (close[i] - close[i-1]) / close[i-1] * 100, None at i = 0.
"""
from typing import List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes


def calculate_daily_return(data: Union[PriceSeries, List[Decimal]]) -> List[Optional[Decimal]]:
    """Percent change from the previous close, aligned with input."""
    closes = as_closes(data)
    result: List[Optional[Decimal]] = [None] * len(closes)
    for i in range(1, len(closes)):
        if closes[i - 1] != 0:
            result[i] = (closes[i] - closes[i - 1]) / closes[i - 1] * Decimal(100)
    return result
