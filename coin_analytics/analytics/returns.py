"""
Return series builder.

return[i] = close[i+1] / close[i] - 1, so the series is one shorter than
the cleaned price series.
"""
from decimal import Decimal
from typing import List, Sequence, Union

from .types import PriceSeries


def calculate_returns(data: Union[PriceSeries, Sequence[Decimal]]) -> List[Decimal]:
    """
    Derive simple returns from a clean price series.

    Args:
        data: PriceSeries or list of positive closing prices (Decimal)

    Returns:
        List of simple returns (fractions, not percent). Empty for fewer
        than two prices.
    """
    closes = list(data.closes) if isinstance(data, PriceSeries) else list(data)
    return [closes[i] / closes[i - 1] - Decimal(1) for i in range(1, len(closes))]
