"""
Bollinger Bands Indicator

Default parameters: period 20, multiplier 2.

- middle = SMA(period)
- sd = population standard deviation of the same window (divide by period)
- upper = middle + k * sd, lower = middle - k * sd
- width = (upper - lower) / middle * 100
"""
from typing import Dict, List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes
from .sma import calculate_sma


def calculate_bollinger_bands(
    data: Union[PriceSeries, List[Decimal]],
    period: int = 20,
    multiplier: Decimal = Decimal(2)
) -> Dict[str, List[Optional[Decimal]]]:
    """
    Calculate Bollinger Bands.

    Args:
        data: PriceSeries or list of closing prices (Decimal)
        period: Window length (default: 20)
        multiplier: Standard deviation multiplier k (default: 2)

    Returns:
        Dictionary with upper, middle, lower and width, aligned with input.
    """
    closes = as_closes(data)
    k = Decimal(str(multiplier))
    middle = calculate_sma(closes, period)

    upper: List[Optional[Decimal]] = [None] * len(closes)
    lower: List[Optional[Decimal]] = [None] * len(closes)
    width: List[Optional[Decimal]] = [None] * len(closes)

    for i, mean in enumerate(middle):
        if mean is None:
            continue
        window = closes[i - period + 1:i + 1]
        variance = sum((c - mean) ** 2 for c in window) / Decimal(period)
        half_width = k * variance.sqrt()

        upper[i] = mean + half_width
        lower[i] = mean - half_width
        if mean != 0:
            width[i] = (half_width * 2) / mean * Decimal(100)

    return {
        "upper": upper,
        "middle": middle,
        "lower": lower,
        "width": width,
    }
