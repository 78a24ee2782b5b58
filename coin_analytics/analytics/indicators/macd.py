"""
MACD (Moving Average Convergence Divergence) Indicator

Default parameters:
- Fast EMA: 12
- Slow EMA: 26
- Signal EMA: 9

Steps:
1. Compute EMA12 and EMA26
2. MACD line = EMA12 - EMA26 wherever both are defined
3. Signal line = EMA9 over the compacted defined MACD values,
   scattered back to their original indices
4. Histogram = MACD - Signal wherever both are defined
"""
from typing import List, Union, Dict, Optional
from decimal import Decimal
from ..types import PriceSeries, as_closes
from .ema import calculate_ema


def calculate_macd(
    data: Union[PriceSeries, List[Decimal]],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9
) -> Dict[str, List[Optional[Decimal]]]:
    """
    Calculate MACD (Moving Average Convergence Divergence).

    Args:
        data: PriceSeries or list of closing prices (Decimal)
        fast_period: Fast EMA period (default: 12)
        slow_period: Slow EMA period (default: 26)
        signal_period: Signal EMA period (default: 9)

    Returns:
        Dictionary with:
        - macd: MACD line
        - signal: Signal line
        - macdHist: Histogram

        All arrays aligned with input length, None where undefined.
    """
    closes = as_closes(data)
    n = len(closes)

    fast = calculate_ema(closes, fast_period)
    slow = calculate_ema(closes, slow_period)

    macd_line: List[Optional[Decimal]] = [
        fast[i] - slow[i] if fast[i] is not None and slow[i] is not None else None
        for i in range(n)
    ]

    # Compact the defined MACD values so the signal EMA sees a gapless series
    defined_indices = [i for i, v in enumerate(macd_line) if v is not None]
    signal_line: List[Optional[Decimal]] = [None] * n
    if len(defined_indices) >= signal_period:
        compact_signal = calculate_ema([macd_line[i] for i in defined_indices], signal_period)
        for compact_idx, original_idx in enumerate(defined_indices):
            signal_line[original_idx] = compact_signal[compact_idx]

    histogram: List[Optional[Decimal]] = [
        macd_line[i] - signal_line[i]
        if macd_line[i] is not None and signal_line[i] is not None else None
        for i in range(n)
    ]

    return {
        "macd": macd_line,
        "signal": signal_line,
        "macdHist": histogram,
    }
