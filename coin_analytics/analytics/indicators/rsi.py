"""
RSI (Relative Strength Index) Indicator, Wilder's method.

Default period: 14

Formula:
1. Compute gains and losses:
   gain[i] = max(close[i] - close[i-1], 0)
   loss[i] = max(close[i-1] - close[i], 0)

2. Seed average gain and loss with the simple mean of the first 14 changes:
   avgGain = sum(gain[1..14]) / 14
   avgLoss = sum(loss[1..14]) / 14

3. For each next change, use Wilder's smoothing:
   avgGain = (prevAvgGain * (period - 1) + currentGain) / period
   avgLoss = (prevAvgLoss * (period - 1) + currentLoss) / period

4. RS = avgGain / avgLoss  (if avgLoss == 0 -> RSI = 100)
   RSI = 100 - (100 / (1 + RS))

This is not the screener heuristic in momentum.py; the two are unrelated.
"""
from typing import List, Union, Optional
from decimal import Decimal
from ..types import PriceSeries, as_closes


def _rsi_from_averages(avg_gain: Decimal, avg_loss: Decimal) -> Decimal:
    if avg_loss == 0:
        return Decimal(100)
    rs = avg_gain / avg_loss
    return Decimal(100) - (Decimal(100) / (Decimal(1) + rs))


def wilder_rsi(
    data: Union[PriceSeries, List[Decimal]],
    period: int = 14
) -> List[Optional[Decimal]]:
    """
    Calculate RSI (Relative Strength Index) using Wilder's smoothing.

    Args:
        data: PriceSeries or list of closing prices (Decimal)
        period: RSI period (default: 14)

    Returns:
        List of RSI values aligned with input length.
        First (period) values are None; the first defined value is at
        index `period`.
    """
    closes = as_closes(data)
    rsi_values: List[Optional[Decimal]] = [None] * len(closes)

    if period <= 0 or len(closes) < period + 1:
        return rsi_values

    gains = []
    losses = []
    for i in range(1, len(closes)):
        change = closes[i] - closes[i - 1]
        gains.append(max(change, Decimal(0)))
        losses.append(max(-change, Decimal(0)))

    avg_gain = sum(gains[:period]) / Decimal(period)
    avg_loss = sum(losses[:period]) / Decimal(period)
    rsi_values[period] = _rsi_from_averages(avg_gain, avg_loss)

    # gains[i] is the change into closes[i + 1]
    for i in range(period, len(gains)):
        avg_gain = (avg_gain * Decimal(period - 1) + gains[i]) / Decimal(period)
        avg_loss = (avg_loss * Decimal(period - 1) + losses[i]) / Decimal(period)
        rsi_values[i + 1] = _rsi_from_averages(avg_gain, avg_loss)

    return rsi_values
