"""
Indicator Summary

Latest-value snapshot of the indicator library with signal labels.
Educational labels, not trading advice.

Heuristic for overallTrend:
1. Start score = 0
2. RSI < 30 -> +2, RSI < 40 -> +1, RSI > 70 -> -2, RSI > 60 -> -1
3. MACD histogram > 0 -> +1, < 0 -> -1
4. Price above SMA20 -> +1, else -1
5. Price above SMA50 -> +1, else -1
Undefined inputs contribute nothing.

Labels: >= 4 strongly_bullish, >= 2 bullish, <= -4 strongly_bearish,
<= -2 bearish, otherwise neutral.
"""
from typing import Dict, List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes
from .sma import calculate_sma
from .ema import calculate_ema
from .rsi import wilder_rsi
from .macd import calculate_macd
from .bollinger import calculate_bollinger_bands
from .atr import calculate_atr
from .stochastic import calculate_stochastic


def _last(values: List[Optional[Decimal]]) -> Optional[Decimal]:
    return values[-1] if values else None


def classify_rsi(rsi: Optional[Decimal]) -> str:
    if rsi is None:
        return "neutral"
    if rsi > 70:
        return "overbought"
    if rsi < 30:
        return "oversold"
    return "neutral"


def classify_macd(histogram: Optional[Decimal]) -> str:
    if histogram is None or histogram == 0:
        return "neutral"
    return "bullish" if histogram > 0 else "bearish"


def score_overall_trend(
    price: Decimal,
    rsi: Optional[Decimal],
    macd_trend: str,
    sma20: Optional[Decimal],
    sma50: Optional[Decimal]
) -> str:
    """Combine latest readings into a five-step trend label."""
    score = 0

    if rsi is not None:
        if rsi < 30:
            score += 2
        elif rsi < 40:
            score += 1
        elif rsi > 70:
            score -= 2
        elif rsi > 60:
            score -= 1

    if macd_trend == "bullish":
        score += 1
    elif macd_trend == "bearish":
        score -= 1

    for average in (sma20, sma50):
        if average is not None:
            score += 1 if price > average else -1

    if score >= 4:
        return "strongly_bullish"
    if score >= 2:
        return "bullish"
    if score <= -4:
        return "strongly_bearish"
    if score <= -2:
        return "bearish"
    return "neutral"


def summarize_indicators(
    data: Union[PriceSeries, List[Decimal]]
) -> Dict[str, Union[Decimal, str, None]]:
    """
    Snapshot of the latest indicator readings.

    Returns:
        Dictionary with price, rsi, macd, signal, macdHist, sma20, sma50,
        sma200, ema12, ema26, bollinger bands, atr, stochK, stochD (None without
        highs/lows) and the labels rsiSignal, macdTrend and overallTrend.
        Empty dict for an empty series.
    """
    closes = as_closes(data)
    if not closes:
        return {}

    price = closes[-1]
    rsi = _last(wilder_rsi(closes, 14))
    macd = calculate_macd(closes)
    bands = calculate_bollinger_bands(closes)
    sma20 = _last(calculate_sma(closes, 20))
    sma50 = _last(calculate_sma(closes, 50))

    macd_trend = classify_macd(_last(macd["macdHist"]))

    atr = None
    stochastic = {"k": [None], "d": [None]}
    if isinstance(data, PriceSeries) and data.has_ohlc:
        atr = _last(calculate_atr(data, 14))
        stochastic = calculate_stochastic(data, k_period=14, d_period=3)

    return {
        "price": price,
        "rsi": rsi,
        "rsiSignal": classify_rsi(rsi),
        "macd": _last(macd["macd"]),
        "signal": _last(macd["signal"]),
        "macdHist": _last(macd["macdHist"]),
        "macdTrend": macd_trend,
        "sma20": sma20,
        "sma50": sma50,
        "sma200": _last(calculate_sma(closes, 200)),
        "ema12": _last(calculate_ema(closes, 12)),
        "ema26": _last(calculate_ema(closes, 26)),
        "bollingerUpper": _last(bands["upper"]),
        "bollingerMiddle": _last(bands["middle"]),
        "bollingerLower": _last(bands["lower"]),
        "bollingerWidth": _last(bands["width"]),
        "atr": atr,
        "stochK": _last(stochastic["k"]),
        "stochD": _last(stochastic["d"]),
        "overallTrend": score_overall_trend(price, rsi, macd_trend, sma20, sma50),
    }
