"""
Indicator Set

Computes every column of the IndicatorSet output contract from one clean
close series. Columns are independent: one being undefined (RSI needs 15
closes, Signal needs 34) never blocks the others.
"""
from typing import Dict, List, Optional, Union
from decimal import Decimal
from ..types import PriceSeries, as_closes
from .sma import calculate_sma
from .ema import calculate_ema
from .rsi import wilder_rsi
from .macd import calculate_macd
from .bollinger import calculate_bollinger_bands
from .daily_return import calculate_daily_return

INDICATOR_COLUMNS = (
    "sma20",
    "sma50",
    "ema12",
    "ema26",
    "rsi14",
    "macd",
    "signal",
    "macdHist",
    "bbUpper",
    "bbLower",
    "dailyReturn",
)


def calculate_indicator_set(
    data: Union[PriceSeries, List[Decimal]]
) -> Dict[str, List[Optional[Decimal]]]:
    """
    Calculate all IndicatorSet columns.

    Returns:
        Mapping of column name to a list the length of the input, with None
        before each indicator's lookback.
    """
    closes = as_closes(data)
    macd = calculate_macd(closes)
    bands = calculate_bollinger_bands(closes, period=20, multiplier=Decimal(2))

    return {
        "sma20": calculate_sma(closes, 20),
        "sma50": calculate_sma(closes, 50),
        "ema12": calculate_ema(closes, 12),
        "ema26": calculate_ema(closes, 26),
        "rsi14": wilder_rsi(closes, 14),
        "macd": macd["macd"],
        "signal": macd["signal"],
        "macdHist": macd["macdHist"],
        "bbUpper": bands["upper"],
        "bbLower": bands["lower"],
        "dailyReturn": calculate_daily_return(closes),
    }
