"""
Technical Indicators Module
Pure functions for technical analysis.
"""

from .sma import calculate_sma
from .ema import calculate_ema
from .rsi import wilder_rsi
from .macd import calculate_macd
from .bollinger import calculate_bollinger_bands
from .daily_return import calculate_daily_return
from .atr import calculate_atr, calculate_true_range
from .stochastic import calculate_stochastic
from .momentum import heuristic_momentum_score, label_momentum_score
from .indicator_set import INDICATOR_COLUMNS, calculate_indicator_set
from .summary import summarize_indicators
from .support_resistance import SupportResistanceLevel, find_support_resistance

__all__ = [
    "calculate_sma",
    "calculate_ema",
    "wilder_rsi",
    "calculate_macd",
    "calculate_bollinger_bands",
    "calculate_daily_return",
    "calculate_atr",
    "calculate_true_range",
    "calculate_stochastic",
    "heuristic_momentum_score",
    "label_momentum_score",
    "INDICATOR_COLUMNS",
    "calculate_indicator_set",
    "summarize_indicators",
    "SupportResistanceLevel",
    "find_support_resistance",
]
