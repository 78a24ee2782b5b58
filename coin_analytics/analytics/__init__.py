"""
Coin Analytics Engine
Pure, testable indicator and risk metric calculations.
"""

from .types import PriceRow, PriceSeries, AssetHistory
from .preprocessing import clean_price_series, require_length
from .returns import calculate_returns
from .indicators import (
    calculate_sma,
    calculate_ema,
    wilder_rsi,
    calculate_macd,
    calculate_bollinger_bands,
    calculate_daily_return,
    calculate_atr,
    calculate_stochastic,
    heuristic_momentum_score,
    calculate_indicator_set,
    summarize_indicators,
    find_support_resistance,
)
from .risk import (
    RiskMetrics,
    calculate_max_drawdown,
    classify_risk_level,
    calculate_risk_metrics,
)
from .market import MarketRow, calculate_market_analytics
from .correlation import (
    CorrelationResult,
    calculate_correlation,
    calculate_correlation_matrix,
)
from .assembler import (
    round_value,
    assess_risk_profile,
    build_risk_profile,
    assess_indicator_report,
    build_indicator_report,
)

__all__ = [
    # Types
    "PriceRow",
    "PriceSeries",
    "AssetHistory",
    # Preprocessing
    "clean_price_series",
    "require_length",
    "calculate_returns",
    # Indicators
    "calculate_sma",
    "calculate_ema",
    "wilder_rsi",
    "calculate_macd",
    "calculate_bollinger_bands",
    "calculate_daily_return",
    "calculate_atr",
    "calculate_stochastic",
    "heuristic_momentum_score",
    "calculate_indicator_set",
    "summarize_indicators",
    "find_support_resistance",
    # Risk Metrics
    "RiskMetrics",
    "calculate_max_drawdown",
    "classify_risk_level",
    "calculate_risk_metrics",
    # Market Analytics
    "MarketRow",
    "calculate_market_analytics",
    # Correlation
    "CorrelationResult",
    "calculate_correlation",
    "calculate_correlation_matrix",
    # Assembly
    "round_value",
    "assess_risk_profile",
    "build_risk_profile",
    "assess_indicator_report",
    "build_indicator_report",
]
