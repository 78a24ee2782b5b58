"""
Risk Metrics Module
Pure functions for per-asset risk analytics.
"""

from .risk_metrics import (
    RiskMetrics,
    calculate_volatility,
    calculate_value_at_risk,
    calculate_sharpe_ratio,
    calculate_sortino_ratio,
    calculate_max_drawdown,
    classify_risk_level,
    calculate_risk_metrics,
)

__all__ = [
    "RiskMetrics",
    "calculate_volatility",
    "calculate_value_at_risk",
    "calculate_sharpe_ratio",
    "calculate_sortino_ratio",
    "calculate_max_drawdown",
    "classify_risk_level",
    "calculate_risk_metrics",
]
