"""
Coin Analytics: technical indicators and risk metrics for crypto price series.
"""
from .config import settings, configure_logging
from .error_models import (
    ErrorCode,
    AnalyticsError,
    InsufficientDataError,
    NonFiniteResultError,
    InvalidInputError,
    SkippedAsset,
)
from .models import (
    RiskProfile,
    IndicatorSet,
    IndicatorReport,
    RiskBatchResponse,
    IndicatorBatchResponse,
)
from .analytics import (
    PriceRow,
    AssetHistory,
    build_risk_profile,
    build_indicator_report,
    calculate_market_analytics,
)
from .cache import ResultCache, InMemoryResultCache, RedisResultCache
from .batch import compute_risk_batch, compute_indicator_batch, run_risk_batch

__version__ = settings.APP_VERSION

__all__ = [
    "settings",
    "configure_logging",
    "ErrorCode",
    "AnalyticsError",
    "InsufficientDataError",
    "NonFiniteResultError",
    "InvalidInputError",
    "SkippedAsset",
    "RiskProfile",
    "IndicatorSet",
    "IndicatorReport",
    "RiskBatchResponse",
    "IndicatorBatchResponse",
    "PriceRow",
    "AssetHistory",
    "build_risk_profile",
    "build_indicator_report",
    "calculate_market_analytics",
    "ResultCache",
    "InMemoryResultCache",
    "RedisResultCache",
    "compute_risk_batch",
    "compute_indicator_batch",
    "run_risk_batch",
]
