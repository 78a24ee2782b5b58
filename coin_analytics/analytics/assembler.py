"""
Result Assembler

Packages indicator arrays and risk scalars with asset identity metadata
into the output contract. This is the only place that:
- rounds values (once, to OUTPUT_DECIMAL_PLACES, ROUND_HALF_UP)
- enforces the all-finite-or-omit rule for risk profiles
- converts AnalyticsError into "no result"
"""
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional, Union

from ..config import settings
from ..error_models import (
    AnalyticsError,
    NonFiniteResultError,
    SkippedAsset,
    skipped_from_error,
)
from ..models import IndicatorReport, IndicatorSet, RiskProfile
from .types import AssetHistory
from .preprocessing import clean_price_series, require_length
from .indicators import calculate_indicator_set, summarize_indicators
from .risk import calculate_risk_metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskAssessment:
    """Either a profile or the reason there is none."""
    asset_id: str
    profile: Optional[RiskProfile] = None
    skipped: Optional[SkippedAsset] = None


@dataclass(frozen=True)
class IndicatorAssessment:
    """Either an indicator report or the reason there is none."""
    asset_id: str
    report: Optional[IndicatorReport] = None
    skipped: Optional[SkippedAsset] = None


def round_value(value: Optional[Decimal], places: Optional[int] = None) -> Optional[float]:
    """
    Round a Decimal for emission; None passes through.

    Raises:
        NonFiniteResultError: value is NaN or infinite
    """
    if value is None:
        return None
    if places is None:
        places = settings.OUTPUT_DECIMAL_PLACES
    if not value.is_finite():
        raise NonFiniteResultError("cannot round a non-finite value")

    # Quantizing needs every integer digit plus `places` fractional digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if quantized == 0:
        return 0.0
    return float(quantized)


def round_column(values: List[Optional[Decimal]], places: Optional[int] = None) -> List[Optional[float]]:
    return [round_value(v, places) for v in values]


def assess_risk_profile(
    asset: AssetHistory,
    min_prices: Optional[int] = None,
    min_returns: Optional[int] = None,
    periods_per_year: Optional[int] = None,
    places: Optional[int] = None
) -> RiskAssessment:
    """
    Compute the risk profile of one asset, or explain why there is none.
    Never raises for insufficient or degenerate data.
    """
    try:
        series = clean_price_series(asset.rows)
        metrics = calculate_risk_metrics(
            series,
            min_prices=min_prices if min_prices is not None else settings.RISK_MIN_PRICE_POINTS,
            min_returns=min_returns if min_returns is not None else settings.RISK_MIN_RETURN_POINTS,
            periods_per_year=periods_per_year if periods_per_year is not None else settings.ANNUALIZATION_DAYS,
        )

        values = {
            "var95": round_value(metrics.var95, places),
            "var99": round_value(metrics.var99, places),
            "sharpe": round_value(metrics.sharpe, places),
            "sortino": round_value(metrics.sortino, places),
            "maxDrawdown": round_value(metrics.max_drawdown, places),
            "volatility": round_value(metrics.volatility, places),
        }
        current_price = float(metrics.current_price)
        if not all(math.isfinite(v) for v in [current_price, *values.values()]):
            raise NonFiniteResultError("risk profile has non-finite fields after rounding")

        profile = RiskProfile(
            id=asset.id,
            symbol=asset.symbol,
            name=asset.name,
            currentPrice=current_price,
            riskLevel=metrics.risk_level,
            **values,
        )
        return RiskAssessment(asset_id=asset.id, profile=profile)
    except AnalyticsError as e:
        logger.debug(f"No risk profile for {asset.id}: {e.error_code.value} ({e.message})")
        return RiskAssessment(asset_id=asset.id, skipped=skipped_from_error(asset.id, e))


def build_risk_profile(asset: AssetHistory, **kwargs) -> Optional[RiskProfile]:
    """Risk profile for one asset, or None when not computable."""
    return assess_risk_profile(asset, **kwargs).profile


def _round_summary(summary: Dict[str, Union[Decimal, str, None]], places: Optional[int]) -> Dict[str, Union[float, str, None]]:
    return {
        key: round_value(value, places) if isinstance(value, Decimal) else value
        for key, value in summary.items()
    }


def assess_indicator_report(asset: AssetHistory, places: Optional[int] = None) -> IndicatorAssessment:
    """
    Compute the IndicatorSet of one asset, or explain why there is none.
    Individual columns may be entirely None for short histories; only an
    empty cleaned series yields no report.
    """
    try:
        series = require_length(clean_price_series(asset.rows), 1, "indicator report")
        columns = calculate_indicator_set(series)

        report = IndicatorReport(
            id=asset.id,
            symbol=asset.symbol,
            name=asset.name,
            currentPrice=float(series.last_close),
            timestamps=list(series.timestamps),
            indicators=IndicatorSet(**{
                name: round_column(values, places) for name, values in columns.items()
            }),
            summary=_round_summary(summarize_indicators(series), places),
        )
        return IndicatorAssessment(asset_id=asset.id, report=report)
    except AnalyticsError as e:
        logger.debug(f"No indicator report for {asset.id}: {e.error_code.value} ({e.message})")
        return IndicatorAssessment(asset_id=asset.id, skipped=skipped_from_error(asset.id, e))


def build_indicator_report(asset: AssetHistory, places: Optional[int] = None) -> Optional[IndicatorReport]:
    """Indicator report for one asset, or None for an empty cleaned series."""
    return assess_indicator_report(asset, places).report
