"""
Risk Metrics

Metrics over a clean close series and its simple-return series:
1. Volatility: sample stddev of returns, in percent
2. VaR95 / VaR99: 5th / 1st percentile of returns (linear interpolation),
   negated, floored at 0, in percent
3. Sharpe: mean / stddev * sqrt(365)
4. Sortino: mean / stddev(negative returns) * sqrt(365)
5. Max Drawdown: largest (peak - price) / peak * 100 in one forward pass
6. Risk Level: step function of (volatility %, max drawdown %)

365 is the annualization factor because crypto trades every calendar day.
A result exists only when all six metrics are finite.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union
from decimal import Decimal

from ...error_models import InsufficientDataError, NonFiniteResultError
from ..types import PriceSeries, as_closes
from ..returns import calculate_returns
from .statistics import mean, sample_stddev, percentile

MIN_PRICE_POINTS = 30
MIN_RETURN_POINTS = 20
PERIODS_PER_YEAR = 365

# Relative dispersion below this is Decimal rounding noise, i.e. zero variance
DISPERSION_NOISE_FLOOR = Decimal("1e-20")

# (level, max volatility %, max drawdown %), both bounds exclusive
RISK_LEVEL_THRESHOLDS = (
    (1, Decimal("2.5"), Decimal(35)),
    (2, Decimal("4.0"), Decimal(55)),
    (3, Decimal("6.0"), Decimal(70)),
    (4, Decimal("9.0"), Decimal(85)),
)


@dataclass(frozen=True)
class RiskMetrics:
    """Risk scalars for one asset, all finite."""
    current_price: Decimal
    var95: Decimal
    var99: Decimal
    sharpe: Decimal
    sortino: Decimal
    max_drawdown: Decimal
    volatility: Decimal
    risk_level: int


def calculate_volatility(returns: Sequence[Decimal]) -> Optional[Decimal]:
    """Sample stddev of returns expressed as a percentage."""
    sigma = sample_stddev(returns)
    return sigma * Decimal(100) if sigma is not None else None


def calculate_value_at_risk(returns: Sequence[Decimal], p: Decimal) -> Optional[Decimal]:
    """
    Historical VaR at tail probability p (0.05 for VaR95, 0.01 for VaR99).
    Losses are reported as positive percentages, never below 0.
    """
    quantile = percentile(sorted(returns), p)
    if quantile is None:
        return None
    return max(Decimal(0), -quantile * Decimal(100))


def _is_degenerate(avg: Decimal, sigma: Decimal) -> bool:
    return sigma == 0 or sigma <= abs(avg) * DISPERSION_NOISE_FLOOR


def calculate_sharpe_ratio(
    returns: Sequence[Decimal],
    periods_per_year: int = PERIODS_PER_YEAR
) -> Optional[Decimal]:
    """Annualized mean / stddev; None when stddev is 0 (or rounding noise) or undefined."""
    avg = mean(returns)
    sigma = sample_stddev(returns)
    if avg is None or sigma is None or _is_degenerate(avg, sigma):
        return None
    return avg / sigma * Decimal(periods_per_year).sqrt()


def calculate_sortino_ratio(
    returns: Sequence[Decimal],
    periods_per_year: int = PERIODS_PER_YEAR
) -> Optional[Decimal]:
    """
    Annualized mean / downside stddev. The downside stddev is the sample
    stddev of the negative returns only; None with fewer than 2 of them or
    a zero stddev.
    """
    avg = mean(returns)
    downside_sigma = sample_stddev([r for r in returns if r < 0])
    if avg is None or downside_sigma is None or _is_degenerate(avg, downside_sigma):
        return None
    return avg / downside_sigma * Decimal(periods_per_year).sqrt()


def calculate_max_drawdown(data: Union[PriceSeries, List[Decimal]]) -> Decimal:
    """
    Largest peak-to-trough decline in percent, within [0, 100].
    """
    closes = as_closes(data)
    if not closes:
        return Decimal(0)

    peak = closes[0]
    max_drawdown = Decimal(0)
    for price in closes:
        if price > peak:
            peak = price
        if peak > 0:
            drawdown = (peak - price) / peak * Decimal(100)
            if drawdown > max_drawdown:
                max_drawdown = drawdown

    return max_drawdown


def classify_risk_level(volatility_pct: Decimal, max_drawdown_pct: Decimal) -> int:
    """
    Map (volatility %, max drawdown %) to a 1-5 risk level.

    | Level | Condition                |
    |-------|--------------------------|
    | 1     | vol < 2.5 and dd < 35    |
    | 2     | vol < 4.0 and dd < 55    |
    | 3     | vol < 6.0 and dd < 70    |
    | 4     | vol < 9.0 and dd < 85    |
    | 5     | otherwise                |
    """
    volatility_pct = Decimal(str(volatility_pct))
    max_drawdown_pct = Decimal(str(max_drawdown_pct))
    for level, max_vol, max_dd in RISK_LEVEL_THRESHOLDS:
        if volatility_pct < max_vol and max_drawdown_pct < max_dd:
            return level
    return 5


def calculate_risk_metrics(
    data: Union[PriceSeries, List[Decimal]],
    min_prices: int = MIN_PRICE_POINTS,
    min_returns: int = MIN_RETURN_POINTS,
    periods_per_year: int = PERIODS_PER_YEAR
) -> RiskMetrics:
    """
    Calculate all risk metrics for one asset.

    Args:
        data: Clean PriceSeries or list of positive closing prices
        min_prices: Minimum number of closes (default: 30)
        min_returns: Minimum number of returns (default: 20)
        periods_per_year: Annualization factor (default: 365)

    Raises:
        InsufficientDataError: too few closes or returns
        NonFiniteResultError: a metric is undefined (e.g. zero variance)
    """
    closes = as_closes(data)
    if len(closes) < min_prices:
        raise InsufficientDataError(
            f"risk profile needs {min_prices} closes, got {len(closes)}",
            required_count=min_prices,
            available_count=len(closes),
        )

    returns = calculate_returns(closes)
    if len(returns) < min_returns:
        raise InsufficientDataError(
            f"risk profile needs {min_returns} returns, got {len(returns)}",
            required_count=min_returns,
            available_count=len(returns),
        )

    metrics: Dict[str, Optional[Decimal]] = {
        "volatility": calculate_volatility(returns),
        "var95": calculate_value_at_risk(returns, Decimal("0.05")),
        "var99": calculate_value_at_risk(returns, Decimal("0.01")),
        "sharpe": calculate_sharpe_ratio(returns, periods_per_year),
        "sortino": calculate_sortino_ratio(returns, periods_per_year),
        "max_drawdown": calculate_max_drawdown(closes),
    }

    for name, value in metrics.items():
        if value is None or not value.is_finite():
            raise NonFiniteResultError(f"{name} is not finite for this series", metric=name)

    return RiskMetrics(
        current_price=closes[-1],
        risk_level=classify_risk_level(metrics["volatility"], metrics["max_drawdown"]),
        **metrics,
    )
