"""
Return Correlation

Pearson correlation of the simple daily returns of two assets, computed
over the timestamps both cleaned series share.

Relationship labels:
> 0.7 strong_positive, > 0.3 positive, < -0.7 strong_negative,
< -0.3 negative, otherwise neutral.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..error_models import AnalyticsError, InsufficientDataError, NonFiniteResultError
from .returns import calculate_returns
from .types import PriceSeries

logger = logging.getLogger(__name__)

MIN_CORRELATION_POINTS = 30


@dataclass(frozen=True)
class CorrelationResult:
    """Correlation between two assets."""
    symbol_a: str
    symbol_b: str
    correlation: Decimal
    periods: int
    relationship: str

    def to_dict(self) -> dict:
        return {
            "symbol1": self.symbol_a,
            "symbol2": self.symbol_b,
            "correlation": self.correlation,
            "period": f"{self.periods} days",
            "relationship": self.relationship,
        }


def pearson_correlation(xs: Sequence[Decimal], ys: Sequence[Decimal]) -> Optional[Decimal]:
    """Pearson coefficient in [-1, 1]; None for mismatched, short or flat input."""
    n = len(xs)
    if n < 2 or n != len(ys):
        return None

    mean_x = sum(xs) / Decimal(n)
    mean_y = sum(ys) / Decimal(n)

    numerator = Decimal(0)
    sum_sq_x = Decimal(0)
    sum_sq_y = Decimal(0)
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        numerator += dx * dy
        sum_sq_x += dx * dx
        sum_sq_y += dy * dy

    denominator = sum_sq_x.sqrt() * sum_sq_y.sqrt()
    if denominator == 0:
        return None

    return max(Decimal(-1), min(numerator / denominator, Decimal(1)))


def classify_correlation(correlation: Decimal) -> str:
    if correlation > Decimal("0.7"):
        return "strong_positive"
    if correlation > Decimal("0.3"):
        return "positive"
    if correlation < Decimal("-0.7"):
        return "strong_negative"
    if correlation < Decimal("-0.3"):
        return "negative"
    return "neutral"


def calculate_correlation(
    symbol_a: str,
    series_a: PriceSeries,
    symbol_b: str,
    series_b: PriceSeries,
    min_points: int = MIN_CORRELATION_POINTS
) -> CorrelationResult:
    """
    Correlate the daily returns of two cleaned series.

    Raises:
        InsufficientDataError: fewer than min_points shared timestamps
        NonFiniteResultError: either return series has zero variance
    """
    closes_b_by_timestamp = dict(zip(series_b.timestamps, series_b.closes))
    shared = [
        (close_a, closes_b_by_timestamp[timestamp])
        for timestamp, close_a in zip(series_a.timestamps, series_a.closes)
        if timestamp in closes_b_by_timestamp
    ]

    if len(shared) < min_points:
        raise InsufficientDataError(
            f"correlation needs {min_points} shared closes, got {len(shared)}",
            required_count=min_points,
            available_count=len(shared),
        )

    returns_a = calculate_returns([a for a, _ in shared])
    returns_b = calculate_returns([b for _, b in shared])

    correlation = pearson_correlation(returns_a, returns_b)
    if correlation is None:
        raise NonFiniteResultError(
            f"correlation of {symbol_a} and {symbol_b} is undefined", metric="correlation"
        )

    return CorrelationResult(
        symbol_a=symbol_a,
        symbol_b=symbol_b,
        correlation=correlation,
        periods=len(shared),
        relationship=classify_correlation(correlation),
    )


def calculate_correlation_matrix(
    histories: Mapping[str, PriceSeries],
    min_points: int = MIN_CORRELATION_POINTS
) -> Dict[str, Any]:
    """
    Pairwise correlations for several assets.

    Returns:
        {"matrix": {a: {b: Decimal or None}}, "pairs": [CorrelationResult]}.
        The diagonal is 1; a pair that cannot be correlated is None and
        left out of pairs.
    """
    symbols = list(histories)
    matrix: Dict[str, Dict[str, Optional[Decimal]]] = {
        a: {b: Decimal(1) if a == b else None for b in symbols} for a in symbols
    }
    pairs: List[CorrelationResult] = []

    for i, symbol_a in enumerate(symbols):
        for symbol_b in symbols[i + 1:]:
            try:
                result = calculate_correlation(
                    symbol_a, histories[symbol_a], symbol_b, histories[symbol_b], min_points
                )
            except AnalyticsError as e:
                logger.debug(f"No correlation for {symbol_a}/{symbol_b}: {e.message}")
                continue
            matrix[symbol_a][symbol_b] = result.correlation
            matrix[symbol_b][symbol_a] = result.correlation
            pairs.append(result)

    return {"matrix": matrix, "pairs": pairs}
