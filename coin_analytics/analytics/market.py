"""
Market Analytics

Cross-sectional columns for a set of coins:
1. Market Share %: market_cap_i / sum(market_cap) * 100
2. Vol/MCap Ratio %: total_volume_i / market_cap_i * 100
3. Performance Score: 0.6 * change24h% + 0.4 * change7d%

Missing values count as 0.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from .types import to_decimal


@dataclass
class MarketRow:
    """Market snapshot for one coin."""
    symbol: str
    market_cap: Optional[Decimal] = None
    total_volume: Optional[Decimal] = None
    change_24h_pct: Optional[Decimal] = None
    change_7d_pct: Optional[Decimal] = None


def _or_zero(value) -> Decimal:
    converted = to_decimal(value)
    return converted if converted is not None else Decimal(0)


def calculate_market_analytics(rows: List[MarketRow]) -> List[Dict[str, Decimal]]:
    """
    Calculate market share, volume/market-cap ratio and performance score.

    Returns:
        One dict per input row, in input order, with keys symbol,
        marketShare, volMcapRatio, perfScore.
    """
    total_market_cap = sum((_or_zero(r.market_cap) for r in rows), Decimal(0))

    analytics = []
    for row in rows:
        market_cap = _or_zero(row.market_cap)
        volume = _or_zero(row.total_volume)

        market_share = market_cap / total_market_cap * Decimal(100) if total_market_cap > 0 else Decimal(0)
        vol_mcap_ratio = volume / market_cap * Decimal(100) if market_cap > 0 else Decimal(0)
        perf_score = (
            _or_zero(row.change_24h_pct) * Decimal("0.6")
            + _or_zero(row.change_7d_pct) * Decimal("0.4")
        )

        analytics.append({
            "symbol": row.symbol,
            "marketShare": market_share,
            "volMcapRatio": vol_mcap_ratio,
            "perfScore": perf_score,
        })

    return analytics
