"""
Support / Resistance Levels

1. Swing points: a high above the two rows on each side is a swing high,
   a low below the two rows on each side is a swing low
2. Cluster swing points whose prices are within `tolerance` (2%) of a
   cluster's running average price
3. Keep clusters touched at least twice; strength by touches:
   >= 4 strong, >= 3 moderate, else weak
4. Levels above the last close are resistance, the rest support,
   nearest first

Close-only series use the closes as both highs and lows.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from ..types import PriceSeries

MIN_ROWS = 20
SWING_WINDOW = 2


@dataclass(frozen=True)
class SupportResistanceLevel:
    """One clustered price level."""
    price: Decimal
    level_type: str  # "support" | "resistance"
    strength: str  # "strong" | "moderate" | "weak"
    touches: int
    last_tested: int  # timestamp of the latest swing in the cluster

    def to_dict(self) -> dict:
        return {
            "price": self.price,
            "type": self.level_type,
            "strength": self.strength,
            "touches": self.touches,
            "lastTested": self.last_tested,
        }


def _classify_strength(touches: int) -> str:
    if touches >= 4:
        return "strong"
    if touches >= 3:
        return "moderate"
    return "weak"


def find_support_resistance(
    series: PriceSeries,
    tolerance: Decimal = Decimal("0.02"),
    max_levels: int = 10
) -> List[SupportResistanceLevel]:
    """
    Detect support and resistance levels from swing highs and lows.

    Args:
        series: Clean PriceSeries, with or without highs/lows
        tolerance: Relative distance for joining a cluster (default: 2%)
        max_levels: Maximum number of levels returned (default: 10)

    Returns:
        Levels sorted by distance from the last close. Empty for fewer
        than 20 rows.
    """
    n = len(series)
    if n < MIN_ROWS:
        return []

    highs = series.highs if series.has_ohlc else series.closes
    lows = series.lows if series.has_ohlc else series.closes

    swing_points = []
    for i in range(SWING_WINDOW, n - SWING_WINDOW):
        neighbours = [j for j in range(i - SWING_WINDOW, i + SWING_WINDOW + 1) if j != i]
        if all(highs[i] > highs[j] for j in neighbours):
            swing_points.append((highs[i], series.timestamps[i]))
        if all(lows[i] < lows[j] for j in neighbours):
            swing_points.append((lows[i], series.timestamps[i]))

    clusters = []
    for price, timestamp in swing_points:
        for cluster in clusters:
            if abs(price - cluster["price"]) / cluster["price"] < tolerance:
                cluster["touches"] += 1
                touches = cluster["touches"]
                cluster["price"] = (cluster["price"] * (touches - 1) + price) / Decimal(touches)
                cluster["last_tested"] = timestamp
                break
        else:
            clusters.append({"price": price, "touches": 1, "last_tested": timestamp})

    current_price = series.last_close
    levels = [
        SupportResistanceLevel(
            price=cluster["price"],
            level_type="resistance" if cluster["price"] > current_price else "support",
            strength=_classify_strength(cluster["touches"]),
            touches=cluster["touches"],
            last_tested=cluster["last_tested"],
        )
        for cluster in clusters
        if cluster["touches"] >= 2
    ]

    levels.sort(key=lambda level: abs(level.price - current_price))
    return levels[:max_levels]
