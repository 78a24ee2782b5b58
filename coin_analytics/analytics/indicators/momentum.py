"""
Heuristic Momentum Score

The quick estimate shown by the market screener, derived only from
24h/7d percent changes:

  score = 50 + (change24h + change7d * 0.5) * 2, clamped to [10, 90]

It is NOT an RSI and must not be used where wilder_rsi() is expected.
"""
from typing import Dict, Union
from decimal import Decimal
from ..types import to_decimal

Number = Union[Decimal, int, float, str]

SCORE_FLOOR = Decimal(10)
SCORE_CEILING = Decimal(90)


def heuristic_momentum_score(
    change_24h_pct: Number,
    change_7d_pct: Number = 0
) -> Decimal:
    """
    Calculate the screener's momentum score.

    Args:
        change_24h_pct: 24h price change in percent (e.g. 2.3)
        change_7d_pct: 7d price change in percent (default: 0)

    Returns:
        Score between 10 and 90. Missing changes count as 0; unparsable
        or non-finite ones give 50.
    """
    change_24h = to_decimal(0 if change_24h_pct is None else change_24h_pct)
    change_7d = to_decimal(0 if change_7d_pct is None else change_7d_pct)

    # Unparsable or non-finite changes give the neutral score
    if change_24h is None or change_7d is None:
        return Decimal(50)

    blended_change = change_24h + change_7d * Decimal("0.5")
    score = Decimal(50) + blended_change * Decimal(2)

    return max(SCORE_FLOOR, min(score, SCORE_CEILING))


def label_momentum_score(score: Decimal) -> Dict[str, Union[Decimal, str]]:
    """Attach a coarse label to a heuristic score."""
    if score >= 70:
        label = "strong"
    elif score <= 30:
        label = "weak"
    else:
        label = "moderate"

    return {
        "momentumScore": score,
        "momentumLabel": label
    }
