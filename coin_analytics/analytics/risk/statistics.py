"""
Descriptive statistics used by the risk metrics.
Each helper returns None where the statistic is undefined.
"""
from typing import List, Optional, Sequence
from decimal import Decimal


def mean(values: Sequence[Decimal]) -> Optional[Decimal]:
    """Arithmetic mean; None for an empty sequence."""
    if not values:
        return None
    return sum(values) / Decimal(len(values))


def sample_stddev(values: Sequence[Decimal]) -> Optional[Decimal]:
    """Sample standard deviation (divide by n-1); None for fewer than 2 values."""
    if len(values) < 2:
        return None
    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / Decimal(len(values) - 1)
    return variance.sqrt()


def percentile(sorted_values: List[Decimal], p: Decimal) -> Optional[Decimal]:
    """
    Percentile of an ascending list with linear interpolation between
    adjacent order statistics at fractional rank (n-1)*p.
    """
    if not sorted_values:
        return None

    rank = Decimal(len(sorted_values) - 1) * Decimal(str(p))
    lo = int(rank)
    hi = lo if rank == lo else lo + 1
    if lo == hi:
        return sorted_values[lo]

    weight = rank - lo
    return sorted_values[lo] * (Decimal(1) - weight) + sorted_values[hi] * weight
