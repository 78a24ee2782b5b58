"""
Deterministic price series for analytics tests.
"""
import random
from decimal import Decimal
from typing import List, Tuple


def random_walk(n: int, seed: int = 7, start: float = 100.0,
                drift: float = 0.001, vol: float = 0.03) -> List[Decimal]:
    """Geometric random walk of n closes, reproducible for a given seed."""
    rng = random.Random(seed)
    price = start
    closes = []
    for _ in range(n):
        closes.append(Decimal(str(round(price, 6))))
        price *= 1 + rng.gauss(drift, vol)
    return closes


def as_pairs(closes: List[Decimal], start_ms: int = 1_700_000_000_000) -> List[Tuple[int, Decimal]]:
    """Attach daily millisecond timestamps to a close series."""
    day_ms = 86_400_000
    return [(start_ms + i * day_ms, close) for i, close in enumerate(closes)]
