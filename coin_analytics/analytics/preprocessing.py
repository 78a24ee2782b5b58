"""
Price series preprocessing.

Turns a raw, possibly noisy input series into a clean PriceSeries:
- rows with a non-finite, non-numeric or non-positive close are dropped
- rows whose timestamp is missing or not strictly after the previous kept
  row are dropped (duplicates and out-of-order rows)
- gaps are never interpolated; they only shrink the series

Malformed input is filtered, never rejected with an exception.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from ..error_models import InsufficientDataError
from .types import PriceRow, PriceSeries, RawRow, to_decimal

logger = logging.getLogger(__name__)


def _as_price_row(raw: RawRow) -> Optional[PriceRow]:
    if isinstance(raw, PriceRow):
        return raw
    if isinstance(raw, (tuple, list)) and len(raw) == 2:
        return PriceRow.from_pair(tuple(raw))
    return None


def _as_timestamp(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def clean_price_series(rows: Iterable[RawRow]) -> PriceSeries:
    """
    Validate and normalize raw rows into a PriceSeries.

    Args:
        rows: PriceRow objects or (timestamp, price) pairs, oldest first

    Returns:
        PriceSeries aligned to the kept rows (possibly empty).
    """
    timestamps: List[int] = []
    closes: List[Decimal] = []
    highs: List[Decimal] = []
    lows: List[Decimal] = []
    ohlc_complete = True
    dropped = 0

    for raw in rows:
        row = _as_price_row(raw)
        if row is None:
            dropped += 1
            continue

        timestamp = _as_timestamp(row.timestamp)
        close = to_decimal(row.close)
        if timestamp is None or close is None or close <= 0:
            dropped += 1
            continue
        if timestamps and timestamp <= timestamps[-1]:
            dropped += 1
            continue

        timestamps.append(timestamp)
        closes.append(close)

        if ohlc_complete:
            high = to_decimal(row.high)
            low = to_decimal(row.low)
            if high is None or low is None or high <= 0 or low <= 0:
                ohlc_complete = False
            else:
                highs.append(high)
                lows.append(low)

    if dropped:
        logger.debug(f"Preprocessing dropped {dropped} malformed row(s), kept {len(closes)}")

    has_ohlc = ohlc_complete and bool(closes)
    return PriceSeries(
        timestamps=tuple(timestamps),
        closes=tuple(closes),
        highs=tuple(highs) if has_ohlc else None,
        lows=tuple(lows) if has_ohlc else None,
        dropped=dropped,
    )


def require_length(series: PriceSeries, minimum: int, what: str = "calculation") -> PriceSeries:
    """
    Ensure the cleaned series is long enough.

    Raises:
        InsufficientDataError: cleaned length below minimum
    """
    if len(series) < minimum:
        raise InsufficientDataError(
            f"{what} needs {minimum} closes, got {len(series)}",
            required_count=minimum,
            available_count=len(series),
        )
    return series
