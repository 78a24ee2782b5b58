"""
Data structures for Analytics Engine.
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Sequence, Tuple, Union


@dataclass
class PriceRow:
    """
    Canonical input row.

    timestamp: ms since epoch
    close: required; open, high, low, volume are optional (OHLC input)
    Values may be Decimal, int, float or numeric strings; they are
    converted with to_decimal() during preprocessing.
    """
    timestamp: int
    close: Any
    open: Any = None
    high: Any = None
    low: Any = None
    volume: Any = None

    @classmethod
    def from_pair(cls, pair: Tuple[int, Any]) -> 'PriceRow':
        """Create from a (timestamp, price) pair."""
        timestamp, price = pair
        return cls(timestamp=timestamp, close=price)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


RawRow = Union[PriceRow, Tuple[int, Any]]


@dataclass
class AssetHistory:
    """Identity metadata plus the raw, already-fetched price history of one asset."""
    id: str
    symbol: str
    name: str
    rows: Sequence[RawRow] = ()


@dataclass(frozen=True)
class PriceSeries:
    """
    Cleaned, strictly chronological close series.

    highs/lows are carried only when every kept row supplied a usable value.
    """
    timestamps: Tuple[int, ...]
    closes: Tuple[Decimal, ...]
    highs: Optional[Tuple[Decimal, ...]] = None
    lows: Optional[Tuple[Decimal, ...]] = None
    dropped: int = field(default=0, compare=False)

    def __len__(self) -> int:
        return len(self.closes)

    @property
    def has_ohlc(self) -> bool:
        return self.highs is not None and self.lows is not None

    @property
    def last_close(self) -> Optional[Decimal]:
        return self.closes[-1] if self.closes else None

    @property
    def last_timestamp(self) -> Optional[int]:
        return self.timestamps[-1] if self.timestamps else None


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert a raw numeric value to Decimal.
    Returns None for missing, non-numeric or non-finite values.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not result.is_finite():
        return None
    return result


def as_closes(data: Union[PriceSeries, List[Any]]) -> List[Decimal]:
    """
    Extract closing prices from a cleaned series, or coerce an already
    clean list of numbers to Decimal.
    """
    if isinstance(data, PriceSeries):
        return list(data.closes)
    return [d if isinstance(d, Decimal) else Decimal(str(d)) for d in data]
