"""
Pydantic models for the engine's output contract.
Field names are the wire names consumed by spreadsheet writers and JSON
responders, so they are camelCase.
"""
import math
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from .error_models import SkippedAsset


class RiskProfile(BaseModel):
    """Risk scalars for one asset. Only ever built with finite values."""
    id: str
    symbol: str
    name: str
    currentPrice: float
    var95: float
    var99: float
    sharpe: float
    sortino: float
    maxDrawdown: float
    volatility: float
    riskLevel: int = Field(..., ge=1, le=5)

    class Config:
        frozen = True

    @field_validator('currentPrice', 'var95', 'var99', 'sharpe', 'sortino', 'maxDrawdown', 'volatility')
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject NaN and infinities."""
        if not math.isfinite(v):
            raise ValueError("risk profile values must be finite")
        return v


class IndicatorSet(BaseModel):
    """Index-aligned indicator columns; None marks 'not yet computable'."""
    sma20: List[Optional[float]]
    sma50: List[Optional[float]]
    ema12: List[Optional[float]]
    ema26: List[Optional[float]]
    rsi14: List[Optional[float]]
    macd: List[Optional[float]]
    signal: List[Optional[float]]
    macdHist: List[Optional[float]]
    bbUpper: List[Optional[float]]
    bbLower: List[Optional[float]]
    dailyReturn: List[Optional[float]]

    class Config:
        frozen = True

    @model_validator(mode='after')
    def validate_aligned(self) -> 'IndicatorSet':
        """All columns must have the same length."""
        lengths = {len(column) for column in self.model_dump().values()}
        if len(lengths) > 1:
            raise ValueError(f"indicator columns are not aligned: lengths {sorted(lengths)}")
        return self

    def __len__(self) -> int:
        return len(self.sma20)


class IndicatorReport(BaseModel):
    """IndicatorSet with asset identity, timestamps and a latest-value summary."""
    id: str
    symbol: str
    name: str
    currentPrice: float
    timestamps: List[int]
    indicators: IndicatorSet
    summary: Dict[str, Union[float, str, None]] = Field(default_factory=dict)

    @model_validator(mode='after')
    def validate_timestamps(self) -> 'IndicatorReport':
        """Timestamps must align with the indicator columns."""
        if len(self.timestamps) != len(self.indicators):
            raise ValueError("timestamps are not aligned with indicator columns")
        return self


class RiskBatchResponse(BaseModel):
    """Result of a risk batch: profiles plus skip accounting."""
    coins: List[RiskProfile]
    skipped: List[SkippedAsset] = Field(default_factory=list)
    total: int
    successful: int
    failed: int
    timestamp: str


class IndicatorBatchResponse(BaseModel):
    """Result of an indicator batch."""
    reports: List[IndicatorReport]
    skipped: List[SkippedAsset] = Field(default_factory=list)
    total: int
    successful: int
    failed: int
    timestamp: str
