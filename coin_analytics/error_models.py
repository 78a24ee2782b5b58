"""
Error taxonomy for the analytics engine.

Calculators raise these exceptions internally. The assembler and the batch
driver catch them at the public boundary and turn them into "no result",
so a degenerate asset never aborts a batch.
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field
from enum import Enum


class ErrorCode(str, Enum):
    """Reason codes for an asset that produced no result."""
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    NON_FINITE_RESULT = "NON_FINITE_RESULT"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AnalyticsError(Exception):
    """Base class for computations that cannot produce a result."""

    error_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InsufficientDataError(AnalyticsError):
    """Cleaned series is shorter than the required lookback."""

    error_code = ErrorCode.INSUFFICIENT_DATA

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class NonFiniteResultError(AnalyticsError):
    """A ratio or statistic is undefined for this input (e.g. zero variance)."""

    error_code = ErrorCode.NON_FINITE_RESULT

    def __init__(self, message: str, metric: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric = metric


class InvalidInputError(AnalyticsError):
    """Raw input could not be interpreted at all."""

    error_code = ErrorCode.INVALID_INPUT


class SkippedAsset(BaseModel):
    """Batch bookkeeping for an asset that was omitted from the output."""
    id: str = Field(..., description="Asset id as requested")
    reason: ErrorCode = Field(..., description="Why no result was produced")
    detail: Optional[str] = Field(None, description="Human-readable detail")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "new-listing-coin",
                "reason": "INSUFFICIENT_DATA",
                "detail": "risk profile needs 30 closes, got 10",
            }
        }


def skipped_from_error(asset_id: str, error: Exception) -> SkippedAsset:
    """Build a SkippedAsset record from any exception."""
    if isinstance(error, AnalyticsError):
        return SkippedAsset(id=asset_id, reason=error.error_code, detail=error.message)
    return SkippedAsset(id=asset_id, reason=ErrorCode.INTERNAL_ERROR, detail=str(error))
