"""
Batch driver.

Fans out one computation per asset and fans in with isolated per-asset
failure (all-settled): an asset that yields no result, or even raises
unexpectedly, never aborts or delays the rest of the batch.

Computations are CPU-bound, so each runs in a worker thread and an
asyncio.Semaphore caps how many run at once (BATCH_CONCURRENCY).
"""
import asyncio
import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple, Union

from .analytics.assembler import (
    IndicatorAssessment,
    RiskAssessment,
    assess_indicator_report,
    assess_risk_profile,
)
from .analytics.preprocessing import clean_price_series
from .analytics.types import AssetHistory, PriceSeries
from .cache import ResultCache, is_fresh, utc_now
from .config import settings
from .error_models import SkippedAsset, skipped_from_error
from .models import IndicatorBatchResponse, RiskBatchResponse, RiskProfile

logger = logging.getLogger(__name__)

Assessment = Union[RiskAssessment, IndicatorAssessment]


def risk_cache_key(asset_id: str, series: PriceSeries) -> str:
    """
    Cache key tied to the cleaned history and to the settings that shape a
    profile, so new closes or changed thresholds never hit stale entries.
    """
    profile_settings = (
        f"{settings.RISK_MIN_PRICE_POINTS}-{settings.RISK_MIN_RETURN_POINTS}-"
        f"{settings.ANNUALIZATION_DAYS}-{settings.OUTPUT_DECIMAL_PLACES}"
    )
    return (
        f"risk_profile:{asset_id}:{len(series)}:{series.last_timestamp}:"
        f"{series.last_close}:{profile_settings}"
    )


def _assess_risk_cached(asset: AssetHistory, cache: Optional[ResultCache]) -> RiskAssessment:
    if cache is None:
        return assess_risk_profile(asset)

    # Rows may be a one-shot iterator; materialize before cleaning twice
    asset = dataclasses.replace(asset, rows=list(asset.rows))
    key = risk_cache_key(asset.id, clean_price_series(asset.rows))

    entry = cache.get(key)
    if entry is not None:
        value, written_at = entry
        if is_fresh(written_at, settings.RESULT_CACHE_TTL_SECONDS):
            # Identity comes from the request, not from whoever filled the cache
            profile = RiskProfile.model_validate({
                **value, "id": asset.id, "symbol": asset.symbol, "name": asset.name
            })
            return RiskAssessment(asset_id=asset.id, profile=profile)

    assessment = assess_risk_profile(asset)
    if assessment.profile is not None:
        cache.set(key, assessment.profile.model_dump())
    return assessment


async def _gather_bounded(func, assets: Sequence[AssetHistory], concurrency: Optional[int], *args) -> list:
    limit = concurrency if concurrency is not None else settings.BATCH_CONCURRENCY
    if limit < 1:
        raise ValueError("concurrency must be at least 1")

    semaphore = asyncio.Semaphore(limit)

    async def run_one(asset: AssetHistory):
        async with semaphore:
            return await asyncio.to_thread(func, asset, *args)

    return await asyncio.gather(*[run_one(asset) for asset in assets], return_exceptions=True)


def _settle(assets: Sequence[AssetHistory], results: list, what: str) -> Tuple[List[Assessment], List[SkippedAsset]]:
    settled: List[Assessment] = []
    skipped: List[SkippedAsset] = []

    for asset, result in zip(assets, results):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.error(f"Unexpected error computing {what} for {asset.id}: {result}", exc_info=result)
            skipped.append(skipped_from_error(asset.id, result))
        elif result.skipped is not None:
            skipped.append(result.skipped)
        else:
            settled.append(result)

    return settled, skipped


async def compute_risk_batch(
    assets: Sequence[AssetHistory],
    concurrency: Optional[int] = None,
    cache: Optional[ResultCache] = None
) -> RiskBatchResponse:
    """
    Compute risk profiles for many assets.

    Args:
        assets: Assets with their already-fetched price history
        concurrency: Max computations in flight (default: BATCH_CONCURRENCY)
        cache: Optional injected result cache

    Returns:
        RiskBatchResponse with profiles in input order and skip accounting.
    """
    assets = list(assets)
    results = await _gather_bounded(_assess_risk_cached, assets, concurrency, cache)
    settled, skipped = _settle(assets, results, "risk profile")

    if skipped:
        logger.info(f"Risk batch skipped {len(skipped)} of {len(assets)} asset(s): "
                    f"{', '.join(s.id for s in skipped)}")

    return RiskBatchResponse(
        coins=[assessment.profile for assessment in settled],
        skipped=skipped,
        total=len(assets),
        successful=len(settled),
        failed=len(skipped),
        timestamp=utc_now().isoformat(),
    )


async def compute_indicator_batch(
    assets: Sequence[AssetHistory],
    concurrency: Optional[int] = None
) -> IndicatorBatchResponse:
    """Compute indicator reports for many assets (same fan-out as risk)."""
    assets = list(assets)
    results = await _gather_bounded(assess_indicator_report, assets, concurrency)
    settled, skipped = _settle(assets, results, "indicator report")

    if skipped:
        logger.info(f"Indicator batch skipped {len(skipped)} of {len(assets)} asset(s)")

    return IndicatorBatchResponse(
        reports=[assessment.report for assessment in settled],
        skipped=skipped,
        total=len(assets),
        successful=len(settled),
        failed=len(skipped),
        timestamp=utc_now().isoformat(),
    )


def run_risk_batch(
    assets: Sequence[AssetHistory],
    concurrency: Optional[int] = None,
    cache: Optional[ResultCache] = None
) -> RiskBatchResponse:
    """Synchronous entry point for hosts without an event loop."""
    return asyncio.run(compute_risk_batch(assets, concurrency=concurrency, cache=cache))
