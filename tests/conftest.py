"""
Pytest configuration and shared fixtures.
"""
import pytest
import redis
from typing import Callable, List
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from coin_analytics import redis_client
from coin_analytics.analytics.tests.helpers import as_pairs, random_walk
from coin_analytics.analytics.types import AssetHistory
from coin_analytics.config import settings


class MockRedis:
    """In-memory stand-in for the synchronous redis client."""

    def __init__(self):
        self._data = {}
        self.ttls = {}

    def ping(self):
        return True

    def get(self, key: str):
        return self._data.get(key)

    def setex(self, key: str, ttl: int, value: str):
        self._data[key] = value
        self.ttls[key] = ttl
        return True

    def delete(self, key: str):
        self.ttls.pop(key, None)
        return self._data.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self._data)


class FailingRedis:
    """Client whose every call fails like an unreachable server."""

    def ping(self):
        raise redis.ConnectionError("Connection refused")

    def get(self, key: str):
        raise redis.ConnectionError("Connection refused")

    def setex(self, key: str, ttl: int, value: str):
        raise redis.ConnectionError("Connection refused")


@pytest.fixture(scope="function")
def mock_redis():
    """Mock Redis client for tests."""
    return MockRedis()


@pytest.fixture(scope="function")
def failing_redis():
    """Redis client that is always down."""
    return FailingRedis()


@pytest.fixture(scope="function")
def make_asset() -> Callable[..., AssetHistory]:
    """Factory for assets with a deterministic daily history."""
    def _make_asset(asset_id: str = "bitcoin", points: int = 365, seed: int = 7) -> AssetHistory:
        return AssetHistory(
            id=asset_id,
            symbol=asset_id[:3],
            name=asset_id.title(),
            rows=as_pairs(random_walk(points, seed=seed)),
        )
    return _make_asset


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Reset settings to test values before each test."""
    monkeypatch.setattr(settings, "SENTRY_DSN", "")  # Disable Sentry in tests
    monkeypatch.setattr(settings, "BATCH_CONCURRENCY", 4)
    monkeypatch.setattr(settings, "RESULT_CACHE_TTL_SECONDS", 300)
    monkeypatch.setattr(settings, "OUTPUT_DECIMAL_PLACES", 4)
    redis_client.reset_redis()
    yield
    redis_client.reset_redis()
