"""
Result cache collaborator.

The engine never keeps module-level result state. A host that wants to
reuse results injects a ResultCache into the batch driver:

    get(key) -> Optional[(value, timestamp)]
    set(key, value)

Freshness is decided by the caller from the returned timestamp.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple
import json
import logging

import redis

from .config import settings

logger = logging.getLogger(__name__)

CacheEntry = Tuple[Any, datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def is_fresh(timestamp: datetime, ttl_seconds: int, now: Optional[datetime] = None) -> bool:
    """Check whether an entry written at `timestamp` is younger than ttl_seconds."""
    age = ((now or utc_now()) - timestamp).total_seconds()
    return 0 <= age <= ttl_seconds


class ResultCache(ABC):
    """Key/value store for computed results."""

    @abstractmethod
    def get(self, key: str) -> Optional[CacheEntry]:
        """Return (value, timestamp) or None."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value stamped with the current time."""


class InMemoryResultCache(ResultCache):
    """Per-instance dictionary cache."""

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache MISS: {key}")
        else:
            logger.debug(f"Cache HIT: {key}")
        return entry

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, utc_now())
        logger.debug(f"Cache SET: {key}")

    def __len__(self) -> int:
        return len(self._entries)


class RedisResultCache(ResultCache):
    """
    Redis-backed cache. Entries are JSON documents {"value", "timestamp"}
    written with SETEX so Redis expires them on its own as well.
    Redis failures degrade to cache misses.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: Optional[int] = None, prefix: str = "coin_analytics"):
        self._client = client
        self._ttl_seconds = ttl_seconds or settings.RESULT_CACHE_TTL_SECONDS
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str) -> Optional[CacheEntry]:
        try:
            raw = self._client.get(self._key(key))
        except redis.RedisError as e:
            logger.warning(f"Redis cache read error: {e}")
            return None

        if not raw:
            logger.debug(f"Cache MISS: {key}")
            return None

        try:
            cached = json.loads(raw)
            return cached["value"], datetime.fromisoformat(cached["timestamp"])
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable cache entry {key}: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        cached_data = {
            "value": value,
            "timestamp": utc_now().isoformat(),
        }
        try:
            self._client.setex(self._key(key), self._ttl_seconds, json.dumps(cached_data))
        except redis.RedisError as e:
            logger.warning(f"Redis cache write error: {e}")
