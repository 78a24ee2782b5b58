"""
Redis client for the optional result cache.
The client is created lazily on first use; when Redis is unreachable
get_redis() returns None and callers run without a cache.
"""
import redis
import logging
from typing import Optional
from .config import settings

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None


def create_redis_client() -> redis.Redis:
    """Build a Redis client from settings."""
    redis_pool = redis.ConnectionPool(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        password=settings.REDIS_PASSWORD if settings.REDIS_PASSWORD else None,
        decode_responses=True,
        max_connections=50,
        retry_on_timeout=True,
        health_check_interval=30,
    )
    return redis.Redis(
        connection_pool=redis_pool,
        socket_connect_timeout=5,
        socket_timeout=5,
    )


def get_redis() -> Optional[redis.Redis]:
    """
    Get Redis client instance.
    Returns None if Redis is unavailable (graceful degradation).

    Usage:
        client = get_redis()
        cache = RedisResultCache(client) if client else InMemoryResultCache()
    """
    global _redis_client

    if _redis_client is None:
        try:
            _redis_client = create_redis_client()
        except Exception as e:
            logger.error(f"Failed to initialize Redis: {e}", exc_info=True)
            return None

    try:
        _redis_client.ping()
        return _redis_client
    except (redis.ConnectionError, redis.TimeoutError) as e:
        logger.warning(f"Redis connection failed: {e}. Result cache disabled.")
        return None


def reset_redis() -> None:
    """Drop the lazily created client (tests, settings reloads)."""
    global _redis_client
    _redis_client = None
