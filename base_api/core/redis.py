"""
Redis connection management for the job queue.
RQ works on a synchronous client; calls from async code are offloaded to a thread.
"""
import asyncio
from typing import Optional

import redis
import structlog

from .config import Settings

logger = structlog.get_logger()


class RedisManager:
    """Owns the Redis client shared by the queue adapter."""

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self._client: Optional[redis.Redis] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisManager":
        return cls(settings.REDIS_URL)

    def initialize(self) -> redis.Redis:
        """Create the client. The connection itself is opened lazily."""
        if self._client is None:
            self._client = redis.Redis.from_url(
                self.redis_url,
                socket_connect_timeout=2,
                socket_timeout=5,
                health_check_interval=30,
            )
            logger.info("Redis client initialized")
        return self._client

    async def health_check(self) -> bool:
        """Check Redis connection health."""
        if not self._client:
            logger.warning("Redis health check skipped - client not initialized")
            return False
        try:
            return bool(await asyncio.wait_for(asyncio.to_thread(self._client.ping), timeout=5.0))
        except (redis.RedisError, asyncio.TimeoutError) as e:
            logger.error("Redis health check failed", error=str(e))
            return False

    def close(self) -> None:
        if self._client:
            self._client.close()
            self._client = None
        logger.info("Redis connections closed")
