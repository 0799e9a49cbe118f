"""Redis client configuration and connection management."""
from typing import Optional

import redis.asyncio as redis

from src.config import get_settings
from src.logging_config import get_logger

logger = get_logger(__name__)


class RedisClient:
    """Async Redis client singleton."""

    _instance: Optional['RedisClient'] = None
    _redis: Optional[redis.Redis] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    async def connect(self):
        """Initialize Redis connection."""
        if self._redis is None:
            redis_url = get_settings().redis_url
            self._redis = redis.from_url(
                redis_url,
                encoding="utf-8",
                decode_responses=True,
                max_connections=10
            )
            logger.info(f"✅ Connected to Redis: {redis_url}")

    async def disconnect(self):
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("❌ Disconnected from Redis")

    @property
    def client(self) -> redis.Redis:
        """Get Redis client instance."""
        if self._redis is None:
            raise RuntimeError("Redis client not connected. Call connect() first.")
        return self._redis


# Global instance
redis_client = RedisClient()


def get_redis() -> redis.Redis:
    """Dependency returning the connected Redis client."""
    return redis_client.client
