import logging

import redis
from core.config import settings

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    global _redis_client

    if _redis_client is None:
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
            socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        )
        logger.info("Redis client created for %s", settings.REDIS_URL)

    return _redis_client


def close_redis():
    global _redis_client
    if _redis_client:
        _redis_client.close()
        _redis_client = None
