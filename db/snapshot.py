import logging
from typing import Protocol

import redis
from core.config import settings
from db.redis_session import get_redis_client

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    def load(self) -> str | None:
        """Return the most recently saved code, or None when nothing is saved."""
        ...

    def save(self, code: str) -> None:
        """Overwrite the single snapshot slot. Must not raise."""
        ...


class MemorySnapshotStore:
    """Snapshot slot kept in process memory, used when Redis is not configured."""

    def __init__(self, code: str | None = None):
        self._code = code

    def load(self) -> str | None:
        return self._code

    def save(self, code: str) -> None:
        self._code = code


class RedisSnapshotStore:
    """
    Snapshot slot stored under one Redis key.
    The snapshot is a best-effort cache: Redis failures are logged and ignored.
    """

    def __init__(self, client: redis.Redis, key: str = "savedCode"):
        self.client = client
        self.key = key

    def load(self) -> str | None:
        try:
            return self.client.get(self.key)
        except redis.RedisError as e:
            logger.warning("Could not read code snapshot %r: %s", self.key, e)
            return None

    def save(self, code: str) -> None:
        try:
            self.client.set(self.key, code)
        except redis.RedisError as e:
            logger.warning("Could not save code snapshot %r: %s", self.key, e)


def build_snapshot_store() -> SnapshotStore:
    if settings.REDIS_URL:
        return RedisSnapshotStore(get_redis_client(), key=settings.SNAPSHOT_KEY)
    logger.info("REDIS_URL not set, code snapshots are kept in memory")
    return MemorySnapshotStore()
