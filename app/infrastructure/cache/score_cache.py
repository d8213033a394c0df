import logging
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.domain.exceptions import CacheError
from app.domain.interfaces import AbstractScoreCache
from app.domain.schemas import ScoreSnapshot

logger = logging.getLogger(__name__)

class RedisScoreCache(AbstractScoreCache):
    def __init__(self, redis: Redis, key_prefix: str = ""):
        self.redis = redis
        self.key_prefix = key_prefix

    def key(self, address: str) -> str:
        return f"{self.key_prefix}{address}"

    async def set_snapshot(self, address: str, snapshot: ScoreSnapshot, ttl: int) -> None:
        try:
            await self.redis.set(self.key(address), snapshot.to_json(), ex=ttl)
        except RedisError as e:
            raise CacheError(f"Failed to cache snapshot for {address}: {e}") from e
        logger.info(f"Cached data for address: {address}")
