from aiogram.fsm.storage.redis import RedisStorage
from redis.asyncio import Redis
from app.config.settings import settings

def make_redis() -> Redis:
    return Redis.from_url(settings.REDIS_URL)

def make_redis_storage(redis: Redis) -> RedisStorage:
    return RedisStorage(redis=redis)
