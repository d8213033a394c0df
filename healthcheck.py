#!/usr/bin/env python3
"""
Health check script for monitoring bot dependencies.
Returns exit code 0 if the database and Redis respond, 1 otherwise.
"""
import sys
import asyncio

from sqlalchemy.exc import SQLAlchemyError
from redis.exceptions import RedisError

from app.infrastructure.cache.factory import make_redis
from app.infrastructure.database.db_helper import check_connection, engine

async def check_database() -> bool:
    try:
        if not await check_connection():
            print("ERROR: Database returned an unexpected result")
            return False
    except SQLAlchemyError as e:
        print(f"ERROR: Database check failed: {e}")
        return False
    finally:
        await engine.dispose()
    print("OK: Database is reachable")
    return True

async def check_redis() -> bool:
    redis = make_redis()
    try:
        if not await redis.ping():
            print("ERROR: Redis did not answer PING")
            return False
    except RedisError as e:
        print(f"ERROR: Redis check failed: {e}")
        return False
    finally:
        await redis.aclose()
    print("OK: Redis is reachable")
    return True

async def check_bot_health():
    """Check if bot dependencies are healthy"""
    database_ok = await check_database()
    redis_ok = await check_redis()
    return database_ok and redis_ok

if __name__ == "__main__":
    result = asyncio.run(check_bot_health())
    sys.exit(0 if result else 1)
