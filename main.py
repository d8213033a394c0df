import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher

from app.config.settings import settings
from app.infrastructure.blockchain.oracle import Web3BalanceOracle
from app.infrastructure.cache.factory import make_redis, make_redis_storage
from app.infrastructure.cache.score_cache import RedisScoreCache
from app.infrastructure.database.db_helper import engine, session_factory
from app.presentation.handlers import user
from app.presentation.middlewares.error_handler import ErrorHandlingMiddleware
from app.presentation.middlewares.services import ServicesMiddleware

async def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    # Initialize Bot
    bot = Bot(token=settings.BOT_TOKEN.get_secret_value())

    # Redis backs both the FSM storage and the score cache
    redis = make_redis()
    storage = make_redis_storage(redis)
    score_cache = RedisScoreCache(redis)

    oracle = Web3BalanceOracle(settings.INFURA_URL, timeout=settings.ORACLE_TIMEOUT)

    dp = Dispatcher(storage=storage)

    # Register Middlewares
    dp.update.middleware(ServicesMiddleware(session_factory, oracle, score_cache))
    dp.message.middleware(ErrorHandlingMiddleware())

    # Register Routers
    dp.include_router(user.router)

    logging.info("Starting bot...")
    try:
        await bot.delete_webhook(drop_pending_updates=True)
        await dp.start_polling(bot)
    finally:
        await oracle.close()
        await storage.close()
        await engine.dispose()
        await bot.session.close()

if __name__ == "__main__":
    try:
        if sys.platform == "win32":
            asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.info("Bot stopped!")
