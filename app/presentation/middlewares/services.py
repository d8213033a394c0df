from typing import Callable, Dict, Any, Awaitable
from aiogram import BaseMiddleware
from aiogram.types import TelegramObject
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.interfaces import AbstractBalanceOracle, AbstractScoreCache
from app.infrastructure.repositories.sqlalchemy import SQLAlchemyUserRepository
from app.use_cases.leaderboard import LeaderboardService
from app.use_cases.user_state import UserStateService

class ServicesMiddleware(BaseMiddleware):
    """Opens a session per update and hands the use cases to handlers."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        oracle: AbstractBalanceOracle,
        score_cache: AbstractScoreCache
    ):
        self.session_factory = session_factory
        self.oracle = oracle
        self.score_cache = score_cache

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any]
    ) -> Any:
        async with self.session_factory() as session:
            user_repo = SQLAlchemyUserRepository(session)

            data["user_state"] = UserStateService(user_repo, self.oracle, self.score_cache)
            data["leaderboard"] = LeaderboardService(user_repo)

            return await handler(event, data)
