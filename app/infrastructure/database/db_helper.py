from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import DeclarativeBase

from app.config.settings import settings

class Base(DeclarativeBase):
    pass

def make_engine(url: str) -> AsyncEngine:
    return create_async_engine(url=url, echo=False)

def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )

engine = make_engine(settings.database_url)
session_factory = make_session_factory(engine)

async def check_connection(bind: AsyncEngine = engine) -> bool:
    async with bind.connect() as conn:
        result = await conn.execute(text("SELECT 1"))
        return result.scalar() == 1
