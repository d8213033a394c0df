import asyncio
import logging
from pathlib import Path
from sqlalchemy.engine import make_url
from app.config.settings import settings
from app.infrastructure.database.db_helper import engine, Base
from app.infrastructure.database.models import User  # noqa: F401  registers the table

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

async def create_tables():
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    logger.info("Ensuring all tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables checked and created if missing.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(create_tables())
