from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_ignore_empty=True, extra='ignore')

    BOT_TOKEN: SecretStr
    INFURA_URL: str = "https://mainnet.infura.io/v3/your-project-id"
    ORACLE_TIMEOUT: float = 20.0
    REDIS_URL: str = "redis://localhost:6379/0"
    DATABASE_URL: Optional[str] = None
    LEADERBOARD_LIMIT: int = 50

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return "sqlite+aiosqlite:///./data/networth.sqlite3"

settings = Settings()
