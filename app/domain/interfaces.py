from abc import ABC, abstractmethod
from decimal import Decimal

from app.domain.schemas import ScoreSnapshot

class AbstractBalanceOracle(ABC):
    def normalize_address(self, address: str) -> str:
        """Canonical form used as the record and cache key."""
        return address

    @abstractmethod
    async def get_balance(self, address: str) -> Decimal:
        pass

class AbstractScoreCache(ABC):
    @abstractmethod
    async def set_snapshot(self, address: str, snapshot: ScoreSnapshot, ttl: int) -> None:
        pass
