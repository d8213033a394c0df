from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, List
from app.infrastructure.database.models import User

class AbstractUserRepository(ABC):
    @abstractmethod
    async def get_user(self, address: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create_user(self, address: str, display_name: str, balance_snapshot: Decimal) -> User:
        """Inserts a record with visit_count = 1. Raises RecordExistsError if the address is taken."""
        pass

    @abstractmethod
    async def record_visit(self, address: str, balance_snapshot: Decimal) -> User:
        """Overwrites the balance and increments visit_count by one in a single store operation."""
        pass

    @abstractmethod
    async def get_all_users(self) -> List[User]:
        pass
