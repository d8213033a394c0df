import logging
from decimal import Decimal
from typing import Optional, List
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import RecordExistsError, StoreError
from app.domain.repositories import AbstractUserRepository
from app.infrastructure.database.models import User

logger = logging.getLogger(__name__)

class SQLAlchemyUserRepository(AbstractUserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")

    async def get_user(self, address: str) -> Optional[User]:
        stmt = select(User).where(User.address == address)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to read record for {address}") from e
        return result.scalar_one_or_none()

    async def create_user(self, address: str, display_name: str, balance_snapshot: Decimal) -> User:
        user = User(
            address=address,
            display_name=display_name,
            balance_snapshot=balance_snapshot,
            visit_count=1
        )
        self.session.add(user)
        try:
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as e:
            await self._rollback()
            raise RecordExistsError(f"Record for {address} already exists") from e
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to create record for {address}") from e
        return user

    async def record_visit(self, address: str, balance_snapshot: Decimal) -> User:
        # Increment in SQL; overlapping visits are all counted
        stmt = (
            update(User)
            .where(User.address == address)
            .values(balance_snapshot=balance_snapshot, visit_count=User.visit_count + 1)
            .returning(User)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            user = result.scalar_one_or_none()
            if user is None:
                await self._rollback()
                raise StoreError(f"No record to update for {address}")
            # The returned row may be an instance already in the identity map
            await self.session.refresh(user)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to update record for {address}") from e
        return user

    async def get_all_users(self) -> List[User]:
        stmt = select(User)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError("Failed to list records") from e
        return list(result.scalars().all())
