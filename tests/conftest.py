"""
Shared fixtures: in-memory fakes for the balance oracle, the user repository
and the score cache, plus a throwaway SQLite database for repository tests.
"""

import os

os.environ.setdefault("BOT_TOKEN", "123456:TEST-TOKEN")

from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import pytest
import pytest_asyncio

from app.domain.exceptions import CacheError, OracleError, RecordExistsError, StoreError
from app.domain.interfaces import AbstractBalanceOracle, AbstractScoreCache
from app.domain.repositories import AbstractUserRepository
from app.domain.schemas import ScoreSnapshot
from app.infrastructure.database.db_helper import Base, make_engine, make_session_factory
from app.infrastructure.database.models import User
from app.use_cases.leaderboard import LeaderboardService
from app.use_cases.user_state import UserStateService

ADDRESS_A = "0xABCDEF0123456789abcdef0123456789ABCDEF01"
ADDRESS_B = "0x1234567890abcdef1234567890ABCDEF12345678"
ADDRESS_C = "0x9999aaaabbbbccccddddeeeeffff000011112222"


class FakeBalanceOracle(AbstractBalanceOracle):
    def __init__(self, balances: Optional[Dict[str, Decimal]] = None):
        self.balances = dict(balances or {})
        self.fail = False
        self.calls: List[str] = []

    async def get_balance(self, address: str) -> Decimal:
        self.calls.append(address)
        if self.fail or address not in self.balances:
            raise OracleError(f"lookup failed for {address}")
        return self.balances[address]


class FakeUserRepository(AbstractUserRepository):
    def __init__(self):
        self.users: Dict[str, User] = {}
        self.fail_writes = False
        self.fail_reads = False

    def add(self, address: str, display_name: str, balance: Decimal, visit_count: int) -> User:
        user = User(
            address=address,
            display_name=display_name,
            balance_snapshot=balance,
            visit_count=visit_count
        )
        self.users[address] = user
        return user

    async def get_user(self, address: str) -> Optional[User]:
        if self.fail_reads:
            raise StoreError("read failed")
        return self.users.get(address)

    async def create_user(self, address: str, display_name: str, balance_snapshot: Decimal) -> User:
        if self.fail_writes:
            raise StoreError("create failed")
        if address in self.users:
            raise RecordExistsError(address)
        return self.add(address, display_name, balance_snapshot, 1)

    async def record_visit(self, address: str, balance_snapshot: Decimal) -> User:
        if self.fail_writes:
            raise StoreError("update failed")
        user = self.users.get(address)
        if user is None:
            raise StoreError(f"no record for {address}")
        user.balance_snapshot = balance_snapshot
        user.visit_count += 1
        return user

    async def get_all_users(self) -> List[User]:
        if self.fail_reads:
            raise StoreError("read failed")
        return list(self.users.values())


class FakeScoreCache(AbstractScoreCache):
    def __init__(self):
        self.entries: Dict[str, Tuple[ScoreSnapshot, int]] = {}
        self.fail = False

    async def set_snapshot(self, address: str, snapshot: ScoreSnapshot, ttl: int) -> None:
        if self.fail:
            raise CacheError("redis down")
        self.entries[address] = (snapshot, ttl)


@pytest.fixture
def oracle() -> FakeBalanceOracle:
    return FakeBalanceOracle({ADDRESS_A: Decimal("2.0"), ADDRESS_B: Decimal("5"), ADDRESS_C: Decimal("0")})


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def score_cache() -> FakeScoreCache:
    return FakeScoreCache()


@pytest.fixture
def user_state(user_repo, oracle, score_cache) -> UserStateService:
    return UserStateService(user_repo, oracle, score_cache)


@pytest.fixture
def leaderboard(user_repo) -> LeaderboardService:
    return LeaderboardService(user_repo)


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return make_session_factory(db_engine)
