import logging

from app.domain.address import generate_user_name, validate_address
from app.domain.exceptions import CacheError, OracleError, RecordExistsError
from app.domain.interfaces import AbstractBalanceOracle, AbstractScoreCache
from app.domain.repositories import AbstractUserRepository
from app.domain.schemas import NetWorth, ScoreSnapshot, compute_score

logger = logging.getLogger(__name__)

SCORE_CACHE_TTL = 3600

class UserStateService:
    def __init__(
        self,
        user_repo: AbstractUserRepository,
        oracle: AbstractBalanceOracle,
        score_cache: AbstractScoreCache,
    ):
        self.user_repo = user_repo
        self.oracle = oracle
        self.score_cache = score_cache

    async def update(self, address: str) -> NetWorth:
        """
        Refreshes the balance of an address, counts the visit and returns its net worth.

        Raises InputError, OracleError or StoreError. Nothing is written to the
        store when the balance lookup fails. A failed cache write is only logged.
        """
        address = validate_address(address)
        # Name from the address as sent; the canonical form is only the key
        name = generate_user_name(address)
        address = self.oracle.normalize_address(address)

        balance = await self.oracle.get_balance(address)
        if balance < 0:
            raise OracleError(f"Negative balance {balance} for {address}")

        user = await self.user_repo.get_user(address)
        if user is None:
            try:
                user = await self.user_repo.create_user(address, name, balance)
                logger.info(f"Created new user for address: {address}")
            except RecordExistsError:
                # Lost the insert race to a concurrent first visit
                user = await self.user_repo.record_visit(address, balance)
                logger.info(f"Updated existing user for address: {address}")
        else:
            user = await self.user_repo.record_visit(address, balance)
            logger.info(f"Updated existing user for address: {address}")

        multiplier = user.visit_count
        result = NetWorth(
            address=address,
            display_name=user.display_name,
            score=compute_score(user.balance_snapshot, multiplier),
            visit_multiplier=multiplier,
        )
        await self._write_snapshot(address, result)
        return result

    async def _write_snapshot(self, address: str, result: NetWorth) -> None:
        try:
            await self.score_cache.set_snapshot(address, ScoreSnapshot.from_net_worth(result), SCORE_CACHE_TTL)
        except CacheError as e:
            logger.warning(f"Score cache write failed for {address}: {e}")
