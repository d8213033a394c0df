from typing import List
from app.domain.repositories import AbstractUserRepository
from app.domain.schemas import LeaderboardEntry, compute_score

class LeaderboardService:
    def __init__(self, user_repo: AbstractUserRepository):
        self.user_repo = user_repo

    async def rank(self) -> List[LeaderboardEntry]:
        """
        All users by score, highest first. Equal scores are ordered by address
        so repeated calls return the same sequence.
        """
        users = await self.user_repo.get_all_users()
        entries = [
            LeaderboardEntry(
                address=user.address,
                display_name=user.display_name,
                score=compute_score(user.balance_snapshot, user.visit_count),
                visit_multiplier=user.visit_count,
            )
            for user in users
        ]
        entries.sort(key=lambda entry: (-entry.score, entry.address))
        return entries

    async def get_top(self, limit: int = 50) -> List[LeaderboardEntry]:
        ranking = await self.rank()
        return ranking[:limit]

    async def get_user_rank(self, address: str) -> int:
        # Position in rank() without sorting; 0 when the address has no record
        users = await self.user_repo.get_all_users()
        keys = {user.address: (-compute_score(user.balance_snapshot, user.visit_count), user.address) for user in users}
        target = keys.get(address)
        if target is None:
            return 0
        return 1 + sum(1 for key in keys.values() if key < target)
