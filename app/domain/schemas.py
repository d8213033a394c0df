from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

def compute_score(balance: Decimal, visit_count: int) -> Decimal:
    # visit count doubles as the multiplier
    return balance * visit_count

class NetWorth(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str = Field(exclude=True)
    display_name: str = Field(serialization_alias="displayName")
    score: Decimal
    visit_multiplier: int = Field(serialization_alias="visitMultiplier")

    @field_serializer("score", when_used="json")
    def _score_as_number(self, score: Decimal) -> float:
        return float(score)

class LeaderboardEntry(NetWorth):
    """One leaderboard row, computed from the store at query time."""

class ScoreSnapshot(BaseModel):
    """Cached result of the latest update for one address."""
    model_config = ConfigDict(frozen=True)

    display_name: str = Field(serialization_alias="displayName")
    score: Decimal
    visit_count: int = Field(serialization_alias="visitCount")

    @field_serializer("score", when_used="json")
    def _score_as_number(self, score: Decimal) -> float:
        return float(score)

    @classmethod
    def from_net_worth(cls, result: NetWorth) -> "ScoreSnapshot":
        return cls(
            display_name=result.display_name,
            score=result.score,
            visit_count=result.visit_multiplier,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
