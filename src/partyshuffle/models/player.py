"""Canonical player and team models shared across ingest and optimizer layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Sequence

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


Rank = Literal["S", "A", "B", "C", "D"]

RANK_SCORES: Dict[str, int] = {
    "S": 5,
    "A": 4,
    "B": 3,
    "C": 2,
    "D": 1,
}

TEAM_SIZE = 4


class Player(BaseModel):
    """Roster entry keyed by its stable line index."""

    id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    rank: Rank

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return RANK_SCORES[self.rank]


@dataclass
class Team:
    """Ordered party members; index 0 is the leader."""

    members: List[Player] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_members(cls, members: Sequence[Player]) -> "Team":
        return cls(members=list(members), total=sum_scores(members))

    @property
    def leader(self) -> Player | None:
        return self.members[0] if self.members else None

    @property
    def is_full(self) -> bool:
        return len(self.members) >= TEAM_SIZE

    def add(self, player: Player) -> None:
        self.members.append(player)
        self.total += player.score

    def copy(self) -> "Team":
        return Team(members=list(self.members), total=self.total)

    def member_ids(self) -> tuple[int, ...]:
        return tuple(member.id for member in self.members)


def sum_scores(members: Sequence[Player]) -> int:
    return sum(member.score for member in members)
