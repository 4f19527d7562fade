"""Cross-round history counters and the end-of-run fairness summary."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterable, Mapping, Sequence, Tuple

from pydantic import BaseModel, Field, NonNegativeInt

from partyshuffle.models import Player, Team


PairKey = Tuple[int, int]
TeamKey = Tuple[int, ...]


def pair_key(a: int, b: int) -> PairKey:
    return (a, b) if a < b else (b, a)


def team_key(members: Iterable[Player]) -> TeamKey:
    return tuple(sorted(member.id for member in members))


def _format_key(key: Sequence[int]) -> str:
    return "-".join(str(part) for part in key)


def _parse_key(raw: str) -> tuple[int, ...]:
    return tuple(int(part) for part in raw.split("-"))


class HistorySnapshot(BaseModel):
    """Serializable ledger state for callers that carry history between calls."""

    pairs: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    teams: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    leaders: Dict[str, NonNegativeInt] = Field(default_factory=dict)


class HistoryLedger:
    """Pair, exact-team and leader counters accumulated across rounds.

    ``record_round`` is the only mutator; every other method is a read.
    """

    def __init__(
        self,
        pairs: Mapping[PairKey, int] | None = None,
        teams: Mapping[TeamKey, int] | None = None,
        leaders: Mapping[int, int] | None = None,
    ):
        self.pairs: defaultdict[PairKey, int] = defaultdict(int, pairs or {})
        self.teams: defaultdict[TeamKey, int] = defaultdict(int, teams or {})
        self.leaders: defaultdict[int, int] = defaultdict(int, leaders or {})
        self.rounds_recorded = 0

    def pair_count(self, a: int, b: int) -> int:
        return self.pairs.get(pair_key(a, b), 0)

    def team_count(self, members: Iterable[Player]) -> int:
        return self.teams.get(team_key(members), 0)

    def leader_count(self, player_id: int) -> int:
        return self.leaders.get(player_id, 0)

    def record_round(self, teams: Sequence[Team]) -> None:
        for team in teams:
            for first, second in combinations(team.members, 2):
                self.pairs[pair_key(first.id, second.id)] += 1
            self.teams[team_key(team.members)] += 1
            leader = team.leader
            if leader is not None:
                self.leaders[leader.id] += 1
        self.rounds_recorded += 1

    def copy(self) -> "HistoryLedger":
        clone = HistoryLedger(self.pairs, self.teams, self.leaders)
        clone.rounds_recorded = self.rounds_recorded
        return clone

    def to_snapshot(self) -> HistorySnapshot:
        return HistorySnapshot(
            pairs={_format_key(key): count for key, count in sorted(self.pairs.items())},
            teams={_format_key(key): count for key, count in sorted(self.teams.items())},
            leaders={str(key): count for key, count in sorted(self.leaders.items())},
        )

    @classmethod
    def from_snapshot(cls, snapshot: HistorySnapshot) -> "HistoryLedger":
        pairs: dict[PairKey, int] = {}
        for raw, count in snapshot.pairs.items():
            a, b = _parse_key(raw)
            pairs[pair_key(a, b)] = count
        teams = {tuple(sorted(_parse_key(raw))): count for raw, count in snapshot.teams.items()}
        leaders = {int(raw): count for raw, count in snapshot.leaders.items()}
        return cls(pairs, teams, leaders)


@dataclass(frozen=True)
class Summary:
    pair_duplicate_total: int
    max_pair_count: int
    duplicate_teams: int
    leader_counts: Dict[int, int]
    max_leader_count: int
    min_leader_count: int
    leader_warning: bool


LEADER_SPREAD_WARNING = 2


def build_summary(players: Sequence[Player], ledger: HistoryLedger) -> Summary:
    """Aggregate repeat and leadership statistics over the whole roster."""

    pair_duplicate_total = sum(max(count - 1, 0) for count in ledger.pairs.values())
    max_pair_count = max(ledger.pairs.values(), default=0)
    duplicate_teams = sum(1 for count in ledger.teams.values() if count > 1)

    leader_counts = {player.id: ledger.leader_count(player.id) for player in players}
    max_leader_count = max(leader_counts.values(), default=0)
    min_leader_count = min(leader_counts.values(), default=0)

    return Summary(
        pair_duplicate_total=pair_duplicate_total,
        max_pair_count=max_pair_count,
        duplicate_teams=duplicate_teams,
        leader_counts=leader_counts,
        max_leader_count=max_leader_count,
        min_leader_count=min_leader_count,
        leader_warning=max_leader_count - min_leader_count >= LEADER_SPREAD_WARNING,
    )
