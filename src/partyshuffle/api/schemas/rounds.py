from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from partyshuffle.optimizer import HistorySnapshot

from .roster import PlayerResponse


class OptionsRequest(BaseModel):
    candidate_count: int | None = Field(default=None, ge=0, le=500)
    swap_iterations: int | None = Field(default=None, ge=0, le=10_000)
    balance_weight: float | None = Field(default=None, ge=0.0)
    diversity_weight: float | None = Field(default=None, ge=0.0)
    leader_weight: float | None = Field(default=None, ge=0.0)
    hard_penalty: float | None = Field(default=None, ge=0.0)


class RoundsRequest(BaseModel):
    roster: str
    rounds: int = Field(default=1, ge=1, le=50)
    options: OptionsRequest = Field(default_factory=OptionsRequest)
    seed: int | None = None


class RoundRequest(BaseModel):
    roster: str
    options: OptionsRequest = Field(default_factory=OptionsRequest)
    seed: int | None = None
    history: HistorySnapshot = Field(default_factory=HistorySnapshot)


class TeamResponse(BaseModel):
    party: int
    leader: str | None
    total: int
    members: List[PlayerResponse]


class MetricsResponse(BaseModel):
    balance_penalty: float
    diversity_penalty: int
    leader_penalty: int
    hard_penalty: float
    total_score: float
    max_sum: int
    min_sum: int
    average_sum: float
    variance: float


class RoundResponse(BaseModel):
    teams: List[TeamResponse]
    metrics: MetricsResponse
    history: HistorySnapshot


class RoundDataResponse(BaseModel):
    round: int
    teams: List[TeamResponse]
    matchups: List[List[int]]
    metrics: MetricsResponse
    discord_text: str


class LeaderCountResponse(BaseModel):
    player_id: int
    name: str
    count: int


class SummaryResponse(BaseModel):
    pair_duplicate_total: int
    max_pair_count: int
    duplicate_teams: int
    leader_counts: List[LeaderCountResponse]
    max_leader_count: int
    min_leader_count: int
    leader_warning: bool


class RoundsResponse(BaseModel):
    rounds: List[RoundDataResponse]
    summary: SummaryResponse
    options: Dict[str, float]
