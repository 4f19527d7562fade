"""Pydantic models for API I/O."""

from .roster import NameCandidatesResponse, PlayerResponse, RosterText, ValidationResponse
from .rounds import (
    LeaderCountResponse,
    MetricsResponse,
    OptionsRequest,
    RoundDataResponse,
    RoundRequest,
    RoundResponse,
    RoundsRequest,
    RoundsResponse,
    SummaryResponse,
    TeamResponse,
)

__all__ = [
    "LeaderCountResponse",
    "MetricsResponse",
    "NameCandidatesResponse",
    "OptionsRequest",
    "PlayerResponse",
    "RosterText",
    "RoundDataResponse",
    "RoundRequest",
    "RoundResponse",
    "RoundsRequest",
    "RoundsResponse",
    "SummaryResponse",
    "TeamResponse",
    "ValidationResponse",
]
