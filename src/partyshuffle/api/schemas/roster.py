from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class RosterText(BaseModel):
    text: str = Field(default="")


class ValidationResponse(BaseModel):
    ok: bool
    errors: List[str]
    players: int


class NameCandidatesResponse(BaseModel):
    names: List[str]


class PlayerResponse(BaseModel):
    id: int
    name: str
    rank: str
    score: int
