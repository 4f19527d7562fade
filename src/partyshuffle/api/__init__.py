"""REST API for the partyshuffle optimizer."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Sequence

from fastapi import FastAPI, HTTPException

from partyshuffle.api.schemas import (
    LeaderCountResponse,
    MetricsResponse,
    NameCandidatesResponse,
    OptionsRequest,
    PlayerResponse,
    RosterText,
    RoundDataResponse,
    RoundRequest,
    RoundResponse,
    RoundsRequest,
    RoundsResponse,
    SummaryResponse,
    TeamResponse,
    ValidationResponse,
)
from partyshuffle.config import GenerateOptions
from partyshuffle.ingest import (
    RosterValidationError,
    filter_name_candidates,
    parse_roster_text,
    players_from_text,
    validate_roster,
)
from partyshuffle.models import Player, Team
from partyshuffle.optimizer import (
    HistoryLedger,
    RoundData,
    RoundMetrics,
    Summary,
    generate_all_rounds,
    generate_round_teams,
)


logger = logging.getLogger(__name__)


def _player_to_response(player: Player) -> PlayerResponse:
    return PlayerResponse(id=player.id, name=player.name, rank=player.rank, score=player.score)


def _team_to_response(index: int, team: Team) -> TeamResponse:
    leader = team.leader
    return TeamResponse(
        party=index + 1,
        leader=leader.name if leader is not None else None,
        total=team.total,
        members=[_player_to_response(member) for member in team.members],
    )


def _metrics_to_response(metrics: RoundMetrics) -> MetricsResponse:
    return MetricsResponse(**asdict(metrics))


def _round_to_response(round_data: RoundData) -> RoundDataResponse:
    positions = {id(team): index + 1 for index, team in enumerate(round_data.teams)}
    return RoundDataResponse(
        round=round_data.round,
        teams=[_team_to_response(index, team) for index, team in enumerate(round_data.teams)],
        matchups=[sorted((positions[id(first)], positions[id(second)])) for first, second in round_data.matchups],
        metrics=_metrics_to_response(round_data.metrics),
        discord_text=round_data.discord_text,
    )


def _summary_to_response(summary: Summary, players: Sequence[Player]) -> SummaryResponse:
    return SummaryResponse(
        pair_duplicate_total=summary.pair_duplicate_total,
        max_pair_count=summary.max_pair_count,
        duplicate_teams=summary.duplicate_teams,
        leader_counts=[
            LeaderCountResponse(player_id=player.id, name=player.name, count=summary.leader_counts.get(player.id, 0))
            for player in players
        ],
        max_leader_count=summary.max_leader_count,
        min_leader_count=summary.min_leader_count,
        leader_warning=summary.leader_warning,
    )


def _load_players(text: str) -> list[Player]:
    try:
        return players_from_text(text)
    except RosterValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.errors) from exc


def create_app(default_options: GenerateOptions | None = None) -> FastAPI:
    app = FastAPI(title="partyshuffle optimizer")
    app.state.default_options = default_options or GenerateOptions.from_env()

    def resolve_options(request: OptionsRequest) -> GenerateOptions:
        return app.state.default_options.with_overrides(**request.model_dump())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(payload: RosterText) -> ValidationResponse:
        rows = parse_roster_text(payload.text)
        result = validate_roster(rows)
        return ValidationResponse(ok=result.ok, errors=result.errors, players=len(rows))

    @app.post("/candidates", response_model=NameCandidatesResponse)
    async def candidates(payload: RosterText) -> NameCandidatesResponse:
        return NameCandidatesResponse(names=filter_name_candidates(payload.text))

    @app.post("/rounds", response_model=RoundsResponse)
    async def rounds(payload: RoundsRequest) -> RoundsResponse:
        players = _load_players(payload.roster)
        options = resolve_options(payload.options)
        logger.info("Generating %s rounds for %s players (seed=%s)", payload.rounds, len(players), payload.seed)
        result = generate_all_rounds(players, payload.rounds, options, seed=payload.seed)
        return RoundsResponse(
            rounds=[_round_to_response(round_data) for round_data in result.rounds],
            summary=_summary_to_response(result.summary, players),
            options=options.to_dict(),
        )

    @app.post("/round", response_model=RoundResponse)
    async def single_round(payload: RoundRequest) -> RoundResponse:
        players = _load_players(payload.roster)
        options = resolve_options(payload.options)
        try:
            ledger = HistoryLedger.from_snapshot(payload.history)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid history: {exc}") from exc

        result = generate_round_teams(players, options, ledger, rng=random.Random(payload.seed))
        ledger.record_round(result.teams)
        return RoundResponse(
            teams=[_team_to_response(index, team) for index, team in enumerate(result.teams)],
            metrics=_metrics_to_response(result.metrics),
            history=ledger.to_snapshot(),
        )

    return app
