"""Round generation: best-of-N candidate selection and the multi-round driver."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from partyshuffle.config import DEFAULT_OPTIONS, GenerateOptions
from partyshuffle.models import Player, Team
from partyshuffle.report import format_round_for_discord, generate_matchups

from .history import HistoryLedger, Summary, build_summary
from .leaders import optimize_leaders_within_teams
from .scoring import RoundMetrics, calculate_metrics
from .search import improve_teams
from .seeding import greedy_assign


logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    teams: List[Team]
    metrics: RoundMetrics
    candidate_scores: List[float] = field(default_factory=list)


@dataclass
class RoundData:
    round: int
    teams: List[Team]
    matchups: List[Tuple[Team, Team]]
    metrics: RoundMetrics
    discord_text: str = ""


@dataclass
class GenerationResult:
    rounds: List[RoundData]
    summary: Summary


def _fallback_round(
    players: Sequence[Player],
    options: GenerateOptions,
    ledger: HistoryLedger,
    rng: random.Random,
) -> RoundResult:
    teams = optimize_leaders_within_teams(greedy_assign(players, ledger), ledger, rng)
    return RoundResult(teams=teams, metrics=calculate_metrics(teams, ledger, options))


def generate_round_teams(
    players: Sequence[Player],
    options: GenerateOptions,
    ledger: HistoryLedger,
    *,
    rng: Optional[random.Random] = None,
) -> RoundResult:
    """Run seed/improve/leader passes ``candidate_count`` times and keep the lowest score.

    The ledger is only read. Ties keep the earliest candidate; with no
    candidates a plain greedy partition is returned instead.
    """

    rng = rng or random.Random()
    best: RoundResult | None = None
    scores: list[float] = []

    for attempt in range(options.candidate_count):
        seeded = greedy_assign(players, ledger)
        improved = improve_teams(seeded, options.swap_iterations, ledger, options, rng)
        ordered = optimize_leaders_within_teams(improved, ledger, rng)
        metrics = calculate_metrics(ordered, ledger, options)
        scores.append(metrics.total_score)
        logger.debug(
            "Candidate %s/%s – score %.1f (balance %.1f, diversity %s, leader %s, hard %.0f)",
            attempt + 1,
            options.candidate_count,
            metrics.total_score,
            metrics.balance_penalty,
            metrics.diversity_penalty,
            metrics.leader_penalty,
            metrics.hard_penalty,
        )
        if best is None or metrics.total_score < best.metrics.total_score:
            best = RoundResult(teams=ordered, metrics=metrics)

    if best is None:
        logger.info("No optimization candidates requested; using greedy assignment")
        return _fallback_round(players, options, ledger, rng)

    best.candidate_scores = scores
    return best


def generate_all_rounds(
    players: Sequence[Player],
    round_count: int,
    options: GenerateOptions = DEFAULT_OPTIONS,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Generate ``round_count`` rounds against a history ledger owned by this call."""

    rng = rng or random.Random(seed)
    ledger = HistoryLedger()
    rounds: list[RoundData] = []
    run_start = time.perf_counter()

    logger.info(
        "Starting round generation – players=%s, rounds=%s, candidates=%s, swaps=%s",
        len(players),
        round_count,
        options.candidate_count,
        options.swap_iterations,
    )

    for round_number in range(1, round_count + 1):
        round_start = time.perf_counter()
        result = generate_round_teams(players, options, ledger, rng=rng)
        matchups = generate_matchups(result.teams, rng)
        round_data = RoundData(
            round=round_number,
            teams=result.teams,
            matchups=matchups,
            metrics=result.metrics,
        )
        round_data.discord_text = format_round_for_discord(round_data)
        rounds.append(round_data)

        ledger.record_round(result.teams)
        logger.info(
            "Round %s – score %.1f, sums %s–%s, hard %.0f (round %.2fs, total %.2fs)",
            round_number,
            result.metrics.total_score,
            result.metrics.min_sum,
            result.metrics.max_sum,
            result.metrics.hard_penalty,
            time.perf_counter() - round_start,
            time.perf_counter() - run_start,
        )

    summary = build_summary(players, ledger)
    if summary.leader_warning:
        logger.warning(
            "Leader counts uneven after %s rounds (max %s, min %s)",
            round_count,
            summary.max_leader_count,
            summary.min_leader_count,
        )
    logger.info(
        "Completed %s rounds in %.2fs (pair repeats %s, duplicate teams %s)",
        round_count,
        time.perf_counter() - run_start,
        summary.pair_duplicate_total,
        summary.duplicate_teams,
    )
    return GenerationResult(rounds=rounds, summary=summary)
