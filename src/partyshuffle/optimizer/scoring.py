"""Penalty model used to rank candidate partitions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from partyshuffle.config import GenerateOptions
from partyshuffle.models import Team

from .history import HistoryLedger


BALANCE_SPREAD_FACTOR = 10


@dataclass(frozen=True)
class RoundMetrics:
    balance_penalty: float
    diversity_penalty: int
    leader_penalty: int
    hard_penalty: float
    total_score: float
    max_sum: int
    min_sum: int
    average_sum: float
    variance: float


def balance_penalty(sums: Sequence[int]) -> tuple[float, float]:
    """Return ``(penalty, variance)``.

    The variance is the uncentered sum of squared deviations, deliberately not
    divided by the team count, so larger rosters weigh balance more heavily.
    """

    average = sum(sums) / len(sums)
    variance = sum((value - average) ** 2 for value in sums)
    return (max(sums) - min(sums)) * BALANCE_SPREAD_FACTOR + variance, variance


def diversity_penalty(teams: Sequence[Team], ledger: HistoryLedger) -> int:
    total = 0
    for team in teams:
        for first, second in combinations(team.members, 2):
            total += (ledger.pair_count(first.id, second.id) + 1) ** 2
    return total


def leader_penalty(teams: Sequence[Team], ledger: HistoryLedger) -> int:
    total = 0
    for team in teams:
        leader = team.leader
        if leader is None:
            continue
        total += (ledger.leader_count(leader.id) + 1) ** 2
    return total


def duplicate_team_count(teams: Sequence[Team], ledger: HistoryLedger) -> int:
    return sum(1 for team in teams if ledger.team_count(team.members) > 0)


def calculate_metrics(
    teams: Sequence[Team],
    ledger: HistoryLedger,
    options: GenerateOptions,
) -> RoundMetrics:
    sums = [team.total for team in teams]
    balance, variance = balance_penalty(sums)
    diversity = diversity_penalty(teams, ledger)
    leaders = leader_penalty(teams, ledger)
    hard = options.hard_penalty * duplicate_team_count(teams, ledger)

    total_score = (
        options.balance_weight * balance
        + options.diversity_weight * diversity
        + options.leader_weight * leaders
        + hard
    )

    return RoundMetrics(
        balance_penalty=balance,
        diversity_penalty=diversity,
        leader_penalty=leaders,
        hard_penalty=hard,
        total_score=total_score,
        max_sum=max(sums),
        min_sum=min(sums),
        average_sum=sum(sums) / len(sums),
        variance=variance,
    )
