"""Hill-climbing over random pairwise member swaps."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from partyshuffle.config import GenerateOptions
from partyshuffle.models import Team, sum_scores

from .history import HistoryLedger
from .scoring import calculate_metrics


def _swap(teams: Sequence[Team], team_a: int, member_a: int, team_b: int, member_b: int) -> List[Team]:
    """Return a new partition with two members exchanged; untouched parties are shared."""

    swapped = list(teams)
    first = teams[team_a].copy()
    second = teams[team_b].copy()
    first.members[member_a], second.members[member_b] = second.members[member_b], first.members[member_a]
    first.total = sum_scores(first.members)
    second.total = sum_scores(second.members)
    swapped[team_a] = first
    swapped[team_b] = second
    return swapped


def improve_teams(
    teams: Sequence[Team],
    iterations: int,
    ledger: HistoryLedger,
    options: GenerateOptions,
    rng: random.Random,
    *,
    trace: Optional[List[float]] = None,
) -> List[Team]:
    """Accept a swap only when it strictly lowers the total score.

    Equal or worse moves are discarded. When ``trace`` is given the
    starting score and every accepted score are appended to it.
    """

    current = [team.copy() for team in teams]
    if len(current) < 2:
        return current

    current_score = calculate_metrics(current, ledger, options).total_score
    if trace is not None:
        trace.append(current_score)

    for _ in range(iterations):
        team_a = rng.randrange(len(current))
        team_b = rng.randrange(len(current))
        while team_b == team_a:
            team_b = rng.randrange(len(current))
        member_a = rng.randrange(len(current[team_a].members))
        member_b = rng.randrange(len(current[team_b].members))

        candidate = _swap(current, team_a, member_a, team_b, member_b)
        score = calculate_metrics(candidate, ledger, options).total_score
        if score < current_score:
            current = candidate
            current_score = score
            if trace is not None:
                trace.append(score)

    return current
