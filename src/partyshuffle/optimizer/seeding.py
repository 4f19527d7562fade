"""Greedy initial assignment of players into parties."""

from __future__ import annotations

import math
from typing import List, Sequence

from partyshuffle.models import TEAM_SIZE, Player, Team

from .history import HistoryLedger


def _placement_cost(team: Team, player: Player, ledger: HistoryLedger) -> int:
    repeat_cost = sum((ledger.pair_count(member.id, player.id) + 1) ** 2 for member in team.members)
    return team.total + player.score + repeat_cost


def greedy_assign(players: Sequence[Player], ledger: HistoryLedger) -> List[Team]:
    """Place strongest players first into the cheapest open party.

    Ties go to the lowest party index; the score sort is stable.
    """

    team_count = len(players) // TEAM_SIZE
    teams = [Team() for _ in range(team_count)]
    ordered = sorted(players, key=lambda player: player.score, reverse=True)

    for player in ordered:
        best_index = 0
        best_cost = math.inf
        for index, team in enumerate(teams):
            if team.is_full:
                continue
            cost = _placement_cost(team, player, ledger)
            if cost < best_cost:
                best_cost = cost
                best_index = index
        teams[best_index].add(player)

    return teams
