"""Leader slot rotation within each party."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import List, Sequence

from partyshuffle.models import Player, Team

from .history import HistoryLedger


def _order_members(members: Sequence[Player], ledger: HistoryLedger, rng: random.Random) -> List[Player]:
    groups: defaultdict[int, list[Player]] = defaultdict(list)
    for member in members:
        groups[ledger.leader_count(member.id)].append(member)

    ordered: list[Player] = []
    for count in sorted(groups):
        tied = groups[count]
        rng.shuffle(tied)
        ordered.extend(tied)
    return ordered


def optimize_leaders_within_teams(
    teams: Sequence[Team],
    ledger: HistoryLedger,
    rng: random.Random,
) -> List[Team]:
    """Put the member who has led least in slot 0.

    Members are grouped by leader count and each tied group is shuffled
    independently before the groups are laid out in ascending order.
    """

    return [
        Team(members=_order_members(team.members, ledger, rng), total=team.total)
        for team in teams
    ]
