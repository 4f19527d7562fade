"""CSV export helpers for generated rounds."""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING, Sequence

from .formatting import NAME_SEPARATOR

if TYPE_CHECKING:
    from partyshuffle.optimizer.service import RoundData


EXPORT_HEADERS = ("round", "party", "leader", "members", "total")


def export_rounds_to_csv(rounds: Sequence["RoundData"]) -> str:
    """One row per party per round."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)

    for round_data in rounds:
        for index, team in enumerate(round_data.teams):
            leader = team.leader
            writer.writerow([
                round_data.round,
                index + 1,
                leader.name if leader is not None else "",
                NAME_SEPARATOR.join(member.name for member in team.members),
                team.total,
            ])

    return buffer.getvalue()


__all__ = [
    "EXPORT_HEADERS",
    "export_rounds_to_csv",
]
