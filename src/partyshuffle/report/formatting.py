"""Plain-text round reports for posting to chat."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from partyshuffle.models import Team

if TYPE_CHECKING:
    from partyshuffle.optimizer.service import RoundData


NAME_SEPARATOR = " / "


def _party_number(teams: Sequence[Team], team: Team) -> int:
    for index, candidate in enumerate(teams):
        if candidate is team:
            return index + 1
    raise ValueError("Matchup references a party that is not part of the round")


def format_team_line(index: int, team: Team) -> str:
    names = NAME_SEPARATOR.join(member.name for member in team.members)
    return f"Party {index + 1}: {names}"


def format_round_for_discord(round_data: "RoundData") -> str:
    """Render the fixed round layout other tools parse.

    ``[Round n]``, one ``Party i:`` line per party, then ``Matchups:`` with one
    ``- Party i vs Party j`` line per pairing (lower party number first).
    """

    lines = [f"[Round {round_data.round}]"]
    for index, team in enumerate(round_data.teams):
        lines.append(format_team_line(index, team))

    lines.append("Matchups:")
    for first, second in round_data.matchups:
        numbers = sorted((_party_number(round_data.teams, first), _party_number(round_data.teams, second)))
        lines.append(f"- Party {numbers[0]} vs Party {numbers[1]}")

    return "\n".join(lines)
