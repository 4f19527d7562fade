"""Round output utilities (matchups, chat text, export)."""

from .export import export_rounds_to_csv
from .formatting import format_round_for_discord, format_team_line
from .matchups import generate_matchups

__all__ = [
    "export_rounds_to_csv",
    "format_round_for_discord",
    "format_team_line",
    "generate_matchups",
]
