"""Input adapters that normalize raw roster data."""

from .roster import (
    RosterRow,
    RosterValidationError,
    ValidationResult,
    filter_name_candidates,
    load_roster,
    load_roster_csv,
    parse_roster_text,
    players_from_text,
    rows_to_players,
    validate_roster,
)

__all__ = [
    "RosterRow",
    "RosterValidationError",
    "ValidationResult",
    "filter_name_candidates",
    "load_roster",
    "load_roster_csv",
    "parse_roster_text",
    "players_from_text",
    "rows_to_players",
    "validate_roster",
]
