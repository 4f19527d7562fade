"""Domain models for rosters and parties."""

from .player import RANK_SCORES, TEAM_SIZE, Player, Rank, Team, sum_scores

__all__ = ["RANK_SCORES", "TEAM_SIZE", "Player", "Rank", "Team", "sum_scores"]
