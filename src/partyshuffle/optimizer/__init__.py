"""Party optimizer: scoring, seeding, local search and round orchestration."""

from .history import HistoryLedger, HistorySnapshot, Summary, build_summary
from .scoring import RoundMetrics, calculate_metrics
from .service import GenerationResult, RoundData, RoundResult, generate_all_rounds, generate_round_teams

__all__ = [
    "GenerationResult",
    "HistoryLedger",
    "HistorySnapshot",
    "RoundData",
    "RoundMetrics",
    "RoundResult",
    "Summary",
    "build_summary",
    "calculate_metrics",
    "generate_all_rounds",
    "generate_round_teams",
]
