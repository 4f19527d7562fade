import pytest

from partyshuffle.config import GenerateOptions
from partyshuffle.models import Player, Team
from partyshuffle.optimizer import HistoryLedger, calculate_metrics


def _players(ranks: str) -> list[Player]:
    return [Player(id=i, name=f"P{i}", rank=rank) for i, rank in enumerate(ranks)]


def _partition(players: list[Player], *groups: tuple[int, ...]) -> list[Team]:
    return [Team.from_members([players[i] for i in group]) for group in groups]


def test_metrics_with_empty_history():
    players = _players("SSAABBDD")
    teams = _partition(players, (0, 2, 4, 6), (1, 3, 5, 7))

    metrics = calculate_metrics(teams, HistoryLedger(), GenerateOptions())

    assert metrics.max_sum == metrics.min_sum == 13
    assert metrics.average_sum == pytest.approx(13.0)
    assert metrics.balance_penalty == 0
    assert metrics.diversity_penalty == 12
    assert metrics.leader_penalty == 2
    assert metrics.hard_penalty == 0
    assert metrics.total_score == pytest.approx(14)


def test_balance_uses_uncentered_variance():
    players = _players("SSAABBDD")
    teams = _partition(players, (0, 1, 6, 7), (2, 3, 4, 5))

    metrics = calculate_metrics(teams, HistoryLedger(), GenerateOptions())

    # sums 12 and 14: spread 2 * 10 plus (1 + 1) not divided by team count
    assert metrics.variance == pytest.approx(2.0)
    assert metrics.balance_penalty == pytest.approx(22.0)


def test_history_raises_diversity_and_leader_terms():
    players = _players("SSAABBDD")
    teams = _partition(players, (0, 2, 4, 6), (1, 3, 5, 7))
    ledger = HistoryLedger(pairs={(0, 2): 2}, leaders={0: 1})

    metrics = calculate_metrics(teams, ledger, GenerateOptions())

    assert metrics.diversity_penalty == 12 - 1 + 9
    assert metrics.leader_penalty == 4 + 1


def test_weights_scale_terms():
    players = _players("SSAABBDD")
    teams = _partition(players, (0, 1, 6, 7), (2, 3, 4, 5))
    options = GenerateOptions(balance_weight=2, diversity_weight=0.5, leader_weight=0)

    metrics = calculate_metrics(teams, HistoryLedger(), options)

    assert metrics.total_score == pytest.approx(2 * 22 + 0.5 * 12)


def test_hard_penalty_dominates_balance_and_diversity():
    players = _players("SSDDSSDD")
    ledger = HistoryLedger()
    ledger.record_round(_partition(players, (0, 1, 2, 3), (4, 5, 6, 7)))
    options = GenerateOptions()

    repeated = _partition(players, (0, 1, 2, 3), (4, 5, 6, 7))
    lopsided = _partition(players, (0, 1, 4, 5), (2, 3, 6, 7))

    repeated_metrics = calculate_metrics(repeated, ledger, options)
    lopsided_metrics = calculate_metrics(lopsided, ledger, options)

    assert repeated_metrics.hard_penalty == 2 * options.hard_penalty
    assert lopsided_metrics.hard_penalty == 0
    assert lopsided_metrics.balance_penalty > repeated_metrics.balance_penalty
    assert lopsided_metrics.total_score < repeated_metrics.total_score


def test_hard_penalty_counts_teams_not_repeats():
    players = _players("SSAABBDD")
    first = _partition(players, (0, 2, 4, 6), (1, 3, 5, 7))
    ledger = HistoryLedger()
    for _ in range(3):
        ledger.record_round(first)

    metrics = calculate_metrics(first, ledger, GenerateOptions(hard_penalty=100))
    assert metrics.hard_penalty == 200


def test_metrics_are_deterministic():
    players = _players("SABCDSAB")
    teams = _partition(players, (0, 3, 4, 7), (1, 2, 5, 6))
    ledger = HistoryLedger(pairs={(0, 3): 1}, teams={(1, 2, 5, 6): 1}, leaders={1: 2})

    assert calculate_metrics(teams, ledger, GenerateOptions()) == calculate_metrics(teams, ledger, GenerateOptions())
