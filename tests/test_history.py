import pytest
from pydantic import ValidationError

from partyshuffle.models import Player, Team
from partyshuffle.optimizer import HistoryLedger, HistorySnapshot, build_summary


def _players(count: int = 8) -> list[Player]:
    return [Player(id=i, name=f"P{i}", rank="B") for i in range(count)]


def _partition(players: list[Player], *groups: tuple[int, ...]) -> list[Team]:
    return [Team.from_members([players[i] for i in group]) for group in groups]


def test_record_round_updates_every_counter():
    players = _players()
    ledger = HistoryLedger()

    ledger.record_round(_partition(players, (3, 1, 2, 0), (4, 5, 6, 7)))

    assert ledger.pair_count(1, 3) == 1
    assert ledger.pair_count(3, 1) == 1
    assert ledger.pair_count(0, 4) == 0
    assert len(ledger.pairs) == 12
    assert ledger.teams[(0, 1, 2, 3)] == 1
    assert ledger.leaders == {3: 1, 4: 1}
    assert ledger.rounds_recorded == 1


def test_reads_do_not_insert_keys():
    ledger = HistoryLedger()
    ledger.pair_count(0, 1)
    ledger.leader_count(5)
    ledger.team_count(_players()[:4])

    assert not ledger.pairs
    assert not ledger.leaders
    assert not ledger.teams


def test_snapshot_round_trip_preserves_counts():
    players = _players()
    ledger = HistoryLedger()
    ledger.record_round(_partition(players, (0, 1, 2, 3), (4, 5, 6, 7)))
    ledger.record_round(_partition(players, (0, 1, 4, 5), (2, 3, 6, 7)))

    snapshot = ledger.to_snapshot()
    assert snapshot.pairs["0-1"] == 2
    assert snapshot.teams["0-1-2-3"] == 1
    assert snapshot.leaders["0"] == 2

    restored = HistoryLedger.from_snapshot(HistorySnapshot.model_validate(snapshot.model_dump()))
    assert restored.pairs == ledger.pairs
    assert restored.teams == ledger.teams
    assert restored.leaders == ledger.leaders


def test_from_snapshot_rejects_malformed_keys():
    with pytest.raises(ValueError):
        HistoryLedger.from_snapshot(HistorySnapshot(pairs={"7": 1}))


def test_snapshot_rejects_negative_counts():
    with pytest.raises(ValidationError):
        HistorySnapshot(leaders={"0": -1})


def test_copy_is_independent():
    players = _players()
    ledger = HistoryLedger()
    clone = ledger.copy()
    clone.record_round(_partition(players, (0, 1, 2, 3), (4, 5, 6, 7)))

    assert not ledger.pairs
    assert clone.rounds_recorded == 1


def test_build_summary_counts_repeats_and_leaders():
    players = _players()
    ledger = HistoryLedger()
    ledger.record_round(_partition(players, (0, 1, 2, 3), (4, 5, 6, 7)))
    ledger.record_round(_partition(players, (0, 1, 2, 3), (7, 4, 5, 6)))
    ledger.record_round(_partition(players, (0, 4, 1, 5), (2, 6, 3, 7)))

    summary = build_summary(players, ledger)

    # 0-1 and 2-3 and 4-5 and 6-7 shared three rounds; the other in-block pairs two.
    assert summary.max_pair_count == 3
    assert summary.pair_duplicate_total == 4 * 2 + 8 * 1
    assert summary.duplicate_teams == 2
    assert summary.leader_counts == {0: 3, 1: 0, 2: 1, 3: 0, 4: 1, 5: 0, 6: 0, 7: 1}
    assert summary.max_leader_count == 3
    assert summary.min_leader_count == 0
    assert summary.leader_warning


def test_build_summary_without_history():
    summary = build_summary(_players(), HistoryLedger())

    assert summary.pair_duplicate_total == 0
    assert summary.max_pair_count == 0
    assert summary.duplicate_teams == 0
    assert summary.max_leader_count == summary.min_leader_count == 0
    assert not summary.leader_warning


def test_build_summary_empty_roster_defaults_min_to_zero():
    summary = build_summary([], HistoryLedger())
    assert summary.min_leader_count == 0
    assert summary.leader_counts == {}
