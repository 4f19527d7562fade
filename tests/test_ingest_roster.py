from pathlib import Path

import pytest

from partyshuffle.ingest import (
    RosterValidationError,
    filter_name_candidates,
    load_roster,
    load_roster_csv,
    parse_roster_text,
    players_from_text,
    rows_to_players,
    validate_roster,
)


def _roster_text(count: int = 8) -> str:
    ranks = "SABCD"
    return "\n".join(f"Player {i}, {ranks[i % 5].lower()}" for i in range(count))


def test_parse_roster_text_skips_blank_lines():
    rows = parse_roster_text("  Aki, s \r\n\n Ben ,A\n")

    assert [row.index for row in rows] == [0, 1]
    assert rows[0].raw_name == "Aki"
    assert rows[0].raw_rank == "S"
    assert rows[1].raw_name == "Ben"


def test_parse_roster_text_missing_rank():
    rows = parse_roster_text("Aki")
    assert rows[0].raw_rank == ""


def test_validate_roster_accepts_valid_sizes():
    for count in (8, 12, 16, 20):
        result = validate_roster(parse_roster_text(_roster_text(count)))
        assert result.ok, result.errors


def test_validate_roster_empty():
    result = validate_roster([])
    assert not result.ok
    assert result.errors == ["Enter at least one participant"]


def test_validate_roster_reports_format_and_size():
    rows = parse_roster_text("Aki, S\nBen\nCal, Q")
    result = validate_roster(rows)

    assert not result.ok
    assert result.errors == [
        "Each line must be 'name, rank'",
        "Participant count must be 8/12/16/20 (a multiple of 4)",
    ]


def test_validate_roster_reports_bad_rank():
    text = _roster_text(7) + "\nLast, X"
    result = validate_roster(parse_roster_text(text))
    assert result.errors == ["Rank must be one of S/A/B/C/D"]


def test_rows_to_players_assigns_ids_and_scores():
    players = players_from_text(_roster_text(8))

    assert [player.id for player in players] == list(range(8))
    assert players[0].rank == "S"
    assert players[0].score == 5
    assert players[4].score == 1


def test_rows_to_players_raises_with_messages():
    with pytest.raises(RosterValidationError) as excinfo:
        rows_to_players(parse_roster_text(_roster_text(6)))
    assert excinfo.value.errors == ["Participant count must be 8/12/16/20 (a multiple of 4)"]


def test_duplicate_names_keep_distinct_ids():
    text = "\n".join(["Same, S"] * 4 + ["Other, D"] * 4)
    players = players_from_text(text)
    assert len({player.id for player in players}) == 8


def test_load_roster_csv_with_header(tmp_path: Path):
    path = tmp_path / "roster.csv"
    path.write_text("name,rank\n" + _roster_text(8) + "\n\n", encoding="utf-8")

    rows = load_roster_csv(path)

    assert len(rows) == 8
    assert rows[0].index == 0
    assert rows[0].raw_name == "Player 0"
    assert rows[0].raw_rank == "S"


def test_load_roster_dispatches_on_suffix(tmp_path: Path):
    path = tmp_path / "roster.txt"
    path.write_text(_roster_text(8), encoding="utf-8")
    assert len(load_roster(path)) == 8


def test_filter_name_candidates_normalizes_tokens():
    text = "「たなか」 Suzuki!\n(x)\nやまだ・花子\nSuzuki\n山田太郎さんです、よろしく。"

    names = filter_name_candidates(text)

    assert names[:3] == ["たなか", "Suzuki", "やまだ・花子"]
    assert "x" not in names
    assert names.count("Suzuki") == 1


def test_filter_name_candidates_length_bounds():
    names = filter_name_candidates("A\n" + "B" * 17 + "\nOK")
    assert names == ["OK"]


def test_filter_name_candidates_keeps_iteration_mark_and_halfwidth_kana():
    names = filter_name_candidates("佐々木\nﾀﾅｶ\nｶﾞｰﾄﾞ\n𠮷野")

    assert names == ["佐々木", "ﾀﾅｶ", "ｶﾞｰﾄﾞ", "𠮷野"]
