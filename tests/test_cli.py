import json
from pathlib import Path

import pytest

from partyshuffle.cli import main


def _write_roster(path: Path) -> Path:
    path.write_text("Aki, S\nAki, A\nCal, A\nDan, B\nEri, B\nFay, C\nGus, D\nHal, D\n", encoding="utf-8")
    return path


def test_json_output_keeps_leader_counts_for_duplicate_names(tmp_path: Path, capsys):
    roster = _write_roster(tmp_path / "roster.txt")
    json_path = tmp_path / "rounds.json"

    main([str(roster), "--rounds", "3", "--seed", "11", "--candidates", "3", "--swap-iterations", "40", "--json", str(json_path)])

    assert "[Round 3]" in capsys.readouterr().out
    payload = json.loads(json_path.read_text(encoding="utf-8"))
    leader_counts = payload["summary"]["leader_counts"]
    assert [item["player_id"] for item in leader_counts] == list(range(8))
    assert [item["name"] for item in leader_counts][:2] == ["Aki", "Aki"]
    assert sum(item["count"] for item in leader_counts) == 3 * 2


def test_bad_roster_exits_with_messages(tmp_path: Path):
    roster = tmp_path / "roster.txt"
    roster.write_text("Aki, S\nBen, A\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(roster)])

    assert "Participant count must be 8/12/16/20" in str(excinfo.value)
