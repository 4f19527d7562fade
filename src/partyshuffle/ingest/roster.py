"""Helpers to load roster text/CSV and emit validated players."""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from pydantic import BaseModel

from partyshuffle.config import VALID_ROSTER_SIZES
from partyshuffle.models import RANK_SCORES, Player


logger = logging.getLogger(__name__)

EMPTY_ROSTER_MESSAGE = "Enter at least one participant"
LINE_FORMAT_MESSAGE = "Each line must be 'name, rank'"
RANK_MESSAGE = "Rank must be one of S/A/B/C/D"
ROSTER_SIZE_MESSAGE = "Participant count must be 8/12/16/20 (a multiple of 4)"

# Hiragana and Katakana blocks plus phonetic extensions and halfwidth forms.
_KANA = "\u3040-\u30ff\u31f0-\u31ff\uff66-\uff9f"
# Han script ranges, including the iteration mark and compatibility ideographs.
_HAN = (
    "\u2e80-\u2fdf\u3005\u3007\u3021-\u3029\u3038-\u303b"
    "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U000323af"
)
_NAME_CHARS = f"{_KANA}{_HAN}A-Za-z0-9ー・_\\-"
_CANDIDATE_PATTERN = re.compile(f"^[{_NAME_CHARS}]{{2,16}}$")
_DISALLOWED_PATTERN = re.compile(f"[^{_NAME_CHARS}]")
_STRIP_PATTERN = re.compile(
    r"[ 　、。，．「」『』（）()\[\]【】<>《》〈〉!！?？:：;；\"'`´]"
)
_WAVE_PATTERN = re.compile(r"[~〜]")


class RosterValidationError(ValueError):
    """Raised when a roster cannot be turned into players."""

    def __init__(self, errors: Sequence[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class RosterRow(BaseModel):
    index: int
    raw_name: str
    raw_rank: str

    @classmethod
    def from_line(cls, index: int, line: str) -> "RosterRow":
        parts = line.split(",")
        name = parts[0].strip()
        rank = parts[1].strip().upper() if len(parts) > 1 else ""
        return cls(index=index, raw_name=name, raw_rank=rank)


@dataclass
class ValidationResult:
    ok: bool
    errors: List[str] = field(default_factory=list)


def _non_blank_lines(text: str) -> list[str]:
    return [line.strip() for line in re.split(r"\r?\n", text) if line.strip()]


def parse_roster_text(text: str) -> list[RosterRow]:
    """Parse ``name, rank`` lines; blank lines are skipped and do not consume an index."""

    return [RosterRow.from_line(index, line) for index, line in enumerate(_non_blank_lines(text))]


def load_roster_csv(path: Path) -> list[RosterRow]:
    """Load a two-column roster CSV, tolerating an optional ``name,rank`` header."""

    rows: list[RosterRow] = []
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.reader(handle)
        for raw in reader:
            if not raw or not any(cell.strip() for cell in raw):
                continue
            if not rows and [cell.strip().lower() for cell in raw[:2]] == ["name", "rank"]:
                continue
            rows.append(RosterRow.from_line(len(rows), ",".join(raw)))
    logger.info("Loaded %s roster rows from %s", len(rows), path)
    return rows


def load_roster(path: Path) -> list[RosterRow]:
    if path.suffix.lower() == ".csv":
        return load_roster_csv(path)
    return parse_roster_text(path.read_text(encoding="utf-8"))


def validate_roster(rows: Sequence[RosterRow]) -> ValidationResult:
    """Collect user-facing problems; only the first bad row is reported."""

    errors: list[str] = []
    if not rows:
        errors.append(EMPTY_ROSTER_MESSAGE)
        return ValidationResult(ok=False, errors=errors)

    for row in rows:
        if not row.raw_name or not row.raw_rank:
            errors.append(LINE_FORMAT_MESSAGE)
            break
        if row.raw_rank not in RANK_SCORES:
            errors.append(RANK_MESSAGE)
            break

    if len(rows) not in VALID_ROSTER_SIZES:
        errors.append(ROSTER_SIZE_MESSAGE)

    return ValidationResult(ok=not errors, errors=errors)


def rows_to_players(rows: Sequence[RosterRow]) -> list[Player]:
    result = validate_roster(rows)
    if not result.ok:
        raise RosterValidationError(result.errors)
    return [Player(id=row.index, name=row.raw_name, rank=row.raw_rank) for row in rows]


def players_from_text(text: str) -> list[Player]:
    return rows_to_players(parse_roster_text(text))


def _normalize_candidate(value: str) -> str:
    value = _STRIP_PATTERN.sub("", value)
    value = _WAVE_PATTERN.sub("〜", value)
    return _DISALLOWED_PATTERN.sub("", value)


def filter_name_candidates(text: str) -> list[str]:
    """Pick name-like tokens out of OCR output, de-duplicated in first-seen order."""

    seen: dict[str, None] = {}
    for line in _non_blank_lines(text):
        tokens: Iterable[str] = line.split() or [line]
        for raw in tokens:
            normalized = _normalize_candidate(raw)
            if _CANDIDATE_PATTERN.match(normalized):
                seen.setdefault(normalized, None)
    return list(seen)
