"""Persist and load CLI option profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from partyshuffle.config import GenerateOptions


@dataclass
class OptionsProfile:
    options: Dict[str, Any]
    rounds: int | None = None

    @classmethod
    def load(cls, path: Path) -> "OptionsProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        known = {item.name for item in fields(GenerateOptions)}
        options = {key: value for key, value in data.get("options", {}).items() if key in known}
        return cls(options=options, rounds=data.get("rounds"))

    @classmethod
    def from_options(cls, options: GenerateOptions, rounds: int | None = None) -> "OptionsProfile":
        return cls(options=options.to_dict(), rounds=rounds)

    def to_options(self, base: GenerateOptions | None = None) -> GenerateOptions:
        return (base or GenerateOptions()).with_overrides(**self.options)

    def save(self, path: Path) -> None:
        payload = {
            "options": self.options,
            "rounds": self.rounds,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
