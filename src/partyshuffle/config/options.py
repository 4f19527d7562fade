"""Generation options and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Tuple


logger = logging.getLogger(__name__)

VALID_ROSTER_SIZES: Tuple[int, ...] = (8, 12, 16, 20)

_CANDIDATES_ENV = "PARTYSHUFFLE_CANDIDATES"
_SWAP_ITERATIONS_ENV = "PARTYSHUFFLE_SWAP_ITERATIONS"
_BALANCE_WEIGHT_ENV = "PARTYSHUFFLE_BALANCE_WEIGHT"
_DIVERSITY_WEIGHT_ENV = "PARTYSHUFFLE_DIVERSITY_WEIGHT"
_LEADER_WEIGHT_ENV = "PARTYSHUFFLE_LEADER_WEIGHT"
_HARD_PENALTY_ENV = "PARTYSHUFFLE_HARD_PENALTY"


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class GenerateOptions:
    candidate_count: int = 20
    swap_iterations: int = 200
    balance_weight: float = 1.0
    diversity_weight: float = 1.0
    leader_weight: float = 1.0
    hard_penalty: float = 10_000.0

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value!r}")

    @classmethod
    def from_env(cls) -> "GenerateOptions":
        """Build options from PARTYSHUFFLE_* variables, falling back to defaults."""

        defaults = cls()
        return cls(
            candidate_count=_env_int(_CANDIDATES_ENV, defaults.candidate_count, min_value=0),
            swap_iterations=_env_int(_SWAP_ITERATIONS_ENV, defaults.swap_iterations, min_value=0),
            balance_weight=_env_float(_BALANCE_WEIGHT_ENV, defaults.balance_weight, clamp_min=0.0),
            diversity_weight=_env_float(_DIVERSITY_WEIGHT_ENV, defaults.diversity_weight, clamp_min=0.0),
            leader_weight=_env_float(_LEADER_WEIGHT_ENV, defaults.leader_weight, clamp_min=0.0),
            hard_penalty=_env_float(_HARD_PENALTY_ENV, defaults.hard_penalty, clamp_min=0.0),
        )

    def with_overrides(self, **overrides: Any) -> "GenerateOptions":
        """Return a copy with every non-None override applied."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = GenerateOptions()
