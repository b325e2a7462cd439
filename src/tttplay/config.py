"""Startup configuration: which strategy plays each side, and the RNG seed.

Environment-first, with command-line flags taking precedence:
- TTT_PLAYER_X  strategy for X (side 0), default "greedy"
- TTT_PLAYER_O  strategy for O (side 1), default "random"
- TTT_SEED      integer seed for the random strategies (unset = entropy)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .players import PLAYER_KINDS

DEFAULT_PLAYER_X = "greedy"
DEFAULT_PLAYER_O = "random"


def _kind(value: str, var: str) -> str:
    kind = value.strip().lower()
    if kind not in PLAYER_KINDS:
        raise ValueError(f"{var}={value!r} is not one of {', '.join(PLAYER_KINDS)}")
    return kind


def _seed(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"TTT_SEED must be an integer, got {value!r}") from None


@dataclass
class GameConfig:
    player_x: str = DEFAULT_PLAYER_X
    player_o: str = DEFAULT_PLAYER_O
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        return cls(
            player_x=_kind(os.getenv("TTT_PLAYER_X", DEFAULT_PLAYER_X), "TTT_PLAYER_X"),
            player_o=_kind(os.getenv("TTT_PLAYER_O", DEFAULT_PLAYER_O), "TTT_PLAYER_O"),
            seed=_seed(os.getenv("TTT_SEED")),
        )

    def override(
        self,
        player_x: Optional[str] = None,
        player_o: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> "GameConfig":
        return GameConfig(
            player_x=_kind(player_x, "--x") if player_x is not None else self.player_x,
            player_o=_kind(player_o, "--o") if player_o is not None else self.player_o,
            seed=seed if seed is not None else self.seed,
        )

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
