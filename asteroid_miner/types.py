"""Shared type aliases and protocols for the mining simulation."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Vec2 = tuple[float, float]

if TYPE_CHECKING:
    from asteroid_miner.components import Intent
    from asteroid_miner.world import MiningWorld


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    intent: Intent
    random: _random.Random


System = Callable[["MiningWorld", TickContext], None]
