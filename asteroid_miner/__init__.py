"""asteroid-miner - tick-driven beam mining simulation core."""
from __future__ import annotations

from asteroid_miner import vec
from asteroid_miner.clock import Clock
from asteroid_miner.collision import beam_hits_any, beam_intersects
from asteroid_miner.components import Aim, Asteroid, Debris, Intent, Ship
from asteroid_miner.config import MiningConfig, Overflow
from asteroid_miner.controls import BeamLatch, move_vector
from asteroid_miner.engine import Engine
from asteroid_miner.types import TickContext
from asteroid_miner.world import BeamView, FrameView, MiningWorld

__all__ = [
    "Aim",
    "Asteroid",
    "BeamLatch",
    "BeamView",
    "Clock",
    "Debris",
    "Engine",
    "FrameView",
    "Intent",
    "MiningConfig",
    "MiningWorld",
    "Overflow",
    "Ship",
    "TickContext",
    "beam_hits_any",
    "beam_intersects",
    "move_vector",
    "vec",
]
