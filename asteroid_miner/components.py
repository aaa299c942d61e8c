"""Entity components and the per-tick input record."""
from __future__ import annotations

from dataclasses import dataclass, field

from asteroid_miner.config import (
    ASTEROID_RADIUS,
    DEBRIS_LIFETIME,
    DEBRIS_RADIUS,
    SHIP_SIZE,
    SHIP_SPEED,
)
from asteroid_miner.types import Vec2


@dataclass
class Aim:
    """Beam state. The beam runs from the ship center to ``target`` while active."""

    active: bool = False
    target: Vec2 = (0.0, 0.0)


@dataclass
class Ship:
    """Player agent. ``position`` is the center of a square of side ``size``."""

    position: Vec2
    size: float = SHIP_SIZE
    speed: float = SHIP_SPEED
    aim: Aim = field(default_factory=Aim)

    @property
    def top_left(self) -> Vec2:
        half = self.size / 2
        return (self.position[0] - half, self.position[1] - half)


@dataclass
class Asteroid:
    """Fixed circular body the beam mines."""

    position: Vec2
    radius: float = ASTEROID_RADIUS


@dataclass
class Debris:
    """Mobile particle knocked loose from the asteroid.

    Attributes:
        position: Center of the particle.
        velocity: Units/second.
        lifetime: Seconds left; only ever decreases.
        absorbed: Latched once the ship collects it.
        radius: Render extent, no effect on physics.
    """

    position: Vec2
    velocity: Vec2
    lifetime: float = DEBRIS_LIFETIME
    absorbed: bool = False
    radius: float = DEBRIS_RADIUS


@dataclass(frozen=True)
class Intent:
    """Decoded input for one tick. Not a component."""

    move: Vec2 = (0.0, 0.0)
    aim: Vec2 | None = None
    beam_active: bool = False
