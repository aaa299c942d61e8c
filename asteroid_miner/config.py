"""Simulation configuration dataclass and canonical tuning constants."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Scene layout of the classic single-asteroid field.
FIELD_SIZE = (800.0, 600.0)
SHIP_START = (120.0, 320.0)
ASTEROID_CENTER = (540.0, 290.0)

SHIP_SIZE = 40.0
SHIP_SPEED = 240.0  # units/second
ASTEROID_RADIUS = 40.0
BEAM_EPSILON = 1e-6

EMIT_PROBABILITY = 0.01  # per tick of beam contact
BATCH_MIN = 2
BATCH_MAX = 4
SPAWN_OFFSET = 10.0
DEBRIS_SPEED_MIN = 50.0
DEBRIS_SPEED_MAX = 150.0
DEBRIS_LIFETIME = 5.0  # seconds
DEBRIS_RADIUS = 2.0

COLLECTION_RADIUS = 20.0
ATTRACTION_RADIUS = 250.0
ATTRACTION_STRENGTH = 500.0


class Overflow(Enum):
    """What happens to new debris once ``max_debris`` live debris exist."""

    REFUSE = "refuse"
    DROP_OLDEST = "drop_oldest"


@dataclass(frozen=True)
class MiningConfig:
    """Immutable tuning for one mining session.

    Attributes:
        ship_speed: Ship travel speed in units/second per move axis.
        ship_size: Side length of the square ship.
        asteroid_radius: Radius of the asteroid.
        beam_epsilon: Beams shorter than this never intersect anything.
        emit_probability: Chance per contact tick that a batch is emitted.
        batch_min: Smallest batch size (inclusive).
        batch_max: Largest batch size (inclusive).
        spawn_offset: Max per-axis offset of new debris from the asteroid center.
        debris_speed_min: Lower bound of the initial debris speed.
        debris_speed_max: Upper bound of the initial debris speed.
        debris_lifetime: Seconds a debris particle lives unless absorbed.
        collection_radius: Debris closer than this to the ship is absorbed.
        attraction_radius: Debris closer than this is pulled toward the ship.
        attraction_strength: Base constant K of the inverse-square pull.
        max_debris: Bound on live debris (-1 for unlimited).
        overflow: Policy applied when a batch would exceed ``max_debris``.
        max_dt: Per-tick dt clamp in seconds (None to integrate raw dt).
        max_debris_speed: Debris speed cap (None for uncapped).
    """

    ship_speed: float = SHIP_SPEED
    ship_size: float = SHIP_SIZE
    asteroid_radius: float = ASTEROID_RADIUS
    beam_epsilon: float = BEAM_EPSILON
    emit_probability: float = EMIT_PROBABILITY
    batch_min: int = BATCH_MIN
    batch_max: int = BATCH_MAX
    spawn_offset: float = SPAWN_OFFSET
    debris_speed_min: float = DEBRIS_SPEED_MIN
    debris_speed_max: float = DEBRIS_SPEED_MAX
    debris_lifetime: float = DEBRIS_LIFETIME
    collection_radius: float = COLLECTION_RADIUS
    attraction_radius: float = ATTRACTION_RADIUS
    attraction_strength: float = ATTRACTION_STRENGTH
    max_debris: int = -1
    overflow: Overflow = Overflow.REFUSE
    max_dt: float | None = None
    max_debris_speed: float | None = None

    def __post_init__(self) -> None:
        if self.ship_speed < 0:
            raise ValueError(f"ship_speed must be >= 0, got {self.ship_speed}")
        if self.ship_size <= 0:
            raise ValueError(f"ship_size must be > 0, got {self.ship_size}")
        if self.asteroid_radius <= 0:
            raise ValueError(
                f"asteroid_radius must be > 0, got {self.asteroid_radius}"
            )
        if self.beam_epsilon <= 0:
            raise ValueError(f"beam_epsilon must be > 0, got {self.beam_epsilon}")
        if not 0.0 <= self.emit_probability <= 1.0:
            raise ValueError(
                f"emit_probability must be in [0, 1], got {self.emit_probability}"
            )
        if self.batch_min < 0 or self.batch_min > self.batch_max:
            raise ValueError(
                f"batch range must satisfy 0 <= min <= max, "
                f"got [{self.batch_min}, {self.batch_max}]"
            )
        if self.spawn_offset < 0:
            raise ValueError(f"spawn_offset must be >= 0, got {self.spawn_offset}")
        if not 0.0 <= self.debris_speed_min <= self.debris_speed_max:
            raise ValueError(
                f"debris speed range must satisfy 0 <= min <= max, "
                f"got [{self.debris_speed_min}, {self.debris_speed_max}]"
            )
        if self.debris_lifetime <= 0:
            raise ValueError(
                f"debris_lifetime must be > 0, got {self.debris_lifetime}"
            )
        if not 0.0 < self.collection_radius <= self.attraction_radius:
            raise ValueError(
                "radii must satisfy 0 < collection_radius <= attraction_radius, "
                f"got {self.collection_radius} and {self.attraction_radius}"
            )
        if self.max_debris < -1:
            raise ValueError(f"max_debris must be >= -1, got {self.max_debris}")
        if not isinstance(self.overflow, Overflow):
            raise ValueError(f"overflow must be an Overflow, got {self.overflow!r}")
        if self.max_dt is not None and not (
            self.max_dt > 0 and math.isfinite(self.max_dt)
        ):
            raise ValueError(f"max_dt must be a positive number, got {self.max_dt}")
        if self.max_debris_speed is not None and self.max_debris_speed <= 0:
            raise ValueError(
                f"max_debris_speed must be > 0, got {self.max_debris_speed}"
            )

    def replace(self, **changes: Any) -> MiningConfig:
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)
