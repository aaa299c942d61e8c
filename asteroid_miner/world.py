"""MiningWorld - entity storage and the render view built from it."""
from __future__ import annotations

from dataclasses import dataclass, field

from asteroid_miner import vec
from asteroid_miner.components import Asteroid, Debris, Ship
from asteroid_miner.config import ASTEROID_CENTER, SHIP_START, MiningConfig
from asteroid_miner.types import Vec2


@dataclass(frozen=True)
class BeamView:
    """Beam segment as a renderer needs it: anchor, length and rotation."""

    origin: Vec2
    target: Vec2
    length: float
    rotation: float  # degrees


@dataclass(frozen=True)
class FrameView:
    """Read-only state exposed to the renderer after each tick."""

    tick_number: int
    ship_position: Vec2
    ship_top_left: Vec2
    ship_size: float
    asteroid_position: Vec2
    asteroid_radius: float
    beam: BeamView | None
    contact: bool
    debris: tuple[Vec2, ...]
    resources: int


@dataclass
class MiningWorld:
    """Everything one session owns: ship, asteroid, live debris, economy.

    ``debris`` is ordered oldest first. ``resources`` is only changed by
    the reap pass.
    """

    ship: Ship
    asteroid: Asteroid
    debris: list[Debris] = field(default_factory=list)
    resources: int = 0
    contact: bool = False
    tick_number: int = 0

    @classmethod
    def from_config(cls, config: MiningConfig) -> MiningWorld:
        """Classic scene: ship on the left, asteroid on the right."""
        return cls(
            ship=Ship(
                position=SHIP_START,
                size=config.ship_size,
                speed=config.ship_speed,
            ),
            asteroid=Asteroid(
                position=ASTEROID_CENTER, radius=config.asteroid_radius
            ),
        )

    def beam(self) -> BeamView | None:
        aim = self.ship.aim
        if not aim.active:
            return None
        delta = vec.sub(aim.target, self.ship.position)
        return BeamView(
            origin=self.ship.position,
            target=aim.target,
            length=vec.length(delta),
            rotation=vec.heading_degrees(delta),
        )

    def view(self) -> FrameView:
        return FrameView(
            tick_number=self.tick_number,
            ship_position=self.ship.position,
            ship_top_left=self.ship.top_left,
            ship_size=self.ship.size,
            asteroid_position=self.asteroid.position,
            asteroid_radius=self.asteroid.radius,
            beam=self.beam(),
            contact=self.contact,
            debris=tuple(d.position for d in self.debris),
            resources=self.resources,
        )
