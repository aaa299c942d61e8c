"""Debris motion under the ship's attraction field."""
from __future__ import annotations

from asteroid_miner import vec
from asteroid_miner.components import Debris
from asteroid_miner.config import MiningConfig
from asteroid_miner.types import Vec2


def attraction_strength(
    distance: float, attraction_radius: float, base: float
) -> float:
    """Inverse-square pull in the normalised distance ``distance / radius``.

    At the attraction radius the strength equals *base*; it grows without
    bound as the distance shrinks. Callers never pass ``distance == 0``
    because anything that close has already been collected.
    """
    ratio = distance / attraction_radius
    return base / (ratio * ratio)


def step_debris(
    debris: Debris, ship_center: Vec2, dt: float, config: MiningConfig
) -> None:
    """Advance one particle by *dt*, latching ``absorbed`` when collected.

    Velocity is updated before position (semi-implicit Euler). Debris that
    is already absorbed or expired is left untouched.
    """
    if debris.absorbed or debris.lifetime <= 0:
        return

    to_ship = vec.sub(ship_center, debris.position)
    dist = vec.length(to_ship)
    if dist < config.collection_radius:
        debris.absorbed = True
        return

    if dist < config.attraction_radius:
        strength = attraction_strength(
            dist, config.attraction_radius, config.attraction_strength
        )
        pull = vec.scale(to_ship, strength * dt / dist)
        debris.velocity = vec.add(debris.velocity, pull)
        if config.max_debris_speed is not None:
            debris.velocity = vec.clamp_magnitude(
                debris.velocity, config.max_debris_speed
            )

    debris.position = vec.add(debris.position, vec.scale(debris.velocity, dt))
    debris.lifetime -= dt
