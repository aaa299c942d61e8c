"""Pure beam intersection tests."""
from __future__ import annotations

import math
from typing import Iterable

from asteroid_miner import vec
from asteroid_miner.components import Asteroid
from asteroid_miner.config import BEAM_EPSILON
from asteroid_miner.types import Vec2


def beam_intersects(
    origin: Vec2,
    target: Vec2,
    center: Vec2,
    radius: float,
    active: bool = True,
    epsilon: float = BEAM_EPSILON,
) -> bool:
    """Return True if the beam origin→target passes through the circle.

    The circle's center must project strictly inside the segment
    (``0 < t < L``) and lie closer than ``radius`` to the beam line.
    Inactive beams and beams shorter than *epsilon* never intersect.
    """
    if not active:
        return False
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    beam_length = math.sqrt(dx * dx + dy * dy)
    if beam_length < epsilon:
        return False
    direction = (dx / beam_length, dy / beam_length)
    t, closest = vec.project_onto_line(origin, direction, center)
    dist = vec.distance(closest, center)
    return dist < radius and 0.0 < t < beam_length


def beam_hits_any(
    origin: Vec2,
    target: Vec2,
    bodies: Iterable[Asteroid],
    active: bool = True,
    epsilon: float = BEAM_EPSILON,
) -> list[int]:
    """Indices of every body the beam touches. Each body is tested on its own."""
    return [
        i
        for i, body in enumerate(bodies)
        if beam_intersects(
            origin, target, body.position, body.radius, active, epsilon
        )
    ]
