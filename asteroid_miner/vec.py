"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

from asteroid_miner.types import Vec2


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length_sq(v: Vec2) -> float:
    return v[0] * v[0] + v[1] * v[1]


def length(v: Vec2) -> float:
    return math.sqrt(length_sq(v))


def normalize(v: Vec2) -> Vec2:
    """Unit vector along *v*. The zero vector is returned unchanged."""
    mag = length(v)
    if mag == 0.0:
        return v
    return (v[0] / mag, v[1] / mag)


def distance(a: Vec2, b: Vec2) -> float:
    return length(sub(a, b))


def from_angle(angle: float, magnitude: float = 1.0) -> Vec2:
    """Vector of *magnitude* pointing at *angle* radians (screen axes)."""
    return (math.cos(angle) * magnitude, math.sin(angle) * magnitude)


def heading_degrees(v: Vec2) -> float:
    """Rotation of *v* in degrees, atan2 convention, range (-180, 180]."""
    return math.degrees(math.atan2(v[1], v[0]))


def clamp_magnitude(v: Vec2, max_mag: float) -> Vec2:
    sq = length_sq(v)
    if sq <= max_mag * max_mag:
        return v
    return scale(normalize(v), max_mag)


def project_onto_line(
    origin: Vec2, direction: Vec2, point: Vec2
) -> tuple[float, Vec2]:
    """Project *point* onto the line through *origin* along unit *direction*.

    Returns (t, closest) where ``closest = origin + t * direction``. *t* is
    the signed distance along the line, so ``0 < t < length`` means the
    closest point lies strictly inside a segment of that length.
    """
    t = dot(sub(point, origin), direction)
    return t, add(origin, scale(direction, t))
