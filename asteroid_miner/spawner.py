"""Debris emission: the stochastic spawn rule and the capacity policy."""
from __future__ import annotations

import logging
import math
import random

from asteroid_miner import vec
from asteroid_miner.components import Debris
from asteroid_miner.config import MiningConfig, Overflow
from asteroid_miner.types import Vec2

logger = logging.getLogger(__name__)

_TAU = 2.0 * math.pi


def should_emit(rng: random.Random, probability: float) -> bool:
    """One draw in [0, 1); True when it falls below *probability*."""
    return rng.random() < probability


def roll_batch_size(rng: random.Random, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi], both inclusive."""
    return rng.randint(lo, hi)


def make_debris(
    rng: random.Random, center: Vec2, config: MiningConfig
) -> Debris:
    """One particle near *center* with random heading and speed."""
    offset = config.spawn_offset
    position = (
        center[0] + rng.uniform(-offset, offset),
        center[1] + rng.uniform(-offset, offset),
    )
    angle = rng.random() * _TAU
    speed = rng.uniform(config.debris_speed_min, config.debris_speed_max)
    return Debris(
        position=position,
        velocity=vec.from_angle(angle, speed),
        lifetime=config.debris_lifetime,
    )


def emit_batch(
    rng: random.Random, center: Vec2, count: int, config: MiningConfig
) -> list[Debris]:
    return [make_debris(rng, center, config) for _ in range(count)]


def admit(
    live: list[Debris], batch: list[Debris], config: MiningConfig
) -> list[Debris]:
    """Append *batch* to *live* under the capacity policy.

    Returns the debris actually added. With ``Overflow.DROP_OLDEST`` the
    oldest live debris are discarded uncredited to make room.
    """
    limit = config.max_debris
    if limit == -1:
        live.extend(batch)
        return batch

    if config.overflow is Overflow.REFUSE:
        room = max(0, limit - len(live))
        accepted = batch[:room]
        if len(accepted) < len(batch):
            logger.debug(
                "debris cap %d reached, refused %d",
                limit,
                len(batch) - len(accepted),
            )
        live.extend(accepted)
        return accepted

    accepted = batch[-limit:] if limit else []
    live.extend(accepted)
    excess = len(live) - limit
    if excess > 0:
        del live[:excess]
        logger.debug("debris cap %d reached, dropped %d oldest", limit, excess)
    return accepted
