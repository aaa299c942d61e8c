"""Reaping terminated debris and crediting absorptions."""
from __future__ import annotations

import logging

from asteroid_miner.components import Debris
from asteroid_miner.world import MiningWorld

logger = logging.getLogger(__name__)


def is_terminated(debris: Debris) -> bool:
    return debris.absorbed or debris.lifetime <= 0


def reap(world: MiningWorld) -> list[Debris]:
    """Remove terminated debris and credit one resource per absorbed one.

    Single pass over the live list; survivors keep their order. Debris
    that is both absorbed and expired is credited once. Returns the
    absorbed debris.
    """
    survivors: list[Debris] = []
    absorbed: list[Debris] = []
    expired = 0
    for d in world.debris:
        if not is_terminated(d):
            survivors.append(d)
        elif d.absorbed:
            absorbed.append(d)
        else:
            expired += 1

    world.debris = survivors
    world.resources += len(absorbed)
    if absorbed or expired:
        logger.debug(
            "tick %d: %d absorbed, %d expired, resources=%d",
            world.tick_number,
            len(absorbed),
            expired,
            world.resources,
        )
    return absorbed
