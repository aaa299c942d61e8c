"""System factories for the per-tick mining pipeline."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from asteroid_miner import vec
from asteroid_miner.collision import beam_intersects
from asteroid_miner.config import MiningConfig
from asteroid_miner.economy import reap
from asteroid_miner.physics import step_debris
from asteroid_miner.spawner import admit, emit_batch, roll_batch_size, should_emit

if TYPE_CHECKING:
    from asteroid_miner.components import Debris
    from asteroid_miner.types import TickContext
    from asteroid_miner.world import MiningWorld

logger = logging.getLogger(__name__)

DebrisHook = Callable[["MiningWorld", "TickContext", "Debris"], None]


def make_control_system() -> Callable[[MiningWorld, TickContext], None]:
    """Apply the tick's intent: move the ship, then latch the aim."""

    def control_system(world: MiningWorld, ctx: TickContext) -> None:
        ship = world.ship
        intent = ctx.intent
        if intent.move != (0.0, 0.0):
            ship.position = vec.add(
                ship.position, vec.scale(intent.move, ship.speed * ctx.dt)
            )
        if intent.beam_active:
            ship.aim.active = True
            if intent.aim is not None:
                ship.aim.target = intent.aim
        else:
            ship.aim.active = False

    return control_system


def make_beam_system(
    config: MiningConfig,
) -> Callable[[MiningWorld, TickContext], None]:
    """Record whether the beam touches the asteroid this tick."""

    def beam_system(world: MiningWorld, ctx: TickContext) -> None:
        aim = world.ship.aim
        world.contact = beam_intersects(
            world.ship.position,
            aim.target,
            world.asteroid.position,
            world.asteroid.radius,
            active=aim.active,
            epsilon=config.beam_epsilon,
        )

    return beam_system


def make_spawn_system(
    config: MiningConfig,
    on_spawn: DebrisHook | None = None,
) -> Callable[[MiningWorld, TickContext], None]:
    """Roll for a debris batch on each tick of beam contact.

    ``on_spawn(world, ctx, debris)`` fires for every debris admitted.
    """

    def spawn_system(world: MiningWorld, ctx: TickContext) -> None:
        if not world.contact:
            return
        if not should_emit(ctx.random, config.emit_probability):
            return
        count = roll_batch_size(ctx.random, config.batch_min, config.batch_max)
        batch = emit_batch(ctx.random, world.asteroid.position, count, config)
        added = admit(world.debris, batch, config)
        logger.debug(
            "tick %d: emitted %d debris (%d live)",
            ctx.tick_number,
            len(added),
            len(world.debris),
        )
        if on_spawn is not None:
            for d in added:
                on_spawn(world, ctx, d)

    return spawn_system


def make_debris_system(
    config: MiningConfig,
) -> Callable[[MiningWorld, TickContext], None]:
    """Step every live debris toward or past the ship."""

    def debris_system(world: MiningWorld, ctx: TickContext) -> None:
        center = world.ship.position
        for d in world.debris:
            step_debris(d, center, ctx.dt, config)

    return debris_system


def make_reap_system(
    on_absorb: DebrisHook | None = None,
) -> Callable[[MiningWorld, TickContext], None]:
    """Drop terminated debris and credit absorptions.

    ``on_absorb(world, ctx, debris)`` fires once per absorbed debris,
    after the counter has been updated.
    """

    def reap_system(world: MiningWorld, ctx: TickContext) -> None:
        absorbed = reap(world)
        if on_absorb is not None:
            for d in absorbed:
                on_absorb(world, ctx, d)

    return reap_system
