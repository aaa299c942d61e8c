"""Engine - tick pipeline, seeding, and absorb/spawn hooks."""
from __future__ import annotations

import logging
import os
import random

from asteroid_miner.clock import Clock
from asteroid_miner.components import Debris, Intent
from asteroid_miner.config import MiningConfig
from asteroid_miner.systems import (
    DebrisHook,
    make_beam_system,
    make_control_system,
    make_debris_system,
    make_reap_system,
    make_spawn_system,
)
from asteroid_miner.types import System, TickContext
from asteroid_miner.world import FrameView, MiningWorld

logger = logging.getLogger(__name__)

_IDLE = Intent()


class Engine:
    """Runs one mining session tick by tick.

    Each step applies input, tests the beam, rolls for debris, moves the
    debris and reaps it, in that order. Extra systems added with
    ``add_system`` run after the reap.
    """

    def __init__(
        self,
        config: MiningConfig | None = None,
        seed: int | None = None,
        world: MiningWorld | None = None,
    ) -> None:
        self._config = config if config is not None else MiningConfig()
        self._clock = Clock(self._config.max_dt)
        self._world = world if world is not None else MiningWorld.from_config(
            self._config
        )
        self._spawn_hooks: list[DebrisHook] = []
        self._absorb_hooks: list[DebrisHook] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

        self._systems: list[System] = [
            make_control_system(),
            make_beam_system(self._config),
            make_spawn_system(self._config, self._fire_spawn),
            make_debris_system(self._config),
            make_reap_system(self._fire_absorb),
        ]
        logger.info("mining engine ready (seed=%d)", seed)

    @property
    def world(self) -> MiningWorld:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> MiningConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_spawn(self, hook: DebrisHook) -> None:
        self._spawn_hooks.append(hook)

    def on_absorb(self, hook: DebrisHook) -> None:
        self._absorb_hooks.append(hook)

    def _fire_spawn(self, world: MiningWorld, ctx: TickContext, debris: Debris) -> None:
        for hook in self._spawn_hooks:
            hook(world, ctx, debris)

    def _fire_absorb(self, world: MiningWorld, ctx: TickContext, debris: Debris) -> None:
        for hook in self._absorb_hooks:
            hook(world, ctx, debris)

    def step(self, intent: Intent | None, dt: float) -> FrameView:
        """Run one tick of *dt* seconds and return the resulting view."""
        self._clock.advance(dt)
        self._world.tick_number = self._clock.tick_number
        ctx = self._clock.context(intent if intent is not None else _IDLE, self._rng)
        for system in self._systems:
            system(self._world, ctx)
        return self._world.view()

    def run(self, n: int, dt: float, intent: Intent | None = None) -> FrameView:
        """Run *n* ticks with a fixed *dt* and the same *intent*."""
        view = self._world.view()
        for _ in range(n):
            view = self.step(intent, dt)
        return view

    def view(self) -> FrameView:
        return self._world.view()
