"""Tests for the per-tick system factories."""
from __future__ import annotations

import math
import random

from asteroid_miner.components import Asteroid, Debris, Intent, Ship
from asteroid_miner.config import MiningConfig
from asteroid_miner.systems import (
    make_beam_system,
    make_control_system,
    make_debris_system,
    make_reap_system,
    make_spawn_system,
)
from asteroid_miner.types import TickContext
from asteroid_miner.world import MiningWorld


def _ctx(intent: Intent | None = None, dt: float = 0.1, seed: int = 0) -> TickContext:
    return TickContext(
        tick_number=1,
        dt=dt,
        elapsed=dt,
        intent=intent if intent is not None else Intent(),
        random=random.Random(seed),
    )


def _world() -> MiningWorld:
    return MiningWorld(
        ship=Ship(position=(120.0, 320.0), speed=200.0),
        asteroid=Asteroid(position=(540.0, 290.0), radius=40.0),
    )


# ── control ───────────────────────────────────────────────────


class TestControlSystem:
    def test_move_scaled_by_dt(self) -> None:
        world = _world()
        make_control_system()(world, _ctx(Intent(move=(1.0, -1.0)), dt=0.5))
        assert world.ship.position == (220.0, 220.0)

    def test_zero_dt_does_not_move(self) -> None:
        world = _world()
        make_control_system()(world, _ctx(Intent(move=(1.0, 0.0)), dt=0.0))
        assert world.ship.position == (120.0, 320.0)

    def test_engage_sets_target(self) -> None:
        world = _world()
        make_control_system()(world, _ctx(Intent(aim=(10.0, 20.0), beam_active=True)))
        assert world.ship.aim.active
        assert world.ship.aim.target == (10.0, 20.0)

    def test_engaged_without_aim_keeps_target(self) -> None:
        world = _world()
        system = make_control_system()
        system(world, _ctx(Intent(aim=(10.0, 20.0), beam_active=True)))
        system(world, _ctx(Intent(aim=None, beam_active=True)))
        assert world.ship.aim.target == (10.0, 20.0)

    def test_release_deactivates(self) -> None:
        world = _world()
        system = make_control_system()
        system(world, _ctx(Intent(aim=(10.0, 20.0), beam_active=True)))
        system(world, _ctx(Intent(aim=(30.0, 20.0), beam_active=False)))
        assert not world.ship.aim.active
        assert world.ship.aim.target == (10.0, 20.0)


# ── beam ──────────────────────────────────────────────────────


class TestBeamSystem:
    def test_contact_when_aimed_at_asteroid(self) -> None:
        world = _world()
        world.ship.aim.active = True
        world.ship.aim.target = (540.0, 290.0)
        make_beam_system(MiningConfig())(world, _ctx())
        assert world.contact

    def test_no_contact_when_inactive(self) -> None:
        world = _world()
        world.ship.aim.target = (540.0, 290.0)
        world.contact = True
        make_beam_system(MiningConfig())(world, _ctx())
        assert not world.contact


# ── spawn ─────────────────────────────────────────────────────


class TestSpawnSystem:
    def test_no_contact_no_spawn(self) -> None:
        world = _world()
        make_spawn_system(MiningConfig(emit_probability=1.0))(world, _ctx())
        assert world.debris == []

    def test_contact_spawns_batch(self) -> None:
        world = _world()
        world.contact = True
        spawned: list[Debris] = []
        system = make_spawn_system(
            MiningConfig(emit_probability=1.0),
            on_spawn=lambda w, c, d: spawned.append(d),
        )
        system(world, _ctx())
        assert 2 <= len(world.debris) <= 4
        assert spawned == world.debris

    def test_zero_probability_never_spawns(self) -> None:
        world = _world()
        world.contact = True
        system = make_spawn_system(MiningConfig(emit_probability=0.0))
        for seed in range(50):
            system(world, _ctx(seed=seed))
        assert world.debris == []

    def test_respects_cap(self) -> None:
        world = _world()
        world.contact = True
        system = make_spawn_system(MiningConfig(emit_probability=1.0, max_debris=5))
        for seed in range(10):
            system(world, _ctx(seed=seed))
        assert len(world.debris) == 5


# ── debris + reap ─────────────────────────────────────────────


class TestDebrisSystem:
    def test_steps_every_debris(self) -> None:
        world = _world()
        world.debris = [
            Debris(position=(600.0, 0.0), velocity=(1.0, 0.0)),
            Debris(position=(700.0, 0.0), velocity=(0.0, 1.0)),
        ]
        make_debris_system(MiningConfig())(world, _ctx(dt=0.5))
        assert world.debris[0].position == (600.5, 0.0)
        assert world.debris[1].position == (700.0, 0.5)
        assert all(math.isclose(d.lifetime, 4.5) for d in world.debris)


class TestReapSystem:
    def test_hook_fires_per_absorbed(self) -> None:
        world = _world()
        world.debris = [
            Debris(position=(0.0, 0.0), velocity=(0.0, 0.0), absorbed=True),
            Debris(position=(0.0, 0.0), velocity=(0.0, 0.0), lifetime=0.0),
            Debris(position=(0.0, 0.0), velocity=(0.0, 0.0)),
        ]
        seen: list[int] = []
        make_reap_system(lambda w, c, d: seen.append(w.resources))(world, _ctx())
        assert seen == [1]
        assert len(world.debris) == 1
