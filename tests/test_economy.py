"""Tests for reaping terminated debris and the resource counter."""
from __future__ import annotations

from asteroid_miner.components import Asteroid, Debris, Ship
from asteroid_miner.economy import is_terminated, reap
from asteroid_miner.world import MiningWorld


def _world(*debris: Debris) -> MiningWorld:
    return MiningWorld(
        ship=Ship(position=(0.0, 0.0)),
        asteroid=Asteroid(position=(400.0, 0.0)),
        debris=list(debris),
    )


def _d(x: float, lifetime: float = 5.0, absorbed: bool = False) -> Debris:
    return Debris(position=(x, 0.0), velocity=(0.0, 0.0), lifetime=lifetime, absorbed=absorbed)


class TestIsTerminated:
    def test_live(self) -> None:
        assert not is_terminated(_d(1.0))

    def test_absorbed(self) -> None:
        assert is_terminated(_d(1.0, absorbed=True))

    def test_expired_at_zero(self) -> None:
        assert is_terminated(_d(1.0, lifetime=0.0))


class TestReap:
    def test_credits_only_absorbed(self) -> None:
        world = _world(_d(1.0, absorbed=True), _d(2.0, lifetime=-0.1), _d(3.0))
        absorbed = reap(world)
        assert world.resources == 1
        assert len(absorbed) == 1
        assert [d.position[0] for d in world.debris] == [3.0]

    def test_absorbed_and_expired_counted_once(self) -> None:
        world = _world(_d(1.0, lifetime=0.0, absorbed=True))
        reap(world)
        assert world.resources == 1
        assert world.debris == []

    def test_survivor_order_preserved(self) -> None:
        world = _world(_d(1.0), _d(2.0, absorbed=True), _d(3.0), _d(4.0, lifetime=0.0), _d(5.0))
        reap(world)
        assert [d.position[0] for d in world.debris] == [1.0, 3.0, 5.0]

    def test_counter_never_decreases(self) -> None:
        world = _world(_d(1.0, absorbed=True), _d(2.0, absorbed=True))
        world.resources = 7
        reap(world)
        assert world.resources == 9
        reap(world)
        assert world.resources == 9

    def test_empty(self) -> None:
        world = _world()
        assert reap(world) == []
        assert world.resources == 0
