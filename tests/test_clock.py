"""Tests for variable-dt clock advancement and TickContext generation."""
from __future__ import annotations

import math
import random

import pytest

from asteroid_miner.clock import Clock
from asteroid_miner.components import Intent
from asteroid_miner.types import TickContext


def test_clock_initialization() -> None:
    clock = Clock()
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    assert clock.max_dt is None


def test_advance_increments_and_accumulates() -> None:
    clock = Clock()
    assert clock.advance(0.25) == 1
    assert clock.advance(0.5) == 2
    assert clock.dt == 0.5
    assert math.isclose(clock.elapsed, 0.75)


def test_zero_dt_allowed() -> None:
    clock = Clock()
    clock.advance(0.0)
    assert clock.tick_number == 1
    assert clock.elapsed == 0.0


def test_negative_dt_rejected() -> None:
    clock = Clock()
    with pytest.raises(ValueError):
        clock.advance(-1.0)
    assert clock.tick_number == 0


def test_nan_dt_rejected() -> None:
    with pytest.raises(ValueError):
        Clock().advance(float("nan"))


def test_large_dt_passes_through_without_clamp() -> None:
    clock = Clock()
    clock.advance(3600.0)
    assert clock.dt == 3600.0


def test_clamp() -> None:
    clock = Clock(max_dt=0.1)
    clock.advance(2.0)
    assert clock.dt == 0.1
    assert clock.elapsed == 0.1


def test_invalid_max_dt() -> None:
    with pytest.raises(ValueError):
        Clock(max_dt=0.0)


def test_context_returns_correct_values() -> None:
    clock = Clock()
    clock.advance(0.2)
    rng = random.Random(0)
    intent = Intent(move=(1.0, 0.0))
    ctx = clock.context(intent, rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == 0.2
    assert ctx.elapsed == 0.2
    assert ctx.intent is intent
    assert ctx.random is rng


def test_infinite_dt_rejected() -> None:
    clock = Clock(max_dt=0.1)
    with pytest.raises(ValueError):
        clock.advance(float("inf"))
    assert clock.tick_number == 0
