"""Clock and TickContext for a variable-timestep simulation."""
from __future__ import annotations

import logging
import math
import random

from asteroid_miner.components import Intent
from asteroid_miner.types import TickContext

logger = logging.getLogger(__name__)


class Clock:
    """Counts ticks and accumulates simulated time.

    ``dt`` is supplied by the caller every tick. When ``max_dt`` is set,
    longer steps (e.g. after a stall) are clamped to it.
    """

    def __init__(self, max_dt: float | None = None) -> None:
        if max_dt is not None and max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._tick_number = 0
        self._elapsed = 0.0
        self._dt = 0.0

    @property
    def max_dt(self) -> float | None:
        return self._max_dt

    @property
    def dt(self) -> float:
        """dt of the most recent tick, after clamping."""
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float) -> int:
        if not (dt >= 0 and math.isfinite(dt)):
            raise ValueError(f"dt must be a finite non-negative number, got {dt}")
        if self._max_dt is not None and dt > self._max_dt:
            logger.debug("clamping dt %.4f to %.4f", dt, self._max_dt)
            dt = self._max_dt
        self._dt = dt
        self._tick_number += 1
        self._elapsed += dt
        return self._tick_number

    def context(self, intent: Intent, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
            intent=intent,
            random=rng,
        )
