"""Beam engage latch and move-axis helpers for input front-ends."""
from __future__ import annotations

from asteroid_miner.components import Intent
from asteroid_miner.types import Vec2


def move_vector(left: bool, right: bool, up: bool, down: bool) -> Vec2:
    """Combine held direction keys into an axis vector in {-1, 0, 1}^2.

    Opposite keys cancel. Diagonals are not normalised.
    """
    return (float(right) - float(left), float(down) - float(up))


class BeamLatch:
    """Two-state beam trigger: disengaged -> engaged on press, back on release.

    Feed it input events in the order they arrived; the state after the
    last event is what the tick sees. A press and release in the same tick
    therefore leave the beam disengaged.
    """

    def __init__(self) -> None:
        self._engaged = False
        self._target: Vec2 | None = None

    @property
    def engaged(self) -> bool:
        return self._engaged

    @property
    def target(self) -> Vec2 | None:
        return self._target

    def press(self, target: Vec2) -> None:
        self._engaged = True
        self._target = target

    def drag(self, target: Vec2) -> None:
        """Move the aim point. Ignored while disengaged."""
        if self._engaged:
            self._target = target

    def release(self) -> None:
        self._engaged = False

    def intent(self, move: Vec2 = (0.0, 0.0)) -> Intent:
        return Intent(
            move=move,
            aim=self._target if self._engaged else None,
            beam_active=self._engaged,
        )
