"""Goal: one object resting directly on top of another for a hold time."""

from __future__ import annotations

from typing import Any, Hashable, Optional

# Seconds the stacked arrangement must persist before the goal completes.
STACK_HOLD_DURATION = 0.1
STACK_XY_TOL = 0.01
STACK_Z_TOL = 0.05
_TIME_EPS = 1e-9


class Stack:
    """Complete when ``a`` has stayed settled on top of ``b`` for the hold time.

    Times passed to ``tick`` are in seconds. The world must provide
    ``scene.object(id)`` returning objects with ``pose``, a ``settled`` flag
    and ``half_height_z`` (half the shape's vertical extent), or None.
    """

    def __init__(self, a: Hashable, b: Hashable) -> None:
        self.a = a
        self.b = b
        self._settled_since: Optional[float] = None
        self._last_tick: Optional[float] = None

    def _currently_stacked(self, world: Any) -> bool:
        obj_a = world.scene.object(self.a)
        obj_b = world.scene.object(self.b)
        if obj_a is None or obj_b is None or not obj_a.settled:
            return False
        ax, ay, az = obj_a.pose.translation
        bx, by, bz = obj_b.pose.translation
        b_top = bz + obj_b.half_height_z
        return (
            abs(ax - bx) <= STACK_XY_TOL
            and abs(ay - by) <= STACK_XY_TOL
            and abs(az - b_top) <= STACK_Z_TOL
        )

    def tick(self, t: float, world: Any) -> None:
        self._last_tick = t
        if self._currently_stacked(world):
            if self._settled_since is None:
                self._settled_since = t
        else:
            self._settled_since = None

    def is_complete(self, world: Any) -> bool:
        if self._settled_since is None or self._last_tick is None:
            return False
        return self._last_tick - self._settled_since >= STACK_HOLD_DURATION - _TIME_EPS

    def evaluate(self, world: Any) -> float:
        if self.is_complete(world):
            return 1.0
        if self._currently_stacked(world):
            return 0.95
        return 0.0