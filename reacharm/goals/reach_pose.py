"""Goal: bring the end effector within a distance of a target pose."""

from __future__ import annotations

from typing import Any, Optional

from reacharm.geometry import Isometry, norm


class ReachPose:
    """Reach a target EE position within ``tolerance``; orientation is ignored.

    The score is ``1 - dist / tolerance`` clamped to [0, 1]. The world must
    provide ``ee_pose()``.
    """

    def __init__(self, target: Isometry, tolerance: float) -> None:
        self.target = target
        self.tolerance = tolerance
        self.last_tick: Optional[Any] = None

    def _distance(self, world: Any) -> float:
        ee = world.ee_pose().translation
        tx, ty, tz = self.target.translation
        return norm((ee[0] - tx, ee[1] - ty, ee[2] - tz))

    def tick(self, t: Any, world: Any) -> None:
        """Record the time of the latest tick; completion is judged per call."""
        self.last_tick = t

    def is_complete(self, world: Any) -> bool:
        return self._distance(world) <= self.tolerance

    def evaluate(self, world: Any) -> float:
        dist = self._distance(world)
        if self.tolerance == 0.0:
            return 1.0 if dist == 0.0 else 0.0
        return min(1.0, max(0.0, 1.0 - dist / self.tolerance))