"""Goal: hold a specific object in the gripper."""

from __future__ import annotations

from typing import Any, Hashable, Optional

from reacharm.geometry import norm

_MAX_DISTANCE = 2.0
_SHAPED_CAP = 0.99


class PickObject:
    """Complete when the arm is grasping ``target``.

    Until then the score falls off with EE-to-object distance and is capped
    at 0.99, so only an actual grasp earns 1.0. The world must provide
    ``arm.state.grasped``, ``ee_pose()`` and ``scene.object(id)``, which
    returns an object with a ``pose`` or None.
    """

    def __init__(self, target: Hashable) -> None:
        self.target = target
        self.last_tick: Optional[Any] = None

    def tick(self, t: Any, world: Any) -> None:
        """Record the time of the latest tick; completion is judged per call."""
        self.last_tick = t

    def is_complete(self, world: Any) -> bool:
        return world.arm.state.grasped == self.target

    def evaluate(self, world: Any) -> float:
        if self.is_complete(world):
            return 1.0
        obj = world.scene.object(self.target)
        if obj is None:
            return 0.0
        ee = world.ee_pose().translation
        ox, oy, oz = obj.pose.translation
        dist = norm((ee[0] - ox, ee[1] - oy, ee[2] - oz))
        return min(_SHAPED_CAP, max(0.0, 1.0 - dist / _MAX_DISTANCE))