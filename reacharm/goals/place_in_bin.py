"""Goal: leave an object at rest inside a bin's footprint."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Tuple

from reacharm.geometry import Vector3

_MAX_DISTANCE = 2.0
_SHAPED_CAP = 0.99
# Vertical slop below the bin top, so a stack inside the bin still counts.
_Z_SLOP = 0.05


class PlaceInBin:
    """Complete when ``target`` is settled inside the bin fixture's footprint.

    The world must provide ``scene.object(id)`` (objects with ``pose`` and a
    ``settled`` flag, or None) and ``scene.fixtures()`` yielding
    ``(id, fixture)`` pairs, where a fixture has a ``pose`` and
    ``half_extents`` (None for shapes that are not axis-aligned boxes).
    """

    def __init__(self, target: Hashable, bin: Hashable) -> None:
        self.target = target
        self.bin = bin
        self.last_tick: Optional[Any] = None

    def _bin_fixture(self, world: Any) -> Optional[Any]:
        return next(
            (fix for fid, fix in world.scene.fixtures() if fid == self.bin), None
        )

    def _footprint(
        self, world: Any
    ) -> Optional[Tuple[Tuple[float, float], Vector3, float]]:
        fix = self._bin_fixture(world)
        if fix is None or fix.half_extents is None:
            return None
        half = fix.half_extents
        x, y, z = fix.pose.translation
        return (x, y), half, z + half[2]

    def tick(self, t: Any, world: Any) -> None:
        """Record the time of the latest tick; completion is judged per call."""
        self.last_tick = t

    def is_complete(self, world: Any) -> bool:
        obj = world.scene.object(self.target)
        if obj is None or not obj.settled:
            return False
        footprint = self._footprint(world)
        if footprint is None:
            return False
        (cx, cy), half, top_z = footprint
        ox, oy, oz = obj.pose.translation
        return (
            abs(ox - cx) <= half[0]
            and abs(oy - cy) <= half[1]
            and oz >= top_z - _Z_SLOP
        )

    def evaluate(self, world: Any) -> float:
        if self.is_complete(world):
            return 1.0
        obj = world.scene.object(self.target)
        fix = self._bin_fixture(world)
        if obj is None or fix is None:
            return 0.0
        dx = obj.pose.translation[0] - fix.pose.translation[0]
        dy = obj.pose.translation[1] - fix.pose.translation[1]
        dist = (dx * dx + dy * dy) ** 0.5
        return min(_SHAPED_CAP, max(0.0, 1.0 - dist / _MAX_DISTANCE))