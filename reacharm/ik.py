"""Closed-form planar inverse kinematics for Y-pitch joint chains.

Coordinates are in the shoulder-local (x, z) plane: +x points out along the
arm at rest and +z is up. A positive pitch rotates +x toward -z.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple


def ik_2r(
    target_x: float, target_z: float, l1: float, l2: float
) -> Optional[Tuple[float, float]]:
    """Elbow-down (alpha, beta) reaching ``(target_x, target_z)``.

    Returns None when the target lies outside the annulus
    ``|l1 - l2| <= d <= l1 + l2``.
    """
    d_sq = target_x * target_x + target_z * target_z
    d = math.hypot(target_x, target_z)
    if d > l1 + l2 or d < abs(l1 - l2):
        return None
    z_math = -target_z
    cos_beta = max(-1.0, min(1.0, (d_sq - l1 * l1 - l2 * l2) / (2.0 * l1 * l2)))
    beta = math.acos(cos_beta)
    alpha = math.atan2(z_math, target_x) - math.atan2(
        l2 * math.sin(beta), l1 + l2 * math.cos(beta)
    )
    return alpha, beta


def ik_3r(
    target_x: float,
    target_z: float,
    target_pitch: float,
    l1: float,
    l2: float,
    l3: float,
) -> Optional[Tuple[float, float, float]]:
    """(J1, J2, J3) placing the wrist tip at the target with cumulative pitch.

    The wrist link of length ``l3`` ends at ``(target_x, target_z)`` and
    ``J1 + J2 + J3 == target_pitch``. Returns None if the wrist anchor is
    unreachable.
    """
    wrist_x = target_x - l3 * math.cos(target_pitch)
    wrist_z = target_z + l3 * math.sin(target_pitch)
    solution = ik_2r(wrist_x, wrist_z, l1, l2)
    if solution is None:
        return None
    j1, j2 = solution
    return j1, j2, target_pitch - (j1 + j2)