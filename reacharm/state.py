"""Per-tick mutable arm state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, List, Optional

OPEN_SEPARATION = 0.04


@dataclass
class ArmState:
    """Joint positions and velocities, gripper state and the held object."""

    q: List[float]
    q_dot: List[float]
    gripper_closed: bool = False
    gripper_separation: float = OPEN_SEPARATION
    gripper_target: float = OPEN_SEPARATION
    grasped: Optional[Hashable] = None

    @classmethod
    def zeros(cls, n_joints: int) -> ArmState:
        """State with every joint at rest at zero and the gripper open."""
        return cls(q=[0.0] * n_joints, q_dot=[0.0] * n_joints)