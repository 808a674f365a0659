"""Kinematic description of an arm: joints, link offsets and gripper."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from reacharm.geometry import Isometry, Vector3, normalize


class JointKind(Enum):
    REVOLUTE = "revolute"
    PRISMATIC = "prismatic"


@dataclass(frozen=True)
class JointSpec:
    """One joint: its kind, unit axis and coordinate limits."""

    kind: JointKind
    axis: Vector3
    limits: Tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", normalize(tuple(float(c) for c in self.axis)))
        lo, hi = self.limits
        object.__setattr__(self, "limits", (float(lo), float(hi)))

    @classmethod
    def revolute(cls, axis: Vector3, limits: Tuple[float, float]) -> JointSpec:
        return cls(JointKind.REVOLUTE, axis, limits)

    @classmethod
    def prismatic(cls, axis: Vector3, limits: Tuple[float, float]) -> JointSpec:
        return cls(JointKind.PRISMATIC, axis, limits)


@dataclass(frozen=True)
class GripperSpec:
    proximity_threshold: float
    max_grasp_size: float


@dataclass
class ArmSpec:
    """Ordered joint chain with one link offset per joint and a gripper."""

    joints: List[JointSpec]
    link_offsets: List[Isometry]
    gripper: GripperSpec = field(default_factory=lambda: GripperSpec(0.02, 0.05))

    def __post_init__(self) -> None:
        if len(self.joints) != len(self.link_offsets):
            raise ValueError(
                f"{len(self.joints)} joints but {len(self.link_offsets)} link offsets"
            )