"""Sensor readings and actuator commands exchanged between an arm and its controllers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from reacharm.geometry import Isometry, Vector3


class NoiseSource(Protocol):
    """Source of random draws used to perturb sensor readings."""

    def standard_normal(self) -> float: ...

    def uniform_unit(self) -> float: ...


@dataclass(frozen=True, order=True)
class JointId:
    """Stable identifier for a joint within an arm."""

    index: int


@dataclass
class JointEncoderReading:
    """Joint position and velocity with the time they were sampled."""

    joint: JointId
    q: float
    q_dot: float
    sampled_at: Any

    def apply_noise(self, source: NoiseSource, stddev: float) -> None:
        """Add Gaussian noise of ``stddev`` to ``q`` then ``q_dot``, in that order."""
        self.q += stddev * source.standard_normal()
        self.q_dot += stddev * source.standard_normal()


@dataclass
class EePoseReading:
    """World-frame end-effector pose with its sample time."""

    pose: Isometry
    sampled_at: Any


@dataclass(frozen=True)
class JointVelocityCommand:
    """Requested joint velocity for one joint."""

    joint: JointId
    q_dot_target: float


@dataclass(frozen=True)
class GripperCommand:
    """Requested lateral finger separation in metres (open 0.04, closed 0.012)."""

    target_separation: float


@dataclass
class PressureReading:
    """Proximity-falloff pressure; values >= 1.0 mean contact or penetration."""

    pressure: float
    sampled_at: Any


@dataclass
class JointTorqueReading:
    """Torque about a joint's axis induced by external contacts on distal links."""

    joint: JointId
    tau: float
    sampled_at: Any


@dataclass
class ArmContactReading:
    """Impulse-weighted contact centroid and summed impulse; None without contact."""

    point_world: Optional[Vector3]
    impulse_world: Optional[Vector3]
    sampled_at: Any