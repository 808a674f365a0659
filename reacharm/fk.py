"""Forward kinematics over a serial joint chain."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from reacharm.geometry import Isometry, Quaternion, Vector3
from reacharm.spec import ArmSpec, JointKind, JointSpec


def joint_transform(spec: JointSpec, q: float) -> Isometry:
    """Rigid transform contributed by one joint at coordinate ``q``."""
    if spec.kind is JointKind.REVOLUTE:
        return Isometry((0.0, 0.0, 0.0), Quaternion.from_axis_angle(spec.axis, q))
    ax, ay, az = spec.axis
    return Isometry((ax * q, ay * q, az * q), Quaternion.identity())


def _chain(spec: ArmSpec, q: Sequence[float]) -> Iterator[Tuple[JointSpec, Isometry, float]]:
    if len(q) < len(spec.joints):
        raise ValueError(
            f"expected {len(spec.joints)} joint coordinates, got {len(q)}"
        )
    return zip(spec.joints, spec.link_offsets, q)


def forward_kinematics(spec: ArmSpec, q: Sequence[float]) -> Isometry:
    """End-effector pose: T = prod(J_i(q_i) * L_i) in chain order."""
    pose = Isometry.identity()
    for joint, offset, qi in _chain(spec, q):
        pose = pose * joint_transform(joint, qi) * offset
    return pose


def joint_anchors_axes(spec: ArmSpec, q: Sequence[float]) -> List[Tuple[Vector3, Vector3]]:
    """World-frame (anchor, axis) of every joint in the chain.

    The anchor is the chain position just before the joint acts; the axis is
    the joint's local axis rotated by the cumulative rotation up to there.
    """
    out: List[Tuple[Vector3, Vector3]] = []
    acc = Isometry.identity()
    for joint, offset, qi in _chain(spec, q):
        out.append((acc.translation, acc.rotation.rotate(joint.axis)))
        acc = acc * joint_transform(joint, qi) * offset
    return out