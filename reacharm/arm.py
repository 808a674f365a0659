"""Arm runtime aggregate: link geometry, decorations and render primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from reacharm.fk import forward_kinematics, joint_transform
from reacharm.geometry import Isometry, Quaternion, Vector3, norm, normalize
from reacharm.spec import ArmSpec, JointKind
from reacharm.state import ArmState

Color = Tuple[float, float, float, float]

LINK_WHITE: Color = (0.92, 0.92, 0.92, 1.0)
JOINT_BLACK: Color = (0.12, 0.12, 0.12, 1.0)

_Z_AXIS: Vector3 = (0.0, 0.0, 1.0)

# Radius of the cylindrical arm-link capsules (render and collision).
LINK_RADIUS = 0.04
# Half-extents of each finger pillar; the long axis runs along EE +x.
FINGER_HALF_EXTENTS: Vector3 = (0.04, 0.01, 0.01)
FINGER_OPEN_SEPARATION = 0.04
FINGER_CLOSED_SEPARATION = 0.012
FINGER_FORWARD_OFFSET = 0.04
FINGER_SLOT_PLUS = 998
FINGER_SLOT_MINUS = 999

BASE_FOOT_RADIUS = 0.10
BASE_FOOT_HALF_HEIGHT = 0.015
BASE_COLUMN_RADIUS = 0.05
# Fills the 0.8 m pedestal gap minus foot height and the J0 barrel half-length.
BASE_COLUMN_HEIGHT = 0.745
JOINT_BARREL_RADIUS = 0.055
JOINT_BARREL_HALF_LENGTH = 0.025
WRIST_CUFF_RADIUS = 0.05
WRIST_CUFF_HALF_LENGTH = 0.015

BASE_FOOT_SLOT = 990
BASE_COLUMN_SLOT = 991
WRIST_CUFF_SLOT = 997
JOINT_BARREL_SLOT_BASE = 800

_STANDARD_PEDESTAL_Z = 0.8
_PEDESTAL_TOLERANCE = 1e-3
_MIN_HALF_HEIGHT = 0.001


class DecorationKind(Enum):
    """Whether a decoration is fixed in the world or follows the arm's FK."""

    STATIC = "static"
    KINEMATIC = "kinematic"


@dataclass(frozen=True)
class Cylinder:
    radius: float
    half_height: float


@dataclass(frozen=True)
class Capsule:
    pose: Isometry
    half_height: float
    radius: float
    color: Color


@dataclass(frozen=True)
class BoxPrimitive:
    pose: Isometry
    half_extents: Vector3
    color: Color


Primitive = Union[Capsule, BoxPrimitive]


@dataclass(frozen=True)
class ArmEntityId:
    """Visualization id of one arm part, namespaced by arm id."""

    arm_id: int
    slot: int


@dataclass(frozen=True)
class LinkPose:
    """World-frame midpoint pose of a link capsule; local +Z runs along the link."""

    slot: int
    pose: Isometry
    half_height: float


@dataclass(frozen=True)
class DecorationPose:
    slot: int
    shape: Cylinder
    pose: Isometry
    color: Color
    kind: DecorationKind


def finger_pose(ee_pose: Isometry, slot: int, separation: float) -> Isometry:
    """World pose of one finger given the EE pose and lateral separation."""
    sign = 1.0 if slot == FINGER_SLOT_PLUS else -1.0
    return ee_pose * Isometry(
        (FINGER_FORWARD_OFFSET, sign * separation, 0.0), Quaternion.identity()
    )


def _z_onto(direction: Vector3) -> Quaternion:
    rotation = Quaternion.rotation_between(_Z_AXIS, direction)
    return rotation if rotation is not None else Quaternion.identity()


@dataclass
class Arm:
    """Immutable spec, mutable per-tick state and a stable numeric id."""

    spec: ArmSpec
    state: ArmState
    id: int = 0

    def _has_standard_pedestal(self) -> bool:
        if not self.spec.link_offsets:
            return False
        z = self.spec.link_offsets[0].translation[2]
        return abs(z - _STANDARD_PEDESTAL_Z) < _PEDESTAL_TOLERANCE

    def decoration_poses(self) -> List[DecorationPose]:
        """Foot, column, joint barrels and wrist cuff.

        Foot and column appear only for the standard 0.8 m pedestal.
        """
        out: List[DecorationPose] = []
        if self._has_standard_pedestal():
            out.append(
                DecorationPose(
                    slot=BASE_FOOT_SLOT,
                    shape=Cylinder(BASE_FOOT_RADIUS, BASE_FOOT_HALF_HEIGHT),
                    pose=Isometry.from_translation(0.0, 0.0, BASE_FOOT_HALF_HEIGHT),
                    color=JOINT_BLACK,
                    kind=DecorationKind.STATIC,
                )
            )
            out.append(
                DecorationPose(
                    slot=BASE_COLUMN_SLOT,
                    shape=Cylinder(BASE_COLUMN_RADIUS, BASE_COLUMN_HEIGHT * 0.5),
                    pose=Isometry.from_translation(
                        0.0,
                        0.0,
                        2.0 * BASE_FOOT_HALF_HEIGHT + BASE_COLUMN_HEIGHT * 0.5,
                    ),
                    color=LINK_WHITE,
                    kind=DecorationKind.STATIC,
                )
            )
        acc = Isometry.identity()
        for i, (joint, offset, qi) in enumerate(
            zip(self.spec.joints, self.spec.link_offsets, self.state.q)
        ):
            if joint.kind is JointKind.REVOLUTE:
                out.append(
                    DecorationPose(
                        slot=JOINT_BARREL_SLOT_BASE + i,
                        shape=Cylinder(JOINT_BARREL_RADIUS, JOINT_BARREL_HALF_LENGTH),
                        pose=acc * Isometry((0.0, 0.0, 0.0), _z_onto(joint.axis)),
                        color=JOINT_BLACK,
                        kind=DecorationKind.KINEMATIC,
                    )
                )
            acc = acc * joint_transform(joint, qi) * offset
        out.append(
            DecorationPose(
                slot=WRIST_CUFF_SLOT,
                shape=Cylinder(WRIST_CUFF_RADIUS, WRIST_CUFF_HALF_LENGTH),
                pose=acc,
                color=JOINT_BLACK,
                kind=DecorationKind.KINEMATIC,
            )
        )
        return out

    def link_poses(self) -> List[LinkPose]:
        """Capsule midpoint pose and half-height for every link in the chain."""
        out: List[LinkPose] = []
        acc = Isometry.identity()
        for i, (joint, offset, qi) in enumerate(
            zip(self.spec.joints, self.spec.link_offsets, self.state.q)
        ):
            acc = acc * joint_transform(joint, qi)
            link_vec = offset.translation
            length = norm(link_vec)
            half_height = max(length / 2.0, _MIN_HALF_HEIGHT)
            z_to_link = _z_onto(normalize(link_vec)) if length > 0.0 else Quaternion.identity()
            half_vec = (link_vec[0] / 2.0, link_vec[1] / 2.0, link_vec[2] / 2.0)
            mid = acc * Isometry(half_vec, z_to_link)
            out.append(LinkPose(slot=i, pose=mid, half_height=half_height))
            acc = acc * offset
        return out

    def ee_pose(self) -> Isometry:
        """End-effector pose at the current joint coordinates."""
        return forward_kinematics(self.spec, self.state.q)

    def primitives(self) -> List[Tuple[ArmEntityId, Primitive]]:
        """Render primitives: link capsules, decorations, then the two fingers."""
        out: List[Tuple[ArmEntityId, Primitive]] = [
            (
                ArmEntityId(self.id, lp.slot),
                Capsule(
                    pose=lp.pose,
                    half_height=lp.half_height,
                    radius=LINK_RADIUS,
                    color=LINK_WHITE,
                ),
            )
            for lp in self.link_poses()
        ]
        for d in self.decoration_poses():
            prim: Primitive
            if d.slot == BASE_FOOT_SLOT:
                prim = BoxPrimitive(
                    pose=d.pose,
                    half_extents=(d.shape.radius, d.shape.radius, d.shape.half_height),
                    color=d.color,
                )
            else:
                prim = Capsule(
                    pose=d.pose,
                    half_height=d.shape.half_height,
                    radius=d.shape.radius,
                    color=d.color,
                )
            out.append((ArmEntityId(self.id, d.slot), prim))
        ee = self.ee_pose()
        separation = self.state.gripper_separation
        for slot in (FINGER_SLOT_PLUS, FINGER_SLOT_MINUS):
            out.append(
                (
                    ArmEntityId(self.id, slot),
                    BoxPrimitive(
                        pose=finger_pose(ee, slot, separation),
                        half_extents=FINGER_HALF_EXTENTS,
                        color=JOINT_BLACK,
                    ),
                )
            )
        return out