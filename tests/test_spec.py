import math

import pytest

from reacharm.geometry import Isometry
from reacharm.spec import ArmSpec, GripperSpec, JointKind, JointSpec


def test_arm_spec_with_two_revolute_joints():
    spec = ArmSpec(
        joints=[
            JointSpec.revolute((0.0, 0.0, 1.0), (-math.pi, math.pi)),
            JointSpec.revolute((0.0, 1.0, 0.0), (-math.pi / 2, math.pi / 2)),
        ],
        link_offsets=[Isometry.from_translation(0.0, 0.0, 0.1)] * 2,
        gripper=GripperSpec(proximity_threshold=0.02, max_grasp_size=0.05),
    )
    assert len(spec.joints) == 2
    assert spec.joints[1].kind is JointKind.REVOLUTE


def test_prismatic_constructor_sets_kind_and_limits():
    joint = JointSpec.prismatic((1.0, 0.0, 0.0), (0.0, 1.0))
    assert joint.kind is JointKind.PRISMATIC
    assert joint.limits == (0.0, 1.0)


def test_axis_is_normalized():
    joint = JointSpec.revolute((0.0, 3.0, 0.0), (-1.0, 1.0))
    assert joint.axis == pytest.approx((0.0, 1.0, 0.0))


def test_zero_axis_is_rejected():
    with pytest.raises(ValueError):
        JointSpec.revolute((0.0, 0.0, 0.0), (-1.0, 1.0))


def test_mismatched_link_offsets_rejected():
    with pytest.raises(ValueError):
        ArmSpec(
            joints=[JointSpec.revolute((0.0, 0.0, 1.0), (-1.0, 1.0))],
            link_offsets=[],
            gripper=GripperSpec(0.02, 0.05),
        )