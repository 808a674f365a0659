import math

import pytest

from reacharm.arm import Arm
from reacharm.geometry import Isometry
from reacharm.goals.reach_pose import ReachPose
from reacharm.spec import ArmSpec, GripperSpec, JointSpec
from reacharm.state import ArmState


def simple_world():
    spec = ArmSpec(
        joints=[JointSpec.revolute((0.0, 0.0, 1.0), (-math.pi, math.pi)) for _ in range(2)],
        link_offsets=[Isometry.from_translation(0.0, 0.0, 0.1) for _ in range(2)],
        gripper=GripperSpec(0.02, 0.05),
    )
    return Arm(spec=spec, state=ArmState.zeros(2))


def moving_world():
    spec = ArmSpec(
        joints=[JointSpec.revolute((0.0, 0.0, 1.0), (-math.pi, math.pi)) for _ in range(2)],
        link_offsets=[Isometry.from_translation(0.2, 0.0, 0.0) for _ in range(2)],
    )
    return Arm(spec=spec, state=ArmState.zeros(2))


def test_score_is_one_when_at_target_within_tolerance():
    world = simple_world()
    target = world.ee_pose()
    goal = ReachPose(target, 0.01)
    assert goal.is_complete(world)
    assert goal.evaluate(world) > 0.99


def test_score_degrades_linearly_inside_tolerance():
    world = moving_world()
    goal = ReachPose(Isometry.from_translation(0.4, 0.05, 0.0), 0.1)
    assert goal.is_complete(world)
    assert goal.evaluate(world) == pytest.approx(0.5, abs=1e-6)


def test_outside_tolerance_scores_zero():
    world = moving_world()
    goal = ReachPose(Isometry.from_translation(0.0, 0.0, 0.0), 0.1)
    assert not goal.is_complete(world)
    assert goal.evaluate(world) == 0.0


def test_moving_joint_changes_completion():
    world = moving_world()
    goal = ReachPose(Isometry.from_translation(0.0, 0.4, 0.0), 0.01)
    assert not goal.is_complete(world)
    world.state.q[0] = math.pi / 2
    goal.tick(0, world)
    assert goal.is_complete(world)
    assert goal.evaluate(world) > 0.99