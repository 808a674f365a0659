import math
from dataclasses import dataclass, field
from typing import Dict, Optional

import pytest

from reacharm.arm import Arm
from reacharm.geometry import Isometry
from reacharm.goals.pick_object import PickObject
from reacharm.spec import ArmSpec, GripperSpec, JointSpec
from reacharm.state import ArmState

BLOCK = 1


@dataclass
class FakeObject:
    pose: Isometry


@dataclass
class FakeScene:
    objects: Dict[int, FakeObject] = field(default_factory=dict)

    def object(self, object_id) -> Optional[FakeObject]:
        return self.objects.get(object_id)


@dataclass
class FakeWorld:
    arm: Arm
    scene: FakeScene

    def ee_pose(self) -> Isometry:
        return self.arm.ee_pose()


def _pick_place_world() -> FakeWorld:
    spec = ArmSpec(
        joints=[
            JointSpec.revolute((0, 0, 1), (-math.pi, math.pi)),
            JointSpec.revolute((0, 1, 0), (-math.pi, math.pi)),
            JointSpec.revolute((0, 1, 0), (-math.pi, math.pi)),
            JointSpec.revolute((0, 1, 0), (-math.pi, math.pi)),
        ],
        link_offsets=[
            Isometry.from_translation(0.0, 0.0, 0.8),
            Isometry.from_translation(0.4, 0.0, 0.0),
            Isometry.from_translation(0.4, 0.0, 0.0),
            Isometry.from_translation(0.05, 0.0, 0.0),
        ],
        gripper=GripperSpec(0.05, 0.1),
    )
    arm = Arm(spec=spec, state=ArmState.zeros(4), id=0)
    scene = FakeScene({BLOCK: FakeObject(Isometry.from_translation(0.6, 0.0, 0.525))})
    return FakeWorld(arm, scene)


def test_complete_when_target_object_is_grasped():
    world = _pick_place_world()
    world.arm.state.grasped = BLOCK
    goal = PickObject(BLOCK)
    assert goal.is_complete(world)
    assert goal.evaluate(world) > 0.99


def test_evaluate_shaped_by_distance_when_not_grasped():
    world = _pick_place_world()
    goal = PickObject(BLOCK)
    assert not goal.is_complete(world)
    s = goal.evaluate(world)
    assert 0.0 <= s < 1.0


def test_grasping_other_object_is_not_complete():
    world = _pick_place_world()
    world.arm.state.grasped = 7
    goal = PickObject(BLOCK)
    assert not goal.is_complete(world)
    assert goal.evaluate(world) < 1.0


def test_shaped_score_capped_below_one_at_ee():
    world = _pick_place_world()
    world.scene.objects[BLOCK] = FakeObject(world.ee_pose())
    assert PickObject(BLOCK).evaluate(world) == pytest.approx(0.99)


def test_closer_object_scores_higher():
    world = _pick_place_world()
    goal = PickObject(BLOCK)
    far = goal.evaluate(world)
    world.scene.objects[BLOCK] = FakeObject(Isometry.from_translation(0.8, 0.0, 0.7))
    assert goal.evaluate(world) > far


def test_far_object_scores_zero():
    world = _pick_place_world()
    world.scene.objects[BLOCK] = FakeObject(Isometry.from_translation(5.0, 5.0, 5.0))
    assert PickObject(BLOCK).evaluate(world) == 0.0


def test_missing_object_scores_zero():
    world = _pick_place_world()
    assert PickObject(42).evaluate(world) == 0.0