# reacharm

Building blocks for a kinematic robot arm, in pure Python with no third-party dependencies.

- `reacharm.geometry`: `Quaternion` (unit rotations, `from_axis_angle`, `rotation_between`, `rotate`) and `Isometry` (rigid transforms, `from_translation`, `transform_point`, composition with `*`), plus `norm` and `normalize`.
- `reacharm.spec`: `JointSpec` (`JointSpec.revolute` / `JointSpec.prismatic`, with a `JointKind`), `GripperSpec` and `ArmSpec`. `ArmSpec` raises `ValueError` unless there is one link offset per joint.
- `reacharm.state`: `ArmState`, with `ArmState.zeros(n)` giving all joints at zero and the gripper open (separation 0.04 m).
- `reacharm.fk`: `joint_transform`, `forward_kinematics` and `joint_anchors_axes` (world-frame anchor and axis of each joint).
- `reacharm.ik`: closed-form planar `ik_2r` (elbow-down branch) and `ik_3r`, which also takes a target wrist pitch. Both return `None` when the target is out of reach.
- `reacharm.arm`: `Arm` (spec, state and id). It provides `link_poses()` (capsule midpoints and half-heights), `decoration_poses()` (foot and column for a 0.8 m pedestal, one barrel per revolute joint, a wrist cuff), `ee_pose()` and `primitives()` (link capsules, decorations and two finger boxes, each tagged with an `ArmEntityId`). `finger_pose` places one finger from the EE pose.
- `reacharm.ports`: sensor readings (`JointEncoderReading`, `EePoseReading`, `PressureReading`, `JointTorqueReading`, `ArmContactReading`) and commands (`JointVelocityCommand`, `GripperCommand`), keyed by `JointId`. `JointEncoderReading.apply_noise(source, stddev)` perturbs `q` and then `q_dot` using a source with `standard_normal()`.
- `reacharm.pd_controller`: `PdJointController(target_q, encoder_rxs, velocity_txs)` with gains kp = 4.0 and kd = 1.5. Each `step(t)` reads `latest()` from each encoder and `send`s a `JointVelocityCommand` of `kp * (target - q) - kd * q_dot`.
- `reacharm.goals`: `ReachPose`, `PickObject`, `PlaceInBin` and `Stack`, plus the combinators `All`, `Any` and `Not`. Each lives in its own submodule, for example `reacharm.goals.reach_pose`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from reacharm.fk import forward_kinematics
from reacharm.geometry import Isometry
from reacharm.ik import ik_3r
from reacharm.spec import ArmSpec, GripperSpec, JointSpec

spec = ArmSpec(
    joints=[
        JointSpec.revolute((0.0, 0.0, 1.0), (-math.pi, math.pi)),
        JointSpec.revolute((0.0, 1.0, 0.0), (-math.pi, math.pi)),
        JointSpec.revolute((0.0, 1.0, 0.0), (-math.pi, math.pi)),
        JointSpec.revolute((0.0, 1.0, 0.0), (-math.pi, math.pi)),
    ],
    link_offsets=[
        Isometry.from_translation(0.0, 0.0, 0.8),
        Isometry.from_translation(0.4, 0.0, 0.0),
        Isometry.from_translation(0.4, 0.0, 0.0),
        Isometry.from_translation(0.05, 0.0, 0.0),
    ],
    gripper=GripperSpec(proximity_threshold=0.05, max_grasp_size=0.1),
)

ee = forward_kinematics(spec, [0.0, 0.0, 0.0, 0.0])   # translation (0.85, 0, 0.8)

# Pitch joints that put the fingers straight down at (0.6, -0.25)
# in the shoulder plane.
solution = ik_3r(0.6, -0.25, math.pi / 2, 0.4, 0.4, 0.05)
```

## Goals

Every goal has `tick(t, world)`, `is_complete(world)` and `evaluate(world)`. `evaluate` returns a float score from 0.0 to 1.0. The goals read from a `world` object that you supply:

- `ReachPose(target, tolerance)` needs `world.ee_pose()`. It scores `1 - dist / tolerance`, clamped to [0, 1].
- `PickObject(target)` needs `world.arm.state.grasped`, `world.ee_pose()` and `world.scene.object(id)`. Until the target is grasped, the score falls off with distance and is capped at 0.99.
- `PlaceInBin(target, bin)` needs `world.scene.object(id)` (objects with `pose` and `settled`) and `world.scene.fixtures()`, which yields `(id, fixture)` pairs with `pose` and `half_extents`. Until the target is placed, the score falls off with xy distance and is capped at 0.99.
- `Stack(a, b)` needs objects with `pose`, `settled` and `half_height_z`. It completes once `a` has sat on `b` for 0.1 s, with tick times given in seconds. Until then it scores 0.95 while `a` is stacked and 0.0 otherwise.
- `All` scores the minimum of its goals (1.0 when empty), `Any` scores the maximum (0.0 when empty), and `Not` scores `1 - inner`.

## Conventions

Positive pitch about +Y tilts the arm's +X toward -Z, so a cumulative pitch of π/2 points the end effector's +X straight down.

## What this package does not do

There is no physics or world simulation. Nothing here integrates joint velocities, applies gravity, detects contacts or grasps objects. There are no port or channel objects, no scene, fixture or object types, and no command-line program. The controller and the goals work with any objects that offer the attributes listed above.