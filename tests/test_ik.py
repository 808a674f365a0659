import math

import pytest

from reacharm.ik import ik_2r, ik_3r

PI = math.pi


def _fk_2r(alpha, beta, l1, l2):
    x = l1 * math.cos(alpha) + l2 * math.cos(alpha + beta)
    z = -(l1 * math.sin(alpha) + l2 * math.sin(alpha + beta))
    return x, z


def _fk_3r(j1, j2, j3, l1, l2, l3):
    t1 = j1
    t12 = j1 + j2
    t123 = j1 + j2 + j3
    x = l1 * math.cos(t1) + l2 * math.cos(t12) + l3 * math.cos(t123)
    z = -(l1 * math.sin(t1) + l2 * math.sin(t12) + l3 * math.sin(t123))
    return x, z


def _assert_round_trip(target_x, target_z, l1, l2):
    solution = ik_2r(target_x, target_z, l1, l2)
    assert solution is not None
    fx, fz = _fk_2r(*solution, l1, l2)
    assert abs(fx - target_x) < 1e-4
    assert abs(fz - target_z) < 1e-4


def _assert_round_trip_3r(target_x, target_z, target_pitch):
    l1, l2, l3 = 0.4, 0.4, 0.05
    solution = ik_3r(target_x, target_z, target_pitch, l1, l2, l3)
    assert solution is not None
    j1, j2, j3 = solution
    fx, fz = _fk_3r(j1, j2, j3, l1, l2, l3)
    assert abs(fx - target_x) < 1e-4
    assert abs(fz - target_z) < 1e-4
    assert abs((j1 + j2 + j3) - target_pitch) < 1e-4


def test_arm_extended_horizontal():
    alpha, beta = ik_2r(0.8, 0.0, 0.4, 0.4)
    assert abs(alpha) < 1e-3
    assert abs(beta) < 1e-3


def test_arm_straight_down():
    alpha, beta = ik_2r(0.0, -0.8, 0.4, 0.4)
    assert abs(alpha - PI / 2) < 1e-3
    assert abs(beta) < 1e-3


def test_arm_l_shape():
    alpha, beta = ik_2r(0.4, -0.4, 0.4, 0.4)
    assert abs(alpha) < 1e-5
    assert abs(beta - PI / 2) < 1e-5


def test_round_trip_below_shoulder():
    _assert_round_trip(0.6, -0.25, 0.4, 0.4)


def test_round_trip_above_shoulder():
    _assert_round_trip(0.6, 0.05, 0.4, 0.4)


def test_unreachable_far():
    assert ik_2r(2.0, 0.0, 0.4, 0.4) is None


def test_unreachable_inside_min_radius():
    assert ik_2r(0.1, 0.0, 0.4, 0.1) is None


def test_ik_3r_level_wrist_round_trip():
    _assert_round_trip_3r(0.6, -0.25, 0.0)


def test_ik_3r_wrist_pointing_down_round_trip():
    _assert_round_trip_3r(0.6, -0.25, PI / 2)


def test_ik_3r_wrist_pointing_up_round_trip():
    _assert_round_trip_3r(0.5, 0.10, -PI / 2)


def test_ik_3r_unreachable_returns_none():
    assert ik_3r(2.0, 0.0, 0.0, 0.4, 0.4, 0.05) is None


def test_ik_3r_pick_place_canonical_pose_points_fingers_down():
    j1, j2, j3 = ik_3r(0.6, -0.25, PI / 2, 0.4, 0.4, 0.05)
    assert abs((j1 + j2 + j3) - PI / 2) < 1e-4
    assert abs(j1) < PI and abs(j2) < PI and abs(j3) < PI


def test_ik_3r_matches_ik_2r_when_l3_is_zero():
    j1, j2 = ik_2r(0.6, -0.25, 0.4, 0.4)
    pitch = PI / 2
    k1, k2, k3 = ik_3r(0.6, -0.25, pitch, 0.4, 0.4, 0.0)
    assert k1 == pytest.approx(j1, abs=1e-6)
    assert k2 == pytest.approx(j2, abs=1e-6)
    assert k3 == pytest.approx(pitch - (j1 + j2), abs=1e-6)