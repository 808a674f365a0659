"""Minimal rigid-body geometry: unit quaternions and 3D isometries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

Vector3 = Tuple[float, float, float]

_PARALLEL_EPS = 1e-9


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Vector3, s: float) -> Vector3:
    return (a[0] * s, a[1] * s, a[2] * s)


def norm(v: Vector3) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(_dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Unit vector along ``v``; raises ValueError for a zero vector."""
    length = norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return _scale(v, 1.0 / length)


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion representing a 3D rotation (w + xi + yj + zk)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis`` (normalized here)."""
        ux, uy, uz = normalize(axis)
        half = angle / 2.0
        s = math.sin(half)
        return cls(math.cos(half), ux * s, uy * s, uz * s)

    @classmethod
    def rotation_between(cls, a: Vector3, b: Vector3) -> Optional[Quaternion]:
        """Smallest rotation taking direction ``a`` onto direction ``b``.

        Returns None when either vector is zero or the two are antiparallel,
        since no unique rotation exists then.
        """
        if norm(a) == 0.0 or norm(b) == 0.0:
            return None
        na = normalize(a)
        nb = normalize(b)
        axis = _cross(na, nb)
        sin_angle = norm(axis)
        cos_angle = _dot(na, nb)
        if sin_angle < _PARALLEL_EPS:
            return cls.identity() if cos_angle > 0.0 else None
        angle = math.atan2(sin_angle, cos_angle)
        return cls.from_axis_angle(axis, angle)

    def rotate(self, v: Vector3) -> Vector3:
        """Apply this rotation to vector ``v``."""
        u = (self.x, self.y, self.z)
        uv = _cross(u, v)
        uuv = _cross(u, uv)
        return _add(v, _add(_scale(uv, 2.0 * self.w), _scale(uuv, 2.0)))

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )


@dataclass(frozen=True)
class Isometry:
    """Rigid transform: rotation followed by translation."""

    translation: Vector3 = (0.0, 0.0, 0.0)
    rotation: Quaternion = field(default_factory=Quaternion.identity)

    @classmethod
    def identity(cls) -> Isometry:
        return cls()

    @classmethod
    def from_translation(cls, x: float, y: float, z: float) -> Isometry:
        return cls((float(x), float(y), float(z)), Quaternion.identity())

    def transform_point(self, p: Vector3) -> Vector3:
        """Map point ``p`` from the local frame into the parent frame."""
        return _add(self.rotation.rotate(p), self.translation)

    def __mul__(self, other: Isometry) -> Isometry:
        if not isinstance(other, Isometry):
            return NotImplemented
        return Isometry(
            _add(self.translation, self.rotation.rotate(other.translation)),
            self.rotation * other.rotation,
        )