from __future__ import annotations
import math
from typing import Protocol, Sequence, Union

import numpy as np

Vec = Union[np.ndarray, Sequence[float]]

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=np.float64)


def _vec3(v: Vec) -> np.ndarray:
    return np.asarray(v, dtype=np.float64).reshape(3)


def _normalize(v: Vec) -> np.ndarray:
    v = _vec3(v)
    n = float(np.linalg.norm(v))
    if n < 1e-12:
        return v
    return v / n


def angle_between_deg(a: Vec, b: Vec) -> float:
    """Unsigned angle between two vectors in degrees, in [0, 180].

    Returns 0.0 when either vector has zero length.
    """
    a = _vec3(a)
    b = _vec3(b)
    na = float(np.linalg.norm(a))
    nb = float(np.linalg.norm(b))
    if na < 1e-12 or nb < 1e-12:
        return 0.0
    c = float(np.dot(a, b)) / (na * nb)
    return math.degrees(math.acos(float(np.clip(c, -1.0, 1.0))))


def rotation_about_axis(axis: Vec, angle_deg: float) -> np.ndarray:
    """Right-handed 3x3 rotation of ``angle_deg`` about ``axis`` (Rodrigues)."""
    k = _normalize(axis)
    if float(np.linalg.norm(k)) < 1e-12:
        return np.eye(3, dtype=np.float64)
    th = math.radians(float(angle_deg))
    c = math.cos(th)
    s = math.sin(th)
    kx, ky, kz = k
    K = np.array(
        [
            [0.0, -kz, ky],
            [kz, 0.0, -kx],
            [-ky, kx, 0.0],
        ],
        dtype=np.float64,
    )
    return np.eye(3, dtype=np.float64) + s * K + (1.0 - c) * (K @ K)


class PoseMutator(Protocol):
    """Host transform the rig reads and mutates once per frame.

    ``position`` may hand out the host's live buffer; callers copy it before
    mutating the pose.
    """

    @property
    def position(self) -> np.ndarray: ...

    @property
    def forward(self) -> np.ndarray: ...

    @property
    def right(self) -> np.ndarray: ...

    def translate(self, offset: Vec) -> None: ...

    def rotate_around(self, point: Vec, axis: Vec, angle_deg: float) -> None: ...


class RigidPose:
    """
    Position plus orientation of a camera in world space.

    Orientation is a 3x3 matrix whose columns are the local right, up and back
    axes (OpenGL camera convention: the camera looks down its local -Z).
    """
    __slots__ = ("_position", "_rotation")

    def __init__(self, position: Vec = (0.0, 0.0, 0.0), rotation: np.ndarray | None = None):
        self._position = _vec3(position).copy()
        if rotation is None:
            self._rotation = np.eye(3, dtype=np.float64)
        else:
            self._rotation = np.asarray(rotation, dtype=np.float64).reshape(3, 3).copy()

    @classmethod
    def looking_at(cls, position: Vec, target: Vec, up: Vec = WORLD_UP) -> "RigidPose":
        pose = cls(position)
        pose.look_at(target, up)
        return pose

    def __repr__(self):
        x, y, z = self._position
        fx, fy, fz = self.forward
        return f"RigidPose(pos=({x:.3f}, {y:.3f}, {z:.3f}), fwd=({fx:.3f}, {fy:.3f}, {fz:.3f}))"

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Vec):
        self._position = _vec3(value).copy()

    @property
    def right(self) -> np.ndarray:
        return self._rotation[:, 0].copy()

    @property
    def up(self) -> np.ndarray:
        return self._rotation[:, 1].copy()

    @property
    def forward(self) -> np.ndarray:
        return -self._rotation[:, 2]

    def look_at(self, target: Vec, up: Vec = WORLD_UP):
        f = _vec3(target) - self._position
        if float(np.linalg.norm(f)) < 1e-9:
            f = np.array([0.0, 0.0, -1.0], dtype=np.float64)
        f = _normalize(f)

        s = np.cross(f, _vec3(up))
        if float(np.linalg.norm(s)) < 1e-9:
            s = np.array([1.0, 0.0, 0.0], dtype=np.float64)
        s = _normalize(s)

        u = np.cross(s, f)
        self._rotation = np.column_stack((s, u, -f))

    def translate(self, offset: Vec):
        self._position = self._position + _vec3(offset)

    def rotate_around(self, point: Vec, axis: Vec, angle_deg: float):
        R = rotation_about_axis(axis, angle_deg)
        p = _vec3(point)
        self._position = p + R @ (self._position - p)
        self._rotation = R @ self._rotation

    def copy(self) -> "RigidPose":
        return RigidPose(self._position, self._rotation)
