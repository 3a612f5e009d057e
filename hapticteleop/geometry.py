"""Rotation helpers: quaternions, 3x3 matrices and roll/pitch/yaw angles.

Angles follow the fixed-axis convention R = Rz(yaw) * Ry(pitch) * Rx(roll).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]

IDENTITY: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def norm(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalized(self) -> "Quaternion":
        """Return the unit quaternion; raises ValueError for a zero quaternion."""
        n = self.norm()
        if n == 0.0:
            raise ValueError("zero quaternion has no rotation")
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))


def matmul3(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix3:
    """Multiply two 3x3 matrices."""
    columns = list(zip(*b))
    return tuple(  # type: ignore[return-value]
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def quaternion_to_matrix(q: Quaternion | Sequence[float]) -> Matrix3:
    """Return the rotation matrix of a (not necessarily unit) quaternion."""
    if not isinstance(q, Quaternion):
        q = Quaternion(*q)
    d = q.norm() ** 2
    if d == 0.0:
        raise ValueError("zero quaternion has no rotation")
    s = 2.0 / d
    x, y, z, w = q
    xs, ys, zs = x * s, y * s, z * s
    wx, wy, wz = w * xs, w * ys, w * zs
    xx, xy, xz = x * xs, x * ys, x * zs
    yy, yz, zz = y * ys, y * zs, z * zs
    return (
        (1.0 - (yy + zz), xy - wz, xz + wy),
        (xy + wz, 1.0 - (xx + zz), yz - wx),
        (xz - wy, yz + wx, 1.0 - (xx + yy)),
    )


def matrix_to_quaternion(m: Sequence[Sequence[float]]) -> Quaternion:
    """Return the unit quaternion of a rotation matrix, with w >= 0."""
    trace = m[0][0] + m[1][1] + m[2][2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        q = Quaternion(
            (m[2][1] - m[1][2]) / s,
            (m[0][2] - m[2][0]) / s,
            (m[1][0] - m[0][1]) / s,
            0.25 * s,
        )
    elif m[0][0] > m[1][1] and m[0][0] > m[2][2]:
        s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
        q = Quaternion(
            0.25 * s,
            (m[0][1] + m[1][0]) / s,
            (m[0][2] + m[2][0]) / s,
            (m[2][1] - m[1][2]) / s,
        )
    elif m[1][1] > m[2][2]:
        s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
        q = Quaternion(
            (m[0][1] + m[1][0]) / s,
            0.25 * s,
            (m[1][2] + m[2][1]) / s,
            (m[0][2] - m[2][0]) / s,
        )
    else:
        s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
        q = Quaternion(
            (m[0][2] + m[2][0]) / s,
            (m[1][2] + m[2][1]) / s,
            0.25 * s,
            (m[1][0] - m[0][1]) / s,
        )
    q = q.normalized()
    if q.w < 0.0:
        q = Quaternion(-q.x, -q.y, -q.z, -q.w)
    return q


def matrix_to_rpy(m: Sequence[Sequence[float]]) -> tuple[float, float, float]:
    """Return (roll, pitch, yaw) of a rotation matrix.

    At gimbal lock (pitch = +-pi/2) yaw is reported as zero.
    """
    sin_pitch = max(-1.0, min(1.0, -m[2][0]))
    if abs(sin_pitch) >= 1.0:
        pitch = math.copysign(math.pi / 2.0, sin_pitch)
        roll = math.atan2(-m[1][2], m[1][1])
        return roll, pitch, 0.0
    pitch = math.asin(sin_pitch)
    roll = math.atan2(m[2][1], m[2][2])
    yaw = math.atan2(m[1][0], m[0][0])
    return roll, pitch, yaw


def rpy_to_matrix(roll: float, pitch: float, yaw: float) -> Matrix3:
    """Return Rz(yaw) * Ry(pitch) * Rx(roll)."""
    cr, sr = math.cos(roll), math.sin(roll)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    return (
        (cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr),
        (sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr),
        (-sp, cp * sr, cp * cr),
    )