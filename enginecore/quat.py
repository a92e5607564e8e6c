"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from .mathutil import KINDA_SMALL_NUMBER, degrees_to_radians, radians_to_degrees
from .vector import Vector


@dataclass
class Quat:
    """A quaternion ``(x, y, z, w)``; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_euler(cls, euler: Vector) -> "Quat":
        """Build a normalized quaternion from roll, pitch and yaw in degrees."""
        roll = degrees_to_radians(euler.x)
        pitch = degrees_to_radians(euler.y)
        yaw = degrees_to_radians(euler.z)

        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)

        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        ).normalized()

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle_degrees: float) -> "Quat":
        """Build a quaternion from an axis and an angle in degrees.

        The axis is used as given; a non-unit axis yields a non-unit quaternion.
        """
        half = degrees_to_radians(angle_degrees) * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_matrix(cls, matrix) -> "Quat":
        """Extract a quaternion from the upper 3x3 block of ``matrix[row][col]``."""
        m: Sequence[Sequence[float]] = matrix
        trace = m[0][0] + m[1][1] + m[2][2]

        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return cls(
                (m[2][1] - m[1][2]) / s,
                (m[0][2] - m[2][0]) / s,
                (m[1][0] - m[0][1]) / s,
                0.25 * s,
            )
        if m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
            return cls(
                0.25 * s,
                (m[0][1] + m[1][0]) / s,
                (m[0][2] + m[2][0]) / s,
                (m[2][1] - m[1][2]) / s,
            )
        if m[1][1] > m[2][2]:
            s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
            return cls(
                (m[0][1] + m[1][0]) / s,
                0.25 * s,
                (m[1][2] + m[2][1]) / s,
                (m[0][2] - m[2][0]) / s,
            )
        s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
        return cls(
            (m[0][2] + m[2][0]) / s,
            (m[1][2] + m[2][1]) / s,
            0.25 * s,
            (m[1][0] - m[0][1]) / s,
        )

    def to_euler(self) -> Vector:
        """Return roll, pitch and yaw in degrees."""
        x, y, z, w = self.x, self.y, self.z, self.w

        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))

        t = 2.0 * (w * y - x * z)
        sinp = math.sqrt(max(0.0, 1.0 + t))
        cosp = math.sqrt(max(0.0, 1.0 - t))
        pitch = 2.0 * math.atan2(sinp, cosp) - math.pi / 2.0

        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))

        return Vector(
            radians_to_degrees(roll),
            radians_to_degrees(pitch),
            radians_to_degrees(yaw),
        )

    def conjugate(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, self.w)

    def rotate_vector(self, vector: Vector) -> Vector:
        """Rotate ``vector`` by the normalized form of this quaternion."""
        q = self.normalized()
        rotated = q * Quat(vector.x, vector.y, vector.z, 0.0) * q.conjugate()
        return Vector(rotated.x, rotated.y, rotated.z)

    def normalized(self) -> "Quat":
        """Return a unit copy, or the identity if the magnitude is near zero."""
        magnitude = math.sqrt(
            self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        )
        if magnitude < KINDA_SMALL_NUMBER:
            return Quat()
        inv = 1.0 / magnitude
        return Quat(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def __add__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: "Quat") -> "Quat":
        """Hamilton product ``self * other``."""
        if not isinstance(other, Quat):
            return NotImplemented
        a, b = self, other
        return Quat(
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
        )