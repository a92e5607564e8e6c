"""Position, rotation and scale of an object."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from .mathutil import radians_to_degrees
from .matrix import Matrix
from .quat import Quat
from .vector import Vector


@dataclass
class Transform:
    """A translation, a rotation quaternion and a per-axis scale."""

    position: Vector = field(default_factory=Vector)
    rotation: Quat = field(default_factory=Quat)
    scale: Vector = field(default_factory=Vector.one)

    def view_matrix(self) -> Matrix:
        """Left-handed view matrix looking along this transform's forward axis."""
        return Matrix.look_at_lh(self.position, self.position + self.forward(), self.up())

    def set_rotation(self, rotation: Union[Vector, Quat]) -> None:
        """Set the rotation from a quaternion or from Euler angles in degrees."""
        if isinstance(rotation, Quat):
            self.rotation = rotation
        else:
            self.rotation = Quat.from_euler(rotation)

    def add_scale(self, scale: Vector) -> None:
        self.scale = self.scale + scale

    def matrix(self) -> Matrix:
        """Model matrix whose rows are the scaled rotated axes and the position."""
        x = self.rotation.rotate_vector(Vector(1.0, 0.0, 0.0)) * self.scale.x
        y = self.rotation.rotate_vector(Vector(0.0, 1.0, 0.0)) * self.scale.y
        z = self.rotation.rotate_vector(Vector(0.0, 0.0, 1.0)) * self.scale.z
        t = self.position
        return Matrix([
            [x.x, x.y, x.z, 0.0],
            [y.x, y.y, y.z, 0.0],
            [z.x, z.y, z.z, 0.0],
            [t.x, t.y, t.z, 1.0],
        ])

    def _rotation_column(self, index: int) -> Vector:
        m = Matrix.make_rotation(self.rotation)
        return Vector(m[0][index], m[1][index], m[2][index]).get_safe_normal()

    def forward(self) -> Vector:
        return self._rotation_column(0)

    def right(self) -> Vector:
        return self._rotation_column(1)

    def up(self) -> Vector:
        return self._rotation_column(2)

    def translate(self, translation: Vector) -> None:
        self.position = self.position + translation

    def rotate(self, rotation: Vector) -> None:
        """Apply roll, pitch and yaw (degrees) in that order."""
        self.rotate_roll(rotation.x)
        self.rotate_pitch(rotation.y)
        self.rotate_yaw(rotation.z)

    def rotate_about_axis(self, axis: Vector, angle: float) -> None:
        """Pre-multiply by a rotation of ``angle`` degrees about ``axis``."""
        self.rotation = Quat.from_axis_angle(axis, angle) * self.rotation

    def rotate_yaw(self, angle: float) -> None:
        self.rotate_about_axis(Vector(0.0, 0.0, 1.0), angle)

    def rotate_pitch(self, angle: float) -> None:
        self.rotate_about_axis(Vector(0.0, 1.0, 0.0), angle)

    def rotate_roll(self, angle: float) -> None:
        self.rotate_about_axis(Vector(1.0, 0.0, 0.0), angle)

    def look_at(self, target: Vector) -> None:
        """Turn so that the forward axis points at ``target``; roll is reset."""
        direction = (target - self.position).get_safe_normal()
        pitch = -radians_to_degrees(math.asin(max(-1.0, min(1.0, direction.z))))
        yaw = radians_to_degrees(math.atan2(direction.y, direction.x))
        self.set_rotation(Vector(0.0, pitch, yaw))

    def __mul__(self, other: "Transform") -> "Transform":
        """Compose: the result applies ``other`` first, then ``self``."""
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(
            self.position + self.rotation.rotate_vector(self.scale * other.position),
            self.rotation * other.rotation,
            self.scale * other.scale,
        )