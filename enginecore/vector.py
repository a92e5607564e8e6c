"""Small vector, point and rectangle types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass
class Vector:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector":
        return cls(1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance(self, other: "Vector") -> float:
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def normalize(self, tolerance: float = 1.0e-8) -> bool:
        """Normalize in place; return False and leave the vector alone if it is too short."""
        square_sum = self.length_squared()
        if square_sum > tolerance:
            scale = 1.0 / math.sqrt(square_sum)
            self.x *= scale
            self.y *= scale
            self.z *= scale
            return True
        return False

    def get_unsafe_normal(self) -> "Vector":
        scale = 1.0 / math.sqrt(self.length_squared())
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def get_safe_normal(self, tolerance: float = 1.0e-8) -> "Vector":
        """Return a unit copy, or the zero vector if the length is below tolerance."""
        square_sum = self.length_squared()
        if square_sum == 1.0:
            return Vector(self.x, self.y, self.z)
        if square_sum < tolerance:
            return Vector.zero()
        scale = 1.0 / math.sqrt(square_sum)
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def replicate(self, index: int) -> "Vector":
        """Return a vector with the chosen component in all three slots."""
        if index == 0:
            return Vector(self.x, self.x, self.x)
        if index == 1:
            return Vector(self.y, self.y, self.y)
        if index == 2:
            return Vector(self.z, self.z, self.z)
        return Vector.zero()

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __abs__(self) -> "Vector":
        return Vector(abs(self.x), abs(self.y), abs(self.z))


@dataclass
class Vector4(Vector):
    """A four-component vector; arithmetic works on the first three components."""

    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass
class Vector2D:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Point:
    """A point in screen space."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies inside or on the edge of the rectangle."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def min_corner(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def max_corner(self) -> Vector2D:
        return Vector2D(self.x + self.width, self.y + self.height)