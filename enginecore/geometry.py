"""Rays and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from .matrix import Matrix
from .vector import Vector


def _fmin(a: float, b: float) -> float:
    return a if a < b else b


def _fmax(a: float, b: float) -> float:
    return a if b < a else b


def _reciprocal(value: float) -> float:
    """IEEE-style reciprocal: division by a (signed) zero gives a signed infinity."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass
class Ray:
    """A ray from ``origin`` along ``direction``, with an informative length."""

    origin: Vector = field(default_factory=Vector)
    direction: Vector = field(default_factory=Vector)
    length: float = 0.0


@dataclass
class Box:
    """An axis-aligned box, optionally owned by a scene object.

    ``initial_min`` and ``initial_max`` hold the local-space bounds that
    :meth:`update` transforms into ``min_corner`` and ``max_corner``.
    """

    min_corner: Vector = field(default_factory=Vector)
    max_corner: Vector = field(default_factory=Vector)
    initial_min: Vector = field(default_factory=Vector)
    initial_max: Vector = field(default_factory=Vector)
    owner: Any = None
    can_be_rendered: bool = False

    def is_valid(self) -> bool:
        """True if the box has positive extent along every axis."""
        lo, hi = self.min_corner, self.max_corner
        return lo.x < hi.x and lo.y < hi.y and lo.z < hi.z

    def intersect_ray(self, ray: Ray) -> Optional[float]:
        """Return the distance along the ray to the box, or None on a miss.

        A ray that starts inside the box (or past it) counts as a miss.
        """
        direction = ray.direction.get_safe_normal()
        inv = Vector(
            _reciprocal(direction.x), _reciprocal(direction.y), _reciprocal(direction.z)
        )
        origin, lo, hi = ray.origin, self.min_corner, self.max_corner

        t1 = (lo.x - origin.x) * inv.x
        t2 = (hi.x - origin.x) * inv.x
        t3 = (lo.y - origin.y) * inv.y
        t4 = (hi.y - origin.y) * inv.y
        t5 = (lo.z - origin.z) * inv.z
        t6 = (hi.z - origin.z) * inv.z

        t_min = _fmax(_fmax(_fmin(t1, t2), _fmin(t3, t4)), _fmin(t5, t6))
        t_max = _fmin(_fmin(_fmax(t1, t2), _fmax(t3, t4)), _fmax(t5, t6))

        if t_min < 0:
            return None
        if t_min > t_max:
            return None
        return t_min

    def update(self, model_matrix: Matrix) -> None:
        """Recompute the world bounds from the initial bounds and a model matrix."""
        m = model_matrix
        axes = [Vector(m[i][0], m[i][1], m[i][2]) for i in range(3)]
        translation = Vector(m[3][0], m[3][1], m[3][2])

        origin = (self.initial_min + self.initial_max) * 0.5
        extent = (self.initial_max - self.initial_min) * 0.5

        new_origin = origin.replicate(0) * axes[0]
        new_origin = origin.replicate(1) * axes[1] + new_origin
        new_origin = origin.replicate(2) * axes[2] + new_origin
        new_origin = translation + new_origin

        new_extent = abs(extent.replicate(0) * axes[0])
        new_extent = new_extent + abs(extent.replicate(1) * axes[1])
        new_extent = new_extent + abs(extent.replicate(2) * axes[2])

        self.min_corner = new_origin - new_extent
        self.max_corner = new_origin + new_extent

    def init(self, owner: Any, min_corner: Vector, max_corner: Vector) -> None:
        """Set the owner and both the current and the initial bounds."""
        self.owner = owner
        self.initial_min = Vector(*min_corner)
        self.min_corner = Vector(*min_corner)
        self.initial_max = Vector(*max_corner)
        self.max_corner = Vector(*max_corner)

    def init_sphere(self, owner: Any, center: Vector, radius: float) -> None:
        """Set the owner and the current bounds to the cube around a sphere."""
        self.owner = owner
        offset = Vector(radius, radius, radius)
        self.min_corner = center - offset
        self.max_corner = center + offset

    def center(self) -> Vector:
        return (self.min_corner + self.max_corner) * 0.5