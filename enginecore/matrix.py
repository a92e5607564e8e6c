"""Row-major 4x4 matrices for row vectors."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence

from .mathutil import SMALL_NUMBER
from .quat import Quat
from .vector import Vector, Vector4

_SINGULAR_EPSILON = 1.0e-6


def _identity_rows() -> List[List[float]]:
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


class Matrix:
    """A 4x4 matrix stored row by row; ``m[row][col]``.

    Points are row vectors multiplied on the left, so the translation lives
    in the last row.
    """

    __slots__ = ("m",)

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None) -> None:
        if rows is None:
            self.m = _identity_rows()
            return
        self.m = [[float(value) for value in row] for row in rows]
        if len(self.m) != 4 or any(len(row) != 4 for row in self.m):
            raise ValueError("a matrix needs four rows of four values")

    # construction -----------------------------------------------------

    @classmethod
    def identity(cls) -> "Matrix":
        return cls()

    @classmethod
    def from_rows(cls, x: Vector4, y: Vector4, z: Vector4, w: Vector4) -> "Matrix":
        """Build a matrix whose rows are the four given 4-vectors."""
        return cls([list(row) for row in (x, y, z, w)])

    @classmethod
    def from_values(cls, *args: float) -> "Matrix":
        """Build a matrix from sixteen values in row order."""
        if len(args) != 16:
            raise ValueError(f"expected 16 values, got {len(args)}")
        return cls([args[i:i + 4] for i in range(0, 16, 4)])

    @classmethod
    def make_translation(cls, x, y: Optional[float] = None, z: Optional[float] = None) -> "Matrix":
        """Translation matrix from three floats or from one vector."""
        if y is None and z is None:
            x, y, z = x.x, x.y, x.z
        result = cls()
        result.m[3][0], result.m[3][1], result.m[3][2] = float(x), float(y), float(z)
        return result

    @classmethod
    def make_scale(cls, x, y: Optional[float] = None, z: Optional[float] = None) -> "Matrix":
        """Scale matrix from three floats or from one vector."""
        if y is None and z is None:
            x, y, z = x.x, x.y, x.z
        result = cls()
        result.m[0][0], result.m[1][1], result.m[2][2] = float(x), float(y), float(z)
        return result

    @classmethod
    def make_rotation(cls, quat: Quat) -> "Matrix":
        """Rotation matrix built from a quaternion."""
        x, y, z, w = quat.x, quat.y, quat.z, quat.w
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return cls([
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
            [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
            [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def look_at_lh(cls, eye: Vector, focus: Vector, world_up: Vector) -> "Matrix":
        """Left-handed view matrix looking from ``eye`` towards ``focus``."""
        forward = (focus - eye).get_safe_normal()
        right = world_up.cross(forward).get_safe_normal()
        up = forward.cross(right).get_safe_normal()
        return cls([
            [right.x, up.x, forward.x, 0.0],
            [right.y, up.y, forward.y, 0.0],
            [right.z, up.z, forward.z, 0.0],
            [-right.dot(eye), -up.dot(eye), -forward.dot(eye), 1.0],
        ])

    @classmethod
    def perspective_fov_lh(
        cls, field_of_view: float, aspect_ratio: float, near_plane: float, far_plane: float
    ) -> "Matrix":
        """Left-handed perspective projection; ``field_of_view`` is in radians."""
        y_scale = 1.0 / math.tan(field_of_view / 2.0)
        x_scale = y_scale / aspect_ratio
        depth = far_plane - near_plane
        result = cls()
        result.m[0][0] = x_scale
        result.m[1][1] = y_scale
        result.m[2][2] = far_plane / depth
        result.m[2][3] = 1.0
        result.m[3][2] = -near_plane * far_plane / depth
        result.m[3][3] = 0.0
        return result

    @classmethod
    def ortho_lh(cls, width: float, height: float, near_plane: float, far_plane: float) -> "Matrix":
        """Left-handed orthographic projection."""
        depth = far_plane - near_plane
        result = cls()
        result.m[0][0] = 2.0 / width
        result.m[1][1] = 2.0 / height
        result.m[2][2] = 1.0 / depth
        result.m[2][3] = 0.0
        result.m[3][2] = -near_plane / depth
        result.m[3][3] = 1.0
        return result

    # derived matrices -------------------------------------------------

    def orthonormalized(self) -> "Matrix":
        """Rebuild the first three rows as an orthonormal basis, keeping the translation."""
        m = self.m
        forward = Vector(m[0][0], m[0][1], m[0][2]).get_safe_normal()
        right = Vector(m[1][0], m[1][1], m[1][2])
        position = Vector(m[3][0], m[3][1], m[3][2])
        up = forward.cross(right).get_safe_normal()
        right = up.cross(forward)
        return Matrix([
            [forward.x, forward.y, forward.z, 0.0],
            [right.x, right.y, right.z, 0.0],
            [up.x, up.y, up.z, 0.0],
            [position.x, position.y, position.z, 1.0],
        ])

    def transposed(self) -> "Matrix":
        return Matrix(zip(*self.m))

    def determinant(self) -> float:
        m = [value for row in self.m for value in row]
        return (
            m[0] * (m[5] * (m[10] * m[15] - m[11] * m[14]) - m[6] * (m[9] * m[15] - m[11] * m[13]) + m[7] * (m[9] * m[14] - m[10] * m[13]))
            - m[1] * (m[4] * (m[10] * m[15] - m[11] * m[14]) - m[6] * (m[8] * m[15] - m[11] * m[12]) + m[7] * (m[8] * m[14] - m[10] * m[12]))
            + m[2] * (m[4] * (m[9] * m[15] - m[11] * m[13]) - m[5] * (m[8] * m[15] - m[11] * m[12]) + m[7] * (m[8] * m[13] - m[9] * m[12]))
            - m[3] * (m[4] * (m[9] * m[14] - m[10] * m[13]) - m[5] * (m[8] * m[14] - m[10] * m[12]) + m[6] * (m[8] * m[13] - m[9] * m[12]))
        )

    def inverse(self) -> "Matrix":
        """Return the inverse, or the identity when the matrix is (nearly) singular."""
        det = self.determinant()
        if abs(det) < _SINGULAR_EPSILON:
            return Matrix()
        m = [value for row in self.m for value in row]
        inv = 1.0 / det
        return Matrix([
            [
                inv * (m[5] * (m[10] * m[15] - m[11] * m[14]) - m[6] * (m[9] * m[15] - m[11] * m[13]) + m[7] * (m[9] * m[14] - m[10] * m[13])),
                -inv * (m[1] * (m[10] * m[15] - m[11] * m[14]) - m[2] * (m[9] * m[15] - m[11] * m[13]) + m[3] * (m[9] * m[14] - m[10] * m[13])),
                inv * (m[1] * (m[6] * m[15] - m[7] * m[14]) - m[2] * (m[5] * m[15] - m[7] * m[13]) + m[3] * (m[5] * m[14] - m[6] * m[13])),
                -inv * (m[1] * (m[6] * m[11] - m[7] * m[10]) - m[2] * (m[5] * m[11] - m[7] * m[9]) + m[3] * (m[5] * m[10] - m[6] * m[9])),
            ],
            [
                -inv * (m[4] * (m[10] * m[15] - m[11] * m[14]) - m[6] * (m[8] * m[15] - m[11] * m[12]) + m[7] * (m[8] * m[14] - m[10] * m[12])),
                inv * (m[0] * (m[10] * m[15] - m[11] * m[14]) - m[2] * (m[8] * m[15] - m[11] * m[12]) + m[3] * (m[8] * m[14] - m[10] * m[12])),
                -inv * (m[0] * (m[6] * m[15] - m[7] * m[14]) - m[2] * (m[4] * m[15] - m[7] * m[12]) + m[3] * (m[4] * m[14] - m[6] * m[12])),
                inv * (m[0] * (m[6] * m[11] - m[7] * m[10]) - m[2] * (m[4] * m[11] - m[7] * m[8]) + m[3] * (m[4] * m[10] - m[6] * m[8])),
            ],
            [
                inv * (m[4] * (m[9] * m[15] - m[11] * m[13]) - m[5] * (m[8] * m[15] - m[11] * m[12]) + m[7] * (m[8] * m[13] - m[9] * m[12])),
                -inv * (m[0] * (m[9] * m[15] - m[11] * m[13]) - m[1] * (m[8] * m[15] - m[11] * m[12]) + m[3] * (m[8] * m[13] - m[9] * m[12])),
                inv * (m[0] * (m[5] * m[15] - m[7] * m[13]) - m[1] * (m[4] * m[15] - m[7] * m[12]) + m[3] * (m[4] * m[13] - m[5] * m[12])),
                -inv * (m[0] * (m[5] * m[11] - m[7] * m[9]) - m[1] * (m[4] * m[11] - m[7] * m[8]) + m[3] * (m[4] * m[9] - m[5] * m[8])),
            ],
            [
                -inv * (m[4] * (m[9] * m[14] - m[10] * m[13]) - m[5] * (m[8] * m[14] - m[10] * m[12]) + m[6] * (m[8] * m[13] - m[9] * m[12])),
                inv * (m[0] * (m[9] * m[14] - m[10] * m[13]) - m[1] * (m[8] * m[14] - m[10] * m[12]) + m[2] * (m[8] * m[13] - m[9] * m[12])),
                -inv * (m[0] * (m[5] * m[14] - m[6] * m[13]) - m[1] * (m[4] * m[14] - m[6] * m[12]) + m[2] * (m[4] * m[13] - m[5] * m[12])),
                inv * (m[0] * (m[5] * m[10] - m[6] * m[9]) - m[1] * (m[4] * m[10] - m[6] * m[8]) + m[2] * (m[4] * m[9] - m[5] * m[8])),
            ],
        ])

    # decomposition ----------------------------------------------------

    def translation(self) -> Vector:
        row = self.m[3]
        return Vector(row[0], row[1], row[2])

    def scale(self) -> Vector:
        """Lengths of the first three rows."""
        return Vector(*(Vector(row[0], row[1], row[2]).length() for row in self.m[:3]))

    def rotation(self) -> Vector:
        """Euler angles in degrees of the rotation held by this matrix."""
        return Quat.from_rotation_matrix(self).to_euler()

    def to_transform(self):
        """Decompose into a transform of translation, rotation and scale."""
        from .transform import Transform

        return Transform(self.translation(), Quat.from_rotation_matrix(self), self.scale())

    def translation_part(self) -> "Matrix":
        return Matrix.make_translation(self.m[3][0], self.m[3][1], self.m[3][2])

    def rotation_part(self) -> "Matrix":
        """The upper 3x3 block with each row divided by its scale."""
        scales = [s if abs(s) >= SMALL_NUMBER else 1.0 for s in self.scale()]
        result = Matrix()
        for i, s in enumerate(scales):
            result.m[i][:3] = [value / s for value in self.m[i][:3]]
        return result

    def scale_part(self) -> "Matrix":
        return Matrix.make_scale(self.m[0][0], self.m[1][1], self.m[2][2])

    def max_scale_factor(self) -> float:
        return max(self.m[0][0], self.m[1][1], self.m[2][2])

    # transforming -----------------------------------------------------

    def transform_vector4(self, vector: Sequence[float]) -> Vector4:
        """Multiply the row vector ``vector`` by this matrix."""
        x, y, z, w = vector
        m = self.m
        return Vector4(*(x * m[0][c] + y * m[1][c] + z * m[2][c] + w * m[3][c] for c in range(4)))

    def transform_position(self, position: Vector) -> Vector:
        result = self.transform_vector4((position.x, position.y, position.z, 1.0))
        return Vector(result.x, result.y, result.z)

    # operators --------------------------------------------------------

    def __getitem__(self, index: int) -> List[float]:
        return self.m[index]

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self.m)

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix([[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self.m, other.m)])

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix([[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self.m, other.m)])

    def __mul__(self, other):
        if isinstance(other, Matrix):
            columns = list(zip(*other.m))
            return Matrix(
                [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.m]
            )
        if isinstance(other, (int, float)):
            return Matrix([[value * other for value in row] for row in self.m])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.m!r})"