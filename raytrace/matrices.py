"""Square matrices and the affine transformations built from them."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from raytrace.tuples import Vec2, Vec3, Vec4, fequals


class _Matrix:
    """Immutable square matrix of floats."""

    size = 0
    row_type: type = tuple
    __slots__ = ("_rows",)

    def __init__(self, *rows: Iterable[float]) -> None:
        values = tuple(tuple(float(v) for v in row) for row in rows)
        if len(values) != self.size or any(len(row) != self.size for row in values):
            raise ValueError(
                f"{type(self).__name__} needs {self.size} rows of {self.size} values"
            )
        self._rows = values

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[float]]):
        """Build a matrix from a sequence of rows of numbers."""
        return cls(*rows)

    @property
    def rows(self) -> tuple:
        return tuple(self.row_type(*row) for row in self._rows)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self._rows[row][col]
        return self.row_type(*self._rows[key])

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            fequals(a, b)
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(row) for row in self.rows)})"

    def _without(self, x: int, y: int) -> tuple[tuple[float, ...], ...]:
        return tuple(
            tuple(v for c, v in enumerate(row) if c != y)
            for r, row in enumerate(self._rows)
            if r != x
        )

    def _signed(self, minor: float, x: int, y: int) -> float:
        return minor if (x + y) % 2 == 0 else -minor

    def _expand_first_row(self) -> float:
        return sum(value * self.cofactor(0, col) for col, value in enumerate(self._rows[0]))


class Matrix2x2(_Matrix):
    size = 2
    row_type = Vec2
    __slots__ = ()

    def determ(self) -> float:
        (a, b), (c, d) = self._rows
        return a * d - b * c


class Matrix3x3(_Matrix):
    size = 3
    row_type = Vec3
    __slots__ = ()

    def sub(self, x: int, y: int) -> Matrix2x2:
        """The submatrix with row ``x`` and column ``y`` removed."""
        return Matrix2x2(*self._without(x, y))

    def minor(self, x: int, y: int) -> float:
        return self.sub(x, y).determ()

    def cofactor(self, x: int, y: int) -> float:
        return self._signed(self.minor(x, y), x, y)

    def determ(self) -> float:
        return self._expand_first_row()


class Matrix4x4(_Matrix):
    size = 4
    row_type = Vec4
    __slots__ = ("_inverse",)

    def __init__(self, *rows: Iterable[float]) -> None:
        super().__init__(*rows)
        self._inverse: Matrix4x4 | None = None

    @classmethod
    def identity(cls) -> Matrix4x4:
        return cls(
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[float]]) -> Matrix4x4:
        """Build a matrix from four rows of four numbers."""
        return cls(*rows)

    def __matmul__(self, other):
        if isinstance(other, Matrix4x4):
            columns = tuple(zip(*other._rows))
            return Matrix4x4(
                *(
                    tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                    for row in self._rows
                )
            )
        if isinstance(other, Vec4):
            return Vec4(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        return NotImplemented

    def sub(self, x: int, y: int) -> Matrix3x3:
        """The submatrix with row ``x`` and column ``y`` removed."""
        return Matrix3x3(*self._without(x, y))

    def minor(self, x: int, y: int) -> float:
        return self.sub(x, y).determ()

    def cofactor(self, x: int, y: int) -> float:
        return self._signed(self.minor(x, y), x, y)

    def determ(self) -> float:
        return self._expand_first_row()

    def transpose(self) -> Matrix4x4:
        return Matrix4x4(*zip(*self._rows))

    def invert(self) -> Matrix4x4:
        """Return the inverse; raise ValueError if the matrix is singular."""
        if self._inverse is None:
            determ = self.determ()
            if determ == 0.0:
                raise ValueError("Cannot invert a matrix with a determinant of 0")
            cofactors = [[self.cofactor(r, c) for c in range(4)] for r in range(4)]
            self._inverse = Matrix4x4(
                *(tuple(value / determ for value in col) for col in zip(*cofactors))
            )
        return self._inverse

    def shear(self, xy, xx, yx, yz, zx, zy) -> Matrix4x4:
        return self @ shearing(xy, xx, yx, yz, zx, zy)

    def rotate_x(self, degrees: float) -> Matrix4x4:
        return self @ rotation_x(degrees)

    def rotate_y(self, degrees: float) -> Matrix4x4:
        return self @ rotation_y(degrees)

    def rotate_z(self, degrees: float) -> Matrix4x4:
        return self @ rotation_z(degrees)

    def translate(self, x: float, y: float, z: float) -> Matrix4x4:
        return self @ translation(x, y, z)

    def scale(self, x: float, y: float, z: float) -> Matrix4x4:
        return self @ scaling(x, y, z)


def view_transform(from_: Vec4, to: Vec4, up: Vec4) -> Matrix4x4:
    """Orient the world relative to an eye at ``from_`` looking at ``to``."""
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix4x4(
        (left.x, left.y, left.z, 0.0),
        (true_up.x, true_up.y, true_up.z, 0.0),
        (-forward.x, -forward.y, -forward.z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return orientation.translate(-from_.x, -from_.y, -from_.z)


def shearing(xy, xx, yx, yz, zx, zy) -> Matrix4x4:
    return Matrix4x4(
        (1.0, xy, xx, 0.0),
        (yx, 1.0, yz, 0.0),
        (zx, zy, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def degrees_to_radians(degrees: float) -> float:
    return (degrees / 180.0) * math.pi


def rotation_x(degrees: float) -> Matrix4x4:
    radians = degrees_to_radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix4x4(
        (1.0, 0.0, 0.0, 0.0),
        (0.0, cos, -sin, 0.0),
        (0.0, sin, cos, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_y(degrees: float) -> Matrix4x4:
    radians = degrees_to_radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix4x4(
        (cos, 0.0, sin, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-sin, 0.0, cos, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_z(degrees: float) -> Matrix4x4:
    radians = degrees_to_radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix4x4(
        (cos, -sin, 0.0, 0.0),
        (sin, cos, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def translation(x: float, y: float, z: float) -> Matrix4x4:
    return Matrix4x4(
        (1.0, 0.0, 0.0, x),
        (0.0, 1.0, 0.0, y),
        (0.0, 0.0, 1.0, z),
        (0.0, 0.0, 0.0, 1.0),
    )


def scaling(x: float, y: float, z: float) -> Matrix4x4:
    return Matrix4x4(
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )