"""Dense row-major matrices used for 3D transforms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from rigsmith.angle import Angle
from rigsmith.vec3 import Vec3

if TYPE_CHECKING:
    from rigsmith.quaternion import Quaternion


class Matrix:
    """A rectangular matrix of floats, indexed as ``m[row][column]`` or ``m[row, column]``."""

    __slots__ = ("_rows", "_columns")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[float]], columns: int | None = None) -> None:
        data = [[float(value) for value in row] for row in rows]
        width = len(data[0]) if data else (columns or 0)
        if any(len(row) != width for row in data):
            raise ValueError("all matrix rows must have the same length")
        if columns is not None and columns != width:
            raise ValueError(f"expected {columns} columns, got {width}")
        self._rows = data
        self._columns = width

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        return cls(([0.0] * columns for _ in range(rows)), columns)

    @classmethod
    def identity(cls, size: int = 4, value: float = 1.0) -> Matrix:
        """Square matrix with ``value`` on the diagonal and zeros elsewhere."""
        result = cls.zeros(size, size)
        for i in range(size):
            result._rows[i][i] = float(value)
        return result

    @property
    def rows(self) -> int:
        return len(self._rows)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __getitem__(self, index: int | tuple[int, int]) -> list[float] | float:
        if isinstance(index, tuple):
            row, column = index
            return self._rows[row][column]
        return self._rows[index]

    def __setitem__(self, index: int | tuple[int, int], value: float | Sequence[float]) -> None:
        if isinstance(index, tuple):
            row, column = index
            self._rows[row][column] = float(value)  # type: ignore[arg-type]
            return
        new_row = [float(v) for v in value]  # type: ignore[union-attr]
        if len(new_row) != self._columns:
            raise ValueError(f"row must have {self._columns} values, got {len(new_row)}")
        self._rows[index] = new_row

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._rows:
            yield tuple(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def _elementwise(self, other: Matrix, sign: float) -> Matrix:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")
        return Matrix(
            ([a + sign * b for a, b in zip(mine, theirs)] for mine, theirs in zip(self._rows, other._rows)),
            self._columns,
        )

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self._columns != other.rows:
                raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
            other_columns = list(zip(*other._rows)) if other.rows else [()] * other.columns
            return Matrix(
                ([sum(a * b for a, b in zip(row, column)) for column in other_columns] for row in self._rows),
                other.columns,
            )
        if isinstance(other, (int, float)):
            return Matrix(([value * other for value in row] for row in self._rows), self._columns)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 1.0)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, -1.0)

    def transpose(self) -> Matrix:
        return Matrix(([row[j] for row in self._rows] for j in range(self._columns)), self.rows)

    def inverted(self) -> Matrix:
        """Inverse by cofactors; a singular matrix gives a zero matrix."""
        det = self.determinant()
        if det == 0:
            return Matrix.zeros(self._columns, self.rows)
        cofactors = Matrix(
            (
                [(-1) ** (i + j) * self.minor(i, j) for j in range(self._columns)]
                for i in range(self.rows)
            ),
            self._columns,
        )
        return cofactors.transpose() * (1.0 / det)

    def determinant(self) -> float:
        if self.rows != self._columns:
            raise ValueError(f"determinant needs a square matrix, got {self.shape}")
        if self.rows == 1:
            return self._rows[0][0]
        return sum(
            (-1) ** column * self._rows[0][column] * self.minor(0, column)
            for column in range(self._columns)
        )

    def minor(self, row: int, column: int) -> float:
        """Determinant of the matrix with ``row`` and ``column`` removed."""
        sub = [
            [value for j, value in enumerate(values) if j != column]
            for i, values in enumerate(self._rows)
            if i != row
        ]
        return Matrix(sub, self._columns - 1).determinant()

    @classmethod
    def translate(cls, origin: Matrix, offset: Vec3) -> Matrix:
        result = cls.identity(4)
        result[0, 3] = offset.x
        result[1, 3] = offset.y
        result[2, 3] = offset.z
        return origin * result

    @classmethod
    def scale(cls, origin: Matrix, factor: Vec3) -> Matrix:
        result = cls.identity(4)
        result[0, 0] = factor.x
        result[1, 1] = factor.y
        result[2, 2] = factor.z
        return origin * result

    @classmethod
    def rotate_axis(cls, origin: Matrix, axis: Vec3, angle: Angle) -> Matrix:
        """Rotate by ``angle`` about ``axis`` (expected to be a unit vector)."""
        rad = angle.radians
        sin = math.sin(rad)
        cos = math.cos(rad)
        x, y, z = axis
        k = 1.0 - cos
        result = cls.identity(4)
        result[0] = [cos + x * x * k, x * y * k - z * sin, x * z * k + y * sin, 0.0]
        result[1] = [y * x * k + z * sin, cos + y * y * k, y * z * k - x * sin, 0.0]
        result[2] = [z * x * k - y * sin, z * y * k + x * sin, cos + z * z * k, 0.0]
        return origin * result

    @classmethod
    def rotate_quaternion(cls, origin: Matrix, quaternion: Quaternion) -> Matrix:
        x, y, z, w = quaternion.x, quaternion.y, quaternion.z, quaternion.w
        return origin * cls(
            [
                [1 - 2 * y * y - 2 * z * z, 2 * x * y - 2 * w * z, 2 * x * z + 2 * w * y, 0.0],
                [2 * x * y + 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z - 2 * w * x, 0.0],
                [2 * x * z - 2 * w * y, 2 * y * z + 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def apply(cls, matrix: Matrix, origin: Vec3) -> Vec3:
        """Transform a point by a 4x4 matrix."""
        column = cls([[origin.x], [origin.y], [origin.z], [1.0]])
        result = matrix * column
        return Vec3(result[0, 0], result[1, 0], result[2, 0])

    def gl_mat(self) -> tuple[tuple[float, ...], ...]:
        """Columns of this 4x4 matrix converted to the Y-up renderer convention."""
        if self.shape != (4, 4):
            raise ValueError(f"renderer matrices are 4x4, got {self.shape}")
        conversion = Matrix.zeros(4, 4)
        conversion[2, 0] = -1.0
        conversion[0, 1] = 1.0
        conversion[1, 2] = 1.0
        conversion[3, 3] = 1.0
        result = conversion * self
        return tuple(tuple(result[r, c] for r in range(4)) for c in range(4))

    @classmethod
    def from_gl_mat(cls, value: Sequence[Sequence[float]]) -> Matrix:
        """Read four columns into a 4x4 matrix as they are, without axis conversion."""
        if len(value) != 4 or any(len(column) != 4 for column in value):
            raise ValueError("renderer matrices are 4x4")
        return cls([[value[c][r] for c in range(4)] for r in range(4)])