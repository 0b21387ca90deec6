"""Immutable 3x3 matrices."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .vector import Vector3D

_Rows = tuple[tuple[float, float, float], ...]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


class Matrix3x3:
    """A 3x3 matrix; with no arguments it is the identity.

    Nine positional arguments give the entries in row-major order.
    """

    __slots__ = ("_rows",)

    def __init__(self, *entries: float) -> None:
        if not entries:
            rows: _Rows = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
        elif len(entries) == 9:
            values = [float(e) for e in entries]
            rows = tuple(tuple(values[i * 3:i * 3 + 3]) for i in range(3))  # type: ignore[misc]
        else:
            raise TypeError(f"Matrix3x3 takes 0 or 9 entries, got {len(entries)}")
        self._rows = rows

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Matrix3x3:
        """Build a matrix from three rows of three numbers."""
        rows = [list(row) for row in rows]
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a 3x3 matrix needs three rows of three entries")
        return cls(*(value for row in rows for value in row))

    @classmethod
    def cross_product(cls, u: Vector3D) -> Matrix3x3:
        """Matrix ``M`` such that ``M * v == u.cross(v)``."""
        return cls(
            0.0, -u.z, u.y,
            u.z, 0.0, -u.x,
            -u.y, u.x, 0.0,
        )

    @property
    def rows(self) -> _Rows:
        return self._rows

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("index a Matrix3x3 with (row, column)")
        i, j = key
        return self._rows[i][j]

    def column(self, i: int) -> Vector3D:
        return Vector3D(self._rows[0][i], self._rows[1][i], self._rows[2][i])

    def with_entry(self, i: int, j: int, value: float) -> Matrix3x3:
        """Return a copy with entry ``(i, j)`` replaced."""
        rows = [list(row) for row in self._rows]
        rows[i][j] = value
        return Matrix3x3.from_rows(rows)

    def det(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self._rows
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(v * v for row in self._rows for v in row))

    def transpose(self) -> Matrix3x3:
        return Matrix3x3.from_rows(zip(*self._rows))

    def inverse(self) -> Matrix3x3:
        """Inverse matrix; raises ValueError if the matrix is singular."""
        det = self.det()
        if det == 0.0:
            raise ValueError("matrix is singular")
        (a, b, c), (d, e, f), (g, h, i) = self._rows
        adjugate = Matrix3x3(
            e * i - f * h, c * h - b * i, b * f - c * e,
            f * g - d * i, a * i - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        )
        return adjugate / det

    def _map(self, fn) -> Matrix3x3:
        return Matrix3x3.from_rows([[fn(v) for v in row] for row in self._rows])

    def __neg__(self) -> Matrix3x3:
        return self._map(lambda v: -v)

    def __add__(self, other: object) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3.from_rows(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3.from_rows(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __mul__(self, other: object):
        if isinstance(other, Matrix3x3):
            cols = list(zip(*other._rows))
            return Matrix3x3.from_rows(
                [[sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._rows]
            )
        if isinstance(other, Vector3D):
            return Vector3D(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        if _is_scalar(other):
            return self._map(lambda v: v * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix3x3:
        if _is_scalar(other):
            return self._map(lambda v: other * v)
        return NotImplemented

    def __truediv__(self, other: object) -> Matrix3x3:
        if _is_scalar(other):
            return self._map(lambda v: v / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix3x3.from_rows({[list(row) for row in self._rows]!r})"


def outer(u: Vector3D, v: Vector3D) -> Matrix3x3:
    """Outer product ``u v^T``."""
    return Matrix3x3.from_rows([[a * b for b in v] for a in u])