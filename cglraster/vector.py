"""Immutable 2D and 3D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .color import Color


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __neg__(self) -> Vector2D:
        return type(self)(-self.x, -self.y)

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2D:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.x * other, self.y * other)

    def __rmul__(self, other: object) -> Vector2D:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.x * other, self.y * other)

    def __truediv__(self, other: object) -> Vector2D:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.x / other, self.y / other)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> Vector2D:
        """Unit vector parallel to this one."""
        return self / self.norm()

    def dot(self, other: Vector2D) -> float:
        """Inner product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Scalar 2D cross product."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Vector3D:
    """A 3D vector; ``r``, ``g`` and ``b`` alias the components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vector3D:
        if isinstance(other, Vector3D):
            return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_scalar(other):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3D:
        if _is_scalar(other):
            return Vector3D(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector3D:
        if isinstance(other, Vector3D):
            return Vector3D(self.x / other.x, self.y / other.y, self.z / other.z)
        if _is_scalar(other):
            rc = 1.0 / other
            return Vector3D(rc * self.x, rc * self.y, rc * self.z)
        return NotImplemented

    def __rtruediv__(self, other: object) -> Vector3D:
        if _is_scalar(other):
            return Vector3D(other / self.x, other / self.y, other / self.z)
        return NotImplemented

    def rcp(self) -> Vector3D:
        """Per-component reciprocal."""
        return Vector3D(1.0 / self.x, 1.0 / self.y, 1.0 / self.z)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vector3D:
        """Unit vector parallel to this one."""
        return self * (1.0 / self.norm())

    def dot(self, other: Vector3D) -> float:
        """Inner product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def illum(self) -> float:
        """Luminance of the vector read as a linear RGB colour."""
        return 0.2126 * self.x + 0.7152 * self.y + 0.0722 * self.z

    def to_color(self) -> Color:
        return Color(self.x, self.y, self.z)

    @classmethod
    def from_color(cls, color: Color) -> Vector3D:
        return cls(color.r, color.g, color.b)