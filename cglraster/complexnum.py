"""Complex numbers represented as 2D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import Vector2D


@dataclass(frozen=True)
class Complex(Vector2D):
    """The complex number ``x + y i``."""

    @property
    def real(self) -> float:
        return self.x

    @property
    def imag(self) -> float:
        return self.y

    def __complex__(self) -> complex:
        return complex(self.x, self.y)

    def conj(self) -> Complex:
        """Complex conjugate."""
        return Complex(self.x, -self.y)

    def inv(self) -> Complex:
        """Multiplicative inverse."""
        r = 1.0 / self.norm2()
        return Complex(r * self.x, -r * self.y)

    def arg(self) -> float:
        """Argument (angle) in radians."""
        return math.atan2(self.y, self.x)

    def exponential(self) -> Complex:
        """``e`` raised to this number."""
        return math.exp(self.x) * Complex(math.cos(self.y), math.sin(self.y))

    def __mul__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            a, b, c, d = self.x, self.y, other.x, other.y
            return Complex(a * c - b * d, a * d + b * c)
        if isinstance(other, (int, float)):
            return Complex(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Complex:
        if isinstance(other, (int, float)):
            return Complex(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return self * other.inv()
        if isinstance(other, (int, float)):
            return Complex(self.x / other, self.y / other)
        return NotImplemented