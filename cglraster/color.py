"""RGB colours with float components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator


def _unit_clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class Color:
    """An RGB colour whose channels are nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Color:
        if isinstance(other, (int, float)):
            return Color(self.r / other, self.g / other, self.b / other)
        return NotImplemented

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb`` or ``#rrggbb`` (the ``#`` is optional)."""
        digits = text.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid hex colour: {text!r}")
        try:
            channels = bytes.fromhex(digits)
        except ValueError as exc:
            raise ValueError(f"invalid hex colour: {text!r}") from exc
        return cls.from_bytes(channels)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Color:
        """Build a colour from three 8-bit channel values."""
        channels = bytes(data)
        if len(channels) != 3:
            raise ValueError(f"expected 3 bytes, got {len(channels)}")
        r, g, b = channels
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_bytes(self) -> bytes:
        """Clamp each channel to ``[0, 1]`` and truncate it to 8 bits."""
        return bytes(int(255.0 * _unit_clamp(c)) for c in self)


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)