"""Mipmapped RGB textures with nearest and bilinear sampling."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .color import Color
from .mathutil import clamp
from .vector import Vector2D

MAX_MIP_LEVELS = 14

_MAGENTA = Color(1.0, 0.0, 1.0)


class PixelSampleMethod(enum.IntEnum):
    NEAREST = 0
    LINEAR = 1


class LevelSampleMethod(enum.IntEnum):
    ZERO = 0
    NEAREST = 1
    LINEAR = 2


@dataclass(frozen=True)
class SampleParams:
    """Where to sample, plus the uv of the neighbouring screen pixels."""

    p_uv: Vector2D = field(default_factory=Vector2D)
    p_dx_uv: Vector2D = field(default_factory=Vector2D)
    p_dy_uv: Vector2D = field(default_factory=Vector2D)
    psm: PixelSampleMethod = PixelSampleMethod.NEAREST
    lsm: LevelSampleMethod = LevelSampleMethod.ZERO


@dataclass
class MipLevel:
    """One level of a mipmap: RGB texels, three bytes per texel, row-major."""

    width: int
    height: int
    texels: bytearray

    def get_texel(self, tx: int, ty: int) -> Color:
        start = (tx + ty * self.width) * 3
        return Color.from_bytes(self.texels[start:start + 3])

    def _read(self, offset: int) -> tuple[float, float, float]:
        r, g, b = self.texels[offset:offset + 3]
        return r / 255.0, g / 255.0, b / 255.0

    def _write(self, offset: int, rgb: Sequence[float]) -> None:
        self.texels[offset:offset + 3] = bytes(
            int(255.0 * min(1.0, max(0.0, c))) for c in rgb
        )


def _lerp(a: Color, b: Color, t: float) -> Color:
    return a * (1.0 - t) + b * t


def _filter_weights(prev_size: int, curr_size: int):
    """Support width and per-output-index weights of the trapezoid filter."""
    if prev_size & 1:
        support, decimal = 3, 1.0 / curr_size
    else:
        support, decimal = 2, 0.0
    norm = 1.0 / (2.0 + decimal)

    def weights(i: int) -> tuple[float, float, float]:
        return norm * (1.0 - decimal * i), norm, norm * decimal * (i + 1)

    return support, weights


def _downsample(prev: MipLevel, curr: MipLevel) -> None:
    w_support, w_weights = _filter_weights(prev.width, curr.width)
    h_support, h_weights = _filter_weights(prev.height, curr.height)
    prev_pitch = prev.width * 3
    curr_pitch = curr.width * 3

    def accumulate(taps) -> list[float]:
        result = [0.0, 0.0, 0.0]
        for weight, offset in taps:
            for k, value in enumerate(prev._read(offset)):
                result[k] += weight * value
        return result

    if curr.height == prev.height:
        for i in range(curr.width):
            ww = w_weights(i)
            taps = [(ww[ii], 3 * (2 * i + ii)) for ii in range(w_support)]
            curr._write(3 * i, accumulate(taps))
    elif curr.width == prev.width:
        for j in range(curr.height):
            hw = h_weights(j)
            taps = [(hw[jj], prev_pitch * (2 * j + jj)) for jj in range(h_support)]
            curr._write(curr_pitch * j, accumulate(taps))
    else:
        for j in range(curr.height):
            hw = h_weights(j)
            for i in range(curr.width):
                ww = w_weights(i)
                taps = [
                    (hw[jj] * ww[ii], prev_pitch * (2 * j + jj) + 3 * (2 * i + ii))
                    for jj in range(h_support)
                    for ii in range(w_support)
                ]
                curr._write(curr_pitch * j + 3 * i, accumulate(taps))


@dataclass
class Texture:
    """An RGB texture and its mipmap chain; level 0 holds the original pixels."""

    width: int = 0
    height: int = 0
    mipmap: list[MipLevel] = field(default_factory=list)

    @classmethod
    def from_pixels(cls, pixels: bytes | bytearray | Sequence[int], width: int, height: int) -> Texture:
        """Build a texture from packed RGB bytes and generate its mipmaps."""
        data = bytearray(pixels)
        if width <= 0 or height <= 0:
            raise ValueError(f"texture size must be positive, got {width}x{height}")
        if len(data) != 3 * width * height:
            raise ValueError(
                f"expected {3 * width * height} bytes for {width}x{height}, got {len(data)}"
            )
        tex = cls(width, height, [MipLevel(width, height, data)])
        tex.generate_mips()
        return tex

    def generate_mips(self, start_level: int = 0) -> None:
        """Rebuild the levels below ``start_level``, up to MAX_MIP_LEVELS in all."""
        if not 0 <= start_level < len(self.mipmap):
            raise ValueError(f"invalid start level {start_level}")

        base = self.mipmap[start_level]
        if base.width <= 0 or base.height <= 0:
            raise ValueError("cannot build mipmaps of an empty level")
        num_sub_levels = int(math.log2(max(base.width, base.height)))
        num_sub_levels = max(0, min(num_sub_levels, MAX_MIP_LEVELS - start_level - 1))

        del self.mipmap[start_level + 1:]
        width, height = base.width, base.height
        for _ in range(num_sub_levels):
            width = max(1, width // 2)
            height = max(1, height // 2)
            self.mipmap.append(MipLevel(width, height, bytearray(3 * width * height)))

        sub_levels = num_sub_levels - (start_level + 1)
        for level in range(start_level + 1, start_level + sub_levels + 1):
            _downsample(self.mipmap[level - 1], self.mipmap[level])

    def get_level(self, sp: SampleParams) -> float:
        """Continuous mip level implied by the uv footprint of one screen pixel."""
        if sp.lsm is LevelSampleMethod.ZERO or not self.mipmap:
            return 0.0
        base = self.mipmap[0]
        du_dx = (sp.p_dx_uv.x - sp.p_uv.x) * base.width
        dv_dx = (sp.p_dx_uv.y - sp.p_uv.y) * base.height
        du_dy = (sp.p_dy_uv.x - sp.p_uv.x) * base.width
        dv_dy = (sp.p_dy_uv.y - sp.p_uv.y) * base.height
        footprint = max(math.hypot(du_dx, dv_dx), math.hypot(du_dy, dv_dy))
        if footprint <= 1.0:
            return 0.0
        return clamp(math.log2(footprint), 0.0, float(len(self.mipmap) - 1))

    def sample(self, sp: SampleParams) -> Color:
        """Sample according to the pixel and level methods in ``sp``."""
        pick: Callable[[Vector2D, int], Color]
        if sp.psm is PixelSampleMethod.LINEAR:
            pick = self.sample_bilinear
        elif sp.psm is PixelSampleMethod.NEAREST:
            pick = self.sample_nearest
        else:
            return _MAGENTA

        if sp.lsm is LevelSampleMethod.ZERO:
            return pick(sp.p_uv, 0)
        level = self.get_level(sp)
        if sp.lsm is LevelSampleMethod.NEAREST:
            return pick(sp.p_uv, int(level + 0.5))
        if sp.lsm is LevelSampleMethod.LINEAR:
            lo = int(math.floor(level))
            hi = min(lo + 1, len(self.mipmap) - 1)
            return _lerp(pick(sp.p_uv, lo), pick(sp.p_uv, hi), level - lo)
        return _MAGENTA

    def sample_nearest(self, uv: Vector2D, level: int = 0) -> Color:
        """Colour of the texel containing ``uv``; magenta for an invalid level."""
        if not 0 <= level < len(self.mipmap):
            return _MAGENTA
        mip = self.mipmap[level]
        tx = clamp(int(math.floor(uv.x * mip.width)), 0, mip.width - 1)
        ty = clamp(int(math.floor(uv.y * mip.height)), 0, mip.height - 1)
        return mip.get_texel(tx, ty)

    def sample_bilinear(self, uv: Vector2D, level: int = 0) -> Color:
        """Bilinear blend of the four texels around ``uv``; magenta for an invalid level."""
        if not 0 <= level < len(self.mipmap):
            return _MAGENTA
        mip = self.mipmap[level]
        x = uv.x * mip.width - 0.5
        y = uv.y * mip.height - 0.5
        x0, y0 = math.floor(x), math.floor(y)
        s, t = x - x0, y - y0
        xa = clamp(x0, 0, mip.width - 1)
        xb = clamp(x0 + 1, 0, mip.width - 1)
        ya = clamp(y0, 0, mip.height - 1)
        yb = clamp(y0 + 1, 0, mip.height - 1)
        top = _lerp(mip.get_texel(xa, ya), mip.get_texel(xb, ya), s)
        bottom = _lerp(mip.get_texel(xa, yb), mip.get_texel(xb, yb), s)
        return _lerp(top, bottom, t)