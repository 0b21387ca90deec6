import math

import pytest

from cglraster.color import Color
from cglraster.texture import (
    MAX_MIP_LEVELS,
    LevelSampleMethod,
    MipLevel,
    PixelSampleMethod,
    SampleParams,
    Texture,
)
from cglraster.vector import Vector2D


def _solid(width, height, rgb):
    return Texture.from_pixels(bytes(rgb) * (width * height), width, height)


def _checker(width, height):
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += b"\xff\xff\xff" if (x + y) % 2 else b"\x00\x00\x00"
    return Texture.from_pixels(data, width, height)


def test_from_pixels_rejects_wrong_length():
    with pytest.raises(ValueError):
        Texture.from_pixels(b"\x00" * 5, 2, 1)


def test_from_pixels_rejects_empty_size():
    with pytest.raises(ValueError):
        Texture.from_pixels(b"", 0, 0)


def test_generate_mips_rejects_invalid_start_level():
    tex = _solid(4, 4, (1, 2, 3))
    with pytest.raises(ValueError):
        tex.generate_mips(len(tex.mipmap))


def test_mip_chain_halves_each_level():
    tex = _solid(8, 4, (9, 9, 9))
    assert len(tex.mipmap) == int(math.log2(8)) + 1
    for prev, curr in zip(tex.mipmap, tex.mipmap[1:]):
        assert curr.width == max(1, prev.width // 2)
        assert curr.height == max(1, prev.height // 2)
        assert len(curr.texels) == 3 * curr.width * curr.height


def test_mip_chain_is_capped():
    tex = Texture(4, 4, [MipLevel(1 << 15, 1, bytearray(3 * (1 << 15)))])
    tex.generate_mips()
    assert len(tex.mipmap) == MAX_MIP_LEVELS


def test_level_zero_keeps_original_pixels():
    pixels = bytes(range(12))
    tex = Texture.from_pixels(pixels, 2, 2)
    assert bytes(tex.mipmap[0].texels) == pixels


def test_white_texture_filters_to_white():
    tex = _solid(8, 8, (255, 255, 255))
    level1 = tex.mipmap[1]
    assert set(level1.texels) == {255}


def test_get_texel_reads_row_major():
    pixels = bytes([0, 0, 0, 10, 20, 30, 40, 50, 60, 70, 80, 90])
    tex = Texture.from_pixels(pixels, 2, 2)
    assert tex.mipmap[0].get_texel(1, 0) == Color.from_bytes(pixels[3:6])
    assert tex.mipmap[0].get_texel(0, 1) == Color.from_bytes(pixels[6:9])


def test_invalid_level_is_magenta():
    tex = _solid(2, 2, (0, 0, 0))
    assert tex.sample_nearest(Vector2D(0.5, 0.5), 99) == Color(1, 0, 1)
    assert tex.sample_bilinear(Vector2D(0.5, 0.5), -1) == Color(1, 0, 1)


def test_nearest_picks_containing_texel():
    tex = _checker(4, 4)
    mip = tex.mipmap[0]
    for tx in range(4):
        for ty in range(4):
            uv = Vector2D((tx + 0.5) / 4, (ty + 0.5) / 4)
            assert tex.sample_nearest(uv) == mip.get_texel(tx, ty)


def test_nearest_clamps_edges():
    tex = _checker(4, 4)
    mip = tex.mipmap[0]
    assert tex.sample_nearest(Vector2D(1.0, 1.0)) == mip.get_texel(3, 3)
    assert tex.sample_nearest(Vector2D(-0.2, 0.0)) == mip.get_texel(0, 0)


def test_bilinear_at_texel_centre_matches_texel():
    tex = _checker(4, 4)
    mip = tex.mipmap[0]
    uv = Vector2D(1.5 / 4, 2.5 / 4)
    assert tuple(tex.sample_bilinear(uv)) == pytest.approx(
        tuple(mip.get_texel(1, 2)), abs=1e-9
    )


def test_bilinear_midpoint_is_average():
    tex = Texture.from_pixels(b"\x00\x00\x00\xff\xff\xff", 2, 1)
    assert tuple(tex.sample_bilinear(Vector2D(0.5, 0.5))) == pytest.approx(
        (0.5, 0.5, 0.5), abs=1e-9
    )


def test_bilinear_of_solid_texture_is_constant():
    tex = _solid(4, 4, (255, 0, 255))
    colour = tuple(tex.mipmap[0].get_texel(0, 0))
    for uv in (Vector2D(0.1, 0.9), Vector2D(0.37, 0.51), Vector2D(0.99, 0.0)):
        assert tuple(tex.sample_bilinear(uv)) == pytest.approx(colour, abs=1e-9)


def test_level_zero_method_ignores_footprint():
    tex = _checker(8, 8)
    sp = SampleParams(
        p_uv=Vector2D(0.3, 0.3),
        p_dx_uv=Vector2D(0.8, 0.3),
        p_dy_uv=Vector2D(0.3, 0.8),
        lsm=LevelSampleMethod.ZERO,
    )
    assert tex.get_level(sp) == 0.0
    assert tex.sample(sp) == tex.sample_nearest(sp.p_uv, 0)


def test_get_level_grows_with_footprint():
    tex = _checker(8, 8)
    uv = Vector2D(0.5, 0.5)
    small = SampleParams(uv, Vector2D(0.5 + 1 / 8, 0.5), Vector2D(0.5, 0.5 + 1 / 8),
                         lsm=LevelSampleMethod.NEAREST)
    large = SampleParams(uv, Vector2D(0.5 + 4 / 8, 0.5), Vector2D(0.5, 0.5 + 4 / 8),
                         lsm=LevelSampleMethod.NEAREST)
    assert tex.get_level(small) == 0.0
    assert math.isclose(tex.get_level(large), math.log2(4))


def test_get_level_is_clamped_to_chain():
    tex = _checker(4, 4)
    sp = SampleParams(Vector2D(0, 0), Vector2D(100, 0), Vector2D(0, 100),
                      lsm=LevelSampleMethod.LINEAR)
    assert tex.get_level(sp) == len(tex.mipmap) - 1


def test_sample_nearest_level_matches_direct_lookup():
    tex = _checker(8, 8)
    uv = Vector2D(0.2, 0.7)
    sp = SampleParams(uv, Vector2D(0.2 + 2 / 8, 0.7), Vector2D(0.2, 0.7),
                      psm=PixelSampleMethod.LINEAR, lsm=LevelSampleMethod.NEAREST)
    assert tex.sample(sp) == tex.sample_bilinear(uv, 1)


def test_sample_linear_level_lies_between_neighbours():
    tex = _solid(8, 8, (255, 255, 255))
    uv = Vector2D(0.5, 0.5)
    sp = SampleParams(uv, Vector2D(0.5 + 3 / 8, 0.5), Vector2D(0.5, 0.5),
                      psm=PixelSampleMethod.NEAREST, lsm=LevelSampleMethod.LINEAR)
    level = tex.get_level(sp)
    lo = tex.sample_nearest(uv, math.floor(level))
    hi = tex.sample_nearest(uv, math.floor(level) + 1)
    result = tex.sample(sp)
    for c, a, b in zip(result, lo, hi):
        assert min(a, b) - 1e-9 <= c <= max(a, b) + 1e-9