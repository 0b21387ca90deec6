"""Reading SVG documents into scene elements."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import math
import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from PIL import Image as PILImage

from .color import Color
from .mathutil import PI, resolve_path
from .matrix import Matrix3x3
from .svg import (
    SVG,
    Group,
    Image,
    InterpolatedColorTriangle,
    Line,
    Point,
    Polygon,
    Polyline,
    Rect,
    Style,
    SVGElement,
    TexturedTriangle,
)
from .texture import MipLevel, Texture
from .transforms import rotate, scale, translate
from .vector import Vector2D

logger = logging.getLogger(__name__)

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_XLINK_NS = "{http://www.w3.org/1999/xlink}"


class SVGParseError(ValueError):
    """The document is not a readable SVG file."""


class _Tokens:
    """Reads numbers and characters the way a formatted text stream does.

    Once a read fails, every later read fails too.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def read_float(self) -> float | None:
        if self._failed:
            return None
        self._skip_space()
        match = _FLOAT_RE.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return float(match.group())

    def read_char(self) -> str | None:
        if self._failed:
            return None
        self._skip_space()
        if self._pos >= len(self._text):
            self._failed = True
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def float_or(self, default: float) -> float:
        value = self.read_float()
        return default if value is None else value


def _local_name(tag: object) -> str:
    return tag.rpartition("}")[2] if isinstance(tag, str) else ""


def _query_float(text: str | None) -> float | None:
    if text is None:
        return None
    match = _FLOAT_RE.match(text.lstrip())
    return float(match.group()) if match else None


def _float_attr(xml: ET.Element, name: str) -> float:
    value = _query_float(xml.get(name))
    return 0.0 if value is None else value


def _required(xml: ET.Element, name: str) -> str:
    value = xml.get(name)
    if value is None and name.startswith("xlink:"):
        value = xml.get(_XLINK_NS + name.partition(":")[2])
    if value is None:
        raise SVGParseError(f"<{_local_name(xml.tag)}> is missing attribute {name!r}")
    return value


def _color(text: str) -> Color:
    try:
        return Color.from_hex(text)
    except ValueError as exc:
        raise SVGParseError(str(exc)) from exc


def parse_transform(text: str) -> Matrix3x3:
    """Compose the transformations listed in an SVG ``transform`` attribute."""
    transform = Matrix3x3.identity()
    rest = text
    while "(" in rest:
        paren_l = rest.index("(")
        paren_r = rest.find(")")
        kind = rest[:paren_l]
        data = rest[paren_l + 1:paren_r] if paren_r >= 0 else rest[paren_l + 1:]
        tokens = _Tokens(data)

        if kind == "matrix":
            nums = _Tokens(data.replace(",", " "))
            a, b, c, d, e, f = (nums.float_or(0.0) for _ in range(6))
            m = Matrix3x3(a, c, e, b, d, f, 0.0, 0.0, 1.0)
        elif kind == "translate":
            x = tokens.float_or(0.0)
            y = tokens.float_or(0.0)
            m = translate(x, y)
        elif kind == "scale":
            x = tokens.float_or(1.0)
            y = tokens.float_or(1.0)
            m = scale(x, y)
        elif kind == "rotate":
            a = tokens.float_or(0.0)
            x = tokens.float_or(0.0)
            y = tokens.float_or(0.0)
            m = translate(x, y) * rotate(a) * translate(-x, -y)
        elif kind == "skewX":
            a = tokens.float_or(0.0)
            m = Matrix3x3.identity().with_entry(0, 1, math.tan(a * PI / 180.0))
        elif kind == "skewY":
            a = tokens.float_or(0.0)
            m = Matrix3x3.identity().with_entry(1, 0, math.tan(a * PI / 180.0))
        else:
            logger.warning("unknown transformation type: %s", kind)
            m = Matrix3x3.identity()

        transform = transform * m
        if paren_r < 0:
            break
        rest = rest[paren_r + 2:]
    return transform


def _parse_style(xml: ET.Element) -> Style:
    style = Style()
    fill = xml.get("fill")
    if fill is not None:
        style.fill_color = _color(fill)
    stroke = xml.get("stroke")
    if stroke is not None:
        style.stroke_color = _color(stroke)
        style.stroke_visible = True
    else:
        style.stroke_color = Color.BLACK
        style.stroke_visible = False
    width = _query_float(xml.get("stroke-width"))
    if width is not None:
        style.stroke_width = width
    miter = _query_float(xml.get("stroke-miterlimit"))
    if miter is not None:
        style.miter_limit = miter
    return style


def _common(xml: ET.Element) -> dict:
    trans = xml.get("transform")
    transform = parse_transform(trans) if trans is not None else Matrix3x3.identity()
    return {"style": _parse_style(xml), "transform": transform}


def _point_list(text: str) -> list[Vector2D]:
    tokens = _Tokens(text)
    points = []
    while True:
        x = tokens.read_float()
        sep = tokens.read_char()
        y = tokens.read_float()
        if x is None or sep is None or y is None:
            return points
        points.append(Vector2D(x, y))


def _vector_triple(text: str) -> list[Vector2D]:
    tokens = _Tokens(text)
    return [Vector2D(tokens.float_or(0.0), tokens.float_or(0.0)) for _ in range(3)]


def _decode_png(data: bytes) -> tuple[bytes, int, int]:
    """Decode PNG bytes to packed RGB, dropping any alpha channel."""
    with PILImage.open(io.BytesIO(data)) as img:
        if img.format != "PNG":
            raise ValueError("not a PNG image")
        rgb = img.convert("RGBA").convert("RGB")
        return rgb.tobytes(), rgb.width, rgb.height


def _parse_texture(xml: ET.Element, svg: SVG, base_dir: Path) -> None:
    texid = _required(xml, "texid")
    filename = _required(xml, "filename")
    try:
        pixels, width, height = _decode_png((base_dir / filename).read_bytes())
    except (OSError, ValueError):
        logger.warning("could not load image %s", filename)
        return
    svg.textures[texid] = Texture.from_pixels(pixels, width, height)


def _parse_image(xml: ET.Element) -> Image:
    image = Image(
        **_common(xml),
        position=Vector2D(_float_attr(xml, "x"), _float_attr(xml, "y")),
        dimension=Vector2D(_float_attr(xml, "width"), _float_attr(xml, "height")),
    )
    href = _required(xml, "xlink:href")
    _, comma, payload = href.partition(",")
    if not comma:
        raise SVGParseError("image data has no ',' before its payload")
    encoded = "".join(ch for ch in payload if ch not in " \t\n")
    try:
        pixels, width, height = _decode_png(base64.b64decode(encoded))
    except (OSError, ValueError, binascii.Error):
        logger.warning("could not load image")
        return image
    image.tex = Texture(width, height, [MipLevel(width, height, bytearray(pixels))])
    return image


def _parse_element(xml: ET.Element, svg: SVG, base_dir: Path) -> SVGElement | None:
    kind = _local_name(xml.tag)
    if kind == "line":
        return Line(
            **_common(xml),
            start=Vector2D(_float_attr(xml, "x1"), _float_attr(xml, "y1")),
            end=Vector2D(_float_attr(xml, "x2"), _float_attr(xml, "y2")),
        )
    if kind == "polyline":
        return Polyline(**_common(xml), points=_point_list(_required(xml, "points")))
    if kind == "rect":
        position = Vector2D(_float_attr(xml, "x"), _float_attr(xml, "y"))
        w, h = _float_attr(xml, "width"), _float_attr(xml, "height")
        if w == 0 and h == 0:
            return Point(**_common(xml), position=position)
        return Rect(**_common(xml), position=position, dimension=Vector2D(w, h))
    if kind == "polygon":
        return Polygon(**_common(xml), points=_point_list(_required(xml, "points")))
    if kind == "image":
        return _parse_image(xml)
    if kind == "g":
        group = Group(**_common(xml))
        group.elements = _parse_children(xml, svg, base_dir)
        return group
    if kind == "colortri":
        common = _common(xml)
        p0, p1, p2 = _vector_triple(_required(xml, "points"))
        tokens = _Tokens(_required(xml, "colors"))
        colors = []
        for _ in range(3):
            r, g, b, _alpha = (tokens.float_or(0.0) for _ in range(4))
            colors.append(Color(r, g, b))
        return InterpolatedColorTriangle(
            **common, p0_svg=p0, p1_svg=p1, p2_svg=p2,
            p0_col=colors[0], p1_col=colors[1], p2_col=colors[2],
        )
    if kind == "textri":
        common = _common(xml)
        p0, p1, p2 = _vector_triple(_required(xml, "points"))
        uv0, uv1, uv2 = _vector_triple(_required(xml, "uvs"))
        texid = _required(xml, "texid")
        return TexturedTriangle(
            **common, p0_svg=p0, p1_svg=p1, p2_svg=p2,
            p0_uv=uv0, p1_uv=uv1, p2_uv=uv2,
            tex=svg.textures.get(texid),
        )
    if kind == "texture":
        _parse_texture(xml, svg, base_dir)
    return None


def _parse_children(xml: ET.Element, svg: SVG, base_dir: Path) -> list[SVGElement]:
    """Parse child elements in document order, which is also draw order."""
    elements = []
    for child in xml:
        element = _parse_element(child, svg, base_dir)
        if element is not None:
            elements.append(element)
    return elements


def parse_svg(text: str | bytes, base_dir: str | os.PathLike[str] | None = None) -> SVG:
    """Parse SVG source; texture file names are relative to ``base_dir``."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise SVGParseError(f"malformed XML: {exc}") from exc
    if _local_name(root.tag) != "svg":
        raise SVGParseError("not an SVG file")

    directory = Path(base_dir) if base_dir is not None else Path.cwd()
    svg = SVG()
    width = _query_float(root.get("width"))
    if width is not None:
        svg.width = width
    height = _query_float(root.get("height"))
    if height is not None:
        svg.height = height
    svg.elements = _parse_children(root, svg, directory)
    return svg


def load(path: str | os.PathLike[str]) -> SVG:
    """Read and parse the SVG file at ``path``."""
    resolved = Path(resolve_path(path))
    data = resolved.read_bytes()
    return parse_svg(data, resolved.parent)