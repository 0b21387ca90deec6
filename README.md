# cglraster

Building blocks for a small software rasterizer that draws SVG scenes.

## Modules

- `cglraster.mathutil`: `radians`, `degrees`, `clamp`, `resolve_path`
  and the constants `PI`, `EPS_D`, `EPS_F`.
- `cglraster.color`: `Color`, an immutable RGB value with arithmetic,
  `Color.from_hex` (`#rgb` or `#rrggbb`, which raises `ValueError` on bad
  input), `Color.from_bytes` and `Color.to_bytes`.
- `cglraster.vector`: immutable `Vector2D` and `Vector3D`, with `norm`,
  `norm2`, `unit`, `dot` and `cross`. `Vector3D` also has `rcp`, `illum`,
  `to_color` and `from_color`.
- `cglraster.matrix`: the immutable `Matrix3x3`. Call it with no arguments
  for the identity, or with nine entries in row-major order. It has
  `from_rows`, `cross_product`, `det`, `norm`, `transpose`, `inverse`
  (which raises `ValueError` when the matrix is singular) and `with_entry`.
  The module also provides `outer`.
- `cglraster.complexnum`: `Complex`, a `Vector2D` with complex
  multiplication and division, `conj`, `inv`, `arg` and `exponential`.
- `cglraster.transforms`: `translate`, `scale`, `rotate` (degrees,
  counter-clockwise) and `transform_point`. `transform_point` applies a
  matrix to a 2D point in homogeneous coordinates.
- `cglraster.triangulation`: `triangulate` splits a simple polygon into a
  list of `(Vector2D, Vector2D, Vector2D)` triangles by ear clipping. With
  fewer than three points it returns an empty list. If the polygon turns out
  not to be simple, it returns the triangles found so far.
- `cglraster.texture`: `Texture.from_pixels` builds a texture from packed
  RGB bytes and generates its mipmap chain, up to 14 levels. Sampling uses
  `sample_nearest`, `sample_bilinear` and `sample`, which takes a
  `SampleParams` with a `PixelSampleMethod` and a `LevelSampleMethod`.
  `get_level` gives the level implied by the uv footprint. Asking for a level
  that does not exist samples magenta.
- `cglraster.svg`: the scene elements and the abstract `Rasterizer` they
  draw through. The elements are `Point`, `Line`, `Polyline`, `Rect`,
  `Polygon`, `Image`, `Group`, `Triangle`, `InterpolatedColorTriangle` and
  `TexturedTriangle`, together with `Style`, `ElementType` and the document
  class `SVG`.
- `cglraster.svgparser`: `load` and `parse_svg` read an SVG document into an
  `SVG` scene, and `parse_transform` reads a `transform` attribute
  (`matrix`, `translate`, `scale`, `rotate`, `skewX`, `skewY`).

## Installing

```
pip install .
```

## Example

```python
from cglraster.svgparser import load
from cglraster.matrix import Matrix3x3
from cglraster.svg import Rasterizer

class Recorder(Rasterizer):
    def __init__(self):
        self.calls = []

    def rasterize_point(self, x, y, color):
        self.calls.append(("point", x, y, color))

    def rasterize_line(self, x0, y0, x1, y1, color):
        self.calls.append(("line", x0, y0, x1, y1, color))

    def rasterize_triangle(self, x0, y0, x1, y1, x2, y2, color):
        self.calls.append(("triangle", x0, y0, x1, y1, x2, y2, color))

    def rasterize_interpolated_color_triangle(self, x0, y0, c0, x1, y1, c1, x2, y2, c2):
        self.calls.append(("colortri", x0, y0, x1, y1, x2, y2))

    def rasterize_textured_triangle(self, x0, y0, u0, v0, x1, y1, u1, v1, x2, y2, u2, v2, tex):
        self.calls.append(("textri", x0, y0, x1, y1, x2, y2))

scene = load("drawing.svg")
recorder = Recorder()
scene.draw(recorder, Matrix3x3.identity())
print(len(recorder.calls), "primitives")
```

## Drawing and parsing rules

- Elements are drawn in document order, so later elements land on top of
  earlier ones.
- A group's transform is composed with the transforms of everything inside
  it, and groups can be nested.
- A `<rect>` whose width and height are both zero becomes a `Point`.
- Lines and outlines are drawn only when the element has a `stroke`.
- A `<polygon>` is filled by triangulating it.
- `<colortri>` and `<textri>` elements become interpolated-colour and
  textured triangles. A `<texture texid=... filename=...>` element loads a
  PNG, relative to the document's directory, into `SVG.textures`.
- An `<image>` takes its PNG from a base64 `xlink:href` data URI.
- A PNG that cannot be decoded is logged and skipped.
- Elements of other kinds are ignored.

`parse_svg` and `load` raise `SVGParseError` in these cases:

- the document is not well-formed XML;
- its root element is not `<svg>`;
- an element lacks a required attribute, such as `points`, `uvs` or `texid`;
- a colour is not valid hex.

`load` also raises `OSError` when the file cannot be read.

## What this package does not do

`Rasterizer` is only an interface. The package has no rasterizer that fills
pixels, writes an image file or shows a window. It has no command-line tool
either. To produce output, implement the five `rasterize_*` methods yourself.
`ElementType.ELLIPSE` exists, but there is no ellipse element and `<ellipse>`
tags are ignored.

## Running the tests

```
pip install .[test]
pytest
```