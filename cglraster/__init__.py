"""Vector math, transforms, triangulation, mipmapped textures and SVG scenes for software rasterization."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "complexnum",
    "mathutil",
    "matrix",
    "svg",
    "svgparser",
    "texture",
    "transforms",
    "triangulation",
    "vector",
]