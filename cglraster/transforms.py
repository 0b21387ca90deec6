"""Homogeneous 2D transforms built on 3x3 matrices."""

from __future__ import annotations

import math

from .mathutil import radians
from .matrix import Matrix3x3
from .vector import Vector2D, Vector3D


def transform_point(m: Matrix3x3, v: Vector2D) -> Vector2D:
    """Apply ``m`` to ``v`` in homogeneous coordinates and divide by ``w``."""
    mv = m * Vector3D(v.x, v.y, 1.0)
    return Vector2D(mv.x / mv.z, mv.y / mv.z)


def translate(dx: float, dy: float) -> Matrix3x3:
    """Matrix that moves points by ``(dx, dy)``."""
    return Matrix3x3(
        1.0, 0.0, dx,
        0.0, 1.0, dy,
        0.0, 0.0, 1.0,
    )


def scale(sx: float, sy: float) -> Matrix3x3:
    """Matrix that scales points by ``sx`` and ``sy`` about the origin."""
    return Matrix3x3(
        sx, 0.0, 0.0,
        0.0, sy, 0.0,
        0.0, 0.0, 1.0,
    )


def rotate(deg: float) -> Matrix3x3:
    """Matrix that rotates points ``deg`` degrees counterclockwise about the origin."""
    theta = radians(deg)
    c, s = math.cos(theta), math.sin(theta)
    return Matrix3x3(
        c, -s, 0.0,
        s, c, 0.0,
        0.0, 0.0, 1.0,
    )