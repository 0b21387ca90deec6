"""Numeric constants and small helpers shared across the package."""

from __future__ import annotations

import math
import os
from typing import TypeVar

PI = 3.14159265358979323
EPS_D = 0.00000000001
EPS_F = 0.00001
INF_D = math.inf
INF_F = math.inf

_T = TypeVar("_T", int, float)


def radians(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg * (PI / 180)


def degrees(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad * (180 / PI)


def clamp(x: _T, lo: _T, hi: _T) -> _T:
    """Clamp ``x`` into the closed range ``[lo, hi]``."""
    return min(max(x, lo), hi)


def resolve_path(filename: str | os.PathLike[str]) -> str:
    """Return the absolute, symlink-free path of ``filename``."""
    return os.path.realpath(os.fspath(filename))