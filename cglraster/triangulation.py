"""Ear-clipping triangulation of simple polygons."""

from __future__ import annotations

from typing import Sequence

from .vector import Vector2D

EPSILON = 0.0000000001

Triangle = tuple[Vector2D, Vector2D, Vector2D]


def inside(a: Vector2D, b: Vector2D, c: Vector2D, p: Vector2D) -> bool:
    """True if ``p`` lies inside or on counter-clockwise triangle ``abc``."""
    ax, ay = c.x - b.x, c.y - b.y
    bx, by = a.x - c.x, a.y - c.y
    cx, cy = b.x - a.x, b.y - a.y
    apx, apy = p.x - a.x, p.y - a.y
    bpx, bpy = p.x - b.x, p.y - b.y
    cpx, cpy = p.x - c.x, p.y - c.y

    a_cross_bp = ax * bpy - ay * bpx
    c_cross_ap = cx * apy - cy * apx
    b_cross_cp = bx * cpy - by * cpx
    return a_cross_bp >= 0.0 and b_cross_cp >= 0.0 and c_cross_ap >= 0.0


def area(contour: Sequence[Vector2D]) -> float:
    """Signed area of a closed contour; positive when counter-clockwise."""
    total = 0.0
    n = len(contour)
    for k, q in enumerate(contour):
        p = contour[k - 1] if n else q
        total += p.x * q.y - q.x * p.y
    return total * 0.5


def snip(
    contour: Sequence[Vector2D], u: int, v: int, w: int, indices: Sequence[int]
) -> bool:
    """True if the corner ``u, v, w`` of the remaining polygon is an ear.

    ``u``, ``v`` and ``w`` are positions in ``indices``, which maps the
    remaining polygon's vertices to positions in ``contour``.
    """
    a = contour[indices[u]]
    b = contour[indices[v]]
    c = contour[indices[w]]

    if EPSILON > ((b.x - a.x) * (c.y - a.y)) - ((b.y - a.y) * (c.x - a.x)):
        return False

    return not any(
        inside(a, b, c, contour[vertex])
        for pos, vertex in enumerate(indices)
        if pos not in (u, v, w)
    )


def triangulate(points: Sequence[Vector2D]) -> list[Triangle]:
    """Split a simple polygon into triangles.

    Fewer than three points give no triangles. If the polygon turns out not
    to be simple, the triangles found so far are returned.
    """
    contour = list(points)
    n = len(contour)
    if n < 3:
        return []

    if area(contour) > 0.0:
        indices = list(range(n))
    else:
        indices = list(range(n - 1, -1, -1))

    triangles: list[Triangle] = []
    nv = n
    count = 2 * nv
    v = nv - 1
    while nv > 2:
        if count <= 0:
            break
        count -= 1

        u = v if v < nv else 0
        v = u + 1 if u + 1 < nv else 0
        w = v + 1 if v + 1 < nv else 0

        if snip(contour, u, v, w, indices):
            triangles.append((contour[indices[u]], contour[indices[v]], contour[indices[w]]))
            del indices[v]
            nv -= 1
            count = 2 * nv

    return triangles