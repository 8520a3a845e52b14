"""Inward offset of convex polygons, used to derive a perimeter wall's inner face."""

from __future__ import annotations
import math
from typing import Sequence

from bimgeom.models import Vec2
from bimgeom.core.primitives import is_finite_point

PARALLEL_EPS = 1e-10


def _left_normal(a: Vec2, b: Vec2) -> tuple[float, float]:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    ln = math.hypot(dx, dy) or 1.0
    return (-dy / ln, dx / ln)


def _finite_or(value: float, fallback: float) -> float:
    return value if math.isfinite(value) else fallback


def offset_polygon_inward(polygon: Sequence[Vec2], thickness: float) -> list[Vec2]:
    """
    Move every edge of a counter-clockwise polygon inward by ``thickness``.

    Each new vertex is the intersection of the two offset edges meeting at
    the original vertex. Parallel neighbours fall back to shifting the vertex
    along the incoming edge's normal. Only convex polygons are guaranteed to
    stay simple; the input is returned unchanged when it has fewer than three
    vertices, a non-finite vertex, or a non-positive thickness.
    """
    n = len(polygon)
    if n < 3:
        return list(polygon)
    if not all(is_finite_point(p) for p in polygon):
        return list(polygon)
    t = thickness
    if not isinstance(t, (int, float)) or not math.isfinite(t) or t <= 0:
        return list(polygon)

    out: list[Vec2] = []
    for i in range(n):
        prev = polygon[(i - 1) % n]
        curr = polygon[i]
        nxt = polygon[(i + 1) % n]

        nx1, ny1 = _left_normal(prev, curr)
        nx2, ny2 = _left_normal(curr, nxt)

        # Offset edge (prev→curr) is p1→p2, offset edge (curr→next) is q1→q2
        p1x, p1y = prev[0] + nx1 * t, prev[1] + ny1 * t
        p2x, p2y = curr[0] + nx1 * t, curr[1] + ny1 * t
        q1x, q1y = curr[0] + nx2 * t, curr[1] + ny2 * t
        q2x, q2y = nxt[0] + nx2 * t, nxt[1] + ny2 * t

        d = (p2x - p1x) * (q2y - q1y) - (p2y - p1y) * (q2x - q1x)
        if not math.isfinite(d) or abs(d) < PARALLEL_EPS:
            out.append((
                _finite_or(curr[0] + nx1 * t, curr[0]),
                _finite_or(curr[1] + ny1 * t, curr[1]),
            ))
            continue

        s = ((q1x - p1x) * (q2y - q1y) - (q1y - p1y) * (q2x - q1x)) / d
        x = p1x + s * (p2x - p1x)
        y = p1y + s * (p2y - p1y)
        out.append((_finite_or(x, curr[0]), _finite_or(y, curr[1])))

    if all(is_finite_point(p) for p in out):
        return out
    return list(polygon)
