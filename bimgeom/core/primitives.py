"""Point and segment primitives on BIM project coordinates.

Every function here is total: malformed coordinates degrade to a documented
neutral value instead of raising, so one bad vertex cannot take down the
geometry of a whole level.
"""

from __future__ import annotations
import math
from typing import Sequence

from bimgeom.models import Vec2

MM_TO_M = 1 / 1000


def _is_real(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)


def is_finite_point(p: Sequence[float] | None) -> bool:
    """True if p has finite x and y (no NaN/Infinity)."""
    if p is None:
        return False
    try:
        x, y = p[0], p[1]
    except (TypeError, IndexError, KeyError):
        return False
    return _is_real(x) and _is_real(y)


def is_finite_polygon(polygon: Sequence[Vec2] | None) -> bool:
    """True if polygon has at least 3 points and all coordinates are finite."""
    if not polygon or len(polygon) < 3:
        return False
    return all(is_finite_point(p) for p in polygon)


def mm_to_m(mm: float) -> float:
    return mm * MM_TO_M


def m_to_mm(m: float) -> float:
    return m / MM_TO_M


def segment_length(p0: Vec2, p1: Vec2) -> float:
    """Distance between two points (input units). 0 if either point is invalid."""
    if not is_finite_point(p0) or not is_finite_point(p1):
        return 0.0
    return math.hypot(p1[0] - p0[0], p1[1] - p0[1])


def point_to_segment_dist_sq(p: Vec2, p0: Vec2, p1: Vec2) -> float:
    """Squared distance from p to segment [p0, p1]. Infinity if any input is invalid."""
    if not (is_finite_point(p) and is_finite_point(p0) and is_finite_point(p1)):
        return math.inf
    dx = p1[0] - p0[0]
    dy = p1[1] - p0[1]
    len_sq = dx * dx + dy * dy
    if len_sq < 1e-10:
        return (p[0] - p0[0]) ** 2 + (p[1] - p0[1]) ** 2
    t = ((p[0] - p0[0]) * dx + (p[1] - p0[1]) * dy) / len_sq
    t = max(0.0, min(1.0, t))
    qx = p0[0] + t * dx
    qy = p0[1] + t * dy
    return (p[0] - qx) ** 2 + (p[1] - qy) ** 2


def segment_angle(p0: Vec2, p1: Vec2) -> float:
    """Angle in radians from p0 to p1, atan2(dy, dx). 0 if either point is invalid."""
    if not is_finite_point(p0) or not is_finite_point(p1):
        return 0.0
    return math.atan2(p1[1] - p0[1], p1[0] - p0[0])


def segment_center_m(p0: Vec2, p1: Vec2) -> tuple[float, float]:
    """Segment midpoint in meters (X, Z for 3D). (0, 0) if either point is invalid."""
    if not is_finite_point(p0) or not is_finite_point(p1):
        return (0.0, 0.0)
    return (
        (p0[0] + p1[0]) / 2 * MM_TO_M,
        (p0[1] + p1[1]) / 2 * MM_TO_M,
    )


def polygon_centroid_m(polygon: Sequence[Vec2] | None) -> tuple[float, float]:
    """Vertex average of a polygon in meters. (0, 0) if empty or any vertex is invalid."""
    if not polygon:
        return (0.0, 0.0)
    sx = 0.0
    sy = 0.0
    for p in polygon:
        if not is_finite_point(p):
            return (0.0, 0.0)
        sx += p[0]
        sy += p[1]
    n = len(polygon)
    return (sx / n * MM_TO_M, sy / n * MM_TO_M)


def extend_segment_ends(p0: Vec2, p1: Vec2, thickness: float) -> tuple[Vec2, Vec2]:
    """Push both ends out by half the thickness so adjoining walls overlap at corners."""
    length = segment_length(p0, p1)
    if length < 1:
        return p0, p1
    half = thickness / 2
    ux = (p1[0] - p0[0]) / length
    uy = (p1[1] - p0[1]) / length
    return (
        (p0[0] - ux * half, p0[1] - uy * half),
        (p1[0] + ux * half, p1[1] + uy * half),
    )
