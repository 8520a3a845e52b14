"""Door openings as 1D cuts on wall segments, and door-to-wall association.

Walls are extruded from straight segments, so a door is modelled as a gap in
the segment's parametric domain rather than a 3D boolean subtraction.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, Protocol, Sequence

from bimgeom.models import BIMDoor, BIMWall, DoorOpening, Vec2, WallSegment
from bimgeom.core.primitives import (
    is_finite_point, point_to_segment_dist_sq, segment_length,
)

logger = logging.getLogger(__name__)

DEFAULT_DIST_THRESHOLD_MM = 300.0
MIN_SEGMENT_MM = 20.0
T_TOLERANCE = 0.01
DOOR_OWNER_THRESHOLD_MM = 400.0
DEFAULT_WALL_THICKNESS_MM = 200.0


class DoorLike(Protocol):
    position: Vec2
    width: float


def _door_openings(
    p0: Vec2, p1: Vec2, doors: Iterable[DoorLike], dist_threshold: float,
) -> list[DoorOpening]:
    seg_len = segment_length(p0, p1)
    dx = p1[0] - p0[0]
    dy = p1[1] - p0[1]
    openings: list[DoorOpening] = []
    for door in doors:
        pa = door.position[0] - p0[0]
        pb = door.position[1] - p0[1]
        t = (pa * dx + pb * dy) / (seg_len * seg_len)
        dist_to_line = abs(pa * dy - pb * dx) / seg_len
        # NaN positions fail every comparison, so test for the keep case
        if not (dist_to_line <= dist_threshold and -T_TOLERANCE <= t <= 1 + T_TOLERANCE):
            continue
        if not (math.isfinite(door.width) and door.width > 0):
            continue
        t_clamp = max(0.0, min(1.0, t))
        half_w = door.width / 2 / seg_len
        openings.append(DoorOpening(
            t0=max(0.0, t_clamp - half_w),
            t1=min(1.0, t_clamp + half_w),
        ))
    return openings


def merge_openings(openings: Sequence[DoorOpening]) -> list[DoorOpening]:
    """Sort by start and merge overlapping or touching intervals."""
    merged: list[DoorOpening] = []
    for o in sorted(openings, key=lambda o: o.t0):
        if not o.t1 > o.t0:
            continue
        if merged and o.t0 <= merged[-1].t1:
            last = merged[-1]
            merged[-1] = DoorOpening(t0=last.t0, t1=max(last.t1, o.t1))
        else:
            merged.append(DoorOpening(t0=o.t0, t1=o.t1))
    return merged


def segment_with_door_cuts(
    p0: Vec2,
    p1: Vec2,
    doors: Iterable[DoorLike],
    dist_threshold_mm: float = DEFAULT_DIST_THRESHOLD_MM,
    min_segment_mm: float = MIN_SEGMENT_MM,
) -> list[WallSegment]:
    """
    Split a wall segment into the solid pieces left after cutting out doors.

    Doors whose position lies within ``dist_threshold_mm`` of the segment's
    line and projects onto the segment become holes; overlapping holes are
    merged. Solid pieces shorter than ``min_segment_mm`` are dropped.
    """
    if not is_finite_point(p0) or not is_finite_point(p1):
        return []
    seg_len = segment_length(p0, p1)
    if seg_len < 1:
        return [WallSegment(p0=p0, p1=p1)]

    merged = merge_openings(_door_openings(p0, p1, doors, dist_threshold_mm))
    if not merged:
        return [WallSegment(p0=p0, p1=p1)]

    dx = p1[0] - p0[0]
    dy = p1[1] - p0[1]
    min_t = min_segment_mm / seg_len

    def at(t: float) -> Vec2:
        return (p0[0] + t * dx, p0[1] + t * dy)

    out: list[WallSegment] = []
    t = 0.0
    for o in merged:
        if o.t0 - t >= min_t:
            out.append(WallSegment(p0=at(t), p1=at(o.t0)))
        t = o.t1
    if 1 - t >= min_t:
        out.append(WallSegment(p0=at(t), p1=(p1[0], p1[1])))
    return out


def get_wall_thickness_for_door(
    door: BIMDoor,
    walls: Sequence[BIMWall],
    threshold_mm: float = DOOR_OWNER_THRESHOLD_MM,
    default_thickness: float = DEFAULT_WALL_THICKNESS_MM,
) -> float:
    """
    Thickness of the wall a door sits in.

    The first wall (in the given order) with a segment within
    ``threshold_mm`` of the door wins. Without a match, the thinnest valid
    wall is used, then ``default_thickness``.
    """
    threshold_sq = threshold_mm * threshold_mm
    for wall in walls:
        for seg in wall.segments():
            if point_to_segment_dist_sq(door.position, seg.p0, seg.p1) <= threshold_sq:
                return wall.thickness
    return _fallback_thickness(walls, default_thickness)


def _fallback_thickness(walls: Sequence[BIMWall], default_thickness: float) -> float:
    thicknesses = [
        w.thickness for w in walls
        if math.isfinite(w.thickness) and w.thickness > 0
    ]
    return min(thicknesses) if thicknesses else default_thickness


class DoorWallIndex:
    """
    Precomputed segment list for resolving which wall a door belongs to.

    Built once per level. ``owner`` keeps first-match-in-wall-order
    semantics; ``candidates`` exposes every wall within the threshold so
    callers can see when ownership is ambiguous.
    """

    def __init__(
        self,
        walls: Sequence[BIMWall],
        threshold_mm: float = DOOR_OWNER_THRESHOLD_MM,
        default_thickness: float = DEFAULT_WALL_THICKNESS_MM,
    ) -> None:
        self.walls = list(walls)
        self.threshold_sq = threshold_mm * threshold_mm
        self.default_thickness = default_thickness
        self._segments: list[tuple[int, WallSegment]] = [
            (i, seg) for i, wall in enumerate(self.walls) for seg in wall.segments()
        ]

    def __len__(self) -> int:
        return len(self._segments)

    def candidates(self, door: BIMDoor) -> list[BIMWall]:
        """Walls with a segment within the threshold, in wall order, without duplicates."""
        hits: list[int] = []
        for i, seg in self._segments:
            if i in hits:
                continue
            if point_to_segment_dist_sq(door.position, seg.p0, seg.p1) <= self.threshold_sq:
                hits.append(i)
        return [self.walls[i] for i in hits]

    def owner(self, door: BIMDoor) -> BIMWall | None:
        found = self.candidates(door)
        if len(found) > 1:
            logger.warning(
                "Door %s is within range of %d walls (%s); using %s",
                door.id, len(found), ", ".join(w.id for w in found), found[0].id,
            )
        return found[0] if found else None

    def thickness_for(self, door: BIMDoor) -> float:
        wall = self.owner(door)
        if wall is not None:
            return wall.thickness
        return _fallback_thickness(self.walls, self.default_thickness)
