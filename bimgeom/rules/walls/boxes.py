"""Wall segment → 3D box conversion shared by the wall rules."""

from __future__ import annotations
import math
from typing import Sequence

from bimgeom.models import (
    BIMDoor, ElementType, Point3D, SceneElement, Vec2, WallSegment,
)
from bimgeom.core.context import LevelContext
from bimgeom.core.door_cuts import segment_with_door_cuts
from bimgeom.core.primitives import (
    extend_segment_ends, is_finite_point, mm_to_m,
    segment_angle, segment_center_m, segment_length,
)


def cut_segment(
    seg: WallSegment, doors: Sequence[BIMDoor], thickness: float, context: LevelContext,
) -> list[WallSegment]:
    """Solid pieces of a wall segment; doors within twice the wall thickness are cut."""
    if not context.config.cut_doors:
        return [seg]
    return segment_with_door_cuts(
        seg.p0, seg.p1, doors,
        dist_threshold_mm=thickness * 2,
        min_segment_mm=context.params.min_cut_segment,
    )


def wall_box(
    p0: Vec2,
    p1: Vec2,
    thickness: float,
    height: float,
    context: LevelContext,
    source_id: str,
) -> SceneElement | None:
    """Box for one solid wall piece, or None when its dimensions are unusable."""
    if context.config.extend_corners:
        p0, p1 = extend_segment_ends(p0, p1, thickness)
    ln = mm_to_m(segment_length(p0, p1))
    thick = mm_to_m(thickness)
    h = mm_to_m(height)
    elev = mm_to_m(context.level.elevation)
    if ln <= 0 or not all(math.isfinite(v) and v > 0 for v in (thick, h)):
        return None
    if not math.isfinite(elev):
        return None
    cx, cz = segment_center_m(p0, p1)
    return SceneElement(
        type=ElementType.WALL_BOX,
        source_id=source_id,
        position=Point3D(x=cx, y=elev + h / 2, z=cz),
        size=(ln, h, thick),
        rotation_y=-segment_angle(p0, p1),
    )


def segment_boxes(
    segments: Sequence[WallSegment],
    thickness: float,
    height: float,
    context: LevelContext,
    source_id: str,
) -> list[SceneElement]:
    elements: list[SceneElement] = []
    doors = context.level.doors
    for seg in segments:
        if not (is_finite_point(seg.p0) and is_finite_point(seg.p1)):
            continue
        for piece in cut_segment(seg, doors, thickness, context):
            box = wall_box(piece.p0, piece.p1, thickness, height, context, source_id)
            if box is not None:
                elements.append(box)
    return elements
