"""Space floors — one colored floor polygon and label per room."""

from __future__ import annotations
import math

from bimgeom.rules.base import GeometryRule
from bimgeom.models import (
    BIMSpace, ElementType, Point3D, SceneElement,
)
from bimgeom.core.context import LevelContext
from bimgeom.core.primitives import is_finite_polygon, mm_to_m, polygon_centroid_m

DEFAULT_SPACE_COLORS = [
    "#3b82f6", "#22c55e", "#eab308", "#ef4444", "#a855f7",
    "#06b6d4", "#f97316", "#ec4899", "#84cc16", "#6366f1",
]

FLOOR_OFFSET_Y = 0.003  # Above the building floor slab, avoids z-fighting
LABEL_OFFSET_Y = 0.02


def _to_int32(h: int) -> int:
    h &= 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def space_color(space: BIMSpace) -> str:
    """Explicit color, or a palette entry picked deterministically from the id."""
    if space.color:
        return space.color
    h = 0
    for ch in space.id:
        h = _to_int32((h << 5) - h + ord(ch))
    return DEFAULT_SPACE_COLORS[abs(h) % len(DEFAULT_SPACE_COLORS)]


class SpaceFloorRule(GeometryRule):

    priority = 5

    def get_id(self) -> str:
        return "space.floor"

    def get_name(self) -> str:
        return "Space Floors"

    def applies(self, context: LevelContext) -> bool:
        return len(context.level.spaces) > 0

    def generate(self, context: LevelContext) -> list[SceneElement]:
        elev = mm_to_m(context.level.elevation)
        if not math.isfinite(elev):
            return []
        elements: list[SceneElement] = []
        for space in context.level.spaces:
            if not is_finite_polygon(space.polygon):
                continue
            cx, cz = polygon_centroid_m(space.polygon)
            elements.append(SceneElement(
                type=ElementType.SPACE_FLOOR,
                source_id=space.id,
                position=Point3D(x=0.0, y=elev + FLOOR_OFFSET_Y, z=0.0),
                polygon=[(mm_to_m(x), mm_to_m(y)) for x, y in space.polygon],
                color=space_color(space),
                label=space.name,
                label_position=Point3D(x=cx, y=elev + LABEL_OFFSET_Y, z=cz),
            ))
        return elements
