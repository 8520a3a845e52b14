"""Building floor backdrop — one plane per level under the space floors."""

from __future__ import annotations
import math

from bimgeom.rules.base import GeometryRule
from bimgeom.models import ElementType, Point3D, SceneElement
from bimgeom.core.context import LevelContext
from bimgeom.core.primitives import mm_to_m

FLOOR_COLOR = "#1c1917"
BACKDROP_OFFSET_Y = 0.001   # Below the level so colored space floors win


class BuildingFloorRule(GeometryRule):

    priority = 1

    def get_id(self) -> str:
        return "building.floor"

    def get_name(self) -> str:
        return "Building Floor"

    def applies(self, context: LevelContext) -> bool:
        return context.building_size is not None

    def generate(self, context: LevelContext) -> list[SceneElement]:
        width, depth = context.building_size
        w = mm_to_m(width)
        d = mm_to_m(depth)
        y = mm_to_m(context.level.elevation)
        if not all(math.isfinite(v) for v in (w, d, y)) or w <= 0 or d <= 0:
            return []
        return [SceneElement(
            type=ElementType.BUILDING_FLOOR,
            position=Point3D(x=w / 2, y=y - BACKDROP_OFFSET_Y, z=d / 2),
            size=(w, 0.0, d),
            color=FLOOR_COLOR,
        )]
