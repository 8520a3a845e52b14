"""Perimeter walls — outer footprint polygon, cut by doors, plus the inner face."""

from __future__ import annotations

from bimgeom.rules.base import GeometryRule
from bimgeom.rules.walls.boxes import segment_boxes
from bimgeom.models import (
    ElementType, PerimeterWall, Point3D, SceneElement,
)
from bimgeom.core.context import LevelContext
from bimgeom.core.offset import offset_polygon_inward
from bimgeom.core.primitives import is_finite_polygon, mm_to_m


class PerimeterWallRule(GeometryRule):
    """One box per surviving edge piece of each perimeter polygon."""

    priority = 10

    def get_id(self) -> str:
        return "wall.perimeter"

    def get_name(self) -> str:
        return "Perimeter Walls"

    def applies(self, context: LevelContext) -> bool:
        return any(isinstance(w, PerimeterWall) for w in context.level.walls)

    def generate(self, context: LevelContext) -> list[SceneElement]:
        elements: list[SceneElement] = []
        for wall in context.level.walls:
            if not isinstance(wall, PerimeterWall):
                continue
            if not is_finite_polygon(wall.polygon):
                continue
            elements.extend(segment_boxes(
                wall.segments(), wall.thickness, wall.height, context, wall.id,
            ))
            elements.append(self._inner_face(wall, context))
        return elements

    def _inner_face(self, wall: PerimeterWall, context: LevelContext) -> SceneElement:
        inner = offset_polygon_inward(wall.polygon, wall.thickness)
        return SceneElement(
            type=ElementType.INNER_FACE,
            source_id=wall.id,
            position=Point3D(x=0.0, y=mm_to_m(context.level.elevation), z=0.0),
            polygon=[(mm_to_m(x), mm_to_m(y)) for x, y in inner],
        )
