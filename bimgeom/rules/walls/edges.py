"""Legacy walls whose polygon is drawn edge by edge, cut by doors."""

from __future__ import annotations

from bimgeom.rules.base import GeometryRule
from bimgeom.rules.walls.boxes import segment_boxes
from bimgeom.models import EdgeWall, SceneElement
from bimgeom.core.context import LevelContext


class EdgeWallRule(GeometryRule):
    """
    One box per surviving edge piece; unlike perimeter walls there is no
    inner face and no minimum vertex count, so a 2-vertex polygon still
    renders (as its edge there and back).
    """

    priority = 30

    def get_id(self) -> str:
        return "wall.edges"

    def get_name(self) -> str:
        return "Polygon Edge Walls"

    def applies(self, context: LevelContext) -> bool:
        return any(isinstance(w, EdgeWall) for w in context.level.walls)

    def generate(self, context: LevelContext) -> list[SceneElement]:
        elements: list[SceneElement] = []
        for wall in context.level.walls:
            if isinstance(wall, EdgeWall):
                elements.extend(segment_boxes(
                    wall.segments(), wall.thickness, wall.height, context, wall.id,
                ))
        return elements
