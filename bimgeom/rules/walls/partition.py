"""Partition walls — centerline paths extruded by thickness, cut by doors."""

from __future__ import annotations

from bimgeom.rules.base import GeometryRule
from bimgeom.rules.walls.boxes import segment_boxes
from bimgeom.models import PartitionWall, SceneElement
from bimgeom.core.context import LevelContext


class PartitionWallRule(GeometryRule):

    priority = 20

    def get_id(self) -> str:
        return "wall.partition"

    def get_name(self) -> str:
        return "Partition Walls"

    def applies(self, context: LevelContext) -> bool:
        return any(isinstance(w, PartitionWall) for w in context.level.walls)

    def generate(self, context: LevelContext) -> list[SceneElement]:
        elements: list[SceneElement] = []
        for wall in context.level.walls:
            if isinstance(wall, PartitionWall):
                elements.extend(segment_boxes(
                    wall.segments(), wall.thickness, wall.height, context, wall.id,
                ))
        return elements
