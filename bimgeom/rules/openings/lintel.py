"""Door lintels — the wall piece left above each door opening."""

from __future__ import annotations
import math

from bimgeom.rules.base import GeometryRule
from bimgeom.models import (
    BIMDoor, ElementType, Point3D, SceneElement,
)
from bimgeom.core.context import LevelContext
from bimgeom.core.door_cuts import DoorWallIndex
from bimgeom.core.primitives import mm_to_m


class DoorLintelRule(GeometryRule):
    """Opening height is a fixed fraction of the level height; the rest is lintel."""

    priority = 50
    dependencies = ["wall.perimeter", "wall.partition", "wall.edges"]

    def get_id(self) -> str:
        return "door.lintel"

    def get_name(self) -> str:
        return "Door Lintels"

    def applies(self, context: LevelContext) -> bool:
        return len(context.level.doors) > 0 and context.config.cut_doors

    def generate(self, context: LevelContext) -> list[SceneElement]:
        index = context.door_index
        if index is None:
            index = DoorWallIndex(
                context.level.walls,
                threshold_mm=context.params.door_owner_threshold,
                default_thickness=context.params.default_wall_thickness,
            )
        elements: list[SceneElement] = []
        for door in context.level.doors:
            lintel = self._lintel(door, index.thickness_for(door), context)
            if lintel is not None:
                elements.append(lintel)
        return elements

    def _lintel(
        self, door: BIMDoor, thickness_mm: float, context: LevelContext,
    ) -> SceneElement | None:
        wall_height = context.level_height
        opening = wall_height * context.params.door_height_ratio
        lintel_mm = wall_height - opening
        if lintel_mm <= 0:
            return None
        w = mm_to_m(door.width)
        h = mm_to_m(lintel_mm)
        thick = mm_to_m(thickness_mm)
        if not all(math.isfinite(v) and v > 0 for v in (w, h, thick)):
            return None
        x = mm_to_m(door.position[0])
        z = mm_to_m(door.position[1])
        y = mm_to_m(context.level.elevation) + mm_to_m(opening) + h / 2
        if not all(math.isfinite(v) for v in (x, y, z)):
            return None
        return SceneElement(
            type=ElementType.LINTEL,
            source_id=door.id,
            position=Point3D(x=x, y=y, z=z),
            size=(w, h, thick),
            rotation_y=-math.radians(door.rotation),
        )
