"""Scene generator — builds per-level context and runs the geometry rules."""

from __future__ import annotations
import logging

from bimgeom.models import (
    BIMDocument, BIMLevel, GeometryParams, GenerationConfig, LevelScene, Scene,
)
from bimgeom.core.context import LevelContext
from bimgeom.core.registry import RuleRegistry
from bimgeom.core.door_cuts import DoorWallIndex
from bimgeom.core.primitives import mm_to_m

logger = logging.getLogger(__name__)


class SceneGenerator:
    """
    Stateless scene generator.

    Takes a parsed BIM document, indexes doors against walls per level,
    executes applicable rules and returns a complete Scene in meters.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def generate_level(
        self,
        level: BIMLevel,
        params: GeometryParams,
        config: GenerationConfig | None = None,
        building_size: tuple[float, float] | None = None,
    ) -> LevelScene:
        if config is None:
            config = GenerationConfig()

        context = LevelContext(
            level=level, params=params, config=config, building_size=building_size,
        )

        # Analysis phase — door ownership lookup shared by the rules
        context.door_index = DoorWallIndex(
            level.walls,
            threshold_mm=params.door_owner_threshold,
            default_thickness=params.default_wall_thickness,
        )

        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add_elements(rule.generate(context))

        scene = LevelScene(
            level=level.level,
            elevation=mm_to_m(level.elevation),
            elements=context.elements,
        )
        logger.debug(
            "Level %s: %d rules, %d elements (%d wall boxes)",
            level.level, len(rules), scene.stats.total_elements, scene.stats.wall_boxes,
        )
        return scene

    def generate(
        self,
        document: BIMDocument,
        params: GeometryParams,
        config: GenerationConfig | None = None,
    ) -> Scene:
        width, depth = document.building.size()
        return Scene(
            name=document.project.name,
            size=(mm_to_m(width), mm_to_m(depth)),
            levels=[
                self.generate_level(level, params, config, (width, depth))
                for level in document.building.levels
            ],
        )
