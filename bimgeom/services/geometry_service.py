"""High-level geometry service — facade for the API layer."""

from __future__ import annotations
from typing import Any, Sequence

from bimgeom.models import (
    BIMDocument, BrickLayout, GeometryParams, GenerationConfig, Scene, Vec2, Wall,
    WallSegment, BIMDoor,
)
from bimgeom.core.generator import SceneGenerator
from bimgeom.core.registry import RuleRegistry, create_default_registry
from bimgeom.core.bricks import layout_bricks
from bimgeom.core.door_cuts import DEFAULT_DIST_THRESHOLD_MM, segment_with_door_cuts
from bimgeom.core.wall_metrics import wall_metrics
from bimgeom.io.loader import parse_bim


class GeometryService:
    """Parses input, delegates to the generator and geometry functions."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        params: GeometryParams | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.params = params or GeometryParams()
        self.generator = SceneGenerator(self.registry)

    def build_scene(
        self,
        document: BIMDocument | dict[str, Any] | str,
        config: GenerationConfig | None = None,
    ) -> Scene:
        if not isinstance(document, BIMDocument):
            document = parse_bim(document)
        return self.generator.generate(document, self.params, config)

    def wall_metrics(self, wall: Wall) -> dict[str, object]:
        return wall_metrics(wall, self.params)

    def brick_layout(self, wall: Wall) -> BrickLayout:
        return layout_bricks(wall, self.params)

    def cut_segment(
        self,
        p0: Vec2,
        p1: Vec2,
        doors: Sequence[BIMDoor],
        dist_threshold_mm: float = DEFAULT_DIST_THRESHOLD_MM,
    ) -> list[WallSegment]:
        return segment_with_door_cuts(
            p0, p1, doors, dist_threshold_mm,
            min_segment_mm=self.params.min_cut_segment,
        )

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
