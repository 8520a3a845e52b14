"""Level context — accumulates state during scene generation."""

from __future__ import annotations
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bimgeom.models import BIMLevel, GeometryParams, GenerationConfig, SceneElement
from bimgeom.core.door_cuts import DoorWallIndex


class LevelContext(BaseModel):
    """
    Holds all state during generation of a single level.

    The generator attaches the door-to-wall index and the building size
    before rules run. Rules add generated elements.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Input
    level: BIMLevel
    params: GeometryParams = Field(default_factory=GeometryParams)
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    building_size: Optional[tuple[float, float]] = None  # (width, depth) in mm

    # Analysis results (populated by the generator)
    door_index: Optional[DoorWallIndex] = None

    # Output (populated by rules)
    elements: list[SceneElement] = []

    @property
    def level_height(self) -> float:
        """Level height in mm, falling back when the record's value is unusable."""
        h = self.level.height
        if not math.isfinite(h) or h <= 0:
            return self.params.default_level_height
        return h

    def add_elements(self, elements: list[SceneElement]) -> None:
        self.elements.extend(elements)
