"""Scene output models — renderable elements handed to the viewer."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Point3D


class ElementType(str, Enum):
    WALL_BOX = "wall_box"
    INNER_FACE = "inner_face"
    LINTEL = "lintel"
    SPACE_FLOOR = "space_floor"
    BUILDING_FLOOR = "building_floor"


class SceneElement(BaseModel):
    """A single piece of renderable geometry, in meters."""
    type: ElementType
    source_id: str = ""           # Wall, door or space the element came from
    position: Point3D             # Box center, or polygon origin
    size: tuple[float, float, float] = (0.0, 0.0, 0.0)  # Box extents (x=length, y=height, z=thickness)
    rotation_y: float = 0.0       # Radians about the vertical axis
    polygon: list[tuple[float, float]] = []  # Floor-plane outline (x, z)
    color: str = ""
    label: str = ""
    label_position: Point3D | None = None
    tags: dict[str, str] = {}


class LevelStats(BaseModel):
    """Summary statistics for one generated level."""
    total_elements: int = 0
    wall_boxes: int = 0
    lintels: int = 0
    floors: int = 0
    other: int = 0

    @classmethod
    def from_elements(cls, elements: list[SceneElement]) -> LevelStats:
        walls = sum(1 for e in elements if e.type == ElementType.WALL_BOX)
        lintels = sum(1 for e in elements if e.type == ElementType.LINTEL)
        floors = sum(1 for e in elements if e.type == ElementType.SPACE_FLOOR)
        return cls(
            total_elements=len(elements),
            wall_boxes=walls,
            lintels=lintels,
            floors=floors,
            other=len(elements) - walls - lintels - floors,
        )


class LevelScene(BaseModel):
    level: int
    elevation: float   # meters
    elements: list[SceneElement]
    stats: LevelStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = LevelStats.from_elements(self.elements)


class Scene(BaseModel):
    """The complete derived scene for a BIM document."""
    name: str = ""
    size: tuple[float, float]   # Building (width, depth) in meters
    levels: list[LevelScene]
