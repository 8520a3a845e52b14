"""Building element models — editor walls and imported BIM records."""

from __future__ import annotations
import math
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D, Vec2, WallSegment


class WallMaterial(str, Enum):
    BRICK = "brick"
    CONCRETE = "concrete"
    DRYWALL = "drywall"


class BrickVariant(str, Enum):
    """Brick style; matches the brick01a … brick01g asset set."""
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"


class Wall(BaseModel):
    """A wall in the editor, defined by two floor-plane endpoints (meters)."""
    id: str
    start: Point2D
    end: Point2D
    height: float = 2.5
    thickness: float = 0.2
    material: WallMaterial = WallMaterial.BRICK
    brick_variant: Optional[BrickVariant] = None

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


# ── BIM import model ────────────────────────────────────────────────────
# All linear dimensions are in project units (mm in the sample data).

class _BIMRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BIMProject(_BIMRecord):
    name: str = ""
    units: str = "mm"
    default_wall_thickness: Optional[float] = Field(default=None, alias="defaultWallThickness")
    default_height: Optional[float] = Field(default=None, alias="defaultHeight")
    default_wall_height: Optional[float] = Field(default=None, alias="defaultWallHeight")


def _ring_segments(polygon: list[Vec2]) -> list[WallSegment]:
    n = len(polygon)
    if n < 2:
        return []
    return [WallSegment(p0=polygon[i], p1=polygon[(i + 1) % n]) for i in range(n)]


class PerimeterWall(_BIMRecord):
    """Wall given by its closed outer footprint; the inner face is an inward offset."""
    kind: Literal["perimeter"] = "perimeter"
    id: str
    type: str = "perimeter"
    thickness: float
    height: float
    polygon: list[Vec2]

    def segments(self) -> list[WallSegment]:
        return _ring_segments(self.polygon)


class PartitionWall(_BIMRecord):
    """Wall given by an open centerline path, extruded symmetrically."""
    kind: Literal["partition"] = "partition"
    id: str
    type: str = "partition"
    thickness: float
    height: float
    path: list[Vec2] = Field(min_length=2)

    def segments(self) -> list[WallSegment]:
        return [
            WallSegment(p0=self.path[i], p1=self.path[i + 1])
            for i in range(len(self.path) - 1)
        ]


class EdgeWall(_BIMRecord):
    """Legacy record whose polygon is rendered edge by edge, with no inner face."""
    kind: Literal["edges"] = "edges"
    id: str
    type: str = ""
    thickness: float
    height: float
    polygon: list[Vec2] = Field(min_length=2)

    def segments(self) -> list[WallSegment]:
        return _ring_segments(self.polygon)


BIMWall = Annotated[Union[PerimeterWall, PartitionWall, EdgeWall], Field(discriminator="kind")]


class BIMDoor(_BIMRecord):
    id: str
    width: float
    height: float
    position: Vec2
    rotation: float = 0.0  # degrees


class BIMWindow(_BIMRecord):
    id: str
    width: float
    height: float
    sill_height: float = Field(default=0.0, alias="sillHeight")
    position: Vec2
    rotation: float = 0.0


class BIMSpace(_BIMRecord):
    id: str
    name: str = ""
    area: float = 0.0
    polygon: list[Vec2]
    color: Optional[str] = None


class BIMLevel(_BIMRecord):
    level: int = 0
    elevation: float = 0.0
    height: float = 2800.0
    spaces: list[BIMSpace] = []
    walls: list[BIMWall] = []
    doors: list[BIMDoor] = []
    windows: list[BIMWindow] = []


class BIMFootprint(_BIMRecord):
    width: float
    depth: float


DEFAULT_BUILDING_SIZE_MM = 10000.0


def _positive_or_default(value: Optional[float]) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        return DEFAULT_BUILDING_SIZE_MM
    return value


class BIMBuilding(_BIMRecord):
    width: Optional[float] = None
    depth: Optional[float] = None
    footprint: Optional[BIMFootprint] = None
    levels: list[BIMLevel]

    def size(self) -> tuple[float, float]:
        """Building (width, depth) in mm; footprint takes precedence over width/depth."""
        w = self.footprint.width if self.footprint is not None else self.width
        d = self.footprint.depth if self.footprint is not None else self.depth
        return _positive_or_default(w), _positive_or_default(d)


class BIMDocument(_BIMRecord):
    project: BIMProject
    building: BIMBuilding
