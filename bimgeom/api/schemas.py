"""API request/response schemas."""

from __future__ import annotations
from typing import Any

from pydantic import BaseModel

from bimgeom.models import (
    BIMDoor, GenerationConfig, Point2D, Point3D, Scene, Vec2, Wall, WallSegment,
)


class SceneRequest(BaseModel):
    """Request body for the /scene endpoint: raw BIM JSON plus options."""
    document: dict[str, Any]
    config: GenerationConfig = GenerationConfig()


class SceneResponse(BaseModel):
    scene: Scene
    level_count: int
    element_count: int


class WallMetricsResponse(BaseModel):
    id: str
    length: float
    volume: float
    rotation: float
    center: Point2D
    position_3d: Point3D
    direction_3d: Point3D
    start_3d: Point3D
    cost: float


class WallRequest(BaseModel):
    wall: Wall


class CutRequest(BaseModel):
    p0: Vec2
    p1: Vec2
    doors: list[BIMDoor] = []
    dist_threshold_mm: float = 300.0


class CutResponse(BaseModel):
    segments: list[WallSegment]


class RuleInfo(BaseModel):
    id: str
    name: str
