from .geometry import Point2D, Point3D, Vec2, WallSegment, DoorOpening
from .building import (
    Wall, WallMaterial, BrickVariant,
    BIMProject, BIMWall, PerimeterWall, PartitionWall, EdgeWall,
    BIMDoor, BIMWindow, BIMSpace, BIMLevel, BIMFootprint, BIMBuilding, BIMDocument,
)
from .bricks import BrickCount, BrickLayout, Transform
from .scene import ElementType, SceneElement, LevelStats, LevelScene, Scene
from .parameters import GeometryParams, GenerationConfig

__all__ = [
    "Point2D", "Point3D", "Vec2", "WallSegment", "DoorOpening",
    "Wall", "WallMaterial", "BrickVariant",
    "BIMProject", "BIMWall", "PerimeterWall", "PartitionWall", "EdgeWall",
    "BIMDoor", "BIMWindow", "BIMSpace", "BIMLevel", "BIMFootprint", "BIMBuilding", "BIMDocument",
    "BrickCount", "BrickLayout", "Transform",
    "ElementType", "SceneElement", "LevelStats", "LevelScene", "Scene",
    "GeometryParams", "GenerationConfig",
]
