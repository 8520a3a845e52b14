"""Geometric primitives used throughout the engine."""

from __future__ import annotations
import math

from pydantic import BaseModel

# [x, y] in BIM project units (millimeters in the sample data)
Vec2 = tuple[float, float]


class Point2D(BaseModel):
    """Point on the editor floor plane, in meters. 2D y maps to 3D z."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Point3D(BaseModel):
    """Point in 3D space, y up."""
    x: float
    y: float
    z: float


class WallSegment(BaseModel):
    """A straight piece of wall between two points in project units."""
    p0: Vec2
    p1: Vec2


class DoorOpening(BaseModel):
    """Door opening on a wall segment: parametric interval [t0, t1] in [0, 1]."""
    t0: float
    t1: float
