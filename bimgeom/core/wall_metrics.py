"""Derived metrics for editor walls (meters, radians).

The 3D convention is Y up; the floor-plane y axis maps to 3D z.
"""

from __future__ import annotations
import math

from bimgeom.models import Wall, Point2D, Point3D, GeometryParams

SNAP_GRID = 0.1


def length(wall: Wall) -> float:
    dx = wall.end.x - wall.start.x
    dy = wall.end.y - wall.start.y
    return math.sqrt(dx * dx + dy * dy)


def volume(wall: Wall) -> float:
    """Wall volume in m³ (length × height × thickness)."""
    return length(wall) * wall.height * wall.thickness


def snap_to_grid(value: float, grid: float = SNAP_GRID) -> float:
    return round(value / grid) * grid


def get_wall_rotation(wall: Wall) -> float:
    """Wall direction angle; used as the Y rotation of a box whose local X is the length."""
    return math.atan2(wall.end.y - wall.start.y, wall.end.x - wall.start.x)


def get_wall_center(wall: Wall) -> Point2D:
    return Point2D(
        x=(wall.start.x + wall.end.x) / 2,
        y=(wall.start.y + wall.end.y) / 2,
    )


def get_wall_position_3d(wall: Wall) -> Point3D:
    """Center of the wall box: floor-plane center, raised by half the height."""
    c = get_wall_center(wall)
    return Point3D(x=c.x, y=wall.height / 2, z=c.y)


def get_wall_direction_3d(wall: Wall) -> Point3D:
    r = get_wall_rotation(wall)
    return Point3D(x=math.cos(r), y=0.0, z=math.sin(r))


def get_wall_start_3d(wall: Wall) -> Point3D:
    """Wall start at floor level."""
    half = length(wall) / 2
    center = get_wall_position_3d(wall)
    d = get_wall_direction_3d(wall)
    return Point3D(
        x=center.x - half * d.x,
        y=center.y - wall.height / 2,
        z=center.z - half * d.z,
    )


def material_cost(wall: Wall, params: GeometryParams | None = None) -> float:
    """Rough cost estimate from volume and the material's price per m³."""
    if params is None:
        params = GeometryParams()
    rate = params.material_cost_per_m3.get(wall.material.value, 0.0)
    return volume(wall) * rate


def wall_metrics(wall: Wall, params: GeometryParams | None = None) -> dict[str, object]:
    """All derived metrics for a wall, as plain data for the inspector."""
    return {
        "id": wall.id,
        "length": length(wall),
        "volume": volume(wall),
        "rotation": get_wall_rotation(wall),
        "center": get_wall_center(wall),
        "position_3d": get_wall_position_3d(wall),
        "direction_3d": get_wall_direction_3d(wall),
        "start_3d": get_wall_start_3d(wall),
        "cost": material_cost(wall, params),
    }
