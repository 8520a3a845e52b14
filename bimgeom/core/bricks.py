"""Brick instancing — tiles a wall volume into per-brick transforms."""

from __future__ import annotations
import logging
import math

from bimgeom.models import BrickCount, BrickLayout, GeometryParams, Transform, Wall
from bimgeom.core.wall_metrics import (
    length, get_wall_direction_3d, get_wall_rotation, get_wall_start_3d,
)

logger = logging.getLogger(__name__)


def _cells(extent: float, unit: float, limit: int) -> int:
    if not math.isfinite(extent) or extent <= 0:
        return 1
    ratio = extent / unit
    # Huge finite extents overflow to inf; the instance cap clamps them anyway
    if not math.isfinite(ratio):
        return limit
    return max(1, min(limit, math.floor(ratio)))


def get_brick_count(
    wall_length: float,
    wall_height: float,
    wall_thickness: float,
    params: GeometryParams | None = None,
) -> BrickCount:
    """
    Grid of brick cells (length × height × layers) for a wall volume.

    Each dimension is at least 1. The total is capped at the per-batch
    instance limit; ``truncated`` reports when bricks were dropped.
    """
    if params is None:
        params = GeometryParams()
    n_length = _cells(wall_length, params.brick_length, params.max_brick_instances)
    n_height = _cells(wall_height, params.brick_height, params.max_brick_instances)
    n_layers = _cells(wall_thickness, params.brick_width, params.max_brick_instances)
    requested = n_length * n_height * n_layers
    total = min(requested, params.max_brick_instances)
    return BrickCount(
        n_length=n_length,
        n_height=n_height,
        n_layers=n_layers,
        requested=requested,
        total=total,
        truncated=requested > total,
    )


def _compose(px: float, py: float, pz: float, rot_y: float) -> Transform:
    """Row-major translation × rotation about Y, unit scale."""
    c = math.cos(rot_y)
    s = math.sin(rot_y)
    return (
        c, 0.0, s, px,
        0.0, 1.0, 0.0, py,
        -s, 0.0, c, pz,
        0.0, 0.0, 0.0, 1.0,
    )


def brick_transforms(wall: Wall, params: GeometryParams | None = None) -> list[Transform]:
    """
    One transform per brick, in layer → row → col order.

    Odd rows are shifted by half a brick (running bond). Layers step along
    the wall's left normal. Generation stops at the instance cap.
    """
    if params is None:
        params = GeometryParams()
    count = get_brick_count(length(wall), wall.height, wall.thickness, params)
    start = get_wall_start_3d(wall)
    d = get_wall_direction_3d(wall)
    perp_x, perp_z = -d.z, d.x
    rot_y = -get_wall_rotation(wall)
    bl, bh, bw = params.brick_length, params.brick_height, params.brick_width

    transforms: list[Transform] = []
    for layer in range(count.n_layers):
        for row in range(count.n_height):
            stagger = (row % 2) * (bl * 0.5)
            for col in range(count.n_length):
                if len(transforms) >= count.total:
                    return transforms
                along = col * bl + stagger
                transforms.append(_compose(
                    start.x + along * d.x + layer * bw * perp_x,
                    start.y + row * bh,
                    start.z + along * d.z + layer * bw * perp_z,
                    rot_y,
                ))
    return transforms


def layout_bricks(wall: Wall, params: GeometryParams | None = None) -> BrickLayout:
    if params is None:
        params = GeometryParams()
    count = get_brick_count(length(wall), wall.height, wall.thickness, params)
    if count.truncated:
        logger.warning(
            "Wall %s needs %d bricks; only %d fit in one instanced batch",
            wall.id, count.requested, count.total,
        )
    return BrickLayout(
        wall_id=wall.id,
        count=count,
        transforms=brick_transforms(wall, params),
    )
