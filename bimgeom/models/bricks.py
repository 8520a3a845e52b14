"""Brick instancing output models."""

from __future__ import annotations
from pydantic import BaseModel

# Row-major 4x4 transform, 16 floats
Transform = tuple[float, ...]


class BrickCount(BaseModel):
    """Grid of brick cells for a wall volume."""
    n_length: int
    n_height: int
    n_layers: int
    requested: int     # Uncapped product of the three dimensions
    total: int         # Instances actually laid out
    truncated: bool = False

    @property
    def dropped(self) -> int:
        return self.requested - self.total


class BrickLayout(BaseModel):
    """Per-instance transforms for one wall, in layer → row → col order."""
    wall_id: str = ""
    count: BrickCount
    transforms: list[Transform]
