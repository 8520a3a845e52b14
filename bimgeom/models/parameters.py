"""Geometry parameters and scene generation configuration."""

from __future__ import annotations
from pydantic import BaseModel


class GeometryParams(BaseModel):
    """Tunable constants for geometry derivation."""
    brick_length: float = 0.2           # Real brick size in meters
    brick_height: float = 0.065
    brick_width: float = 0.1
    max_brick_instances: int = 65535    # Per instanced-geometry batch
    door_owner_threshold: float = 400.0  # Door-to-wall association (mm)
    min_cut_segment: float = 20.0       # Shorter solid slivers are dropped (mm)
    default_wall_thickness: float = 200.0  # mm, when no wall owns a door
    default_level_height: float = 3000.0   # mm, when a level height is unusable
    door_height_ratio: float = 0.75     # Door opening height / wall height
    material_cost_per_m3: dict[str, float] = {
        "brick": 120.0,
        "concrete": 85.0,
        "drywall": 45.0,
    }


class GenerationConfig(BaseModel):
    """Controls which rules are applied when building a scene."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
    cut_doors: bool = True               # Cut door openings out of wall segments
    extend_corners: bool = True          # Extend wall ends by half thickness
