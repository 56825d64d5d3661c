"""Generation parameters and configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field


# Fixed construction thicknesses (feet)
EXTERIOR_WALL_THICKNESS = 0.5     # 6"
INTERIOR_WALL_THICKNESS = 0.333   # 4"
FOUNDATION_THICKNESS = 0.667      # 8"
FLOOR_SLAB_THICKNESS = 0.333      # 4"
FOUNDATION_DEPTH = 1.5            # 18" below grade


class GenerationConfig(BaseModel):
    """Tunable constants and rule selection for one generation run."""
    aspect_ratio: float = Field(default=1.5, gt=0, allow_inf_nan=False)             # Footprint width : depth
    front_setback: float = Field(default=15.0, ge=0, allow_inf_nan=False)           # Front wall to property line
    garage_bay_width: float = Field(default=25.0, gt=0, allow_inf_nan=False)        # Ground-floor garage extension
    default_room_width: float = Field(default=12.0, gt=0, allow_inf_nan=False)
    default_room_depth: float = Field(default=10.0, gt=0, allow_inf_nan=False)
    vaulted_ceiling_height: float = Field(default=17.0, gt=0, allow_inf_nan=False)
    wet_climate_overhang: float = Field(default=3.0, ge=0, allow_inf_nan=False)     # 36" deep overhangs for rain
    default_overhang: float = Field(default=2.0, ge=0, allow_inf_nan=False)         # 24"
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
