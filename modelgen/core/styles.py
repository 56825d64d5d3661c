"""Per-style lookup tables: roof pitch and glazing."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from modelgen.models import ArchitecturalStyle

DEFAULT_PITCH = 6 / 12

STYLE_PITCH: dict[ArchitecturalStyle, float] = {
    ArchitecturalStyle.MODERN: 2 / 12,
    ArchitecturalStyle.CONTEMPORARY: 3 / 12,
    ArchitecturalStyle.CRAFTSMAN: 5 / 12,
    ArchitecturalStyle.FARMHOUSE: 7 / 12,
    ArchitecturalStyle.TRADITIONAL: 6 / 12,
    ArchitecturalStyle.COLONIAL: 8 / 12,
    ArchitecturalStyle.MID_CENTURY: 2 / 12,
    ArchitecturalStyle.RANCH: 4 / 12,
    ArchitecturalStyle.BUNGALOW: 5 / 12,
    ArchitecturalStyle.VICTORIAN: 10 / 12,
    ArchitecturalStyle.MEDITERRANEAN: 4 / 12,
    ArchitecturalStyle.INDUSTRIAL: 1 / 12,
    ArchitecturalStyle.MODERN_FARMHOUSE: 7 / 12,
    ArchitecturalStyle.NORTHWEST_CONTEMPORARY: 4 / 12,
}


class GlazingProfile(BaseModel):
    """Window and slider sizes for one family of styles (feet)."""
    model_config = ConfigDict(frozen=True)

    window_width: float
    window_height: float
    sill_height: float
    back_window_width: float
    back_window_height: float
    back_sill_height: float
    slider_width: float


MODERN_GLAZING = GlazingProfile(
    window_width=5, window_height=6, sill_height=1,
    back_window_width=6, back_window_height=7, back_sill_height=0.5,
    slider_width=12,
)

TRADITIONAL_GLAZING = GlazingProfile(
    window_width=3, window_height=4, sill_height=3,
    back_window_width=3, back_window_height=4, back_sill_height=3,
    slider_width=6,
)

_MODERN_STYLES = frozenset({ArchitecturalStyle.MODERN, ArchitecturalStyle.CONTEMPORARY})


def pitch_for(style: ArchitecturalStyle | None) -> float:
    if style is None:
        return DEFAULT_PITCH
    return STYLE_PITCH[style]


def glazing_for(style: ArchitecturalStyle | None) -> GlazingProfile:
    if style in _MODERN_STYLES:
        return MODERN_GLAZING
    return TRADITIONAL_GLAZING
