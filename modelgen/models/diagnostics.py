"""Non-fatal diagnostics reported alongside a generated model."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .building import BuildingModel


class WarningCode(str, Enum):
    ROOM_DROPPED = "room_dropped"
    ROOM_TOO_WIDE = "room_too_wide"
    DIMENSIONS_DEFAULTED = "dimensions_defaulted"
    ROOF_TYPE_DEFAULTED = "roof_type_defaulted"
    STYLE_UNRECOGNIZED = "style_unrecognized"
    STORIES_CLAMPED = "stories_clamped"
    SQUARE_FOOTAGE_DEFAULTED = "square_footage_defaulted"


class GenerationWarning(BaseModel):
    """A recovery the generator made instead of failing."""
    model_config = ConfigDict(frozen=True)

    code: WarningCode
    message: str
    story: int | None = None
    subject: str | None = None  # Room name, field name, ...


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: BuildingModel
    warnings: tuple[GenerationWarning, ...] = ()
