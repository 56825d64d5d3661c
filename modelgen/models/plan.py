"""Input models — the structured plan description produced by plan analysis."""

from __future__ import annotations
from enum import Enum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RoofType(str, Enum):
    GABLE = "gable"
    HIP = "hip"
    FLAT = "flat"
    SHED = "shed"
    GAMBREL = "gambrel"
    MANSARD = "mansard"

    @classmethod
    def parse(cls, value: str | None) -> RoofType | None:
        """Case-insensitive lookup. Returns None for unknown values."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ArchitecturalStyle(str, Enum):
    MODERN = "modern"
    CONTEMPORARY = "contemporary"
    CRAFTSMAN = "craftsman"
    FARMHOUSE = "farmhouse"
    TRADITIONAL = "traditional"
    COLONIAL = "colonial"
    MID_CENTURY = "mid-century"
    RANCH = "ranch"
    BUNGALOW = "bungalow"
    VICTORIAN = "victorian"
    MEDITERRANEAN = "mediterranean"
    INDUSTRIAL = "industrial"
    MODERN_FARMHOUSE = "modern_farmhouse"
    NORTHWEST_CONTEMPORARY = "northwest_contemporary"

    @classmethod
    def parse(cls, value: str | None) -> ArchitecturalStyle | None:
        if value is None:
            return None
        normalized = value.strip().lower().replace(" ", "_")
        if normalized == "mid_century":
            normalized = "mid-century"
        try:
            return cls(normalized)
        except ValueError:
            return None


class _PlanRecord(BaseModel):
    # Accept both the analysis service's camelCase keys and snake_case names.
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RoomSpec(_PlanRecord):
    """A room as read off the plan. Dimension strings are free-form."""
    name: str
    dimensions: str | None = None          # e.g. "24' x 18'"
    ceiling_height: str | None = Field(default=None, alias="ceilingHeight")
    notes: str | None = None


class RegionalStyle(_PlanRecord):
    is_pnw: bool = Field(default=False, alias="isPNW")
    description: str | None = None


class PlanDescription(_PlanRecord):
    """
    Validated input for one generation call.

    Style and roof type are kept as strings so that unrecognized values
    reach the analyzer, which falls back and reports a warning instead
    of rejecting the plan.
    """
    stories: int | None = None
    total_square_footage: float | None = Field(
        default=None,
        validation_alias=AliasChoices("squareFootage", "totalSquareFootage", "total_square_footage"),
    )
    architectural_style: str | None = Field(default=None, alias="architecturalStyle")
    roof_type: str | None = Field(default=None, alias="roofType")
    is_regional_wet_climate: bool = Field(default=False, alias="isRegionalWetClimate")
    regional_style: RegionalStyle | None = Field(default=None, alias="regionalStyle")
    rooms: tuple[RoomSpec, ...] = ()
    special_features: tuple[str, ...] = Field(default=(), alias="specialFeatures")

    @field_validator("rooms", "special_features", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return () if value is None else value

    @property
    def wet_climate(self) -> bool:
        """Either the explicit flag or the analysis service's regional marker."""
        if self.is_regional_wet_climate:
            return True
        return self.regional_style is not None and self.regional_style.is_pnw
