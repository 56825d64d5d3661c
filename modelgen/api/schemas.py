"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from modelgen.models import (
    BuildingModel, GenerationConfig, GenerationWarning, PlanDescription,
)


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    plan: PlanDescription
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    model: BuildingModel
    warnings: list[GenerationWarning]
    rule_count: int
    wall_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
