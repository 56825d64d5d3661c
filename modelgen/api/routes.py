"""FastAPI route definitions."""

from __future__ import annotations
import logging

from fastapi import APIRouter

from modelgen.demo import DEMO_PLAN
from modelgen.models import GenerationResult
from modelgen.services.model_service import ModelService
from modelgen.api.schemas import (
    GenerateRequest, GenerateResponse, RuleInfo,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared service instance
_service = ModelService()


def _response(result: GenerationResult) -> GenerateResponse:
    return GenerateResponse(
        model=result.model,
        warnings=list(result.warnings),
        rule_count=len(_service.list_rules()),
        wall_count=len(result.model.walls),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate_model(request: GenerateRequest) -> GenerateResponse:
    """Generate a building model from an analyzed plan."""
    logger.info(
        "Generate request: %s stories, %s sqft, %d rooms",
        request.plan.stories, request.plan.total_square_footage, len(request.plan.rooms),
    )
    return _response(_service.generate(request.plan, request.config))


@router.get("/demo", response_model=GenerateResponse)
async def demo_model() -> GenerateResponse:
    """Model for the built-in demo plan."""
    return _response(_service.generate(DEMO_PLAN))


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available generation rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
