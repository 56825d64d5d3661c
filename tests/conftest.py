"""Shared test fixtures – plans and a default service."""

from __future__ import annotations

import pytest

from modelgen.demo import DEMO_PLAN
from modelgen.models import PlanDescription, RoomSpec
from modelgen.services.model_service import ModelService


@pytest.fixture()
def service() -> ModelService:
    return ModelService()


@pytest.fixture()
def demo_plan() -> PlanDescription:
    """2 stories, 3200 sqft, modern farmhouse, gable, garage/porch/deck."""
    return DEMO_PLAN


@pytest.fixture()
def make_plan():
    """Factory for small one-story plans with overridable fields."""
    def _make(**overrides) -> PlanDescription:
        fields = dict(
            stories=1,
            total_square_footage=1500,
            architectural_style="craftsman",
            roof_type="gable",
            rooms=(
                RoomSpec(name="Living Room", dimensions="16' x 14'"),
                RoomSpec(name="Kitchen", dimensions="12' x 12'"),
                RoomSpec(name="Bedroom", dimensions="12' x 11'"),
            ),
            special_features=(),
        )
        fields.update(overrides)
        return PlanDescription(**fields)
    return _make
