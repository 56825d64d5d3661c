"""High-level model generation service — facade for the API layer."""

from __future__ import annotations

from modelgen.models import (
    BuildingModel, GenerationConfig, GenerationResult, PlanDescription,
)
from modelgen.core.generator import ModelGenerator
from modelgen.core.registry import RuleRegistry, create_default_registry


class ModelService:
    """Defaults the config, delegates to the generator, lists rules."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = ModelGenerator(self.registry)

    def generate(
        self,
        plan: PlanDescription,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        if config is None:
            config = GenerationConfig()
        return self.generator.generate(plan, config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]


def generate_model(plan: PlanDescription) -> BuildingModel:
    """Generate a building model with the default rules and configuration."""
    return ModelService().generate(plan).model
