"""Main model generator — orchestrates analysis, rules and assembly."""

from __future__ import annotations
import logging

from modelgen.models import (
    GenerationConfig, GenerationContext, GenerationResult, PlanDescription,
)
from modelgen.core.analyzer import PlanAnalyzer
from modelgen.core.assembler import ModelAssembler
from modelgen.core.registry import RuleRegistry

logger = logging.getLogger(__name__)


class ModelGenerator:
    """
    Stateless model generator.

    Takes a plan + config, resolves the plan, executes applicable rules,
    and assembles a complete BuildingModel. All per-run state lives in
    a fresh GenerationContext.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = PlanAnalyzer()
        self.assembler = ModelAssembler()

    def generate(
        self,
        plan: PlanDescription,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        if config is None:
            config = GenerationConfig()

        # Analysis phase — defaults, footprint, feature flags
        resolved, warnings = self.analyzer.analyze(plan, config)

        context = GenerationContext(
            plan=plan,
            resolved=resolved,
            config=config,
            warnings=warnings,
        )

        # Generation phase — run applicable rules
        for rule in self.registry.get_applicable_rules(context):
            logger.debug("Running rule %s", rule.get_id())
            rule.apply(context)

        model = self.assembler.assemble(context)
        logger.info(
            "Generated %s model: %d walls, %d slabs, %d roof planes, %d site elements, %d warnings",
            model.metadata.style, len(model.walls), len(model.floors),
            len(model.roof_planes), len(model.site_elements), len(context.warnings),
        )
        return GenerationResult(model=model, warnings=tuple(context.warnings))
