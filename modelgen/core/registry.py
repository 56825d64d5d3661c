"""Rule registry — the ordered set of stages that build one model."""

from __future__ import annotations

from modelgen.models.context import GenerationContext
from modelgen.rules.base import GenerationRule


class RuleRegistry:
    """
    Holds the generation stages (room packing, slabs, walls, roof, site).

    A run asks for the stages its config allows, in build order: by
    priority, with each stage placed after the stages whose output it
    reads (interior walls after room packing).
    """

    def __init__(self) -> None:
        self._rules: dict[str, GenerationRule] = {}

    def register(self, rule: GenerationRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> GenerationRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[GenerationRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: GenerationContext) -> list[GenerationRule]:
        """Stages to run for this plan, in build order.

        `enabled_rules` narrows the set (e.g. walls only for a massing
        preview), `disabled_rules` removes stages such as the roof for a
        cutaway view.
        """
        config = context.config
        stages = [
            rule for rule in self._rules.values()
            if (not config.enabled_rules or rule.get_id() in config.enabled_rules)
            and rule.get_id() not in config.disabled_rules
            and rule.applies(context)
        ]
        stages.sort(key=lambda r: r.priority)
        return self._after_inputs(stages)

    def _after_inputs(self, stages: list[GenerationRule]) -> list[GenerationRule]:
        """Reorder so that every stage follows the stages it reads from.

        A dependency that is disabled or unregistered is skipped; the
        dependent stage then works with whatever the context holds.
        """
        by_id = {r.get_id(): r for r in stages}
        seen: set[str] = set()
        ordered: list[GenerationRule] = []

        def place(stage_id: str) -> None:
            if stage_id in seen or stage_id not in by_id:
                return
            seen.add(stage_id)
            stage = by_id[stage_id]
            for input_id in stage.dependencies:
                place(input_id)
            ordered.append(stage)

        for stage in stages:
            place(stage.get_id())
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry with every stage of a full building model."""
    from modelgen.rules.layout.room_packer import RoomLayoutRule
    from modelgen.rules.floor.story_slabs import StorySlabRule
    from modelgen.rules.wall.exterior import ExteriorWallRule
    from modelgen.rules.wall.interior import InteriorWallRule
    from modelgen.rules.roof.roof_rule import RoofRule
    from modelgen.rules.site.site_layout import SiteLayoutRule

    registry = RuleRegistry()
    for rule in (
        RoomLayoutRule(),
        StorySlabRule(),
        ExteriorWallRule(),
        InteriorWallRule(),
        RoofRule(),
        SiteLayoutRule(),
    ):
        registry.register(rule)
    return registry
