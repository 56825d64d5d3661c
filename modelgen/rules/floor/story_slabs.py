"""One floor slab per story."""

from __future__ import annotations

from modelgen.rules.base import GenerationRule
from modelgen.models import (
    FloorSlab, GenerationContext, rectangle, FLOOR_SLAB_THICKNESS,
)


class StorySlabRule(GenerationRule):

    priority = 20

    def get_id(self) -> str:
        return "floor.story_slabs"

    def get_name(self) -> str:
        return "Story Floor Slabs"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        for story in range(resolved.stories):
            footprint = resolved.story_footprint(story)
            context.add_floor(FloorSlab(
                id=f"floor-{story}",
                vertices=rectangle(0, 0, footprint.width, footprint.depth),
                elevation=resolved.story_elevation(story),
                thickness=FLOOR_SLAB_THICKNESS,
            ))
