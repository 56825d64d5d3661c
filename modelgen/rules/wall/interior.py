"""Interior partitions derived from the packed room rectangles."""

from __future__ import annotations

from modelgen.rules.base import GenerationRule
from modelgen.rules.wall.openings import door
from modelgen.core.parsing import parse_ceiling_height
from modelgen.models import (
    GenerationContext, PlacedRoom, WallSegment, p2,
    EXTERIOR_WALL_THICKNESS, INTERIOR_WALL_THICKNESS,
)

INTERIOR_DOOR_WIDTH = 2.67


def interior_walls(
    rooms: list[PlacedRoom],
    story: int,
    height: float,
    elevation: float,
    vaulted_height: float = 17.0,
) -> list[WallSegment]:
    """A right-edge wall for every room, plus a front-edge wall for rooms
    not already against the front elevation. Each gets one centered door."""
    walls: list[WallSegment] = []

    for i, placed in enumerate(rooms):
        wall_height = parse_ceiling_height(placed.room.ceiling_height, vaulted_height) or height
        edges = [("right", p2(placed.x + placed.w, placed.z), p2(placed.x + placed.w, placed.z + placed.d))]
        if placed.z > EXTERIOR_WALL_THICKNESS + 1:
            edges.append(("bottom", p2(placed.x, placed.z), p2(placed.x + placed.w, placed.z)))

        for edge, start, end in edges:
            length = start.distance_to(end)
            walls.append(WallSegment(
                id=f"int-{story}-{i}-{edge}",
                start=start,
                end=end,
                height=wall_height,
                thickness=INTERIOR_WALL_THICKNESS,
                is_exterior=False,
                floor=story,
                elevation=elevation,
                openings=(door(0.5, min(INTERIOR_DOOR_WIDTH, length)),),
            ))

    return walls


class InteriorWallRule(GenerationRule):

    priority = 40
    dependencies = ["layout.shelf_pack"]

    def get_id(self) -> str:
        return "wall.interior"

    def get_name(self) -> str:
        return "Interior Partitions"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        for story in range(resolved.stories):
            context.add_walls(interior_walls(
                context.rooms_on(story),
                story,
                resolved.story_height(story),
                resolved.story_elevation(story),
                context.config.vaulted_ceiling_height,
            ))
