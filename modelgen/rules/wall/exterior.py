"""Exterior perimeter walls with style-dependent doors and windows.

Each story gets exactly four walls: front (south, z = 0), back (north),
left (west, x = 0) and right (east). The ground story carries the entry
door on the front and a slider on the back.
"""

from __future__ import annotations

from modelgen.rules.base import GenerationRule
from modelgen.rules.wall.openings import door, window, evenly_spaced, layout_openings, window_count
from modelgen.core.styles import GlazingProfile, glazing_for
from modelgen.models import (
    GenerationContext, WallOpening, WallSegment, Point2D, p2,
    EXTERIOR_WALL_THICKNESS,
)

ENTRY_DOOR_POSITION = 0.4
ENTRY_DOOR_WIDTH = 3.0
SLIDER_POSITION = 0.55


def front_openings(story: int, length: float, glazing: GlazingProfile) -> tuple[WallOpening, ...]:
    doors = [door(ENTRY_DOOR_POSITION, ENTRY_DOOR_WIDTH)] if story == 0 else []
    count = window_count(length, 12)
    windows = [
        window(pos, glazing.window_width, glazing.window_height, glazing.sill_height)
        for pos in evenly_spaced(count)
    ]
    return layout_openings(doors, windows, length)


def back_openings(story: int, length: float, glazing: GlazingProfile) -> tuple[WallOpening, ...]:
    doors = [door(SLIDER_POSITION, glazing.slider_width)] if story == 0 else []
    count = window_count(length, 10)
    windows = [
        window(pos, glazing.back_window_width, glazing.back_window_height, glazing.back_sill_height)
        for pos in evenly_spaced(count)
    ]
    return layout_openings(doors, windows, length)


def side_openings(length: float, glazing: GlazingProfile) -> tuple[WallOpening, ...]:
    count = window_count(length, 12)
    windows = [
        window(pos, glazing.window_width, glazing.window_height, glazing.sill_height)
        for pos in evenly_spaced(count)
    ]
    return layout_openings([], windows, length)


def exterior_walls(
    story: int,
    width: float,
    depth: float,
    height: float,
    elevation: float,
    glazing: GlazingProfile,
) -> list[WallSegment]:
    def wall(side: str, start: Point2D, end: Point2D, openings: tuple[WallOpening, ...]) -> WallSegment:
        return WallSegment(
            id=f"ext-{side}-f{story}",
            start=start,
            end=end,
            height=height,
            thickness=EXTERIOR_WALL_THICKNESS,
            is_exterior=True,
            floor=story,
            elevation=elevation,
            openings=openings,
        )

    sides = side_openings(depth, glazing)
    return [
        wall("front", p2(0, 0), p2(width, 0), front_openings(story, width, glazing)),
        wall("back", p2(width, depth), p2(0, depth), back_openings(story, width, glazing)),
        wall("left", p2(0, depth), p2(0, 0), sides),
        wall("right", p2(width, 0), p2(width, depth), sides),
    ]


class ExteriorWallRule(GenerationRule):
    """Four perimeter walls per story."""

    priority = 30

    def get_id(self) -> str:
        return "wall.exterior"

    def get_name(self) -> str:
        return "Exterior Walls"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        glazing = glazing_for(resolved.style)
        for story in range(resolved.stories):
            footprint = resolved.story_footprint(story)
            context.add_walls(exterior_walls(
                story,
                footprint.width,
                footprint.depth,
                resolved.story_height(story),
                resolved.story_elevation(story),
                glazing,
            ))
