"""Room layout — distributes rooms across stories and shelf-packs them.

Rooms are split into main-level and upper-level groups by name, then each
story is packed left to right in rows. A room that does not fit in the
remaining depth is left out of the layout and reported as a warning.
"""

from __future__ import annotations
import logging
import re
from pydantic import BaseModel

from modelgen.rules.base import GenerationRule
from modelgen.core.parsing import parse_dimensions
from modelgen.models import (
    GenerationContext, PlacedRoom, RoomSpec, WarningCode,
    EXTERIOR_WALL_THICKNESS, INTERIOR_WALL_THICKNESS,
)

logger = logging.getLogger(__name__)

MAIN_LEVEL = re.compile(
    r"kitchen|great|living|dining|entry|foyer|mudroom|pantry|laundry|garage|office|den",
    re.IGNORECASE,
)
UPPER_LEVEL = re.compile(r"bed|master|primary|bonus|media|loft", re.IGNORECASE)


class PackingOutcome(BaseModel):
    placed: list[PlacedRoom] = []
    dropped: list[RoomSpec] = []      # Ran out of depth
    too_wide: list[RoomSpec] = []     # Wider than the usable footprint
    defaulted: list[RoomSpec] = []    # Dimension string could not be parsed


def distribute_rooms(rooms: tuple[RoomSpec, ...] | list[RoomSpec], stories: int) -> list[list[RoomSpec]]:
    """Assign rooms to stories: living areas below, bedrooms above.

    A room matching both patterns counts as main-level. Stories above the
    second receive no rooms.
    """
    main = [r for r in rooms if MAIN_LEVEL.search(r.name)]
    upper = [r for r in rooms if r not in main and UPPER_LEVEL.search(r.name)]
    others = [r for r in rooms if r not in main and r not in upper]

    if stories <= 1:
        return [main + upper + others]
    return [main + others, upper] + [[] for _ in range(stories - 2)]


def pack_rooms(
    rooms: list[RoomSpec],
    width: float,
    depth: float,
    default_size: tuple[float, float] = (12.0, 10.0),
) -> PackingOutcome:
    """Shelf-pack rooms into a width x depth footprint.

    Rows run along +x starting inside the exterior wall. When the next room
    would cross the far wall the cursor wraps to a new row below the deepest
    room of the current one.
    """
    outcome = PackingOutcome()
    ext = EXTERIOR_WALL_THICKNESS
    cursor_x = ext
    cursor_z = ext
    row_max_d = 0.0

    for room in rooms:
        dims = parse_dimensions(room.dimensions)
        if dims is None:
            outcome.defaulted.append(room)
            dims = default_size
        w, d = dims

        if w + 2 * ext > width:
            outcome.too_wide.append(room)
            continue

        if cursor_x + w + ext > width:
            cursor_x = ext
            cursor_z += row_max_d + INTERIOR_WALL_THICKNESS
            row_max_d = 0.0

        if cursor_z + d > depth - ext:
            outcome.dropped.append(room)
            continue

        outcome.placed.append(PlacedRoom(room=room, x=cursor_x, z=cursor_z, w=w, d=d))
        cursor_x += w + INTERIOR_WALL_THICKNESS
        row_max_d = max(row_max_d, d)

    return outcome


class RoomLayoutRule(GenerationRule):
    """Packs the plan's rooms onto each story's base footprint."""

    priority = 10

    def get_id(self) -> str:
        return "layout.shelf_pack"

    def get_name(self) -> str:
        return "Shelf Room Packing"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        config = context.config
        footprint = resolved.footprint
        default_size = (config.default_room_width, config.default_room_depth)

        for story, rooms in enumerate(distribute_rooms(context.plan.rooms, resolved.stories)):
            outcome = pack_rooms(rooms, footprint.width, footprint.depth, default_size)
            context.placed_rooms[story] = outcome.placed

            for room in outcome.defaulted:
                context.warn(
                    WarningCode.DIMENSIONS_DEFAULTED,
                    f"Could not read dimensions {room.dimensions!r} for {room.name!r}; "
                    f"using {default_size[0]:g}' x {default_size[1]:g}'",
                    story=story, subject=room.name,
                )
            for room in outcome.too_wide:
                context.warn(
                    WarningCode.ROOM_TOO_WIDE,
                    f"{room.name!r} is wider than the {footprint.width:.1f}' footprint; omitted",
                    story=story, subject=room.name,
                )
            for room in outcome.dropped:
                context.warn(
                    WarningCode.ROOM_DROPPED,
                    f"{room.name!r} does not fit in the remaining footprint depth; omitted",
                    story=story, subject=room.name,
                )
            logger.debug("Story %d: placed %d of %d rooms", story, len(outcome.placed), len(rooms))
