"""Site elements laid out around the building footprint.

The front wall sits on z = 0, so the street side is -z and the back
yard is +z.
"""

from __future__ import annotations

from modelgen.rules.base import GenerationRule
from modelgen.rules.wall.exterior import ENTRY_DOOR_POSITION
from modelgen.models import (
    GenerationContext, SiteElement, SiteElementType, rectangle,
)

LOT_EXTRA_WIDTH = 30.0
LOT_EXTRA_DEPTH = 40.0
MIN_LOT_WIDTH = 50.0
MIN_LOT_DEPTH = 100.0
WALKWAY_WIDTH_RATIO = 0.04
DRIVEWAY_GAP = 2.0
DRIVEWAY_WIDTH = 20.0
DRIVEWAY_STREET_RUN = 5.0      # Past the property line to the curb
DECK_DEPTH = 14.0
DECK_SPAN = (0.2, 0.8)         # Fractions of the building width
PORCH_DEPTH = 6.0
PORCH_SPAN = (0.15, 0.85)


def site_elements(
    width: float,
    depth: float,
    ground_width: float,
    setback: float,
    has_garage: bool,
    has_deck: bool,
    has_porch: bool,
) -> list[SiteElement]:
    """`width` is the main body; `ground_width` includes any garage bay."""
    lot_w = max(ground_width + LOT_EXTRA_WIDTH, MIN_LOT_WIDTH)
    lot_d = max(depth + LOT_EXTRA_DEPTH, MIN_LOT_DEPTH)
    offset_x = (lot_w - ground_width) / 2

    elements = [
        SiteElement(
            id="site-property-line",
            type=SiteElementType.PROPERTY_LINE,
            vertices=rectangle(-offset_x, -setback, lot_w - offset_x, lot_d - setback),
        ),
    ]

    door_x = ground_width * ENTRY_DOOR_POSITION
    half_walk = width * WALKWAY_WIDTH_RATIO / 2
    elements.append(SiteElement(
        id="site-walkway",
        type=SiteElementType.WALKWAY,
        vertices=rectangle(door_x - half_walk, -setback, door_x + half_walk, 0),
    ))

    if has_garage:
        x0 = width + DRIVEWAY_GAP
        elements.append(SiteElement(
            id="site-driveway",
            type=SiteElementType.DRIVEWAY,
            vertices=rectangle(x0, -setback - DRIVEWAY_STREET_RUN, x0 + DRIVEWAY_WIDTH, 0),
        ))

    if has_deck:
        elements.append(SiteElement(
            id="site-deck",
            type=SiteElementType.DECK,
            vertices=rectangle(width * DECK_SPAN[0], depth, width * DECK_SPAN[1], depth + DECK_DEPTH),
        ))

    if has_porch:
        elements.append(SiteElement(
            id="site-porch",
            type=SiteElementType.PATIO,
            vertices=rectangle(width * PORCH_SPAN[0], -PORCH_DEPTH, width * PORCH_SPAN[1], 0),
        ))

    return elements


class SiteLayoutRule(GenerationRule):

    priority = 70

    def get_id(self) -> str:
        return "site.layout"

    def get_name(self) -> str:
        return "Site Layout"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        context.add_site_elements(site_elements(
            resolved.footprint.width,
            resolved.footprint.depth,
            resolved.story_footprint(0).width,
            context.config.front_setback,
            resolved.has_garage,
            resolved.has_deck,
            resolved.has_porch,
        ))
