"""Generation context — accumulates state during one generation pass."""

from __future__ import annotations
import logging
from pydantic import BaseModel, ConfigDict, Field

from .building import WallSegment, FloorSlab, RoofPlane, SiteElement
from .diagnostics import GenerationWarning, WarningCode
from .layout import Footprint, PlacedRoom
from .parameters import GenerationConfig
from .plan import ArchitecturalStyle, PlanDescription, RoofType

logger = logging.getLogger(__name__)


class ResolvedPlan(BaseModel):
    """Plan values after defaulting, plus the quantities derived from them."""
    model_config = ConfigDict(frozen=True)

    stories: int
    total_square_footage: float
    style_name: str
    style: ArchitecturalStyle | None  # None when the style was not recognized
    roof_type: RoofType
    pitch: float                      # Rise / run
    overhang: float
    story_heights: tuple[float, ...]
    footprint: Footprint              # Base footprint shared by every story
    has_garage: bool
    has_deck: bool
    has_porch: bool
    garage_bay_width: float = 0.0

    def story_elevation(self, story: int) -> float:
        return sum(self.story_heights[:story])

    def story_height(self, story: int) -> float:
        return self.story_heights[story]

    def story_footprint(self, story: int) -> Footprint:
        """The ground story is widened by the garage bay, if any."""
        if story == 0 and self.has_garage:
            return Footprint(
                width=self.footprint.width + self.garage_bay_width,
                depth=self.footprint.depth,
            )
        return self.footprint

    @property
    def roof_base_height(self) -> float:
        return sum(self.story_heights)


class GenerationContext(BaseModel):
    """
    Holds all state during a single generation pass.

    The analyzer resolves the plan before the context is built.
    Rules read the resolved plan and earlier rules' output, and
    append their own elements. The generator orchestrates the flow.
    """
    # Input
    plan: PlanDescription
    resolved: ResolvedPlan
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Intermediate results (populated by the layout rule)
    placed_rooms: dict[int, list[PlacedRoom]] = {}

    # Output (populated by rules)
    walls: list[WallSegment] = []
    floors: list[FloorSlab] = []
    roof_planes: list[RoofPlane] = []
    site_elements: list[SiteElement] = []
    warnings: list[GenerationWarning] = []

    def rooms_on(self, story: int) -> list[PlacedRoom]:
        return self.placed_rooms.get(story, [])

    def add_walls(self, walls: list[WallSegment]) -> None:
        self.walls.extend(walls)

    def add_floor(self, slab: FloorSlab) -> None:
        self.floors.append(slab)

    def add_roof_planes(self, planes: list[RoofPlane]) -> None:
        self.roof_planes.extend(planes)

    def add_site_elements(self, elements: list[SiteElement]) -> None:
        self.site_elements.extend(elements)

    def warn(
        self,
        code: WarningCode,
        message: str,
        story: int | None = None,
        subject: str | None = None,
    ) -> None:
        logger.warning("%s: %s", code.value, message)
        self.warnings.append(GenerationWarning(
            code=code, message=message, story=story, subject=subject,
        ))
