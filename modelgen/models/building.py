"""Building element models — walls, openings, slabs, roof planes, site."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import Point2D, Point3D


class _Element(BaseModel):
    model_config = ConfigDict(frozen=True)


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class WallOpening(_Element):
    """An opening (window/door) positioned along a wall."""
    type: OpeningType
    position: float     # Opening center, normalized 0-1 along the wall
    width: float        # Feet
    height: float       # Feet
    sill_height: float  # Height from floor to bottom of opening (feet)

    def span(self, wall_length: float) -> tuple[float, float]:
        """Normalized [start, end] of the opening along its wall."""
        half = self.width / wall_length / 2 if wall_length > 0 else 0.5
        return self.position - half, self.position + half


class WallSegment(_Element):
    """A wall segment defined by two floor-plane endpoints."""
    id: str
    start: Point2D
    end: Point2D
    height: float
    thickness: float
    is_exterior: bool
    floor: int              # 0-based story index
    elevation: float = 0.0  # Base of the wall above grade
    openings: tuple[WallOpening, ...] = ()

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class FloorSlab(_Element):
    id: str
    vertices: tuple[Point2D, ...]  # Closed polygon outline
    elevation: float               # Bottom of slab relative to story 0
    thickness: float


class RoofPlane(_Element):
    id: str
    vertices: tuple[Point3D, ...]  # 3 or 4 coplanar points
    overhang: float


class SiteElementType(str, Enum):
    DRIVEWAY = "driveway"
    WALKWAY = "walkway"
    PATIO = "patio"
    DECK = "deck"
    PROPERTY_LINE = "property_line"


class SiteElement(_Element):
    id: str
    type: SiteElementType
    vertices: tuple[Point2D, ...]


class BoundingBox(_Element):
    """Axis-aligned extents of the whole model; origin is the minimum corner."""
    width: float
    depth: float
    height: float
    origin: Point3D


class ModelMetadata(_Element):
    style: str
    stories: int
    total_square_footage: float


class BuildingModel(_Element):
    """The complete generated building, ready for a rendering client."""
    walls: tuple[WallSegment, ...]
    floors: tuple[FloorSlab, ...]
    roof_planes: tuple[RoofPlane, ...]
    site_elements: tuple[SiteElement, ...]
    bounding_box: BoundingBox
    metadata: ModelMetadata

    @property
    def exterior_walls(self) -> tuple[WallSegment, ...]:
        return tuple(w for w in self.walls if w.is_exterior)

    @property
    def interior_walls(self) -> tuple[WallSegment, ...]:
        return tuple(w for w in self.walls if not w.is_exterior)

    def site_element(self, element_type: SiteElementType) -> SiteElement | None:
        for element in self.site_elements:
            if element.type == element_type:
                return element
        return None
