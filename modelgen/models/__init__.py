from .geometry import Point2D, Point3D, p2, p3, rectangle
from .plan import RoofType, ArchitecturalStyle, RoomSpec, RegionalStyle, PlanDescription
from .building import (
    OpeningType, WallOpening, WallSegment, FloorSlab, RoofPlane,
    SiteElementType, SiteElement, BoundingBox, ModelMetadata, BuildingModel,
)
from .layout import Footprint, PlacedRoom
from .parameters import (
    GenerationConfig,
    EXTERIOR_WALL_THICKNESS, INTERIOR_WALL_THICKNESS,
    FOUNDATION_THICKNESS, FLOOR_SLAB_THICKNESS, FOUNDATION_DEPTH,
)
from .diagnostics import WarningCode, GenerationWarning, GenerationResult
from .context import ResolvedPlan, GenerationContext

__all__ = [
    "Point2D", "Point3D", "p2", "p3", "rectangle",
    "RoofType", "ArchitecturalStyle", "RoomSpec", "RegionalStyle", "PlanDescription",
    "OpeningType", "WallOpening", "WallSegment", "FloorSlab", "RoofPlane",
    "SiteElementType", "SiteElement", "BoundingBox", "ModelMetadata", "BuildingModel",
    "Footprint", "PlacedRoom",
    "GenerationConfig",
    "EXTERIOR_WALL_THICKNESS", "INTERIOR_WALL_THICKNESS",
    "FOUNDATION_THICKNESS", "FLOOR_SLAB_THICKNESS", "FOUNDATION_DEPTH",
    "WarningCode", "GenerationWarning", "GenerationResult",
    "ResolvedPlan", "GenerationContext",
]
