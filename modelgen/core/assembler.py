"""Model assembly — foundation, bounding box and the final immutable model."""

from __future__ import annotations

from modelgen.models import (
    BoundingBox, BuildingModel, FloorSlab, GenerationContext, ModelMetadata,
    Point3D, RoofPlane, SiteElement, WallSegment, rectangle,
    FOUNDATION_DEPTH, FOUNDATION_THICKNESS,
)

FOUNDATION_PAD = 0.25


class ModelAssembler:
    """Composes rule output into a BuildingModel. Never fails."""

    def assemble(self, context: GenerationContext) -> BuildingModel:
        resolved = context.resolved
        ground = resolved.story_footprint(0)
        foundation = FloorSlab(
            id="foundation",
            vertices=rectangle(
                -FOUNDATION_PAD, -FOUNDATION_PAD,
                ground.width + FOUNDATION_PAD, ground.depth + FOUNDATION_PAD,
            ),
            elevation=-FOUNDATION_DEPTH,
            thickness=FOUNDATION_THICKNESS,
        )
        floors = tuple(context.floors) + (foundation,)

        model_kwargs = dict(
            walls=tuple(context.walls),
            floors=floors,
            roof_planes=tuple(context.roof_planes),
            site_elements=tuple(context.site_elements),
        )
        return BuildingModel(
            **model_kwargs,
            bounding_box=self.bounding_box(**model_kwargs),
            metadata=ModelMetadata(
                style=resolved.style_name,
                stories=resolved.stories,
                total_square_footage=resolved.total_square_footage,
            ),
        )

    def bounding_box(
        self,
        walls: tuple[WallSegment, ...],
        floors: tuple[FloorSlab, ...],
        roof_planes: tuple[RoofPlane, ...],
        site_elements: tuple[SiteElement, ...],
    ) -> BoundingBox:
        """Extents of every vertex; walls and slabs contribute base and top."""
        xs: list[float] = []
        ys: list[float] = []
        zs: list[float] = []

        for wall in walls:
            xs += [wall.start.x, wall.end.x]
            zs += [wall.start.z, wall.end.z]
            ys += [wall.elevation, wall.elevation + wall.height]
        for slab in floors:
            xs += [v.x for v in slab.vertices]
            zs += [v.z for v in slab.vertices]
            ys += [slab.elevation, slab.elevation + slab.thickness]
        for plane in roof_planes:
            xs += [v.x for v in plane.vertices]
            ys += [v.y for v in plane.vertices]
            zs += [v.z for v in plane.vertices]
        for element in site_elements:
            xs += [v.x for v in element.vertices]
            zs += [v.z for v in element.vertices]
            ys.append(0.0)

        return BoundingBox(
            width=max(xs) - min(xs),
            depth=max(zs) - min(zs),
            height=max(ys) - min(ys),
            origin=Point3D(x=min(xs), y=min(ys), z=min(zs)),
        )
