"""End-to-end tests for model generation."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from modelgen.core.analyzer import footprint_for
from modelgen.core.styles import STYLE_PITCH
from modelgen.models import (
    ArchitecturalStyle, BuildingModel, PlanDescription, RoomSpec,
    SiteElementType, WarningCode,
)
from modelgen.services.model_service import generate_model


def _all_points(model: BuildingModel):
    """Every (x, y, z) the model touches, walls and slabs at base and top."""
    for wall in model.walls:
        for p in (wall.start, wall.end):
            yield p.x, wall.elevation, p.z
            yield p.x, wall.elevation + wall.height, p.z
    for slab in model.floors:
        for p in slab.vertices:
            yield p.x, slab.elevation, p.z
            yield p.x, slab.elevation + slab.thickness, p.z
    for plane in model.roof_planes:
        for p in plane.vertices:
            yield p.x, p.y, p.z
    for element in model.site_elements:
        for p in element.vertices:
            yield p.x, 0.0, p.z


class TestDemoScenario:
    @pytest.fixture()
    def result(self, service, demo_plan):
        return service.generate(demo_plan)

    def test_footprint(self):
        footprint = footprint_for(3200, 2)
        assert footprint.depth == pytest.approx(math.sqrt(1600 / 1.5))
        assert footprint.depth == pytest.approx(32.66, abs=0.01)
        assert footprint.width == pytest.approx(48.99, abs=0.01)

    def test_upper_floor_uses_base_footprint(self, result):
        upper = next(f for f in result.model.floors if f.id == "floor-1")
        assert max(v.x for v in upper.vertices) == pytest.approx(48.99, abs=0.01)
        assert max(v.z for v in upper.vertices) == pytest.approx(32.66, abs=0.01)
        assert upper.elevation == 9.5

    def test_element_counts(self, result):
        model = result.model
        assert len(model.exterior_walls) == 8
        assert len(model.interior_walls) == 7
        assert len(model.roof_planes) == 2
        assert {f.id for f in model.floors} == {"floor-0", "floor-1", "foundation"}

    def test_single_foundation_widened_for_garage(self, result):
        foundations = [f for f in result.model.floors if f.elevation < 0]
        assert len(foundations) == 1
        (foundation,) = foundations
        assert foundation.id == "foundation"
        assert foundation.elevation == -1.5
        assert foundation.thickness == 0.667
        assert max(v.x for v in foundation.vertices) == pytest.approx(48.99 + 25 + 0.25, abs=0.01)
        assert min(v.x for v in foundation.vertices) == -0.25

    def test_site_elements(self, result):
        model = result.model
        for element_type in (SiteElementType.DRIVEWAY, SiteElementType.DECK,
                             SiteElementType.PATIO, SiteElementType.PROPERTY_LINE):
            assert model.site_element(element_type) is not None

    def test_vaulted_great_room(self, result):
        great_room_wall = next(w for w in result.model.walls if w.id == "int-0-0-right")
        assert great_room_wall.height == 18.0

    def test_bounding_box(self, result):
        box = result.model.bounding_box
        depth = math.sqrt(1600 / 1.5)
        width = 1600 / depth
        assert box.width == pytest.approx(width + 25 + 30)
        assert box.depth == pytest.approx(20 + 85)
        assert box.height == pytest.approx(1.5 + 18 + (depth / 2) * 7 / 12)
        assert box.origin.y == -1.5

    def test_metadata(self, result):
        meta = result.model.metadata
        assert (meta.style, meta.stories, meta.total_square_footage) == ("modern_farmhouse", 2, 3200)


class TestProperties:
    PLANS = [
        dict(stories=1, total_square_footage=900, roof_type="flat"),
        dict(stories=2, total_square_footage=2400, roof_type="hip", special_features=("garage",)),
        dict(stories=3, total_square_footage=5200, roof_type="mansard", architectural_style="victorian"),
        dict(stories=2, total_square_footage=1800, roof_type="gambrel", architectural_style="modern"),
        dict(stories=1, total_square_footage=3000, roof_type="shed", special_features=("deck", "porch")),
    ]

    @pytest.fixture(params=PLANS)
    def model(self, request, service, make_plan):
        return service.generate(make_plan(**request.param)).model

    def test_bounding_box_is_positive(self, model):
        box = model.bounding_box
        assert box.width > 0 and box.depth > 0 and box.height > 0

    def test_bounding_box_encloses_every_vertex(self, model):
        box = model.bounding_box
        eps = 1e-9
        for x, y, z in _all_points(model):
            assert box.origin.x - eps <= x <= box.origin.x + box.width + eps
            assert box.origin.y - eps <= y <= box.origin.y + box.height + eps
            assert box.origin.z - eps <= z <= box.origin.z + box.depth + eps

    def test_four_exterior_walls_per_story(self, model):
        for story in range(model.metadata.stories):
            assert sum(1 for w in model.exterior_walls if w.floor == story) == 4

    def test_opening_positions_are_normalized(self, model):
        for wall in model.walls:
            for opening in wall.openings:
                assert 0 <= opening.position <= 1

    def test_thickness_follows_role(self, model):
        assert {w.thickness for w in model.exterior_walls} == {0.5}
        assert {w.thickness for w in model.interior_walls} <= {0.333}

    def test_generation_is_deterministic(self, service, make_plan):
        plan = make_plan(**self.PLANS[1])
        first = service.generate(plan)
        second = service.generate(plan)
        assert first == second
        assert first.model.model_dump_json() == second.model.model_dump_json()


class TestDegenerateInput:
    def test_empty_room_list_gives_bare_shell(self, service, make_plan):
        model = service.generate(make_plan(rooms=())).model
        assert len(model.exterior_walls) == 4
        assert model.interior_walls == ()

    def test_zero_stories_still_builds_a_shell(self, service):
        result = service.generate(PlanDescription(stories=0, total_square_footage=1200))
        assert len(result.model.exterior_walls) == 4
        assert result.model.metadata.stories == 1
        assert WarningCode.STORIES_CLAMPED in {w.code for w in result.warnings}

    def test_empty_plan_uses_defaults(self, service):
        result = service.generate(PlanDescription())
        model = result.model
        assert model.metadata.style == "modern_farmhouse"
        assert model.metadata.total_square_footage == 2000
        assert len(model.roof_planes) == 2
        assert [w.code for w in result.warnings] == [WarningCode.SQUARE_FOOTAGE_DEFAULTED]

    def test_too_many_stories_are_clamped(self, service, make_plan):
        result = service.generate(make_plan(stories=5, total_square_footage=6000))
        assert result.model.metadata.stories == 3
        assert len(result.model.exterior_walls) == 12

    def test_unknown_style_keeps_name_and_uses_default_pitch(self, service, make_plan):
        result = service.generate(make_plan(architectural_style="brutalist"))
        model = result.model
        assert model.metadata.style == "brutalist"
        assert WarningCode.STYLE_UNRECOGNIZED in {w.code for w in result.warnings}
        depth = math.sqrt(1500 / 1.5)
        top = max(v.y for p in model.roof_planes for v in p.vertices)
        assert top == pytest.approx(9.5 + (depth / 2) * 6 / 12)

    def test_unparseable_room_is_defaulted_not_dropped(self, service, make_plan):
        result = service.generate(make_plan(rooms=(RoomSpec(name="Study", dimensions="cozy"),)))
        assert len(result.model.interior_walls) == 1
        assert [w.subject for w in result.warnings] == ["Study"]


def test_every_style_has_a_pitch():
    assert set(STYLE_PITCH) == set(ArchitecturalStyle)


def test_model_is_immutable(demo_plan):
    model = generate_model(demo_plan)
    with pytest.raises(ValidationError):
        model.walls = ()
    assert isinstance(model.walls, tuple)


def test_plan_accepts_analysis_payload_keys():
    plan = PlanDescription.model_validate({
        "stories": 1,
        "squareFootage": 1400,
        "architecturalStyle": "Mid Century",
        "roofType": "HIP",
        "regionalStyle": {"isPNW": True, "description": None},
        "rooms": [{"name": "Kitchen", "dimensions": None, "ceilingHeight": "9'", "notes": None}],
        "specialFeatures": None,
    })
    assert plan.wet_climate
    assert plan.rooms[0].ceiling_height == "9'"
    assert plan.special_features == ()
    assert ArchitecturalStyle.parse(plan.architectural_style) == ArchitecturalStyle.MID_CENTURY
    model = generate_model(plan)
    assert len(model.roof_planes) == 4
    assert {p.overhang for p in model.roof_planes} == {3.0}


@pytest.mark.parametrize("sqft", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_square_footage_falls_back_to_default(service, sqft):
    result = service.generate(PlanDescription(stories=1, total_square_footage=sqft))
    assert result.model.metadata.total_square_footage == 2000
    assert len(result.model.exterior_walls) == 4
    assert WarningCode.SQUARE_FOOTAGE_DEFAULTED in {w.code for w in result.warnings}


def test_huge_plan_caps_windows_per_wall(service):
    model = service.generate(PlanDescription(stories=1, total_square_footage=1e9)).model
    for wall in model.exterior_walls:
        windows = [o for o in wall.openings if o.type.value == "window"]
        assert 2 <= len(windows) <= 48


@pytest.mark.parametrize("key", ["squareFootage", "totalSquareFootage", "total_square_footage"])
def test_square_footage_keys(key):
    plan = PlanDescription.model_validate({"stories": 2, key: 3200})
    assert plan.total_square_footage == 3200
    assert generate_model(plan).metadata.total_square_footage == 3200
