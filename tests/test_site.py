"""Tests for site layout."""

from __future__ import annotations

import pytest

from modelgen.models import SiteElementType
from modelgen.rules.site.site_layout import site_elements


def _by_type(elements):
    return {e.type: e for e in elements}


def _bounds(element):
    xs = [v.x for v in element.vertices]
    zs = [v.z for v in element.vertices]
    return min(xs), min(zs), max(xs), max(zs)


class TestSiteElements:
    def test_bare_site_has_lot_and_walkway(self):
        elements = site_elements(40, 30, 40, 15, False, False, False)
        assert [e.type for e in elements] == [SiteElementType.PROPERTY_LINE, SiteElementType.WALKWAY]

    def test_property_line_is_centered_with_front_setback(self):
        lot = _by_type(site_elements(40, 30, 40, 15, False, False, False))[SiteElementType.PROPERTY_LINE]
        # 40 + 30 wide, at least 100 deep, front edge at the setback
        assert _bounds(lot) == (-15, -15, 55, 85)

    def test_walkway_runs_from_front_door_to_property_line(self):
        walk = _by_type(site_elements(40, 30, 40, 15, False, False, False))[SiteElementType.WALKWAY]
        x0, z0, x1, z1 = _bounds(walk)
        assert (x0 + x1) / 2 == pytest.approx(40 * 0.4)
        assert x1 - x0 == pytest.approx(40 * 0.04)
        assert (z0, z1) == (-15, 0)

    def test_driveway_beside_the_building(self):
        elements = _by_type(site_elements(40, 30, 65, 15, True, False, False))
        x0, z0, x1, z1 = _bounds(elements[SiteElementType.DRIVEWAY])
        assert (x0, x1) == (42, 62)
        assert x1 - x0 == 20
        assert (z0, z1) == (-20, 0)
        # The lot widens to hold the garage bay
        lot = _bounds(elements[SiteElementType.PROPERTY_LINE])
        assert lot[2] - lot[0] == 65 + 30

    def test_deck_behind_rear_wall(self):
        deck = _by_type(site_elements(40, 30, 40, 15, False, True, False))[SiteElementType.DECK]
        assert _bounds(deck) == pytest.approx((8, 30, 32, 44))

    def test_porch_in_front_of_entry(self):
        porch = _by_type(site_elements(40, 30, 40, 15, False, False, True))[SiteElementType.PATIO]
        assert porch.id == "site-porch"
        x0, z0, x1, z1 = _bounds(porch)
        assert x1 - x0 == pytest.approx(40 * 0.7)
        assert (z0, z1) == (-6, 0)


@pytest.mark.parametrize("features, expected", [
    ((), False),
    (("attached_garage_3_car",), True),
    (("Detached Garage",), True),
    (("rear_deck", "covered_front_porch"), False),
])
def test_driveway_iff_garage_tag(service, make_plan, features, expected):
    model = service.generate(make_plan(special_features=features)).model
    assert (model.site_element(SiteElementType.DRIVEWAY) is not None) is expected


def test_patio_tag_produces_deck(service, make_plan):
    model = service.generate(make_plan(special_features=("stone patio",))).model
    assert model.site_element(SiteElementType.DECK) is not None
