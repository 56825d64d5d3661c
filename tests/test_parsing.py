"""Tests for the plan string parsers."""

from __future__ import annotations

import pytest

from modelgen.core.parsing import has_feature, parse_ceiling_height, parse_dimensions


class TestParseDimensions:
    @pytest.mark.parametrize("text, expected", [
        ("24' x 18'", (24.0, 18.0)),
        ("16 x 14", (16.0, 14.0)),
        ("13.5' X 12'", (13.5, 12.0)),
        ("approx 20 by 15 ft", (20.0, 15.0)),
    ])
    def test_parses_pairs(self, text, expected):
        assert parse_dimensions(text) == expected

    @pytest.mark.parametrize("text", [None, "", "large", "about 12 feet", "0' x 10'"])
    def test_unusable_strings(self, text):
        assert parse_dimensions(text) is None


class TestParseCeilingHeight:
    def test_number_wins_over_keyword(self):
        assert parse_ceiling_height("Vaulted to 18'") == 18.0

    def test_plain_number(self):
        assert parse_ceiling_height("10'") == 10.0

    @pytest.mark.parametrize("text", ["vaulted", "Cathedral ceiling"])
    def test_keyword_maps_to_vaulted_height(self, text):
        assert parse_ceiling_height(text) == 17.0
        assert parse_ceiling_height(text, vaulted_height=20.0) == 20.0

    @pytest.mark.parametrize("text", [None, "", "standard"])
    def test_no_override(self, text):
        assert parse_ceiling_height(text) is None


def test_has_feature_is_case_insensitive():
    assert has_feature(("Attached_Garage_3_car",), r"garage")
    assert has_feature(["covered patio"], r"deck|patio")
    assert not has_feature((), r"garage")
