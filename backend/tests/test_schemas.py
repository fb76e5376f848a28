"""Tests for project snapshot parsing and immutability."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.models.schemas import (
    HeightAreaLimit, ProjectSnapshot, parse_count, parse_non_negative, parse_numeric,
)


class TestNumericParsing:

    @pytest.mark.parametrize("raw,expected", [
        ("1,500", 1500.0),
        (" 42.5 ", 42.5),
        (7, 7.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("-12", -12.0),
    ])
    def test_parse_numeric(self, raw, expected):
        assert parse_numeric(raw) == expected

    def test_negative_clamps_to_zero(self):
        assert parse_non_negative("-5") == 0.0

    def test_count_truncates(self):
        assert parse_count("2.7") == 2
        assert parse_count("junk") == 0


class TestProjectSnapshot:

    def test_form_strings_are_parsed(self):
        snap = ProjectSnapshot(
            lot_area="8,000",
            stories="3",
            building_height="45",
            fire_separation_distance="-4",
            travel_distances={"max_exit_access": "abc", "dead_end": "-1"},
        )
        assert snap.lot_area == 8000
        assert snap.stories == 3
        assert snap.building_height == 45
        assert snap.fire_separation_distance == 0
        assert snap.travel_distances.max_exit_access == 0
        assert snap.travel_distances.dead_end == 0

    def test_codes_normalized(self):
        snap = ProjectSnapshot(
            construction_type="vb", occupancy_group=" a-2 ",
            zoning_district="r-5", sprinkler_type=" NFPA-13 ",
        )
        assert snap.construction_type == "V-B"
        assert snap.occupancy_group == "A-2"
        assert snap.zoning_district == "R-5"
        assert snap.sprinkler_type == "NFPA-13"

    def test_sprinkler_type_case_preserved(self):
        assert ProjectSnapshot(sprinkler_type="nfpa-13").sprinkler_type == "nfpa-13"

    def test_separation_method_lowercased(self):
        snap = ProjectSnapshot(mixed_occupancy={
            "enabled": True,
            "separation_method": "Separated",
            "secondary_occupancies": [{"group": "s-1", "area": "1,000"}],
        })
        assert snap.mixed_occupancy.separation_method == "separated"
        assert snap.mixed_occupancy.secondary_occupancies[0].group == "S-1"
        assert snap.mixed_occupancy.secondary_occupancies[0].area == 1000

    def test_frozen(self):
        snap = ProjectSnapshot(lot_area=5000)
        with pytest.raises(ValidationError):
            snap.lot_area = 6000

    def test_with_changes_returns_new_snapshot(self):
        snap = ProjectSnapshot(lot_area=5000, zoning_district="R-5")
        changed = snap.with_changes(lot_area="7,500")
        assert changed is not snap
        assert changed.lot_area == 7500
        assert changed.zoning_district == "R-5"
        assert snap.lot_area == 5000

    def test_with_changes_validates_nested(self):
        snap = ProjectSnapshot(spaces=[{"name": "Office", "space_type": "BUSINESS", "area": 1500}])
        changed = snap.with_changes(travel_distances={"dead_end": "30"})
        assert changed.travel_distances.dead_end == 30
        assert changed.spaces == snap.spaces

    @pytest.mark.parametrize("height,expected", [(75, False), (75.5, True), (0, False)])
    def test_high_rise(self, height, expected):
        assert ProjectSnapshot(building_height=height).is_high_rise is expected


class TestReferenceRows:

    def test_height_area_construction_type_normalized(self):
        row = HeightAreaLimit(
            construction_type="IIIA", occupancy_group="B",
            max_height_ft=85, max_stories=5, base_allowable_area=28500,
        )
        assert row.construction_type == "III-A"
