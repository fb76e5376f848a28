"""Tests for classification enums and dispatch-table coverage.

Every table keyed by a closed enumeration must cover every member, so adding
an occupancy letter or district family forces each dependent rule to be
revisited.
"""

from __future__ import annotations

import pytest

from app.code_engine.fire_safety import CORRIDOR_RATING_RULES
from app.code_engine.occupancy import CORRIDOR_WIDTH_RULES
from app.code_engine.reference_data import (
    BASE_AREA_LIMITS, BASE_HEIGHT_LIMITS, BASE_STORY_LIMITS,
    FIRE_RESISTANCE_RATINGS, TRAVEL_DISTANCE_LIMITS,
)
from app.code_engine.zoning_envelope import DISTRICT_FLOOR_AREA_RULES
from app.models.classification import (
    ConstructionType, DistrictClass, OccupancyClass, OccupancyGroup, Severity,
    district_class_of, normalize_construction_type, occupancy_class_of,
    occupancy_letter,
)


class TestDispatchCoverage:
    """Dispatch tables must be exhaustive over their enum."""

    def test_corridor_rating_covers_every_occupancy_class(self):
        assert set(CORRIDOR_RATING_RULES) == set(OccupancyClass)

    def test_corridor_width_covers_every_occupancy_class(self):
        assert set(CORRIDOR_WIDTH_RULES) == set(OccupancyClass)

    def test_floor_area_rules_cover_every_district_class(self):
        assert set(DISTRICT_FLOOR_AREA_RULES) == set(DistrictClass)

    def test_travel_limits_cover_every_occupancy_letter(self):
        assert set(TRAVEL_DISTANCE_LIMITS) == {c.value for c in OccupancyClass}
        for by_sprinkler in TRAVEL_DISTANCE_LIMITS.values():
            assert set(by_sprinkler) == {True, False}

    def test_every_occupancy_group_has_a_class(self):
        for group in OccupancyGroup:
            assert occupancy_class_of(group.value) is not None

    def test_severity_rank_covers_every_severity(self):
        assert [s.rank for s in Severity] == [0, 1, 2]


class TestHeightAreaTablesComplete:
    """Every selectable construction type / occupancy pair resolves."""

    @pytest.mark.parametrize("table", [BASE_HEIGHT_LIMITS, BASE_STORY_LIMITS, BASE_AREA_LIMITS])
    def test_all_pairs_present(self, table):
        assert set(table) == {c.value for c in ConstructionType}
        for ctype, by_occ in table.items():
            assert set(by_occ) == {g.value for g in OccupancyGroup}, ctype

    def test_no_zero_limits(self):
        for table in (BASE_HEIGHT_LIMITS, BASE_STORY_LIMITS, BASE_AREA_LIMITS):
            for by_occ in table.values():
                assert all(v > 0 for v in by_occ.values())

    def test_table_601_covers_every_construction_type(self):
        assert set(FIRE_RESISTANCE_RATINGS) == {c.value for c in ConstructionType}


class TestNormalization:

    @pytest.mark.parametrize("raw,expected", [
        ("VB", "V-B"),
        ("V-B", "V-B"),
        ("vb", "V-B"),
        (" IIIA ", "III-A"),
        ("IIB", "II-B"),
        ("IV", "IV-A"),
        ("IVB", "IV-B"),
        ("", ""),
        (None, ""),
        ("X-Z", "X-Z"),
    ])
    def test_construction_type(self, raw, expected):
        assert normalize_construction_type(raw) == expected

    @pytest.mark.parametrize("group,letter", [
        ("A-2", "A"), ("B", "B"), ("r-2", "R"), ("", ""), (None, ""),
    ])
    def test_occupancy_letter(self, group, letter):
        assert occupancy_letter(group) == letter

    def test_unknown_letter_has_no_class(self):
        assert occupancy_class_of("X-1") is None
        assert occupancy_class_of("") is None

    @pytest.mark.parametrize("code,expected", [
        ("R-5", DistrictClass.R5),
        ("r-5", DistrictClass.R5),
        ("R-7.5", DistrictClass.STANDARD),
        ("A-1", DistrictClass.APARTMENT),
        ("B-2", DistrictClass.BUSINESS),
        ("BMX-3", DistrictClass.BUSINESS),
        ("AG-2", DistrictClass.STANDARD),
        ("", DistrictClass.STANDARD),
    ])
    def test_district_class(self, code, expected):
        assert district_class_of(code) is expected


class TestSeverity:

    def test_worst_prefers_violation(self):
        assert Severity.worst([Severity.WARNING, Severity.VIOLATION, Severity.COMPLIANT]) is Severity.VIOLATION

    def test_worst_of_nothing_is_compliant(self):
        assert Severity.worst([]) is Severity.COMPLIANT

    def test_worst_skips_none(self):
        assert Severity.worst([None, Severity.WARNING]) is Severity.WARNING
