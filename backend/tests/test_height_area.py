"""Tests for allowable height / stories / area compliance."""

from __future__ import annotations

import pytest

from app.code_engine.height_area import calculate_height_area_compliance
from app.code_engine.reference_data import load_default_tables
from app.code_engine.reference_tables import ReferenceTableResolver
from app.models.classification import Severity
from app.models.schemas import HeightAreaLimit, ProjectSnapshot, ReferenceTables


@pytest.fixture(scope="module")
def resolver():
    return ReferenceTableResolver(load_default_tables())


def _snapshot(
    construction_type: str = "V-B",
    occupancy_group: str = "B",
    height: float = 30,
    stories: int = 1,
    area: float = 5000,
    sprinkler_system: bool = False,
    sprinkler_type: str = "",
) -> ProjectSnapshot:
    return ProjectSnapshot(
        construction_type=construction_type,
        occupancy_group=occupancy_group,
        building_height=height,
        stories=stories,
        total_building_area=area,
        sprinkler_system=sprinkler_system,
        sprinkler_type=sprinkler_type,
    )


class TestEndToEnd:

    def test_unsprinklered_over_height_is_violation(self, resolver):
        result = calculate_height_area_compliance(_snapshot(height=45), resolver)
        assert result.height.allowable == 40
        assert result.height.severity == Severity.VIOLATION
        assert result.status == Severity.VIOLATION
        assert result.height.utilization == pytest.approx(1.125)

    def test_nfpa13_brings_height_into_compliance(self, resolver):
        snap = _snapshot(height=45, sprinkler_system=True, sprinkler_type="NFPA-13")
        result = calculate_height_area_compliance(snap, resolver)
        assert result.sprinkler_increase_applied is True
        assert result.height.base_allowable == 40
        assert result.height.allowable == 60
        assert result.height.severity == Severity.COMPLIANT


class TestSprinklerIncrease:

    def test_nfpa13_adjusts_all_three(self, resolver):
        snap = _snapshot(sprinkler_system=True, sprinkler_type="NFPA-13")
        result = calculate_height_area_compliance(snap, resolver)
        assert result.height.allowable == 60
        assert result.stories.allowable == 3
        assert result.area.allowable == 27000

    @pytest.mark.parametrize("sprinkler_type", ["NFPA-13R", "NFPA-13D", "", "nfpa 13", "nfpa-13", "Nfpa-13"])
    def test_other_systems_do_not_qualify(self, resolver, sprinkler_type):
        snap = _snapshot(sprinkler_system=True, sprinkler_type=sprinkler_type)
        result = calculate_height_area_compliance(snap, resolver)
        assert result.sprinkler_increase_applied is False
        assert result.height.allowable == 40
        assert result.stories.allowable == 2
        assert result.area.allowable == 9000

    def test_type_without_system_does_not_qualify(self, resolver):
        snap = _snapshot(sprinkler_system=False, sprinkler_type="NFPA-13")
        result = calculate_height_area_compliance(snap, resolver)
        assert result.sprinkler_increase_applied is False
        assert result.height.allowable == 40

    def test_record_without_increase(self):
        tables = ReferenceTables(height_area_limits=[HeightAreaLimit(
            construction_type="V-B", occupancy_group="H-1",
            max_height_ft=40, max_stories=1, base_allowable_area=5000,
            sprinkler_increase_allowed=False,
        )])
        snap = _snapshot(occupancy_group="H-1", sprinkler_system=True, sprinkler_type="NFPA-13")
        result = calculate_height_area_compliance(snap, ReferenceTableResolver(tables))
        assert result.sprinkler_increase_applied is False
        assert result.height.allowable == 40
        assert result.area.allowable == 5000
        assert any("No sprinkler increase" in n for n in result.notes)


class TestWarningThreshold:
    """Warning when actual is above 90% of the limit and not over it."""

    @pytest.mark.parametrize("height,expected", [
        (30, Severity.COMPLIANT),
        (36, Severity.COMPLIANT),
        (37, Severity.WARNING),
        (40, Severity.WARNING),
        (40.5, Severity.VIOLATION),
    ])
    def test_height_bands(self, resolver, height, expected):
        result = calculate_height_area_compliance(_snapshot(height=height), resolver)
        assert result.height.severity == expected

    def test_status_is_worst_of_three(self, resolver):
        result = calculate_height_area_compliance(_snapshot(height=20, stories=2, area=1000), resolver)
        assert result.height.severity == Severity.COMPLIANT
        assert result.stories.severity == Severity.WARNING
        assert result.area.severity == Severity.COMPLIANT
        assert result.status == Severity.WARNING

    def test_area_violation(self, resolver):
        result = calculate_height_area_compliance(_snapshot(area=9001), resolver)
        assert result.area.severity == Severity.VIOLATION


class TestMissingReference:

    def test_blank_construction_type(self, resolver):
        result = calculate_height_area_compliance(_snapshot(construction_type=""), resolver)
        assert result.missing_reference == ["construction_type:"]
        assert result.height is None
        assert result.stories is None
        assert result.area is None
        assert result.status is None

    def test_unknown_occupancy(self, resolver):
        result = calculate_height_area_compliance(_snapshot(occupancy_group="Z"), resolver)
        assert result.missing_reference == ["height_area_limit:V-B/Z"]
        assert result.status is None

    def test_database_format_resolves(self, resolver):
        result = calculate_height_area_compliance(_snapshot(construction_type="VB"), resolver)
        assert result.missing_reference == []
        assert result.construction_type == "V-B"


class TestDeterminism:

    def test_repeat_calls_identical(self, resolver):
        snap = _snapshot(height=45, sprinkler_system=True, sprinkler_type="NFPA-13")
        first = calculate_height_area_compliance(snap, resolver).model_dump_json()
        second = calculate_height_area_compliance(snap, resolver).model_dump_json()
        assert first == second
