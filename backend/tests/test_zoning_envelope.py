"""Tests for the zoning envelope calculator."""

from __future__ import annotations

import pytest

from app.code_engine.reference_data import load_default_tables
from app.code_engine.reference_tables import ReferenceTableResolver
from app.code_engine.zoning_envelope import calculate_zoning_envelope
from app.models.classification import Severity
from app.models.schemas import ProjectSnapshot, ReferenceTables, ZoningDistrict


@pytest.fixture(scope="module")
def resolver():
    return ReferenceTableResolver(load_default_tables())


def _district(**overrides) -> ZoningDistrict:
    data = dict(
        code="R-6", name="Test residential", min_lot_area=5000,
        max_building_height=30, max_stories=None,
        front_setback=10, side_setback=5, rear_setback=5,
        max_lot_coverage=0.5, max_far=None,
    )
    data.update(overrides)
    return ZoningDistrict(**data)


def _envelope(resolver, district="R-5", lot_area=5000, corner=False, **kw):
    snap = ProjectSnapshot(zoning_district=district, lot_area=lot_area, is_corner_lot=corner, **kw)
    return calculate_zoning_envelope(snap, resolver)


class TestStandardDistrict:

    def test_far_fallback_scenario(self):
        r = ReferenceTableResolver(ReferenceTables(zoning_districts=[_district()]))
        result = _envelope(r, district="R-6", lot_area=8000)
        assert result.dwelling_units.max_units == 1
        assert result.coverage.max_coverage == pytest.approx(4000)
        assert result.coverage.far_base == pytest.approx(0.7)
        assert result.coverage.max_floor_area == pytest.approx(5600)
        assert result.coverage.calculation_method == "FAR"
        assert result.coverage.special_rule_applies is False

    def test_district_far_used(self, resolver):
        result = _envelope(resolver, district="A-2", lot_area=10000)
        assert result.coverage.far_base == pytest.approx(1.9)
        assert result.coverage.max_floor_area == pytest.approx(19000)

    def test_coverage_percent(self, resolver):
        result = _envelope(resolver, district="B-2", lot_area=10000)
        assert result.coverage.max_coverage_percent == pytest.approx(80)
        assert result.coverage.max_coverage == pytest.approx(8000)


class TestR5UnitBasedCap:
    """R-5: min(units x 3,000 sf, lot coverage)."""

    def test_coverage_binding(self, resolver):
        result = _envelope(resolver, lot_area=10000)
        assert result.dwelling_units.max_units == 2
        assert result.coverage.max_area_by_units == 6000
        assert result.coverage.max_coverage == pytest.approx(5000)
        assert result.coverage.max_floor_area == pytest.approx(5000)

    def test_units_binding(self, resolver):
        result = _envelope(resolver, lot_area=14000)
        assert result.dwelling_units.max_units == 2
        assert result.coverage.max_coverage == pytest.approx(7000)
        assert result.coverage.max_floor_area == pytest.approx(6000)

    def test_method_and_explanation(self, resolver):
        result = _envelope(resolver, lot_area=10000)
        assert result.coverage.calculation_method == "UnitBased"
        assert result.coverage.special_rule_applies is True
        assert "3,000 sq ft per dwelling unit" in result.coverage.special_rule_explanation

    def test_lot_below_minimum(self, resolver):
        result = _envelope(resolver, lot_area=4000)
        assert result.dwelling_units.max_units == 0
        assert result.coverage.max_floor_area == 0


class TestDistrictAnnotations:

    def test_apartment(self, resolver):
        cov = _envelope(resolver, district="A-1", lot_area=10000).coverage
        assert cov.special_rule_applies is True
        assert cov.calculation_method == "FAR"
        assert cov.max_floor_area == pytest.approx(9000)
        assert "Apartment districts" in cov.special_rule_explanation

    @pytest.mark.parametrize("district", ["B-1", "BMX-3"])
    def test_business(self, resolver, district):
        cov = _envelope(resolver, district=district, lot_area=10000).coverage
        assert cov.special_rule_applies is True
        assert "Business districts" in cov.special_rule_explanation

    def test_other_districts_unannotated(self, resolver):
        cov = _envelope(resolver, district="R-10", lot_area=10000).coverage
        assert cov.special_rule_applies is False
        assert cov.special_rule_explanation == ""


class TestSetbacksAndHeight:

    def test_corner_lot_street_side(self, resolver):
        result = _envelope(resolver, corner=True)
        assert result.setbacks.side == 5
        # 5 x 1.5 = 7.5, rounds half up
        assert result.setbacks.street_side == 8

    def test_interior_lot_has_no_street_side(self, resolver):
        assert _envelope(resolver).setbacks.street_side is None

    def test_wide_side_yard(self, resolver):
        result = _envelope(resolver, district="AG-2", lot_area=100000, corner=True)
        assert result.setbacks.street_side == 15

    def test_story_fallback(self, resolver):
        result = _envelope(resolver, district="R-5")
        assert result.height_limits.max_height == 25
        assert result.height_limits.max_stories == 2

    def test_district_stories_used(self, resolver):
        assert _envelope(resolver, district="B-1").height_limits.max_stories == 3


class TestDwellingUnits:

    def test_ohana_threshold_inclusive(self, resolver):
        assert _envelope(resolver, lot_area=7500).dwelling_units.allows_ohana is True
        assert _envelope(resolver, lot_area=7499).dwelling_units.allows_ohana is False

    def test_adu_threshold_inclusive(self, resolver):
        du = _envelope(resolver, district="R-3.5", lot_area=3500).dwelling_units
        assert du.allows_adu is True
        assert du.allows_ohana is False
        assert du.required_parking.total == 3

        du = _envelope(resolver, district="R-3.5", lot_area=3499).dwelling_units
        assert du.allows_adu is False
        assert du.max_units == 0

    def test_parking_totals(self, resolver):
        parking = _envelope(resolver, lot_area=7500).dwelling_units.required_parking
        assert (parking.main, parking.ohana, parking.adu, parking.total) == (2, 1, 1, 4)


class TestFloorAreaCheck:

    def test_no_check_without_proposed_area(self, resolver):
        assert _envelope(resolver, district="A-1", lot_area=10000).floor_area_check is None

    def test_near_limit_is_warning(self):
        r = ReferenceTableResolver(ReferenceTables(zoning_districts=[_district()]))
        result = _envelope(r, district="R-6", lot_area=8000, total_building_area=5500)
        assert result.floor_area_check.severity == Severity.WARNING

    def test_over_limit_is_violation(self, resolver):
        result = _envelope(resolver, lot_area=10000, total_building_area=5001)
        assert result.floor_area_check.severity == Severity.VIOLATION


class TestMissingData:

    def test_unknown_district(self, resolver):
        result = _envelope(resolver, district="X-9", lot_area=8000)
        assert result.missing_reference == ["district:X-9"]
        assert result.setbacks is None
        assert result.coverage is None
        assert result.dwelling_units is None

    def test_unparsable_lot_area_flows_through_as_zero(self, resolver):
        result = _envelope(resolver, lot_area="not a number")
        assert result.lot_area == 0
        assert result.dwelling_units.max_units == 0
        assert result.coverage.max_floor_area == 0

    def test_comma_lot_area(self, resolver):
        assert _envelope(resolver, lot_area="10,000").dwelling_units.max_units == 2
