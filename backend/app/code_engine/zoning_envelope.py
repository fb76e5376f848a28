"""
Zoning envelope calculator.

Derives the buildable envelope a district allows on a lot:
  - Setbacks (front / side / rear, plus street side on corner lots)
  - Height and story caps
  - Lot coverage and maximum floor area (FAR or unit-based)
  - Dwelling units, ohana / ADU eligibility and required parking

District families are dispatched through DISTRICT_FLOOR_AREA_RULES:
  - R-5: floor area capped at 3,000 sf per dwelling unit, limited by coverage
  - A-*: FAR based, annotated
  - B-* / BMX-*: FAR based, annotated
  - everything else: plain FAR
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from app.code_engine.reference_tables import MissingReferenceData, ReferenceTableResolver
from app.code_engine.verdicts import check_limit, round_half_up
from app.models.classification import DistrictClass, district_class_of
from app.models.results import (
    Coverage, DwellingUnits, HeightLimits, RequiredParking, Setbacks,
    ZoningEnvelopeResult,
)
from app.models.schemas import ProjectSnapshot, ZoningDistrict

logger = logging.getLogger(__name__)

STREET_SIDE_SETBACK_FACTOR = 1.5
R5_AREA_PER_UNIT = 3000          # sf of building area per dwelling unit
OHANA_LOT_FACTOR = 1.5           # lot must be 1.5x the district minimum
ADU_MIN_LOT_AREA = 3500          # sf
MAIN_DWELLING_PARKING = 2


# ──────────────────────────────────────────────────────────────────
# DISTRICT FLOOR AREA RULES
# ──────────────────────────────────────────────────────────────────

def _r5_unit_based(coverage: Coverage, max_units: int) -> Coverage:
    unit_based = max_units * R5_AREA_PER_UNIT
    return coverage.model_copy(update={
        "max_floor_area": min(unit_based, coverage.max_coverage),
        "calculation_method": "UnitBased",
        "special_rule_applies": True,
        "max_area_by_units": unit_based,
        "special_rule_explanation": (
            "In R-5 zoning, maximum building area is 3,000 sq ft per dwelling "
            "unit, limited by lot coverage."
        ),
    })


def _apartment(coverage: Coverage, max_units: int) -> Coverage:
    return coverage.model_copy(update={
        "special_rule_applies": True,
        "special_rule_explanation": (
            "Apartment districts use higher FAR values for multi-family developments."
        ),
    })


def _business(coverage: Coverage, max_units: int) -> Coverage:
    return coverage.model_copy(update={
        "special_rule_applies": True,
        "special_rule_explanation": (
            "Business districts typically allow higher density developments "
            "with increased FAR."
        ),
    })


def _standard(coverage: Coverage, max_units: int) -> Coverage:
    return coverage


# Every rule takes (coverage, max_units); only R-5 uses the unit count.
DISTRICT_FLOOR_AREA_RULES: dict[DistrictClass, Callable[[Coverage, int], Coverage]] = {
    DistrictClass.R5: _r5_unit_based,
    DistrictClass.APARTMENT: _apartment,
    DistrictClass.BUSINESS: _business,
    DistrictClass.STANDARD: _standard,
}


# ──────────────────────────────────────────────────────────────────
# ENVELOPE
# ──────────────────────────────────────────────────────────────────

def calculate_setbacks(district: ZoningDistrict, is_corner_lot: bool) -> Setbacks:
    street_side = None
    if is_corner_lot:
        street_side = round_half_up(district.side_setback * STREET_SIDE_SETBACK_FACTOR)
    return Setbacks(
        front=district.front_setback,
        side=district.side_setback,
        rear=district.rear_setback,
        street_side=street_side,
    )


def calculate_height_limits(district: ZoningDistrict, resolver: ReferenceTableResolver) -> HeightLimits:
    return HeightLimits(
        max_height=district.max_building_height,
        max_stories=district.max_stories or resolver.defaults.max_stories,
    )


def max_dwelling_units(lot_area: float, min_lot_area: float) -> int:
    if min_lot_area <= 0:
        return 0
    return math.floor(lot_area / min_lot_area)


def calculate_coverage(district: ZoningDistrict, lot_area: float, max_units: int,
                       resolver: ReferenceTableResolver) -> Coverage:
    far = district.max_far or resolver.defaults.far
    coverage = Coverage(
        max_coverage_percent=district.max_lot_coverage * 100,
        max_coverage=lot_area * district.max_lot_coverage,
        far_base=far,
        max_floor_area=lot_area * far,
    )
    rule = DISTRICT_FLOOR_AREA_RULES[district_class_of(district.code)]
    return rule(coverage, max_units)


def calculate_dwelling_units(district: ZoningDistrict, lot_area: float, max_units: int) -> DwellingUnits:
    allows_ohana = lot_area >= district.min_lot_area * OHANA_LOT_FACTOR
    allows_adu = lot_area >= ADU_MIN_LOT_AREA
    ohana = 1 if allows_ohana else 0
    adu = 1 if allows_adu else 0
    return DwellingUnits(
        max_units=max_units,
        allows_ohana=allows_ohana,
        allows_adu=allows_adu,
        required_parking=RequiredParking(
            main=MAIN_DWELLING_PARKING,
            ohana=ohana,
            adu=adu,
            total=MAIN_DWELLING_PARKING + ohana + adu,
        ),
    )


def calculate_zoning_envelope(snapshot: ProjectSnapshot,
                              resolver: ReferenceTableResolver) -> ZoningEnvelopeResult:
    """Buildable envelope for the snapshot's lot and district.

    An unknown district yields a result with ``missing_reference`` set and no
    sub-results; it does not raise.
    """
    lot_area = snapshot.lot_area
    try:
        district = resolver.district_for(snapshot.zoning_district)
    except MissingReferenceData as e:
        logger.warning("Zoning envelope not computed: %s", e)
        return ZoningEnvelopeResult(
            district=snapshot.zoning_district,
            lot_area=lot_area,
            missing_reference=[e.label],
        )

    max_units = max_dwelling_units(lot_area, district.min_lot_area)
    coverage = calculate_coverage(district, lot_area, max_units, resolver)

    floor_area_check = None
    if snapshot.total_building_area > 0:
        floor_area_check = check_limit(snapshot.total_building_area, coverage.max_floor_area)

    return ZoningEnvelopeResult(
        district=district.code,
        lot_area=lot_area,
        setbacks=calculate_setbacks(district, snapshot.is_corner_lot),
        height_limits=calculate_height_limits(district, resolver),
        coverage=coverage,
        dwelling_units=calculate_dwelling_units(district, lot_area, max_units),
        floor_area_check=floor_area_check,
    )
