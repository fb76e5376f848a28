"""
Calculator result models.

Plain structured data handed to the presentation consumer. Nothing here is
persisted; every value is derived from a ProjectSnapshot and the reference
tables on each calculation pass.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from app.models.classification import Severity
from app.models.schemas import StructuralFireRating


class ComplianceIssue(BaseModel):
    type: Severity  # warning or violation
    message: str
    code: Optional[str] = None


class LimitCheck(BaseModel):
    """Actual value against an allowable limit."""
    actual: float
    base_allowable: float
    allowable: float  # after sprinkler adjustment
    severity: Severity
    utilization: Optional[float] = None  # actual / allowable


class OverallCompliance(BaseModel):
    percentage: int = 100
    status: Severity = Severity.COMPLIANT
    issues: list[ComplianceIssue] = []


# ──────────────────────────────────────────────────────────────────
# ZONING ENVELOPE
# ──────────────────────────────────────────────────────────────────

class Setbacks(BaseModel):
    front: float
    side: float
    rear: float
    street_side: Optional[float] = None  # corner lots only


class HeightLimits(BaseModel):
    max_height: float
    max_stories: int


class Coverage(BaseModel):
    max_coverage_percent: float
    max_coverage: float
    far_base: float
    max_floor_area: float
    calculation_method: str = "FAR"  # "FAR" or "UnitBased"
    special_rule_applies: bool = False
    special_rule_explanation: str = ""
    max_area_by_units: Optional[float] = None


class RequiredParking(BaseModel):
    main: int = 2
    ohana: int = 0
    adu: int = 0
    total: int = 2


class DwellingUnits(BaseModel):
    max_units: int
    allows_ohana: bool
    allows_adu: bool
    required_parking: RequiredParking


class ZoningEnvelopeResult(BaseModel):
    district: str
    lot_area: float
    setbacks: Optional[Setbacks] = None
    height_limits: Optional[HeightLimits] = None
    coverage: Optional[Coverage] = None
    dwelling_units: Optional[DwellingUnits] = None
    floor_area_check: Optional[LimitCheck] = None  # proposed total area vs max floor area
    missing_reference: list[str] = []


# ──────────────────────────────────────────────────────────────────
# HEIGHT / AREA / STORIES
# ──────────────────────────────────────────────────────────────────

class HeightAreaResult(BaseModel):
    """Allowable height, stories and area against the proposed building.

    When the construction type / occupancy pair cannot be resolved the three
    checks and ``status`` are None and ``missing_reference`` names what is
    absent. A None status means "cannot be computed", never "compliant".
    """
    construction_type: str
    occupancy_group: str
    sprinkler_increase_applied: bool = False
    height: Optional[LimitCheck] = None
    stories: Optional[LimitCheck] = None
    area: Optional[LimitCheck] = None
    status: Optional[Severity] = None
    notes: list[str] = []
    missing_reference: list[str] = []
    reference: str = "IBC Tables 504.3, 504.4, 506.2"


# ──────────────────────────────────────────────────────────────────
# FIRE & LIFE SAFETY
# ──────────────────────────────────────────────────────────────────

class ExteriorWallRating(BaseModel):
    fire_separation_distance: float
    rating: float
    openings: int  # max unprotected opening area, % of wall
    opening_protection: str
    reference: str = "IBC Table 705.8"


class SeparationRating(BaseModel):
    from_occupancy: str
    to_occupancy: str
    rating: float


class OccupancySeparations(BaseModel):
    required: bool = False
    separations: list[SeparationRating] = []
    reference: str = "IBC Table 508.4"


class CorridorRating(BaseModel):
    rating: float
    sprinklered_exempt: bool = False
    reference: str = "IBC Table 1020.1"


class ShaftRatings(BaseModel):
    exit_stairways: int
    elevator_shafts: int
    mechanical_shafts: int
    other_shafts: int
    reference: str = "IBC 713.4"


class OpeningProtective(BaseModel):
    wall_type: str
    door_rating: str
    window_rating: str
    max_glass_area: str
    wall_application: str


class FireDampers(BaseModel):
    fire_damper_locations: list[str]
    smoke_damper_locations: list[str]
    exceptions: list[str]
    reference: str = "IBC Section 717"


class FireSafetyResult(BaseModel):
    exterior_wall: ExteriorWallRating
    occupancy_separations: OccupancySeparations
    corridor: CorridorRating
    shafts: ShaftRatings
    opening_protectives: list[OpeningProtective]
    fire_dampers: FireDampers
    structural_ratings: Optional[StructuralFireRating] = None
    is_high_rise: bool = False


# ──────────────────────────────────────────────────────────────────
# OCCUPANCY & EGRESS
# ──────────────────────────────────────────────────────────────────

class SpaceLoad(BaseModel):
    name: str
    space_type: str
    floor_level: str = ""
    area: float
    load_factor: float
    occupant_load: int
    calculation: str
    high_density: bool = False
    low_confidence: bool = False  # default load factor used


class OccupantLoadResult(BaseModel):
    total: int = 0
    by_space: list[SpaceLoad] = []
    worst_case: int = 0
    has_high_density: bool = False
    missing_space_types: list[str] = []


class ExitRequirements(BaseModel):
    required_exits: int
    door_width: int  # inches
    stair_width: int  # inches
    capacity_per_exit: int
    suggested_config: str


class TravelLimits(BaseModel):
    max_travel: float
    common_path: float
    dead_end: float


class TravelDistanceCompliance(BaseModel):
    occupancy_class: str
    max_travel_compliant: bool
    common_path_compliant: bool
    dead_end_compliant: bool
    allowable_limits: TravelLimits
    violations: list[str] = []


class CorridorRequirements(BaseModel):
    min_width: int  # inches
    fire_rating: int
    reasoning: str


class AccessibilityRequirements(BaseModel):
    elevator_required: bool
    elevator_provided: bool
    accessible_parking: int
    van_accessible: int
    rationale: list[str] = []


class OccupancyResult(BaseModel):
    occupant_load: OccupantLoadResult
    exit_requirements: ExitRequirements
    travel_distance_compliance: Optional[TravelDistanceCompliance] = None
    corridor_requirements: CorridorRequirements
    accessibility_requirements: AccessibilityRequirements
    overall_compliance: OverallCompliance
    missing_reference: list[str] = []


# ──────────────────────────────────────────────────────────────────
# ORCHESTRATOR
# ──────────────────────────────────────────────────────────────────

class ComplianceReport(BaseModel):
    zoning: ZoningEnvelopeResult
    height_area: HeightAreaResult
    fire_safety: FireSafetyResult
    occupancy: OccupancyResult
    summary: OverallCompliance
