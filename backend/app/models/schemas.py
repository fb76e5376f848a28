from __future__ import annotations

import math
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from app.models.classification import normalize_construction_type


def parse_numeric(val) -> float:
    """Lenient float parsing for form-supplied values. Unparsable -> 0."""
    if val is None or isinstance(val, bool):
        return 0.0
    if isinstance(val, str):
        val = val.replace(",", "").strip()
    try:
        result = float(val)
    except (ValueError, TypeError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def parse_non_negative(val) -> float:
    return max(0.0, parse_numeric(val))


def parse_count(val) -> int:
    return int(parse_non_negative(val))


# ──────────────────────────────────────────────────────────────────
# REFERENCE TABLE ROWS
# ──────────────────────────────────────────────────────────────────

class ZoningDistrict(BaseModel):
    code: str
    name: str = ""
    description: Optional[str] = None
    min_lot_area: float
    max_building_height: float
    max_stories: Optional[int] = None  # None: no story cap
    front_setback: float
    side_setback: float
    rear_setback: float
    max_lot_coverage: float = Field(ge=0, le=1)
    max_far: Optional[float] = None


class HeightAreaLimit(BaseModel):
    construction_type: str
    occupancy_group: str
    max_height_ft: float
    max_stories: int
    base_allowable_area: float
    sprinkler_increase_allowed: bool = True

    @field_validator("construction_type", mode="before")
    @classmethod
    def _normalize_construction(cls, v):
        return normalize_construction_type(v)


class OccupancySeparation(BaseModel):
    from_occupancy: str
    to_occupancy: str
    required_rating_hours: float


class TravelDistanceLimit(BaseModel):
    occupancy_class: str  # occupancy letter, e.g. "B"
    sprinklered: bool
    max_travel_distance_ft: float
    max_common_path_ft: float
    max_dead_end_ft: float


class SpaceType(BaseModel):
    code: str
    name: str = ""
    occupancy_group: str
    occupant_load_factor: float  # sf per occupant


class StructuralFireRating(BaseModel):
    """Required fire-resistance of building elements, in hours (IBC Table 601)."""
    construction_type: str
    structural_frame: float
    bearing_walls_exterior: float
    bearing_walls_interior: float
    nonbearing_walls_interior: float
    floor_construction: float
    roof_construction: float

    @field_validator("construction_type", mode="before")
    @classmethod
    def _normalize_construction(cls, v):
        return normalize_construction_type(v)


class ReferenceTables(BaseModel):
    """Fully materialized reference data handed to the resolver."""
    zoning_districts: list[ZoningDistrict] = []
    height_area_limits: list[HeightAreaLimit] = []
    occupancy_separations: list[OccupancySeparation] = []
    travel_distance_limits: list[TravelDistanceLimit] = []
    space_types: list[SpaceType] = []
    fire_ratings: list[StructuralFireRating] = []


# ──────────────────────────────────────────────────────────────────
# PROJECT SNAPSHOT
# Form values arrive as strings; unparsable numbers and negative
# measurements are read as 0.
# ──────────────────────────────────────────────────────────────────

Measure = Annotated[float, BeforeValidator(parse_non_negative)]
Count = Annotated[int, BeforeValidator(parse_count)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SecondaryOccupancy(_Frozen):
    group: str = ""
    area: Measure = 0
    floor: str = ""

    @field_validator("group", mode="before")
    @classmethod
    def _strip_group(cls, v):
        return (v or "").strip().upper()


class MixedOccupancy(_Frozen):
    enabled: bool = False
    separation_method: str = ""  # "separated" | "non-separated"
    secondary_occupancies: tuple[SecondaryOccupancy, ...] = ()

    @field_validator("separation_method", mode="before")
    @classmethod
    def _normalize_method(cls, v):
        return (v or "").strip().lower()


class Space(_Frozen):
    name: str = ""
    space_type: str = ""  # SpaceType code
    area: Measure = 0
    floor_level: str = ""
    notes: Optional[str] = None


class TravelDistances(_Frozen):
    max_exit_access: Measure = 0
    common_path: Measure = 0
    dead_end: Measure = 0


class AccessibilityInputs(_Frozen):
    number_of_employees: Count = 0
    is_public_accommodation: bool = False
    elevator_provided: bool = False
    total_parking_spaces: Count = 0


HIGH_RISE_HEIGHT_FT = 75


class ProjectSnapshot(_Frozen):
    """Immutable project attributes for one calculation pass."""
    lot_area: Measure = 0
    is_corner_lot: bool = False
    zoning_district: str = ""
    construction_type: str = ""
    occupancy_group: str = ""
    mixed_occupancy: MixedOccupancy = MixedOccupancy()
    sprinkler_system: bool = False
    sprinkler_type: str = ""
    fire_separation_distance: Measure = 0
    stories: Count = 1
    building_height: Measure = 0
    total_building_area: Measure = 0
    spaces: tuple[Space, ...] = ()
    travel_distances: TravelDistances = TravelDistances()
    accessibility: AccessibilityInputs = AccessibilityInputs()

    @field_validator("construction_type", mode="before")
    @classmethod
    def _normalize_construction(cls, v):
        return normalize_construction_type(v)

    @field_validator("zoning_district", "occupancy_group", mode="before")
    @classmethod
    def _strip_code(cls, v):
        return (v or "").strip().upper()

    # matched exactly, "nfpa-13" is not an NFPA 13 system
    @field_validator("sprinkler_type", mode="before")
    @classmethod
    def _strip_sprinkler_type(cls, v):
        return (v or "").strip()

    @property
    def is_high_rise(self) -> bool:
        return self.building_height > HIGH_RISE_HEIGHT_FT

    def with_changes(self, **changes) -> "ProjectSnapshot":
        """New validated snapshot with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return ProjectSnapshot.model_validate(data)
