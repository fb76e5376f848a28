"""
Occupancy and egress.

  - Occupant load per space (IBC 1004.5): area / load factor, rounded up
  - Number of exits (IBC Table 1006.2.1) and egress width (IBC 1005.3)
  - Travel distance, common path and dead ends (IBC 1017.2, 1006.2.1, 1020.4)
  - Corridor width (IBC 1020.2)
  - Elevator and accessible parking (IBC Chapter 11)

All sub-results are rolled up into one ordered issue list and score.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from app.code_engine.reference_tables import MissingReferenceData, ReferenceTableResolver
from app.code_engine.verdicts import round_half_up, summarize
from app.models.classification import OccupancyClass, Severity, occupancy_class_of, occupancy_letter
from app.models.results import (
    AccessibilityRequirements, ComplianceIssue, CorridorRequirements,
    ExitRequirements, OccupancyResult, OccupantLoadResult, OverallCompliance,
    SpaceLoad, TravelDistanceCompliance, TravelLimits,
)
from app.models.schemas import AccessibilityInputs, ProjectSnapshot, Space, TravelDistances

logger = logging.getLogger(__name__)

HIGH_DENSITY_FACTOR = 15  # sf per occupant


def format_number(value: float):
    """Render whole floats without a trailing ".0" (1500.0 -> 1500)."""
    if float(value).is_integer():
        return int(value)
    return round(value, 2)


# ──────────────────────────────────────────────────────────────────
# OCCUPANT LOAD (IBC 1004.5)
# ──────────────────────────────────────────────────────────────────

def calculate_space_load(space: Space, resolver: ReferenceTableResolver) -> SpaceLoad:
    lookup = resolver.load_factor_for(space.space_type)
    load = math.ceil(space.area / lookup.factor)
    return SpaceLoad(
        name=space.name,
        space_type=space.space_type,
        floor_level=space.floor_level,
        area=space.area,
        load_factor=lookup.factor,
        occupant_load=load,
        calculation=f"{format_number(space.area)} sf ÷ {format_number(lookup.factor)} = {load} people",
        high_density=lookup.resolved and lookup.factor < HIGH_DENSITY_FACTOR,
        low_confidence=not lookup.resolved,
    )


def calculate_occupant_load(spaces, resolver: ReferenceTableResolver) -> OccupantLoadResult:
    by_space = [calculate_space_load(space, resolver) for space in spaces]

    missing = []
    for sl in by_space:
        if sl.low_confidence and sl.space_type not in missing:
            missing.append(sl.space_type)
    if missing:
        logger.warning("Default load factor used for space types: %s", missing)

    return OccupantLoadResult(
        total=sum(sl.occupant_load for sl in by_space),
        by_space=by_space,
        worst_case=max((sl.occupant_load for sl in by_space), default=0),
        has_high_density=any(sl.high_density for sl in by_space),
        missing_space_types=missing,
    )


# ──────────────────────────────────────────────────────────────────
# EXITS (IBC Table 1006.2.1, 1005.3)
# (occupant load above which, exits required), checked high to low
# ──────────────────────────────────────────────────────────────────

EXIT_COUNT_THRESHOLDS = [
    (1000, 4),
    (500, 3),
    (49, 2),
]

DOOR_WIDTH_PER_OCCUPANT = 0.2   # inches
STAIR_WIDTH_PER_OCCUPANT = 0.3  # inches
MIN_DOOR_WIDTH = 32             # inches clear

_EXIT_COUNT_WORDS = {1: "One", 2: "Two"}


def required_exit_count(occupant_load: int) -> int:
    for threshold, exits in EXIT_COUNT_THRESHOLDS:
        if occupant_load > threshold:
            return exits
    return 1


def suggest_door_configuration(required_exits: int, door_width: int) -> str:
    each = max(MIN_DOOR_WIDTH, math.ceil(door_width / required_exits))
    if required_exits == 1:
        return f'One {each}" door'
    count = _EXIT_COUNT_WORDS.get(required_exits, str(required_exits))
    return f'{count} {each}" doors'


def calculate_exit_requirements(occupant_load: int) -> ExitRequirements:
    exits = required_exit_count(occupant_load)
    door_width = math.ceil(occupant_load * DOOR_WIDTH_PER_OCCUPANT)
    return ExitRequirements(
        required_exits=exits,
        door_width=door_width,
        stair_width=math.ceil(occupant_load * STAIR_WIDTH_PER_OCCUPANT),
        capacity_per_exit=math.ceil(occupant_load / exits),
        suggested_config=suggest_door_configuration(exits, door_width),
    )


# ──────────────────────────────────────────────────────────────────
# TRAVEL DISTANCE (IBC 1017.2)
# Sprinklered buildings get a further increase on top of the
# sprinklered table row. Dead ends are not increased.
# ──────────────────────────────────────────────────────────────────

SPRINKLER_TRAVEL_FACTOR = 1.25
SPRINKLER_COMMON_PATH_FACTOR = 1.5


def allowable_travel_limits(occupancy_group: str, sprinklered: bool,
                            resolver: ReferenceTableResolver) -> TravelLimits:
    row = resolver.travel_limits_for(occupancy_letter(occupancy_group), sprinklered)
    max_travel = row.max_travel_distance_ft
    common_path = row.max_common_path_ft
    if sprinklered:
        max_travel = round_half_up(max_travel * SPRINKLER_TRAVEL_FACTOR)
        common_path = round_half_up(common_path * SPRINKLER_COMMON_PATH_FACTOR)
    return TravelLimits(max_travel=max_travel, common_path=common_path, dead_end=row.max_dead_end_ft)


def validate_travel_distances(distances: TravelDistances, occupancy_group: str, sprinklered: bool,
                              resolver: ReferenceTableResolver) -> TravelDistanceCompliance:
    limits = allowable_travel_limits(occupancy_group, sprinklered, resolver)

    violations = []
    max_travel_ok = distances.max_exit_access <= limits.max_travel
    if not max_travel_ok:
        excess = format_number(distances.max_exit_access - limits.max_travel)
        violations.append(f"Exit access travel distance exceeds maximum by {excess} ft")
    common_path_ok = distances.common_path <= limits.common_path
    if not common_path_ok:
        excess = format_number(distances.common_path - limits.common_path)
        violations.append(f"Common path of travel exceeds maximum by {excess} ft")
    dead_end_ok = distances.dead_end <= limits.dead_end
    if not dead_end_ok:
        excess = format_number(distances.dead_end - limits.dead_end)
        violations.append(f"Dead end corridor exceeds maximum by {excess} ft")

    return TravelDistanceCompliance(
        occupancy_class=occupancy_letter(occupancy_group),
        max_travel_compliant=max_travel_ok,
        common_path_compliant=common_path_ok,
        dead_end_compliant=dead_end_ok,
        allowable_limits=limits,
        violations=violations,
    )


# ──────────────────────────────────────────────────────────────────
# CORRIDOR WIDTH (IBC 1020.2)
# occupant load -> (base width in, fire rating hours, reasoning)
# ──────────────────────────────────────────────────────────────────

STANDARD_CORRIDOR = (44, 0, "Standard corridor requirements apply")
INSTITUTIONAL_CORRIDOR = (96, 1, "Institutional occupancies require 8' minimum corridor width")
LARGE_ASSEMBLY_CORRIDOR = (72, 1, "Assembly occupancies with >300 occupant load require wider corridors")
LARGE_ASSEMBLY_LOAD = 300


def _standard_corridor(occupant_load: int) -> tuple[int, int, str]:
    return STANDARD_CORRIDOR


def _institutional_corridor(occupant_load: int) -> tuple[int, int, str]:
    return INSTITUTIONAL_CORRIDOR


def _assembly_corridor(occupant_load: int) -> tuple[int, int, str]:
    if occupant_load > LARGE_ASSEMBLY_LOAD:
        return LARGE_ASSEMBLY_CORRIDOR
    return STANDARD_CORRIDOR


CORRIDOR_WIDTH_RULES: dict[OccupancyClass, Callable[[int], tuple[int, int, str]]] = {
    OccupancyClass.ASSEMBLY: _assembly_corridor,
    OccupancyClass.BUSINESS: _standard_corridor,
    OccupancyClass.EDUCATIONAL: _standard_corridor,
    OccupancyClass.FACTORY: _standard_corridor,
    OccupancyClass.HIGH_HAZARD: _standard_corridor,
    OccupancyClass.INSTITUTIONAL: _institutional_corridor,
    OccupancyClass.MERCANTILE: _standard_corridor,
    OccupancyClass.RESIDENTIAL: _standard_corridor,
    OccupancyClass.STORAGE: _standard_corridor,
    OccupancyClass.UTILITY: _standard_corridor,
}


def calculate_corridor_requirements(occupant_load: int, occupancy_group: str) -> CorridorRequirements:
    occ_class = occupancy_class_of(occupancy_group)
    rule = CORRIDOR_WIDTH_RULES.get(occ_class, _standard_corridor)
    base_width, fire_rating, reasoning = rule(occupant_load)
    return CorridorRequirements(
        min_width=math.ceil(max(base_width, occupant_load * DOOR_WIDTH_PER_OCCUPANT)),
        fire_rating=fire_rating,
        reasoning=reasoning,
    )


# ──────────────────────────────────────────────────────────────────
# ACCESSIBILITY (IBC Chapter 11)
# ──────────────────────────────────────────────────────────────────

ELEVATOR_EXEMPT_AREA = 3000      # sf
ELEVATOR_EMPLOYEE_TRIGGER = 30
ACCESSIBLE_PARKING_RATIO = 0.02
ACCESSIBLE_PER_VAN_SPACE = 6


def calculate_accessibility(inputs: AccessibilityInputs, stories: int,
                            building_area: float) -> AccessibilityRequirements:
    multi_story = stories > 1
    elevator_required = multi_story and (
        inputs.is_public_accommodation
        or building_area > ELEVATOR_EXEMPT_AREA
        or inputs.number_of_employees > ELEVATOR_EMPLOYEE_TRIGGER
    )

    rationale = []
    if elevator_required:
        if inputs.is_public_accommodation:
            rationale.append("Public accommodation in multi-story building requires elevator")
        if building_area > ELEVATOR_EXEMPT_AREA:
            rationale.append(
                f"Building area ({format_number(building_area)} sf) exceeds 3,000 sf "
                "threshold for elevator exemption"
            )
        if inputs.number_of_employees > ELEVATOR_EMPLOYEE_TRIGGER:
            rationale.append(
                f"Employee count ({inputs.number_of_employees}) may trigger elevator requirement"
            )

    accessible = max(1, math.ceil(inputs.total_parking_spaces * ACCESSIBLE_PARKING_RATIO))
    return AccessibilityRequirements(
        elevator_required=elevator_required,
        elevator_provided=inputs.elevator_provided,
        accessible_parking=accessible,
        van_accessible=math.ceil(accessible / ACCESSIBLE_PER_VAN_SPACE),
        rationale=rationale,
    )


# ──────────────────────────────────────────────────────────────────
# OVERALL
# ──────────────────────────────────────────────────────────────────

MULTI_EXIT_WARNING_LOAD = 100


def collect_issues(occupant_load: OccupantLoadResult, exits: ExitRequirements,
                   travel: Optional[TravelDistanceCompliance],
                   accessibility: AccessibilityRequirements) -> list[ComplianceIssue]:
    issues = []
    if travel is None:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message="Travel distance limits unavailable - travel distances not checked",
            code="IBC 1017.2",
        ))
    else:
        issues.extend(
            ComplianceIssue(type=Severity.VIOLATION, message=v, code="IBC 1017.1")
            for v in travel.violations
        )
    if occupant_load.has_high_density:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message="High occupant density detected - verify space planning",
            code="IBC 1004",
        ))
    if exits.required_exits > 1 and occupant_load.total > MULTI_EXIT_WARNING_LOAD:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message="Multiple exits required for this occupant load - verify direct access to exits",
            code="IBC 1006.2.1",
        ))
    if accessibility.elevator_required and not accessibility.elevator_provided:
        issues.append(ComplianceIssue(
            type=Severity.VIOLATION,
            message="Elevator required but not provided",
            code="IBC Chapter 11",
        ))
    for code in occupant_load.missing_space_types:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message=(
                f"No load factor for space type '{code or 'unspecified'}' - "
                "default factor used, verify occupant load"
            ),
            code="IBC 1004.5",
        ))
    return issues


def calculate_overall_compliance(issues: list[ComplianceIssue]) -> OverallCompliance:
    return summarize(issues)


def calculate_occupancy(snapshot: ProjectSnapshot,
                        resolver: ReferenceTableResolver) -> OccupancyResult:
    occupant_load = calculate_occupant_load(snapshot.spaces, resolver)
    exits = calculate_exit_requirements(occupant_load.total)
    corridor = calculate_corridor_requirements(occupant_load.total, snapshot.occupancy_group)
    accessibility = calculate_accessibility(
        snapshot.accessibility, snapshot.stories, snapshot.total_building_area,
    )

    missing_reference = []
    travel = None
    try:
        travel = validate_travel_distances(
            snapshot.travel_distances, snapshot.occupancy_group, snapshot.sprinkler_system, resolver,
        )
    except MissingReferenceData as e:
        logger.warning("Travel distances not checked: %s", e)
        missing_reference.append(e.label)

    issues = collect_issues(occupant_load, exits, travel, accessibility)
    return OccupancyResult(
        occupant_load=occupant_load,
        exit_requirements=exits,
        travel_distance_compliance=travel,
        corridor_requirements=corridor,
        accessibility_requirements=accessibility,
        overall_compliance=calculate_overall_compliance(issues),
        missing_reference=missing_reference,
    )
