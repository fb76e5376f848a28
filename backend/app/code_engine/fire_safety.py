"""
Fire and life-safety ratings.

  - Exterior wall rating and unprotected openings by fire separation distance
    (IBC Table 705.8)
  - Occupancy separations for separated mixed occupancies (IBC Table 508.4)
  - Corridor fire rating (IBC Table 1020.1)
  - Shaft enclosures (IBC 713.4)
  - Opening protectives (IBC Table 716.1(2))
  - Fire and smoke dampers (IBC Section 717)
  - Building element ratings (IBC Table 601)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from app.code_engine.reference_tables import ReferenceTableResolver
from app.models.classification import OccupancyClass, SeparationMethod, occupancy_class_of
from app.models.results import (
    CorridorRating, ExteriorWallRating, FireDampers, FireSafetyResult,
    OccupancySeparations, OpeningProtective, SeparationRating, ShaftRatings,
)
from app.models.schemas import ProjectSnapshot, StructuralFireRating

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────
# EXTERIOR WALLS (IBC Table 705.8)
# (upper bound of fire separation distance, exclusive): (rating hours, max openings %)
# Distances at or beyond the last bound: 0 hours, 100% openings.
# ──────────────────────────────────────────────────────────────────

EXTERIOR_WALL_BANDS = [
    (3, 3, 0),
    (5, 1, 25),
    (10, 1, 50),
    (15, 0, 75),
]
UNLIMITED_OPENINGS = 100

NO_OPENINGS = "N/A - No openings permitted"
PROTECTED_OPENINGS = "Protected openings required"
NO_PROTECTION = "No protection required"


def opening_protection_for(openings: int) -> str:
    if openings == 0:
        return NO_OPENINGS
    if openings < UNLIMITED_OPENINGS:
        return PROTECTED_OPENINGS
    return NO_PROTECTION


def calculate_exterior_wall_rating(distance: float) -> ExteriorWallRating:
    rating, openings = 0, UNLIMITED_OPENINGS
    for upper, band_rating, band_openings in EXTERIOR_WALL_BANDS:
        if distance < upper:
            rating, openings = band_rating, band_openings
            break
    return ExteriorWallRating(
        fire_separation_distance=distance,
        rating=rating,
        openings=openings,
        opening_protection=opening_protection_for(openings),
    )


# ──────────────────────────────────────────────────────────────────
# OCCUPANCY SEPARATIONS (IBC 508.4)
# ──────────────────────────────────────────────────────────────────

def calculate_occupancy_separations(snapshot: ProjectSnapshot,
                                    resolver: ReferenceTableResolver) -> OccupancySeparations:
    """Separation hours from the primary occupancy to each secondary one.

    Only separated mixed occupancies need fire barriers; non-separated
    buildings are evaluated as the most restrictive occupancy instead.
    """
    mixed = snapshot.mixed_occupancy
    primary = snapshot.occupancy_group
    if not (mixed.enabled and mixed.separation_method == SeparationMethod.SEPARATED.value and primary):
        return OccupancySeparations()

    separations = [
        SeparationRating(
            from_occupancy=primary,
            to_occupancy=secondary.group,
            rating=resolver.separation_hours_for(primary, secondary.group),
        )
        for secondary in mixed.secondary_occupancies
        if secondary.group
    ]
    return OccupancySeparations(required=bool(separations), separations=separations)


# ──────────────────────────────────────────────────────────────────
# CORRIDORS (IBC Table 1020.1)
# sprinklered -> (rating hours, sprinkler exemption available)
# ──────────────────────────────────────────────────────────────────

def _always_rated(sprinklered: bool) -> tuple[float, bool]:
    return 1, False


def _exempt_when_sprinklered(sprinklered: bool) -> tuple[float, bool]:
    return (0 if sprinklered else 1), True


def _half_hour_when_sprinklered(sprinklered: bool) -> tuple[float, bool]:
    return (0.5 if sprinklered else 1), False


CORRIDOR_RATING_RULES: dict[OccupancyClass, Callable[[bool], tuple[float, bool]]] = {
    OccupancyClass.ASSEMBLY: _always_rated,
    OccupancyClass.EDUCATIONAL: _always_rated,
    OccupancyClass.BUSINESS: _exempt_when_sprinklered,
    OccupancyClass.FACTORY: _exempt_when_sprinklered,
    OccupancyClass.MERCANTILE: _exempt_when_sprinklered,
    OccupancyClass.STORAGE: _exempt_when_sprinklered,
    OccupancyClass.UTILITY: _exempt_when_sprinklered,
    OccupancyClass.HIGH_HAZARD: _always_rated,
    OccupancyClass.INSTITUTIONAL: _half_hour_when_sprinklered,
    OccupancyClass.RESIDENTIAL: _half_hour_when_sprinklered,
}


def calculate_corridor_rating(snapshot: ProjectSnapshot,
                              resolver: ReferenceTableResolver) -> CorridorRating:
    occ_class = occupancy_class_of(snapshot.occupancy_group)
    if occ_class is None:
        logger.debug("Unrecognized occupancy %r, corridor rated %s h",
                     snapshot.occupancy_group, resolver.defaults.corridor_rating_hours)
        return CorridorRating(rating=resolver.defaults.corridor_rating_hours)
    rating, exempt = CORRIDOR_RATING_RULES[occ_class](snapshot.sprinkler_system)
    return CorridorRating(rating=rating, sprinklered_exempt=exempt)


# ──────────────────────────────────────────────────────────────────
# SHAFTS (IBC 713.4)
# ──────────────────────────────────────────────────────────────────

LOW_RISE_SHAFT_MAX_STORIES = 3


def calculate_shaft_ratings(stories: int) -> ShaftRatings:
    hours = 1 if stories <= LOW_RISE_SHAFT_MAX_STORIES else 2
    return ShaftRatings(
        exit_stairways=hours,
        elevator_shafts=hours,
        mechanical_shafts=hours,
        other_shafts=hours,
    )


# ──────────────────────────────────────────────────────────────────
# OPENING PROTECTIVES & DAMPERS
# ──────────────────────────────────────────────────────────────────

THREE_QUARTER_HOUR = "3/4 hour (45 min)"
NINETY_MINUTE = "1-1/2 hour (90 min)"
LISTED_GLASS = "Limited by individual listing"


def calculate_opening_protectives(exterior_wall: ExteriorWallRating) -> list[OpeningProtective]:
    exterior_glass = f"{exterior_wall.openings}% of wall area"
    return [
        OpeningProtective(
            wall_type="1-hour fire barrier",
            door_rating=THREE_QUARTER_HOUR,
            window_rating=THREE_QUARTER_HOUR,
            max_glass_area=LISTED_GLASS,
            wall_application="Corridors, occupancy separations",
        ),
        OpeningProtective(
            wall_type="2-hour fire barrier",
            door_rating=NINETY_MINUTE,
            window_rating=NINETY_MINUTE,
            max_glass_area=LISTED_GLASS,
            wall_application="Exit enclosures, shafts, occupancy separations",
        ),
        OpeningProtective(
            wall_type="1-hour exterior wall",
            door_rating=THREE_QUARTER_HOUR,
            window_rating=THREE_QUARTER_HOUR,
            max_glass_area=exterior_glass,
            wall_application="Exterior walls at 5'-15' separation distance",
        ),
        OpeningProtective(
            wall_type="2-hour exterior wall",
            door_rating=NINETY_MINUTE,
            window_rating=NINETY_MINUTE,
            max_glass_area=exterior_glass,
            wall_application="Exterior walls at 3'-5' separation distance",
        ),
    ]


def calculate_fire_dampers(sprinklered: bool, high_rise: bool) -> FireDampers:
    smoke = [
        "Ducts penetrating smoke barriers",
        "Ducts penetrating corridor walls required to be rated",
    ]
    if high_rise:
        smoke.append("At each floor in high-rise buildings")

    exceptions = []
    if sprinklered:
        exceptions.append("Smoke dampers not required in fully sprinklered buildings for some conditions")
    exceptions.append("Fire dampers not required where ducts are constructed of steel and penetration is protected")

    return FireDampers(
        fire_damper_locations=[
            "Ducts penetrating fire barriers",
            "Ducts penetrating fire partitions",
            "Ducts penetrating fire walls",
            "Ducts penetrating shaft enclosures",
        ],
        smoke_damper_locations=smoke,
        exceptions=exceptions,
    )


def calculate_fire_safety(snapshot: ProjectSnapshot,
                          resolver: ReferenceTableResolver) -> FireSafetyResult:
    exterior_wall = calculate_exterior_wall_rating(snapshot.fire_separation_distance)
    structural: Optional[StructuralFireRating] = resolver.fire_ratings_for(snapshot.construction_type)
    if structural is None and snapshot.construction_type:
        logger.debug("No Table 601 ratings for %r", snapshot.construction_type)

    return FireSafetyResult(
        exterior_wall=exterior_wall,
        occupancy_separations=calculate_occupancy_separations(snapshot, resolver),
        corridor=calculate_corridor_rating(snapshot, resolver),
        shafts=calculate_shaft_ratings(snapshot.stories),
        opening_protectives=calculate_opening_protectives(exterior_wall),
        fire_dampers=calculate_fire_dampers(snapshot.sprinkler_system, snapshot.is_high_rise),
        structural_ratings=structural,
        is_high_rise=snapshot.is_high_rise,
    )
