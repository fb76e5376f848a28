"""
Reference table resolver.

Indexes regulatory tables once and answers the lookups every calculator
needs:

  - limits_for:            construction type x occupancy group -> IBC 504/506 limits
  - separation_hours_for:  occupancy pair -> IBC 508.4 separation (either order)
  - travel_limits_for:     occupancy letter x sprinklered -> IBC 1017 / 1006 / 1020.4
  - load_factor_for:       space type -> IBC 1004.5 occupant load factor
  - district_for:          zoning district code -> district record

Conservative defaults live in DefaultPolicies and nowhere else. A missing
record is never read as "no requirement".

The resolver must only be built from fully loaded tables. A partially
loaded separation table would silently send real pairs down the default
path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.models.classification import normalize_construction_type
from app.models.schemas import (
    HeightAreaLimit, ReferenceTables, SpaceType, StructuralFireRating,
    TravelDistanceLimit, ZoningDistrict,
)

logger = logging.getLogger(__name__)


class MissingReferenceData(LookupError):
    """A lookup key is not present in the supplied reference tables."""

    def __init__(self, table: str, key: str):
        self.table = table
        self.key = key
        super().__init__(f"No {table} record for {key!r}")

    @property
    def label(self) -> str:
        return f"{self.table}:{self.key}"


@dataclass(frozen=True)
class DefaultPolicies:
    """Fallbacks applied when a table has no matching row."""
    separation_hours: float = 1
    travel_fallback_class: str = "B"
    load_factor: float = 100
    corridor_rating_hours: float = 1
    far: float = 0.7
    max_stories: int = 2


@dataclass(frozen=True)
class LoadFactorLookup:
    factor: float
    resolved: bool  # False when the default factor was used


class ReferenceTableResolver:
    """Read-only, indexed view over a ReferenceTables set."""

    def __init__(self, tables: ReferenceTables, defaults: Optional[DefaultPolicies] = None):
        self.tables = tables
        self.defaults = defaults or DefaultPolicies()

        self._districts: dict[str, ZoningDistrict] = {
            d.code.strip().upper(): d for d in tables.zoning_districts
        }

        self._limits: dict[tuple[str, str], HeightAreaLimit] = {}
        for row in tables.height_area_limits:
            key = (row.construction_type, row.occupancy_group.strip().upper())
            if key in self._limits:
                raise ValueError(
                    f"Duplicate height/area limit for {key[0]} / {key[1]}"
                )
            self._limits[key] = row

        self._separations: dict[str, float] = {}
        for row in tables.occupancy_separations:
            key = _separation_key(row.from_occupancy, row.to_occupancy)
            self._separations[key] = row.required_rating_hours

        self._travel: dict[tuple[str, bool], TravelDistanceLimit] = {
            (row.occupancy_class.strip().upper(), row.sprinklered): row
            for row in tables.travel_distance_limits
        }

        self._space_types: dict[str, SpaceType] = {
            st.code.strip().upper(): st for st in tables.space_types
        }

        self._fire_ratings: dict[str, StructuralFireRating] = {
            fr.construction_type: fr for fr in tables.fire_ratings
        }

    # ── Zoning ──

    def district_for(self, code: str) -> ZoningDistrict:
        key = (code or "").strip().upper()
        district = self._districts.get(key)
        if district is None:
            raise MissingReferenceData("district", key)
        return district

    def districts(self) -> list[ZoningDistrict]:
        return sorted(self._districts.values(), key=lambda d: d.code)

    # ── Building code ──

    def limits_for(self, construction_type: str, occupancy_group: str) -> HeightAreaLimit:
        """Height/area/story limits for a construction type and occupancy.

        Raises MissingReferenceData when either code is blank or the pair
        has no record. Callers must not substitute zero limits.
        """
        ctype = normalize_construction_type(construction_type)
        occ = (occupancy_group or "").strip().upper()
        if not ctype:
            raise MissingReferenceData("construction_type", "")
        if not occ:
            raise MissingReferenceData("occupancy_group", "")
        limits = self._limits.get((ctype, occ))
        if limits is None:
            raise MissingReferenceData("height_area_limit", f"{ctype}/{occ}")
        return limits

    def separation_hours_for(self, a: str, b: str) -> float:
        """Required separation in hours between two occupancies.

        The table is populated in one direction only, so both orderings are
        tried before falling back to the default.
        """
        hours = self._separations.get(_separation_key(a, b))
        if hours is None:
            hours = self._separations.get(_separation_key(b, a))
        if hours is None:
            logger.debug("No separation row for %s/%s, using %s h", a, b,
                         self.defaults.separation_hours)
            return self.defaults.separation_hours
        return hours

    def travel_limits_for(self, occupancy_class: str, sprinklered: bool) -> TravelDistanceLimit:
        letter = (occupancy_class or "").strip().upper()[:1]
        limits = self._travel.get((letter, bool(sprinklered)))
        if limits is not None:
            return limits

        fallback = self.defaults.travel_fallback_class
        logger.debug("No travel limits for %r, falling back to %s", letter, fallback)
        limits = self._travel.get((fallback, bool(sprinklered)))
        if limits is None:
            raise MissingReferenceData("travel_distance_limit", f"{fallback}/{sprinklered}")
        return limits

    def load_factor_for(self, space_type_code: str) -> LoadFactorLookup:
        """Occupant load factor (sf per occupant) for a space type.

        Unknown codes and non-positive factors (e.g. fixed-seating rows that
        count seats instead of area) resolve to the default factor, flagged
        as unresolved.
        """
        space_type = self._space_types.get((space_type_code or "").strip().upper())
        if space_type is None or space_type.occupant_load_factor <= 0:
            return LoadFactorLookup(factor=self.defaults.load_factor, resolved=False)
        return LoadFactorLookup(factor=space_type.occupant_load_factor, resolved=True)

    def space_types(self) -> list[SpaceType]:
        return sorted(self._space_types.values(), key=lambda st: st.code)

    def fire_ratings_for(self, construction_type: str) -> Optional[StructuralFireRating]:
        return self._fire_ratings.get(normalize_construction_type(construction_type))


def _separation_key(a: str, b: str) -> str:
    return f"{(a or '').strip().upper()}-to-{(b or '').strip().upper()}"
