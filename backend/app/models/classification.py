"""
Building classification enumerations.

Closed sets used throughout the engine:
  - Construction types (IBC Chapter 6): I-A through V-B
  - Occupancy groups (IBC Chapter 3): A-1 through U
  - Occupancy classes: the leading letter of an occupancy group
  - District classes: zoning district families that carry special rules
  - Sprinkler system types and mixed-occupancy separation methods
  - Compliance severities

Every dispatch table keyed by one of these enums must cover all members;
backend/tests/test_classification.py enforces that.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional


class ConstructionType(str, Enum):
    I_A = "I-A"
    I_B = "I-B"
    II_A = "II-A"
    II_B = "II-B"
    III_A = "III-A"
    III_B = "III-B"
    IV_A = "IV-A"
    IV_B = "IV-B"
    V_A = "V-A"
    V_B = "V-B"


class OccupancyGroup(str, Enum):
    A_1 = "A-1"
    A_2 = "A-2"
    A_3 = "A-3"
    A_4 = "A-4"
    A_5 = "A-5"
    B = "B"
    E = "E"
    F_1 = "F-1"
    F_2 = "F-2"
    H_1 = "H-1"
    H_2 = "H-2"
    H_3 = "H-3"
    H_4 = "H-4"
    H_5 = "H-5"
    I_1 = "I-1"
    I_2 = "I-2"
    I_3 = "I-3"
    I_4 = "I-4"
    M = "M"
    R_1 = "R-1"
    R_2 = "R-2"
    R_3 = "R-3"
    R_4 = "R-4"
    S_1 = "S-1"
    S_2 = "S-2"
    U = "U"


class OccupancyClass(str, Enum):
    """Occupancy group letter. Sub-codes of the same letter share egress limits."""
    ASSEMBLY = "A"
    BUSINESS = "B"
    EDUCATIONAL = "E"
    FACTORY = "F"
    HIGH_HAZARD = "H"
    INSTITUTIONAL = "I"
    MERCANTILE = "M"
    RESIDENTIAL = "R"
    STORAGE = "S"
    UTILITY = "U"


class DistrictClass(str, Enum):
    """Zoning district families with their own floor-area rules."""
    R5 = "r5"                # unit-based floor area cap
    APARTMENT = "apartment"  # A-*
    BUSINESS = "business"    # B-*, BMX-*
    STANDARD = "standard"


class SprinklerType(str, Enum):
    NFPA_13 = "NFPA-13"
    NFPA_13R = "NFPA-13R"
    NFPA_13D = "NFPA-13D"


class SeparationMethod(str, Enum):
    SEPARATED = "separated"
    NON_SEPARATED = "non-separated"


class Severity(str, Enum):
    COMPLIANT = "compliant"
    WARNING = "warning"
    VIOLATION = "violation"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def worst(cls, severities) -> "Severity":
        """Most severe of the given severities; compliant when empty."""
        result = cls.COMPLIANT
        for s in severities:
            if s is not None and s.rank > result.rank:
                result = s
        return result


_SEVERITY_RANK = {
    Severity.COMPLIANT: 0,
    Severity.WARNING: 1,
    Severity.VIOLATION: 2,
}


# ──────────────────────────────────────────────────────────────────
# NORMALIZATION
# ──────────────────────────────────────────────────────────────────

_CONSTRUCTION_DB_FORMAT = re.compile(r"^(I{1,3}|IV|V)-?([AB])$")


def normalize_construction_type(value: Optional[str]) -> str:
    """Convert stored construction type codes to lookup format.

    "IIIA" -> "III-A", "V-B" -> "V-B". A bare "IV" (heavy timber) is looked
    up as "IV-A". Unrecognized values are returned stripped, unchanged.
    """
    if not value:
        return ""
    code = value.strip().upper()
    if code == "IV":
        return ConstructionType.IV_A.value
    match = _CONSTRUCTION_DB_FORMAT.match(code)
    if match:
        return f"{match.group(1)}-{match.group(2)}"
    return code


def occupancy_letter(occupancy_group: Optional[str]) -> str:
    """Leading letter of an occupancy code ("A-2" -> "A", "B" -> "B")."""
    if not occupancy_group:
        return ""
    return occupancy_group.strip().upper().split("-")[0][:1]


def occupancy_class_of(occupancy_group: Optional[str]) -> Optional[OccupancyClass]:
    """Occupancy class for a group code, or None when the letter is unknown."""
    letter = occupancy_letter(occupancy_group)
    try:
        return OccupancyClass(letter)
    except ValueError:
        return None


def district_class_of(district_code: Optional[str]) -> DistrictClass:
    """Classify a zoning district code into the family that sets its FAR rule."""
    code = (district_code or "").strip().upper()
    if code == "R-5":
        return DistrictClass.R5
    if code.startswith("A-"):
        return DistrictClass.APARTMENT
    if code.startswith("B-") or code.startswith("BMX-"):
        return DistrictClass.BUSINESS
    return DistrictClass.STANDARD
