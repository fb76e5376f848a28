"""
Seed reference tables.

Default regulatory data used when no other table provider is configured:
  - Zoning districts (Land Use Ordinance style codes: R-5, A-2, BMX-3 ...)
  - Allowable height / stories / area (IBC Tables 504.3, 504.4, 506.2)
  - Occupancy separations (IBC Table 508.4), keyed "FROM-to-TO"
  - Exit access travel, common path and dead-end limits (IBC 1017.2,
    1006.2.1, 1020.4), keyed by occupancy letter and sprinkler presence
  - Occupant load factors (IBC Table 1004.5)
  - Building element fire-resistance ratings (IBC Table 601)

The height/area tables give one value per construction type and occupancy
group; every selectable pair is present.
"""

from __future__ import annotations

from app.models.schemas import (
    HeightAreaLimit, OccupancySeparation, ReferenceTables, SpaceType,
    StructuralFireRating, TravelDistanceLimit, ZoningDistrict,
)

# ──────────────────────────────────────────────────────────────────
# ZONING DISTRICTS
# code: (name, min_lot_area, max_height_ft, max_stories,
#        front, side, rear, max_lot_coverage, max_far)
# ──────────────────────────────────────────────────────────────────

ZONING_DISTRICTS = {
    "R-3.5": ("Residential 3,500",   3500,  25, None, 10, 5, 5,   0.50, None),
    "R-5":   ("Residential 5,000",   5000,  25, None, 10, 5, 5,   0.50, None),
    "R-7.5": ("Residential 7,500",   7500,  25, 2,    10, 5, 5,   0.50, None),
    "R-10":  ("Residential 10,000",  10000, 25, 2,    10, 5, 5,   0.50, None),
    "R-20":  ("Residential 20,000",  20000, 25, 2,    10, 5, 5,   0.50, None),
    "A-1":   ("Low-density apartment",    5000,  30,  3,    10, 5,  5,  0.50, 0.9),
    "A-2":   ("Medium-density apartment", 5000,  60,  None, 10, 5,  5,  0.50, 1.9),
    "A-3":   ("High-density apartment",   10000, 150, None, 15, 10, 10, 0.50, 4.0),
    "B-1":   ("Neighborhood business",    5000,  40,  3,    5,  0,  0,  0.80, 1.0),
    "B-2":   ("Community business",       5000,  60,  None, 5,  0,  0,  0.80, 2.5),
    "BMX-3": ("Community business mixed use", 5000, 150, None, 5, 0, 0, 0.80, 2.5),
    "BMX-4": ("Central business mixed use",   5000, 350, None, 5, 0, 0, 1.00, 4.0),
    "AG-2":  ("General agricultural",     87120, 25,  2,    15, 10, 10, 0.10, None),
}

# ──────────────────────────────────────────────────────────────────
# ALLOWABLE HEIGHT (ft), STORIES, AREA (sf): IBC 504.3 / 504.4 / 506.2
# ──────────────────────────────────────────────────────────────────

BASE_HEIGHT_LIMITS = {
    "I-A": { "A-1": 160, "A-2": 160, "A-3": 160, "A-4": 160, "A-5": 160,
             "B": 160, "E": 160, "F-1": 160, "F-2": 160,
             "H-1": 160, "H-2": 160, "H-3": 160, "H-4": 160, "H-5": 160,
             "I-1": 160, "I-2": 160, "I-3": 160, "I-4": 160,
             "M": 160,
             "R-1": 160, "R-2": 160, "R-3": 160, "R-4": 160,
             "S-1": 160, "S-2": 160, "U": 160 },
    "I-B": { "A-1": 65, "A-2": 65, "A-3": 65, "A-4": 65, "A-5": 65,
             "B": 65, "E": 65, "F-1": 65, "F-2": 65,
             "H-1": 65, "H-2": 65, "H-3": 65, "H-4": 65, "H-5": 65,
             "I-1": 65, "I-2": 65, "I-3": 65, "I-4": 65,
             "M": 65,
             "R-1": 65, "R-2": 65, "R-3": 65, "R-4": 65,
             "S-1": 65, "S-2": 65, "U": 65 },
    "II-A": { "A-1": 65, "A-2": 65, "A-3": 65, "A-4": 65, "A-5": 65,
             "B": 65, "E": 65, "F-1": 65, "F-2": 65,
             "H-1": 65, "H-2": 65, "H-3": 65, "H-4": 65, "H-5": 65,
             "I-1": 65, "I-2": 65, "I-3": 65, "I-4": 65,
             "M": 65,
             "R-1": 65, "R-2": 65, "R-3": 65, "R-4": 65,
             "S-1": 65, "S-2": 65, "U": 65 },
    "II-B": { "A-1": 55, "A-2": 55, "A-3": 55, "A-4": 55, "A-5": 55,
             "B": 55, "E": 55, "F-1": 55, "F-2": 55,
             "H-1": 55, "H-2": 55, "H-3": 55, "H-4": 55, "H-5": 55,
             "I-1": 55, "I-2": 55, "I-3": 55, "I-4": 55,
             "M": 55,
             "R-1": 55, "R-2": 55, "R-3": 55, "R-4": 55,
             "S-1": 55, "S-2": 55, "U": 55 },
    "III-A": { "A-1": 65, "A-2": 65, "A-3": 65, "A-4": 65, "A-5": 65,
             "B": 65, "E": 65, "F-1": 65, "F-2": 65,
             "H-1": 55, "H-2": 55, "H-3": 55, "H-4": 55, "H-5": 55,
             "I-1": 65, "I-2": 65, "I-3": 65, "I-4": 65,
             "M": 65,
             "R-1": 65, "R-2": 65, "R-3": 65, "R-4": 65,
             "S-1": 65, "S-2": 65, "U": 55 },
    "III-B": { "A-1": 55, "A-2": 55, "A-3": 55, "A-4": 55, "A-5": 55,
             "B": 55, "E": 55, "F-1": 55, "F-2": 55,
             "H-1": 55, "H-2": 55, "H-3": 55, "H-4": 55, "H-5": 55,
             "I-1": 55, "I-2": 55, "I-3": 55, "I-4": 55,
             "M": 55,
             "R-1": 55, "R-2": 55, "R-3": 55, "R-4": 55,
             "S-1": 55, "S-2": 55, "U": 55 },
    "IV-A": { "A-1": 65, "A-2": 65, "A-3": 65, "A-4": 65, "A-5": 65,
             "B": 65, "E": 65, "F-1": 65, "F-2": 65,
             "H-1": 65, "H-2": 65, "H-3": 65, "H-4": 65, "H-5": 65,
             "I-1": 65, "I-2": 65, "I-3": 65, "I-4": 65,
             "M": 65,
             "R-1": 65, "R-2": 65, "R-3": 65, "R-4": 65,
             "S-1": 65, "S-2": 65, "U": 65 },
    "IV-B": { "A-1": 55, "A-2": 55, "A-3": 55, "A-4": 55, "A-5": 55,
             "B": 55, "E": 55, "F-1": 55, "F-2": 55,
             "H-1": 55, "H-2": 55, "H-3": 55, "H-4": 55, "H-5": 55,
             "I-1": 55, "I-2": 55, "I-3": 55, "I-4": 55,
             "M": 55,
             "R-1": 55, "R-2": 55, "R-3": 55, "R-4": 55,
             "S-1": 55, "S-2": 55, "U": 55 },
    "V-A": { "A-1": 50, "A-2": 50, "A-3": 50, "A-4": 50, "A-5": 50,
             "B": 50, "E": 50, "F-1": 50, "F-2": 50,
             "H-1": 40, "H-2": 40, "H-3": 40, "H-4": 40, "H-5": 40,
             "I-1": 50, "I-2": 50, "I-3": 50, "I-4": 50,
             "M": 50,
             "R-1": 50, "R-2": 50, "R-3": 50, "R-4": 50,
             "S-1": 50, "S-2": 50, "U": 40 },
    "V-B": { "A-1": 40, "A-2": 40, "A-3": 40, "A-4": 40, "A-5": 40,
             "B": 40, "E": 40, "F-1": 40, "F-2": 40,
             "H-1": 40, "H-2": 40, "H-3": 40, "H-4": 40, "H-5": 40,
             "I-1": 40, "I-2": 40, "I-3": 40, "I-4": 40,
             "M": 40,
             "R-1": 40, "R-2": 40, "R-3": 40, "R-4": 40,
             "S-1": 40, "S-2": 40, "U": 40 }
}

BASE_STORY_LIMITS = {
    "I-A": { "A-1": 12, "A-2": 12, "A-3": 12, "A-4": 12, "A-5": 12,
             "B": 12, "E": 12, "F-1": 12, "F-2": 12,
             "H-1": 1, "H-2": 1, "H-3": 2, "H-4": 7, "H-5": 4,
             "I-1": 12, "I-2": 12, "I-3": 12, "I-4": 12,
             "M": 12,
             "R-1": 12, "R-2": 12, "R-3": 12, "R-4": 12,
             "S-1": 12, "S-2": 12, "U": 5 },
    "I-B": { "A-1": 5, "A-2": 5, "A-3": 5, "A-4": 5, "A-5": 5,
             "B": 11, "E": 5, "F-1": 5, "F-2": 6,
             "H-1": 1, "H-2": 1, "H-3": 2, "H-4": 5, "H-5": 3,
             "I-1": 4, "I-2": 4, "I-3": 4, "I-4": 5,
             "M": 5,
             "R-1": 11, "R-2": 11, "R-3": 11, "R-4": 11,
             "S-1": 4, "S-2": 5, "U": 4 },
    "II-A": { "A-1": 3, "A-2": 3, "A-3": 3, "A-4": 3, "A-5": 3,
             "B": 5, "E": 3, "F-1": 3, "F-2": 4,
             "H-1": 1, "H-2": 1, "H-3": 2, "H-4": 5, "H-5": 3,
             "I-1": 3, "I-2": 3, "I-3": 3, "I-4": 3,
             "M": 4,
             "R-1": 4, "R-2": 4, "R-3": 4, "R-4": 4,
             "S-1": 3, "S-2": 4, "U": 4 },
    "II-B": { "A-1": 2, "A-2": 2, "A-3": 2, "A-4": 2, "A-5": 2,
             "B": 3, "E": 2, "F-1": 2, "F-2": 3,
             "H-1": 1, "H-2": 1, "H-3": 1, "H-4": 2, "H-5": 1,
             "I-1": 2, "I-2": 1, "I-3": 1, "I-4": 2,
             "M": 2,
             "R-1": 4, "R-2": 4, "R-3": 4, "R-4": 4,
             "S-1": 2, "S-2": 3, "U": 2 },
    "III-A": { "A-1": 3, "A-2": 3, "A-3": 3, "A-4": 3, "A-5": 2,
             "B": 5, "E": 3, "F-1": 3, "F-2": 4,
             "H-1": 1, "H-2": 1, "H-3": 2, "H-4": 4, "H-5": 2,
             "I-1": 3, "I-2": 2, "I-3": 2, "I-4": 3,
             "M": 4,
             "R-1": 4, "R-2": 4, "R-3": 4, "R-4": 4,
             "S-1": 3, "S-2": 4, "U": 3 },
    "III-B": { "A-1": 2, "A-2": 2, "A-3": 2, "A-4": 2, "A-5": 2,
             "B": 3, "E": 2, "F-1": 2, "F-2": 3,
             "H-1": 1, "H-2": 1, "H-3": 1, "H-4": 2, "H-5": 1,
             "I-1": 2, "I-2": 1, "I-3": 1, "I-4": 2,
             "M": 2,
             "R-1": 4, "R-2": 4, "R-3": 4, "R-4": 4,
             "S-1": 2, "S-2": 3, "U": 2 },
    "IV-A": { "A-1": 3, "A-2": 3, "A-3": 3, "A-4": 3, "A-5": 2,
             "B": 5, "E": 3, "F-1": 4, "F-2": 5,
             "H-1": 1, "H-2": 1, "H-3": 3, "H-4": 5, "H-5": 2,
             "I-1": 3, "I-2": 2, "I-3": 2, "I-4": 3,
             "M": 4,
             "R-1": 4, "R-2": 4, "R-3": 4, "R-4": 4,
             "S-1": 4, "S-2": 5, "U": 4 },
    "IV-B": { "A-1": 2, "A-2": 2, "A-3": 2, "A-4": 2, "A-5": 2,
             "B": 3, "E": 2, "F-1": 2, "F-2": 3,
             "H-1": 1, "H-2": 1, "H-3": 2, "H-4": 2, "H-5": 1,
             "I-1": 2, "I-2": 1, "I-3": 1, "I-4": 2,
             "M": 3,
             "R-1": 3, "R-2": 3, "R-3": 3, "R-4": 3,
             "S-1": 2, "S-2": 3, "U": 2 },
    "V-A": { "A-1": 2, "A-2": 2, "A-3": 2, "A-4": 2, "A-5": 2,
             "B": 3, "E": 1, "F-1": 2, "F-2": 3,
             "H-1": 1, "H-2": 1, "H-3": 1, "H-4": 2, "H-5": 1,
             "I-1": 2, "I-2": 1, "I-3": 1, "I-4": 1,
             "M": 1,
             "R-1": 3, "R-2": 3, "R-3": 3, "R-4": 3,
             "S-1": 2, "S-2": 3, "U": 2 },
    "V-B": { "A-1": 1, "A-2": 1, "A-3": 1, "A-4": 1, "A-5": 1,
             "B": 2, "E": 1, "F-1": 1, "F-2": 2,
             "H-1": 1, "H-2": 1, "H-3": 1, "H-4": 1, "H-5": 1,
             "I-1": 1, "I-2": 1, "I-3": 1, "I-4": 1,
             "M": 1,
             "R-1": 2, "R-2": 2, "R-3": 3, "R-4": 2,
             "S-1": 1, "S-2": 2, "U": 1 }
}

BASE_AREA_LIMITS = {
    "I-A": { "A-1": 45000, "A-2": 45000, "A-3": 45000, "A-4": 45000, "A-5": 45000,
             "B": 45000, "E": 45000, "F-1": 45000, "F-2": 45000,
             "H-1": 21000, "H-2": 21000, "H-3": 21000, "H-4": 45000, "H-5": 45000,
             "I-1": 45000, "I-2": 45000, "I-3": 45000, "I-4": 45000,
             "M": 45000,
             "R-1": 45000, "R-2": 45000, "R-3": 45000, "R-4": 45000,
             "S-1": 45000, "S-2": 45000, "U": 45000 },
    "V-B": { "A-1": 6000, "A-2": 6000, "A-3": 6000, "A-4": 6000, "A-5": 6000,
             "B": 9000, "E": 6000, "F-1": 6000, "F-2": 9000,
             "H-1": 3000, "H-2": 3000, "H-3": 5000, "H-4": 9000, "H-5": 4500,
             "I-1": 6000, "I-2": 5000, "I-3": 5000, "I-4": 6000,
             "M": 6000,
             "R-1": 7000, "R-2": 7000, "R-3": 9000, "R-4": 7000,
             "S-1": 6000, "S-2": 9000, "U": 6000 },
    "I-B": { "A-1": 30000, "A-2": 30000, "A-3": 30000, "A-4": 30000, "A-5": 30000,
             "B": 37500, "E": 26500, "F-1": 18000, "F-2": 27000,
             "H-1": 16500, "H-2": 16500, "H-3": 16500, "H-4": 30000, "H-5": 30000,
             "I-1": 16500, "I-2": 12000, "I-3": 12000, "I-4": 16500,
             "M": 18000,
             "R-1": 24000, "R-2": 24000, "R-3": 24000, "R-4": 24000,
             "S-1": 18000, "S-2": 26500, "U": 22500 },
    "II-A": { "A-1": 15000, "A-2": 15000, "A-3": 15000, "A-4": 15000, "A-5": 15000,
             "B": 28500, "E": 14500, "F-1": 13500, "F-2": 18000,
             "H-1": 11000, "H-2": 11000, "H-3": 11000, "H-4": 18000, "H-5": 18000,
             "I-1": 10500, "I-2": 9500, "I-3": 9500, "I-4": 10500,
             "M": 12500,
             "R-1": 16500, "R-2": 16500, "R-3": 16500, "R-4": 16500,
             "S-1": 13500, "S-2": 18000, "U": 14000 },
    "II-B": { "A-1": 9500, "A-2": 9500, "A-3": 9500, "A-4": 9500, "A-5": 9500,
             "B": 19000, "E": 9500, "F-1": 8500, "F-2": 14000,
             "H-1": 7000, "H-2": 7000, "H-3": 7000, "H-4": 10500, "H-5": 10500,
             "I-1": 7500, "I-2": 6000, "I-3": 6000, "I-4": 7500,
             "M": 9500,
             "R-1": 10500, "R-2": 10500, "R-3": 10500, "R-4": 10500,
             "S-1": 8500, "S-2": 13500, "U": 9000 },
    "III-A": { "A-1": 14000, "A-2": 14000, "A-3": 14000, "A-4": 14000, "A-5": 14000,
             "B": 28500, "E": 14500, "F-1": 12000, "F-2": 18000,
             "H-1": 9500, "H-2": 9500, "H-3": 9500, "H-4": 17000, "H-5": 17000,
             "I-1": 10500, "I-2": 9000, "I-3": 9000, "I-4": 10500,
             "M": 13000,
             "R-1": 12000, "R-2": 12000, "R-3": 12000, "R-4": 12000,
             "S-1": 11000, "S-2": 17000, "U": 14000 },
    "III-B": { "A-1": 9500, "A-2": 9500, "A-3": 9500, "A-4": 9500, "A-5": 9500,
             "B": 19000, "E": 9500, "F-1": 8000, "F-2": 14000,
             "H-1": 6500, "H-2": 6500, "H-3": 6500, "H-4": 10000, "H-5": 10000,
             "I-1": 7500, "I-2": 6000, "I-3": 6000, "I-4": 7500,
             "M": 9000,
             "R-1": 10500, "R-2": 10500, "R-3": 10500, "R-4": 10500,
             "S-1": 8000, "S-2": 13000, "U": 8500 },
    "IV-A": { "A-1": 18000, "A-2": 18000, "A-3": 18000, "A-4": 18000, "A-5": 18000,
             "B": 36000, "E": 18000, "F-1": 15000, "F-2": 22500,
             "H-1": 10500, "H-2": 10500, "H-3": 10500, "H-4": 18000, "H-5": 18000,
             "I-1": 13500, "I-2": 11500, "I-3": 11500, "I-4": 13500,
             "M": 15000,
             "R-1": 15000, "R-2": 15000, "R-3": 15000, "R-4": 15000,
             "S-1": 14000, "S-2": 21000, "U": 18000 },
    "IV-B": { "A-1": 10500, "A-2": 10500, "A-3": 10500, "A-4": 10500, "A-5": 10500,
             "B": 19500, "E": 10500, "F-1": 9000, "F-2": 15000,
             "H-1": 7500, "H-2": 7500, "H-3": 7500, "H-4": 10500, "H-5": 10500,
             "I-1": 7500, "I-2": 6000, "I-3": 6000, "I-4": 7500,
             "M": 10000,
             "R-1": 12000, "R-2": 12000, "R-3": 12000, "R-4": 12000,
             "S-1": 9000, "S-2": 15000, "U": 9000 },
    "V-A": { "A-1": 8500, "A-2": 8500, "A-3": 8500, "A-4": 8500, "A-5": 8500,
             "B": 18000, "E": 8500, "F-1": 7500, "F-2": 11500,
             "H-1": 5500, "H-2": 5500, "H-3": 5500, "H-4": 9000, "H-5": 9000,
             "I-1": 6000, "I-2": 5000, "I-3": 5000, "I-4": 6000,
             "M": 8000,
             "R-1": 10500, "R-2": 10500, "R-3": 10500, "R-4": 10500,
             "S-1": 7000, "S-2": 11000, "U": 7500 }
}

# ──────────────────────────────────────────────────────────────────
# OCCUPANCY SEPARATIONS (hours): IBC Table 508.4, sprinklered
# One direction only; the resolver tries both orderings.
# ──────────────────────────────────────────────────────────────────

OCCUPANCY_SEPARATION_HOURS = {
    "A-1-to-A-2": 1, "A-1-to-A-3": 1, "A-1-to-A-4": 1, "A-1-to-A-5": 1,
    "A-1-to-B": 1, "A-1-to-E": 2, "A-1-to-F-1": 2, "A-1-to-F-2": 1,
    "A-1-to-H-1": 3, "A-1-to-H-2": 3, "A-1-to-H-3": 3, "A-1-to-H-4": 2,
    "A-1-to-H-5": 2, "A-1-to-I-1": 2, "A-1-to-I-2": 2, "A-1-to-I-3": 2,
    "A-1-to-I-4": 2, "A-1-to-M": 1, "A-1-to-R-1": 1, "A-1-to-R-2": 1,
    "A-1-to-R-3": 1, "A-1-to-R-4": 1, "A-1-to-S-1": 1, "A-1-to-S-2": 1,
    "A-1-to-U": 1,

    "B-to-B": 0, "B-to-E": 1, "B-to-F-1": 1, "B-to-F-2": 1,
    "B-to-H-1": 3, "B-to-H-2": 3, "B-to-H-3": 2, "B-to-H-4": 1,
    "B-to-H-5": 1, "B-to-I-1": 1, "B-to-I-2": 2, "B-to-I-3": 1,
    "B-to-I-4": 1, "B-to-M": 1, "B-to-R-1": 1, "B-to-R-2": 1,
    "B-to-R-3": 1, "B-to-R-4": 1, "B-to-S-1": 1, "B-to-S-2": 0,
    "B-to-U": 0,

    "R-1-to-R-2": 0, "R-1-to-R-3": 1, "R-1-to-S-1": 1, "R-1-to-S-2": 1,
    "R-1-to-U": 1, "R-2-to-R-3": 1, "R-2-to-S-1": 1, "R-2-to-S-2": 1,
    "R-2-to-U": 1, "R-3-to-S-1": 1, "R-3-to-S-2": 1, "R-3-to-U": 1,
}

# ──────────────────────────────────────────────────────────────────
# EGRESS DISTANCES (ft)
# letter: {sprinklered: (max travel, common path, dead end)}
# ──────────────────────────────────────────────────────────────────

TRAVEL_DISTANCE_LIMITS = {
    "A": {False: (200, 75, 20),  True: (250, 75, 20)},
    "B": {False: (200, 100, 20), True: (300, 100, 50)},
    "E": {False: (200, 75, 20),  True: (250, 75, 50)},
    "F": {False: (200, 75, 20),  True: (250, 100, 50)},
    "H": {False: (75, 25, 20),   True: (75, 25, 20)},
    "I": {False: (150, 75, 20),  True: (200, 100, 20)},
    "M": {False: (200, 75, 20),  True: (250, 75, 50)},
    "R": {False: (200, 75, 20),  True: (250, 125, 50)},
    "S": {False: (200, 75, 20),  True: (250, 100, 50)},
    "U": {False: (300, 75, 20),  True: (400, 75, 50)},
}

# ──────────────────────────────────────────────────────────────────
# OCCUPANT LOAD FACTORS (sf per occupant): IBC Table 1004.5
# code: (name, occupancy group, factor)
# A factor of 0 means "count the actual fixed seats".
# ──────────────────────────────────────────────────────────────────

SPACE_TYPES = {
    "ASSEMBLY-FIXED":      ("Fixed seating areas", "A-1", 0),
    "ASSEMBLY-CONC":       ("Assembly, concentrated (chairs only)", "A-2", 7),
    "ASSEMBLY-STANDING":   ("Standing space", "A-2", 5),
    "ASSEMBLY-UNCONC":     ("Assembly, unconcentrated (tables and chairs)", "A-2", 15),
    "EXERCISE":            ("Exercise rooms", "A-3", 50),
    "LIBRARY-READING":     ("Library reading rooms", "A-3", 50),
    "LIBRARY-STACK":       ("Library stack areas", "A-3", 100),
    "BUSINESS":            ("Business areas", "B", 150),
    "KITCHEN-COMMERCIAL":  ("Kitchens, commercial", "B", 200),
    "CLASSROOM":           ("Educational classroom area", "E", 20),
    "SHOP-VOCATIONAL":     ("Shops and vocational rooms", "E", 50),
    "DAYCARE":             ("Day care", "E", 35),
    "INDUSTRIAL":          ("Industrial areas", "F-1", 100),
    "INPATIENT":           ("Inpatient treatment areas", "I-2", 240),
    "OUTPATIENT":          ("Outpatient areas", "B", 100),
    "SLEEPING":            ("Institutional sleeping areas", "I-2", 120),
    "MERCANTILE":          ("Mercantile sales areas", "M", 60),
    "MERCANTILE-STORAGE":  ("Mercantile storage, stock, shipping", "M", 300),
    "RESIDENTIAL":         ("Residential", "R-2", 200),
    "STORAGE":             ("Storage areas", "S-1", 300),
    "PARKING":             ("Parking garages", "S-2", 200),
}

# ──────────────────────────────────────────────────────────────────
# BUILDING ELEMENT RATINGS (hours): IBC Table 601
# (frame, ext. bearing, int. bearing, int. nonbearing, floor, roof)
# ──────────────────────────────────────────────────────────────────

FIRE_RESISTANCE_RATINGS = {
    "I-A":   (3, 3, 3, 0, 2, 1.5),
    "I-B":   (2, 2, 2, 0, 2, 1),
    "II-A":  (1, 1, 1, 0, 1, 1),
    "II-B":  (0, 0, 0, 0, 0, 0),
    "III-A": (1, 2, 1, 0, 1, 1),
    "III-B": (0, 2, 0, 0, 0, 0),
    "IV-A":  (3, 3, 3, 0, 2, 1.5),
    "IV-B":  (2, 2, 2, 0, 2, 1),
    "V-A":   (1, 1, 1, 0, 1, 1),
    "V-B":   (0, 0, 0, 0, 0, 0),
}


# ──────────────────────────────────────────────────────────────────
# TABLE BUILDERS
# ──────────────────────────────────────────────────────────────────

def parse_separation_key(key: str) -> tuple[str, str]:
    """Split a "FROM-to-TO" key ("A-1-to-B") into its two occupancies."""
    from_occ, sep, to_occ = key.partition("-to-")
    if not sep or not from_occ or not to_occ:
        raise ValueError(f"Malformed occupancy separation key: {key!r}")
    return from_occ, to_occ


def separations_from_keys(table: dict[str, float]) -> list[OccupancySeparation]:
    rows = []
    for key, hours in table.items():
        from_occ, to_occ = parse_separation_key(key)
        rows.append(OccupancySeparation(
            from_occupancy=from_occ,
            to_occupancy=to_occ,
            required_rating_hours=hours,
        ))
    return rows


def build_height_area_limits() -> list[HeightAreaLimit]:
    rows = []
    for ctype, heights in BASE_HEIGHT_LIMITS.items():
        for occ, height in heights.items():
            rows.append(HeightAreaLimit(
                construction_type=ctype,
                occupancy_group=occ,
                max_height_ft=height,
                max_stories=BASE_STORY_LIMITS[ctype][occ],
                base_allowable_area=BASE_AREA_LIMITS[ctype][occ],
                sprinkler_increase_allowed=True,
            ))
    return rows


def build_zoning_districts() -> list[ZoningDistrict]:
    rows = []
    for code, (name, min_lot, height, stories, front, side, rear, coverage, far) in ZONING_DISTRICTS.items():
        rows.append(ZoningDistrict(
            code=code,
            name=name,
            min_lot_area=min_lot,
            max_building_height=height,
            max_stories=stories,
            front_setback=front,
            side_setback=side,
            rear_setback=rear,
            max_lot_coverage=coverage,
            max_far=far,
        ))
    return rows


def build_travel_distance_limits() -> list[TravelDistanceLimit]:
    rows = []
    for letter, by_sprinkler in TRAVEL_DISTANCE_LIMITS.items():
        for sprinklered, (travel, common, dead_end) in by_sprinkler.items():
            rows.append(TravelDistanceLimit(
                occupancy_class=letter,
                sprinklered=sprinklered,
                max_travel_distance_ft=travel,
                max_common_path_ft=common,
                max_dead_end_ft=dead_end,
            ))
    return rows


def build_space_types() -> list[SpaceType]:
    return [
        SpaceType(code=code, name=name, occupancy_group=occ, occupant_load_factor=factor)
        for code, (name, occ, factor) in SPACE_TYPES.items()
    ]


def build_fire_ratings() -> list[StructuralFireRating]:
    rows = []
    for ctype, (frame, ext_bearing, int_bearing, nonbearing, floor, roof) in FIRE_RESISTANCE_RATINGS.items():
        rows.append(StructuralFireRating(
            construction_type=ctype,
            structural_frame=frame,
            bearing_walls_exterior=ext_bearing,
            bearing_walls_interior=int_bearing,
            nonbearing_walls_interior=nonbearing,
            floor_construction=floor,
            roof_construction=roof,
        ))
    return rows


def load_default_tables() -> ReferenceTables:
    """Materialize every seed table into a ReferenceTables set."""
    return ReferenceTables(
        zoning_districts=build_zoning_districts(),
        height_area_limits=build_height_area_limits(),
        occupancy_separations=separations_from_keys(OCCUPANCY_SEPARATION_HOURS),
        travel_distance_limits=build_travel_distance_limits(),
        space_types=build_space_types(),
        fire_ratings=build_fire_ratings(),
    )
