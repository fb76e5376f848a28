"""
Allowable height, stories and area (IBC Chapter 5).

Base limits come from IBC Tables 504.3 (height), 504.4 (stories) and 506.2
(area) by construction type and occupancy group. A building protected
throughout by an NFPA 13 system gets the sprinkler increase:
  - height:  +20 ft     (IBC 504.2)
  - stories: +1         (IBC 504.2)
  - area:    x3         (IBC 506.3)

NFPA 13R and 13D systems do not qualify.
"""

from __future__ import annotations

import logging

from app.code_engine.reference_tables import MissingReferenceData, ReferenceTableResolver
from app.code_engine.verdicts import check_limit
from app.models.classification import Severity, SprinklerType
from app.models.results import HeightAreaResult
from app.models.schemas import HeightAreaLimit, ProjectSnapshot

logger = logging.getLogger(__name__)

SPRINKLER_HEIGHT_INCREASE_FT = 20
SPRINKLER_STORY_INCREASE = 1
SPRINKLER_AREA_FACTOR = 3


def qualifies_for_sprinkler_increase(snapshot: ProjectSnapshot) -> bool:
    return snapshot.sprinkler_system and snapshot.sprinkler_type == SprinklerType.NFPA_13.value


def calculate_height_area_compliance(snapshot: ProjectSnapshot,
                                     resolver: ReferenceTableResolver) -> HeightAreaResult:
    """Compare proposed height, stories and area against allowable limits.

    When the construction type / occupancy pair cannot be resolved, the
    result carries ``missing_reference`` and no verdicts. Zero limits are
    never substituted.
    """
    try:
        limits = resolver.limits_for(snapshot.construction_type, snapshot.occupancy_group)
    except MissingReferenceData as e:
        logger.warning("Height/area limits not computed: %s", e)
        return HeightAreaResult(
            construction_type=snapshot.construction_type,
            occupancy_group=snapshot.occupancy_group,
            missing_reference=[e.label],
        )
    return _evaluate(snapshot, limits)


def _evaluate(snapshot: ProjectSnapshot, limits: HeightAreaLimit) -> HeightAreaResult:
    notes = []
    increase = False
    if qualifies_for_sprinkler_increase(snapshot):
        if limits.sprinkler_increase_allowed:
            increase = True
            notes.append("NFPA 13 sprinkler increase applied (IBC 504.2, 506.3)")
        else:
            notes.append(
                f"No sprinkler increase permitted for {limits.construction_type} / "
                f"{limits.occupancy_group}"
            )
    elif snapshot.sprinkler_system and snapshot.sprinkler_type:
        notes.append(f"{snapshot.sprinkler_type} systems do not qualify for the sprinkler increase")

    allowable_height = limits.max_height_ft
    allowable_stories = limits.max_stories
    allowable_area = limits.base_allowable_area
    if increase:
        allowable_height += SPRINKLER_HEIGHT_INCREASE_FT
        allowable_stories += SPRINKLER_STORY_INCREASE
        allowable_area *= SPRINKLER_AREA_FACTOR

    height = check_limit(snapshot.building_height, allowable_height, limits.max_height_ft)
    stories = check_limit(snapshot.stories, allowable_stories, limits.max_stories)
    area = check_limit(snapshot.total_building_area, allowable_area, limits.base_allowable_area)

    return HeightAreaResult(
        construction_type=limits.construction_type,
        occupancy_group=limits.occupancy_group,
        sprinkler_increase_applied=increase,
        height=height,
        stories=stories,
        area=area,
        status=Severity.worst([height.severity, stories.severity, area.severity]),
        notes=notes,
    )
