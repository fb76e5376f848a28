from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.code_engine.calculator import ComplianceCalculator
from app.config import settings
from app.models.results import (
    ComplianceReport, FireSafetyResult, HeightAreaResult, OccupancyResult,
    ZoningEnvelopeResult,
)
from app.models.schemas import ProjectSnapshot, SpaceType, ZoningDistrict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
calculator = ComplianceCalculator()


@router.post("/compliance", response_model=ComplianceReport)
async def full_compliance(snapshot: ProjectSnapshot):
    """Run every calculator against a project and return the merged report."""
    try:
        return calculator.calculate(snapshot, parallel=settings.parallel_calculation)
    except ValueError as e:
        logger.warning("Compliance calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compliance/zoning", response_model=ZoningEnvelopeResult)
async def zoning_envelope(snapshot: ProjectSnapshot):
    return calculator.zoning(snapshot)


@router.post("/compliance/height-area", response_model=HeightAreaResult)
async def height_area(snapshot: ProjectSnapshot):
    return calculator.height_area(snapshot)


@router.post("/compliance/fire-safety", response_model=FireSafetyResult)
async def fire_safety(snapshot: ProjectSnapshot):
    return calculator.fire_safety(snapshot)


@router.post("/compliance/occupancy", response_model=OccupancyResult)
async def occupancy(snapshot: ProjectSnapshot):
    return calculator.occupancy(snapshot)


@router.get("/reference/districts", response_model=list[ZoningDistrict])
async def list_districts():
    return calculator.resolver.districts()


@router.get("/reference/space-types", response_model=list[SpaceType])
async def list_space_types():
    return calculator.resolver.space_types()
