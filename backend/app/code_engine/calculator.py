"""
Compliance orchestrator.

Runs the zoning, height/area, fire-safety and occupancy calculators against
the same snapshot and merges their results into one report. The calculators
never read each other's output, so they may run concurrently.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from app.code_engine.fire_safety import calculate_fire_safety
from app.code_engine.height_area import calculate_height_area_compliance
from app.code_engine.occupancy import calculate_occupancy
from app.code_engine.reference_data import load_default_tables
from app.code_engine.reference_tables import ReferenceTableResolver
from app.code_engine.verdicts import summarize
from app.code_engine.zoning_envelope import calculate_zoning_envelope
from app.models.classification import Severity
from app.models.results import (
    ComplianceIssue, ComplianceReport, FireSafetyResult, HeightAreaResult, LimitCheck,
    OccupancyResult, OverallCompliance, ZoningEnvelopeResult,
)
from app.models.schemas import ProjectSnapshot

logger = logging.getLogger(__name__)

_CALCULATORS = {
    "zoning": calculate_zoning_envelope,
    "height_area": calculate_height_area_compliance,
    "fire_safety": calculate_fire_safety,
    "occupancy": calculate_occupancy,
}


class ComplianceCalculator:
    """Computes every compliance result for a project snapshot."""

    def __init__(self, resolver: Optional[ReferenceTableResolver] = None):
        self.resolver = resolver or ReferenceTableResolver(load_default_tables())

    def calculate(self, snapshot: ProjectSnapshot, parallel: bool = False) -> ComplianceReport:
        if parallel:
            with ThreadPoolExecutor(max_workers=len(_CALCULATORS)) as pool:
                futures = {
                    name: pool.submit(fn, snapshot, self.resolver)
                    for name, fn in _CALCULATORS.items()
                }
                results = {name: f.result() for name, f in futures.items()}
        else:
            results = {name: fn(snapshot, self.resolver) for name, fn in _CALCULATORS.items()}

        summary = build_summary(results["zoning"], results["height_area"], results["occupancy"])
        logger.info(
            "Compliance for %s / %s / %s: %s (%d%%)",
            snapshot.zoning_district or "-", snapshot.construction_type or "-",
            snapshot.occupancy_group or "-", summary.status.value, summary.percentage,
        )
        return ComplianceReport(summary=summary, **results)

    # Single-calculator entry points used by the API
    def zoning(self, snapshot: ProjectSnapshot) -> ZoningEnvelopeResult:
        return calculate_zoning_envelope(snapshot, self.resolver)

    def height_area(self, snapshot: ProjectSnapshot) -> HeightAreaResult:
        return calculate_height_area_compliance(snapshot, self.resolver)

    def fire_safety(self, snapshot: ProjectSnapshot) -> FireSafetyResult:
        return calculate_fire_safety(snapshot, self.resolver)

    def occupancy(self, snapshot: ProjectSnapshot) -> OccupancyResult:
        return calculate_occupancy(snapshot, self.resolver)


# ──────────────────────────────────────────────────────────────────
# PROJECT SUMMARY
# ──────────────────────────────────────────────────────────────────

_LIMIT_LABELS = {
    "height": ("Building height", "ft", "IBC 504.3"),
    "stories": ("Number of stories", "stories", "IBC 504.4"),
    "area": ("Building area", "sf", "IBC 506.2"),
}


def _fmt(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.1f}"


def limit_issue(label: str, unit: str, code: str, check: LimitCheck) -> Optional[ComplianceIssue]:
    if check.severity == Severity.VIOLATION:
        message = f"{label} ({_fmt(check.actual)} {unit}) exceeds allowable {_fmt(check.allowable)} {unit}"
    elif check.severity == Severity.WARNING:
        message = f"{label} ({_fmt(check.actual)} {unit}) is within 10% of allowable {_fmt(check.allowable)} {unit}"
    else:
        return None
    return ComplianceIssue(type=check.severity, message=message, code=code)


def build_summary(zoning: ZoningEnvelopeResult, height_area: HeightAreaResult,
                  occupancy: OccupancyResult) -> OverallCompliance:
    """Project-wide roll-up.

    Height/area verdicts come first, then the zoning floor-area check, then
    the occupancy issues in their own order. Results that could not be
    computed are reported as warnings, never as compliant.
    """
    issues = []

    if height_area.missing_reference:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message=(
                "Allowable height and area could not be determined - missing "
                f"reference data ({', '.join(height_area.missing_reference)})"
            ),
            code="IBC 504",
        ))
    else:
        for attr, (label, unit, code) in _LIMIT_LABELS.items():
            issue = limit_issue(label, unit, code, getattr(height_area, attr))
            if issue:
                issues.append(issue)

    if zoning.missing_reference:
        issues.append(ComplianceIssue(
            type=Severity.WARNING,
            message=f"Zoning district {zoning.district or '(none)'} not found - zoning envelope not checked",
            code="Zoning",
        ))
    elif zoning.floor_area_check is not None:
        issue = limit_issue("Floor area", "sf", "Zoning FAR", zoning.floor_area_check)
        if issue:
            issues.append(issue)

    issues.extend(occupancy.overall_compliance.issues)
    return summarize(issues)
