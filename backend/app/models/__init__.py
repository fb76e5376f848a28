from __future__ import annotations

from app.models.schemas import ProjectSnapshot, ReferenceTables, ZoningDistrict
from app.models.results import ComplianceReport

__all__ = ["ProjectSnapshot", "ReferenceTables", "ZoningDistrict", "ComplianceReport"]
