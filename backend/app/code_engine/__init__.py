from __future__ import annotations

from app.code_engine.calculator import ComplianceCalculator
from app.code_engine.reference_data import load_default_tables
from app.code_engine.reference_tables import (
    DefaultPolicies, MissingReferenceData, ReferenceTableResolver,
)

__all__ = [
    "ComplianceCalculator", "DefaultPolicies", "MissingReferenceData",
    "ReferenceTableResolver", "load_default_tables",
]
