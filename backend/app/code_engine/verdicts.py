"""
Shared compliance classification.

Every numeric check in the engine is reduced to one of three severities:
  - violation: actual exceeds the allowable limit
  - warning:   actual is above 90% of the limit but not over it
  - compliant: everything else

Issue lists are scored as 100 - 10 per violation - 5 per warning, floored at 0.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from app.models.classification import Severity
from app.models.results import ComplianceIssue, LimitCheck, OverallCompliance

WARNING_THRESHOLD = 0.9
VIOLATION_PENALTY = 10
WARNING_PENALTY = 5


def classify(actual: float, allowable: float) -> Severity:
    if actual > allowable:
        return Severity.VIOLATION
    if actual > allowable * WARNING_THRESHOLD:
        return Severity.WARNING
    return Severity.COMPLIANT


def check_limit(actual: float, allowable: float,
                base_allowable: Optional[float] = None) -> LimitCheck:
    """Compare an actual value to its (possibly adjusted) allowable limit."""
    return LimitCheck(
        actual=actual,
        base_allowable=allowable if base_allowable is None else base_allowable,
        allowable=allowable,
        severity=classify(actual, allowable),
        utilization=round(actual / allowable, 4) if allowable > 0 else None,
    )


def score(violations: int, warnings: int) -> int:
    return max(0, 100 - VIOLATION_PENALTY * violations - WARNING_PENALTY * warnings)


def summarize(issues: Iterable[ComplianceIssue]) -> OverallCompliance:
    """Roll an ordered issue list up into a status and percentage score."""
    issues = list(issues)
    violations = sum(1 for i in issues if i.type == Severity.VIOLATION)
    warnings = sum(1 for i in issues if i.type == Severity.WARNING)
    return OverallCompliance(
        percentage=score(violations, warnings),
        status=Severity.worst(i.type for i in issues),
        issues=issues,
    )


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (builtin round() is banker's)."""
    return int(math.floor(value + 0.5))
