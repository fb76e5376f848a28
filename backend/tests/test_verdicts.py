"""Tests for the shared compliance classification and scoring."""

from __future__ import annotations

import pytest

from app.code_engine.verdicts import check_limit, classify, round_half_up, score, summarize
from app.models.classification import Severity
from app.models.results import ComplianceIssue


class TestClassify:

    @pytest.mark.parametrize("actual,allowable,expected", [
        (0, 100, Severity.COMPLIANT),
        (90, 100, Severity.COMPLIANT),
        (90.01, 100, Severity.WARNING),
        (100, 100, Severity.WARNING),
        (100.01, 100, Severity.VIOLATION),
        (0, 0, Severity.COMPLIANT),
        (1, 0, Severity.VIOLATION),
    ])
    def test_bands(self, actual, allowable, expected):
        assert classify(actual, allowable) is expected

    def test_check_limit_keeps_base(self):
        check = check_limit(45, 60, base_allowable=40)
        assert check.base_allowable == 40
        assert check.allowable == 60
        assert check.utilization == pytest.approx(0.75)

    def test_zero_allowable_has_no_utilization(self):
        assert check_limit(5, 0).utilization is None


class TestScore:

    def test_penalties(self):
        assert score(0, 0) == 100
        assert score(1, 2) == 80

    def test_floor_at_zero(self):
        assert score(11, 0) == 0

    def test_summarize(self):
        issues = [
            ComplianceIssue(type=Severity.WARNING, message="w"),
            ComplianceIssue(type=Severity.VIOLATION, message="v"),
        ]
        overall = summarize(issues)
        assert overall.status is Severity.VIOLATION
        assert overall.percentage == 85
        assert [i.message for i in overall.issues] == ["w", "v"]

    def test_summarize_nothing(self):
        overall = summarize([])
        assert overall.status is Severity.COMPLIANT
        assert overall.percentage == 100


class TestRounding:

    @pytest.mark.parametrize("value,expected", [(7.5, 8), (312.5, 313), (187.4, 187), (2.5, 3)])
    def test_half_up(self, value, expected):
        assert round_half_up(value) == expected
