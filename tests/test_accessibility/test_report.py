"""Tests for the full accessibility report."""

from datetime import datetime

import pytest

from stylegate.accessibility import build_report
from stylegate.accessibility.report import Priority, meets_target
from stylegate.model import RuleContext, WcagLevel

CLEAN = "a:focus { outline: 2px solid #005fcc; } p { color: #000; background-color: #fff; line-height: 1.6; }"


class TestMeetsTarget:
    @pytest.mark.parametrize(
        "achieved, target, expected",
        [
            (None, WcagLevel.A, False),
            (WcagLevel.A, WcagLevel.A, True),
            (WcagLevel.A, WcagLevel.AA, False),
            (WcagLevel.AA, WcagLevel.AAA, False),
            (WcagLevel.AAA, WcagLevel.AA, True),
        ],
    )
    def test_lattice(self, achieved, target, expected):
        assert meets_target(achieved, target) is expected


class TestBuildReport:
    def test_clean_stylesheet(self):
        report = build_report(CLEAN)
        summary = report.summary()
        assert summary["passes"] is True
        assert summary["achieved_level"] == "AAA"
        assert summary["meets_target"] is True
        assert summary["total_issues"] == 0
        assert report.suggestions == ()
        assert report.recommendations == ()

    def test_failing_stylesheet(self):
        css = "a:focus { outline: none; } p { color: #777; background-color: #fff; }"
        report = build_report(css)
        summary = report.summary()
        assert summary["achieved_level"] == "A"
        assert summary["target_level"] == "AA"
        assert summary["meets_target"] is False
        assert summary["error_count"] == 2
        assert [rec.priority for rec in report.recommendations] == [Priority.HIGH, Priority.HIGH]

    def test_priorities_ordered(self):
        css = "p { font-size: 10px; line-height: 1.2; }"
        report = build_report(css, target_level="AA")
        priorities = [rec.priority for rec in report.recommendations]
        assert priorities == [Priority.HIGH, Priority.MEDIUM, Priority.LOW, Priority.LOW]
        assert [rec.issue.rule_id for rec in report.recommendations] == [
            "font_too_small",
            "tight_line_height",
            "missing_focus_styles",
            "font_too_small",
        ]

    def test_level_a_skips_warnings(self):
        report = build_report("p { line-height: 1.2; }", target_level="A")
        assert Priority.MEDIUM not in [rec.priority for rec in report.recommendations]
        assert report.meets_target

    def test_unknown_target_defaults_to_aa(self):
        assert build_report(CLEAN, target_level="ZZ").target_level is WcagLevel.AA

    def test_context_passed_through(self):
        report = build_report("p { color: #777; }", RuleContext(default_background="#fff"))
        assert report.compliance.by_rule("insufficient_contrast")


class TestReportDict:
    def test_keys(self):
        data = build_report("p { line-height: 1.2; }").to_dict()
        assert set(data) == {"summary", "issues", "suggestions", "recommendations", "generated_at"}
        assert set(data["summary"]) == {
            "passes",
            "achieved_level",
            "target_level",
            "meets_target",
            "total_issues",
            "error_count",
            "warning_count",
            "info_count",
        }
        datetime.fromisoformat(data["generated_at"])

    def test_low_priority_carries_example(self):
        data = build_report("p { margin: 0; }").to_dict()
        low = [rec for rec in data["recommendations"] if rec["priority"] == "low"]
        assert low[0]["rule_id"] == "missing_focus_styles"
        assert low[0]["example"].startswith(":focus")

    def test_high_priority_has_no_example(self):
        data = build_report("a:focus { outline: none; }").to_dict()
        high = data["recommendations"][0]
        assert high["priority"] == "high"
        assert high["wcag"] == "2.4.7"
        assert "example" not in high
