"""Full accessibility report for a stylesheet against a target WCAG level."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from stylegate.accessibility.engine import check_stylesheet
from stylegate.accessibility.scanner import suggest
from stylegate.model.context import RuleContext
from stylegate.model.issue import Issue, Severity, WcagLevel
from stylegate.model.report import ComplianceReport

__all__ = ["AccessibilityReport", "Priority", "Recommendation", "build_report", "meets_target"]


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Recommendation:
    priority: Priority
    issue: Issue

    def to_dict(self) -> dict[str, Any]:
        data = {
            "priority": self.priority.value,
            "rule_id": self.issue.rule_id,
            "wcag": self.issue.wcag_criterion,
            "message": self.issue.message,
            "suggestion": self.issue.suggestion,
        }
        if self.issue.details and "example" in self.issue.details:
            data["example"] = self.issue.details["example"]
        return data


def meets_target(achieved: WcagLevel | None, target: WcagLevel) -> bool:
    return achieved is not None and achieved.rank >= target.rank


def _recommendations(
    compliance: ComplianceReport, suggestions: list[Issue], target: WcagLevel
) -> list[Recommendation]:
    recommendations = [
        Recommendation(Priority.HIGH, issue) for issue in compliance.issues if issue.is_error
    ]
    # Warnings only matter once the target goes beyond A.
    if target is not WcagLevel.A:
        recommendations.extend(
            Recommendation(Priority.MEDIUM, issue) for issue in compliance.issues if issue.is_warning
        )
    recommendations.extend(Recommendation(Priority.LOW, issue) for issue in suggestions)
    return recommendations


@dataclass(frozen=True)
class AccessibilityReport:
    """Compliance findings plus scanner suggestions, prioritized for a target level."""

    compliance: ComplianceReport
    suggestions: tuple[Issue, ...]
    target_level: WcagLevel
    recommendations: tuple[Recommendation, ...]
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def meets_target(self) -> bool:
        return meets_target(self.compliance.achieved_level, self.target_level)

    def summary(self) -> dict[str, Any]:
        level = self.compliance.achieved_level
        return {
            "passes": self.compliance.passes,
            "achieved_level": level.value if level is not None else None,
            "target_level": self.target_level.value,
            "meets_target": self.meets_target,
            "total_issues": len(self.compliance.issues),
            "error_count": self.compliance.error_count,
            "warning_count": self.compliance.warning_count,
            "info_count": self.compliance.info_count,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary(),
            "issues": [issue.to_dict() for issue in self.compliance.issues],
            "suggestions": [issue.to_dict() for issue in self.suggestions],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "generated_at": self.generated_at.isoformat(),
        }


def build_report(
    css: str,
    context: RuleContext | None = None,
    target_level: str | WcagLevel = WcagLevel.AA,
) -> AccessibilityReport:
    """Check *css*, run the scanner over it and rank everything for *target_level*.

    Unknown target levels fall back to AA.
    """
    target = WcagLevel.coerce(target_level)
    compliance = check_stylesheet(css, context)
    suggestions = suggest(css)
    return AccessibilityReport(
        compliance=compliance,
        suggestions=tuple(suggestions),
        target_level=target,
        recommendations=tuple(_recommendations(compliance, suggestions, target)),
    )
