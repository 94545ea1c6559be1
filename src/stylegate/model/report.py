"""Compliance report: issue counts and the achieved WCAG level, derived on demand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from stylegate.model.issue import Issue, Severity, WcagLevel


def derive_level(issues: Iterable[Issue]) -> WcagLevel | None:
    """Walk the conformance lattice over the error-severity issues.

    Any A-level error fails A outright (None); otherwise the achieved level
    is one below the lowest level with an error, or AAA when there is none.
    """
    failed = {issue.target_level for issue in issues if issue.is_error}
    if WcagLevel.A in failed:
        return None
    if WcagLevel.AA in failed:
        return WcagLevel.A
    if WcagLevel.AAA in failed:
        return WcagLevel.AA
    return WcagLevel.AAA


@dataclass(frozen=True)
class ComplianceReport:
    """The outcome of an accessibility check."""

    issues: tuple[Issue, ...] = ()

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is Severity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is Severity.INFO)

    @property
    def passes(self) -> bool:
        return self.error_count == 0

    @property
    def achieved_level(self) -> WcagLevel | None:
        return derive_level(self.issues)

    @property
    def errors(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.is_error]

    def by_rule(self, rule_id: str) -> list[Issue]:
        return [issue for issue in self.issues if issue.rule_id == rule_id]

    def to_dict(self) -> dict[str, Any]:
        level = self.achieved_level
        return {
            "passes": self.passes,
            "issues": [issue.to_dict() for issue in self.issues],
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "achieved_level": level.value if level is not None else None,
        }


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of a standalone foreground/background contrast check.

    ``error`` is set, and ``passes`` is False, when either color could not
    be parsed.
    """

    passes: bool
    ratio: float | None
    required: float
    level: WcagLevel
    large_text: bool = False
    suggestion: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "passes": self.passes,
            "ratio": round(self.ratio, 2) if self.ratio is not None else None,
            "required": self.required,
            "level": self.level.value,
            "large_text": self.large_text,
            "suggestion": self.suggestion,
            "error": self.error,
        }
