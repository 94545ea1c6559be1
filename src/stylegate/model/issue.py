"""Issue model: structured accessibility findings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Severity(StrEnum):
    """Severity level for an accessibility finding."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class WcagLevel(StrEnum):
    """WCAG conformance levels, from minimum to enhanced."""

    A = "A"
    AA = "AA"
    AAA = "AAA"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    @classmethod
    def coerce(cls, value: str | WcagLevel | None, default: WcagLevel | None = None) -> WcagLevel:
        """Normalize user input (``"aa"``, ``"AA"``, None) to a level.

        Unknown values fall back to *default*, or AA.
        """
        if isinstance(value, WcagLevel):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return default or cls.AA


_LEVEL_RANK = {WcagLevel.A: 1, WcagLevel.AA: 2, WcagLevel.AAA: 3}


@dataclass(frozen=True)
class Issue:
    """A single accessibility finding.

    Attributes:
        severity: How serious the issue is.
        rule_id: Identifier for the rule that produced this issue.
        message: Human-readable description of the problem.
        target_level: The WCAG level the failed criterion belongs to.
        wcag_criterion: Success criterion number (``"1.4.3"``), if any.
        selector: The rule-block selector involved, if known.
        suggestion: Suggested remediation, if available.
        details: Extra rule-specific data (ratios, colors, examples).
    """

    severity: Severity
    rule_id: str
    message: str
    target_level: WcagLevel = WcagLevel.AA
    wcag_criterion: str | None = None
    selector: str | None = None
    suggestion: str | None = None
    details: dict[str, Any] | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_info(self) -> bool:
        return self.severity is Severity.INFO

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "rule_id": self.rule_id,
            "wcag": self.wcag_criterion,
            "level": self.target_level.value,
            "selector": self.selector,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": dict(self.details) if self.details is not None else None,
        }

    def __str__(self) -> str:
        location = f" [{self.selector}]" if self.selector else ""
        criterion = f" (WCAG {self.wcag_criterion} {self.target_level.value})" if self.wcag_criterion else ""
        return f"{self.severity.value.upper()}{location}: {self.message}{criterion}"
