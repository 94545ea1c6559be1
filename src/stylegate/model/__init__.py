from __future__ import annotations

from stylegate.model.context import RuleContext
from stylegate.model.issue import Issue, Severity, WcagLevel
from stylegate.model.report import ComplianceReport, ContrastResult, derive_level
from stylegate.model.result import Rejection, RejectionKind, ValidationResult

__all__ = [
    # issue
    "Severity",
    "WcagLevel",
    "Issue",
    # report
    "ComplianceReport",
    "ContrastResult",
    "derive_level",
    # result
    "Rejection",
    "RejectionKind",
    "ValidationResult",
    # context
    "RuleContext",
]
