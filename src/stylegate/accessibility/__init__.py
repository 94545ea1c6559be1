from stylegate.accessibility.engine import check, check_contrast, check_stylesheet
from stylegate.accessibility.report import AccessibilityReport, build_report
from stylegate.accessibility.scanner import suggest

__all__ = [
    "AccessibilityReport",
    "build_report",
    "check",
    "check_contrast",
    "check_stylesheet",
    "suggest",
]
