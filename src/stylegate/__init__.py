"""stylegate: security and WCAG compliance gate for untrusted CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from stylegate.accessibility import (  # noqa: E402
    AccessibilityReport,
    build_report,
    check,
    check_contrast,
    check_stylesheet,
    suggest,
)
from stylegate.color import ColorValue, contrast_ratio, parse_color, relative_luminance  # noqa: E402
from stylegate.config import StyleGateConfig  # noqa: E402
from stylegate.errors import (  # noqa: E402
    ContextError,
    CSSValidationError,
    SchemaRejection,
    SecurityRejection,
    StyleGateError,
)
from stylegate.model import (  # noqa: E402
    ComplianceReport,
    ContrastResult,
    Issue,
    RuleContext,
    Severity,
    ValidationResult,
    WcagLevel,
)
from stylegate.validation import to_inline_style, validate, validate_or_raise  # noqa: E402

__all__ = [
    "__version__",
    # validation
    "validate",
    "validate_or_raise",
    "to_inline_style",
    "ValidationResult",
    # accessibility
    "check",
    "check_stylesheet",
    "check_contrast",
    "suggest",
    "build_report",
    "AccessibilityReport",
    "ComplianceReport",
    "ContrastResult",
    "Issue",
    "Severity",
    "WcagLevel",
    "RuleContext",
    # color
    "ColorValue",
    "parse_color",
    "relative_luminance",
    "contrast_ratio",
    # config and errors
    "StyleGateConfig",
    "StyleGateError",
    "CSSValidationError",
    "SecurityRejection",
    "SchemaRejection",
    "ContextError",
]
