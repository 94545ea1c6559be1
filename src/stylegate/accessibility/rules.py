"""Accessibility rules for declaration sets.

Declaration rules take one StyleRule plus the caller's RuleContext and
return a list of Issue objects. Stylesheet rules look at every rule block
at once and run a single time per check.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable

from stylegate.color import contrast_ratio, parse_color, suggest_color_fix
from stylegate.model.context import RuleContext
from stylegate.model.issue import Issue, Severity, WcagLevel
from stylegate.stylesheet.model import Stylesheet, StyleRule
from stylegate.stylesheet.values import CSS_WIDE_KEYWORDS, Keyword, Length, parse_value


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

CONTRAST_NORMAL_AA = 4.5
CONTRAST_LARGE_AA = 3.0
CONTRAST_NORMAL_AAA = 7.0
CONTRAST_LARGE_AAA = 4.5

MIN_FONT_SIZE_PX = 12
SMALL_FONT_SIZE_PX = 14

# 18pt, and 14pt bold (18.66px rounded up).
LARGE_TEXT_PX = 24
LARGE_BOLD_TEXT_PX = 19

MIN_LINE_HEIGHT = 1.5
MIN_OPACITY = 0.5
MAX_IMPORTANT = 5

DEFAULT_FONT_SIZE_PX = 16.0

FONT_SIZE_KEYWORDS = MappingProxyType({
    "xx-small": 9.0,
    "x-small": 10.0,
    "small": 13.0,
    "medium": 16.0,
    "large": 18.0,
    "x-large": 24.0,
    "xx-large": 32.0,
    "xxx-large": 48.0,
})

_BOLD_KEYWORDS = frozenset({"bold", "bolder"})
_UNRESOLVABLE_COLORS = CSS_WIDE_KEYWORDS | {"currentcolor"}


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def required_contrast(level: WcagLevel, large_text: bool) -> float:
    """Minimum contrast ratio for *level*. A has no contrast criterion of its own; AA applies."""
    if level is WcagLevel.AAA:
        return CONTRAST_LARGE_AAA if large_text else CONTRAST_NORMAL_AAA
    return CONTRAST_LARGE_AA if large_text else CONTRAST_NORMAL_AA


def font_size_px(raw: str | None) -> float | None:
    """Convert a font-size value to pixels, or None when it cannot be sized."""
    if raw is None:
        return None
    value = parse_value("font-size", raw)
    if isinstance(value, Length):
        return value.to_px()
    if isinstance(value, Keyword):
        return FONT_SIZE_KEYWORDS.get(value.lowered)
    return None


def is_bold(raw: str | None) -> bool:
    if raw is None:
        return False
    weight = raw.strip().lower()
    if weight in _BOLD_KEYWORDS:
        return True
    return weight.isdigit() and int(weight) >= 700


def is_large_text(declarations: dict[str, str]) -> bool:
    size = font_size_px(declarations.get("font-size"))
    if size is None:
        size = DEFAULT_FONT_SIZE_PX
    if size >= LARGE_TEXT_PX:
        return True
    return is_bold(declarations.get("font-weight")) and size >= LARGE_BOLD_TEXT_PX


def _ratio_value(raw: str) -> float | None:
    """Unitless numbers pass through, percentages become fractions."""
    value = parse_value("", raw)
    if not isinstance(value, Length):
        return None
    if value.unit == "":
        return value.number
    if value.unit == "%":
        return value.number / 100
    return None


def _selector(rule: StyleRule) -> str | None:
    return rule.selector.text or None


def _lowered(rule: StyleRule, name: str) -> str:
    return rule.declarations.get(name, "").strip().lower()


# ---------------------------------------------------------------------------
# Contrast
# ---------------------------------------------------------------------------


def _background_literal(declarations: dict[str, str]) -> str | None:
    if "background-color" in declarations:
        return declarations["background-color"]
    background = declarations.get("background")
    # The shorthand only counts when it is a single color.
    if background is not None and parse_color(background) is not None:
        return background
    return None


def _is_transparent(raw: str) -> bool:
    color = parse_color(raw)
    return color is not None and color.alpha == 0


def check_contrast(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Text/background contrast must meet AA (1.4.3); AAA shortfall is noted (1.4.6)."""
    declarations = rule.declarations
    fg_raw = declarations.get("color")
    bg_raw = _background_literal(declarations)
    if fg_raw is None and bg_raw is None:
        return []

    background_source = "declared"
    if fg_raw is None:
        fg_raw = context.default_foreground
    if bg_raw is None or _is_transparent(bg_raw):
        bg_raw = context.default_background
        background_source = "context"
    if fg_raw is None or bg_raw is None:
        return []
    if fg_raw.strip().lower() in _UNRESOLVABLE_COLORS or bg_raw.strip().lower() in _UNRESOLVABLE_COLORS:
        return []

    foreground = parse_color(fg_raw)
    background = parse_color(bg_raw)
    if foreground is None or background is None:
        unreadable = fg_raw if foreground is None else bg_raw
        return [
            Issue(
                severity=Severity.WARNING,
                rule_id="contrast_unverifiable",
                message=f"Could not verify color contrast: unrecognized color '{unreadable}'.",
                target_level=WcagLevel.AA,
                wcag_criterion="1.4.3",
                selector=_selector(rule),
                suggestion="Use hex, rgb() or hsl() colors so contrast can be checked.",
            )
        ]

    large = is_large_text(declarations)
    ratio = contrast_ratio(foreground, background)
    required = required_contrast(WcagLevel.AA, large)
    enhanced = required_contrast(WcagLevel.AAA, large)
    details = {
        "foreground": fg_raw,
        "background": bg_raw,
        "ratio": round(ratio, 2),
        "required": required,
        "large_text": large,
        "background_source": background_source,
    }
    size_label = "large" if large else "normal"

    if ratio < required:
        return [
            Issue(
                severity=Severity.ERROR,
                rule_id="insufficient_contrast",
                message=(
                    f"Contrast ratio {ratio:.2f}:1 is below the required {required:.1f}:1 "
                    f"for WCAG AA ({size_label} text)."
                ),
                target_level=WcagLevel.AA,
                wcag_criterion="1.4.3",
                selector=_selector(rule),
                suggestion=suggest_color_fix(foreground, background, required),
                details=details,
            )
        ]
    if ratio < enhanced:
        return [
            Issue(
                severity=Severity.INFO,
                rule_id="contrast_below_aaa",
                message=(
                    f"Contrast ratio {ratio:.2f}:1 meets AA; {enhanced:.1f}:1 is needed "
                    f"for AAA ({size_label} text)."
                ),
                target_level=WcagLevel.AAA,
                wcag_criterion="1.4.6",
                selector=_selector(rule),
                suggestion=suggest_color_fix(foreground, background, enhanced),
                details={**details, "required": enhanced},
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Text sizing and spacing
# ---------------------------------------------------------------------------


def check_font_size(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Text below 12px fails 1.4.4; below 14px is flagged."""
    raw = rule.declarations.get("font-size")
    if raw is None or raw.strip().lower() in CSS_WIDE_KEYWORDS:
        return []
    size = font_size_px(raw)
    if size is None:
        return [
            Issue(
                severity=Severity.WARNING,
                rule_id="font_size_unverifiable",
                message=f"Could not validate font size: {raw}",
                target_level=WcagLevel.AA,
                wcag_criterion="1.4.4",
                selector=_selector(rule),
            )
        ]
    if size < MIN_FONT_SIZE_PX:
        return [
            Issue(
                severity=Severity.ERROR,
                rule_id="font_too_small",
                message=f"Font size {size:.1f}px is below the minimum of {MIN_FONT_SIZE_PX}px.",
                target_level=WcagLevel.AA,
                wcag_criterion="1.4.4",
                selector=_selector(rule),
                suggestion="Use at least 12px, preferably 16px, for body text.",
                details={"font_size_px": round(size, 2)},
            )
        ]
    if size < SMALL_FONT_SIZE_PX:
        return [
            Issue(
                severity=Severity.WARNING,
                rule_id="font_small",
                message=f"Font size is small ({size:.0f}px). Consider at least {SMALL_FONT_SIZE_PX}px.",
                target_level=WcagLevel.AA,
                wcag_criterion="1.4.4",
                selector=_selector(rule),
                suggestion="Use 14px or larger for better readability.",
                details={"font_size_px": round(size, 2)},
            )
        ]
    return []


def check_line_height(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Unitless or percentage line-height below 1.5 (1.4.12)."""
    raw = rule.declarations.get("line-height")
    if raw is None:
        return []
    line_height = _ratio_value(raw)
    if line_height is None or line_height >= MIN_LINE_HEIGHT:
        return []
    return [
        Issue(
            severity=Severity.WARNING,
            rule_id="tight_line_height",
            message=f"Line height {line_height:.2f} is below the recommended {MIN_LINE_HEIGHT} for readability.",
            target_level=WcagLevel.AA,
            wcag_criterion="1.4.12",
            selector=_selector(rule),
            suggestion="Use line-height of at least 1.5 for paragraph text.",
        )
    ]


def check_opacity(rule: StyleRule, context: RuleContext) -> list[Issue]:
    raw = rule.declarations.get("opacity")
    if raw is None:
        return []
    opacity = _ratio_value(raw)
    if opacity is None or opacity >= MIN_OPACITY:
        return []
    return [
        Issue(
            severity=Severity.WARNING,
            rule_id="low_opacity",
            message=f"Low opacity ({opacity:.2f}) may affect text readability.",
            target_level=WcagLevel.AA,
            wcag_criterion="1.4.3",
            selector=_selector(rule),
            suggestion="Keep text at 0.5 opacity or above, or check contrast against the blended color.",
        )
    ]


# ---------------------------------------------------------------------------
# Focus and keyboard
# ---------------------------------------------------------------------------


def check_focus_outline(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Removing the outline on focus needs a replacement indicator (2.4.7)."""
    if _lowered(rule, "outline") not in ("none", "0", "0px"):
        return []
    on_focus = rule.selector.targets_focus or (not rule.selector.text and context.is_interactive)
    if not on_focus:
        return []
    if "border" in rule.declarations or "box-shadow" in rule.declarations:
        return [
            Issue(
                severity=Severity.INFO,
                rule_id="focus_outline_replaced",
                message="Outline removed on focus; make sure the border or box-shadow change is clearly visible.",
                target_level=WcagLevel.AA,
                wcag_criterion="2.4.7",
                selector=_selector(rule),
                suggestion="Consider adding a visible focus indicator to replace outline.",
            )
        ]
    return [
        Issue(
            severity=Severity.ERROR,
            rule_id="focus_outline_removed",
            message="Removing outline on focus breaks keyboard navigation visibility.",
            target_level=WcagLevel.AA,
            wcag_criterion="2.4.7",
            selector=_selector(rule),
            suggestion="Replace with a visible alternative like box-shadow or a custom outline.",
        )
    ]


def check_keyboard_hazards(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Interactive elements must stay reachable from the keyboard (2.1.1)."""
    if not context.is_interactive:
        return []
    issues: list[Issue] = []
    if _lowered(rule, "display") == "none":
        issues.append(
            Issue(
                severity=Severity.ERROR,
                rule_id="keyboard_display_none",
                message="Interactive element hidden with display:none breaks keyboard navigation.",
                target_level=WcagLevel.A,
                wcag_criterion="2.1.1",
                selector=_selector(rule),
                suggestion="Hide visually with a screen-reader-only class instead, or remove the element from the tab order deliberately.",
            )
        )
    if _lowered(rule, "visibility") == "hidden":
        issues.append(
            Issue(
                severity=Severity.ERROR,
                rule_id="keyboard_visibility_hidden",
                message="Interactive element hidden with visibility:hidden breaks keyboard navigation.",
                target_level=WcagLevel.A,
                wcag_criterion="2.1.1",
                selector=_selector(rule),
            )
        )
    if _lowered(rule, "pointer-events") == "none":
        issues.append(
            Issue(
                severity=Severity.WARNING,
                rule_id="keyboard_pointer_events",
                message="pointer-events:none may affect keyboard navigation on interactive elements.",
                target_level=WcagLevel.A,
                wcag_criterion="2.1.1",
                selector=_selector(rule),
            )
        )
    return issues


def check_link_underline(rule: StyleRule, context: RuleContext) -> list[Issue]:
    """Links without underline rely on color alone (1.4.1)."""
    is_link = rule.selector.targets_link or (context.tag or "").strip().lower() == "a"
    if not is_link:
        return []
    decoration = _lowered(rule, "text-decoration") or _lowered(rule, "text-decoration-line")
    if decoration != "none":
        return []
    return [
        Issue(
            severity=Severity.WARNING,
            rule_id="link_underline_removed",
            message="Removing underline from links may make them less recognizable.",
            target_level=WcagLevel.A,
            wcag_criterion="1.4.1",
            selector=_selector(rule),
            suggestion="Use another visual indicator (e.g., border-bottom) or ensure the link color contrasts with surrounding text.",
        )
    ]


# ---------------------------------------------------------------------------
# Stylesheet-wide rules
# ---------------------------------------------------------------------------


def check_important_overuse(sheet: Stylesheet, context: RuleContext) -> list[Issue]:
    count = sheet.important_count
    if count <= MAX_IMPORTANT:
        return []
    return [
        Issue(
            severity=Severity.INFO,
            rule_id="important_overuse",
            message=f"Found {count} uses of !important which may prevent user style overrides.",
            target_level=WcagLevel.AA,
            wcag_criterion="1.4.4",
            suggestion="Reduce !important usage to allow users to apply custom styles.",
            details={"count": count},
        )
    ]


def check_user_select(sheet: Stylesheet, context: RuleContext) -> list[Issue]:
    """Disabling text selection globally (rather than on a control)."""
    for rule in sheet.rules:
        if not (rule.selector.is_global or not rule.selector.text):
            continue
        if _lowered(rule, "user-select") == "none" or _lowered(rule, "-webkit-user-select") == "none":
            return [
                Issue(
                    severity=Severity.WARNING,
                    rule_id="text_selection_disabled",
                    message="Disabling text selection may impact users with assistive technologies.",
                    target_level=WcagLevel.AA,
                    wcag_criterion="1.4.4",
                    selector=_selector(rule),
                    suggestion="Only disable selection on interactive elements, not text content.",
                )
            ]
    return []


def check_pointer_events(sheet: Stylesheet, context: RuleContext) -> list[Issue]:
    for rule in sheet.rules:
        if _lowered(rule, "pointer-events") == "none":
            return [
                Issue(
                    severity=Severity.INFO,
                    rule_id="pointer_events_disabled",
                    message="Disabling pointer events may impact accessibility.",
                    target_level=WcagLevel.A,
                    wcag_criterion="2.1.1",
                    selector=_selector(rule),
                    suggestion="Ensure disabled elements are communicated via ARIA attributes.",
                )
            ]
    return []


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

DeclarationRule = Callable[[StyleRule, RuleContext], list[Issue]]
StylesheetRule = Callable[[Stylesheet, RuleContext], list[Issue]]

DECLARATION_RULES: tuple[DeclarationRule, ...] = (
    check_contrast,
    check_font_size,
    check_focus_outline,
    check_keyboard_hazards,
    check_line_height,
    check_link_underline,
    check_opacity,
)

STYLESHEET_RULES: tuple[StylesheetRule, ...] = (
    check_important_overuse,
    check_user_select,
    check_pointer_events,
)
