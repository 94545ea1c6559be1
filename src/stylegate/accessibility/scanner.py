"""Heuristic suggestion scanner.

Lexical probes over raw stylesheet text. Each probe looks for one
structural smell and yields at most one ``info`` issue carrying an
``example`` fix in its details. Probes do not parse the CSS, so they also
see text inside at-rules, and they overlap with the compliance engine on
purpose: the two are separate advisory channels.
"""

from __future__ import annotations

import re
from typing import Callable

from stylegate.accessibility.rules import MIN_FONT_SIZE_PX
from stylegate.model.issue import Issue, Severity, WcagLevel

__all__ = ["PROBES", "suggest"]

_MOTION_RE = re.compile(r"\b(?:animation|transition)[a-z-]*\s*:", re.IGNORECASE)
_FONT_SIZE_RE = re.compile(r"font-size\s*:\s*(\d+(?:\.\d+)?)(px|pt)\b", re.IGNORECASE)
_BACKGROUND_IMAGE_RE = re.compile(r"background-image\s*:|background\s*:[^;{}]*url\s*\(", re.IGNORECASE)
_FIXED_RE = re.compile(r"position\s*:\s*fixed", re.IGNORECASE)
_SIGNAL_COLOR_RE = re.compile(
    r"color\s*:\s*(?:red|green|#f00|#0f0|#ff0000|#00ff00)\b", re.IGNORECASE
)

_PT_TO_PX = 1.333


def _suggestion(
    rule_id: str,
    message: str,
    level: WcagLevel,
    criterion: str,
    suggestion: str,
    example: str,
) -> Issue:
    return Issue(
        severity=Severity.INFO,
        rule_id=rule_id,
        message=message,
        target_level=level,
        wcag_criterion=criterion,
        suggestion=suggestion,
        details={"example": example},
    )


def probe_hover_without_focus(css: str) -> Issue | None:
    lowered = css.lower()
    if ":hover" not in lowered or ":focus" in lowered:
        return None
    return _suggestion(
        "hover_without_focus",
        "Found :hover styles without corresponding :focus styles.",
        WcagLevel.A,
        "2.1.1",
        "Add :focus styles alongside :hover for keyboard accessibility.",
        ":hover, :focus { /* your styles */ }",
    )


def probe_missing_focus_styles(css: str) -> Issue | None:
    if ":focus" in css.lower():
        return None
    return _suggestion(
        "missing_focus_styles",
        "No focus styles detected. Users navigating with keyboard need visible focus indicators.",
        WcagLevel.AA,
        "2.4.7",
        "Add :focus styles with outline or box-shadow for interactive elements.",
        ":focus { outline: 2px solid #007cba; outline-offset: 2px; }",
    )


def probe_unguarded_motion(css: str) -> Issue | None:
    if not _MOTION_RE.search(css) or "prefers-reduced-motion" in css.lower():
        return None
    return _suggestion(
        "animation_no_reduced_motion",
        "Animations detected without prefers-reduced-motion media query.",
        WcagLevel.AAA,
        "2.3.3",
        "Respect user preferences by disabling animations for users who prefer reduced motion.",
        "@media (prefers-reduced-motion: reduce) { * { animation: none !important; transition: none !important; } }",
    )


def probe_small_font(css: str) -> Issue | None:
    """Only the first px/pt font-size in the text is looked at."""
    match = _FONT_SIZE_RE.search(css)
    if match is None:
        return None
    size = float(match.group(1))
    if match.group(2).lower() == "pt":
        size *= _PT_TO_PX
    if size >= MIN_FONT_SIZE_PX:
        return None
    return _suggestion(
        "font_too_small",
        f"Font size {size:.1f}px is below minimum recommended size.",
        WcagLevel.AA,
        "1.4.4",
        "Use at least 12px, preferably 16px, for body text.",
        "font-size: 1rem; /* or 16px */",
    )


def probe_text_over_image(css: str) -> Issue | None:
    if not _BACKGROUND_IMAGE_RE.search(css):
        return None
    return _suggestion(
        "text_over_image",
        "Background image detected. Ensure text remains readable.",
        WcagLevel.AA,
        "1.4.3",
        "Add a solid background color fallback or text shadow for contrast.",
        "background: linear-gradient(rgba(0,0,0,0.5), rgba(0,0,0,0.5)), url(image.jpg);",
    )


def probe_fixed_positioning(css: str) -> Issue | None:
    if not _FIXED_RE.search(css):
        return None
    return _suggestion(
        "fixed_positioning",
        "Fixed positioning may cause issues for users with screen magnifiers.",
        WcagLevel.AA,
        "1.4.10",
        "Ensure fixed elements do not block content or navigation.",
        "Consider sticky positioning or ensuring adequate spacing.",
    )


def probe_color_only_signal(css: str) -> Issue | None:
    if not _SIGNAL_COLOR_RE.search(css):
        return None
    return _suggestion(
        "color_only_info",
        "Color alone should not be used to convey information.",
        WcagLevel.A,
        "1.4.1",
        "Combine color with text, icons, or patterns for status indicators.",
        "Use icons or text labels alongside color changes.",
    )


Probe = Callable[[str], Issue | None]

PROBES: tuple[Probe, ...] = (
    probe_missing_focus_styles,
    probe_hover_without_focus,
    probe_unguarded_motion,
    probe_small_font,
    probe_text_over_image,
    probe_fixed_positioning,
    probe_color_only_signal,
)


def suggest(raw_css: str) -> list[Issue]:
    """Run every probe over *raw_css* and collect the suggestions."""
    suggestions: list[Issue] = []
    for probe in PROBES:
        issue = probe(raw_css)
        if issue is not None:
            suggestions.append(issue)
    return suggestions
