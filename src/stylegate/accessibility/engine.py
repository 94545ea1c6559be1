"""Accessibility compliance engine.

Runs the rule registry over a declaration map or a parsed stylesheet and
folds the findings into a :class:`ComplianceReport`. The engine reports;
it never raises on malformed CSS.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from stylegate.accessibility.rules import (
    DECLARATION_RULES,
    STYLESHEET_RULES,
    required_contrast,
)
from stylegate.color import contrast_ratio, parse_color, suggest_color_fix
from stylegate.model.context import RuleContext
from stylegate.model.issue import Issue, WcagLevel
from stylegate.model.report import ComplianceReport, ContrastResult
from stylegate.stylesheet.model import Selector, Stylesheet, StyleRule
from stylegate.stylesheet.parser import parse_stylesheet, strip_important

__all__ = ["check", "check_contrast", "check_stylesheet", "rule_from_declarations"]

logger = logging.getLogger(__name__)


def rule_from_declarations(declarations: Mapping[Any, Any], selector: str | None = None) -> StyleRule:
    """Wrap a flat property map as a single rule block.

    Names are lowercased, ``!important`` flags are split off, and values
    that are neither strings nor numbers are ignored.
    """
    values: dict[str, str] = {}
    important: set[str] = set()
    for prop, raw in declarations.items():
        if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
            continue
        name = str(prop).strip().lower()
        value, flagged = strip_important(str(raw))
        values[name] = value
        if flagged:
            important.add(name)
    return StyleRule(
        selector=Selector(text=(selector or "").strip()),
        declarations=values,
        important=frozenset(important),
    )


def _run_declaration_rules(rule: StyleRule, context: RuleContext) -> list[Issue]:
    issues: list[Issue] = []
    for check_rule in DECLARATION_RULES:
        issues.extend(check_rule(rule, context))
    return issues


def _run_stylesheet_rules(sheet: Stylesheet, context: RuleContext) -> list[Issue]:
    issues: list[Issue] = []
    for check_rule in STYLESHEET_RULES:
        issues.extend(check_rule(sheet, context))
    return issues


def _finish(issues: list[Issue], blocks: int) -> ComplianceReport:
    report = ComplianceReport(issues=tuple(issues))
    level = report.achieved_level
    logger.debug(
        "Checked %d rule block(s): %d error(s), %d warning(s), %d info, level %s",
        blocks,
        report.error_count,
        report.warning_count,
        report.info_count,
        level.value if level is not None else "none",
    )
    return report


def check(declarations: Mapping[Any, Any], context: RuleContext | None = None) -> ComplianceReport:
    """Check one declaration map against the WCAG rules.

    Args:
        declarations: Property name to value, typically the ``validated``
            map of a :class:`ValidationResult`.
        context: Facts about where the styles apply. ``context.selector``
            is used as the selector of the declarations.
    """
    context = context or RuleContext()
    rule = rule_from_declarations(declarations, context.selector)
    issues = _run_declaration_rules(rule, context)
    issues.extend(_run_stylesheet_rules(Stylesheet(rules=[rule]), context))
    return _finish(issues, 1)


def check_stylesheet(css: str, context: RuleContext | None = None) -> ComplianceReport:
    """Check every rule block of a stylesheet, then the stylesheet-wide rules once."""
    context = context or RuleContext()
    sheet = parse_stylesheet(css)
    issues: list[Issue] = []
    for rule in sheet.rules:
        issues.extend(_run_declaration_rules(rule, context.with_selector(rule.selector.text)))
    issues.extend(_run_stylesheet_rules(sheet, context))
    return _finish(issues, len(sheet.rules))


def check_contrast(
    foreground: str,
    background: str,
    level: str | WcagLevel = WcagLevel.AA,
    large_text: bool = False,
) -> ContrastResult:
    """Check a single color pair against the contrast threshold for *level*."""
    target = WcagLevel.coerce(level)
    required = required_contrast(target, large_text)
    fg = parse_color(foreground) if isinstance(foreground, str) else None
    bg = parse_color(background) if isinstance(background, str) else None
    if fg is None or bg is None:
        return ContrastResult(
            passes=False,
            ratio=None,
            required=required,
            level=target,
            large_text=large_text,
            error="Invalid color format",
        )

    ratio = contrast_ratio(fg, bg)
    passes = ratio >= required
    return ContrastResult(
        passes=passes,
        ratio=ratio,
        required=required,
        level=target,
        large_text=large_text,
        suggestion=None if passes else suggest_color_fix(fg, bg, required),
    )
