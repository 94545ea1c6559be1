"""CLI commands: stylegate check / suggest / contrast / report."""

from __future__ import annotations

import json
import sys
from typing import Callable

import click

from stylegate.accessibility import build_report, check_contrast, check_stylesheet, suggest as run_suggest
from stylegate.accessibility import check as run_check
from stylegate.cli._input import load_declarations, read_css
from stylegate.model import Issue, RuleContext, WcagLevel
from stylegate.validation import validate as run_validate

_LEVELS = click.Choice(["A", "AA", "AAA"], case_sensitive=False)


def context_options(func: Callable) -> Callable:
    """Options that build a RuleContext."""
    func = click.option("--selector", default=None, help="Selector the declarations belong to")(func)
    func = click.option("--tag", default=None, help="Element tag name, e.g. a")(func)
    func = click.option("--foreground", default=None, help="Text color when none is declared")(func)
    func = click.option("--background", default=None, help="Background color when none is declared")(func)
    func = click.option("--interactive", is_flag=True, help="The element receives keyboard focus")(func)
    return func


def _context(interactive, background, foreground, tag, selector) -> RuleContext:
    return RuleContext(
        is_interactive=interactive,
        default_background=background,
        default_foreground=foreground,
        tag=tag,
        selector=selector,
    )


def _declarations_or_none(text: str) -> dict | None:
    """A JSON object or a bare declaration block is one rule; anything else is a stylesheet."""
    stripped = text.strip()
    if stripped.startswith("{") or "{" not in stripped:
        return load_declarations(stripped)
    return None


def _echo_issues(issues: tuple[Issue, ...] | list[Issue]) -> None:
    for issue in issues:
        click.echo(str(issue))
        if issue.suggestion:
            click.echo(f"    suggestion: {issue.suggestion}")


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@context_options
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_obj
def check(config, source, interactive, background, foreground, tag, selector, as_json: bool) -> None:
    """Check CSS from SOURCE against the WCAG rules.

    A declaration block is validated first; if anything is rejected the
    rejections are printed and nothing is checked. Exits with code 1 if
    validation fails or any error-severity issue is found.
    """
    context = _context(interactive, background, foreground, tag, selector)
    text = read_css(source, config.max_css_bytes)
    declarations = _declarations_or_none(text)
    if declarations is None:
        report = check_stylesheet(text, context)
    else:
        validation = run_validate(declarations)
        if not validation.ok:
            if as_json:
                click.echo(json.dumps({"success": False, **validation.to_dict()}, indent=2))
            else:
                for rejection in validation.rejections:
                    click.echo(f"ERROR [{rejection.code}]: {rejection.message}")
            sys.exit(1)
        report = run_check(validation.validated, context)

    if as_json:
        click.echo(json.dumps({"success": True, "result": report.to_dict()}, indent=2))
        sys.exit(0 if report.passes else 1)

    _echo_issues(report.issues)
    level = report.achieved_level
    click.echo()
    click.echo(
        f"Summary: {report.error_count} error(s), {report.warning_count} warning(s), "
        f"{report.info_count} info; WCAG level: {level.value if level else 'none'}"
    )
    sys.exit(0 if report.passes else 1)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print the suggestions as JSON")
@click.pass_obj
def suggest(config, source, as_json: bool) -> None:
    """List heuristic accessibility suggestions for the stylesheet in SOURCE."""
    suggestions = run_suggest(read_css(source, config.max_css_bytes))
    if as_json:
        payload = {"success": True, "suggestions": [s.to_dict() for s in suggestions], "count": len(suggestions)}
        click.echo(json.dumps(payload, indent=2))
        return

    if not suggestions:
        click.echo("No suggestions")
        return
    for issue in suggestions:
        click.echo(str(issue))
        click.echo(f"    example: {issue.details['example']}")


@click.command()
@click.argument("foreground")
@click.argument("background")
@click.option("--level", type=_LEVELS, default="AA", help="WCAG level to check against")
@click.option("--large-text", is_flag=True, help="Use the large-text threshold")
def contrast(foreground: str, background: str, level: str, large_text: bool) -> None:
    """Check the contrast ratio of FOREGROUND on BACKGROUND."""
    result = check_contrast(foreground, background, level=level, large_text=large_text)
    if result.error:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    verdict = "PASS" if result.passes else "FAIL"
    click.echo(
        f"{verdict}: {result.ratio:.2f}:1 (WCAG {result.level.value} requires {result.required:.1f}:1)"
    )
    if result.suggestion:
        click.echo(f"    suggestion: {result.suggestion}")
    sys.exit(0 if result.passes else 1)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@context_options
@click.option("--level", "target", type=_LEVELS, default=None, help="Target WCAG level (default: AA)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_obj
def report(config, source, interactive, background, foreground, tag, selector, target, as_json: bool) -> None:
    """Build a prioritized accessibility report for the stylesheet in SOURCE.

    Exits with code 1 if the target level is not met.
    """
    context = _context(interactive, background, foreground, tag, selector)
    target_level = WcagLevel.coerce(target or config.default_target_level)
    result = build_report(read_css(source, config.max_css_bytes), context, target_level)

    if as_json:
        click.echo(json.dumps({"success": True, "report": result.to_dict()}, indent=2))
        sys.exit(0 if result.meets_target else 1)

    summary = result.summary()
    click.echo(
        f"Target: WCAG {summary['target_level']}  Achieved: {summary['achieved_level'] or 'none'}  "
        f"Meets target: {'yes' if summary['meets_target'] else 'no'}"
    )
    click.echo()
    for rec in result.recommendations:
        issue = rec.issue
        criterion = f" (WCAG {issue.wcag_criterion})" if issue.wcag_criterion else ""
        click.echo(f"[{rec.priority.value}] {issue.rule_id}: {issue.message}{criterion}")
    click.echo()
    click.echo(
        f"Summary: {summary['total_issues']} issue(s), {len(result.suggestions)} suggestion(s)"
    )
    sys.exit(0 if result.meets_target else 1)
