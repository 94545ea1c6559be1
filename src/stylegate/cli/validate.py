"""CLI commands: stylegate validate / stylegate inline."""

from __future__ import annotations

import json
import sys

import click

from stylegate.cli._input import load_declarations, read_css
from stylegate.validation import to_inline_style
from stylegate.validation import validate as run_validate


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--strict/--no-strict", default=None, help="Treat warnings as errors")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def validate(config, source, strict: bool | None, as_json: bool) -> None:
    """Validate CSS declarations from SOURCE (a file, or - for stdin).

    SOURCE holds either a JSON object or a ``prop: value;`` block. Exits
    with code 1 if any declaration is rejected.
    """
    if strict is None:
        strict = config.strict
    declarations = load_declarations(read_css(source, config.max_css_bytes))
    result = run_validate(declarations, strict=strict)

    if as_json:
        click.echo(json.dumps({"success": result.ok, **result.to_dict()}, indent=2))
        sys.exit(0 if result.ok else 1)

    for rejection in result.rejections:
        click.echo(f"ERROR [{rejection.code}]: {rejection.message}")
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}")
    for name, value in result.validated.items():
        click.echo(f"  {name}: {value}")

    click.echo()
    click.echo(
        f"Summary: {len(result.validated)} accepted, "
        f"{len(result.rejections)} error(s), {len(result.warnings)} warning(s)"
    )
    sys.exit(0 if result.ok else 1)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def inline(config, source) -> None:
    """Render declarations from SOURCE as a safe style attribute value.

    Declarations that fail validation are dropped silently.
    """
    declarations = load_declarations(read_css(source, config.max_css_bytes))
    click.echo(to_inline_style(declarations))
