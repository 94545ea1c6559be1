"""stylegate CLI entry point: Click group with subcommands."""

import logging

import click

from stylegate import __version__
from stylegate.config import StyleGateConfig
from stylegate.errors import StyleGateError

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="stylegate")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: STYLEGATE_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """stylegate - security and WCAG compliance gate for untrusted CSS."""
    try:
        config = StyleGateConfig.from_env()
    except StyleGateError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from stylegate.cli.validate import inline, validate  # noqa: E402
from stylegate.cli.check import check, contrast, report, suggest  # noqa: E402
from stylegate.cli.serve import serve  # noqa: E402

cli.add_command(validate)
cli.add_command(inline)
cli.add_command(check)
cli.add_command(suggest)
cli.add_command(contrast)
cli.add_command(report)
cli.add_command(serve)
