"""CLI command: stylegate serve -- run the HTTP API."""

from __future__ import annotations

from dataclasses import replace

import click


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: STYLEGATE_HOST or 127.0.0.1)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: STYLEGATE_PORT or 5000)")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.pass_obj
def serve(config, host: str | None, port: int | None, debug: bool) -> None:
    """Start the stylegate web server."""
    from stylegate.web.app import create_app

    config = replace(config, host=host or config.host, port=port or config.port)
    app = create_app(config)
    click.echo(f"Starting stylegate on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
