"""Reading CSS input for CLI commands."""

from __future__ import annotations

import json
from typing import IO, Any

import click

from stylegate.stylesheet import parse_declarations


def read_css(source: IO[str], max_bytes: int) -> str:
    text = source.read()
    if len(text.encode("utf-8")) > max_bytes:
        raise click.ClickException(f"CSS input exceeds {max_bytes} bytes")
    return text


def load_declarations(text: str) -> dict[str, Any]:
    """Parse a JSON object, or failing that a ``prop: value;`` block."""
    stripped = text.strip()
    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            pass
        else:
            return data
    return parse_declarations(stripped)
