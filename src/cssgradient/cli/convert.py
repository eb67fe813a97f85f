"""CLI command: cssgradient convert -- print gradient paints as JSON."""

from __future__ import annotations

import json
import sys

import click

from cssgradient.cli.source import CSS_ARGUMENT_SETTINGS, read_css
from cssgradient.config import GradientConfig
from cssgradient.errors import GradientError
from cssgradient.geometry import to_paint


@click.command(context_settings=CSS_ARGUMENT_SETTINGS)
@click.argument("css")
@click.option("--width", type=float, default=None, help="Target shape width")
@click.option("--height", type=float, default=None, help="Target shape height")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
def convert(css: str, width: float | None, height: float | None, indent: int) -> None:
    """Convert CSS (or "-" for stdin) into gradient paints.

    Width and height default to CSSGRADIENT_WIDTH / CSSGRADIENT_HEIGHT, or 1.
    """
    try:
        config = GradientConfig.from_env()
        paints = to_paint(read_css(css), width, height, config=config)
    except (GradientError, ValueError) as exc:
        click.echo(f"Invalid: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps([paint.to_dict() for paint in paints], indent=indent))
