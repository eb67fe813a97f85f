"""CLI command: cssgradient validate -- check that a CSS value parses."""

from __future__ import annotations

import sys

import click

from cssgradient.cli.source import CSS_ARGUMENT_SETTINGS, read_css
from cssgradient.config import GradientConfig
from cssgradient.errors import GradientError
from cssgradient.parser import parse_gradient


@click.command(context_settings=CSS_ARGUMENT_SETTINGS)
@click.argument("css")
def validate(css: str) -> None:
    """Parse CSS (or "-" for stdin) and report whether it is a valid gradient.

    Exits with code 0 when at least one gradient parsed, 1 otherwise.
    """
    try:
        config = GradientConfig.from_env()
        gradients = parse_gradient(read_css(css), config=config)
    except (GradientError, ValueError) as exc:
        click.echo(f"Invalid: {exc}", err=True)
        sys.exit(1)

    if not gradients:
        click.echo("Invalid: no gradient found", err=True)
        sys.exit(1)

    click.echo(f"OK: {len(gradients)} gradient(s)")
