"""CLI command: cssgradient inspect -- display parsed gradient structure."""

from __future__ import annotations

import sys

import click

from cssgradient.cli.source import CSS_ARGUMENT_SETTINGS, read_css
from cssgradient.config import GradientConfig
from cssgradient.errors import GradientError
from cssgradient.model.gradient import (
    AngleLine,
    AngularColorStop,
    ColorHint,
    ConicGradient,
    GradientNode,
    LinearGradient,
)
from cssgradient.parser import parse_gradient


def _color(stop: object) -> str:
    rgba = stop.rgba  # type: ignore[attr-defined]
    return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {rgba.a:g})"


def _describe_stop(stop: object) -> str:
    if isinstance(stop, ColorHint):
        return f"hint {stop.hint}"
    if isinstance(stop, AngularColorStop):
        if stop.angle is None:
            return _color(stop)
        if isinstance(stop.angle, tuple):
            return f"{_color(stop)} {stop.angle[0]} {stop.angle[1]}"
        return f"{_color(stop)} {stop.angle}"
    position = stop.position  # type: ignore[attr-defined]
    return _color(stop) if position is None else f"{_color(stop)} {position}"


def _describe(gradient: GradientNode) -> list[str]:
    lines = [f"Kind:     {gradient.kind.value}"]
    if isinstance(gradient, LinearGradient):
        line = gradient.gradient_line
        if isinstance(line, AngleLine):
            lines.append(f"Angle:    {line.degrees:g}deg")
        else:
            lines.append(f"Line:     to {line.value}")
    elif isinstance(gradient, ConicGradient):
        lines.append(f"From:     {gradient.angle or 0:g}deg")
        lines.append(f"Position: {gradient.position}")
    else:
        size = gradient.size
        if isinstance(size, tuple):
            size = " ".join(str(length) for length in size)
        lines.append(f"Shape:    {gradient.ending_shape} {size}")
        lines.append(f"Position: {gradient.position}")
    lines.append("Stops:")
    lines.extend(f"  {_describe_stop(stop)}" for stop in gradient.color_stops)
    return lines


@click.command(context_settings=CSS_ARGUMENT_SETTINGS)
@click.argument("css")
def inspect(css: str) -> None:
    """Parse CSS (or "-" for stdin) and display each gradient layer."""
    try:
        config = GradientConfig.from_env()
        gradients = parse_gradient(read_css(css), config=config)
    except (GradientError, ValueError) as exc:
        click.echo(f"Invalid: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Gradients: {len(gradients)}")
    for index, gradient in enumerate(gradients):
        click.echo()
        click.echo(f"[{index}]")
        for line in _describe(gradient):
            click.echo(line)
