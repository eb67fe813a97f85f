"""CLI command: cssgradient serve -- run the HTTP API."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the validate/convert HTTP API."""
    from cssgradient.config import GradientConfig
    from cssgradient.web.app import create_app

    try:
        config = GradientConfig.from_env()
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="CSSGRADIENT_* environment") from exc

    app = create_app(config)
    click.echo(f"Starting cssgradient on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
