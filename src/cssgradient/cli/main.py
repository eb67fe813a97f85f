"""cssgradient CLI entry point: Click group with subcommands."""

import logging

import click

from cssgradient import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssgradient")
@click.option("-v", "--verbose", is_flag=True, help="Log parsing and geometry details")
def cli(verbose: bool) -> None:
    """cssgradient - convert CSS gradients into design-tool gradient paints."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssgradient.cli.convert import convert  # noqa: E402
from cssgradient.cli.inspect import inspect  # noqa: E402
from cssgradient.cli.serve import serve  # noqa: E402
from cssgradient.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(convert)
cli.add_command(serve)
