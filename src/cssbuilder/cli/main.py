"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CSSBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    default=CSSBuilderConfig().log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """cssbuilder - compose CSS selectors and canonical JSON from the shell."""
    logging.basicConfig(level=log_level.upper())


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.objects import area, canonical  # noqa: E402

cli.add_command(build)
cli.add_command(canonical)
cli.add_command(area)
