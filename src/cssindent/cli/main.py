"""cssindent CLI entry point: Click group with subcommands."""

import logging

import click

from cssindent import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssindent")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cssindent - indentation linter for stylesheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssindent.cli.check import check  # noqa: E402
from cssindent.cli.inspect import inspect  # noqa: E402

cli.add_command(check)
cli.add_command(inspect)
