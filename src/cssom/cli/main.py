"""cssom CLI entry point: Click group with subcommands."""

import logging

import click

from cssom import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssom")
@click.option("--verbose", "-v", is_flag=True, help="Log parser activity to stderr.")
def cli(verbose: bool) -> None:
    """cssom - parse CSS into a position-annotated object model tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssom.cli.dump import dump  # noqa: E402
from cssom.cli.inspect import inspect  # noqa: E402
from cssom.cli.validate import validate  # noqa: E402

cli.add_command(inspect)
cli.add_command(validate)
cli.add_command(dump)
