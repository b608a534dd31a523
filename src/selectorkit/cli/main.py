"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selectorkit - build CSS selectors from the command line."""
    config = SelectorKitConfig.from_env()
    level = "DEBUG" if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build, combinators  # noqa: E402
from selectorkit.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(combinators)
cli.add_command(area)
