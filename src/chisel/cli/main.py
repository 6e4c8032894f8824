"""Chisel CLI entry point: Click group with subcommands."""

import logging

import click

from chisel import __version__
from chisel.config import ChiselConfig


@click.group()
@click.version_option(version=__version__, prog_name="chisel")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--strict-combinators/--no-strict-combinators",
    default=False,
    help="Reject combinators other than ' ', '+', '~', '>'",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, strict_combinators: bool) -> None:
    """Chisel - CSS selector builder with date and time helpers."""
    config = ChiselConfig(
        strict_combinators=strict_combinators,
        log_level="DEBUG" if verbose else ChiselConfig.log_level,
    )
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("chisel").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from chisel.cli.selector import combine, selector  # noqa: E402
from chisel.cli.dates import clock_angle, leap_year, parse_date, timespan  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(leap_year)
cli.add_command(parse_date)
cli.add_command(timespan)
cli.add_command(clock_angle)
