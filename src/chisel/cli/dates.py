"""CLI commands for the date helpers."""

from __future__ import annotations

import math
import sys
from datetime import datetime

import click

from chisel.dates import (
    DateParseError,
    angle_between_clock_hands,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
    time_span_to_string,
)


def _iso(value: str) -> datetime:
    try:
        return parse_iso8601(value)
    except DateParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


@click.command("leap-year")
@click.argument("year", type=int)
def leap_year(year: int) -> None:
    """Print whether YEAR is a leap year."""
    click.echo("true" if is_leap_year(year) else "false")


@click.command("parse-date")
@click.argument("value")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rfc2822", "iso8601"]),
    default="rfc2822",
    show_default=True,
    help="Input date format",
)
def parse_date(value: str, fmt: str) -> None:
    """Parse VALUE and print it in ISO 8601 form."""
    parser = parse_rfc2822 if fmt == "rfc2822" else parse_iso8601
    try:
        parsed = parser(value)
    except DateParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    click.echo(parsed.isoformat())


@click.command()
@click.argument("start")
@click.argument("end")
def timespan(start: str, end: str) -> None:
    """Print the span between two ISO 8601 datetimes as HH:mm:ss.sss."""
    click.echo(time_span_to_string(_iso(start), _iso(end)))


@click.command("clock-angle")
@click.argument("moment")
@click.option("--degrees", is_flag=True, help="Print degrees instead of radians")
def clock_angle(moment: str, degrees: bool) -> None:
    """Print the angle between the clock hands at an ISO 8601 MOMENT (UTC)."""
    angle = angle_between_clock_hands(_iso(moment))
    if degrees:
        click.echo(f"{math.degrees(angle):g}")
    else:
        click.echo(f"{angle:.6f}")
