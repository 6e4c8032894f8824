"""CLI commands: chisel selector / chisel combine -- build selectors from parts."""

from __future__ import annotations

import sys

import click

from chisel.config import ChiselConfig
from chisel.selector import Selector, SelectorBuilder, SelectorError, part_from_label


def _split_part(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}")
    kind, value = raw.split("=", 1)
    return kind, value


def _build(parts: list[str]) -> Selector:
    """Append each 'kind=value' part to a new Selector in the given order."""
    selector = Selector()
    for raw in parts:
        kind, value = _split_part(raw)
        try:
            part = part_from_label(kind)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from None
        selector.append(part, value)
    return selector


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a compound selector from KIND=VALUE parts.

    KIND is one of element, id, class, attribute, pseudo-class or
    pseudo-element. Parts are appended in the order given, e.g.

        chisel selector element=a 'attribute=href$=".png"' pseudo-class=focus
    """
    try:
        built = _build(list(parts))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(built.render())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.pass_obj
def combine(config: ChiselConfig | None, left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator.

    LEFT and RIGHT are comma-separated KIND=VALUE lists, e.g.

        chisel combine element=div,id=main '>' element=p
    """
    builder = SelectorBuilder(config)
    try:
        combined = builder.combine(
            _build(left.split(",")), combinator, _build(right.split(","))
        )
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(combined.render())
