"""Selector part model: categories, their ordinals and token formats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


NO_STAGE = 0

COMBINATORS = frozenset({" ", "+", "~", ">"})


class Part(IntEnum):
    """Selector part categories, valued by their required position."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'pseudo-class'."""
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True)
class PartRule:
    """How a part is written into the selector and whether it may repeat."""

    prefix: str
    suffix: str = ""
    unique: bool = False

    def format(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


PART_RULES: dict[Part, PartRule] = {
    Part.ELEMENT: PartRule(prefix="", unique=True),
    Part.ID: PartRule(prefix="#", unique=True),
    Part.CLASS: PartRule(prefix="."),
    Part.ATTRIBUTE: PartRule(prefix="[", suffix="]"),
    Part.PSEUDO_CLASS: PartRule(prefix=":"),
    Part.PSEUDO_ELEMENT: PartRule(prefix="::", unique=True),
}


def part_from_label(label: str) -> Part:
    """Look up a part by its label ('element', 'pseudo-class', ...).

    Underscores are accepted in place of dashes.
    """
    key = label.strip().upper().replace("-", "_")
    try:
        return Part[key]
    except KeyError:
        raise ValueError(f"Unknown selector part: {label!r}") from None
