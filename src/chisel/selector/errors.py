"""Selector builder error types."""

from __future__ import annotations

from chisel.selector.model import Part


class SelectorError(Exception):
    """Base error for selector builder usage violations."""

    def __init__(self, message: str, *, part: Part | None = None) -> None:
        super().__init__(message)
        self.part = part


class DuplicateSelectorPartError(SelectorError):
    """An element, id or pseudo-element was supplied twice on one selector."""

    def __init__(self, part: Part) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector",
            part=part,
        )


class SelectorOrderError(SelectorError):
    """A part was supplied after a part that must follow it."""

    def __init__(self, part: Part, stage: int) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            part=part,
        )
        self.stage = stage


class InvalidCombinatorError(SelectorError):
    """Raised in strict mode when a combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: str) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}")
        self.combinator = combinator
