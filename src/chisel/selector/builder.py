"""CSS selector builder: a chainable Selector and the SelectorBuilder facade.

Each compound selector is made of element, id, class, attribute,
pseudo-class and pseudo-element parts, in that order:

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class parts may repeat. Two selectors can be
joined with a combinator (' ', '+', '~', '>'):

    combine(element("div").id("main"), "+", element("table")).render()
    -> 'div#main + table'
"""

from __future__ import annotations

import logging

from chisel.config import ChiselConfig
from chisel.selector.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorOrderError,
)
from chisel.selector.model import COMBINATORS, NO_STAGE, PART_RULES, Part

__all__ = ["Selector", "SelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)


class Selector:
    """Mutable accumulator for one compound selector.

    ``render()`` returns the accumulated text and clears it, but the stage
    and the once-only guards survive: a rendered selector that already had
    an element still refuses a second one.
    """

    def __init__(self) -> None:
        self._value = ""
        self._used: set[Part] = set()
        self.stage: int = NO_STAGE

    # --- guards ---------------------------------------------------------------

    @property
    def has_element(self) -> bool:
        return Part.ELEMENT in self._used

    @property
    def has_id(self) -> bool:
        return Part.ID in self._used

    @property
    def has_pseudo_element(self) -> bool:
        return Part.PSEUDO_ELEMENT in self._used

    # --- appends --------------------------------------------------------------

    def append(self, part: Part, value: str) -> Selector:
        """Append a part, enforcing uniqueness and ordering rules."""
        rule = PART_RULES[part]
        if rule.unique and part in self._used:
            raise DuplicateSelectorPartError(part)
        if part < self.stage:
            raise SelectorOrderError(part, self.stage)

        self._value += rule.format(value)
        self.stage = int(part)
        if rule.unique:
            self._used.add(part)
        log.debug("Appended %s %r -> %r", part.label, value, self._value)
        return self

    def element(self, value: str) -> Selector:
        return self.append(Part.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(Part.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(Part.CLASS, value)

    def attribute(self, value: str) -> Selector:
        return self.append(Part.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(Part.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(Part.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        """Return the accumulated selector text and clear it."""
        selector, self._value = self._value, ""
        log.debug("Rendered %r", selector)
        return selector

    def __repr__(self) -> str:
        return f"Selector(value={self._value!r}, stage={self.stage})"


class SelectorBuilder:
    """Facade creating a fresh Selector per entry call."""

    def __init__(self, config: ChiselConfig | None = None) -> None:
        self.config = config or ChiselConfig()

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attribute(self, value: str) -> Selector:
        return Selector().attribute(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors as '<left> <combinator> <right>'.

        Both operands are rendered, which clears them. The result is a plain
        concatenation and is not checked against the part rules.
        """
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise InvalidCombinatorError(combinator)
        combined = Selector()
        combined._value = f"{left.render()} {combinator} {right.render()}"
        log.debug("Combined with %r -> %r", combinator, combined._value)
        return combined


css_selector_builder = SelectorBuilder()
