from chisel.selector.builder import Selector, SelectorBuilder, css_selector_builder
from chisel.selector.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorError,
    SelectorOrderError,
)
from chisel.selector.model import COMBINATORS, PART_RULES, Part, PartRule, part_from_label

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attribute = css_selector_builder.attribute
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

__all__ = [
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "InvalidCombinatorError",
    "Part",
    "PartRule",
    "PART_RULES",
    "COMBINATORS",
    "part_from_label",
    "element",
    "id",
    "class_",
    "attribute",
    "pseudo_class",
    "pseudo_element",
    "combine",
]
