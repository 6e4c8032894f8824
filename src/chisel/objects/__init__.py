"""Small object helpers: a Rectangle value and JSON round-tripping."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "to_json", "from_json"]

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def _plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return compact JSON for *obj*; dataclasses and plain objects serialize their fields."""
    return json.dumps(obj, separators=(",", ":"), default=_plain)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from JSON without calling its __init__.

    The decoded mapping becomes the instance's attributes, so methods of
    *cls* work on the result:

        from_json(Rectangle, '{"width":10,"height":20}').area() -> 200
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    return obj
