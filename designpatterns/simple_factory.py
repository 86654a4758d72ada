"""A simple factory that creates shapes by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class ShapeType(str, Enum):
    """Kinds of shape the factory can create."""

    CIRCLE = "circle"
    SQUARE = "square"


class Shape(ABC):
    """A drawable shape."""

    @abstractmethod
    def draw(self) -> str:
        """Return a description of drawing the shape."""


class Circle(Shape):
    def draw(self) -> str:
        return "Drawing a Circle"


class Square(Shape):
    def draw(self) -> str:
        return "Drawing a Square"


_SHAPES: dict[ShapeType, type[Shape]] = {
    ShapeType.CIRCLE: Circle,
    ShapeType.SQUARE: Square,
}


def new_shape(shape_type: ShapeType | str) -> Shape:
    """Create the shape for ``shape_type``; raise ValueError for unknown types."""
    try:
        kind = ShapeType(shape_type)
    except ValueError:
        raise ValueError(f"unknown shape type: {shape_type!r}") from None
    return _SHAPES[kind]()