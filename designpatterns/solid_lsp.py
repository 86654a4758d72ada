"""Substitutable birds and shapes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Bird(ABC):
    """A bird that reports how it moves."""

    @abstractmethod
    def fly(self) -> str:
        """Describe the bird's flight."""


class Sparrow(Bird):
    def fly(self) -> str:
        return "麻雀在飞翔！"


class Penguin(Bird):
    def fly(self) -> str:
        return "企鹅不会飞，但能在水里游泳！"


def let_bird_fly(bird: Bird) -> str:
    """Print and return what any bird does when asked to fly."""
    message = bird.fly()
    print(message)
    return message


class Shape(ABC):
    """A shape with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Square(Shape):
    """A square, built from a rectangle with equal sides."""

    side: float

    @property
    def rectangle(self) -> Rectangle:
        return Rectangle(self.side, self.side)

    def area(self) -> float:
        return self.rectangle.area()


def print_area(shape: Shape) -> str:
    """Print and return the area of any shape to two decimals."""
    line = f"面积: {shape.area():.2f}"
    print(line)
    return line


def main(argv: list[str] | None = None) -> int:
    let_bird_fly(Sparrow())
    let_bird_fly(Penguin())
    print_area(Rectangle(3, 4))
    print_area(Square(5))
    return 0


if __name__ == "__main__":
    sys.exit(main())