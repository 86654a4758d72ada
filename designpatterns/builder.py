"""Builders for cars (fluent style) and houses (director style)."""

from __future__ import annotations

import dataclasses
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Car:
    """A finished car."""

    wheel: int = 0
    engine: str = ""
    max_speed: int = 0
    brand: str = ""

    def brief(self) -> str:
        """Print a short description of the car and return it."""
        text = (
            f"Brand:  {self.brand}\n"
            f"MaxSpeed:  {self.max_speed}\n"
            f"Engine:  {self.engine}\n"
            f"Wheel:  {self.wheel}\n"
        )
        sys.stderr.write(text)
        return text


class CarStudio:
    """Fluent builder that assembles a :class:`Car`."""

    def __init__(self) -> None:
        self._proto = Car()

    def wheel(self, wheel: int) -> CarStudio:
        self._proto.wheel = wheel
        return self

    def engine(self, engine: str) -> CarStudio:
        self._proto.engine = engine
        return self

    def speed(self, speed: int) -> CarStudio:
        self._proto.max_speed = speed
        return self

    def brand(self, brand: str) -> CarStudio:
        self._proto.brand = brand
        return self

    def build(self) -> Car:
        """Return a new car with the settings chosen so far."""
        return dataclasses.replace(self._proto)


@dataclass
class House:
    """A finished house."""

    walls: str = ""
    door: str = ""
    windows: str = ""
    has_garage: bool = False

    def show(self) -> str:
        """Print the structure of the house and return the printed line."""
        garage = "true" if self.has_garage else "false"
        line = (
            f"房屋结构：墙壁={self.walls}, 门={self.door}, "
            f"窗户={self.windows}, 车库={garage}"
        )
        print(line)
        return line


class HouseBuilder(ABC):
    """Builds a house step by step."""

    def __init__(self) -> None:
        self._house = House()

    @property
    def house(self) -> House:
        """A copy of the house built so far."""
        return dataclasses.replace(self._house)

    @abstractmethod
    def build_walls(self) -> None:
        """Put up the walls."""

    @abstractmethod
    def install_door(self) -> None:
        """Install the door."""

    @abstractmethod
    def install_windows(self) -> None:
        """Install the windows."""

    @abstractmethod
    def build_garage(self) -> None:
        """Decide on and build the garage."""


class WoodenHouseBuilder(HouseBuilder):
    """Builds a wooden house with a garage."""

    def build_walls(self) -> None:
        self._house.walls = "木墙"

    def install_door(self) -> None:
        self._house.door = "木门"

    def install_windows(self) -> None:
        self._house.windows = "木窗"

    def build_garage(self) -> None:
        self._house.has_garage = True


class BrickHouseBuilder(HouseBuilder):
    """Builds a brick house without a garage."""

    def build_walls(self) -> None:
        self._house.walls = "砖墙"

    def install_door(self) -> None:
        self._house.door = "铁门"

    def install_windows(self) -> None:
        self._house.windows = "玻璃窗"

    def build_garage(self) -> None:
        self._house.has_garage = False


@dataclass
class HouseDirector:
    """Runs a house builder through the construction steps in order."""

    builder: HouseBuilder | None = field(default=None)

    def construct_house(self) -> House:
        if self.builder is None:
            raise ValueError("no house builder set")
        self.builder.build_walls()
        self.builder.install_door()
        self.builder.install_windows()
        self.builder.build_garage()
        return self.builder.house