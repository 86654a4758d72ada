"""A template method for preparing beverages."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class BeverageTemplate(ABC):
    """Fixes the order of the steps; subclasses supply the brewing details."""

    def prepare(self) -> list[str]:
        """Run the steps in order, print them and return them."""
        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        if self.need_condiments():
            steps.append(self.add_condiments())
        for step in steps:
            print(step, file=sys.stderr)
        return steps

    def boil_water(self) -> str:
        return "Boiling water"

    def pour_in_cup(self) -> str:
        return "Pouring into cup"

    @abstractmethod
    def brew(self) -> str:
        """Return the brewing step."""

    @abstractmethod
    def add_condiments(self) -> str:
        """Return the condiments step."""

    def need_condiments(self) -> bool:
        """Hook deciding whether condiments are added; yes by default."""
        return True


class Coffee(BeverageTemplate):
    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"

    def need_condiments(self) -> bool:
        return False


class Tea(BeverageTemplate):
    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"

    def need_condiments(self) -> bool:
        return False


class Milk(BeverageTemplate):
    def brew(self) -> str:
        return "Heating the milk"

    def add_condiments(self) -> str:
        return "Adding sugar"

    def need_condiments(self) -> bool:
        return False