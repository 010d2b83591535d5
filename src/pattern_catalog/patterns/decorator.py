"""Decorator: accessories wrap an outfit and add to its description and cost."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation


class Outfit(ABC):
    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def cost(self) -> float: ...


class BasicOutfit(Outfit):
    def description(self) -> str:
        return "Basic jeans and tee"

    def cost(self) -> float:
        return 50.0


class Accessory(Outfit):
    def __init__(self, outfit: Outfit, description: str, cost: float) -> None:
        if cost < 0:
            raise PatternViolation(f"Accessory '{description}' has a negative cost")
        self._outfit = outfit
        self.accessory_description = description
        self.accessory_cost = cost

    def description(self) -> str:
        return f"{self._outfit.description()}, accessorized with {self.accessory_description}"

    def cost(self) -> float:
        return self._outfit.cost() + self.accessory_cost


class DecoratorExample(BaseExample):
    name = "Decorator"
    category = Category.STRUCTURAL
    summary = "A basic outfit is layered with a scarf and then a hat"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        outfit: Outfit = BasicOutfit()
        for description, cost in (("a snazzy scarf", 20.0), ("a dapper hat", 35.0)):
            outfit = Accessory(outfit, description=description, cost=cost)
            console.print(outfit.description())
            console.print(f"{outfit.cost():.1f}")

        console.check(outfit.cost() == 105.0, "Layered outfit costs 105.0")
