"""Builder: a director assembles a pizza step by step through a builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation


@dataclass(frozen=True)
class Pizza:
    dough: str
    sauce: str
    toppings: tuple[str, ...]


class PizzaBuilder(Protocol):
    def set_dough(self, dough: str) -> None: ...
    def set_sauce(self, sauce: str) -> None: ...
    def add_topping(self, topping: str) -> None: ...
    def build(self) -> Pizza: ...


class MargheritaPizzaBuilder:
    def __init__(self) -> None:
        self._dough = ""
        self._sauce = ""
        self._toppings: list[str] = []

    def set_dough(self, dough: str) -> None:
        self._dough = dough

    def set_sauce(self, sauce: str) -> None:
        self._sauce = sauce

    def add_topping(self, topping: str) -> None:
        self._toppings.append(topping)

    def build(self) -> Pizza:
        """Raises PatternViolation if the dough step was skipped."""
        if not self._dough:
            raise PatternViolation("Cannot bake a pizza without dough")
        return Pizza(dough=self._dough, sauce=self._sauce, toppings=tuple(self._toppings))


class Pizzeria:
    """Director: knows the order of the steps, not the product's internals."""

    def construct_pizza(self, builder: PizzaBuilder) -> Pizza:
        builder.set_dough("Thin Crust")
        builder.set_sauce("Tomato")
        builder.add_topping("Mozzarella")
        builder.add_topping("Basil")
        return builder.build()


class BuilderExample(BaseExample):
    name = "Builder"
    category = Category.CREATIONAL
    summary = "A pizzeria directs a builder through the margherita steps"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        margherita = Pizzeria().construct_pizza(MargheritaPizzaBuilder())
        console.print(f"Yum! You've built a {', '.join(margherita.toppings)} Pizza!")
        console.print(f"Dough: {margherita.dough}, sauce: {margherita.sauce}")
        console.check(len(margherita.toppings) == 2, "Margherita has 2 toppings")
