"""Factory Method: callers ask for a dish by cuisine, the factory picks the class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation


class Dish(ABC):
    @abstractmethod
    def prepare(self, console: Console) -> None: ...


class Pasta(Dish):
    def prepare(self, console: Console) -> None:
        console.print("Cooking Pasta with Marinara sauce!")


class Sushi(Dish):
    def prepare(self, console: Console) -> None:
        console.print("Rolling up some fresh Tuna Sushi!")


class CuisineType(str, Enum):
    ITALIAN = "italian"
    JAPANESE = "japanese"
    FRENCH = "french"  # On the menu card, no chef yet


class DishFactory:
    _MENU: dict[CuisineType, type[Dish]] = {
        CuisineType.ITALIAN: Pasta,
        CuisineType.JAPANESE: Sushi,
    }

    @classmethod
    def make_dish(cls, cuisine: CuisineType) -> Dish:
        dish_cls = cls._MENU.get(cuisine)
        if dish_cls is None:
            raise PatternViolation(f"No dish registered for cuisine '{cuisine.value}'")
        return dish_cls()


class FactoryMethodExample(BaseExample):
    name = "Factory Method"
    category = Category.CREATIONAL
    summary = "A dish factory decides which dish class to cook"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        for cuisine in (CuisineType.JAPANESE, CuisineType.ITALIAN):
            DishFactory.make_dish(cuisine).prepare(console)

        console.check(
            isinstance(DishFactory.make_dish(CuisineType.JAPANESE), Sushi),
            "A japanese order produces Sushi",
        )
