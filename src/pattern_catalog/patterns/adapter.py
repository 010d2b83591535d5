"""Adapter: a unicorn is made to answer the dragon interface."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation


@runtime_checkable
class Dragon(Protocol):
    def roar(self) -> str: ...


@runtime_checkable
class Unicorn(Protocol):
    def sparkle_talk(self) -> str: ...


class FireDragon:
    def roar(self) -> str:
        return "Blazing Roar!"


class RainbowUnicorn:
    def sparkle_talk(self) -> str:
        return "Twinkle Chat!"


class UnicornAdapter:
    """Presents any ``Unicorn`` as a ``Dragon``."""

    def __init__(self, unicorn: Any) -> None:
        if not isinstance(unicorn, Unicorn):
            raise PatternViolation(
                f"UnicornAdapter cannot adapt {type(unicorn).__name__}: "
                "it has no sparkle_talk()"
            )
        self._unicorn = unicorn

    def roar(self) -> str:
        return self._unicorn.sparkle_talk()


class AdapterExample(BaseExample):
    name = "Adapter"
    category = Category.STRUCTURAL
    summary = "A rainbow unicorn roars through a dragon adapter"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        ruby = FireDragon()
        console.print(ruby.roar())

        starlight = UnicornAdapter(RainbowUnicorn())
        console.print(starlight.roar())
        console.check(
            isinstance(starlight, Dragon),
            "Adapted unicorn satisfies the Dragon interface",
        )
