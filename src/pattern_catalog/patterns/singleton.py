"""Singleton: one shared instance, handed out by an explicit scope.

Instead of a class-level global, the ``Household`` owns the single
``MagicalCat`` for its lifetime and passes the same reference to every
consumer that asks for it.
"""

from __future__ import annotations

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class MagicalCat:
    def __init__(self, console: Console) -> None:
        self._console = console
        self.purr_count = 0

    def purr(self) -> None:
        self.purr_count += 1
        self._console.print("Purrrrr...")


class Household:
    """Scope that creates the cat on first use and keeps it until closed."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self._cat: MagicalCat | None = None

    @property
    def whiskers(self) -> MagicalCat:
        if self._cat is None:
            self._cat = MagicalCat(self._console)
        return self._cat

    def close(self) -> None:
        self._cat = None


class Kid:
    def __init__(self, name: str, cat: MagicalCat, console: Console) -> None:
        self.name = name
        self.cat = cat
        self._console = console

    def pet(self) -> None:
        self._console.print(f"{self.name} pets Whiskers.")
        self.cat.purr()


class SingletonExample(BaseExample):
    name = "Singleton"
    category = Category.CREATIONAL
    summary = "Two kids share the household's one magical cat"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        household = Household(console)
        alice = Kid("Alice", household.whiskers, console)
        bob = Kid("Bob", household.whiskers, console)

        alice.pet()
        bob.pet()

        console.check(alice.cat is bob.cat, "Alice and Bob share the same cat")
        console.check(
            household.whiskers.purr_count == 2, "Whiskers purred 2 times"
        )
        household.close()
