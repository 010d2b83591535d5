"""Strategy: a character's attack is delegated to a swappable strategy."""

from __future__ import annotations

from typing import Protocol

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class BattleStrategy(Protocol):
    def execute(self) -> str: ...


class StealthAttack:
    def execute(self) -> str:
        return "Attacking with stealth!"


class DirectCombat:
    def execute(self) -> str:
        return "Engaging in direct combat!"


class GameCharacter:
    def __init__(self, name: str, strategy: BattleStrategy) -> None:
        self.name = name
        self.strategy = strategy

    def attack(self) -> str:
        return f"{self.name}: {self.strategy.execute()}"


class StrategyExample(BaseExample):
    name = "Strategy"
    category = Category.BEHAVIORAL
    summary = "A ninja and a knight attack, then the ninja changes tactics"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        ninja = GameCharacter("Ninja", StealthAttack())
        knight = GameCharacter("Knight", DirectCombat())
        console.print(ninja.attack())
        console.print(knight.attack())

        before = ninja.attack()
        ninja.strategy = DirectCombat()
        console.print(ninja.attack())
        console.check(ninja.attack() != before, "Switching strategy changes the ninja's attack")
