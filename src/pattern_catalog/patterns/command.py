"""Command: orders are objects a waiter queues and a chef executes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class OrderCommand(ABC):
    @abstractmethod
    def execute(self) -> str: ...


class BurgerOrder(OrderCommand):
    def execute(self) -> str:
        return "Burger is being prepared!"


class PizzaOrder(OrderCommand):
    def execute(self) -> str:
        return "Pizza coming right up!"


class Chef:
    """Receiver."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self.history: list[OrderCommand] = []

    def take_order(self, order: OrderCommand) -> None:
        self._console.print(order.execute())
        self.history.append(order)


class Waiter:
    """Invoker: holds commands until they are sent to the kitchen."""

    def __init__(self) -> None:
        self._pending: list[OrderCommand] = []

    def take(self, order: OrderCommand) -> None:
        self._pending.append(order)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def send_to(self, chef: Chef) -> int:
        sent = 0
        while self._pending:
            chef.take_order(self._pending.pop(0))
            sent += 1
        return sent


class CommandExample(BaseExample):
    name = "Command"
    category = Category.BEHAVIORAL
    summary = "A waiter queues burger and pizza orders for the chef"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        chef = Chef(console)
        waiter = Waiter()
        waiter.take(BurgerOrder())
        waiter.take(PizzaOrder())
        console.print(f"Waiter queued {waiter.pending} orders")

        sent = waiter.send_to(chef)
        console.check(
            sent == len(chef.history) == 2 and waiter.pending == 0,
            "Chef handled every queued order",
        )
