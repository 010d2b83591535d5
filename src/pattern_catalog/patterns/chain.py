"""Chain of Responsibility: magical items pass a spell request along.

Each item either handles the request or says it declines and forwards it.
A request nobody accepts ends the chain with an "unhandled" line.
"""

from __future__ import annotations

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class MagicalItem:
    def __init__(self, label: str, spell: str, effect: str) -> None:
        self.label = label
        self.spell = spell
        self.effect = effect
        self.next_in_chain: MagicalItem | None = None

    def set_next(self, item: MagicalItem) -> MagicalItem:
        """Link *item* after this one and return it, so links can be chained."""
        self.next_in_chain = item
        return item

    def can_handle(self, request: str) -> bool:
        return request == self.spell

    def enchant(self, request: str, console: Console) -> str | None:
        if self.can_handle(request):
            console.print(f"{self.label} accepts '{request}'")
            return self.effect
        console.print(f"{self.label} declines '{request}'")
        if self.next_in_chain is None:
            return None
        return self.next_in_chain.enchant(request, console)


class FireStaff(MagicalItem):
    def __init__(self) -> None:
        super().__init__("FireStaff", "Fireball", "Casting Fireball!")


class IceAmulet(MagicalItem):
    def __init__(self) -> None:
        super().__init__("IceAmulet", "Freeze", "Casting Freeze!")


class ThunderRing(MagicalItem):
    def __init__(self) -> None:
        super().__init__("ThunderRing", "Thunderbolt", "Casting Thunderbolt!")


def build_chain(items: list[MagicalItem]) -> MagicalItem:
    """Link *items* in order and return the head."""
    if not items:
        raise ValueError("A chain needs at least one item")
    for current, following in zip(items, items[1:]):
        current.set_next(following)
    return items[0]


def dispatch(head: MagicalItem, request: str, console: Console) -> str | None:
    """Send *request* down the chain and print the result or the miss."""
    result = head.enchant(request, console)
    if result is None:
        console.print(f"Unhandled request '{request}': no item can cast it")
    else:
        console.print(result)
    return result


class ChainOfResponsibilityExample(BaseExample):
    name = "Chain of Responsibility"
    category = Category.BEHAVIORAL
    summary = "Spell requests travel a staff, an amulet and a ring"

    def __init__(
        self, requests: tuple[str, ...] = ("Fireball", "Freeze", "Thunderbolt", "Heal")
    ) -> None:
        self._requests = requests

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        staff = build_chain([FireStaff(), IceAmulet(), ThunderRing()])
        for request in self._requests:
            dispatch(staff, request, console)
