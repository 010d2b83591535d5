"""Observer: the town crier notifies every registered listener on change."""

from __future__ import annotations

from typing import Protocol

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class GossipListener(Protocol):
    def gossip_did_change(self, latest_gossip: str) -> None: ...


class TownCrier:
    """Subject. Setting ``latest_gossip`` notifies listeners in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[GossipListener] = []
        self._latest_gossip = ""

    @property
    def latest_gossip(self) -> str:
        return self._latest_gossip

    @latest_gossip.setter
    def latest_gossip(self, value: str) -> None:
        self._latest_gossip = value
        self._notify_listeners()

    def add_listener(self, listener: GossipListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GossipListener) -> None:
        self._listeners.remove(listener)

    def _notify_listeners(self) -> None:
        for listener in list(self._listeners):
            listener.gossip_did_change(self._latest_gossip)


class NosyNeighbor:
    def __init__(self, console: Console) -> None:
        self._console = console
        self.heard: list[str] = []

    def gossip_did_change(self, latest_gossip: str) -> None:
        self.heard.append(latest_gossip)
        self._console.print(f"Did you hear? {latest_gossip}")


class ObserverExample(BaseExample):
    name = "Observer"
    category = Category.BEHAVIORAL
    summary = "One neighbor hears the town crier's latest gossip"

    def __init__(self, gossip: str = "Mr. Smith got a new hat!") -> None:
        self._gossip = gossip

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        town_crier = TownCrier()
        miss_penny = NosyNeighbor(console)
        town_crier.add_listener(miss_penny)

        town_crier.latest_gossip = self._gossip

        console.check(miss_penny.heard == [self._gossip], "Miss Penny heard the news once")
