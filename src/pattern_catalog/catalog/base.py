"""Base example class and the console it prints to.

All examples inherit from BaseExample and implement demonstrate().
An example never writes to stdout: it prints to a ``Console`` that
records ``Event`` objects, so the runner and the tests can inspect
exactly what happened.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.events import Event


class Console:
    """Event sink standing in for ``print``."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def print(self, text: str) -> None:
        self._events.append(Event.printed(text))

    def check(self, condition: bool, message: str) -> bool:
        """Record an assertion about the object graph and return it."""
        self._events.append(Event.assertion(message, bool(condition)))
        return bool(condition)

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def lines(self) -> list[str]:
        return [e.payload for e in self._events]


@runtime_checkable
class PatternExample(Protocol):
    """What the registry and runner need from an example."""

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> Category: ...

    def run(self, ctx: ExampleContext | None = None) -> tuple[Event, ...]: ...


class BaseExample(ABC):
    """Abstract base for all pattern demonstrations.

    Subclasses set ``name``, ``category`` and ``summary`` and implement
    demonstrate(). They must not keep state on ``self`` between runs:
    every object the demonstration uses is built inside demonstrate().
    """

    name: ClassVar[str] = ""
    category: ClassVar[Category]
    summary: ClassVar[str] = ""

    def run(self, ctx: ExampleContext | None = None) -> tuple[Event, ...]:
        """Run the demonstration once and return the events it produced.

        Raises PatternViolation with ``events`` set to whatever was
        emitted before the violation.
        """
        console = Console()
        try:
            self.demonstrate(console, ctx or ExampleContext())
        except PatternViolation as exc:
            exc.events = console.events
            raise
        return console.events

    @abstractmethod
    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        """Build the object graph and exercise the pattern once."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
