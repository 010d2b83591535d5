"""Memento: save and restore an object's state without exposing it.

Two demonstrations:

* ``MementoExample``: an originator whose state changes to fresh
  identifiers, a caretaker that backs it up and rolls it back.
* ``UndoStackExample``: snapshots of a text view kept on an undo stack.

State strings come from ``ctx.ids`` and memento dates from ``ctx.clock``.
The demonstrations advance the clock by ``STEP_SECONDS`` between edits, so
every saved memento carries a distinct, repeatable time under ``SimClock``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.collaborators import TextView
from pattern_catalog.core.clock import IClock
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.ids import IIdSource, short_id

STEP_SECONDS = 1


class Memento(Protocol):
    """Metadata a caretaker may see. The saved state stays hidden."""

    @property
    def name(self) -> str: ...

    @property
    def date(self) -> datetime: ...


# ---------------------------------------------------------------------------
# Conceptual
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConcreteMemento:
    state: str
    date: datetime

    @property
    def name(self) -> str:
        return f"{self.state} {self.date:%H:%M:%S}"


class Originator:
    def __init__(self, state: str, ids: IIdSource, clock: IClock, console: Console) -> None:
        self._state = state
        self._ids = ids
        self._clock = clock
        self._console = console
        console.print(f"Originator: My initial state is: {state}")

    @property
    def state(self) -> str:
        return self._state

    def do_something(self) -> None:
        self._console.print("Originator: I'm doing something important.")
        self._state = short_id(self._ids)
        self._console.print(f"Originator: and my state has changed to: {self._state}")

    def save(self) -> Memento:
        return ConcreteMemento(state=self._state, date=self._clock.now())

    def restore(self, memento: Memento) -> None:
        if not isinstance(memento, ConcreteMemento):
            raise PatternViolation(
                f"Originator cannot restore from {type(memento).__name__}"
            )
        self._state = memento.state
        self._console.print(f"Originator: My state has changed to: {self._state}")


class Caretaker:
    """Works with mementos only through the ``Memento`` protocol."""

    def __init__(self, originator: Originator, console: Console) -> None:
        self._originator = originator
        self._console = console
        self._mementos: list[Memento] = []

    def backup(self) -> None:
        self._console.print("Caretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())

    def undo(self) -> None:
        if not self._mementos:
            return
        memento = self._mementos.pop()
        self._console.print(f"Caretaker: Restoring state to: {memento.name}")
        self._originator.restore(memento)

    def show_history(self) -> None:
        self._console.print("Caretaker: Here's the list of mementos:")
        for memento in self._mementos:
            self._console.print(memento.name)


class MementoExample(BaseExample):
    name = "Memento"
    category = Category.BEHAVIORAL
    summary = "A caretaker backs up an originator three times and rolls back twice"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        originator = Originator("Super-duper-super-puper-super.", ctx.ids, ctx.clock, console)
        caretaker = Caretaker(originator, console)

        states: list[str] = []
        for _ in range(3):
            caretaker.backup()
            originator.do_something()
            states.append(originator.state)
            ctx.clock.advance(STEP_SECONDS)

        caretaker.show_history()

        console.print("Client: Now, let's rollback!")
        caretaker.undo()
        console.print("Client: Once more!")
        caretaker.undo()

        console.check(
            originator.state == states[0],
            "Two undos bring back the first changed state",
        )


# ---------------------------------------------------------------------------
# Undo stack over a text view
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextViewMemento:
    text: str
    text_color: str | None
    selected_range: tuple[int, int]
    date: datetime = field(compare=False)

    @property
    def name(self) -> str:
        return self.text

    def describe(self) -> str:
        location, length = self.selected_range
        return (
            f"Text: {self.text} | Color: {self.text_color or 'default'} | "
            f"Range: ({location}, {length}) | Date: {self.date:%H:%M:%S}"
        )


def snapshot(view: TextView, clock: IClock) -> TextViewMemento:
    return TextViewMemento(
        text=view.text,
        text_color=view.text_color,
        selected_range=view.selected_range,
        date=clock.now(),
    )


def restore(view: TextView, memento: Memento) -> None:
    if not isinstance(memento, TextViewMemento):
        raise PatternViolation(f"TextView cannot restore from {type(memento).__name__}")
    view.text = memento.text
    view.text_color = memento.text_color
    view.selected_range = memento.selected_range


class UndoStack:
    def __init__(self, view: TextView, clock: IClock) -> None:
        self._view = view
        self._clock = clock
        self._mementos: list[TextViewMemento] = []

    def save(self) -> None:
        self._mementos.append(snapshot(self._view, self._clock))

    def undo(self) -> None:
        if not self._mementos:
            return
        restore(self._view, self._mementos.pop())

    def __len__(self) -> int:
        return len(self._mementos)

    def describe(self) -> str:
        return "\n".join(m.describe() for m in self._mementos)


class UndoStackExample(BaseExample):
    name = "Memento (undo stack)"
    category = Category.BEHAVIORAL
    summary = "Text view snapshots on an undo stack, undone twice"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        text_view = TextView()
        undo_stack = UndoStack(text_view, ctx.clock)

        text_view.text = "First Change"
        undo_stack.save()
        ctx.clock.advance(STEP_SECONDS)

        text_view.text = "Second Change"
        undo_stack.save()
        ctx.clock.advance(STEP_SECONDS)

        text_view.text = text_view.text + " & Third Change"
        text_view.text_color = "red"
        undo_stack.save()

        console.print(undo_stack.describe())

        console.print("Client: Perform Undo operation 2 times")
        undo_stack.undo()
        undo_stack.undo()

        console.print(undo_stack.describe())
        console.print(f"Text view now shows: {text_view.text}")
        console.check(
            text_view.text == "Second Change" and text_view.text_color is None,
            "Undo restored the second snapshot",
        )
