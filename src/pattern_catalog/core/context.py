"""Per-run context handed to every example."""

from __future__ import annotations

from dataclasses import dataclass, field

from .clock import IClock, SimClock
from .ids import IIdSource, SequentialIds


@dataclass
class ExampleContext:
    """Clock and id source for one example invocation.

    A context is built fresh for each run and never shared between
    examples.
    """

    clock: IClock = field(default_factory=SimClock)
    ids: IIdSource = field(default_factory=SequentialIds)
