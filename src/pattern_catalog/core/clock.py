"""Clocks that examples read instead of calling datetime.now().

Examples that stamp objects with a date (memento backups, text-view
snapshots) take the time from ``ctx.clock`` and mark the passing of time
between their steps with ``advance``. Under ``SimClock`` this makes every
stamp distinct and repeatable; under ``WallClock`` real time passes on its
own.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol

CATALOG_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class IClock(Protocol):
    """Time source handed to examples through ``ExampleContext``."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...

    def advance(self, seconds: float) -> None:
        """Mark *seconds* of time passing between two steps of an example."""
        ...


class WallClock:
    """Real wall-clock time. ``advance`` is a no-op."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"Cannot advance by a negative amount: {seconds}")


class SimClock:
    """Simulated time that moves only when an example advances it."""

    def __init__(self, start: datetime | None = None) -> None:
        self._time = start or CATALOG_EPOCH

    def now(self) -> datetime:
        return self._time

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"SimClock cannot go backwards: {seconds}s")
        self._time += timedelta(seconds=seconds)
