"""Event records produced while an example runs.

An event is either a printed line or the outcome of a check the example
made about its own object graph. Events are frozen pydantic models, so a
transcript can be compared, hashed and serialized without copying.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from .enums import EventKind, Outcome


class Event(BaseModel):
    """A single observable effect of running an example."""

    model_config = {"frozen": True}

    kind: EventKind
    payload: str
    outcome: Outcome | None = None

    @model_validator(mode="after")
    def _outcome_matches_kind(self) -> Event:
        if self.kind == EventKind.ASSERTION and self.outcome is None:
            raise ValueError("assertion events require an outcome")
        if self.kind == EventKind.PRINT and self.outcome is not None:
            raise ValueError("print events carry no outcome")
        return self

    @property
    def failed(self) -> bool:
        return self.outcome == Outcome.FAIL

    @classmethod
    def printed(cls, payload: str) -> Event:
        return cls(kind=EventKind.PRINT, payload=payload)

    @classmethod
    def assertion(cls, payload: str, passed: bool) -> Event:
        return cls(
            kind=EventKind.ASSERTION,
            payload=payload,
            outcome=Outcome.PASS if passed else Outcome.FAIL,
        )


def prints(events: tuple[Event, ...] | list[Event]) -> list[Event]:
    """Return only the ``print`` events."""
    return [e for e in events if e.kind == EventKind.PRINT]


def failed_assertions(events: tuple[Event, ...] | list[Event]) -> list[Event]:
    """Return the ``assertion`` events whose outcome is ``fail``."""
    return [e for e in events if e.kind == EventKind.ASSERTION and e.failed]
