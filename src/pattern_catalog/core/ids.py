"""Identifier sources.

Examples that need "random" identifiers (memento states, page ids) draw
them from an injected source instead of calling ``uuid`` themselves.

Sources
-------
1. ``SequentialIds``: UUID-shaped strings from a counter. Fully
   predictable; the default for catalog runs and golden transcripts.
2. ``SeededIds``: pseudo-random UUID v4 strings from a seeded generator.
   Repeatable for a given seed.
3. ``RandomIds``: real UUID v4 strings. Not repeatable.
"""

from __future__ import annotations

import random
import uuid
from typing import Protocol


class IIdSource(Protocol):
    """Produces string identifiers."""

    def new_id(self) -> str: ...


class SequentialIds:
    """``00000000-0000-0000-0000-000000000001``, ``...0002``, ..."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def new_id(self) -> str:
        value = uuid.UUID(int=self._next)
        self._next += 1
        return str(value)


class SeededIds:
    """UUID v4 strings drawn from ``random.Random(seed)``."""

    def __init__(self, seed: int = 42) -> None:
        self._rng = random.Random(seed)

    def new_id(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))


class RandomIds:
    """Real UUID v4 strings."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


def short_id(source: IIdSource, length: int = 4) -> str:
    """Last *length* hex characters of a fresh id, upper-cased."""
    return source.new_id().replace("-", "")[-length:].upper()
