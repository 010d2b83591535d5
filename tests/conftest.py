"""Shared fixtures for the pattern-catalog test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.catalog.defaults import build_registry
from pattern_catalog.catalog.registry import ExampleRegistry
from pattern_catalog.catalog.runner import Runner
from pattern_catalog.core.clock import SimClock
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.ids import SequentialIds

GOLDEN_DIR = Path(__file__).parent / "golden" / "golden_data"


# ---------------------------------------------------------------------------
# Toy examples
# ---------------------------------------------------------------------------

class EchoExample(BaseExample):
    """Prints its payload once and checks nothing."""

    category = Category.BEHAVIORAL
    summary = "test helper"

    def __init__(self, name: str = "Echo", payload: str = "hello") -> None:
        self.name = name
        self._payload = payload

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        console.print(self._payload)


class BrokenExample(BaseExample):
    """Prints one line, then breaks its own contract."""

    name = "Broken"
    category = Category.STRUCTURAL
    summary = "test helper"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        console.print("about to break")
        raise PatternViolation("adapter received an incompatible collaborator")


class CrashingExample(BaseExample):
    """Raises something that is not a PatternViolation."""

    name = "Crashing"
    category = Category.CREATIONAL
    summary = "test helper"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        raise ZeroDivisionError("division by zero")


class FailingCheckExample(BaseExample):
    name = "FailingCheck"
    category = Category.BEHAVIORAL
    summary = "test helper"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        console.check(True, "first check holds")
        console.check(False, "second check does not")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock starting at 2024-06-01 00:00 UTC."""
    return SimClock(start=datetime(2024, 6, 1, tzinfo=timezone.utc))


@pytest.fixture
def context() -> ExampleContext:
    return ExampleContext(clock=SimClock(), ids=SequentialIds())


@pytest.fixture
def catalog_registry() -> ExampleRegistry:
    """Registry holding every shipped example."""
    return build_registry()


@pytest.fixture
def catalog_runner(catalog_registry: ExampleRegistry) -> Runner:
    return Runner(catalog_registry)


@pytest.fixture
def empty_registry() -> ExampleRegistry:
    return ExampleRegistry()


@pytest.fixture
def mixed_registry() -> ExampleRegistry:
    """Two healthy examples around a broken one."""
    registry = ExampleRegistry()
    registry.register(EchoExample("First", "one"))
    registry.register(BrokenExample())
    registry.register(EchoExample("Last", "two"))
    return registry


@pytest.fixture
def make_echo():
    """Factory for ``EchoExample`` instances: ``make_echo("Name", "payload")``."""
    return EchoExample


@pytest.fixture
def broken_example() -> BrokenExample:
    return BrokenExample()


@pytest.fixture
def crashing_example() -> CrashingExample:
    return CrashingExample()


@pytest.fixture
def failing_check_example() -> FailingCheckExample:
    return FailingCheckExample()


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR
