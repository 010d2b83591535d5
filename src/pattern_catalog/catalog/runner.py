"""Example runner.

``Runner`` executes examples from a registry and records one
``ExampleOutcome`` per example:

1.  Build a fresh ``ExampleContext`` from the context factory.
2.  Call ``example.run(ctx)`` and collect its events.
3.  Catch ``PatternViolation`` (and any other exception) so that one
    broken example never stops the rest.
4.  Fail the outcome on failed assertions or on a transcript that does
    not match the expected one.

Outcomes always come back in registry order, including parallel runs.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category, RunState
from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.events import Event, failed_assertions
from pattern_catalog.observability.logger import bound_example, get_logger

from . import transcripts
from .base import PatternExample
from .registry import ExampleRegistry

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Run lifecycle
# ---------------------------------------------------------------------------

TERMINAL_STATES: frozenset[RunState] = frozenset({
    RunState.COMPLETED_SUCCESS,
    RunState.COMPLETED_FAILURE,
})

TRANSITIONS: dict[RunState, frozenset[RunState]] = {
    RunState.UNSTARTED: frozenset({RunState.RUNNING}),
    RunState.RUNNING: TERMINAL_STATES,
    RunState.COMPLETED_SUCCESS: frozenset(),
    RunState.COMPLETED_FAILURE: frozenset(),
}


class ExampleRun:
    """Tracks the state of one invocation. Terminal states cannot be exited."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.state = RunState.UNSTARTED

    def transition(self, target: RunState) -> None:
        if target not in TRANSITIONS[self.state]:
            raise ValueError(
                f"Invalid run transition for {self.name}: "
                f"{self.state.value} -> {target.value}"
            )
        self.state = target

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExampleOutcome:
    """Result of running one example."""

    name: str
    category: Category
    events: tuple[Event, ...]
    success: bool
    state: RunState
    error: str | None = None
    mismatch: tuple[str, ...] = field(default_factory=tuple)

    @property
    def lines(self) -> list[str]:
        return transcripts.render(self.events)


@dataclass(frozen=True)
class RunSummary:
    passed: int
    failed: int

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def exit_code(self) -> int:
        return 0 if self.failed == 0 else 1

    def __str__(self) -> str:
        return f"{self.passed} passed, {self.failed} failed"


def summarize(outcomes: Mapping[str, ExampleOutcome]) -> RunSummary:
    passed = sum(1 for o in outcomes.values() if o.success)
    return RunSummary(passed=passed, failed=len(outcomes) - passed)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class Runner:
    """Runs registered examples and records their outcomes.

    Usage::

        runner = Runner(registry, expected=transcripts.load_expected(path))
        outcomes = runner.run_all()
        print(summarize(outcomes))
    """

    def __init__(
        self,
        registry: ExampleRegistry,
        context_factory: Callable[[], ExampleContext] = ExampleContext,
        expected: Mapping[str, list[str]] | None = None,
        parallel: bool = False,
        max_workers: int = 4,
    ) -> None:
        self._registry = registry
        self._context_factory = context_factory
        self._expected = dict(expected or {})
        self._parallel = parallel
        self._max_workers = max_workers

    @property
    def registry(self) -> ExampleRegistry:
        return self._registry

    def run_all(self) -> dict[str, ExampleOutcome]:
        """Run every example in registry order."""
        examples = list(self._registry.all())
        logger.info("run_all.start", count=len(examples), parallel=self._parallel)
        if self._parallel and len(examples) > 1:
            outcomes = self._run_parallel(examples)
        else:
            outcomes = {e.name: self._execute(e) for e in examples}
        logger.info("run_all.done", summary=str(summarize(outcomes)))
        return outcomes

    def run_one(self, name: str) -> ExampleOutcome:
        """Run a single example. NotFoundError propagates from the registry."""
        return self._execute(self._registry.lookup(name))

    def _run_parallel(
        self, examples: list[PatternExample]
    ) -> dict[str, ExampleOutcome]:
        collected: dict[str, ExampleOutcome] = {}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_name = {
                executor.submit(self._execute, example): example.name
                for example in examples
            }
            for future in as_completed(future_to_name):
                collected[future_to_name[future]] = future.result()
        # Arrival order is arbitrary; report in registry order.
        return {e.name: collected[e.name] for e in examples}

    def _execute(self, example: PatternExample) -> ExampleOutcome:
        run = ExampleRun(example.name)
        with bound_example(example.name):
            run.transition(RunState.RUNNING)
            started = time.perf_counter()
            error: str | None = None
            try:
                events = tuple(example.run(self._context_factory()))
            except PatternViolation as exc:
                events = exc.events
                error = f"PatternViolation: {exc}"
                logger.warning("example.violation", error=str(exc))
            except Exception as exc:
                events = ()
                error = f"{type(exc).__name__}: {exc}"
                logger.exception("example.crashed")

            failures = failed_assertions(events)
            if error is None and failures:
                error = f"{len(failures)} assertion(s) failed: {failures[0].payload}"

            mismatch: tuple[str, ...] = ()
            expected = self._expected.get(
                example.name, self._expected.get(transcripts.slug(example.name))
            )
            if expected is not None:
                mismatch = tuple(
                    transcripts.diff(expected, transcripts.render(events), example.name)
                )
                if mismatch and error is None:
                    error = "transcript differs from expected output"

            success = error is None
            run.transition(
                RunState.COMPLETED_SUCCESS if success else RunState.COMPLETED_FAILURE
            )
            logger.info(
                "example.done",
                success=success,
                events=len(events),
                elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
            )
        return ExampleOutcome(
            name=example.name,
            category=example.category,
            events=events,
            success=success,
            state=run.state,
            error=error,
            mismatch=mismatch,
        )
