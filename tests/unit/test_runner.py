"""Test Runner isolation, determinism, expectations and ordering."""

import pytest

from pattern_catalog.catalog.registry import ExampleRegistry
from pattern_catalog.catalog.runner import (
    ExampleOutcome,
    ExampleRun,
    Runner,
    RunSummary,
    summarize,
)
from pattern_catalog.core.config import Settings
from pattern_catalog.core.enums import Category, RunState
from pattern_catalog.core.errors import NotFoundError
from pattern_catalog.core.events import Event


class TestRunAll:
    def test_outcomes_in_registry_order(self, mixed_registry):
        outcomes = Runner(mixed_registry).run_all()
        assert list(outcomes) == ["First", "Broken", "Last"]

    def test_failure_is_isolated(self, mixed_registry):
        outcomes = Runner(mixed_registry).run_all()
        assert outcomes["First"].success is True
        assert outcomes["Last"].success is True
        assert outcomes["Broken"].success is False

    def test_violation_recorded_with_partial_events(self, mixed_registry):
        broken = Runner(mixed_registry).run_all()["Broken"]
        assert broken.state == RunState.COMPLETED_FAILURE
        assert broken.events == (Event.printed("about to break"),)
        assert "PatternViolation" in broken.error
        assert "incompatible collaborator" in broken.error

    def test_unexpected_exception_recorded(self, empty_registry, crashing_example, make_echo):
        empty_registry.register(crashing_example)
        empty_registry.register(make_echo("After"))
        outcomes = Runner(empty_registry).run_all()
        assert outcomes["Crashing"].success is False
        assert outcomes["Crashing"].error.startswith("ZeroDivisionError")
        assert outcomes["After"].success is True

    def test_failed_assertion_fails_outcome(self, empty_registry, failing_check_example):
        empty_registry.register(failing_check_example)
        outcome = Runner(empty_registry).run_all()["FailingCheck"]
        assert outcome.success is False
        assert "1 assertion(s) failed" in outcome.error
        assert len(outcome.events) == 2

    def test_empty_registry(self, empty_registry):
        assert Runner(empty_registry).run_all() == {}

    def test_every_shipped_example_passes(self, catalog_runner):
        outcomes = catalog_runner.run_all()
        failures = {n: o.error for n, o in outcomes.items() if not o.success}
        assert failures == {}

    def test_run_all_twice_is_identical(self, catalog_runner):
        first = catalog_runner.run_all()
        second = catalog_runner.run_all()
        assert {n: o.events for n, o in first.items()} == {
            n: o.events for n, o in second.items()
        }

    def test_seeded_ids_are_repeatable(self, catalog_registry):
        settings = Settings(determinism={"id_source": "seeded", "seed": 7})
        runner = Runner(catalog_registry, context_factory=settings.context_factory())
        assert runner.run_one("Memento").events == runner.run_one("Memento").events


class TestRunOne:
    def test_run_one(self, mixed_registry):
        outcome = Runner(mixed_registry).run_one("Last")
        assert outcome.name == "Last"
        assert outcome.success is True
        assert outcome.state == RunState.COMPLETED_SUCCESS

    def test_unknown_on_empty_registry_raises(self, empty_registry):
        with pytest.raises(NotFoundError):
            Runner(empty_registry).run_one("Observer")

    def test_run_one_failure_not_raised(self, mixed_registry):
        assert Runner(mixed_registry).run_one("Broken").success is False


class TestExpectedOutput:
    def test_matching_transcript_passes(self, mixed_registry):
        runner = Runner(mixed_registry, expected={"first": ["one"]})
        assert runner.run_one("First").success is True

    def test_expected_by_name(self, mixed_registry):
        runner = Runner(mixed_registry, expected={"First": ["one"]})
        assert runner.run_one("First").success is True

    def test_mismatch_fails_with_diff(self, mixed_registry):
        runner = Runner(mixed_registry, expected={"first": ["uno"]})
        outcome = runner.run_one("First")
        assert outcome.success is False
        assert outcome.error == "transcript differs from expected output"
        assert "-uno" in outcome.mismatch
        assert "+one" in outcome.mismatch

    def test_examples_without_expectation_unaffected(self, mixed_registry):
        runner = Runner(mixed_registry, expected={"first": ["uno"]})
        assert runner.run_one("Last").success is True


class TestParallel:
    def test_parallel_keeps_registry_order(self, catalog_registry):
        outcomes = Runner(catalog_registry, parallel=True, max_workers=4).run_all()
        assert list(outcomes) == catalog_registry.names()

    def test_parallel_matches_sequential(self, catalog_registry):
        sequential = Runner(catalog_registry).run_all()
        parallel = Runner(catalog_registry, parallel=True).run_all()
        assert {n: o.events for n, o in sequential.items()} == {
            n: o.events for n, o in parallel.items()
        }

    def test_parallel_isolates_failures(self, mixed_registry):
        outcomes = Runner(mixed_registry, parallel=True, max_workers=2).run_all()
        assert [o.success for o in outcomes.values()] == [True, False, True]


class TestExampleRun:
    def test_happy_path(self):
        run = ExampleRun("x")
        assert run.state == RunState.UNSTARTED
        run.transition(RunState.RUNNING)
        run.transition(RunState.COMPLETED_SUCCESS)
        assert run.is_terminal

    def test_cannot_skip_running(self):
        with pytest.raises(ValueError, match="Invalid run transition"):
            ExampleRun("x").transition(RunState.COMPLETED_SUCCESS)

    def test_terminal_cannot_be_exited(self):
        run = ExampleRun("x")
        run.transition(RunState.RUNNING)
        run.transition(RunState.COMPLETED_FAILURE)
        with pytest.raises(ValueError):
            run.transition(RunState.RUNNING)


class TestSummary:
    def _outcome(self, name, success):
        return ExampleOutcome(
            name=name,
            category=Category.BEHAVIORAL,
            events=(),
            success=success,
            state=RunState.COMPLETED_SUCCESS if success else RunState.COMPLETED_FAILURE,
        )

    def test_counts(self):
        summary = summarize({
            "a": self._outcome("a", True),
            "b": self._outcome("b", False),
            "c": self._outcome("c", True),
        })
        assert summary == RunSummary(passed=2, failed=1)
        assert str(summary) == "2 passed, 1 failed"
        assert summary.exit_code == 1
        assert summary.total == 3

    def test_all_passed_exit_zero(self):
        assert summarize({"a": self._outcome("a", True)}).exit_code == 0

    def test_empty(self):
        assert str(summarize({})) == "0 passed, 0 failed"


def test_runner_exposes_registry():
    registry = ExampleRegistry()
    assert Runner(registry).registry is registry
