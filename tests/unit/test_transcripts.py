"""Test transcript rendering, diffing and expected-output files."""

import pytest

from pattern_catalog.catalog import transcripts
from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.catalog.registry import ExampleRegistry
from pattern_catalog.catalog.runner import Runner
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import ConfigError
from pattern_catalog.core.events import Event


class TestSlug:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Observer", "observer"),
            ("Chain of Responsibility", "chain_of_responsibility"),
            ("Memento (undo stack)", "memento_undo_stack"),
            ("Template Method (permissions)", "template_method_permissions"),
        ],
    )
    def test_slug(self, name, expected):
        assert transcripts.slug(name) == expected


class TestRender:
    def test_prints_and_assertions(self):
        events = [
            Event.printed("hello"),
            Event.assertion("holds", True),
            Event.assertion("breaks", False),
        ]
        assert transcripts.render(events) == ["hello", "[PASS] holds", "[FAIL] breaks"]

    def test_multiline_print_is_split(self):
        assert transcripts.render([Event.printed("a\nb")]) == ["a", "b"]

    def test_empty(self):
        assert transcripts.render([]) == []


class TestDiff:
    def test_equal_is_empty(self):
        assert transcripts.diff(["a"], ["a"]) == []

    def test_difference_is_unified(self):
        lines = transcripts.diff(["a", "b"], ["a", "c"], "Echo")
        assert lines[0] == "--- expected/Echo"
        assert lines[1] == "+++ actual/Echo"
        assert "-b" in lines
        assert "+c" in lines


class TestExpectedFiles:
    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            transcripts.load_expected(tmp_path / "missing")

    def test_write_then_load(self, tmp_path, mixed_registry):
        outcomes = Runner(mixed_registry).run_all()
        written = transcripts.write_expected(tmp_path, outcomes)
        assert sorted(p.name for p in written) == ["broken.txt", "first.txt", "last.txt"]

        loaded = transcripts.load_expected(tmp_path)
        assert loaded["first"] == ["one"]
        assert loaded["broken"] == ["about to break"]

    def test_load_ignores_other_files(self, tmp_path):
        (tmp_path / "observer.txt").write_text("Did you hear? X\n")
        (tmp_path / "notes.md").write_text("ignored")
        assert transcripts.load_expected(tmp_path) == {"observer": ["Did you hear? X"]}


class _Silent(BaseExample):
    name = "Silent"
    category = Category.BEHAVIORAL

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        pass


class _Separators(BaseExample):
    name = "Separators"
    category = Category.BEHAVIORAL

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        console.print("line one\u2028line two")
        console.print("carriage\rreturn\x0bvertical tab")
        console.print("")
        console.check(True, "multi\nline check")


class TestRoundTrip:
    def _update_then_compare(self, tmp_path, example):
        registry = ExampleRegistry()
        registry.register(example)
        transcripts.write_expected(tmp_path, Runner(registry).run_all())
        expected = transcripts.load_expected(tmp_path)
        return Runner(registry, expected=expected).run_one(example.name)

    def test_empty_transcript_is_empty_file(self, tmp_path):
        outcome = self._update_then_compare(tmp_path, _Silent())
        assert (tmp_path / "silent.txt").read_bytes() == b""
        assert outcome.mismatch == ()
        assert outcome.success

    def test_only_newline_separates_lines(self, tmp_path):
        outcome = self._update_then_compare(tmp_path, _Separators())
        assert outcome.mismatch == ()
        assert outcome.success
        assert transcripts.load_expected(tmp_path)["separators"] == [
            "line one\u2028line two",
            "carriage\rreturn\x0bvertical tab",
            "",
            "[PASS] multi",
            "line check",
        ]

    def test_file_without_trailing_newline(self, tmp_path):
        (tmp_path / "observer.txt").write_bytes(b"a\nb")
        assert transcripts.load_expected(tmp_path) == {"observer": ["a", "b"]}

    def test_single_blank_line(self, tmp_path):
        (tmp_path / "blank.txt").write_bytes(b"\n")
        assert transcripts.load_expected(tmp_path) == {"blank": [""]}
