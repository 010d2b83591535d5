"""Expected-output transcripts.

A transcript is the list of text lines an example produced: each print
event contributes its payload (split on newlines), each assertion
contributes ``[PASS] message`` or ``[FAIL] message``. Expected
transcripts live in a directory as ``<slug>.txt`` files: the lines joined
with ``"\n"`` plus one trailing newline, or an empty file for an empty
transcript.
"""

from __future__ import annotations

import difflib
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from pattern_catalog.core.enums import EventKind, Outcome
from pattern_catalog.core.errors import ConfigError
from pattern_catalog.core.events import Event

if TYPE_CHECKING:
    from .runner import ExampleOutcome

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slug(name: str) -> str:
    """File-system friendly key: ``"Memento (undo stack)"`` -> ``memento_undo_stack``."""
    return _NON_ALNUM.sub("_", name.lower()).strip("_")


def render(events: Iterable[Event]) -> list[str]:
    """Render events as transcript lines."""
    lines: list[str] = []
    for event in events:
        if event.kind == EventKind.PRINT:
            lines.extend(event.payload.split("\n"))
        else:
            tag = "PASS" if event.outcome == Outcome.PASS else "FAIL"
            lines.extend(f"[{tag}] {event.payload}".split("\n"))
    return lines


def diff(expected: list[str], actual: list[str], name: str = "") -> list[str]:
    """Unified diff between two transcripts; empty when they match."""
    if expected == actual:
        return []
    return list(
        difflib.unified_diff(
            expected,
            actual,
            fromfile=f"expected/{name}",
            tofile=f"actual/{name}",
            lineterm="",
        )
    )


def _encode(lines: list[str]) -> str:
    return "\n".join(lines) + "\n" if lines else ""


def _decode(text: str) -> list[str]:
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def load_expected(directory: str | Path) -> dict[str, list[str]]:
    """Read every ``*.txt`` transcript in *directory*, keyed by slug.

    Lines are separated by ``"\\n"`` only, matching ``render``; an empty
    file is an empty transcript.
    """
    path = Path(directory)
    if not path.is_dir():
        raise ConfigError(f"Expected-output directory not found: {path}")
    expected: dict[str, list[str]] = {}
    for file in sorted(path.glob("*.txt")):
        with open(file, encoding="utf-8", newline="") as f:
            expected[file.stem] = _decode(f.read())
    logger.debug("Loaded %d expected transcripts from %s", len(expected), path)
    return expected


def write_expected(
    directory: str | Path, outcomes: Mapping[str, ExampleOutcome]
) -> list[Path]:
    """Write one transcript file per outcome. Returns the written paths."""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, outcome in outcomes.items():
        target = path / f"{slug(name)}.txt"
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(_encode(render(outcome.events)))
        written.append(target)
    return written
