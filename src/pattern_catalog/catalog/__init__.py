"""Example registry, runner and transcript handling."""

from .base import BaseExample, Console, PatternExample
from .registry import ExampleRegistry
from .runner import ExampleOutcome, Runner, RunSummary, summarize

__all__ = [
    "BaseExample",
    "Console",
    "ExampleOutcome",
    "ExampleRegistry",
    "PatternExample",
    "RunSummary",
    "Runner",
    "summarize",
]
