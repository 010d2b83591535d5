"""Custom exception hierarchy for the pattern catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .events import Event


class CatalogError(Exception):
    """Base exception for all catalog errors."""


# --- Configuration ---
class ConfigError(CatalogError):
    """Invalid or missing configuration."""


class DuplicateNameError(ConfigError):
    """An example with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Example already registered: {name}")


# --- Lookup ---
class NotFoundError(CatalogError):
    """No example registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        msg = f"Unknown example '{name}'."
        if self.available:
            msg += f" Available: {', '.join(self.available)}"
        super().__init__(msg)


# --- Runtime ---
class PatternViolation(CatalogError):
    """An example's internal contract was broken.

    ``events`` holds whatever the example emitted before the violation;
    it is filled in by ``BaseExample.run``.
    """

    def __init__(self, message: str):
        self.events: tuple[Event, ...] = ()
        super().__init__(message)
