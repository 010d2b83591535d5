"""Example registry.

Holds examples by unique name in registration order. The runner walks
the registry in that order, so output is stable from run to run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, ValuesView

from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import ConfigError, DuplicateNameError, NotFoundError

from .base import PatternExample

logger = logging.getLogger(__name__)


class ExampleRegistry:
    """Ordered, uniquely-keyed collection of examples.

    Usage::

        registry = ExampleRegistry()
        registry.register(ObserverExample())
        for example in registry.all():
            example.run()
    """

    def __init__(self) -> None:
        self._examples: dict[str, PatternExample] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, example: PatternExample) -> None:
        """Register an example. Raises DuplicateNameError if the name is taken."""
        if not example.name:
            raise ConfigError(
                f"Example {type(example).__name__} has an empty name"
            )
        if example.name in self._examples:
            raise DuplicateNameError(example.name)
        self._examples[example.name] = example
        logger.debug(
            "Registered example: %s (category=%s)",
            example.name,
            example.category.value,
        )

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def all(self) -> ValuesView[PatternExample]:
        """All examples in registration order.

        The returned view is lazy and can be iterated any number of times.
        """
        return self._examples.values()

    def lookup(self, name: str) -> PatternExample:
        """Look up an example by name. Raises NotFoundError if absent."""
        try:
            return self._examples[name]
        except KeyError:
            raise NotFoundError(name, self.names()) from None

    def names(self) -> list[str]:
        return list(self._examples)

    def by_category(self, category: Category) -> list[PatternExample]:
        """Examples of one category, in registration order."""
        return [e for e in self._examples.values() if e.category == category]

    def __contains__(self, name: object) -> bool:
        return name in self._examples

    def __iter__(self) -> Iterator[PatternExample]:
        return iter(self._examples.values())

    def __len__(self) -> int:
        return len(self._examples)
