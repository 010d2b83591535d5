"""Application bootstrap.

Wires settings, logging, registry and runner together for the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .catalog import transcripts
from .catalog.defaults import build_registry
from .catalog.registry import ExampleRegistry
from .catalog.runner import Runner
from .core.config import Settings, load_settings
from .observability.logger import setup_logging

logger = logging.getLogger(__name__)


def bootstrap(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    registry: ExampleRegistry | None = None,
    compare: bool = True,
) -> tuple[Settings, Runner]:
    """Load config, set up logging, build the registry and a runner.

    Configuration errors (including duplicate example names) propagate.
    When *compare* is false the expected directory is not loaded.
    """
    settings = load_settings(config_path=config_path, overrides=overrides)
    setup_logging(settings.observability.log_level, settings.observability.log_format)

    if registry is None:
        registry = build_registry()

    expected = None
    if compare and settings.runner.expected_dir:
        expected = transcripts.load_expected(settings.runner.expected_dir)

    if not settings.is_deterministic:
        logger.warning("Non-deterministic clock or id source: transcripts may vary")

    runner = Runner(
        registry,
        context_factory=settings.context_factory(),
        expected=expected,
        parallel=settings.runner.parallel,
        max_workers=settings.runner.max_workers,
    )
    logger.info("Catalog ready with %d examples", len(registry))
    return settings, runner
