"""Configuration management.

Loads from an optional TOML config file plus ``CATALOG_*`` environment
variables, validated by pydantic-settings.

Precedence, highest first: explicit overrides (CLI options), the TOML
file, environment variables, defaults. Sections are merged field by field,
so an environment variable still fills a field the TOML file leaves out.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .clock import CATALOG_EPOCH, IClock, SimClock, WallClock
from .context import ExampleContext
from .enums import ClockKind, IdSourceKind
from .errors import ConfigError
from .ids import IIdSource, RandomIds, SeededIds, SequentialIds

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class DeterminismConfig(BaseModel):
    id_source: IdSourceKind = IdSourceKind.SEQUENTIAL
    seed: int = 42  # Only used by the seeded id source
    clock: ClockKind = ClockKind.SIM
    start_time: datetime = CATALOG_EPOCH

    @field_validator("start_time")
    @classmethod
    def _require_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class RunnerConfig(BaseModel):
    parallel: bool = False
    max_workers: int = Field(default=4, ge=1)
    expected_dir: str | None = None  # Directory of <slug>.txt transcripts


class ObservabilityConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "console"  # "json" or "console"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}"
            )
        return level

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        if v not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level catalog settings.

    Values passed to the constructor (TOML data, CLI overrides) take
    priority over ``CATALOG_*`` environment variables.
    """

    determinism: DeterminismConfig = Field(default_factory=DeterminismConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "CATALOG_", "env_nested_delimiter": "__"}

    def make_clock(self) -> IClock:
        if self.determinism.clock == ClockKind.WALL:
            return WallClock()
        return SimClock(self.determinism.start_time)

    def make_ids(self) -> IIdSource:
        kind = self.determinism.id_source
        if kind == IdSourceKind.SEEDED:
            return SeededIds(self.determinism.seed)
        if kind == IdSourceKind.UUID:
            return RandomIds()
        return SequentialIds()

    def context_factory(self) -> Callable[[], ExampleContext]:
        """Return a callable that builds a fresh context per example run."""

        def factory() -> ExampleContext:
            return ExampleContext(clock=self.make_clock(), ids=self.make_ids())

        return factory

    @property
    def is_deterministic(self) -> bool:
        return (
            self.determinism.clock == ClockKind.SIM
            and self.determinism.id_source != IdSourceKind.UUID
        )


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top. Nested dicts are
            merged one level deep into the matching section.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        import tomli

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value

    return Settings(**data)
