"""CLI entry point for the pattern catalog."""

from __future__ import annotations

import click
from pydantic import ValidationError

from .catalog import transcripts
from .catalog.runner import ExampleOutcome, summarize
from .core.errors import ConfigError, NotFoundError

EXIT_USAGE = 2


def _print_outcome(outcome: ExampleOutcome, quiet: bool) -> None:
    if quiet and outcome.success:
        return
    click.echo(f"== {outcome.name} [{outcome.category.value}] ==")
    for line in outcome.lines:
        click.echo(line)
    if outcome.success:
        click.echo("-> ok")
    else:
        click.echo(f"-> FAILED: {outcome.error}")
        for line in outcome.mismatch:
            click.echo(line)
    click.echo()


@click.group()
def main() -> None:
    """Design-pattern catalog."""


@main.command()
@click.argument("name", required=False)
@click.option("--config", default=None, help="Config file path (TOML)")
@click.option("--expected-dir", default=None, help="Directory of expected transcripts")
@click.option(
    "--update-expected",
    is_flag=True,
    help="Write transcripts to --expected-dir instead of comparing",
)
@click.option("--parallel/--sequential", default=None, help="Run examples on a thread pool")
@click.option("--quiet", is_flag=True, help="Only print failures and the summary")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
@click.option(
    "--log-format", type=click.Choice(["json", "console"]), default=None, help="Log renderer"
)
def run(
    name: str | None,
    config: str | None,
    expected_dir: str | None,
    update_expected: bool,
    parallel: bool | None,
    quiet: bool,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Run every example, or only NAME. Exits 1 if any example fails."""
    from .main import bootstrap

    overrides: dict = {}
    if expected_dir:
        overrides.setdefault("runner", {})["expected_dir"] = expected_dir
    if parallel is not None:
        overrides.setdefault("runner", {})["parallel"] = parallel
    if log_level:
        overrides.setdefault("observability", {})["log_level"] = log_level
    if log_format:
        overrides.setdefault("observability", {})["log_format"] = log_format

    try:
        settings, runner = bootstrap(
            config_path=config, overrides=overrides, compare=not update_expected
        )
    except (ConfigError, ValidationError) as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        raise SystemExit(EXIT_USAGE)

    if update_expected and not settings.runner.expected_dir:
        click.echo("--update-expected needs --expected-dir", err=True)
        raise SystemExit(EXIT_USAGE)

    try:
        outcomes = {name: runner.run_one(name)} if name else runner.run_all()
    except NotFoundError as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(EXIT_USAGE)

    if update_expected:
        # Failed runs never overwrite a stored transcript.
        passed = {n: o for n, o in outcomes.items() if o.success}
        written = transcripts.write_expected(settings.runner.expected_dir, passed)
        click.echo(f"Wrote {len(written)} transcript(s) to {settings.runner.expected_dir}")
        for outcome in outcomes.values():
            if not outcome.success:
                click.echo(f"Skipped {outcome.name}: {outcome.error}", err=True)
    else:
        for outcome in outcomes.values():
            _print_outcome(outcome, quiet)

    summary = summarize(outcomes)
    click.echo(str(summary))
    raise SystemExit(summary.exit_code)


@main.command("list")
def list_examples() -> None:
    """List registered examples in run order."""
    from .catalog.defaults import build_registry

    for example in build_registry().all():
        summary = getattr(example, "summary", "")
        click.echo(f"{example.category.value:<11} {example.name:<30} {summary}")
