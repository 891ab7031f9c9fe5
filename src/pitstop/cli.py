from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="pitstop", help="Run self-registering unit tests")


def _run_config(**options):
    from pydantic import ValidationError

    from pitstop.config import RunConfig

    try:
        return RunConfig(**options)
    except ValidationError as e:
        for error in e.errors():
            typer.echo(f"Error: {error['msg']}", err=True)
        raise typer.Exit(1)


def _load_registry(modules: list[Path]):
    from pitstop.errors import PitstopError
    from pitstop.loader import load_modules
    from pitstop.registry import Registry, collecting

    registry = Registry()
    try:
        with collecting(registry):
            load_modules(modules)
    except PitstopError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    return registry


@app.command()
def run(
    modules: list[str] = typer.Argument(help="Test module files to load and run"),
    no_color: bool = typer.Option(
        False, "--no-color", help="Print the report without ANSI escape codes"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 when any test does not pass"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Load test modules and run every test they declare."""
    from pitstop.runner import Runner, exit_status
    from pitstop.verbose import setup_logger, teardown_logger

    config = _run_config(
        modules=[Path(m) for m in modules],
        color=not no_color,
        strict=strict,
        verbose=verbose,
        debug_log=Path(debug_log) if debug_log is not None else None,
    )

    logger = setup_logger(
        config.debug_log, verbose=config.verbose, logger_name="pitstop"
    )
    try:
        logger.debug(f"Loading {len(config.modules)} test module(s)")
        registry = _load_registry(config.modules)
        summary = Runner(registry=registry, color=config.color).run()
    finally:
        teardown_logger(logger)

    if summary.interrupted:
        typer.echo("Run interrupted.", err=True)
    status = exit_status(summary, strict=config.strict)
    if status:
        raise typer.Exit(status)


@app.command("list")
def list_tests(
    modules: list[str] = typer.Argument(help="Test module files to load"),
):
    """Print the names of the declared tests in the order they would run."""
    config = _run_config(modules=[Path(m) for m in modules])
    registry = _load_registry(config.modules)
    for name in registry.names():
        typer.echo(name)
    typer.echo(f"{len(registry)} test(s)")
