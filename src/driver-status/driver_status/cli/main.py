"""CLI entrypoint for driver-status — typer app with a `run` command."""

import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from driver_status.cli.output.banner import print_banner
from driver_status.config.infrastructure.observer import StructlogConfigObserver
from driver_status.config.infrastructure.yaml_loader import YamlConfigLoader
from driver_status.core.errors import DriverStatusError
from driver_status.driver.domain.driver import Driver
from driver_status.driver.infrastructure.observer import StructlogDriverObserver
from driver_status.driver.infrastructure.registry import build_listeners
from driver_status.prompt.application.loop import run_prompt_loop
from driver_status.prompt.domain.session import StatusPromptSession

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Interactive driver status tracker for a trucking company."""


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write filtered, rendered events to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. "
            "Must be one of debug, info, warning, error, critical."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.command()
def run(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a driver/listeners config YAML (defaults built in)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Minimum level of log events written to stderr",
    ),
) -> None:
    """Track a driver's status interactively and notify every listener on change."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)

        driver = Driver(
            name=config.driver.name,
            observer=StructlogDriverObserver(),
            status=config.driver.initial_status,
        )
        for listener in build_listeners(config=config.listeners, write=typer.echo):
            driver.register(listener)
        print_banner(console=Console(), config=config)

        session = StatusPromptSession(driver=driver, write=typer.echo)
        run_prompt_loop(session=session, read_line=input)

    except KeyboardInterrupt:
        typer.echo("\nInterrupted.")
        sys.exit(1)
    except DriverStatusError as exc:
        typer.echo(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    app()
