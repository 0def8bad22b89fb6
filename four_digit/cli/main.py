"""CLI entrypoint for four-digit: serve, ask, generate and suggest."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog
import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from four_digit.api.app import create_app
from four_digit.config.domain.config import AppConfig
from four_digit.config.infrastructure.observer import StructlogConfigObserver
from four_digit.config.infrastructure.yaml_loader import YamlConfigLoader
from four_digit.core.errors import FourDigitError
from four_digit.generation.domain.report import BatchReport
from four_digit.library.domain.entry import AppendOutcome
from four_digit.services import Services, build_services

app = typer.Typer(add_completion=False)

_console = Console()

_OUTCOME_STYLES: dict[AppendOutcome, str] = {
    AppendOutcome.STORED: "green",
    AppendOutcome.DUPLICATE: "yellow",
    AppendOutcome.CAP_REACHED: "red",
    AppendOutcome.REJECTED: "red",
}

_CONFIG_ARGUMENT = typer.Argument(..., help="Path to service config YAML")
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=_stderr_logger,
    )


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so stdout stays free for command output.
    return structlog.PrintLogger(file=sys.stderr)


def _load_config(config_path: Path, log_format: str) -> AppConfig:
    _configure_structlog(log_format=log_format)
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        return loader.load(path=config_path)
    except FourDigitError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


def _run_with_services[T](
    config: AppConfig, work: Callable[[Services], Awaitable[T]]
) -> T:
    """Start services, run ``work`` on them, and always stop them afterwards."""

    async def runner() -> T:
        services = build_services(config)
        await services.start()
        try:
            return await work(services)
        finally:
            await services.stop()

    try:
        return asyncio.run(runner())
    except KeyboardInterrupt:
        typer.echo("Interrupted.")
        sys.exit(1)
    except FourDigitError as exc:
        typer.echo(str(exc))
        sys.exit(1)


def _print_batch(report: BatchReport) -> None:
    table = Table(title=f"Generated {len(report.items)} of {report.requested} requested")
    table.add_column("Question")
    table.add_column("Number", justify="right")
    table.add_column("Outcome")
    for item in report.items:
        style = _OUTCOME_STYLES[item.outcome]
        table.add_row(
            item.entry.question,
            str(item.entry.number),
            f"[{style}]{item.outcome.value}[/{style}]",
        )
    _console.print(table)
    _console.print(f"Stored {report.stored} new question(s).")


@app.command()
def serve(
    config_path: Path = _CONFIG_ARGUMENT,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Run the HTTP + WebSocket server."""
    config = _load_config(config_path=config_path, log_format=log_format)
    api = create_app(build_services(config))
    uvicorn.run(api, host=config.server.host, port=config.server.port)


@app.command()
def ask(
    config_path: Path = _CONFIG_ARGUMENT,
    question: str = typer.Argument(..., help="Question to resolve"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Resolve one question and print its number."""
    config = _load_config(config_path=config_path, log_format=log_format)
    result = _run_with_services(config, lambda s: s.resolver.resolve(question))
    _console.print(f"[bold]{result.number}[/bold] [dim]({result.source.value})[/dim]")


@app.command()
def generate(
    config_path: Path = _CONFIG_ARGUMENT,
    count: int | None = typer.Option(
        None, "--count", "-n", min=1, help="Pairs to request (default: library.batch_size)"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Populate the library with a batch of oracle-generated questions."""
    config = _load_config(config_path=config_path, log_format=log_format)
    requested = count if count is not None else config.library.batch_size
    report = _run_with_services(
        config, lambda s: s.batch_generator.generate(requested)
    )
    _print_batch(report)


@app.command()
def suggest(
    config_path: Path = _CONFIG_ARGUMENT,
    count: int = typer.Option(25, "--count", "-n", min=1, help="Questions to show"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Print random questions from the library."""
    config = _load_config(config_path=config_path, log_format=log_format)

    async def sample(services: Services) -> list[str]:
        return services.store.sample_random(count)

    questions = _run_with_services(config, sample)
    for index, question in enumerate(questions, start=1):
        _console.print(f"[dim]{index:>3}.[/dim] {question}")


if __name__ == "__main__":
    app()
