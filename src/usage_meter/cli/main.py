"""CLI entrypoint for usage-meter — typer app with `call`, `serve` and `report` commands."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from usage_meter.config.domain.config import MeterConfig
from usage_meter.config.infrastructure.observer import StructlogConfigObserver
from usage_meter.config.infrastructure.yaml_loader import YamlConfigLoader
from usage_meter.core.errors import UsageMeterError
from usage_meter.counter.infrastructure.observer import StructlogCounterObserver
from usage_meter.permission.infrastructure.observer import StructlogPermissionObserver
from usage_meter.query.application.service import GET_NETWORK_STATS, QueryService
from usage_meter.query.domain.envelope import RequestEnvelope, Success
from usage_meter.query.domain.mode import NetworkStatsMode
from usage_meter.query.infrastructure.factory import create_query_service
from usage_meter.query.infrastructure.jsonl_channel import JsonLinesChannel
from usage_meter.query.infrastructure.observer import StructlogQueryObserver

app = typer.Typer(add_completion=False)

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config YAML")
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
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
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> MeterConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        return loader.load(path=config_path)
    except UsageMeterError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _build_service(config: MeterConfig) -> QueryService:
    return create_query_service(
        config=config,
        counter_observer=StructlogCounterObserver(),
        permission_observer=StructlogPermissionObserver(),
        query_observer=StructlogQueryObserver(),
    )


@app.command()
def call(
    method: str = typer.Argument(..., help="Method name, e.g. getNetworkStats"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Handle a single request and print its JSON response."""
    _configure_structlog(log_format=log_format)
    service = _build_service(_load_config(config_path))
    response = asyncio.run(service.handle(RequestEnvelope(method=method)))
    typer.echo(json.dumps(response.to_dict()))


@app.command()
def serve(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Serve newline-delimited JSON requests on stdin, one response line each on stdout."""
    _configure_structlog(log_format=log_format)
    service = _build_service(_load_config(config_path))
    channel = JsonLinesChannel(service=service, observer=StructlogQueryObserver())
    try:
        asyncio.run(channel.serve(reader=sys.stdin, writer=sys.stdout))
    except KeyboardInterrupt:
        typer.echo("Channel interrupted.", err=True)
        sys.exit(1)


@app.command()
def report(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Render the cumulative usage report as a table."""
    _configure_structlog(log_format=log_format)
    config = _load_config(config_path)
    # The table needs the four counters regardless of the configured mode.
    cumulative = config.service.model_copy(
        update={"network_stats_mode": NetworkStatsMode.CUMULATIVE}
    )
    service = _build_service(config.model_copy(update={"service": cumulative}))
    response = asyncio.run(service.handle(RequestEnvelope(method=GET_NETWORK_STATS)))
    if not isinstance(response, Success):
        typer.echo(json.dumps(response.to_dict()), err=True)
        raise typer.Exit(code=1)

    table = Table(title="Network usage since boot")
    table.add_column("Counter")
    table.add_column("Bytes", justify="right")
    for key, value in response.value.items():
        table.add_row(key, f"{value:,}")
    Console().print(table)


if __name__ == "__main__":
    app()
