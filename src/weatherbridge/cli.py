"""Weather bridge CLI application.

This module provides a command-line interface for inspecting what the
bridge hands to the display: snapshots, batch refreshes, geocoding
results and the radar timeline, plus configuration utilities.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Final, TypeVar

import typer

from weatherbridge.bridge import WeatherBridge
from weatherbridge.models import Location
from weatherbridge.settings import BridgeSettings
from weatherbridge.weather.errors import WeatherAPIError

T = TypeVar("T")

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Weather bridge CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "weatherbridge.cli"

# Options shared by the commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Path to config.yaml")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
LIMIT_OPTION = typer.Option(5, "--limit", "-n", min=1, help="Maximum number of matches")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def build_bridge(config: Path | None) -> WeatherBridge:
    """Load settings and construct the bridge, exiting on config errors."""
    try:
        settings = BridgeSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return WeatherBridge(settings)


def _run(config: Path | None, debug: bool, call: Callable[[WeatherBridge], Awaitable[T]]) -> T:
    """Run one bridge call on a fresh event loop and close the bridge."""
    _configure_logging(debug)
    bridge = build_bridge(config)

    async def _go() -> T:
        async with bridge:
            return await call(bridge)

    try:
        return asyncio.run(_go())
    except WeatherAPIError as exc:
        typer.secho(f"Request failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def snapshot(
    lat: float = typer.Argument(..., help="Latitude"),
    lon: float = typer.Argument(..., help="Longitude"),
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the canonical snapshot for one location."""
    location = Location(lat=lat, lon=lon)
    result = _run(config, debug, lambda b: b.get_snapshot(location))
    _echo_json(result.model_dump(mode="json"))


@app.command()
def batch(
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print snapshots for every location listed in the config."""
    results = _run(config, debug, lambda b: b.get_batch_snapshots())
    _echo_json([r.model_dump(mode="json") if r else None for r in results])
    if results and all(r is None for r in results):
        raise typer.Exit(code=1)


@app.command()
def search(
    query: str = typer.Argument(..., help="Place name, e.g. 'Atlanta, GA, US'"),
    limit: int = LIMIT_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Forward-geocode a place name."""
    results = _run(config, debug, lambda b: b.search_location(query, limit))
    _echo_json([r.model_dump(mode="json") for r in results])


@app.command()
def radar(
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the radar animation timeline."""
    timeline = _run(config, debug, lambda b: b.get_imagery_timeline())
    if timeline.is_empty:
        typer.echo("No radar imagery available", err=True)
    _echo_json(timeline.model_dump(mode="json"))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        BridgeSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
