from __future__ import annotations

"""Command line interface for timesamplings using Typer."""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import json
import logging

import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .config import CoordinateSettings, Settings, load_settings
from .core import (
    Sampler,
    SamplingError,
    sampler_from_settings,
    translate_periods as _translate_periods,
)
from .utils.logging import get_logger
from .utils.timeparse import duration_to_ms, parse_duration

app = typer.Typer(help="Translate sample indices and times between coordinate systems")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _build(section: CoordinateSettings, name: str) -> Sampler:
    if section.is_empty():
        bad_parameter(f"the {name} coordinate system is not configured", param_hint=name)
    return sampler_from_settings(section)


def _coordinate_pair(cfg: Settings) -> Tuple[Sampler, Sampler]:
    """Return the source and destination samplers sharing a base space."""

    if (cfg.source.epoch is None) != (cfg.destination.epoch is None):
        bad_parameter("source and destination must both define an epoch or neither")
    if (cfg.source.rate is None) != (cfg.destination.rate is None):
        bad_parameter("source and destination must both define a rate or neither")
    return _build(cfg.source, "source"), _build(cfg.destination, "destination")


def _format(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return f"{duration_to_ms(value)}ms"
    return str(value)


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. source.rate=250",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, TypeError, ValidationError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    get_logger("timesamplings", settings.logging.level, settings.logging.format)
    ctx.obj = settings


@app.command("translate-index")
def translate_index(
    ctx: typer.Context,
    indices: List[int] = typer.Argument(..., help="Source sample indices"),
) -> None:
    """Translate sample indices from the source to the destination system.

    Each index is taken forward through the source sampler into the shared
    base space and back through the destination sampler.
    """

    cfg: Settings = ctx.obj
    src, dst = _coordinate_pair(cfg)
    logger.debug("translate-index: %r -> %r", src, dst)
    for index in indices:
        try:
            result = dst.backward(src.forward(index))
        except SamplingError as exc:
            bad_parameter(str(exc), param_hint="indices")
        typer.echo(_format(result))


@app.command("translate-periods")
def translate_periods(
    ctx: typer.Context,
    periods: List[str] = typer.Argument(..., help="Durations as HH:MM:SS[.fff], MM:SS or SS"),
) -> None:
    """Translate durations from the source epoch to the destination epoch."""

    cfg: Settings = ctx.obj
    if cfg.source.epoch is None or cfg.destination.epoch is None:
        bad_parameter("source.epoch and destination.epoch are required")
    try:
        durations = [parse_duration(text) for text in periods]
    except ValueError as exc:
        bad_parameter(str(exc), param_hint="periods")
    for result in _translate_periods(durations, cfg.source.epoch, cfg.destination.epoch):
        typer.echo(_format(result))


@app.command("to-time")
def to_time(
    ctx: typer.Context,
    indices: List[int] = typer.Argument(..., help="Source sample indices"),
) -> None:
    """Report the base-space value of each source index.

    With an epoch configured this is an ISO-8601 timestamp, otherwise a
    duration in milliseconds.
    """

    cfg: Settings = ctx.obj
    src = _build(cfg.source, "source")
    for index in indices:
        try:
            result = src.forward(index)
        except SamplingError as exc:
            bad_parameter(str(exc), param_hint="indices")
        typer.echo(_format(result))


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
