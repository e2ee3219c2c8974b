"""Shared helpers for CLI subcommands."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, TypeVar

import typer
from pydantic import ValidationError

from core.config import Settings, get_settings
from persistence.cache import SnapshotCache
from persistence.controller import Persistor
from persistence.errors import PersistenceError
from persistence.factory import build_storage
from persistence.log import PersistLog
from schemas.options import PersistenceConfig

T = TypeVar("T")


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def load_snapshot_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise typer.BadParameter(f"Snapshot not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Snapshot is not valid JSON: {path} ({exc})") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"Snapshot must be a JSON object: {path}")
    return payload


def build_config(
    settings: Settings,
    *,
    max_size: int | None = None,
    whitelist: list[str] | None = None,
    blacklist: list[str] | None = None,
) -> PersistenceConfig:
    base = settings.to_persistence_config()
    overrides: dict[str, Any] = {}
    if max_size is not None:
        overrides["max_size"] = max_size or None
    if whitelist:
        overrides["whitelist"] = whitelist
    if blacklist:
        overrides["blacklist"] = blacklist
    if not overrides:
        return base
    try:
        return PersistenceConfig.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def build_persistor(
    cache: SnapshotCache,
    *,
    config: PersistenceConfig | None = None,
    settings: Settings | None = None,
) -> tuple[Persistor, PersistLog]:
    settings = settings or get_settings()
    log = PersistLog(debug=settings.cache_persist_debug)
    persistor = Persistor(
        cache=cache,
        storage=build_storage(settings),
        log=log,
        config=config or settings.to_persistence_config(),
    )
    return persistor, log


def run_operation(operation: Awaitable[T]) -> T:
    try:
        return asyncio.run(operation)
    except PersistenceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


__all__ = [
    "build_config",
    "build_persistor",
    "emit_json",
    "load_snapshot_file",
    "run_operation",
]
