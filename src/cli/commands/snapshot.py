"""Snapshot persistence commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from core.config import get_settings
from persistence.cache import SnapshotCache
from persistence.filtering import filter_snapshot
from .shared import build_config, build_persistor, emit_json, load_snapshot_file, run_operation


app = typer.Typer(
    help="Persist, restore and purge cache snapshots",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("filter", help="Preview the filtered snapshot without touching storage")
def filter_command(
    snapshot_path: Path = typer.Argument(..., metavar="SNAPSHOT"),
    whitelist: list[str] | None = typer.Option(None, "--whitelist", "-w", help="Keys to keep"),
    blacklist: list[str] | None = typer.Option(None, "--blacklist", "-b", help="Keys to drop"),
) -> None:
    snapshot = load_snapshot_file(snapshot_path)
    config = build_config(get_settings(), whitelist=whitelist, blacklist=blacklist)
    emit_json(filter_snapshot(snapshot, config))


@app.command("persist", help="Load a snapshot file and persist it to storage")
def persist_command(
    snapshot_path: Path = typer.Argument(..., metavar="SNAPSHOT"),
    max_size: int | None = typer.Option(
        None, "--max-size", min=0, help="Size budget in characters (0 disables)"
    ),
    whitelist: list[str] | None = typer.Option(None, "--whitelist", "-w", help="Keys to keep"),
    blacklist: list[str] | None = typer.Option(None, "--blacklist", "-b", help="Keys to drop"),
) -> None:
    settings = get_settings()
    cache = SnapshotCache(load_snapshot_file(snapshot_path))
    config = build_config(
        settings, max_size=max_size, whitelist=whitelist, blacklist=blacklist
    )
    persistor, log = build_persistor(cache, config=config, settings=settings)
    outcome = run_operation(persistor.persist())
    emit_json(
        {
            "written": outcome.written,
            "paused": outcome.paused,
            "size": outcome.size,
            "log": log.tail(),
        }
    )


@app.command("restore", help="Read the stored snapshot")
def restore_command(
    output: Path | None = typer.Option(
        None, "--output", help="Write the restored snapshot here (default: stdout)"
    ),
) -> None:
    cache = SnapshotCache()
    persistor, _ = build_persistor(cache)
    outcome = run_operation(persistor.restore())
    if not outcome.restored:
        emit_json({"restored": False})
        return
    snapshot = cache.extract_snapshot()
    if output is None:
        emit_json(snapshot)
        return
    output.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    typer.echo(f"Restored {outcome.size} characters to {output}")


@app.command("purge", help="Erase the stored snapshot")
def purge_command() -> None:
    persistor, _ = build_persistor(SnapshotCache())
    run_operation(persistor.purge())
    emit_json({"purged": True})


@app.command("size", help="Show the size of the stored snapshot")
def size_command() -> None:
    persistor, _ = build_persistor(SnapshotCache())
    emit_json({"size": run_operation(persistor.get_size())})


__all__ = ["app"]
