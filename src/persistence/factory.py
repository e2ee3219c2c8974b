"""Build persistence collaborators from runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from persistence.contracts import SnapshotStorage
from persistence.fs_store import FileStorage
from persistence.sqlite_store import SqliteStorage

if TYPE_CHECKING:
    from core.config import Settings


def build_storage(settings: "Settings") -> SnapshotStorage:
    backend = (settings.cache_persist_backend or "file").strip().lower()
    base_dir = Path(settings.cache_persist_path)
    if backend == "file":
        return FileStorage(base_dir, key=settings.cache_persist_key)
    if backend == "sqlite":
        return SqliteStorage(base_dir / "snapshots.sqlite", key=settings.cache_persist_key)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = ["build_storage"]
