"""Persistence protocol contracts."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class SnapshotSource(Protocol):
    def extract_snapshot(self) -> Mapping[str, Any]: ...

    async def restore(self, data: str) -> None: ...


class SnapshotStorage(Protocol):
    async def write(self, data: str) -> None: ...

    async def read(self) -> str | None: ...

    async def purge(self) -> None: ...


class PersistLog(Protocol):
    def info(self, message: str, detail: Any = None) -> None: ...

    def error(self, message: str, detail: Any = None) -> None: ...


__all__ = ["PersistLog", "SnapshotSource", "SnapshotStorage"]
