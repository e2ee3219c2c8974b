"""Filesystem snapshot storage, one file per storage key."""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path

DEFAULT_KEY = "apollo-cache-persist"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class FileStorage:
    def __init__(self, base_dir: str | Path, *, key: str = DEFAULT_KEY) -> None:
        self._base_dir = Path(base_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)
        self._key = key

    @property
    def path(self) -> Path:
        cleaned = _UNSAFE_CHARS.sub("_", self._key).strip("._") or "snapshot"
        return self._base_dir / f"{cleaned}.json"

    async def write(self, data: str) -> None:
        await asyncio.to_thread(self._write_sync, data)

    async def read(self) -> str | None:
        return await asyncio.to_thread(self._read_sync)

    async def purge(self) -> None:
        await asyncio.to_thread(self.path.unlink, missing_ok=True)

    def _write_sync(self, data: str) -> None:
        target = self.path
        tmp = target.with_suffix(target.suffix + ".tmp")
        tmp.write_text(data, encoding="utf-8")
        os.replace(tmp, target)

    def _read_sync(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None


__all__ = ["DEFAULT_KEY", "FileStorage"]
