"""SQLite-backed snapshot storage."""

from __future__ import annotations

import asyncio
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from persistence.fs_store import DEFAULT_KEY


_SCHEMA = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS snapshots (
    key TEXT PRIMARY KEY,
    data TEXT NOT NULL,
    bytes INTEGER NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class SqliteStorage:
    def __init__(self, path: str | Path, *, key: str = DEFAULT_KEY) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._key = key
        self._initialize()

    @property
    def path(self) -> Path:
        return self._path

    async def write(self, data: str) -> None:
        await asyncio.to_thread(self._write_sync, data)

    async def read(self) -> str | None:
        return await asyncio.to_thread(self._read_sync)

    async def purge(self) -> None:
        await asyncio.to_thread(self._purge_sync)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize(self) -> None:
        with self._connect() as conn:
            conn.executescript(_SCHEMA)
            conn.commit()

    def _write_sync(self, data: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO snapshots (key, data, bytes, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    data = excluded.data,
                    bytes = excluded.bytes,
                    updated_at = excluded.updated_at
                """,
                (self._key, data, len(data.encode("utf-8")), now),
            )
            conn.commit()

    def _read_sync(self) -> str | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT data FROM snapshots WHERE key = ?", (self._key,)
            ).fetchone()
        if row is None:
            return None
        return row["data"]

    def _purge_sync(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM snapshots WHERE key = ?", (self._key,))
            conn.commit()


__all__ = ["SqliteStorage"]
