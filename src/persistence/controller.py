"""Persistor: filters, size-checks and writes cache snapshots to storage."""

from __future__ import annotations

import asyncio

from persistence.codec import JsonSnapshotCodec, SnapshotCodec
from persistence.contracts import PersistLog, SnapshotSource, SnapshotStorage
from persistence.errors import ErrorKind, PersistenceError
from persistence.filtering import filter_snapshot
from persistence.models import PersistOutcome, RestoreOutcome
from persistence.size_guard import PURGE_AND_PAUSE, evaluate
from schemas.options import PersistenceConfig


class Persistor:
    def __init__(
        self,
        *,
        cache: SnapshotSource,
        storage: SnapshotStorage,
        log: PersistLog,
        config: PersistenceConfig | None = None,
        codec: SnapshotCodec | None = None,
    ) -> None:
        self._cache = cache
        self._storage = storage
        self._log = log
        self._config = config or PersistenceConfig()
        self._codec = codec or JsonSnapshotCodec()
        self._paused = False
        self._persist_lock = asyncio.Lock()

        if self._config.whitelist is not None and self._config.blacklist is not None:
            self._log.error("Not necessary to set both whitelist and blacklist.")

    @property
    def config(self) -> PersistenceConfig:
        return self._config

    @property
    def paused(self) -> bool:
        return self._paused

    async def persist(self) -> PersistOutcome:
        """Write the filtered snapshot, or purge and pause when it is too large.

        Overlapping calls are serialized. Failures from purge propagate as-is;
        any other failure is logged and raised as a PERSIST error.
        """
        async with self._persist_lock:
            try:
                snapshot = self._cache.extract_snapshot()
                filtered = filter_snapshot(snapshot, self._config)
                data = self._codec.encode(filtered)
            except Exception as exc:
                raise self._failure(ErrorKind.PERSIST, "Error persisting cache", exc) from exc

            decision = evaluate(len(data), self._config.max_size, self._paused)
            if decision.action == PURGE_AND_PAUSE:
                await self.purge()
                self._paused = decision.next_paused
                return PersistOutcome(written=False, paused=True, size=len(data))

            self._paused = decision.next_paused
            try:
                await self._storage.write(data)
            except Exception as exc:
                raise self._failure(ErrorKind.PERSIST, "Error persisting cache", exc) from exc

            self._log.info("Persisted cache", filtered)
            self._log.info(f"Persisted cache of size {len(data)}")
            return PersistOutcome(written=True, paused=self._paused, size=len(data))

    async def restore(self) -> RestoreOutcome:
        try:
            data = await self._storage.read()
            if data is None:
                self._log.info("No stored cache to restore")
                return RestoreOutcome(restored=False, size=None)
            await self._cache.restore(data)
        except Exception as exc:
            raise self._failure(ErrorKind.RESTORE, "Error restoring cache", exc) from exc

        self._log.info(f"Restored cache of size {len(data)}")
        return RestoreOutcome(restored=True, size=len(data))

    async def purge(self) -> None:
        try:
            await self._storage.purge()
        except Exception as exc:
            raise self._failure(ErrorKind.PURGE, "Error purging cache storage", exc) from exc
        self._log.info("Purged cache storage")

    async def get_size(self) -> int | None:
        """Length of the stored snapshot, or None when nothing is stored."""
        try:
            data = await self._storage.read()
        except Exception as exc:
            raise self._failure(ErrorKind.SIZE, "Error reading cache size", exc) from exc
        if data is None:
            return None
        return len(data)

    def _failure(self, kind: ErrorKind, message: str, exc: Exception) -> PersistenceError:
        self._log.error(message, exc)
        return PersistenceError(kind, message)


__all__ = ["Persistor"]
