from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from persistence.cache import SnapshotCache
from persistence.controller import Persistor
from persistence.errors import ErrorKind, PersistenceError
from persistence.log import PersistLog
from persistence.sqlite_store import SqliteStorage
from schemas.options import PersistenceConfig


def test_sqlite_persist_then_restore_into_fresh_cache(tmp_path: Path) -> None:
    storage = SqliteStorage(tmp_path / "snapshots.sqlite")
    source = SnapshotCache(
        {
            "User:1": {"id": 1, "name": "Ada"},
            "Session:9": {"token": "secret"},
            "ROOT_QUERY": {"me": {"__ref": "User:1"}, "session": {"__ref": "Session:9"}},
        }
    )
    config = PersistenceConfig(blacklist=["Session", "session"])
    writer = Persistor(cache=source, storage=storage, log=PersistLog(), config=config)

    target = SnapshotCache()
    reader = Persistor(cache=target, storage=storage, log=PersistLog())

    async def scenario() -> None:
        await writer.persist()
        await reader.restore()

    asyncio.run(scenario())

    # top-level entity keys only match the blacklist through a ROOT_QUERY prefix
    assert target.extract_snapshot() == {
        "User:1": {"id": 1, "name": "Ada"},
        "Session:9": {"token": "secret"},
        "ROOT_QUERY": {"me": {"__ref": "User:1"}},
    }


def test_snapshot_cache_write_helpers_feed_persist(tmp_path: Path) -> None:
    storage = SqliteStorage(tmp_path / "snapshots.sqlite")
    cache = SnapshotCache()
    cache.write("Post:1", {"title": "t"})
    cache.write_root_field("posts", [{"__ref": "Post:1"}])
    log = PersistLog()
    persistor = Persistor(cache=cache, storage=storage, log=log)

    outcome = asyncio.run(persistor.persist())

    assert outcome.written is True
    tail = log.tail()
    assert tail[0].startswith("Persisted cache {")
    assert tail[-1] == f"Persisted cache of size {outcome.size}"


def test_restore_of_corrupt_snapshot_raises(tmp_path: Path) -> None:
    storage = SqliteStorage(tmp_path / "snapshots.sqlite")
    asyncio.run(storage.write("not json"))
    cache = SnapshotCache({"keep": 1})
    persistor = Persistor(cache=cache, storage=storage, log=PersistLog())

    with pytest.raises(PersistenceError) as excinfo:
        asyncio.run(persistor.restore())

    assert excinfo.value.kind is ErrorKind.RESTORE
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert cache.get("keep") == 1
