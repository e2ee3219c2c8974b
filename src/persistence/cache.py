"""In-memory normalized cache that can hand out and reload snapshots."""

from __future__ import annotations

import copy
from typing import Any, Mapping

from persistence.codec import JsonSnapshotCodec, SnapshotCodec
from persistence.keys import ROOT_QUERY


class SnapshotCache:
    def __init__(
        self,
        initial: Mapping[str, Any] | None = None,
        *,
        codec: SnapshotCodec | None = None,
    ) -> None:
        self._codec = codec or JsonSnapshotCodec()
        self._data: dict[str, Any] = copy.deepcopy(dict(initial or {}))

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def write(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def write_root_field(self, field: str, value: Any) -> None:
        root = self._data.setdefault(ROOT_QUERY, {})
        root[field] = copy.deepcopy(value)

    def extract_snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    async def restore(self, data: str) -> None:
        self._data = self._codec.decode(data)


__all__ = ["SnapshotCache"]
