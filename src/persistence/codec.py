"""Snapshot codecs translating between mappings and transport strings."""

from __future__ import annotations

import json
from typing import Any, Mapping, Protocol


class SnapshotCodec(Protocol):
    def encode(self, snapshot: Mapping[str, Any]) -> str: ...

    def decode(self, data: str) -> dict[str, Any]: ...


class JsonSnapshotCodec:
    """Compact JSON, keys kept in cache order."""

    def encode(self, snapshot: Mapping[str, Any]) -> str:
        return json.dumps(
            snapshot,
            ensure_ascii=False,
            separators=(",", ":"),
        )

    def decode(self, data: str) -> dict[str, Any]:
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Stored snapshot is not valid JSON ({exc})") from exc
        if not isinstance(payload, dict):
            raise ValueError("Stored snapshot must be a JSON object")
        return payload


__all__ = ["JsonSnapshotCodec", "SnapshotCodec"]
