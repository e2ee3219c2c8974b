"""Two-layer snapshot filtering driven by whitelist/blacklist settings."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from persistence.keys import ROOT_QUERY, matches
from schemas.options import PersistenceConfig


def filter_map(
    data: Mapping[str, Any], keep: Callable[[str], bool]
) -> dict[str, Any]:
    return {key: value for key, value in data.items() if keep(key)}


def key_selector(
    *,
    whitelist: Sequence[str] | None,
    blacklist: Sequence[str] | None,
    prefix: str | None = None,
) -> Callable[[str], bool]:
    """Build the keep-predicate for one layer; whitelist wins over blacklist."""

    def keep(key: str) -> bool:
        if whitelist is not None:
            return matches(whitelist, key, prefix)
        if blacklist is not None:
            return not matches(blacklist, key, prefix)
        return True

    return keep


def filter_snapshot(
    snapshot: Mapping[str, Any], config: PersistenceConfig
) -> dict[str, Any]:
    """Return a filtered copy of ``snapshot``; the input is left untouched."""
    outer = key_selector(
        whitelist=config.whitelist,
        blacklist=config.blacklist,
        prefix=ROOT_QUERY,
    )
    filtered = filter_map(snapshot, lambda key: key == ROOT_QUERY or outer(key))

    root = filtered.get(ROOT_QUERY)
    if not isinstance(root, Mapping):
        root = {}
    filtered[ROOT_QUERY] = filter_map(
        root,
        key_selector(whitelist=config.whitelist, blacklist=config.blacklist),
    )
    return filtered


__all__ = ["filter_map", "filter_snapshot", "key_selector"]
