"""Key grammar and allow/deny list matching for cache snapshot keys."""

from __future__ import annotations

import re
from typing import Iterable

ROOT_QUERY = "ROOT_QUERY"

_KEY_SEPARATORS = re.compile(r"[.(]")


def split_key(key: str) -> tuple[str, str | None]:
    """Return ``(segment0, segment1)`` of a cache key.

    ``segment1`` is the text between the first and second separator and is
    ``None`` when the key has no separator at all.
    """
    parts = _KEY_SEPARATORS.split(key)
    if len(parts) < 2:
        return parts[0], None
    return parts[0], parts[1]


def matches(items: Iterable[str], key: str, prefix: str | None = None) -> bool:
    """Return True when ``key`` is selected by one of ``items``.

    Without a prefix the leading segment must equal an item. With a prefix the
    leading segment must contain the prefix and the nested segment must equal
    an item (``ROOT_QUERY.user`` style keys).
    """
    head, nested = split_key(key)
    for item in items:
        if not prefix and head == item:
            return True
        if prefix and prefix in head and nested == item:
            return True
    return False


__all__ = ["ROOT_QUERY", "matches", "split_key"]
