"""Errors surfaced by the persistence controller."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    PERSIST = "persist"
    RESTORE = "restore"
    PURGE = "purge"
    SIZE = "size"


class PersistenceError(RuntimeError):
    """A collaborator failure, tagged with the operation that hit it.

    Storage, cache and codec exceptions never leave the controller as-is: they
    are always wrapped in this type, so ``except OSError`` around a controller
    call does not catch a storage failure. The underlying exception is kept as
    ``__cause__``.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return self.message
        return f"{self.message}: {cause}"


__all__ = ["ErrorKind", "PersistenceError"]
