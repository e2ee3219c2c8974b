"""Persistence subsystem exports."""

from persistence.cache import SnapshotCache
from persistence.codec import JsonSnapshotCodec, SnapshotCodec
from persistence.controller import Persistor
from persistence.errors import ErrorKind, PersistenceError
from persistence.filtering import filter_snapshot
from persistence.fs_store import FileStorage
from persistence.keys import ROOT_QUERY, matches
from persistence.log import PersistLog
from persistence.sqlite_store import SqliteStorage

__all__ = [
    "ErrorKind",
    "FileStorage",
    "JsonSnapshotCodec",
    "PersistLog",
    "PersistenceError",
    "Persistor",
    "ROOT_QUERY",
    "SnapshotCache",
    "SnapshotCodec",
    "SqliteStorage",
    "filter_snapshot",
    "matches",
]
