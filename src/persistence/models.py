"""Lightweight persistence records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PersistOutcome:
    written: bool
    paused: bool
    size: int


@dataclass(frozen=True)
class RestoreOutcome:
    restored: bool
    size: int | None


__all__ = ["PersistOutcome", "RestoreOutcome"]
