"""CLI command groups."""

__all__ = ["config", "snapshot"]

from . import config, snapshot
