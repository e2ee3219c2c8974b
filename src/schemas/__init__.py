"""Schema package for persistence options."""

from .options import DEFAULT_MAX_SIZE, PersistenceConfig

__all__ = ["DEFAULT_MAX_SIZE", "PersistenceConfig"]
