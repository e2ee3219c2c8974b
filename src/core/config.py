"""Application configuration and .env loading."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from schemas.options import DEFAULT_MAX_SIZE, PersistenceConfig


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    cache_persist_max_size: int = Field(
        default=DEFAULT_MAX_SIZE, ge=0, validation_alias="CACHE_PERSIST_MAX_SIZE"
    )
    cache_persist_whitelist: Annotated[list[str] | None, NoDecode] = Field(
        default=None, validation_alias="CACHE_PERSIST_WHITELIST"
    )
    cache_persist_blacklist: Annotated[list[str] | None, NoDecode] = Field(
        default=None, validation_alias="CACHE_PERSIST_BLACKLIST"
    )

    cache_persist_backend: Literal["file", "sqlite"] = Field(
        default="file", validation_alias="CACHE_PERSIST_BACKEND"
    )
    cache_persist_path: str = Field(
        default="data/cache-persist", validation_alias="CACHE_PERSIST_PATH"
    )
    cache_persist_key: str = Field(
        default="apollo-cache-persist", validation_alias="CACHE_PERSIST_KEY"
    )
    cache_persist_debug: bool = Field(default=False, validation_alias="CACHE_PERSIST_DEBUG")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["text", "json"] = Field(default="text", validation_alias="LOG_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("cache_persist_whitelist", "cache_persist_blacklist", mode="before")
    @classmethod
    def _split_key_list(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        text = value.strip()
        if not text:
            return None
        if text.startswith("["):
            return json.loads(text)
        return [item.strip() for item in text.split(",") if item.strip()]

    def to_persistence_config(self) -> PersistenceConfig:
        """A max size of 0 disables the size guard."""
        return PersistenceConfig(
            max_size=self.cache_persist_max_size or None,
            whitelist=self.cache_persist_whitelist,
            blacklist=self.cache_persist_blacklist,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["Settings", "get_settings"]
