"""Persistence options accepted at controller construction."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_SIZE = 1024 * 1024


class PersistenceConfig(BaseModel):
    """Size budget plus optional key filters.

    Setting both ``whitelist`` and ``blacklist`` is accepted; the whitelist is
    evaluated first and the controller reports the overlap.
    """

    max_size: int | None = Field(
        default=DEFAULT_MAX_SIZE,
        gt=0,
        validation_alias=AliasChoices("max_size", "maxSize"),
    )
    whitelist: tuple[str, ...] | None = None
    blacklist: tuple[str, ...] | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("whitelist", "blacklist", mode="before")
    @classmethod
    def _coerce_single_key(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        return value


__all__ = ["DEFAULT_MAX_SIZE", "PersistenceConfig"]
