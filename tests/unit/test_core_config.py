"""Unit tests for the core configuration module."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings
from schemas.options import PersistenceConfig


def test_settings_defaults():
    settings = Settings()

    assert settings.cache_persist_max_size == 1024 * 1024
    assert settings.cache_persist_whitelist is None
    assert settings.cache_persist_blacklist is None
    assert settings.cache_persist_backend == "file"
    assert settings.cache_persist_key == "apollo-cache-persist"
    assert settings.log_format == "text"


def test_settings_with_env_vars(monkeypatch):
    monkeypatch.setenv("CACHE_PERSIST_MAX_SIZE", "2048")
    monkeypatch.setenv("CACHE_PERSIST_WHITELIST", "user, posts")
    monkeypatch.setenv("CACHE_PERSIST_BACKEND", "sqlite")

    settings = Settings()

    assert settings.cache_persist_max_size == 2048
    assert settings.cache_persist_whitelist == ["user", "posts"]
    assert settings.cache_persist_backend == "sqlite"


def test_settings_accepts_json_key_lists(monkeypatch):
    monkeypatch.setenv("CACHE_PERSIST_BLACKLIST", '["secret", "token"]')
    assert Settings().cache_persist_blacklist == ["secret", "token"]


def test_to_persistence_config_zero_disables_budget(monkeypatch):
    monkeypatch.setenv("CACHE_PERSIST_MAX_SIZE", "0")
    monkeypatch.setenv("CACHE_PERSIST_BLACKLIST", "c")

    config = Settings().to_persistence_config()

    assert config.max_size is None
    assert config.blacklist == ("c",)
    assert config.whitelist is None


def test_get_settings_singleton():
    assert get_settings() is get_settings()


def test_persistence_config_validation():
    with pytest.raises(ValidationError):
        PersistenceConfig(max_size=0)
    with pytest.raises(ValidationError):
        PersistenceConfig(unknown=1)

    config = PersistenceConfig.model_validate({"maxSize": 10, "whitelist": "a"})
    assert config.max_size == 10
    assert config.whitelist == ("a",)


def test_persistence_config_is_frozen():
    config = PersistenceConfig()
    with pytest.raises(ValidationError):
        config.max_size = 5
