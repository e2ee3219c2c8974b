# tests/conftest.py
import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Settings are cached per process; each test gets its own storage dir.
    for name in (
        "CACHE_PERSIST_MAX_SIZE",
        "CACHE_PERSIST_WHITELIST",
        "CACHE_PERSIST_BLACKLIST",
        "CACHE_PERSIST_BACKEND",
        "CACHE_PERSIST_KEY",
        "CACHE_PERSIST_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CACHE_PERSIST_PATH", str(tmp_path / "store"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
