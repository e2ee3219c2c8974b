from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cli.app import app

runner = CliRunner()


def _write_snapshot(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_filter_previews_snapshot(tmp_path: Path) -> None:
    path = _write_snapshot(tmp_path, {"a": 1, "b": 2, "ROOT_QUERY": {"a(1)": 10, "c": 20}})

    result = runner.invoke(app, ["snapshot", "filter", str(path), "--blacklist", "c"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"a": 1, "b": 2, "ROOT_QUERY": {"a(1)": 10}}


def test_persist_restore_purge_cycle(tmp_path: Path) -> None:
    path = _write_snapshot(tmp_path, {"User:1": {"name": "x"}, "ROOT_QUERY": {"me": 1}})

    persisted = runner.invoke(app, ["snapshot", "persist", str(path)])
    assert persisted.exit_code == 0, persisted.output
    assert json.loads(persisted.output)["written"] is True

    size = runner.invoke(app, ["snapshot", "size"])
    assert json.loads(size.output)["size"] == json.loads(persisted.output)["size"]

    output = tmp_path / "restored.json"
    restored = runner.invoke(app, ["snapshot", "restore", "--output", str(output)])
    assert restored.exit_code == 0, restored.output
    assert json.loads(output.read_text(encoding="utf-8")) == {
        "User:1": {"name": "x"},
        "ROOT_QUERY": {"me": 1},
    }

    purged = runner.invoke(app, ["snapshot", "purge"])
    assert purged.exit_code == 0
    empty = runner.invoke(app, ["snapshot", "restore"])
    assert json.loads(empty.output) == {"restored": False}


def test_persist_over_budget_does_not_write(tmp_path: Path) -> None:
    path = _write_snapshot(tmp_path, {"ROOT_QUERY": {"field": "x" * 100}})

    result = runner.invoke(app, ["snapshot", "persist", str(path), "--max-size", "10"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["written"] is False
    assert payload["paused"] is True
    size = runner.invoke(app, ["snapshot", "size"])
    assert json.loads(size.output) == {"size": None}


def test_persist_rejects_invalid_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[1, 2]", encoding="utf-8")

    result = runner.invoke(app, ["snapshot", "persist", str(path)])

    assert result.exit_code != 0


def test_config_show_reports_environment(monkeypatch) -> None:
    monkeypatch.setenv("CACHE_PERSIST_BACKEND", "sqlite")

    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["cache_persist_backend"] == "sqlite"


def test_size_reports_storage_failure_with_exit_code(monkeypatch) -> None:
    async def broken_read(self) -> str | None:
        raise OSError("read failed")

    monkeypatch.setattr("persistence.fs_store.FileStorage.read", broken_read)

    result = runner.invoke(app, ["snapshot", "size"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert "Error reading cache size: read failed" in result.output
