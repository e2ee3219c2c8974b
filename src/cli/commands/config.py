"""Configuration inspection commands."""

from __future__ import annotations

from typing import Any

import typer

from core.config import Settings, get_settings
from .shared import emit_json


app = typer.Typer(
    help="Inspect effective configuration",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("show", help="Show effective settings")
def show_config(
    json_out: bool = typer.Option(True, "--json/--no-json", help="Output JSON"),
) -> None:
    payload = get_settings().model_dump()
    if json_out:
        emit_json(payload)
        return
    for key, value in payload.items():
        typer.echo(f"{key}={value}")


@app.command("diff", help="Show settings that differ from defaults")
def diff_config() -> None:
    current = get_settings().model_dump()
    defaults = _settings_defaults()
    diff: dict[str, dict[str, Any]] = {}
    for key, value in current.items():
        default = defaults.get(key)
        if value != default:
            diff[key] = {"value": value, "default": default}
    emit_json(diff)


def _settings_defaults() -> dict[str, Any]:
    return {
        name: field.get_default(call_default_factory=True)
        for name, field in Settings.model_fields.items()
    }


__all__ = ["app"]
