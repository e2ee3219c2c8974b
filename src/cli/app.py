"""Typer CLI entrypoint for cache snapshot persistence."""

from __future__ import annotations

from importlib import import_module

import typer

from cachepersist import __version__
from core.config import get_settings
from core.observability import setup_logging

_SUBCOMMAND_SPECS: list[tuple[str, str]] = [
    ("snapshot", "cli.commands.snapshot"),
    ("config", "cli.commands.config"),
]

app = typer.Typer(
    help="Selective cache snapshot persistence",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


for _name, _module_path in _SUBCOMMAND_SPECS:
    app.add_typer(import_module(_module_path).app, name=_name)


def main() -> None:
    app()


__all__ = ["app", "main"]
