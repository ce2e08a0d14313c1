"""CLI command modules for theme dev tools."""

from __future__ import annotations

import typer

from . import copy_cmd, find_cmd


def register_commands(app: typer.Typer) -> None:
    """Attach all theme dev tools commands to the root Typer app."""
    app.command(name="copy", help=copy_cmd.DESCRIPTION)(copy_cmd.copy)
    app.command(name="find", help=find_cmd.DESCRIPTION)(find_cmd.find)


__all__ = ["register_commands"]
