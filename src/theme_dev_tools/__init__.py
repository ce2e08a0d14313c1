"""
Theme Dev Tools - developer utilities for storefront theme plugins.

Usage:
    tdt copy
    tdt find [twig|scss|js]
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from theme_dev_tools.cli.commands import register_commands
from theme_dev_tools.logging_setup import configure_logging

PROJECT_ROOT_ENV_VAR = "THEME_DEV_TOOLS_PROJECT_ROOT"

app = typer.Typer(
    name="tdt",
    help="Copy and search template, stylesheet and script files of storefront themes",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        envvar=PROJECT_ROOT_ENV_VAR,
        file_okay=False,
        help="Shop installation whose themes are used (defaults to the current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Copy and search template, stylesheet and script files of storefront themes."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("project_root", project_root or Path.cwd())


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
