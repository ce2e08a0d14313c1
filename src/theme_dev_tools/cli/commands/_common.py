"""Shared plumbing for the interactive commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import typer
from rich.markup import escape

from theme_dev_tools.catalog import ProjectThemeRegistry, ThemeRegistry
from theme_dev_tools.cli.ui import ConsoleIO
from theme_dev_tools.errors import ThemeDevToolsError, UserCancelled

logger = logging.getLogger(__name__)

TOOL_NAME = "ThemeDevTools"


def registry_from_context(ctx: typer.Context) -> ThemeRegistry:
    obj = ctx.obj or {}
    registry = obj.get("registry")
    if registry is not None:
        return registry
    project_root = obj.get("project_root") or Path.cwd()
    return ProjectThemeRegistry(Path(project_root))


def run_flow(io: ConsoleIO, flow: Callable[[], int]) -> None:
    """Run ``flow`` and translate its outcome into the process exit code."""
    try:
        exit_code = flow()
    except UserCancelled as exc:
        io.text(escape(str(exc)))
        raise typer.Exit(0)
    except ThemeDevToolsError as exc:
        logger.debug("Command failed", exc_info=True)
        io.error(escape(str(exc)))
        raise typer.Exit(1)
    raise typer.Exit(exit_code)
