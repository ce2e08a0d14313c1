"""``tdt find`` - search theme source files for a string or pattern."""

from __future__ import annotations

from typing import Optional

import typer

from theme_dev_tools.categories import FileCategory
from theme_dev_tools.cli.commands._common import TOOL_NAME, registry_from_context, run_flow
from theme_dev_tools.cli.ui import ConsoleIO
from theme_dev_tools.filesystem import LocalFilesystem
from theme_dev_tools.flows import run_find

DESCRIPTION = "Search theme plugin .twig, .scss and .js files for substring"


def find(
    ctx: typer.Context,
    filetype: Optional[FileCategory] = typer.Argument(
        None,
        case_sensitive=False,
        help="File type to search; skips the file type prompt",
    ),
) -> None:
    """Search theme plugin .twig, .scss and .js files for substring."""
    io = ConsoleIO()
    io.title(f"{TOOL_NAME} FIND: {DESCRIPTION}")
    registry = registry_from_context(ctx)
    run_flow(io, lambda: run_find(io, registry, LocalFilesystem(), filetype))
