"""``tdt copy`` - transfer a template or stylesheet between themes."""

from __future__ import annotations

import typer

from theme_dev_tools.cli.commands._common import TOOL_NAME, registry_from_context, run_flow
from theme_dev_tools.cli.ui import ConsoleIO
from theme_dev_tools.filesystem import LocalFilesystem
from theme_dev_tools.flows import run_copy

DESCRIPTION = "Transfer .twig and .scss files between theme plugins"


def copy(ctx: typer.Context) -> None:
    """Transfer .twig and .scss files between theme plugins."""
    io = ConsoleIO()
    io.title(f"{TOOL_NAME} COPY: {DESCRIPTION}")
    registry = registry_from_context(ctx)
    run_flow(io, lambda: run_copy(io, registry, LocalFilesystem()))
