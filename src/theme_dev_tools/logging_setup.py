"""Logging configuration for the ``tdt`` CLI."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "THEME_DEV_TOOLS_DEBUG"
_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def is_debug_enabled() -> bool:
    return os.getenv(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY_VALUES


def configure_logging(verbose: bool = False) -> None:
    """Route package log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_path=False,
        show_time=False,
    )
    package_logger = logging.getLogger("theme_dev_tools")
    package_logger.handlers = [handler]
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose or is_debug_enabled() else logging.WARNING)
