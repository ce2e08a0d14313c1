"""CLI helpers exposed for other modules."""

from .ui import ConsoleIO, select_with_arrows

__all__ = ["ConsoleIO", "select_with_arrows"]
