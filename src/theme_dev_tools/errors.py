"""Exception hierarchy for theme dev tools."""

from __future__ import annotations

from pathlib import Path


class ThemeDevToolsError(Exception):
    """Base exception for theme dev tools errors."""


class UserCancelled(ThemeDevToolsError):
    """The user picked "cancel" at a prompt.

    Not a failure: commands report it and exit with status 0.
    """

    def __init__(self, message: str = "Command cancelled"):
        super().__init__(message)


class CatalogUnavailable(ThemeDevToolsError):
    """The theme registry could not be queried or holds too few themes."""


class DirectoryUnreadable(ThemeDevToolsError):
    """A directory inside a theme could not be listed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read directory {path}: {reason}")


class CopyFailure(ThemeDevToolsError):
    """Copying a file between themes failed.

    The message is the underlying I/O error text, surfaced verbatim.
    """

    def __init__(self, source: Path, target: Path, reason: str):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(reason)


class InvalidPattern(ThemeDevToolsError):
    """A delimited search expression is not a valid regular expression."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        super().__init__(f"Invalid search expression '{expression}': {reason}")
