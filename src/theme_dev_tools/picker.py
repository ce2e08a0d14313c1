"""Interactive, one-level-at-a-time file picker inside a theme category root.

The picker keeps an explicit stack of path segments below the category
root. Each round lists the current directory and turns the user's answer
into one of four actions: descend into a directory, select a file, go
back one level or cancel. There is no ``..`` entry, so the accumulated
path can never leave the category root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from rich.markup import escape

from .categories import FileCategory
from .console import BACK_KEY, BACK_LABEL, CANCEL_KEY, CANCEL_LABEL, Prompter
from .errors import UserCancelled
from .filesystem import Filesystem

logger = logging.getLogger(__name__)

PICK_PROMPT = "Select file or descend into directory"


class PickAction(Enum):
    DESCEND = "descend"
    SELECT = "select"
    BACK = "back"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class DirEntry:
    """One listed child of the current directory."""

    display_label: str
    raw_name: str
    is_directory: bool


@dataclass
class PickSession:
    """Mutable state of a running pick: the segment stack below the root."""

    root: Path
    category: FileCategory
    segments: list[str] = field(default_factory=list)

    @property
    def current_dir(self) -> Path:
        return self.root.joinpath(*self.segments)

    @property
    def relative_path(self) -> str:
        return str(PurePosixPath(*self.segments)) if self.segments else ""

    def push(self, name: str) -> None:
        self.segments.append(name)

    def pop(self) -> None:
        if self.segments:
            self.segments.pop()


def list_entries(fs: Filesystem, directory: Path, category: FileCategory) -> list[DirEntry]:
    """List ``directory`` filtered to subdirectories and category files.

    Directories come first, then files, each sorted by name. Files are
    shown in yellow, directories with a leading ``/``.
    """
    directories: list[DirEntry] = []
    files: list[DirEntry] = []
    for name, is_dir in fs.list_dir(directory):
        if is_dir:
            directories.append(DirEntry(f"/{escape(name)}", name, True))
        elif category.matches(name):
            files.append(DirEntry(f"[yellow]{escape(name)}[/yellow]", name, False))
    directories.sort(key=lambda entry: entry.raw_name)
    files.sort(key=lambda entry: entry.raw_name)
    return directories + files


def build_options(entries: list[DirEntry], can_go_back: bool) -> dict[str, str]:
    options = {str(index): entry.display_label for index, entry in enumerate(entries)}
    if can_go_back:
        options[BACK_KEY] = BACK_LABEL
    options[CANCEL_KEY] = CANCEL_LABEL
    return options


def resolve_action(answer: str, entries: list[DirEntry]) -> tuple[PickAction, DirEntry | None]:
    """Translate a prompt answer into the pending picker action."""
    if answer == CANCEL_KEY:
        return PickAction.CANCEL, None
    if answer == BACK_KEY:
        return PickAction.BACK, None
    entry = entries[int(answer)]
    return (PickAction.DESCEND if entry.is_directory else PickAction.SELECT), entry


class FilePicker:
    """Walk a theme category root and return the chosen file's relative path."""

    def __init__(self, prompter: Prompter, fs: Filesystem):
        self.prompter = prompter
        self.fs = fs

    def pick(self, theme_base: Path, category: FileCategory) -> str:
        """Run the pick loop and return the selected path relative to the root.

        Raises:
            UserCancelled: When the user cancels.
            DirectoryUnreadable: When the current directory cannot be listed.
        """
        session = PickSession(root=theme_base / category.root, category=category)

        while True:
            if session.segments:
                self.prompter.text()
                self.prompter.text(f"[cyan]You are here: {escape(session.relative_path)}[/cyan]")
                self.prompter.text()

            entries = list_entries(self.fs, session.current_dir, category)
            options = build_options(entries, can_go_back=bool(session.segments))
            action, entry = resolve_action(self.prompter.choice(PICK_PROMPT, options), entries)

            if action is PickAction.CANCEL:
                raise UserCancelled()
            if action is PickAction.BACK:
                session.pop()
                continue

            session.push(entry.raw_name)
            if action is PickAction.DESCEND:
                continue

            if not category.matches(session.relative_path):
                logger.warning("Picked %s does not match %s files", session.relative_path, category.value)
                raise UserCancelled()
            logger.debug("Picked %s", session.relative_path)
            return session.relative_path
