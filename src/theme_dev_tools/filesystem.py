"""Filesystem access used by the picker, the copier and the search."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterator, Protocol

from .errors import CopyFailure, DirectoryUnreadable

logger = logging.getLogger(__name__)


class Filesystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[tuple[str, bool]]: ...

    def walk_files(self, root: Path, pattern: str) -> Iterator[Path]: ...

    def copy(self, source: Path, target: Path) -> None: ...


class LocalFilesystem:
    """``pathlib``/``shutil`` backed filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_dir(self, path: Path) -> list[tuple[str, bool]]:
        """Return ``(name, is_dir)`` for the immediate children of ``path``.

        Raises:
            DirectoryUnreadable: If ``path`` is missing or cannot be read.
        """
        try:
            children = [(child.name, child.is_dir()) for child in path.iterdir()]
        except OSError as exc:
            raise DirectoryUnreadable(path, exc.strerror or str(exc)) from exc
        logger.debug("Listed %d entries in %s", len(children), path)
        return children

    def walk_files(self, root: Path, pattern: str) -> Iterator[Path]:
        """Yield regular files below ``root`` whose name matches ``pattern``.

        Depth is unbounded; the order is sorted so a fixed tree always
        yields the same sequence.
        """
        if not self.is_dir(root):
            logger.debug("Search root %s does not exist", root)
            return
        for path in sorted(root.rglob(pattern)):
            if path.is_file():
                yield path

    def copy(self, source: Path, target: Path) -> None:
        """Copy ``source`` to ``target``, overwriting and creating parents.

        Raises:
            CopyFailure: With the OS error message when the copy fails.
        """
        logger.debug("Copying %s -> %s", source, target)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as exc:
            raise CopyFailure(source, target, str(exc)) from exc
