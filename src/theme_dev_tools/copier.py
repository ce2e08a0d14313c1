"""Copy a picked file from one theme to another."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Sequence

from rich.markup import escape

from .catalog import ThemeDescriptor
from .categories import FileCategory
from .console import CANCEL_KEY, Prompter, indexed, with_cancel
from .errors import CopyFailure
from .filesystem import Filesystem

logger = logging.getLogger(__name__)

TARGET_PROMPT = "Select the target theme"


class CopyStatus(Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class CopyResult:
    status: CopyStatus
    relative_path: str
    target: ThemeDescriptor | None = None
    reason: str | None = None
    error: CopyFailure | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.status is CopyStatus.FAILURE else 0


def target_path(theme: ThemeDescriptor, category: FileCategory, relative_path: str) -> Path:
    return theme.base_path / category.root / PurePosixPath(relative_path)


class CopyOrchestrator:
    """Choose a target theme, confirm overwrites and perform the copy."""

    def __init__(self, prompter: Prompter, fs: Filesystem):
        self.prompter = prompter
        self.fs = fs

    def copy(
        self,
        source: ThemeDescriptor,
        category: FileCategory,
        relative_path: str,
        candidates: Sequence[ThemeDescriptor],
    ) -> CopyResult:
        options = with_cancel(indexed([escape(theme.technical_name) for theme in candidates]))
        answer = self.prompter.choice(TARGET_PROMPT, options)
        if answer == CANCEL_KEY:
            return CopyResult(CopyStatus.CANCELLED, relative_path)
        target = candidates[int(answer)]

        source_file = target_path(source, category, relative_path)
        target_file = target_path(target, category, relative_path)
        if self.fs.exists(target_file):
            overwrite = self.prompter.confirm(
                f"File exists in {target.technical_name}, overwrite?", default=False
            )
            if not overwrite:
                return CopyResult(CopyStatus.CANCELLED, relative_path, target)

        try:
            self.fs.copy(source_file, target_file)
        except CopyFailure as exc:
            logger.debug("Copy of %s failed: %s", relative_path, exc.reason)
            return CopyResult(CopyStatus.FAILURE, relative_path, target, exc.reason, exc)
        return CopyResult(CopyStatus.SUCCESS, relative_path, target)
