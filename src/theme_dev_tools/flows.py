"""The interactive ``copy`` and ``find`` command flows.

Both flows end after one completed action. Cancelling at any prompt raises
``UserCancelled``; fatal problems raise the other ``ThemeDevToolsError``
subclasses and are turned into exit codes by the CLI layer.
"""

from __future__ import annotations

import logging
from typing import Sequence

from rich.markup import escape
from rich.text import Text

from .catalog import ThemeDescriptor, ThemeRegistry, list_themes, other_themes
from .categories import COPY_CATEGORIES, FIND_CATEGORIES, FileCategory
from .console import CANCEL_KEY, Prompter, indexed, with_cancel
from .copier import CopyOrchestrator, CopyStatus
from .errors import UserCancelled
from .filesystem import Filesystem
from .picker import FilePicker
from .search import FileMatches, compile_pattern, search

logger = logging.getLogger(__name__)

SEARCH_PROMPT = "Enter search string or regular expression (Delimit with '/')"


def choose_theme(prompter: Prompter, themes: Sequence[ThemeDescriptor], prompt: str) -> ThemeDescriptor:
    options = with_cancel(indexed([escape(theme.technical_name) for theme in themes]))
    answer = prompter.choice(prompt, options)
    if answer == CANCEL_KEY:
        raise UserCancelled()
    return themes[int(answer)]


def choose_category(
    prompter: Prompter,
    categories: Sequence[FileCategory],
    prompt: str,
    labels: Sequence[str] | None = None,
) -> FileCategory:
    labels = list(labels) if labels is not None else [category.label for category in categories]
    answer = prompter.choice(prompt, with_cancel(indexed(labels)))
    if answer == CANCEL_KEY:
        raise UserCancelled()
    return categories[int(answer)]


def run_copy(prompter: Prompter, registry: ThemeRegistry, fs: Filesystem) -> int:
    """Pick a file in a source theme and copy it into another theme.

    Returns the command exit code.
    """
    themes = list_themes(registry, minimum=2)
    source = choose_theme(prompter, themes, "Select the source theme")
    targets = other_themes(themes, source)
    category = choose_category(prompter, COPY_CATEGORIES, "Select filetype to copy")

    relative_path = FilePicker(prompter, fs).pick(source.base_path, category)
    prompter.text()
    prompter.text(f"[cyan]Selected file: {escape(relative_path)}[/cyan]")
    prompter.text()

    result = CopyOrchestrator(prompter, fs).copy(source, category, relative_path, targets)
    if result.status is CopyStatus.CANCELLED:
        raise UserCancelled()
    if result.status is CopyStatus.FAILURE:
        raise result.error
    prompter.success(f"{escape(relative_path)} copied to {escape(result.target.technical_name)}")
    return result.exit_code


def ask_search_term(prompter: Prompter) -> str:
    while True:
        term = prompter.ask(SEARCH_PROMPT).strip()
        if term:
            return term
        prompter.error("The search string must not be empty")


def render_file_matches(prompter: Prompter, found: FileMatches) -> None:
    prompter.text(f"[cyan]@ {escape(found.relative_path)}[/cyan]")
    for record in found.matches:
        line = Text(record.raw_line)
        for start, end in record.spans:
            if start != end:
                line.stylize("yellow", start, end)
        prompter.text(Text.assemble((f"{record.line_number}:", "green"), " ", line))
    prompter.text()


def run_find(
    prompter: Prompter,
    registry: ThemeRegistry,
    fs: Filesystem,
    category: FileCategory | None = None,
) -> int:
    """Search one theme's files of one category and print matching lines.

    When ``category`` is given the file type prompt is skipped.
    """
    themes = list_themes(registry)
    theme = choose_theme(prompter, themes, "Select the theme to search")
    if category is None:
        category = choose_category(
            prompter,
            FIND_CATEGORIES,
            "Which filetypes do you want to search?",
            labels=[c.value for c in FIND_CATEGORIES],
        )

    pattern = compile_pattern(ask_search_term(prompter))
    logger.debug("Searching %s %s files for %r", theme.technical_name, category.value, pattern.pattern)

    file_count = 0
    line_count = 0
    for found in search(fs, theme.base_path, category, pattern):
        render_file_matches(prompter, found)
        file_count += 1
        line_count += len(found.matches)

    prompter.text(f"[dim]{line_count} matching line(s) in {file_count} file(s)[/dim]")
    return 0
