"""Recursive search of theme source files for a literal string or pattern.

Search input is literal by default: ``a.b`` only finds the three
characters ``a.b``. Wrapping the input in slashes, as in ``/^foo/``, hands
the inner text to the regular expression engine unchanged.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .categories import FileCategory
from .errors import InvalidPattern
from .filesystem import Filesystem

logger = logging.getLogger(__name__)

PATTERN_DELIMITER = "/"
HIGHLIGHT_OPEN = "<hl>"
HIGHLIGHT_CLOSE = "</hl>"


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A matching line: 1-based number, trimmed text and highlighted text.

    ``highlighted_line`` wraps each match in plain text markers; terminal
    output styles ``raw_line`` from ``spans`` instead.
    """

    line_number: int
    raw_line: str
    highlighted_line: str
    spans: tuple[tuple[int, int], ...] = ()


@dataclass(frozen=True, slots=True)
class FileMatches:
    relative_path: str
    matches: tuple[MatchRecord, ...]


def is_delimited(expression: str) -> bool:
    return (
        len(expression) >= 2
        and expression.startswith(PATTERN_DELIMITER)
        and expression.endswith(PATTERN_DELIMITER)
    )


def compile_pattern(expression: str) -> re.Pattern[str]:
    """Compile user search input.

    Undelimited input is escaped and matched as an exact substring;
    ``/.../`` input is compiled as a regular expression.

    Raises:
        InvalidPattern: If a delimited expression does not compile.
    """
    if not is_delimited(expression):
        return re.compile(re.escape(expression))
    inner = expression[1:-1]
    try:
        return re.compile(inner)
    except re.error as exc:
        raise InvalidPattern(expression, str(exc)) from exc


def match_spans(pattern: re.Pattern[str], line: str) -> tuple[tuple[int, int], ...]:
    """Non-overlapping leftmost matches, as ``re.finditer`` produces them."""
    return tuple(match.span() for match in pattern.finditer(line))


def highlight(
    line: str,
    spans: tuple[tuple[int, int], ...],
    open_marker: str = HIGHLIGHT_OPEN,
    close_marker: str = HIGHLIGHT_CLOSE,
) -> str:
    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        if start == end:
            continue
        parts.append(line[cursor:start])
        parts.append(f"{open_marker}{line[start:end]}{close_marker}")
        cursor = end
    parts.append(line[cursor:])
    return "".join(parts)


def scan_lines(lines, pattern: re.Pattern[str]) -> Iterator[MatchRecord]:
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip()
        spans = match_spans(pattern, line)
        if spans:
            yield MatchRecord(line_number, line, highlight(line, spans), spans)


def scan_file(path: Path, pattern: re.Pattern[str]) -> list[MatchRecord] | None:
    """Scan ``path`` line by line.

    Returns None when the file cannot be read; the caller skips it.
    """
    try:
        with path.open("r", encoding="utf-8", errors="replace", newline="\n") as handle:
            return list(scan_lines(handle, pattern))
    except OSError as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None


def search(
    fs: Filesystem,
    theme_base: Path,
    category: FileCategory,
    pattern: re.Pattern[str],
) -> Iterator[FileMatches]:
    """Lazily yield the files below the category root that contain matches.

    Files are scanned one after another; files without matches and files
    that cannot be read produce nothing.
    """
    root = theme_base / category.root
    for path in fs.walk_files(root, category.glob):
        matches = scan_file(path, pattern)
        if not matches:
            continue
        yield FileMatches(path.relative_to(root).as_posix(), tuple(matches))
