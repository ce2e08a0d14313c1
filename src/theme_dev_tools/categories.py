"""File categories and their fixed locations inside a theme."""

from __future__ import annotations

from enum import StrEnum

TWIG_DIR = "views/storefront"
SCSS_DIR = "app/storefront/src/scss"
JS_DIR = "app/storefront/src"


class FileCategory(StrEnum):
    """Kind of theme source file a command works on."""

    TEMPLATE = "twig"
    STYLESHEET = "scss"
    SCRIPT = "js"

    @property
    def root(self) -> str:
        """Category root, relative to the theme base path."""
        return _ROOTS[self]

    @property
    def suffix(self) -> str:
        """Suffix a file must carry to be picked for copying."""
        return _SUFFIXES[self]

    @property
    def glob(self) -> str:
        """Filename glob used by the recursive search."""
        return f"*.{self.value}"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def matches(self, path: str) -> bool:
        """Return True when ``path`` ends with the category suffix."""
        return path.endswith(self.suffix)


_ROOTS = {
    FileCategory.TEMPLATE: TWIG_DIR,
    FileCategory.STYLESHEET: SCSS_DIR,
    FileCategory.SCRIPT: JS_DIR,
}

_SUFFIXES = {
    FileCategory.TEMPLATE: ".html.twig",
    FileCategory.STYLESHEET: ".scss",
    FileCategory.SCRIPT: ".js",
}

_LABELS = {
    FileCategory.TEMPLATE: "Twig Template",
    FileCategory.STYLESHEET: "SCSS File",
    FileCategory.SCRIPT: "JavaScript File",
}

# Categories offered by each command, in prompt order.
COPY_CATEGORIES: tuple[FileCategory, ...] = (FileCategory.TEMPLATE, FileCategory.STYLESHEET)
FIND_CATEGORIES: tuple[FileCategory, ...] = (
    FileCategory.STYLESHEET,
    FileCategory.TEMPLATE,
    FileCategory.SCRIPT,
)
