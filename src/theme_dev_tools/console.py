"""Contract between the interactive flows and the terminal layer."""

from __future__ import annotations

from typing import Mapping, Protocol

from rich.text import Text

BACK_KEY = "b"
CANCEL_KEY = "q"
BACK_LABEL = "<-- back"
CANCEL_LABEL = "cancel"


class Prompter(Protocol):
    """Terminal services consumed by the copy and find flows.

    Labels and messages may carry rich markup.
    """

    def title(self, message: str) -> None: ...

    def text(self, message: str | Text = "") -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def choice(self, prompt: str, options: Mapping[str, str]) -> str: ...

    def confirm(self, prompt: str, default: bool = False) -> bool: ...

    def ask(self, prompt: str) -> str: ...


def with_cancel(options: Mapping[str, str]) -> dict[str, str]:
    """Return ``options`` followed by the reserved cancel option."""
    result = dict(options)
    result[CANCEL_KEY] = CANCEL_LABEL
    return result


def indexed(labels: list[str]) -> dict[str, str]:
    """Key labels by their position, as ``{"0": ..., "1": ...}``."""
    return {str(index): label for index, label in enumerate(labels)}
