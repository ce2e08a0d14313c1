from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pytest
from rich.text import Text

from theme_dev_tools.catalog import StaticThemeRegistry, ThemeDescriptor
from theme_dev_tools.filesystem import LocalFilesystem

from tests.theme_dev_tools.helpers import write


class ScriptedPrompter:
    """Prompter double that replays canned answers and records output."""

    def __init__(self, answers: list | None = None):
        self.answers = list(answers or [])
        self.choices: list[tuple[str, dict[str, str]]] = []
        self.confirmations: list[str] = []
        self.lines: list[str] = []
        self.errors: list[str] = []
        self.successes: list[str] = []

    def _next(self):
        if not self.answers:
            raise AssertionError("Prompter ran out of scripted answers")
        return self.answers.pop(0)

    def title(self, message: str) -> None:
        self.lines.append(message)

    def text(self, message: str | Text = "") -> None:
        self.lines.append(message.markup if isinstance(message, Text) else message)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def choice(self, prompt: str, options: Mapping[str, str]) -> str:
        self.choices.append((prompt, dict(options)))
        answer = self._next()
        assert answer in options, f"{answer!r} not offered for {prompt!r}: {options}"
        return answer

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.confirmations.append(prompt)
        return self._next()

    def ask(self, prompt: str) -> str:
        return self._next()


@pytest.fixture()
def prompter_factory() -> Callable[..., ScriptedPrompter]:
    return lambda *answers: ScriptedPrompter(list(answers))


@pytest.fixture()
def fs() -> LocalFilesystem:
    return LocalFilesystem()


@pytest.fixture()
def shop(tmp_path: Path) -> Path:
    """A shop installation with two plugin themes, A and B."""
    root = tmp_path / "shop"
    for name in ("A", "B"):
        write(root / "custom" / "plugins" / name / "src" / "Resources" / "theme.json", "{}")
    resources_a = root / "custom" / "plugins" / "A" / "src" / "Resources"
    write(resources_a / "views" / "storefront" / "page" / "index.html.twig", "{% block page %}{% endblock %}\n")
    write(resources_a / "views" / "storefront" / "base.html.twig", "<html></html>\n")
    write(resources_a / "views" / "storefront" / "notes.txt", "not a template\n")
    write(resources_a / "app" / "storefront" / "src" / "scss" / "base.scss", "$primary: #000;\n")
    lines = [f"const line{n} = {n};" for n in range(1, 12)] + ["// TODO fix this"]
    write(resources_a / "app" / "storefront" / "src" / "main.js", "\n".join(lines) + "\n")
    return root


@pytest.fixture()
def themes(shop: Path) -> list[ThemeDescriptor]:
    plugins = shop / "custom" / "plugins"
    return [
        ThemeDescriptor("A", (plugins / "A" / "src" / "Resources").resolve()),
        ThemeDescriptor("B", (plugins / "B" / "src" / "Resources").resolve()),
    ]


@pytest.fixture()
def registry(themes: list[ThemeDescriptor]) -> StaticThemeRegistry:
    return StaticThemeRegistry(themes)
