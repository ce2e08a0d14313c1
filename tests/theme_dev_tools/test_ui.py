"""Tests for the arrow-key selection panel and interactivity detection."""

from __future__ import annotations

import io
from types import SimpleNamespace

import pytest
import typer
from rich.console import Console

from theme_dev_tools.cli import ui
from theme_dev_tools.cli.ui import ConsoleIO, select_with_arrows, use_arrow_prompts


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


def _keys(monkeypatch, *keys: str) -> None:
    pending = list(keys)
    monkeypatch.setattr(ui, "get_key", lambda: pending.pop(0))


def test_enter_selects_highlighted_option(monkeypatch) -> None:
    _keys(monkeypatch, "down", "down", "up", "enter")
    options = {"0": "A", "1": "B", "q": "cancel"}
    assert select_with_arrows(options, console=_console()) == "1"


def test_typed_key_selects_directly(monkeypatch) -> None:
    _keys(monkeypatch, "b")
    options = {"0": "/page", "b": "<-- back", "q": "cancel"}
    assert select_with_arrows(options, console=_console()) == "b"


def test_escape_answers_cancel(monkeypatch) -> None:
    _keys(monkeypatch, "escape")
    assert select_with_arrows({"0": "A", "q": "cancel"}, console=_console()) == "q"


def test_escape_without_cancel_option_aborts(monkeypatch) -> None:
    _keys(monkeypatch, "escape")
    with pytest.raises(typer.Exit):
        select_with_arrows({"0": "A"}, console=_console())


def test_ctrl_c_answers_cancel(monkeypatch) -> None:
    def interrupted() -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(ui, "get_key", interrupted)
    assert select_with_arrows({"0": "A", "q": "cancel"}, console=_console()) == "q"


def test_console_io_uses_arrow_panel(monkeypatch) -> None:
    _keys(monkeypatch, "down", "enter")
    prompter = ConsoleIO(console=_console(), arrows=True)
    assert prompter.choice("Pick", {"0": "A", "1": "B"}) == "1"


def test_plain_prompts_env_var_disables_arrows(monkeypatch) -> None:
    monkeypatch.setattr(ui, "is_interactive", lambda: True)
    monkeypatch.setenv(ui.PLAIN_PROMPTS_ENV_VAR, "yes")
    assert use_arrow_prompts() is False
    monkeypatch.delenv(ui.PLAIN_PROMPTS_ENV_VAR)
    assert use_arrow_prompts() is True


def test_ci_environment_is_not_interactive(monkeypatch) -> None:
    monkeypatch.setattr(ui, "sys", SimpleNamespace(stdin=SimpleNamespace(isatty=lambda: True)))
    monkeypatch.setenv("CI", "true")
    assert ui.is_interactive() is False
