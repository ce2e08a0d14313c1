"""Reusable UI helpers for theme dev tools CLI interactions."""

from __future__ import annotations

import os
import sys
from typing import Dict, Mapping, Optional

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from theme_dev_tools.console import CANCEL_KEY

_CI_ENV_VARS = [
    "CI",
    "GITHUB_ACTIONS",
    "JENKINS_HOME",
    "GITLAB_CI",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
]

PLAIN_PROMPTS_ENV_VAR = "THEME_DEV_TOOLS_PLAIN_PROMPTS"
_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def is_interactive() -> bool:
    """Return True when stdin is a terminal and no CI variable is set."""
    if not sys.stdin.isatty():
        return False
    for var in _CI_ENV_VARS:
        if os.getenv(var):
            return False
    return True


def use_arrow_prompts() -> bool:
    """Return True when the arrow-key selection panel should be used."""
    if os.getenv(PLAIN_PROMPTS_ENV_VAR, "").strip().lower() in _TRUTHY_VALUES:
        return False
    return is_interactive()


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    cancel_key: str | None = CANCEL_KEY,
    console: Console | None = None,
) -> str:
    """
    Interactive selection using arrow keys with Rich Live display.

    Escape and Ctrl-C answer with ``cancel_key`` when it is one of the
    options; otherwise they abort the command.
    """
    console = console or Console()
    option_keys = list(options.keys())
    selected_index = 0
    selected_key = None

    def create_selection_panel():
        """Create the selection panel with current selection highlighted."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            pointer = "▶" if i == selected_index else " "
            table.add_row(pointer, f"[cyan]{key}[/cyan] {options[key]}")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    def cancelled() -> str:
        if cancel_key in options:
            return cancel_key
        console.print("\n[yellow]Selection cancelled[/yellow]")
        raise typer.Exit(1)

    console.print()

    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                return cancelled()
            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == "enter":
                selected_key = option_keys[selected_index]
                break
            elif key == "escape":
                return cancelled()
            elif key in options:
                selected_key = key
                break

            live.update(create_selection_panel(), refresh=True)

    return selected_key


class ConsoleIO:
    """Rich-backed prompts and output for the interactive commands."""

    def __init__(self, console: Optional[Console] = None, arrows: Optional[bool] = None):
        self.console = console or Console()
        self.arrows = use_arrow_prompts() if arrows is None else arrows

    def title(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[bold]{message}[/bold]")
        self.console.print(Rule(style="cyan"))
        self.console.print()

    def text(self, message: str | Text = "") -> None:
        if isinstance(message, Text):
            self.console.print(Text.assemble(" ", message))
        else:
            self.console.print(f" {message}" if message else "")

    def success(self, message: str) -> None:
        self.console.print(f"\n[bold green]Done:[/bold green] {message}\n")

    def error(self, message: str) -> None:
        self.console.print(f"\n[red]Error:[/red] {message}\n")

    def choice(self, prompt: str, options: Mapping[str, str]) -> str:
        options = dict(options)
        if self.arrows:
            choice = select_with_arrows(options, prompt, console=self.console)
            self.console.print(f"[green]{prompt}:[/green] {options[choice]}")
            return choice

        self.console.print(f"\n[green]{prompt}:[/green]")
        for key, label in options.items():
            self.console.print(f"  [[yellow]{key}[/yellow]] {label}")
        while True:
            answer = str(typer.prompt(">", prompt_suffix=" ")).strip()
            if answer in options:
                return answer
            self.console.print(f"[red]Value \"{answer}\" is invalid[/red]")

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return typer.confirm(prompt, default=default)

    def ask(self, prompt: str) -> str:
        return str(typer.prompt(prompt))


__all__ = [
    "ConsoleIO",
    "PLAIN_PROMPTS_ENV_VAR",
    "get_key",
    "is_interactive",
    "select_with_arrows",
    "use_arrow_prompts",
]
