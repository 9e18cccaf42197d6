"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


class TerminalPrompter:
    """Prompts on the controlling terminal."""

    def select(self, question: str, options: list[T], labels: list[str]) -> T:
        """Show a menu of *labels* and return the option at the chosen position."""
        _console.print(f"[bold cyan]◆[/]  {question} [dim](↑/↓ to move, enter to confirm)[/]")
        _print_bar()

        raw_index = TerminalMenu(
            labels,
            menu_cursor="│  ● ",
            menu_cursor_style=("fg_cyan", "bold"),
            menu_highlight_style=("fg_cyan",),
        ).show()
        if raw_index is None:
            raise SystemExit(1)

        index = int(raw_index)

        # Collapse the open question to the chosen answer
        _clear_lines(2)
        _console.print(f"[bold green]◇[/]  {question}")
        _console.print(f"[dim]│[/]  {escape(labels[index])}")
        _print_bar()

        return options[index]

    def text(self, question: str, default: str, validate: Callable[[str], str | None]) -> str:
        """Display a clack-style text prompt, asking again while *validate* rejects."""
        _console.print(f"[bold cyan]◆[/]  {question}")
        _print_bar()

        lines = 3
        while True:
            _console.print("[dim]│[/]  ", end="")
            answer = input(f"({default}) ").strip() or default
            error = validate(answer)
            if error is None:
                break
            _console.print(f"[bold yellow]▲[/]  {escape(error)}")
            lines += 2

        # Overwrite the question, the bar and every attempt
        _clear_lines(lines)

        _console.print(f"[bold green]◇[/]  {question}")
        _console.print(f"[dim]│[/]  {escape(answer)}")
        _print_bar()

        return answer
