"""Operator-facing console output (rich)."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

PROG = "ytmp3-setup"


class Reporter:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def info(self, message: str) -> None:
        self.console.print(f"[yellow]{PROG}[/yellow]: {escape(message)}", soft_wrap=True)

    def error(self, message: str) -> None:
        self.console.print(
            f"[yellow]{PROG}[/yellow]: [bright_red]\\[ERR][/bright_red] {escape(message)}",
            soft_wrap=True,
        )

    def tip(self, message: str) -> None:
        self.console.print(f"[magenta]\\[Tip][/magenta] {escape(message)}", soft_wrap=True)

    def command(self, command: Sequence[str]) -> None:
        """Echo a command line instead of running it."""
        self.console.print(f"> {escape(' '.join(command))}", soft_wrap=True)

    def ask(self, question: str, choices: str = "Y/n") -> str:
        """Print *question* and read one line from stdin.

        End of input reads as an empty answer.
        """
        prompt = f"[magenta]\\[?][/magenta] {escape(question)} [bold]\\[{choices}][/bold]: "
        try:
            return self.console.input(prompt)
        except EOFError:
            return ""
