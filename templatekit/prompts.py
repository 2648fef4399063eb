"""Blocking line-based prompts.

``Prompter`` wraps a single input callable (``console_input`` by default) so
the orchestrators can be driven by scripted answers in tests. Every answer is
stripped of surrounding whitespace.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.markup import escape

from templatekit.utils import console, print_error

InputFunc = Callable[[str], str]


def console_input(question: str) -> str:
    """Read a line from the console; *question* is shown as plain text."""
    return console.input(escape(question))


class Prompter:
    """Request/response prompt helper used by both setup commands."""

    def __init__(self, input_func: InputFunc | None = None) -> None:
        self._input = input_func or console_input

    def ask(self, question: str, default: str = "") -> str:
        """Ask *question* and return the trimmed answer, or *default* when blank."""
        answer = self._input(question).strip()
        return answer or default

    def confirm(self, question: str, default: bool = True) -> bool:
        """Yes/no question. Only an explicit opposite answer flips *default*."""
        answer = self.ask(question).lower()
        if default:
            return answer != "n"
        return answer == "y"

    def choose(
        self,
        options: Sequence[tuple[str, str]],
        question: str,
        error_message: str,
    ) -> str:
        """Loop until a valid 1-based menu index is entered.

        Args:
            options: ``(key, label)`` pairs in menu order. The menu itself
                is printed by the caller; only *question* is repeated.
            question: Prompt shown on every attempt.
            error_message: Printed after each invalid answer.

        Returns:
            The key of the chosen option.
        """
        while True:
            answer = self.ask(question)
            try:
                choice = int(answer)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(options):
                return options[choice - 1][0]
            print_error(error_message)


def print_menu(options: Sequence[tuple[str, str]], descriptions: Sequence[str] | None = None) -> None:
    """Print a numbered menu, one option per line."""
    for index, (_, label) in enumerate(options, start=1):
        console.print(f"  {index}. {label}")
        if descriptions:
            console.print(f"     {descriptions[index - 1]}\n")
