"""Interactive prompting capability.

Command handlers never talk to the terminal directly; they receive a
``Prompter``.  ``RichPrompter`` asks on the terminal via ``rich.prompt``,
``DefaultsPrompter`` answers every question with its default (``--yes``).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from nextkit.utils import console as default_console


class Prompter(Protocol):
    """Question/answer interface used by the command handlers."""

    def ask_confirm(self, message: str, default: bool = True) -> bool: ...

    def ask_text(self, message: str, default: str = "") -> str: ...

    def ask_choice(self, message: str, choices: Sequence[str], default: str | None = None) -> str: ...


class RichPrompter:
    """Terminal-bound ``Prompter``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def ask_text(self, message: str, default: str = "") -> str:
        answer = Prompt.ask(message, default=default, show_default=bool(default), console=self.console)
        return (answer or "").strip()

    def ask_choice(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        return Prompt.ask(
            message,
            choices=list(choices),
            default=default if default is not None else choices[0],
            console=self.console,
        )


class DefaultsPrompter:
    """Non-interactive ``Prompter`` that always returns the default answer."""

    def ask_confirm(self, message: str, default: bool = True) -> bool:
        return default

    def ask_text(self, message: str, default: str = "") -> str:
        return default

    def ask_choice(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        return default if default is not None else choices[0]
