"""Command handlers behind the ``nextkit`` CLI.

Every handler takes a ``CommandContext`` plus its own arguments and returns
the list of ``ScaffoldAction`` it performed.
"""

from nextkit.commands.add import run_add
from nextkit.commands.component import run_add_component
from nextkit.commands.context import CommandContext
from nextkit.commands.env import run_add_env
from nextkit.commands.module import run_add_module
from nextkit.commands.redux import run_add_redux
from nextkit.commands.tailwind import run_add_tailwind

__all__ = [
    "CommandContext",
    "run_add",
    "run_add_component",
    "run_add_env",
    "run_add_module",
    "run_add_redux",
    "run_add_tailwind",
]
