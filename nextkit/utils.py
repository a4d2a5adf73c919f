"""Shared utility functions for nextkit.

Provides the Rich console and status-line helpers used by every command,
logging setup for ``--verbose`` runs, and the small string helpers that turn
user-typed names into file and identifier names.
"""

from __future__ import annotations

import logging
import re

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()

# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

ACTION_STYLES: dict[str, str] = {
    "created": "green",
    "updated": "green",
    "skipped": "yellow",
}


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_action(kind: str, path: str, note: str = "") -> None:
    """Print one per-action status line (``Created: src/hooks`` etc.)."""
    style = ACTION_STYLES.get(kind, "white")
    suffix = f" ({note})" if note else ""
    line = escape(f"{kind.capitalize()}: {path}{suffix}")
    console.print(f"[{style}]{line}[/{style}]", highlight=False)


def print_snippet(title: str, body: str) -> None:
    """Print a code hint inside a panel."""
    console.print(Panel(Text(body), title=title, border_style="blue", expand=False))


def configure_logging(verbose: bool) -> None:
    """Route ``logging`` through Rich; DEBUG when *verbose*, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def split_names(raw: str | list[str] | None) -> list[str]:
    """Split comma-separated names, trimming blanks and dropping duplicates.

    Accepts a single string or a list of strings (as produced by argparse
    ``nargs``); every item may itself contain commas.

    Examples::

        split_names("overview, stats") -> ["overview", "stats"]
        split_names(["user,", "product"]) -> ["user", "product"]
    """
    if raw is None:
        return []
    items = [raw] if isinstance(raw, str) else raw
    names: list[str] = []
    for item in items:
        for part in item.split(","):
            name = part.strip()
            if name and name not in names:
                names.append(name)
    return names


def capitalize_first(value: str) -> str:
    """Upper-case the first character only (``userList`` -> ``UserList``)."""
    return value[:1].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``.

    Words that are already mixed-case keep their inner capitals, so
    ``userProfile`` becomes ``UserProfile``.
    """
    parts = re.split(r"[^A-Za-z0-9]+", value)
    return "".join(capitalize_first(word) for word in parts if word)


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    s1 = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", value.strip())
    slug = re.sub(r"[^A-Za-z0-9]+", "-", s1).lower()
    return slug.strip("-")
