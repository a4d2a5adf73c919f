"""``nextkit add-env`` -- create or extend a dotenv file."""

from __future__ import annotations

import re

from nextkit.errors import InputError
from nextkit.fs import project_relative
from nextkit.scaffolder import ScaffoldAction
from nextkit.utils import print_action, print_info, print_warning

from .context import CommandContext

ENV_FILES: tuple[str, ...] = (".env", ".env.local", ".env.development", ".env.production")
CUSTOM_CHOICE = "other"
DEFAULT_ENV_FILE = ".env.local"
ENV_HEADER = "# Environment variables"

_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_assignment(raw: str) -> tuple[str, str] | None:
    """Parse ``KEY=VALUE``; returns ``None`` for anything malformed."""
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not _KEY_RE.match(key):
        return None
    return key, value.strip()


def existing_keys(content: str) -> set[str]:
    keys = set()
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("export "):
            stripped = stripped[len("export "):]
        parsed = parse_assignment(stripped)
        if parsed:
            keys.add(parsed[0])
    return keys


def choose_env_file(ctx: CommandContext, file: str | None) -> str:
    """Return the target file name, prompting when *file* is not given.

    Raises:
        InputError: the name is empty or escapes the project root.
    """
    name = file
    if not name:
        choice = ctx.prompter.ask_choice(
            "Select the environment file",
            [*ENV_FILES, CUSTOM_CHOICE],
            default=DEFAULT_ENV_FILE,
        )
        name = choice
        if choice == CUSTOM_CHOICE:
            name = ctx.prompter.ask_text("Enter the environment file name", default=".env")

    name = (name or "").strip()
    if not name:
        raise InputError("Environment file name cannot be empty!")
    return project_relative(name, "Environment file")


def collect_variables(ctx: CommandContext, variables: list[str] | None) -> list[str]:
    """Return raw ``KEY=VALUE`` entries from *variables* or from the prompter.

    Prompting stops at the first blank answer.
    """
    if variables:
        return list(variables)
    entries: list[str] = []
    while True:
        answer = ctx.prompter.ask_text("Enter a variable as KEY=VALUE (leave blank to finish)")
        if not answer.strip():
            return entries
        entries.append(answer.strip())


def run_add_env(
    ctx: CommandContext,
    file: str | None = None,
    variables: list[str] | None = None,
) -> list[ScaffoldAction]:
    """Create the env file if missing, then append the given variables.

    An existing file is only touched after the user agrees to append; on
    refusal it is left byte-for-byte unchanged.
    """
    name = choose_env_file(ctx, file)
    exists = ctx.fs.exists(name)
    if exists and not ctx.fs.is_file(name):
        raise InputError(f"Environment file path is not a file: {name}")

    if exists and not ctx.prompter.ask_confirm(f"{name} already exists. Append variables to it?", default=True):
        print_action("skipped", name, "left unchanged")
        return [ScaffoldAction(kind="skipped", target="file", path=name)]

    current = ctx.fs.read_text(name) if exists else ""
    known = existing_keys(current)

    lines: list[str] = []
    for raw in collect_variables(ctx, variables):
        parsed = parse_assignment(raw)
        if parsed is None:
            print_warning(f"Skipping invalid entry (expected KEY=VALUE): {raw}")
            continue
        key, value = parsed
        if key in known:
            print_warning(f"Skipping {key}: already defined in {name}")
            continue
        known.add(key)
        lines.append(f"{key}={value}")

    actions: list[ScaffoldAction] = []
    if not exists:
        parent = name.rpartition("/")[0]
        if parent:
            ctx.fs.make_dirs(parent)
        ctx.fs.write_text(name, ENV_HEADER + "\n")
        actions.append(ScaffoldAction(kind="created", target="file", path=name))
    if lines:
        prefix = "\n" if current and not current.endswith("\n") else ""
        ctx.fs.append_text(name, prefix + "\n".join(lines) + "\n")
        if exists:
            actions.append(ScaffoldAction(kind="updated", target="file", path=name))
    elif exists:
        actions.append(ScaffoldAction(kind="skipped", target="file", path=name))

    for action in actions:
        print_action(action.kind, action.path)
    print_info(f"Added {len(lines)} variable(s) to {name}")
    return actions
