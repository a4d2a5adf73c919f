"""``nextkit add`` -- base boilerplate structure."""

from __future__ import annotations

from nextkit.detector import SOURCE_DIR, ProjectSetup, detect, require_manifest
from nextkit.scaffolder import ScaffoldAction, report_actions, scaffold
from nextkit.utils import print_info, print_success

from .context import CommandContext

BASE_DEPENDENCIES = ["axios"]


def resolve_base_folder(ctx: CommandContext, detected: ProjectSetup) -> str:
    """Ask whether the project uses (or should get) a ``src/`` folder."""
    uses_src = ctx.prompter.ask_confirm(
        "Does your project use a src/ folder?",
        default=detected.uses_source_dir,
    )
    if uses_src:
        return SOURCE_DIR
    create_src = ctx.prompter.ask_confirm("Do you want to create a src/ folder?", default=False)
    return SOURCE_DIR if create_src else ""


def run_add(ctx: CommandContext) -> list[ScaffoldAction]:
    """Detect the project, scaffold the base structure and install axios.

    Raises:
        ConfigurationError: no ``package.json`` or no routing convention.
    """
    print_info("Enhancing your Next.js project with boilerplate...")
    require_manifest(ctx.fs)
    detected = detect(ctx.fs)
    print_info(
        f"Detected router type: {detected.routing_convention.value}. "
        "Proceeding with the detected setup."
    )

    base_folder = resolve_base_folder(ctx, detected)
    setup = ProjectSetup(
        routing_convention=detected.routing_convention,
        uses_source_dir=bool(base_folder),
    )

    actions = scaffold(setup, base_folder, ctx.fs, ctx.renderer)
    report_actions(actions)
    print_success("Project enhanced successfully!")
    print_info(
        "Note: You can modify the structure according to your needs; "
        "this is just a starting point."
    )

    ctx.install(BASE_DEPENDENCIES, "Axios")
    return actions
