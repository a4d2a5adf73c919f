"""``nextkit add-component`` -- React component with stylesheet and test."""

from __future__ import annotations

from nextkit.detector import SOURCE_DIR, has_source_dir
from nextkit.errors import InputError
from nextkit.fs import join, project_relative
from nextkit.scaffolder import ScaffoldAction, ensure_directory, materialize, report_actions
from nextkit.utils import pascal_case, print_info

from .context import CommandContext

DEFAULT_COMPONENT_DIR = "components"


def component_name(raw: str) -> str:
    """PascalCase *raw*; raises ``InputError`` when nothing usable is left."""
    name = pascal_case(raw or "")
    if not name or not name[0].isalpha():
        raise InputError(f"Invalid component name: {raw!r}")
    return name


def run_add_component(
    ctx: CommandContext,
    name: str,
    directory: str | None = None,
    with_tests: bool = False,
) -> list[ScaffoldAction]:
    """Create ``<base>/<directory>/<Name>/`` with source, styles and test.

    *directory* is relative to the base folder (``src/`` when present) and
    may not leave the project.
    Existing files are never overwritten.
    """
    component = component_name(name)
    subdir = project_relative(directory, "Component directory") if directory else DEFAULT_COMPONENT_DIR
    base = SOURCE_DIR if has_source_dir(ctx.fs) else ""
    folder = join(base, subdir, component)
    context = {"name": component}

    files = [
        (f"{component}.tsx", "component/component.tsx"),
        (f"{component}.module.css", "component/styles.module.css"),
    ]
    if with_tests:
        files.append((f"{component}.test.tsx", "component/component.test.tsx"))

    actions = [ensure_directory(ctx.fs, folder)]
    for filename, template_id in files:
        actions.append(
            materialize(ctx.fs, ctx.renderer, join(folder, filename), template_id, context, advisory=False)
        )

    report_actions(actions)
    if with_tests:
        print_info("Component tests expect Jest with @testing-library/react and jest-dom configured.")
    print_info(f"Component '{component}' is ready in {folder}")
    return actions
