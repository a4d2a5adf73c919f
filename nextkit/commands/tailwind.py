"""``nextkit add-tailwind`` -- Tailwind CSS configuration."""

from __future__ import annotations

from nextkit.detector import ProjectSetup, detect, require_manifest
from nextkit.fs import join
from nextkit.scaffolder import ScaffoldAction, report_actions, sync_file, write_if_absent
from nextkit.utils import print_info, print_success

from .context import CommandContext

TAILWIND_DEPENDENCIES = ["tailwindcss", "postcss", "autoprefixer"]
TAILWIND_CONFIG = "tailwind.config.ts"
POSTCSS_CONFIG = "postcss.config.js"
SOURCE_EXTENSIONS = "{js,ts,jsx,tsx,mdx}"
TAILWIND_DIRECTIVES = ("@tailwind base;", "@tailwind components;", "@tailwind utilities;")


def content_globs(setup: ProjectSetup) -> list[str]:
    """Globs Tailwind scans for class names."""
    prefix = f"./{setup.source_root}/" if setup.source_root else "./"
    router_dir = setup.routing_convention.marker_dir
    return [
        f"{prefix}{router_dir}/**/*.{SOURCE_EXTENSIONS}",
        f"{prefix}components/**/*.{SOURCE_EXTENSIONS}",
    ]


def stylesheet_path(setup: ProjectSetup) -> str:
    if setup.is_app_router:
        return join(setup.source_root, "app", "globals.css")
    return join(setup.source_root, "styles", "globals.css")


def ensure_directives(ctx: CommandContext, path: str) -> ScaffoldAction:
    """Make sure *path* starts with the Tailwind directives, adding them once."""
    directives = ctx.renderer.render("tailwind/directives.css")
    if not ctx.fs.exists(path):
        return write_if_absent(ctx.fs, path, directives)

    current = ctx.fs.read_text(path)
    present = {line.strip() for line in current.splitlines()}
    if all(directive in present for directive in TAILWIND_DIRECTIVES):
        return ScaffoldAction(kind="skipped", target="file", path=path)

    # Drop partial directives so the full block appears exactly once.
    kept = [line for line in current.splitlines(keepends=True) if line.strip() not in TAILWIND_DIRECTIVES]
    return sync_file(ctx.fs, path, directives + "\n" + "".join(kept))


def run_add_tailwind(ctx: CommandContext) -> list[ScaffoldAction]:
    """Write the Tailwind/PostCSS configs, wire the stylesheet, install deps.

    Raises:
        ConfigurationError: no ``package.json`` or no routing convention.
    """
    print_info("Adding Tailwind CSS to your project...")
    require_manifest(ctx.fs)
    setup = detect(ctx.fs)

    tailwind_config = ctx.renderer.render("tailwind/tailwind.config.ts", {"content_globs": content_globs(setup)})
    postcss_config = ctx.renderer.render("tailwind/postcss.config.js")
    stylesheet = stylesheet_path(setup)

    actions = [
        sync_file(ctx.fs, TAILWIND_CONFIG, tailwind_config),
        sync_file(ctx.fs, POSTCSS_CONFIG, postcss_config),
        ensure_directives(ctx, stylesheet),
    ]
    report_actions(actions)

    if not setup.is_app_router:
        print_info('Import the stylesheet in _app.tsx: import "../styles/globals.css";')
    print_success("Tailwind CSS configured.")

    ctx.install(TAILWIND_DEPENDENCIES, "Tailwind CSS", dev=True)
    return actions
