"""Base structure scaffolding engine.

Takes a ``ProjectSetup`` and a base folder, computes the fixed directory list
and template file mappings for the routing convention (``ScaffoldPlan``) and
applies it idempotently: existing directories are left alone and existing
files are never overwritten.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from nextkit.detector import ProjectSetup, RoutingConvention
from nextkit.fs import FileSystem, join
from nextkit.utils import print_action

from .templates import TemplateRenderer

logger = logging.getLogger(__name__)

ADVISORY_TEXT = "TODO: Change this file according to your exact requirement."


# ---------------------------------------------------------------------------
# Directory and template tables
# ---------------------------------------------------------------------------

FEATURE_DIRECTORIES: tuple[str, ...] = (
    "components/ui",
    "hooks",
    "lib",
    "services",
    "styles",
    "types",
    "utils",
)

DIRECTORY_LAYOUTS: dict[RoutingConvention, tuple[str, ...]] = {
    RoutingConvention.APP_ROUTER: (*FEATURE_DIRECTORIES, "app/api"),
    RoutingConvention.PAGES_ROUTER: ("pages/api", *FEATURE_DIRECTORIES),
}

SHARED_TEMPLATES: dict[str, str] = {
    "lib/api.ts": "lib/api.ts",
    "lib/constants.ts": "lib/constants.ts",
    "middleware.ts": "middleware.ts",
}

# destination (relative to the base folder) -> template id
TEMPLATE_LAYOUTS: dict[RoutingConvention, dict[str, str]] = {
    RoutingConvention.APP_ROUTER: {
        **SHARED_TEMPLATES,
        "app/layout.tsx": "app/layout.tsx",
        "app/error.tsx": "app/error.tsx",
        "app/page.tsx": "app/page.tsx",
    },
    RoutingConvention.PAGES_ROUTER: {
        **SHARED_TEMPLATES,
        "pages/_app.tsx": "pages/_app.tsx",
        "pages/_error.tsx": "pages/_error.tsx",
        "pages/index.tsx": "pages/index.tsx",
    },
}


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ScaffoldAction(BaseModel):
    """One filesystem outcome reported back to the user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["created", "skipped", "updated"]
    target: Literal["directory", "file"]
    path: str

    @property
    def changed(self) -> bool:
        return self.kind != "skipped"


class ScaffoldPlan(BaseModel):
    """Directories and template files to materialize, in application order."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = Field(default_factory=tuple)
    file_mappings: dict[str, str] = Field(
        default_factory=dict,
        description="Destination path (relative to the project root) -> template id",
    )


# ---------------------------------------------------------------------------
# Plan construction
# ---------------------------------------------------------------------------


def build_plan(setup: ProjectSetup, base_dir: str | None = None) -> ScaffoldPlan:
    """Compute the base ``ScaffoldPlan`` for *setup*.

    Args:
        setup: Detected (or user-confirmed) project setup.
        base_dir: Folder the structure goes into (``"src"`` or ``""``).
            Defaults to ``setup.source_root``.
    """
    base = setup.source_root if base_dir is None else base_dir
    convention = setup.routing_convention
    directories = tuple(join(base, d) for d in DIRECTORY_LAYOUTS[convention])
    file_mappings = {
        join(base, destination): template_id
        for destination, template_id in TEMPLATE_LAYOUTS[convention].items()
    }
    return ScaffoldPlan(directories=directories, file_mappings=file_mappings)


# ---------------------------------------------------------------------------
# Idempotent primitives
# ---------------------------------------------------------------------------


def advisory_comment(path: str) -> str:
    """Return the leading advisory comment in the comment syntax of *path*."""
    if path.endswith(".css"):
        return f"/* {ADVISORY_TEXT} */\n\n"
    return f"// {ADVISORY_TEXT}\n\n"


def ensure_directory(fs: FileSystem, path: str) -> ScaffoldAction:
    """Create *path* unless it already exists."""
    if fs.is_dir(path):
        logger.debug("directory exists, skipping: %s", path)
        return ScaffoldAction(kind="skipped", target="directory", path=path)
    fs.make_dirs(path)
    return ScaffoldAction(kind="created", target="directory", path=path)


def write_if_absent(fs: FileSystem, path: str, content: str) -> ScaffoldAction:
    """Write *content* to *path* only when nothing exists there yet."""
    if fs.exists(path):
        logger.debug("file exists, skipping: %s", path)
        return ScaffoldAction(kind="skipped", target="file", path=path)
    parent = path.rpartition("/")[0]
    if parent and not fs.is_dir(parent):
        fs.make_dirs(parent)
    fs.write_text(path, content)
    return ScaffoldAction(kind="created", target="file", path=path)


def sync_file(fs: FileSystem, path: str, content: str) -> ScaffoldAction:
    """Make *path* hold exactly *content*.

    Used for files nextkit owns outright (the store aggregator, Tailwind
    config).  Reports ``skipped`` when the file is already up to date.
    """
    if not fs.exists(path):
        return write_if_absent(fs, path, content)
    if fs.read_text(path) == content:
        logger.debug("file up to date: %s", path)
        return ScaffoldAction(kind="skipped", target="file", path=path)
    fs.write_text(path, content)
    return ScaffoldAction(kind="updated", target="file", path=path)


def materialize(
    fs: FileSystem,
    renderer: TemplateRenderer,
    path: str,
    template_id: str,
    context: dict[str, Any] | None = None,
    *,
    advisory: bool = True,
) -> ScaffoldAction:
    """Render *template_id* into *path* unless the destination already exists.

    The template is only read and rendered when the file is actually written.
    """
    if fs.exists(path):
        logger.debug("file exists, skipping: %s", path)
        return ScaffoldAction(kind="skipped", target="file", path=path)
    content = renderer.render(template_id, context)
    if advisory:
        content = advisory_comment(path) + content
    return write_if_absent(fs, path, content)


def apply_plan(
    plan: ScaffoldPlan,
    fs: FileSystem,
    renderer: TemplateRenderer,
    context: dict[str, Any] | None = None,
) -> list[ScaffoldAction]:
    """Create every planned directory, then every planned file, in order."""
    actions = [ensure_directory(fs, directory) for directory in plan.directories]
    for destination, template_id in plan.file_mappings.items():
        actions.append(materialize(fs, renderer, destination, template_id, context))
    return actions


def scaffold(
    setup: ProjectSetup,
    base_dir: str | None,
    fs: FileSystem,
    renderer: TemplateRenderer | None = None,
) -> list[ScaffoldAction]:
    """Build and apply the base plan for *setup*; returns the actions taken.

    I/O errors are not caught: the first failing path aborts the run and
    whatever was already created stays in place.
    """
    plan = build_plan(setup, base_dir)
    context = {
        "routing_convention": setup.routing_convention.value,
        "is_app_router": setup.is_app_router,
    }
    return apply_plan(plan, fs, renderer or TemplateRenderer(), context)


def report_actions(actions: Iterable[ScaffoldAction]) -> None:
    """Print one status line per action."""
    for action in actions:
        note = "already exists" if action.kind == "skipped" else ""
        print_action(action.kind, action.path, note)
