"""nextkit scaffolder -- idempotent base structure for Next.js projects.

Takes a detected ``ProjectSetup`` and materializes the feature directories and
starter files for its routing convention without touching anything that
already exists.

Quick usage::

    from nextkit.detector import detect
    from nextkit.fs import LocalFileSystem
    from nextkit.scaffolder import scaffold

    fs = LocalFileSystem("/path/to/next-app")
    setup = detect(fs)
    actions = scaffold(setup, setup.source_root, fs)
"""

from nextkit.scaffolder.generator import (
    ScaffoldAction,
    ScaffoldPlan,
    apply_plan,
    build_plan,
    ensure_directory,
    materialize,
    report_actions,
    scaffold,
    sync_file,
    write_if_absent,
)
from nextkit.scaffolder.templates import TemplateRenderer

__all__ = [
    "ScaffoldAction",
    "ScaffoldPlan",
    "TemplateRenderer",
    "apply_plan",
    "build_plan",
    "ensure_directory",
    "materialize",
    "report_actions",
    "scaffold",
    "sync_file",
    "write_if_absent",
]
